"""
Unit tests for the backend-facing service functions.

Each service receives a mocked ApiClient; HitPay calls receive a mocked
requests session.
"""

import json
from unittest.mock import Mock

import pytest
import requests
from django.test import override_settings

from apps.services import bookings, events, transactions
from apps.services.payments import PaymentError, create_payment_request
from apps.utils import api
from apps.utils.api import ApiError
from tests.conftest import mock_response


@pytest.fixture
def client():
    return Mock()


class TestEvents:

    def test_filtered_events_only_sends_chosen_params(self, client):
        client.get.return_value = []

        events.get_filtered_events(period="last_7_days", host_id="host-1", client=client)

        client.get.assert_called_once_with(
            api.EVENTS_FILTERED, params={"filter": "last_7_days", "host_id": "host-1"}
        )

    def test_event_by_slug_missing_is_none(self, client):
        client.get.side_effect = ApiError(404, "Not Found")
        assert events.get_event_by_slug("no-such-event", client=client) is None

    def test_event_by_slug_network_failure_is_none(self, client):
        client.get.side_effect = requests.ConnectionError("down")
        assert events.get_event_by_slug("summer-fest", client=client) is None

    def test_event_by_slug_does_not_hide_programming_errors(self, client):
        client.get.side_effect = TypeError("bad call")
        with pytest.raises(TypeError):
            events.get_event_by_slug("summer-fest", client=client)

    def test_related_events_share_category_or_tag(self, client):
        current = {"id": 1, "category": "music", "tags": ["outdoor"]}
        client.get.return_value = [
            current,
            {"id": 2, "category": "music", "tags": []},
            {"id": 3, "category": "tech", "tags": ["outdoor", "night"]},
            {"id": 4, "category": "tech", "tags": ["indoor"]},
            {"id": 5, "category": "music"},
            {"id": 6, "category": "music"},
            {"id": 7, "category": "music"},
        ]

        related = events.get_related_events(current, client=client)

        assert [e["id"] for e in related] == [2, 3, 5, 6]

    def test_publishing_a_draft_moves_it_to_upcoming(self, client):
        events.set_published({"id": 8, "status": "Draft"}, True, client=client)

        client.put.assert_called_once_with(
            api.EVENT_BY_ID, body={"isPublished": True, "status": "Upcoming"}, event_id=8
        )

    def test_unpublishing_keeps_status(self, client):
        events.set_published({"id": 8, "status": "Upcoming"}, False, client=client)

        client.put.assert_called_once_with(api.EVENT_BY_ID, body={"isPublished": False}, event_id=8)

    def test_create_with_images_sends_event_as_json_field(self, client):
        cover = Mock()
        cover.name = "cover.png"
        cover.read.return_value = b"png"
        cover.content_type = "image/png"

        events.create_event_with_images({"title": "Gala", "images": {}}, {"cover": cover}, client=client)

        kwargs = client.upload.call_args.kwargs
        assert json.loads(kwargs["data"]["data"]) == {"title": "Gala"}
        assert kwargs["files"] == {"cover": ("cover.png", b"png", "image/png")}

    def test_summarize_events(self):
        summary = events.summarize_events([
            {"status": "Ongoing"}, {"status": "Upcoming"}, {"status": "Upcoming"}, {"status": "Draft"},
        ])
        assert summary == {"total": 4, "ongoing": 1, "upcoming": 2}


class TestBookings:

    def test_from_api_fills_defaults(self):
        booking = bookings.Booking.from_api({"id": 12, "user_name": "Ann", "email": "ann@example.com"})

        assert booking.id == "12"
        assert booking.sno == "EVENT-12"
        assert booking.event_name == "Unknown Event"
        assert booking.event_date == "N/A"
        assert booking.is_activated is False

    def test_from_api_takes_event_details_from_event(self):
        booking = bookings.Booking.from_api(
            {"id": 3, "sno": "EVENT-3"},
            event={"id": 40, "title": "Gala", "date": "2025-06-05T19:30:00Z"},
        )

        assert booking.event_id == "40"
        assert booking.event_name == "Gala"
        assert booking.event_date == "June 5, 2025"
        assert booking.event_time == "7:30 PM"

    def test_add_booking_posts_registration(self, client):
        client.post.return_value = {"id": 9, "sno": "EVENT-9", "user_name": "Ann"}
        registration = {"user_name": "Ann", "email": "ann@example.com", "member_count": 2, "total_amount": 0}

        booking = bookings.add_booking(registration, {"id": 40, "title": "Gala"}, client=client)

        assert booking.sno == "EVENT-9"
        args, kwargs = client.post.call_args
        assert args == (api.EVENT_REGISTER,)
        assert kwargs["event_id"] == 40
        assert kwargs["body"]["member_count"] == 2
        assert kwargs["body"]["additional_members"] == []

    def test_bookings_by_package(self, client):
        client.get.return_value = [
            {"id": 1, "selected_package": {"id": 10}},
            {"id": 2, "selected_package": {"id": "11"}},
            {"id": 3},
        ]

        matched = bookings.get_bookings_by_package(40, "10", client=client)

        assert [b.id for b in matched] == ["1"]

    def test_scan_unwraps_booking(self, client):
        client.post.return_value = {"message": "ok", "booking": {"id": 5, "sno": "EVENT-5", "is_activated": True}}

        booking = bookings.scan_booking("EVENT-5", client=client)

        assert booking.is_activated is True
        client.post.assert_called_once_with(api.BOOKING_SCAN, body={}, sno="EVENT-5")


class TestTransactions:

    def test_list_response_is_normalised(self, client):
        client.get.return_value = [{"id": 1}, {"id": 2}]

        page = transactions.get_hitpay_transactions(host_id="host-1", page=2, client=client)

        assert page == {"results": [{"id": 1}, {"id": 2}], "count": 2}
        client.get.assert_called_once_with(
            api.HITPAY_TRANSACTIONS, params={"page": 2, "per_page": 10, "host_id": "host-1"}
        )

    def test_envelope_response_keeps_count(self, client):
        client.get.return_value = {"results": [{"id": 1}], "count": 31}

        assert transactions.get_hitpay_transactions(client=client) == {"results": [{"id": 1}], "count": 31}

    def test_filter_transactions(self):
        rows = [
            {"status": "completed", "payment_type": "card", "name": "Ann", "email": "ann@example.com"},
            {"status": "pending", "payment_type": "paynow", "name": "Bob", "email": "bob@example.com"},
            {"status": "completed", "payment_type": "paynow", "name": "Cy", "reference_number": "40-cy"},
        ]

        assert len(transactions.filter_transactions(rows, status="completed")) == 2
        assert len(transactions.filter_transactions(rows, payment_type="paynow")) == 2
        assert transactions.filter_transactions(rows, search="40-CY") == [rows[2]]
        assert transactions.filter_transactions(rows) == rows


class TestPayments:

    def test_successful_request_returns_provider_json(self):
        session = Mock()
        session.post.return_value = mock_response({"id": "pr-1", "url": "https://pay.test/pr-1"})

        payment = create_payment_request({"amount": "10.00"}, session=session)

        assert payment["url"] == "https://pay.test/pr-1"
        headers = session.post.call_args.kwargs["headers"]
        assert headers["X-BUSINESS-API-KEY"]

    def test_provider_rejection_carries_message(self):
        session = Mock()
        session.post.return_value = mock_response({"message": "Amount invalid"}, status_code=422, reason="Unprocessable")

        with pytest.raises(PaymentError) as excinfo:
            create_payment_request({"amount": "-1"}, session=session)

        assert str(excinfo.value) == "Amount invalid"
        assert excinfo.value.status_code == 400

    def test_network_failure_is_server_error(self):
        session = Mock()
        session.post.side_effect = requests.Timeout("slow")

        with pytest.raises(PaymentError) as excinfo:
            create_payment_request({"amount": "10.00"}, session=session)

        assert excinfo.value.status_code == 500

    def test_missing_key_is_reported(self, settings_without_hitpay_key):
        with pytest.raises(PaymentError, match="not configured"):
            create_payment_request({"amount": "10.00"}, session=Mock())


@pytest.fixture
def settings_without_hitpay_key():
    with override_settings(HITPAY_API_KEY=None):
        yield
