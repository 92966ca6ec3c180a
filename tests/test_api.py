"""
Unit tests for the backend API client.
"""

import json

import pytest
from django.test import override_settings

from apps.utils import api
from apps.utils.api import ApiError, handle_api_response, resolve_media_url
from tests.conftest import mock_response


class TestApiClient:

    def test_get_sends_json_headers_and_query(self, api_client, http_session):
        http_session.request.return_value = mock_response([{"id": 1}])

        result = api_client.get(api.EVENTS_FILTERED, params={"filter": "today"})

        assert result == [{"id": 1}]
        method, url = http_session.request.call_args.args
        options = http_session.request.call_args.kwargs
        assert method == "GET"
        assert url == "https://backend.test/api/events/filtered"
        assert options["headers"]["Accept"] == "application/json"
        assert options["headers"]["Content-Type"] == "application/json"
        assert options["params"] == {"filter": "today"}
        assert "data" not in options

    def test_post_serializes_body(self, api_client, http_session):
        http_session.request.return_value = mock_response({"id": 5})

        api_client.post(api.EVENT_REGISTER, body={"user_name": "Ann"}, event_id=7)

        method, url = http_session.request.call_args.args
        assert method == "POST"
        assert url == "https://backend.test/api/events/7/register"
        assert json.loads(http_session.request.call_args.kwargs["data"]) == {"user_name": "Ann"}

    def test_non_success_raises_api_error(self, api_client, http_session):
        http_session.request.return_value = mock_response(
            {"detail": "nope"}, status_code=404, reason="Not Found", text='{"detail": "nope"}'
        )

        with pytest.raises(ApiError) as excinfo:
            api_client.get(api.EVENT_BY_ID, event_id=99)

        assert excinfo.value.status_code == 404
        assert excinfo.value.reason == "Not Found"
        assert "404" in str(excinfo.value)

    def test_empty_body_yields_none(self, api_client, http_session):
        http_session.request.return_value = mock_response(None, status_code=204, reason="No Content")

        assert api_client.delete(api.HOST_BY_ID, host_id="h-1") is None

    def test_upload_posts_multipart(self, api_client, http_session):
        http_session.post.return_value = mock_response({"id": 3})

        result = api_client.upload(api.EVENTS, data={"data": "{}"}, files={"cover": ("c.png", b"x", "image/png")})

        assert result == {"id": 3}
        kwargs = http_session.post.call_args.kwargs
        assert kwargs["files"]["cover"][0] == "c.png"
        # requests must set the multipart boundary itself
        assert "Content-Type" not in kwargs["headers"]


def test_handle_api_response_decodes_json():
    response = mock_response({"ok": True})
    assert handle_api_response(response) == {"ok": True}


def test_handle_api_response_server_error():
    response = mock_response(None, status_code=500, reason="Server Error", text="boom")
    with pytest.raises(ApiError) as excinfo:
        handle_api_response(response)
    assert excinfo.value.body == "boom"


def test_get_api_client_is_shared_and_resettable():
    api.reset_api_client()
    first = api.get_api_client()
    assert api.get_api_client() is first

    api.reset_api_client()
    assert api.get_api_client() is not first
    api.reset_api_client()


@pytest.mark.parametrize(
    "path,expected",
    [
        ("qr/EVENT-1.png", "https://backend.test/media/qr/EVENT-1.png"),
        ("/media/qr/EVENT-1.png", "https://backend.test/media/qr/EVENT-1.png"),
        ("https://cdn.test/a.png", "https://cdn.test/a.png"),
        ("", ""),
        (None, None),
    ],
)
def test_resolve_media_url(path, expected):
    with override_settings(API_BASE_URL="https://backend.test/"):
        assert resolve_media_url(path) == expected


def test_client_can_be_built_with_default_session():
    client = api.ApiClient("https://backend.test", timeout=5)
    assert client.session is not None
    assert client.url(api.BOOKING_SCAN, sno="EVENT-4") == "https://backend.test/api/bookings/sno/EVENT-4/scan"
