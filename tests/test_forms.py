import datetime

from django.http import QueryDict

from apps.events_page.forms import event_data_from_post
from apps.utils.formatting import display_name_from_email, format_to_12hr, format_to_readable_date


def _post(**fields):
    post = QueryDict(mutable=True)
    for key, value in fields.items():
        if isinstance(value, list):
            post.setlist(key, value)
        else:
            post[key] = value
    return post


def test_event_form_builds_payload():
    data, errors = event_data_from_post(_post(
        title=" Gala ",
        date="2025-06-05",
        location="Hall A",
        tags="music, night ,",
        amenities=["1", "3"],
        packages='[{"id": 1, "title": "VIP", "price": 50}]',
        isPublished="on",
    ))

    assert errors == []
    assert data["title"] == "Gala"
    assert data["tags"] == ["music", "night"]
    assert data["amenities"] == ["1", "3"]
    assert data["packages"][0]["title"] == "VIP"
    assert data["isPublished"] is True
    assert data["status"] == "Draft"


def test_event_form_reports_missing_fields_and_bad_packages():
    data, errors = event_data_from_post(_post(title="Gala", packages='{"id": 1}', status="Cancelled"))

    assert "Event title, date, and location are required." in errors
    assert "Packages must be a JSON list." in errors
    assert "Unknown event status: Cancelled" in errors
    assert data["packages"] == []


def test_readable_date():
    assert format_to_readable_date("2025-06-05T10:00:00Z") == "June 5, 2025"
    assert format_to_readable_date(datetime.date(2024, 12, 25)) == "December 25, 2024"
    assert format_to_readable_date(None) == "N/A"
    assert format_to_readable_date("soon") == "soon"


def test_12hr_time():
    assert format_to_12hr("19:30:00") == "7:30 PM"
    assert format_to_12hr("09:05") == "9:05 AM"
    assert format_to_12hr("") == ""


def test_display_name_from_email():
    assert display_name_from_email("jane.doe@example.com") == "Jane.doe"
    assert display_name_from_email(None) == ""
