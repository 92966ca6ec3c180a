# apps/events_page/forms.py

import json

EVENT_STATUSES = ('Upcoming', 'Ongoing', 'Completed', 'Draft')
EVENT_TYPES = ('Conference', 'Webinar', 'Meetup', 'Workshop', 'Other')
REQUIRED_FIELDS = ('title', 'date', 'location')


def _split_tags(raw):
    return [tag.strip() for tag in (raw or '').split(',') if tag.strip()]


def event_data_from_post(post):
    """
    Turn a submitted event form into the backend's event payload.

    Returns ``(data, errors)``; ``errors`` is a list of messages and the
    payload must not be sent when it is non-empty.
    """
    errors = []

    missing = [field for field in REQUIRED_FIELDS if not (post.get(field) or '').strip()]
    if missing:
        errors.append("Event title, date, and location are required.")

    status = post.get('status') or 'Draft'
    if status not in EVENT_STATUSES:
        errors.append(f"Unknown event status: {status}")

    event_type = post.get('type') or 'Other'
    if event_type not in EVENT_TYPES:
        errors.append(f"Unknown event type: {event_type}")

    packages = []
    raw_packages = (post.get('packages') or '').strip()
    if raw_packages:
        try:
            packages = json.loads(raw_packages)
            if not isinstance(packages, list):
                raise ValueError
        except ValueError:
            errors.append("Packages must be a JSON list.")
            packages = []

    data = {
        'title': (post.get('title') or '').strip(),
        'description': post.get('description') or '',
        'category': post.get('category') or None,
        'tags': _split_tags(post.get('tags')),
        'termsAndConditions': post.get('termsAndConditions') or '',
        'amenities': post.getlist('amenities') if hasattr(post, 'getlist') else post.get('amenities', []),
        'assignedHostIds': post.getlist('assignedHostIds') if hasattr(post, 'getlist') else post.get('assignedHostIds', []),
        'isPublished': post.get('isPublished') in ('on', 'true', '1', True),
        'packages': packages,
        'date': post.get('date') or None,
        'end_date': post.get('end_date') or None,
        'start_time': post.get('start_time') or None,
        'end_time': post.get('end_time') or None,
        'location': (post.get('location') or '').strip(),
        'status': status,
        'type': event_type,
    }
    return data, errors
