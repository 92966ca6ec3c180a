# apps/services/events.py

import json
import logging

import requests

from apps.utils import api
from apps.utils.api import ApiError, get_api_client

logger = logging.getLogger(__name__)

EVENT_FILTERS = ('all', 'today', 'last_7_days', 'last_30_days', 'custom')
RELATED_EVENTS_LIMIT = 4


def get_events(client=None):
    client = client or get_api_client()
    return client.get(api.EVENTS)


def get_filtered_events(period=None, host_id=None, start_date=None, end_date=None, client=None):
    client = client or get_api_client()
    params = {
        'filter': period,
        'host_id': host_id,
        'start_date': start_date,
        'end_date': end_date,
    }
    # Only send what was actually chosen
    params = {key: value for key, value in params.items() if value}
    return client.get(api.EVENTS_FILTERED, params=params)


def get_event(event_id, client=None):
    client = client or get_api_client()
    return client.get(api.EVENT_BY_ID, event_id=event_id)


def get_event_by_slug(slug, client=None):
    """Public lookup; backend and network failures are reported as a missing event."""
    client = client or get_api_client()
    try:
        return client.get(api.EVENT_BY_SLUG, slug=slug)
    except ApiError as e:
        if e.status_code != 404:
            logger.error(f"Error fetching event by slug {slug}: {e}")
        return None
    except requests.RequestException as e:
        logger.error(f"Error fetching event by slug {slug}: {e}")
        return None


def create_event(event_data, client=None):
    client = client or get_api_client()
    return client.post(api.EVENTS, body=event_data)


def create_event_with_images(event_data, images=None, client=None):
    """
    Create an event as a multipart upload.

    The event fields travel as a JSON string in the ``data`` field and the
    optional ``cover``, ``thumbnail`` and ``square`` files alongside it.
    """
    client = client or get_api_client()
    payload = {key: value for key, value in event_data.items() if key != 'images'}
    files = {}
    for name in ('cover', 'thumbnail', 'square'):
        upload = (images or {}).get(name)
        if upload:
            files[name] = (upload.name, upload.read(), getattr(upload, 'content_type', None))
    return client.upload(api.EVENTS, data={'data': json.dumps(payload)}, files=files)


def update_event(event_id, event_data, client=None):
    client = client or get_api_client()
    return client.put(api.EVENT_BY_ID, body=event_data, event_id=event_id)


def delete_event(event_id, client=None):
    client = client or get_api_client()
    client.delete(api.EVENT_BY_ID, event_id=event_id)


def set_published(event, published, client=None):
    changes = {'isPublished': published}
    if published and event.get('status') == 'Draft':
        changes['status'] = 'Upcoming'
    return update_event(event['id'], changes, client=client)


def get_related_events(current_event, client=None):
    """Events sharing the category or at least one tag, excluding the event itself."""
    current_tags = set(current_event.get('tags') or [])
    related = []
    for event in get_events(client=client):
        if event.get('id') == current_event.get('id'):
            continue
        same_category = event.get('category') == current_event.get('category')
        shares_tag = bool(current_tags.intersection(event.get('tags') or []))
        if same_category or shares_tag:
            related.append(event)
    return related[:RELATED_EVENTS_LIMIT]


def get_events_by_host(host_id, client=None):
    client = client or get_api_client()
    return client.get(api.EVENTS_BY_HOST, host_id=host_id)


def get_event_stats_by_host(host_id, client=None):
    client = client or get_api_client()
    return client.get(api.EVENTS_BY_HOST_STATS, host_id=host_id)


def get_yearly_event_count_by_host(host_id, client=None):
    client = client or get_api_client()
    return client.get(api.EVENTS_BY_HOST_YEARLY, host_id=host_id)


def get_upcoming_ongoing_events(client=None):
    client = client or get_api_client()
    return client.get(api.EVENTS_UPCOMING_ONGOING)


def summarize_events(events):
    """Overview-card counts for a plain list of events."""
    return {
        'total': len(events),
        'ongoing': sum(1 for e in events if e.get('status') == 'Ongoing'),
        'upcoming': sum(1 for e in events if e.get('status') == 'Upcoming'),
    }
