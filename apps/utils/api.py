# apps/utils/api.py

import json
import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

# Relative paths of every backend endpoint the dashboard talks to
EVENTS = '/api/events'
EVENTS_FILTERED = '/api/events/filtered'
EVENTS_UPCOMING_ONGOING = '/api/events/upcoming-ongoing'
EVENT_BY_ID = '/api/events/{event_id}'
EVENT_BY_SLUG = '/api/events/slug/{slug}'
EVENT_REGISTER = '/api/events/{event_id}/register'
EVENT_BOOKINGS = '/api/events/{event_id}/bookings'
EVENTS_BY_HOST = '/api/events/host/{host_id}'
EVENTS_BY_HOST_STATS = '/api/events/host/{host_id}/stats'
EVENTS_BY_HOST_YEARLY = '/api/events/host/{host_id}/yearly'

BOOKINGS = '/api/bookings'
BOOKING_BY_SNO = '/api/bookings/sno/{sno}'
BOOKING_SCAN = '/api/bookings/sno/{sno}/scan'
BOOKINGS_BY_HOST = '/api/bookings/host/{host_id}'

HOSTS = '/api/hosts'
HOST_BY_ID = '/api/hosts/{host_id}'
HOST_LOGIN = '/api/hosts/login'

CATEGORIES = '/api/categories'
CATEGORY_BY_ID = '/api/categories/{category_id}'

AMENITIES = '/api/amenities'
AMENITY_BY_ID = '/api/amenities/{amenity_id}'

HITPAY_TRANSACTIONS = '/api/hitpay-transactions/'

MEDIA = '/media'


class ApiError(Exception):
    """Raised when the backend answers with a non-success HTTP status."""

    def __init__(self, status_code, reason='', body=''):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"API request failed: {status_code} {reason}. {body}".strip())


class ApiClient:
    """
    Thin JSON client for the EventSphere backend.

    Every call is a single request; there are no retries and no caching.
    """

    def __init__(self, base_url, session=None, timeout=None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def url(self, path, **params):
        return f"{self.base_url}{path.format(**params)}"

    def request_options(self, method, body=None, extra_headers=None):
        """Build keyword arguments for requests, mirroring the JSON conventions of the backend."""
        headers = {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
        }
        if extra_headers:
            headers.update(extra_headers)

        options = {'headers': headers, 'timeout': self.timeout}
        if body is not None and method != 'GET':
            options['data'] = json.dumps(body)
        return options

    def request(self, method, path, body=None, params=None, **path_params):
        url = self.url(path, **path_params)
        options = self.request_options(method, body)
        if params:
            options['params'] = params

        logger.debug(f"{method} {url}")
        response = self.session.request(method, url, **options)
        return handle_api_response(response)

    def upload(self, path, data, files, **path_params):
        """POST a multipart form; requests sets the boundary header itself."""
        url = self.url(path, **path_params)
        logger.debug(f"POST (multipart) {url}")
        response = self.session.post(
            url,
            data=data,
            files=files,
            headers={'Accept': 'application/json'},
            timeout=self.timeout,
        )
        return handle_api_response(response)

    def get(self, path, params=None, **path_params):
        return self.request('GET', path, params=params, **path_params)

    def post(self, path, body=None, **path_params):
        return self.request('POST', path, body=body, **path_params)

    def put(self, path, body=None, **path_params):
        return self.request('PUT', path, body=body, **path_params)

    def patch(self, path, body=None, **path_params):
        return self.request('PATCH', path, body=body, **path_params)

    def delete(self, path, **path_params):
        return self.request('DELETE', path, **path_params)


def handle_api_response(response):
    """Decode a JSON body, raising ApiError on any non-success status."""
    if not response.ok:
        logger.warning(f"API request failed: {response.status_code} {response.url}")
        raise ApiError(response.status_code, response.reason, response.text)

    if not response.content:
        return None
    return response.json()


_client = None


def get_api_client():
    """Return the process-wide client built from settings."""
    global _client
    if _client is None:
        _client = ApiClient(settings.API_BASE_URL, timeout=settings.API_TIMEOUT)
        logger.info(f"API client configured for {_client.base_url}")
    return _client


def reset_api_client():
    global _client
    _client = None


def resolve_media_url(path):
    """Backend media references may be relative; make them absolute."""
    if not path or path.startswith(('http://', 'https://')):
        return path
    base = settings.API_BASE_URL.rstrip('/')
    if path.startswith(MEDIA + '/'):
        return f"{base}{path}"
    return f"{base}{MEDIA}/{path.lstrip('/')}"
