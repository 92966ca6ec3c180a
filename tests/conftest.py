"""
Shared pytest configuration.

Configures Django once for the whole run and provides small fakes for the
HTTP layer so no test touches the network.
"""

import os
from unittest.mock import Mock

import django
import pytest
import requests

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "eventsphere.settings")
os.environ.setdefault("HITPAY_API_KEY", "test-hitpay-key")
django.setup()

from django.test.utils import setup_test_environment  # noqa: E402

setup_test_environment()

from apps.utils.api import ApiClient  # noqa: E402


def mock_response(payload=None, status_code=200, reason="OK", text=None):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = reason
    response.url = "https://backend.test/api"
    response.json.return_value = payload
    if text is None:
        text = "" if payload is None else "payload"
    response.text = text
    response.content = b"" if payload is None else b"payload"
    return response


@pytest.fixture
def http_session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api_client(http_session):
    return ApiClient("https://backend.test/", session=http_session)
