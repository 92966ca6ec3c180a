# apps/login_page/session.py
"""
Client-held dashboard session.

The signed-in user is persisted as a JSON string under a single key of the
Django session, which by default lives in a signed cookie on the client.
"""

import json
import logging
from dataclasses import dataclass, asdict

import requests
from django.conf import settings

from apps.services.hosts import host_login
from apps.utils.api import ApiError

logger = logging.getLogger(__name__)

ROLE_ADMIN = 'admin'
ROLE_HOST = 'host'
ROLES = (ROLE_ADMIN, ROLE_HOST)


@dataclass(frozen=True)
class SessionUser:
    id: str
    email: str
    role: str

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    @property
    def is_host(self):
        return self.role == ROLE_HOST

    @classmethod
    def from_json(cls, raw):
        """Decode a persisted record; raises ValueError on anything malformed."""
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("session record is not an object")
        if not data.get('id') or not data.get('email'):
            raise ValueError("session record lacks id or email")
        if data.get('role') not in ROLES:
            raise ValueError(f"unknown role {data.get('role')!r}")
        return cls(id=str(data['id']), email=data['email'], role=data['role'])

    def to_json(self):
        return json.dumps(asdict(self))


class SessionStore:
    """
    Owns the persisted user for one request.

    Built by the auth gate middleware and handed to views, so login and
    logout always go through the same object that restored the session.
    """

    def __init__(self, storage, key=None, credentials=None, api_client=None):
        self.storage = storage
        self.key = key or settings.DASHBOARD_SESSION_KEY
        self.credentials = credentials if credentials is not None else settings.DASHBOARD_STATIC_CREDENTIALS
        self.api_client = api_client
        self.user = None

    def restore(self):
        raw = self.storage.get(self.key)
        if raw is None:
            self.user = None
            return None
        try:
            self.user = SessionUser.from_json(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Failed to parse user from session, clearing it: {e}")
            self.storage.pop(self.key, None)
            self.user = None
        return self.user

    def login(self, email, password):
        email = (email or '').strip()
        if not email or not password:
            return None

        user = self._check_static_credentials(email, password) or self._check_host_login(email, password)
        if not user:
            logger.info(f"Login rejected for {email}")
            return None

        self._persist(user)
        logger.info(f"User logged in: {user.email} ({user.role})")
        return user

    def logout(self):
        if self.user:
            logger.info(f"User logged out: {self.user.email}")
        self.storage.pop(self.key, None)
        self.user = None

    @property
    def is_authenticated(self):
        return self.user is not None

    def _persist(self, user):
        self.storage[self.key] = user.to_json()
        self.user = user

    def _check_static_credentials(self, email, password):
        for entry in self.credentials:
            if entry['email'] == email and entry['password'] == password:
                return SessionUser(id=entry['id'], email=email, role=entry['role'])
        return None

    def _check_host_login(self, email, password):
        try:
            data = host_login(email, password, client=self.api_client)
        except (ApiError, requests.RequestException) as e:
            logger.info(f"Host login failed for {email}: {e}")
            return None
        if not isinstance(data, dict) or not data.get('id'):
            return None
        return SessionUser(id=str(data['id']), email=data.get('email') or email, role=ROLE_HOST)
