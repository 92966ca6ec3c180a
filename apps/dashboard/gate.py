# apps/dashboard/gate.py
"""
Per-navigation access decision for the dashboard.

The gate starts in ``loading`` until the persisted session has been
restored, then tracks whether a user is signed in. ``evaluate`` maps the
current state and path onto one of four decisions.
"""

import enum
import re


class GateState(enum.Enum):
    LOADING = 'loading'
    UNAUTHENTICATED = 'unauthenticated'
    AUTHENTICATED = 'authenticated'


class GateDecision(enum.Enum):
    ALLOW = 'allow'
    WAIT = 'wait'
    REDIRECT_LOGIN = 'redirect_login'
    REDIRECT_HOME = 'redirect_home'


# Public event pages are /events/<slug>/; everything else under /events/ is
# part of the dashboard.
EVENT_DASHBOARD_SEGMENTS = frozenset({'new', 'transactions'})
NUMERIC_ID = re.compile(r'^\d+$')


class AuthGate:

    def __init__(self, login_url='/login/', home_url='/', public_prefixes=()):
        self.login_url = login_url
        self.home_url = home_url
        self.public_prefixes = tuple(public_prefixes)
        self.state = GateState.LOADING

    def resolve(self, user):
        """Leave ``loading`` (or re-evaluate after login/logout)."""
        self.state = GateState.AUTHENTICATED if user else GateState.UNAUTHENTICATED
        return self.state

    def is_public(self, path):
        if any(path.startswith(prefix) for prefix in self.public_prefixes):
            return True
        return self.is_public_event_page(path)

    @staticmethod
    def is_public_event_page(path):
        parts = [part for part in path.split('/') if part]
        if len(parts) != 2 or parts[0] != 'events':
            return False
        slug = parts[1]
        return slug not in EVENT_DASHBOARD_SEGMENTS and not NUMERIC_ID.match(slug)

    def evaluate(self, path):
        if self.is_public(path):
            return GateDecision.ALLOW
        if self.state is GateState.LOADING:
            return GateDecision.WAIT

        on_login = path == self.login_url
        if self.state is GateState.AUTHENTICATED and on_login:
            return GateDecision.REDIRECT_HOME
        if self.state is GateState.UNAUTHENTICATED and not on_login:
            return GateDecision.REDIRECT_LOGIN
        return GateDecision.ALLOW
