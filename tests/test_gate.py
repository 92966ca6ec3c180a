"""
Unit tests for the auth gate state machine.
"""

import pytest
from django.contrib.sessions.backends.signed_cookies import SessionStore as SignedCookieSession
from django.http import HttpResponse
from django.test import RequestFactory

from apps.dashboard.gate import AuthGate, GateDecision, GateState
from apps.dashboard.middleware import AuthGateMiddleware
from apps.login_page.session import SessionUser

ADMIN = SessionUser(id="admin-1", email="admin@gmail.com", role="admin")
PUBLIC = ("/tickets/", "/activate/", "/payment-success/", "/static/")


@pytest.fixture
def gate():
    return AuthGate(login_url="/login/", home_url="/", public_prefixes=PUBLIC)


def test_gate_starts_loading(gate):
    assert gate.state is GateState.LOADING
    assert gate.evaluate("/") is GateDecision.WAIT
    assert gate.evaluate("/login/") is GateDecision.WAIT


def test_resolve_leaves_loading(gate):
    assert gate.resolve(None) is GateState.UNAUTHENTICATED
    assert gate.resolve(ADMIN) is GateState.AUTHENTICATED


@pytest.mark.parametrize("path", ["/", "/events/", "/hosts/", "/events/12/edit/", "/events/transactions/"])
def test_unauthenticated_protected_route_redirects_to_login(gate, path):
    gate.resolve(None)
    assert gate.evaluate(path) is GateDecision.REDIRECT_LOGIN


def test_unauthenticated_login_route_is_allowed(gate):
    gate.resolve(None)
    assert gate.evaluate("/login/") is GateDecision.ALLOW


def test_authenticated_login_route_redirects_home(gate):
    gate.resolve(ADMIN)
    assert gate.evaluate("/login/") is GateDecision.REDIRECT_HOME


@pytest.mark.parametrize("path", ["/", "/events/", "/bookings/", "/logout/"])
def test_authenticated_dashboard_routes_are_allowed(gate, path):
    gate.resolve(ADMIN)
    assert gate.evaluate(path) is GateDecision.ALLOW


@pytest.mark.parametrize(
    "path",
    [
        "/events/summer-fest-2025/",
        "/tickets/EVENT-12/",
        "/activate/EVENT-12/",
        "/payment-success/",
        "/static/app.css",
    ],
)
def test_public_pages_bypass_the_gate_in_every_state(gate, path):
    assert gate.evaluate(path) is GateDecision.ALLOW
    gate.resolve(None)
    assert gate.evaluate(path) is GateDecision.ALLOW
    gate.resolve(ADMIN)
    assert gate.evaluate(path) is GateDecision.ALLOW


@pytest.mark.parametrize("path", ["/events/", "/events/new/", "/events/42/", "/events/transactions/"])
def test_dashboard_event_routes_are_not_public(path):
    assert not AuthGate.is_public_event_page(path)


def test_gate_follows_logout(gate):
    gate.resolve(ADMIN)
    assert gate.evaluate("/") is GateDecision.ALLOW

    gate.resolve(None)
    assert gate.evaluate("/") is GateDecision.REDIRECT_LOGIN


class TestAuthGateMiddleware:

    @pytest.fixture
    def seen(self):
        return {}

    @pytest.fixture
    def middleware(self, seen):
        def get_response(request):
            seen["request"] = request
            return HttpResponse("ok")

        return AuthGateMiddleware(get_response)

    def _request(self, path, user=None):
        request = RequestFactory().get(path)
        request.session = SignedCookieSession()
        if user:
            request.session["user"] = user.to_json()
        return request

    def test_public_page_sees_unauthenticated_state(self, middleware, seen):
        middleware(self._request("/tickets/EVENT-1/"))

        assert seen["request"].auth_gate.state is GateState.UNAUTHENTICATED
        assert seen["request"].dashboard_session.user is None

    def test_public_page_sees_signed_in_user(self, middleware, seen):
        middleware(self._request("/events/summer-fest/", user=ADMIN))

        assert seen["request"].auth_gate.state is GateState.AUTHENTICATED
        assert seen["request"].dashboard_session.user == ADMIN

    def test_protected_page_redirects_before_the_view(self, middleware, seen):
        response = middleware(self._request("/hosts/"))

        assert response.status_code == 302
        assert response["Location"] == "/login/"
        assert "request" not in seen
