# apps/dashboard/middleware.py

import logging

from django.conf import settings
from django.shortcuts import redirect, render

from apps.login_page.session import SessionStore
from .gate import AuthGate, GateDecision

logger = logging.getLogger(__name__)


class AuthGateMiddleware:
    """
    Restores the dashboard session and applies the auth gate to every request.

    The restored store is exposed as ``request.dashboard_session`` and the
    gate as ``request.auth_gate``; views never look the session up on their own.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        store = SessionStore(request.session)
        gate = AuthGate(
            login_url=settings.LOGIN_URL,
            home_url=settings.LOGIN_REDIRECT_URL,
            public_prefixes=settings.DASHBOARD_PUBLIC_PREFIXES,
        )
        request.dashboard_session = store
        request.auth_gate = gate

        # Public pages still see who is signed in
        gate.resolve(store.restore())
        decision = gate.evaluate(request.path_info)

        if decision is GateDecision.WAIT:
            return render(request, 'loading.html')
        if decision is GateDecision.REDIRECT_LOGIN:
            logger.debug(f"Unauthenticated request to {request.path_info}, redirecting to login")
            return redirect(gate.login_url)
        if decision is GateDecision.REDIRECT_HOME:
            return redirect(gate.home_url)

        return self.get_response(request)
