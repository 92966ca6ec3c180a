# apps/login_page/views.py
from django.shortcuts import render, redirect
from django.contrib import messages
from django.views.decorators.cache import never_cache
import logging
import traceback

from apps.dashboard.decorators import no_cache_headers

logger = logging.getLogger(__name__)


@never_cache
def login_view(request):
    if request.method != 'POST':
        return render(request, 'login.html')

    email = request.POST.get('email', '').strip()
    password = request.POST.get('password', '')

    if not email or not password:
        messages.error(request, 'Email and password are required.')
        return render(request, 'login.html', {'email': email}, status=400)

    logger.info(f"Attempting login for email: {email}")

    try:
        user = request.dashboard_session.login(email, password)
    except Exception as e:
        logger.error(f"Login error: {str(e)}")
        logger.error(traceback.format_exc())
        user = None

    if not user:
        messages.error(request, 'Invalid email or password.')
        return render(request, 'login.html', {'email': email}, status=401)

    request.auth_gate.resolve(user)
    return redirect('dashboard')


@never_cache
def logout_view(request):
    request.dashboard_session.logout()
    request.auth_gate.resolve(None)
    messages.success(request, "You have successfully logged out.")
    return no_cache_headers(redirect('login'))
