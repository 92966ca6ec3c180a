# apps/dashboard/decorators.py

from functools import wraps

from django.contrib import messages
from django.shortcuts import redirect
from django.views.decorators.cache import never_cache


def no_cache_headers(response):
    response['Cache-Control'] = 'no-store, no-cache, must-revalidate, max-age=0'
    response['Pragma'] = 'no-cache'
    response['Expires'] = '0'
    return response


def role_required(*allowed_roles):
    """
    Requires a restored dashboard session whose role is in ``allowed_roles``
    and prevents caching so logged-out users can't go back.

    The signed-in ``SessionUser`` is passed to the view as its second argument.
    """
    def decorator(view_func):
        @never_cache
        @wraps(view_func)
        def wrapped_view(request, *args, **kwargs):
            user = request.dashboard_session.user
            if user is None:
                return redirect('login')
            if allowed_roles and user.role not in allowed_roles:
                messages.error(request, "You don't have permission to access this page.")
                return redirect('dashboard')
            return no_cache_headers(view_func(request, user, *args, **kwargs))
        return wrapped_view
    return decorator
