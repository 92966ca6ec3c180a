from .navigation import NAV_LINKS, filter_nav_links


def navigation(request):
    store = getattr(request, 'dashboard_session', None)
    user = store.user if store else None
    return {
        "session_user": user,
        "nav_links": filter_nav_links(NAV_LINKS, user.role if user else None),
        "active_route": request.path,
    }
