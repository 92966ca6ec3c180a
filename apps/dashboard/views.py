# apps/dashboard/views.py

import logging

import requests
from django.shortcuts import render

from apps.login_page.session import ROLE_ADMIN, ROLE_HOST
from apps.services import events as event_service
from apps.utils.api import ApiError
from apps.utils.formatting import display_name_from_email, format_to_readable_date
from .decorators import role_required

logger = logging.getLogger(__name__)

UPCOMING_LIMIT = 5


def _overview_stats(user):
    if user.is_host:
        return event_service.get_event_stats_by_host(user.id)
    return event_service.summarize_events(event_service.get_events())


def _upcoming_events():
    upcoming = []
    for event in event_service.get_upcoming_ongoing_events():
        if event.get('status') not in ('Upcoming', 'Ongoing'):
            continue
        upcoming.append({
            'title': event.get('title'),
            'slug': event.get('slug'),
            'date': format_to_readable_date(event.get('date')),
            'location': event.get('location') or 'N/A',
            'status': event.get('status'),
        })
    return upcoming[:UPCOMING_LIMIT]


@role_required(ROLE_ADMIN, ROLE_HOST)
def dashboard_view(request, user):
    context = {
        'display_name': display_name_from_email(user.email),
        'role_display': 'Administrator' if user.is_admin else 'Event Host',
        'stats': None,
        'stats_error': None,
        'upcoming_events': [],
        'upcoming_error': None,
        'yearly_counts': [],
    }

    # Each panel fails on its own, like independent widgets
    try:
        context['stats'] = _overview_stats(user)
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Failed to load overview stats: {e}")
        context['stats_error'] = "Failed to load event statistics."

    try:
        context['upcoming_events'] = _upcoming_events()
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Failed to load upcoming events: {e}")
        context['upcoming_error'] = "Failed to load upcoming events."

    if user.is_host:
        try:
            context['yearly_counts'] = event_service.get_yearly_event_count_by_host(user.id)
        except (ApiError, requests.RequestException) as e:
            logger.error(f"Failed to load yearly event counts: {e}")

    return render(request, 'dashboard/dashboard.html', context)
