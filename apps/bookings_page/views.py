import logging

import requests
from django.contrib import messages
from django.http import Http404
from django.shortcuts import render, redirect
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_POST

from apps.login_page.session import ROLE_HOST
from apps.dashboard.decorators import role_required
from apps.services import bookings as booking_service
from apps.utils.api import ApiError, resolve_media_url

logger = logging.getLogger(__name__)


@role_required(ROLE_HOST)
def booking_list(request, user):
    query = (request.GET.get('q') or '').strip().lower()
    try:
        bookings = booking_service.get_bookings_by_host(user.id)
        error = None
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Error fetching bookings by host {user.id}: {e}")
        bookings = []
        error = "Failed to fetch bookings."

    if query:
        bookings = [
            b for b in bookings
            if query in b.sno.lower() or query in b.user_name.lower() or query in b.email.lower()
        ]

    return render(request, 'bookings/booking_list.html', {'bookings': bookings, 'error': error, 'query': query})


@require_POST
@role_required(ROLE_HOST)
def scan_ticket(request, user):
    sno = (request.POST.get('sno') or '').strip()
    if not sno:
        messages.error(request, "Enter or scan a ticket number.")
        return redirect('booking_list')
    try:
        booking = booking_service.scan_booking(sno)
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Error scanning QR by SNO {sno}: {e}")
        messages.error(request, f"Could not scan ticket {sno}.")
        return redirect('booking_list')

    state = 'activated' if booking.is_activated else 'deactivated'
    messages.success(request, f"Ticket {booking.sno} for {booking.user_name} {state}.")
    return redirect('booking_list')


def _booking_or_404(sno):
    try:
        return booking_service.get_booking_by_sno(sno)
    except ApiError as e:
        if e.status_code == 404:
            raise Http404(f"Booking with SNO {sno} not found")
        raise


@never_cache
def ticket_detail(request, sno):
    try:
        booking = _booking_or_404(sno)
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Error fetching booking by SNO {sno}: {e}")
        return render(request, 'bookings/ticket_detail.html', {'error': "Failed to load ticket.", 'sno': sno}, status=502)

    context = {
        'booking': booking,
        'qr_code_url': resolve_media_url(booking.qr_code_url),
        'sno': sno,
    }
    return render(request, 'bookings/ticket_detail.html', context)


@never_cache
def activate_ticket(request, sno):
    """Opened from the QR code; every visit toggles the ticket's activation."""
    try:
        _booking_or_404(sno)
        booking = booking_service.scan_booking(sno)
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Error activating ticket {sno}: {e}")
        return render(request, 'bookings/activate.html', {'error': "Failed to activate your ticket. Please try again.", 'sno': sno}, status=502)

    return render(request, 'bookings/activate.html', {'booking': booking, 'sno': sno})
