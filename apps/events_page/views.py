import json
import logging
from decimal import Decimal, InvalidOperation

import requests
from django.conf import settings
from django.contrib import messages
from django.http import Http404
from django.shortcuts import render, redirect
from django.urls import reverse
from django.views.decorators.http import require_POST

from apps.login_page.session import ROLE_ADMIN, ROLE_HOST
from apps.dashboard.decorators import role_required
from apps.services import events as event_service
from apps.services import bookings as booking_service
from apps.services.amenities import get_amenities
from apps.services.categories import get_categories
from apps.services.hosts import get_hosts
from apps.services.payments import PaymentError, create_payment_request
from apps.utils.api import ApiError
from apps.utils.formatting import format_to_12hr, format_to_readable_date
from .forms import EVENT_STATUSES, EVENT_TYPES, event_data_from_post

logger = logging.getLogger(__name__)

PENDING_REGISTRATION_SESSION_KEY = 'pending_registration'
FETCH_ERRORS = (ApiError, requests.RequestException)


def format_event_row(event):
    return {
        'id': event.get('id'),
        'slug': event.get('slug'),
        'title': event.get('title') or 'N/A',
        'date': format_to_readable_date(event.get('date')),
        'start_time': format_to_12hr(event.get('start_time')),
        'location': event.get('location') or 'N/A',
        'status': event.get('status') or 'Draft',
        'type': event.get('type') or 'Other',
        'is_published': bool(event.get('isPublished')),
    }


def _form_choices():
    """Select options for the event form; a failing lookup leaves its list empty."""
    choices = {'categories': [], 'amenities': [], 'hosts': []}
    for key, fetch in (('categories', get_categories), ('amenities', get_amenities), ('hosts', get_hosts)):
        try:
            choices[key] = fetch()
        except FETCH_ERRORS as e:
            logger.warning(f"Could not load {key} for event form: {e}")
    return choices


def _render_form(request, event, errors=None, status=200):
    context = {
        'event': event,
        'errors': errors or [],
        'statuses': EVENT_STATUSES,
        'types': EVENT_TYPES,
        'packages_json': json.dumps(event.get('packages'), indent=2) if event.get('packages') else '',
        **_form_choices(),
    }
    return render(request, 'events/event_form.html', context, status=status)


@role_required(ROLE_ADMIN, ROLE_HOST)
def event_list(request, user):
    period = request.GET.get('filter') or ''
    start_date = request.GET.get('start_date') or None
    end_date = request.GET.get('end_date') or None
    host_id = user.id if user.is_host else None

    try:
        if period and period != 'all':
            fetched = event_service.get_filtered_events(
                period=period, host_id=host_id, start_date=start_date, end_date=end_date
            )
        elif user.is_host:
            fetched = event_service.get_events_by_host(user.id)
        else:
            fetched = event_service.get_events()
        error = None
    except FETCH_ERRORS as e:
        logger.error(f"Failed to fetch events: {e}")
        fetched = []
        error = "Failed to fetch events."

    context = {
        'events': [format_event_row(e) for e in fetched],
        'error': error,
        'filters': event_service.EVENT_FILTERS,
        'current_filter': period or 'all',
        'start_date': start_date or '',
        'end_date': end_date or '',
    }
    return render(request, 'events/event_list.html', context)


@role_required(ROLE_ADMIN)
def create_event(request, user):
    if request.method != 'POST':
        return _render_form(request, event={})

    event_data, errors = event_data_from_post(request.POST)
    if errors:
        return _render_form(request, event=event_data, errors=errors, status=400)

    images = {name: request.FILES.get(name) for name in ('cover', 'thumbnail', 'square') if request.FILES.get(name)}
    try:
        if images:
            created = event_service.create_event_with_images(event_data, images)
        else:
            created = event_service.create_event(event_data)
    except FETCH_ERRORS as e:
        logger.error(f"Event creation failed: {e}")
        return _render_form(request, event=event_data, errors=[f"An error occurred during event creation: {e}"], status=502)

    logger.info(f"Event {created.get('id') if created else '?'} created by {user.email}")
    messages.success(request, f"Event '{event_data['title']}' created successfully!")
    return redirect('event_list')


@role_required(ROLE_ADMIN)
def modify_event(request, user, event_id):
    if request.method != 'POST':
        try:
            event = event_service.get_event(event_id)
        except ApiError as e:
            if e.status_code == 404:
                raise Http404("Event not found")
            messages.error(request, "Failed to load event.")
            return redirect('event_list')
        except requests.RequestException:
            messages.error(request, "Failed to load event.")
            return redirect('event_list')
        return _render_form(request, event=event)

    event_data, errors = event_data_from_post(request.POST)
    if errors:
        return _render_form(request, event={'id': event_id, **event_data}, errors=errors, status=400)

    try:
        event_service.update_event(event_id, event_data)
    except FETCH_ERRORS as e:
        logger.error(f"Event update failed for {event_id}: {e}")
        return _render_form(request, event={'id': event_id, **event_data}, errors=["Failed to update event."], status=502)

    messages.success(request, "Event updated successfully.")
    return redirect('event_list')


@require_POST
@role_required(ROLE_ADMIN)
def delete_event(request, user, event_id):
    try:
        event_service.delete_event(event_id)
        messages.success(request, "Event deleted.")
    except FETCH_ERRORS as e:
        logger.error(f"Event deletion failed for {event_id}: {e}")
        messages.error(request, "Could not delete the event.")
    return redirect('event_list')


def _can_manage(user, event):
    """Admins manage every event; hosts only those they are assigned to."""
    if user.is_admin:
        return True
    assigned = [str(host_id) for host_id in event.get('assignedHostIds') or []]
    return str(user.id) in assigned


@require_POST
@role_required(ROLE_ADMIN, ROLE_HOST)
def toggle_publish(request, user, event_id):
    try:
        event = event_service.get_event(event_id)
        if not _can_manage(user, event):
            logger.warning(f"Host {user.id} tried to change publish state of event {event_id}")
            messages.error(request, "You don't have permission to manage this event.")
            return redirect('event_list')
        publish = not event.get('isPublished')
        event_service.set_published(event, publish)
        messages.success(request, "The event has been published." if publish else "The event has been unpublished.")
    except FETCH_ERRORS as e:
        logger.error(f"Publish toggle failed for {event_id}: {e}")
        messages.error(request, "Could not update the event's publish state.")
    return redirect('event_list')


@role_required(ROLE_ADMIN, ROLE_HOST)
def event_bookings(request, user, event_id):
    package_id = request.GET.get('package') or None
    try:
        if user.is_host and not _can_manage(user, event_service.get_event(event_id)):
            logger.warning(f"Host {user.id} tried to read bookings of event {event_id}")
            messages.error(request, "You don't have permission to manage this event.")
            return redirect('event_list')
        if package_id:
            bookings = booking_service.get_bookings_by_package(event_id, package_id)
        else:
            bookings = booking_service.get_bookings_by_event(event_id)
        error = None
    except FETCH_ERRORS as e:
        logger.error(f"Failed to fetch bookings for event {event_id}: {e}")
        bookings = []
        error = "Failed to fetch bookings."

    context = {
        'event_id': event_id,
        'package_id': package_id,
        'bookings': bookings,
        'error': error,
    }
    return render(request, 'events/event_bookings.html', context)


def _selected_package(event, package_id):
    for package in event.get('packages') or []:
        if str(package.get('id')) == str(package_id):
            return package
    return None


def _registration_from_post(post, event):
    """Returns ``(registration, errors)`` for the public registration form."""
    errors = []
    user_name = (post.get('user_name') or '').strip()
    email = (post.get('email') or '').strip()
    if not user_name or not email:
        errors.append("Name and email are required.")

    try:
        member_count = max(int(post.get('member_count') or 1), 1)
    except ValueError:
        member_count = 1

    package = _selected_package(event, post.get('package')) if post.get('package') else None
    try:
        price = Decimal(str(package.get('price') or 0)) if package else Decimal('0')
    except InvalidOperation:
        price = Decimal('0')

    registration = {
        'user_name': user_name,
        'email': email,
        'phone': (post.get('phone') or '').strip(),
        'member_count': member_count,
        'selected_package': package or {},
        'food_preference': post.get('food_preference') or '',
        'total_amount': float(price * member_count),
    }
    return registration, errors


def event_detail(request, slug):
    """Public event page with registration; rendered without the dashboard layout."""
    event = event_service.get_event_by_slug(slug)
    if not event:
        raise Http404("Event not found")

    errors = []
    if request.method == 'POST':
        registration, errors = _registration_from_post(request.POST, event)
        if not errors:
            if registration['total_amount'] > 0:
                return _start_checkout(request, event, registration)
            try:
                booking = booking_service.add_booking(registration, event)
                return redirect('ticket_detail', sno=booking.sno)
            except FETCH_ERRORS as e:
                logger.error(f"Registration failed for event {event.get('id')}: {e}")
                errors.append("Registration failed. Please try again.")

    try:
        related = event_service.get_related_events(event)
    except FETCH_ERRORS as e:
        logger.warning(f"Could not load related events: {e}")
        related = []

    context = {
        'event': event,
        'event_date': format_to_readable_date(event.get('date')),
        'start_time': format_to_12hr(event.get('start_time')),
        'end_time': format_to_12hr(event.get('end_time')),
        'related_events': [format_event_row(e) for e in related],
        'errors': errors,
    }
    return render(request, 'events/event_detail.html', context, status=400 if errors else 200)


def _start_checkout(request, event, registration):
    payload = {
        'amount': f"{registration['total_amount']:.2f}",
        'currency': settings.HITPAY_CURRENCY,
        'email': registration['email'],
        'name': registration['user_name'],
        'purpose': event.get('title'),
        'reference_number': f"{event.get('id')}-{registration['email']}",
        'redirect_url': request.build_absolute_uri(reverse('payment_success')),
    }
    try:
        payment = create_payment_request(payload)
    except PaymentError as e:
        messages.error(request, f"Payment could not be started: {e}")
        return redirect('event_detail', slug=event.get('slug'))

    checkout_url = payment.get('url')
    if not checkout_url:
        logger.error(f"HitPay payment request {payment.get('id')} came back without a checkout URL")
        messages.error(request, "Payment could not be started. Please try again.")
        return redirect('event_detail', slug=event.get('slug'))

    request.session[PENDING_REGISTRATION_SESSION_KEY] = {
        'event_id': event.get('id'),
        'event_slug': event.get('slug'),
        'registration': registration,
        'payment_request_id': payment.get('id'),
    }
    return redirect(checkout_url)
