import json
from urllib.parse import urlencode
import logging

import requests
from django.core.paginator import Paginator
from django.http import JsonResponse
from django.shortcuts import render, redirect
from django.views.decorators.cache import never_cache
from django.views.decorators.csrf import csrf_exempt

from apps.login_page.session import ROLE_HOST
from apps.dashboard.decorators import role_required
from apps.events_page.views import PENDING_REGISTRATION_SESSION_KEY
from apps.services import bookings as booking_service
from apps.services import events as event_service
from apps.services import transactions as transaction_service
from apps.services.payments import PaymentError, create_payment_request
from apps.utils.api import ApiError

logger = logging.getLogger(__name__)

TRANSACTION_STATUSES = ('all', 'completed', 'pending', 'failed', 'cancelled')
PAYMENT_TYPES = ('all', 'card', 'bank_transfer', 'paynow', 'grabpay', 'favepay')


def _page_number(raw):
    try:
        return max(int(raw), 1)
    except (TypeError, ValueError):
        return 1


@role_required(ROLE_HOST)
def transactions_view(request, user):
    page_number = _page_number(request.GET.get('page'))
    status = request.GET.get('status') or 'all'
    payment_type = request.GET.get('payment_type') or 'all'
    search = request.GET.get('q') or ''

    try:
        data = transaction_service.get_hitpay_transactions(host_id=user.id, page=page_number)
        error = None
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Failed to fetch transactions for host {user.id}: {e}")
        data = {'results': [], 'count': 0}
        error = "Failed to fetch transactions."

    transactions = transaction_service.filter_transactions(
        data['results'], status=status, payment_type=payment_type, search=search
    )
    # Paginator only drives the page links; the backend already sliced the rows
    paginator = Paginator(range(data['count']), transaction_service.PAGE_SIZE)

    context = {
        'transactions': transactions,
        'error': error,
        'page': paginator.get_page(page_number),
        'total_count': data['count'],
        'statuses': TRANSACTION_STATUSES,
        'payment_types': PAYMENT_TYPES,
        'status': status,
        'payment_type': payment_type,
        'search': search,
        'query_prefix': urlencode({'status': status, 'payment_type': payment_type, 'q': search}) + '&',
    }
    return render(request, 'payments/transactions.html', context)


@csrf_exempt
def hitpay_create_session(request):
    if request.method != 'POST':
        return JsonResponse({'error': 'Method not allowed'}, status=405)

    try:
        payload = json.loads(request.body or b'{}')
    except ValueError:
        return JsonResponse({'error': 'Invalid JSON body'}, status=400)

    try:
        data = create_payment_request(payload)
    except PaymentError as e:
        return JsonResponse({'error': str(e)}, status=e.status_code)
    return JsonResponse(data, status=200)


@never_cache
def payment_success(request):
    """HitPay redirects here; complete the registration stashed before checkout."""
    pending = request.session.get(PENDING_REGISTRATION_SESSION_KEY)
    if not pending:
        return render(request, 'payments/payment_success.html', {'error': "No pending registration was found."}, status=400)

    if request.GET.get('status') and request.GET['status'] != 'completed':
        request.session.pop(PENDING_REGISTRATION_SESSION_KEY, None)
        return render(request, 'payments/payment_success.html', {'error': "Payment was not completed."}, status=400)

    try:
        event = event_service.get_event(pending['event_id'])
        booking = booking_service.add_booking(pending['registration'], event)
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Registration after payment {pending.get('payment_request_id')} failed: {e}")
        return render(
            request,
            'payments/payment_success.html',
            {'error': "Payment received, but registration failed. Please contact the host."},
            status=502,
        )

    request.session.pop(PENDING_REGISTRATION_SESSION_KEY, None)
    return redirect('ticket_detail', sno=booking.sno)
