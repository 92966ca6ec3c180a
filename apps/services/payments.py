# apps/services/payments.py

import json
import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class PaymentError(Exception):
    """HitPay refused or failed to create a payment request."""

    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.status_code = status_code


def create_payment_request(payload, session=None):
    """
    Pass a payment-request body straight through to HitPay.

    Returns the provider's JSON on success. Raises PaymentError carrying the
    provider's ``message`` (or a generic text) otherwise.
    """
    if not settings.HITPAY_API_KEY:
        raise PaymentError('HitPay is not configured', status_code=500)

    http = session or requests
    try:
        response = http.post(
            settings.HITPAY_API_URL,
            data=json.dumps(payload),
            headers={
                'X-BUSINESS-API-KEY': settings.HITPAY_API_KEY,
                'Content-Type': 'application/json',
                'Accept': 'application/json',
            },
            timeout=settings.API_TIMEOUT,
        )
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"HitPay request failed: {e}")
        raise PaymentError('Server error', status_code=500)

    if not response.ok:
        logger.warning(f"HitPay rejected payment request: {response.status_code}")
        message = data.get('message') if isinstance(data, dict) else None
        raise PaymentError(message or 'HitPay error', status_code=400)

    logger.info(f"HitPay payment request {data.get('id')} created")
    return data
