# apps/services/transactions.py

from apps.utils import api
from apps.utils.api import get_api_client

PAGE_SIZE = 10


def get_hitpay_transactions(host_id=None, page=1, per_page=PAGE_SIZE, client=None):
    """
    Fetch one page of HitPay transactions.

    The backend returns either a bare list or a page envelope with
    ``results`` and ``count``; both are normalised to the envelope.
    """
    client = client or get_api_client()
    params = {'page': page, 'per_page': per_page}
    if host_id:
        params['host_id'] = host_id

    data = client.get(api.HITPAY_TRANSACTIONS, params=params)
    if isinstance(data, list):
        return {'results': data, 'count': len(data)}
    results = data.get('results') or data.get('transactions') or []
    return {'results': results, 'count': data.get('count', len(results))}


def filter_transactions(transactions, status='all', payment_type='all', search=''):
    """Client-side narrowing applied on top of the page the backend returned."""
    search = (search or '').strip().lower()
    filtered = []
    for tx in transactions:
        if status != 'all' and (tx.get('status') or '').lower() != status:
            continue
        if payment_type != 'all' and (tx.get('payment_type') or '').lower() != payment_type:
            continue
        if search:
            haystack = ' '.join(
                str(tx.get(key) or '') for key in ('name', 'email', 'reference_number', 'purpose')
            ).lower()
            if search not in haystack:
                continue
        filtered.append(tx)
    return filtered
