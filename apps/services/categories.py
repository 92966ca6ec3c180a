# apps/services/categories.py

from apps.utils import api
from apps.utils.api import get_api_client


def get_categories(client=None):
    client = client or get_api_client()
    return client.get(api.CATEGORIES)


def get_category(category_id, client=None):
    client = client or get_api_client()
    return client.get(api.CATEGORY_BY_ID, category_id=category_id)


def create_category(category_data, client=None):
    client = client or get_api_client()
    return client.post(api.CATEGORIES, body=category_data)


def update_category(category_id, category_data, client=None):
    client = client or get_api_client()
    return client.put(api.CATEGORY_BY_ID, body=category_data, category_id=category_id)


def delete_category(category_id, client=None):
    client = client or get_api_client()
    client.delete(api.CATEGORY_BY_ID, category_id=category_id)
