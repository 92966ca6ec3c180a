# apps/services/amenities.py

from apps.utils import api
from apps.utils.api import get_api_client


def get_amenities(client=None):
    client = client or get_api_client()
    return client.get(api.AMENITIES)


def get_amenity(amenity_id, client=None):
    client = client or get_api_client()
    return client.get(api.AMENITY_BY_ID, amenity_id=amenity_id)


def create_amenity(amenity_data, client=None):
    client = client or get_api_client()
    return client.post(api.AMENITIES, body=amenity_data)


def update_amenity(amenity_id, amenity_data, client=None):
    client = client or get_api_client()
    return client.put(api.AMENITY_BY_ID, body=amenity_data, amenity_id=amenity_id)


def delete_amenity(amenity_id, client=None):
    client = client or get_api_client()
    client.delete(api.AMENITY_BY_ID, amenity_id=amenity_id)
