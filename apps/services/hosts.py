# apps/services/hosts.py

from apps.utils import api
from apps.utils.api import get_api_client


def get_hosts(client=None):
    client = client or get_api_client()
    return client.get(api.HOSTS)


def get_host(host_id, client=None):
    client = client or get_api_client()
    return client.get(api.HOST_BY_ID, host_id=host_id)


def create_host(host_data, client=None):
    client = client or get_api_client()
    return client.post(api.HOSTS, body=host_data)


def update_host(host_id, host_data, client=None):
    client = client or get_api_client()
    return client.put(api.HOST_BY_ID, body=host_data, host_id=host_id)


def delete_host(host_id, client=None):
    client = client or get_api_client()
    client.delete(api.HOST_BY_ID, host_id=host_id)


def host_login(email, password, client=None):
    client = client or get_api_client()
    return client.post(api.HOST_LOGIN, body={'email': email, 'password': password})
