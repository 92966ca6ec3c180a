import logging

import requests
from django.contrib import messages
from django.shortcuts import render, redirect
from django.views.decorators.http import require_POST

from apps.login_page.session import ROLE_ADMIN
from apps.dashboard.decorators import role_required
from apps.services import hosts as host_service
from apps.utils.api import ApiError

logger = logging.getLogger(__name__)


def _host_data_from_post(post, creating):
    data = {
        'name': (post.get('name') or '').strip(),
        'email': (post.get('email') or '').strip(),
    }
    password = post.get('password') or ''
    if password:
        data['password'] = password

    if not data['name'] or not data['email']:
        return data, "Host name and email are required."
    if creating and not password:
        return data, "A password is required for new hosts."
    return data, None


@role_required(ROLE_ADMIN)
def host_list(request, user):
    if request.method == 'POST':
        data, error = _host_data_from_post(request.POST, creating=True)
        if error:
            messages.error(request, error)
        else:
            try:
                host_service.create_host(data)
                messages.success(request, f"Host '{data['name']}' added.")
                logger.info(f"Host {data['email']} created by {user.email}")
            except (ApiError, requests.RequestException) as e:
                logger.error(f"Host creation failed: {e}")
                messages.error(request, "Could not create the host.")
        return redirect('host_list')

    try:
        hosts = host_service.get_hosts()
        error = None
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Failed to fetch hosts: {e}")
        hosts = []
        error = "Failed to fetch hosts."

    return render(request, 'hosts/host_list.html', {'hosts': hosts, 'error': error})


@require_POST
@role_required(ROLE_ADMIN)
def update_host(request, user, host_id):
    data, error = _host_data_from_post(request.POST, creating=False)
    if error:
        messages.error(request, error)
        return redirect('host_list')
    try:
        host_service.update_host(host_id, data)
        messages.success(request, "Host updated.")
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Host update failed for {host_id}: {e}")
        messages.error(request, "Could not update the host.")
    return redirect('host_list')


@require_POST
@role_required(ROLE_ADMIN)
def delete_host(request, user, host_id):
    try:
        host_service.delete_host(host_id)
        messages.success(request, "Host deleted.")
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Host deletion failed for {host_id}: {e}")
        messages.error(request, "Could not delete the host.")
    return redirect('host_list')
