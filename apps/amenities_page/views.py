import logging

import requests
from django.contrib import messages
from django.shortcuts import render, redirect
from django.views.decorators.http import require_POST

from apps.login_page.session import ROLE_ADMIN
from apps.dashboard.decorators import role_required
from apps.services import amenities as amenity_service
from apps.utils.api import ApiError

logger = logging.getLogger(__name__)


def _amenity_data_from_post(post):
    data = {
        'title': (post.get('title') or '').strip(),
        'location': (post.get('location') or '').strip(),
    }
    if not data['title']:
        return data, "Amenity title is required."
    return data, None


@role_required(ROLE_ADMIN)
def amenity_list(request, user):
    if request.method == 'POST':
        data, error = _amenity_data_from_post(request.POST)
        if error:
            messages.error(request, error)
        else:
            try:
                amenity_service.create_amenity(data)
                messages.success(request, f"Amenity '{data['title']}' added.")
            except (ApiError, requests.RequestException) as e:
                logger.error(f"Amenity creation failed: {e}")
                messages.error(request, "Could not create the amenity.")
        return redirect('amenity_list')

    try:
        amenities = amenity_service.get_amenities()
        error = None
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Failed to fetch amenities: {e}")
        amenities = []
        error = "Failed to fetch amenities."

    return render(request, 'amenities/amenity_list.html', {'amenities': amenities, 'error': error})


@require_POST
@role_required(ROLE_ADMIN)
def update_amenity(request, user, amenity_id):
    data, error = _amenity_data_from_post(request.POST)
    if error:
        messages.error(request, error)
        return redirect('amenity_list')
    try:
        amenity_service.update_amenity(amenity_id, data)
        messages.success(request, "Amenity updated.")
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Amenity update failed for {amenity_id}: {e}")
        messages.error(request, "Could not update the amenity.")
    return redirect('amenity_list')


@require_POST
@role_required(ROLE_ADMIN)
def delete_amenity(request, user, amenity_id):
    try:
        amenity_service.delete_amenity(amenity_id)
        messages.success(request, "Amenity deleted.")
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Amenity deletion failed for {amenity_id}: {e}")
        messages.error(request, "Could not delete the amenity.")
    return redirect('amenity_list')
