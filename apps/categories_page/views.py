import logging

import requests
from django.contrib import messages
from django.core.paginator import Paginator
from django.shortcuts import render, redirect
from django.views.decorators.http import require_POST

from apps.login_page.session import ROLE_ADMIN
from apps.dashboard.decorators import role_required
from apps.services import categories as category_service
from apps.utils.api import ApiError

logger = logging.getLogger(__name__)

ITEMS_PER_PAGE = 10


@role_required(ROLE_ADMIN)
def category_list(request, user):
    if request.method == 'POST':
        title = (request.POST.get('title') or '').strip()
        if not title:
            messages.error(request, "Category title is required.")
            return redirect('category_list')
        try:
            category_service.create_category({'title': title})
            messages.success(request, f"Category '{title}' added.")
        except (ApiError, requests.RequestException) as e:
            logger.error(f"Category creation failed: {e}")
            messages.error(request, "Could not create the category.")
        return redirect('category_list')

    try:
        categories = category_service.get_categories()
        error = None
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Error fetching categories: {e}")
        categories = []
        error = "Failed to fetch categories"

    page = Paginator(categories, ITEMS_PER_PAGE).get_page(request.GET.get('page'))
    return render(request, 'categories/category_list.html', {'page': page, 'error': error})


@require_POST
@role_required(ROLE_ADMIN)
def update_category(request, user, category_id):
    title = (request.POST.get('title') or '').strip()
    if not title:
        messages.error(request, "Category title is required.")
        return redirect('category_list')
    try:
        category_service.update_category(category_id, {'title': title})
        messages.success(request, "Category updated.")
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Category update failed for {category_id}: {e}")
        messages.error(request, "Could not update the category.")
    return redirect('category_list')


@require_POST
@role_required(ROLE_ADMIN)
def delete_category(request, user, category_id):
    try:
        category_service.delete_category(category_id)
        messages.success(request, "Category deleted.")
    except (ApiError, requests.RequestException) as e:
        logger.error(f"Category deletion failed for {category_id}: {e}")
        messages.error(request, "Could not delete the category.")
    return redirect('category_list')
