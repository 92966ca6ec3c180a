from django.urls import path, include

urlpatterns = [
    # Login and logout
    path('', include('apps.login_page.urls')),

    # Dashboard home
    path('', include('apps.dashboard.urls')),

    # Transactions, HitPay passthrough, checkout return; must precede the
    # events include so /events/transactions/ is not taken for a slug
    path('', include('apps.payments.urls')),

    # Events (dashboard and public pages)
    path('events/', include('apps.events_page.urls')),

    # Admin features
    path('hosts/', include('apps.hosts_page.urls')),
    path('amenities/', include('apps.amenities_page.urls')),
    path('categories/', include('apps.categories_page.urls')),

    # Host bookings and public tickets
    path('', include('apps.bookings_page.urls')),
]
