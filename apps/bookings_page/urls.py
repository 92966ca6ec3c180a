from django.urls import path

from . import views

urlpatterns = [
    path('bookings/', views.booking_list, name='booking_list'),
    path('bookings/scan/', views.scan_ticket, name='scan_ticket'),

    # Public pages, served without the dashboard layout
    path('tickets/<str:sno>/', views.ticket_detail, name='ticket_detail'),
    path('activate/<str:sno>/', views.activate_ticket, name='activate_ticket'),
]
