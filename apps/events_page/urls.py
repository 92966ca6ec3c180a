from django.urls import path

from . import views

urlpatterns = [
    path('', views.event_list, name='event_list'),
    path('new/', views.create_event, name='create_event'),
    path('<int:event_id>/edit/', views.modify_event, name='modify_event'),
    path('<int:event_id>/delete/', views.delete_event, name='delete_event'),
    path('<int:event_id>/publish/', views.toggle_publish, name='toggle_publish'),
    path('<int:event_id>/bookings/', views.event_bookings, name='event_bookings'),

    # Public page, served without the dashboard layout
    path('<slug:slug>/', views.event_detail, name='event_detail'),
]
