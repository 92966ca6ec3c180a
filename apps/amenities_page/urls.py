from django.urls import path

from . import views

urlpatterns = [
    path('', views.amenity_list, name='amenity_list'),
    path('<int:amenity_id>/update/', views.update_amenity, name='update_amenity'),
    path('<int:amenity_id>/delete/', views.delete_amenity, name='delete_amenity'),
]
