from django.urls import path

from . import views

urlpatterns = [
    path('', views.host_list, name='host_list'),
    path('<str:host_id>/update/', views.update_host, name='update_host'),
    path('<str:host_id>/delete/', views.delete_host, name='delete_host'),
]
