from django.urls import path

from . import views

urlpatterns = [
    path('events/transactions/', views.transactions_view, name='transactions'),
    path('api/hitpay-create-session/', views.hitpay_create_session, name='hitpay_create_session'),
    path('payment-success/', views.payment_success, name='payment_success'),
]
