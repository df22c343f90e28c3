"""
URL configuration for integrations app.
"""
from django.urls import path
from apps.integrations.views import PaymentGatewayListView, PaymentGatewayDetailView

app_name = 'integrations'

urlpatterns = [
    path('', PaymentGatewayListView.as_view(), name='payment-gateway-list'),
    path('<str:pk>', PaymentGatewayDetailView.as_view(), name='payment-gateway-detail'),
]
