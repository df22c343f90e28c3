"""
URL configuration for the dashboard API.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.catalog.views import PublicPriceTableListView

urlpatterns = [
    path('admin/', admin.site.urls),

    # API Documentation
    path('schema/', SpectacularAPIView.as_view(), name='schema'),
    path('schema/swagger/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # API v1
    path('v1/', include('apps.core.urls')),

    # Authentication endpoints
    path('v1/auth/', include('apps.rbac.urls_auth')),  # login, logout, refresh-token, me

    # Public endpoints (no authentication)
    path('v1/public/price-tables', PublicPriceTableListView.as_view(), name='public-price-tables'),

    # Dashboard resources
    path('v1/users/', include('apps.rbac.urls')),
    path('v1/payment-gateways/', include('apps.integrations.urls')),
    path('v1/collaborators/', include('apps.collaborators.urls')),
    path('v1/whatsapp-instances/', include('apps.messaging.urls')),
    path('v1/accounting/', include('apps.accounting.urls')),
    path('v1/customer-plans/', include('apps.plans.urls')),
    path('v1/price-tables/', include('apps.catalog.urls')),
]
