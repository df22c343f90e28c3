"""
URL configuration for catalog app.
"""
from django.urls import path
from apps.catalog.views import PriceTableListView, PriceTableDetailView

app_name = 'catalog'

urlpatterns = [
    path('', PriceTableListView.as_view(), name='price-table-list'),
    path('<str:pk>', PriceTableDetailView.as_view(), name='price-table-detail'),
]
