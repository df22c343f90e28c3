"""
URL configuration for accounting app.
"""
from django.urls import path
from apps.accounting.views import AccountingListView, AccountingDetailView

app_name = 'accounting'

urlpatterns = [
    path('', AccountingListView.as_view(), name='accounting-list'),
    path('<str:pk>', AccountingDetailView.as_view(), name='accounting-detail'),
]
