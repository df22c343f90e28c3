"""
URL configuration for plans app.
"""
from django.urls import path
from apps.plans.views import CustomerPlanListView, CustomerPlanDetailView

app_name = 'plans'

urlpatterns = [
    path('', CustomerPlanListView.as_view(), name='customer-plan-list'),
    path('<str:pk>', CustomerPlanDetailView.as_view(), name='customer-plan-detail'),
]
