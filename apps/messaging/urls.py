"""
URL configuration for messaging app.
"""
from django.urls import path
from apps.messaging.views import WhatsappInstanceListView, WhatsappInstanceDetailView

app_name = 'messaging'

urlpatterns = [
    path('', WhatsappInstanceListView.as_view(), name='whatsapp-instance-list'),
    path('<str:pk>', WhatsappInstanceDetailView.as_view(), name='whatsapp-instance-detail'),
]
