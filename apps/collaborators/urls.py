"""
URL configuration for collaborators app.
"""
from django.urls import path
from apps.collaborators.views import CollaboratorListView, CollaboratorDetailView

app_name = 'collaborators'

urlpatterns = [
    path('', CollaboratorListView.as_view(), name='collaborator-list'),
    path('<str:pk>', CollaboratorDetailView.as_view(), name='collaborator-detail'),
]
