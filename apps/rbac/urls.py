"""
URL routing for user management endpoints.
"""
from django.urls import path
from apps.rbac.views import UserListView, UserDetailView, RoleChangeView

app_name = 'rbac'

urlpatterns = [
    path('', UserListView.as_view(), name='user-list'),
    path('<str:pk>', UserDetailView.as_view(), name='user-detail'),
    path('<str:pk>/role', RoleChangeView.as_view(), name='user-role'),
]
