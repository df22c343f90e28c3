"""
URL routing for authentication endpoints.
"""
from django.urls import path
from apps.rbac.views_auth import LoginView, LogoutView, RefreshTokenView, UserProfileView

app_name = 'auth'

urlpatterns = [
    path('login', LoginView.as_view(), name='login'),
    path('logout', LogoutView.as_view(), name='logout'),
    path('refresh-token', RefreshTokenView.as_view(), name='refresh-token'),
    path('me', UserProfileView.as_view(), name='profile'),
]
