"""
Accounts app URLs
"""
from django.urls import path
from .views import AuthView, RegisterView

urlpatterns = [
    path('users', RegisterView.as_view(), name='register'),
    path('auth', AuthView.as_view(), name='auth'),
]
