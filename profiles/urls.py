"""
Profiles app URLs
"""
from django.urls import path
from . import views

urlpatterns = [
    path('profile', views.ProfileView.as_view(), name='profile-list'),
    path('profile/me', views.MyProfileView.as_view(), name='profile-me'),
    path('profile/user/<str:user_id>', views.UserProfileView.as_view(), name='profile-user'),
    path('profile/experience', views.ExperienceView.as_view(), name='profile-experience'),
    path('profile/experience/<str:entry_id>', views.ExperienceDetailView.as_view(), name='profile-experience-detail'),
    path('profile/education', views.EducationView.as_view(), name='profile-education'),
    path('profile/education/<str:entry_id>', views.EducationDetailView.as_view(), name='profile-education-detail'),
    path('profile/github/<str:username>', views.GithubReposView.as_view(), name='profile-github'),
]
