"""
Posts app URLs
"""
from django.urls import path
from . import views

urlpatterns = [
    path('posts', views.PostListView.as_view(), name='post-list'),
    path('posts/like/<str:post_id>', views.PostLikeView.as_view(), name='post-like'),
    path('posts/unlike/<str:post_id>', views.PostUnlikeView.as_view(), name='post-unlike'),
    path('posts/comment/<str:post_id>', views.PostCommentView.as_view(), name='post-comment'),
    path('posts/comment/<str:post_id>/<str:comment_id>', views.PostCommentDetailView.as_view(), name='post-comment-detail'),
    path('posts/<str:post_id>', views.PostDetailView.as_view(), name='post-detail'),
]
