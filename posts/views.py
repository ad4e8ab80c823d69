"""
Posts app views

All post endpoints require a token.
"""
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import PostSerializer, TextSerializer
from .services import PostService


class PostListView(APIView):
    """
    GET /api/posts  - List posts, newest first
    POST /api/posts - Create a post
    """

    def get(self, request):
        posts = PostService.list_posts()
        return Response(PostSerializer(posts, many=True).data)

    def post(self, request):
        serializer = TextSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        post = PostService.create(request.user, serializer.validated_data['text'])
        return Response(PostSerializer(post).data)


class PostDetailView(APIView):
    """
    GET /api/posts/{post_id}    - Retrieve a post
    DELETE /api/posts/{post_id} - Delete one of your own posts
    """

    def get(self, request, post_id):
        post = PostService.get_by_id(post_id)
        return Response(PostSerializer(post).data)

    def delete(self, request, post_id):
        PostService.delete_by_id(request.user, post_id)
        return Response({'msg': 'Post removed'})


class PostLikeView(APIView):
    """
    PUT /api/posts/like/{post_id}
    """

    def put(self, request, post_id):
        return Response(PostService.like(request.user, post_id))


class PostUnlikeView(APIView):
    """
    PUT /api/posts/unlike/{post_id}
    """

    def put(self, request, post_id):
        return Response(PostService.unlike(request.user, post_id))


class PostCommentView(APIView):
    """
    POST /api/posts/comment/{post_id} - Comment on a post
    """

    def post(self, request, post_id):
        serializer = TextSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comments = PostService.add_comment(request.user, post_id, serializer.validated_data['text'])
        return Response(comments)


class PostCommentDetailView(APIView):
    """
    DELETE /api/posts/comment/{post_id}/{comment_id} - Delete your own comment
    """

    def delete(self, request, post_id, comment_id):
        return Response(PostService.remove_comment(request.user, post_id, comment_id))
