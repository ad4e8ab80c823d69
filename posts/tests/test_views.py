from django.urls import reverse
from rest_framework.test import APITestCase

from accounts.authentication import create_access_token
from accounts.models import User
from posts.models import Post


class PostViewTests(APITestCase):
    """Post endpoints under /api/posts."""

    def setUp(self) -> None:
        self.author = User.objects.create_user(
            email="author@example.com", password="secret123", name="Author"
        )
        self.reader = User.objects.create_user(
            email="reader@example.com", password="secret123", name="Reader"
        )
        self.login(self.author)

    def login(self, user) -> None:
        self.client.credentials(HTTP_X_AUTH_TOKEN=create_access_token(user))

    def create_post(self, text="Hello world"):
        return self.client.post(reverse("post-list"), {"text": text})

    def test_posts_require_token(self) -> None:
        self.client.credentials()
        response = self.client.get(reverse("post-list"))
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"msg": "No token, authorization denied"})

    def test_create_post(self) -> None:
        response = self.create_post()
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["text"], "Hello world")
        self.assertEqual(body["name"], "Author")
        self.assertEqual(body["user"], str(self.author.pk))
        self.assertEqual(body["likes"], [])

    def test_create_post_with_empty_text(self) -> None:
        response = self.create_post(text="")
        self.assertEqual(response.status_code, 400)
        self.assertIn("Text is required", [error["msg"] for error in response.json()["errors"]])
        self.assertFalse(Post.objects.exists())

    def test_list_and_get_post(self) -> None:
        post_id = self.create_post().json()["id"]

        listing = self.client.get(reverse("post-list"))
        self.assertEqual(listing.status_code, 200)
        self.assertEqual([post["id"] for post in listing.json()], [post_id])

        detail = self.client.get(reverse("post-detail", kwargs={"post_id": post_id}))
        self.assertEqual(detail.status_code, 200)
        self.assertEqual(detail.json()["id"], post_id)

    def test_get_malformed_id_is_404(self) -> None:
        response = self.client.get(reverse("post-detail", kwargs={"post_id": "not-an-id"}))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"msg": "Post not found"})

    def test_delete_someone_elses_post(self) -> None:
        post_id = self.create_post().json()["id"]
        self.login(self.reader)

        response = self.client.delete(reverse("post-detail", kwargs={"post_id": post_id}))
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"msg": "User not authorized"})
        self.assertTrue(Post.objects.filter(pk=post_id).exists())

    def test_delete_own_post(self) -> None:
        post_id = self.create_post().json()["id"]
        response = self.client.delete(reverse("post-detail", kwargs={"post_id": post_id}))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"msg": "Post removed"})

    def test_like_and_unlike(self) -> None:
        post_id = self.create_post().json()["id"]
        self.login(self.reader)

        liked = self.client.put(reverse("post-like", kwargs={"post_id": post_id}))
        self.assertEqual(liked.status_code, 200)
        self.assertEqual(liked.json(), [{"user": str(self.reader.pk)}])

        again = self.client.put(reverse("post-like", kwargs={"post_id": post_id}))
        self.assertEqual(again.status_code, 400)
        self.assertEqual(again.json(), {"msg": "Post already liked"})

        unliked = self.client.put(reverse("post-unlike", kwargs={"post_id": post_id}))
        self.assertEqual(unliked.status_code, 200)
        self.assertEqual(unliked.json(), [])

        again = self.client.put(reverse("post-unlike", kwargs={"post_id": post_id}))
        self.assertEqual(again.status_code, 400)
        self.assertEqual(again.json(), {"msg": "Post has not yet been liked"})

    def test_like_missing_post(self) -> None:
        response = self.client.put(reverse("post-like", kwargs={"post_id": "abc"}))
        self.assertEqual(response.status_code, 404)

    def test_comment_and_delete_comment(self) -> None:
        post_id = self.create_post().json()["id"]
        self.login(self.reader)

        empty = self.client.post(reverse("post-comment", kwargs={"post_id": post_id}), {"text": ""})
        self.assertEqual(empty.status_code, 400)

        created = self.client.post(reverse("post-comment", kwargs={"post_id": post_id}), {"text": "Nice"})
        self.assertEqual(created.status_code, 200)
        comment_id = created.json()[0]["id"]

        url = reverse("post-comment-detail", kwargs={"post_id": post_id, "comment_id": comment_id})
        self.login(self.author)
        self.assertEqual(self.client.delete(url).status_code, 401)

        self.login(self.reader)
        removed = self.client.delete(url)
        self.assertEqual(removed.status_code, 200)
        self.assertEqual(removed.json(), [])

        missing = self.client.delete(url)
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json(), {"msg": "Comment does not exist"})
