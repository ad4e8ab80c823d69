from datetime import date
from unittest import mock

from django.db import DatabaseError, connection
from django.test import SimpleTestCase, TestCase
from django.test.utils import CaptureQueriesContext

from accounts.models import User
from devconnector.exceptions import ProfileNotFound, StoreError
from posts.models import Post
from profiles.models import Profile
from profiles.services import ProfileService


class ParseSkillsTests(SimpleTestCase):
    """Skills parsing does not touch the database."""

    def test_comma_separated_string_is_trimmed_in_order(self) -> None:
        self.assertEqual(ProfileService.parse_skills("html, css, js"), ["html", "css", "js"])

    def test_blank_items_are_dropped(self) -> None:
        self.assertEqual(ProfileService.parse_skills(" python,, ,django "), ["python", "django"])

    def test_list_input_is_cleaned(self) -> None:
        self.assertEqual(ProfileService.parse_skills([" go ", "", "rust"]), ["go", "rust"])


class ProfileServiceTests(TestCase):

    def setUp(self) -> None:
        self.user = User.objects.create_user(
            email="dev@example.com", password="secret123", name="Dev One"
        )

    def _upsert(self, **fields):
        data = {"status": "Developer", "skills": "python"}
        data.update(fields)
        return ProfileService.upsert(self.user, data)

    def test_upsert_twice_keeps_a_single_profile(self) -> None:
        first = self._upsert(company="Acme")
        second = self._upsert(company="Globex")

        self.assertEqual(Profile.objects.filter(user=self.user).count(), 1)
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(Profile.objects.get(user=self.user).company, "Globex")

    def test_upsert_parses_skills(self) -> None:
        profile = self._upsert(skills="html, css, js")
        profile.refresh_from_db()
        self.assertEqual(profile.skills, ["html", "css", "js"])

    def test_upsert_only_overwrites_supplied_fields(self) -> None:
        self._upsert(company="Acme", location="Berlin", bio="Hello")
        profile = self._upsert(status="Senior Developer", company="", location="Paris")
        profile.refresh_from_db()

        self.assertEqual(profile.status, "Senior Developer")
        self.assertEqual(profile.company, "Acme")
        self.assertEqual(profile.location, "Paris")
        self.assertEqual(profile.bio, "Hello")

    def test_upsert_merges_social_links_individually(self) -> None:
        self._upsert(twitter="https://twitter.com/dev", youtube="https://youtube.com/dev")
        profile = self._upsert(linkedin="https://linkedin.com/in/dev", twitter="https://twitter.com/dev2")
        profile.refresh_from_db()

        self.assertEqual(
            profile.social,
            {
                "twitter": "https://twitter.com/dev2",
                "youtube": "https://youtube.com/dev",
                "linkedin": "https://linkedin.com/in/dev",
            },
        )

    def test_get_by_owner_missing_profile(self) -> None:
        with self.assertRaises(ProfileNotFound):
            ProfileService.get_by_owner(self.user.pk)

    def test_get_by_owner_malformed_id(self) -> None:
        with self.assertRaises(ProfileNotFound):
            ProfileService.get_by_owner("not-a-uuid")

    def test_get_all_is_oldest_first(self) -> None:
        other = User.objects.create_user(email="two@example.com", password="secret123", name="Dev Two")
        first = self._upsert()
        second = ProfileService.upsert(other, {"status": "Student", "skills": "c"})
        Profile.objects.filter(pk=first.pk).update(date=second.date.replace(year=second.date.year - 1))

        self.assertEqual([p.pk for p in ProfileService.get_all()], [first.pk, second.pk])

    def test_add_experience_prepends_with_distinct_ids(self) -> None:
        self._upsert()
        ProfileService.add_experience(
            self.user, {"title": "Junior", "company": "Acme", "from": date(2018, 1, 1), "current": False}
        )
        profile = ProfileService.add_experience(
            self.user, {"title": "Senior", "company": "Globex", "from": date(2020, 5, 1), "current": True}
        )
        profile.refresh_from_db()

        self.assertEqual([item["title"] for item in profile.experience], ["Senior", "Junior"])
        self.assertEqual(profile.experience[0]["from"], "2020-05-01")
        ids = [item["id"] for item in profile.experience]
        self.assertEqual(len(set(ids)), 2)

    def test_add_entry_without_profile(self) -> None:
        with self.assertRaises(ProfileNotFound):
            ProfileService.add_education(
                self.user,
                {"school": "MIT", "degree": "BSc", "fieldofstudy": "CS", "from": date(2010, 9, 1)},
            )

    def test_remove_experience(self) -> None:
        self._upsert()
        profile = ProfileService.add_experience(
            self.user, {"title": "Junior", "company": "Acme", "from": date(2018, 1, 1)}
        )
        entry_id = profile.experience[0]["id"]

        profile = ProfileService.remove_experience(self.user, entry_id)
        profile.refresh_from_db()
        self.assertEqual(profile.experience, [])

    def test_remove_unknown_entry_is_a_no_op(self) -> None:
        self._upsert()
        ProfileService.add_education(
            self.user,
            {"school": "MIT", "degree": "BSc", "fieldofstudy": "CS", "from": date(2010, 9, 1)},
        )

        profile = ProfileService.remove_education(self.user, "does-not-exist")
        profile.refresh_from_db()
        self.assertEqual(len(profile.education), 1)

    def test_delete_cascade_removes_posts_profile_and_user(self) -> None:
        self._upsert()
        Post.objects.create(user=self.user, text="one", name=self.user.name)
        Post.objects.create(user=self.user, text="two", name=self.user.name)
        bystander = User.objects.create_user(email="else@example.com", password="secret123", name="Else")
        Post.objects.create(user=bystander, text="stays", name=bystander.name)

        ProfileService.delete_cascade(self.user)

        self.assertFalse(Post.objects.filter(user_id=self.user.pk).exists())
        self.assertFalse(Profile.objects.filter(user_id=self.user.pk).exists())
        self.assertFalse(User.objects.filter(pk=self.user.pk).exists())
        self.assertEqual(Post.objects.count(), 1)

    def test_delete_cascade_order_is_posts_profile_user(self) -> None:
        self._upsert()
        Post.objects.create(user=self.user, text="one", name=self.user.name)

        with CaptureQueriesContext(connection) as ctx:
            ProfileService.delete_cascade(self.user)

        deletes = [q["sql"] for q in ctx.captured_queries if q["sql"].startswith("DELETE")]

        def first_delete(table):
            return next(i for i, sql in enumerate(deletes) if f'"{table}"' in sql.split(" WHERE")[0])

        self.assertLess(first_delete("posts_post"), first_delete("profiles_profile"))
        self.assertLess(first_delete("profiles_profile"), first_delete("accounts_user"))

    def test_database_failures_surface_as_store_error(self) -> None:
        with mock.patch(
            "profiles.services.Profile.objects.select_related",
            side_effect=DatabaseError("connection lost"),
        ):
            with self.assertRaises(StoreError):
                ProfileService.get_all()
