from __future__ import annotations

import os
from unittest import mock

from django.contrib.auth import get_user_model
from django.test import SimpleTestCase, TestCase
from django.urls import reverse

from swimdq.apps.meets.models import Meet
from swimdq.apps.meets.services.meets import close_meet, create_meet
from swimdq.swimdq.settings.base import env_list

HEAD = {"name": "Ref Rita", "email": "rita@example.com"}
INVITED = [{"name": "Jane", "email": "jane@x.com"}]


class MeetAdminTest(TestCase):
    def setUp(self):
        root = get_user_model().objects.create_superuser("root", "root@x.com", "x")
        self.client.force_login(root)
        self.meet_id = create_meet("2024-06-01", "Dolphins", "Sharks", HEAD, INVITED)

    def _change_post(self, **overrides):
        data = {
            "date": "2024-06-01",
            "home_team": "Dolphins",
            "away_team": "Sharks",
            "head_official_name": "Ref Rita",
            "head_official_email": "rita@example.com",
            "invited_officials-TOTAL_FORMS": "0",
            "invited_officials-INITIAL_FORMS": "0",
            "invited_officials-MIN_NUM_FORMS": "0",
            "invited_officials-MAX_NUM_FORMS": "1000",
            "_save": "Save",
        }
        data.update(overrides)
        return self.client.post(reverse("admin:meets_meet_change", args=[self.meet_id]), data)

    def test_closed_meet_cannot_be_reopened_from_change_form(self):
        close_meet(self.meet_id)

        resp = self._change_post(status="active", home_team="Orcas")
        self.assertEqual(resp.status_code, 302)

        meet = Meet.objects.get(pk=self.meet_id)
        self.assertEqual(meet.status, Meet.STATUS_CLOSED)
        self.assertEqual(meet.home_team, "Orcas")
        self.assertEqual(meet.name, "Orcas vs Sharks - 2024-06-01")

    def test_name_follows_date_change(self):
        self._change_post(date="2024-07-04")
        self.assertEqual(Meet.objects.get(pk=self.meet_id).name, "Dolphins vs Sharks - 2024-07-04")

    def test_add_view_is_disabled(self):
        resp = self.client.get(reverse("admin:meets_meet_add"))
        self.assertEqual(resp.status_code, 403)

    def test_close_action_closes_selected_meets(self):
        other_id = create_meet("2024-06-02", "Orcas", "Eels", HEAD, INVITED)
        untouched_id = create_meet("2024-06-03", "Rays", "Eels", HEAD, INVITED)

        resp = self.client.post(
            reverse("admin:meets_meet_changelist"),
            {"action": "action_close_meets", "_selected_action": [self.meet_id, other_id]},
            follow=True,
        )
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, "2 meets closed.")
        self.assertTrue(Meet.objects.get(pk=self.meet_id).is_closed)
        self.assertTrue(Meet.objects.get(pk=other_id).is_closed)
        self.assertTrue(Meet.objects.get(pk=untouched_id).is_active)


class MeetNameTest(TestCase):
    def test_save_with_update_fields_refreshes_name(self):
        meet_id = create_meet("2024-06-01", "Dolphins", "Sharks", HEAD, INVITED)
        meet = Meet.objects.get(pk=meet_id)
        meet.away_team = "Eels"
        meet.save(update_fields=["away_team"])
        self.assertEqual(Meet.objects.get(pk=meet_id).name, "Dolphins vs Eels - 2024-06-01")


class EnvListTest(SimpleTestCase):
    def test_unset_uses_explicit_default(self):
        with mock.patch.dict(os.environ, {"ALLOWED_HOSTS": ""}):
            self.assertEqual(env_list("ALLOWED_HOSTS", [".railway.app"]), [".railway.app"])

    def test_unset_without_default_is_empty(self):
        with mock.patch.dict(os.environ, {"CSRF_TRUSTED_ORIGINS": ""}):
            self.assertEqual(env_list("CSRF_TRUSTED_ORIGINS"), [])

    def test_values_are_trimmed(self):
        with mock.patch.dict(os.environ, {"ALLOWED_HOSTS": " a.example.com, ,b.example.com "}):
            self.assertEqual(env_list("ALLOWED_HOSTS", ["*"]), ["a.example.com", "b.example.com"])
