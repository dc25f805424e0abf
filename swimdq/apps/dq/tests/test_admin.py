from __future__ import annotations

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from swimdq.apps.dq.models import DQSubmission
from swimdq.apps.dq.services.submissions import submit_dq
from swimdq.apps.meets.services.meets import create_meet


class DQSubmissionAdminTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.meet_id = create_meet(
            "2024-06-01", "Dolphins", "Sharks",
            {"name": "Ref Rita", "email": "rita@example.com"},
            [{"name": "Jane", "email": "jane@x.com"}],
        )
        cls.submission = submit_dq(
            cls.meet_id,
            team="Dolphins",
            event_number="12",
            heat_number="3",
            lane_number="4",
            swimmer_name="Ana Torres",
            stroke="Breaststroke",
            official_email="jane@x.com",
            infractions=["Kick: Alternating"],
        )

    def setUp(self):
        root = get_user_model().objects.create_superuser("root", "root@x.com", "x")
        self.client.force_login(root)

    def test_add_view_is_forbidden(self):
        resp = self.client.get(reverse("admin:dq_dqsubmission_add"))
        self.assertEqual(resp.status_code, 403)

        resp = self.client.post(reverse("admin:dq_dqsubmission_add"), {
            "meet": self.meet_id,
            "official_email": "stranger@x.com",
        })
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(DQSubmission.objects.count(), 1)

    def test_change_form_does_not_edit_submission(self):
        url = reverse("admin:dq_dqsubmission_change", args=[self.submission.pk])
        self.assertEqual(self.client.get(url).status_code, 200)

        self.client.post(url, {
            "official_email": "stranger@x.com",
            "stroke": "Freestyle",
            "lane_number": "8",
            "_save": "Save",
        })
        stored = DQSubmission.objects.get(pk=self.submission.pk)
        self.assertEqual(stored.official_email, "jane@x.com")
        self.assertEqual(stored.stroke, "Breaststroke")
        self.assertEqual(stored.lane_number, "4")
