from __future__ import annotations

from django.test import TestCase

from swimdq.apps.dq.models import DQSubmission
from swimdq.apps.dq.services.submissions import NotAuthorized, is_invited, submit_dq
from swimdq.apps.meets.services.meets import MeetNotFound, close_meet, create_meet, get_meet


def _payload(**overrides):
    data = dict(
        team="Dolphins",
        event_number="12",
        heat_number="3",
        lane_number="4",
        swimmer_name="Ana Torres",
        stroke="Breaststroke",
        official_email="Jane@X.com",
        infractions=["Kick: Alternating", "Touch: No Touch", "Other: slipped"],
        notes="",
    )
    data.update(overrides)
    return data


class SubmitDQTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.meet_id = create_meet(
            "2024-06-01", "Dolphins", "Sharks",
            {"name": "Ref Rita", "email": "rita@example.com"},
            [{"name": "Jane", "email": "jane@x.com"}],
        )

    def test_invited_email_is_case_insensitive(self):
        meet = get_meet(self.meet_id)
        self.assertTrue(is_invited(meet, "Jane@X.com"))
        self.assertTrue(is_invited(meet, " jane@x.com "))
        self.assertFalse(is_invited(meet, "rita@example.com"))
        self.assertFalse(is_invited(meet, ""))

    def test_submission_is_stored_pending(self):
        sub = submit_dq(self.meet_id, **_payload())

        stored = DQSubmission.objects.get(pk=sub.pk)
        self.assertEqual(stored.status, DQSubmission.STATUS_PENDING)
        self.assertEqual(stored.meet_id, self.meet_id)
        self.assertEqual(
            stored.infractions,
            ["Kick: Alternating", "Touch: No Touch", "Other: slipped"],
        )
        self.assertEqual(stored.official_email, "Jane@X.com")
        self.assertIsNotNone(stored.submitted_at)

    def test_empty_infractions_are_allowed(self):
        sub = submit_dq(self.meet_id, **_payload(infractions=[]))
        self.assertEqual(DQSubmission.objects.get(pk=sub.pk).infractions, [])

    def test_uninvited_email_writes_nothing(self):
        with self.assertRaises(NotAuthorized) as ctx:
            submit_dq(self.meet_id, **_payload(official_email="stranger@x.com"))
        self.assertEqual(str(ctx.exception), "Email not authorized to submit for this meet.")
        self.assertEqual(DQSubmission.objects.count(), 0)

    def test_head_official_is_not_implicitly_invited(self):
        with self.assertRaises(NotAuthorized):
            submit_dq(self.meet_id, **_payload(official_email="rita@example.com"))

    def test_unknown_meet(self):
        with self.assertRaises(MeetNotFound):
            submit_dq(999999, **_payload())

    def test_closed_meet_still_accepts(self):
        close_meet(self.meet_id)
        submit_dq(self.meet_id, **_payload())
        self.assertEqual(DQSubmission.objects.count(), 1)
