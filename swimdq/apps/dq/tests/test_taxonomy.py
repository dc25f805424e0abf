from __future__ import annotations

from django.test import SimpleTestCase

from swimdq.apps.dq.taxonomy import (
    INFRACTIONS,
    MEDLEY,
    OTHER_CATEGORY,
    Flat,
    Grouped,
    is_offered,
    labels_for,
    other_entry,
    sections_for,
    stroke_choices,
)

MEDLEY_VALUES = ["Stroke Infraction", "Out of Sequence", "Fourth Distance Wrong Stroke"]


class TaxonomyShapeTest(SimpleTestCase):
    def test_flat_values_are_labels(self):
        for stroke, entry in INFRACTIONS.items():
            if not isinstance(entry, Flat):
                continue
            for opt in entry.options(stroke):
                self.assertEqual(opt.stored_value, opt.display_label)

    def test_grouped_values_are_prefixed_except_other(self):
        for stroke, entry in INFRACTIONS.items():
            if not isinstance(entry, Grouped):
                continue
            for opt in entry.options(stroke):
                if opt.category == OTHER_CATEGORY:
                    self.assertEqual(opt.stored_value, opt.display_label)
                else:
                    self.assertEqual(opt.stored_value, f"{opt.category}: {opt.display_label}")

    def test_stroke_choices_in_declaration_order(self):
        self.assertEqual(
            [key for key, _ in stroke_choices()],
            ["Medley", "Butterfly", "Backstroke", "Breaststroke", "Freestyle", "Relays", "Miscellaneous"],
        )


class LabelsForTest(SimpleTestCase):
    def test_medley_alone_is_not_duplicated(self):
        self.assertEqual([o.stored_value for o in labels_for(MEDLEY)], MEDLEY_VALUES)

    def test_medley_options_come_first(self):
        values = [o.stored_value for o in labels_for("Butterfly")]
        self.assertEqual(values[:3], MEDLEY_VALUES)
        self.assertEqual(values[3], "Kick: Alternating")
        self.assertIn("Not Toward Wall", values)
        self.assertNotIn("Other: Not Toward Wall", values)

    def test_breaststroke_other_keeps_slash_label(self):
        values = [o.stored_value for o in labels_for("Breaststroke")]
        self.assertIn("Cycle: Double Pulls/Kicks", values)
        self.assertIn("Arms: Elbows Recovered", values)

    def test_unknown_or_empty_stroke(self):
        self.assertEqual(labels_for("Sidestroke"), [])
        self.assertEqual(labels_for(""), [])
        self.assertEqual(sections_for("Sidestroke"), [])

    def test_sections_titles(self):
        titles = [s.title for s in sections_for("Breaststroke")]
        self.assertEqual(titles, ["Medley Infractions", "Kick", "Arms", "Touch", "Other"])

    def test_is_offered(self):
        self.assertTrue(is_offered("Breaststroke", "Kick: Scissors"))
        self.assertTrue(is_offered("Breaststroke", "Out of Sequence"))
        self.assertFalse(is_offered("Freestyle", "Kick: Scissors"))
        self.assertFalse(is_offered("", "Out of Sequence"))


class OtherEntryTest(SimpleTestCase):
    def test_trims_text(self):
        self.assertEqual(other_entry("  slipped  "), "Other: slipped")

    def test_blank_text_has_no_entry(self):
        self.assertIsNone(other_entry(""))
        self.assertIsNone(other_entry("   "))
        self.assertIsNone(other_entry(None))
