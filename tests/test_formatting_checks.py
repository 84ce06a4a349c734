import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_scanner.scanner.formatting import (  # noqa: E402
    FORMATTING_ISSUES,
    HIGH_SPECIAL_CHARS,
    MISSING_EMAIL,
    MISSING_PHONE,
    MISSING_SECTION_HEADERS,
    RESUME_TOO_SHORT,
    check_formatting,
    count_section_headers,
    has_email,
    has_phone,
    special_char_ratio,
)

COMPLETE_RESUME = (
    "Jane Doe\n"
    "jane.doe@example.com | (555) 123-4567 | Austin, TX\n"
    "Experience\n"
    "Senior Software Engineer at Example Corp, 2019 to present. Built Python services on AWS "
    "and led a team of four engineers delivering data pipelines for analytics.\n"
    "Education\n"
    "B.S. Computer Science, University of Texas\n"
    "Skills\n"
    "Python, Docker, Kubernetes, PostgreSQL, Terraform\n"
)


class FormattingCheckTests(unittest.TestCase):
    def test_complete_resume_has_no_issues(self):
        self.assertGreater(len(COMPLETE_RESUME.strip()), 200)
        self.assertEqual(check_formatting(COMPLETE_RESUME), [])

    def test_empty_resume_flags_everything_but_special_characters(self):
        self.assertEqual(
            check_formatting(""),
            [MISSING_EMAIL, MISSING_PHONE, RESUME_TOO_SHORT, MISSING_SECTION_HEADERS],
        )
        self.assertEqual(check_formatting(None), check_formatting(""))

    def test_punctuation_heavy_text_is_flagged(self):
        issues = check_formatting("***###@@@" * 30)
        self.assertIn(HIGH_SPECIAL_CHARS, issues)
        self.assertEqual(
            issues,
            [MISSING_EMAIL, MISSING_PHONE, HIGH_SPECIAL_CHARS, MISSING_SECTION_HEADERS],
        )

    def test_issue_catalog_order(self):
        self.assertEqual(
            FORMATTING_ISSUES,
            (MISSING_EMAIL, MISSING_PHONE, RESUME_TOO_SHORT, HIGH_SPECIAL_CHARS, MISSING_SECTION_HEADERS),
        )
        self.assertEqual(MISSING_EMAIL, "Missing email address")
        self.assertEqual(MISSING_PHONE, "Missing phone number")
        self.assertEqual(RESUME_TOO_SHORT, "Resume is very short (may be incomplete)")

    def test_phone_formats(self):
        for value in ("(555) 123-4567", "+1 555-123-4567", "555.123.4567", "5551234567"):
            self.assertTrue(has_phone(value), value)
        self.assertFalse(has_phone("call 12345"))

    def test_email_detection(self):
        self.assertTrue(has_email("reach me at jane.doe+jobs@mail.example.co"))
        self.assertFalse(has_email("jane.doe at example dot com"))

    def test_length_threshold_uses_trimmed_text(self):
        self.assertIn(RESUME_TOO_SHORT, check_formatting("   " + "a" * 199 + "   "))
        self.assertNotIn(RESUME_TOO_SHORT, check_formatting("a" * 200))

    def test_two_of_three_section_headers_are_enough(self):
        self.assertEqual(count_section_headers("WORK EXPERIENCE ... technical skills"), 2)
        self.assertNotIn(MISSING_SECTION_HEADERS, check_formatting("Employment history. Core competencies."))
        self.assertIn(MISSING_SECTION_HEADERS, check_formatting("Education only"))

    def test_special_char_ratio_of_empty_text_is_zero(self):
        self.assertEqual(special_char_ratio(""), 0.0)
        self.assertAlmostEqual(special_char_ratio("ab!!"), 0.5)


if __name__ == "__main__":
    unittest.main()
