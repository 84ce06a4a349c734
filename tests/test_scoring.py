import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_scanner.scanner.scoring import compose_score, score_band, score_interpretation  # noqa: E402


class ScoringTests(unittest.TestCase):
    def test_no_keywords_leaves_only_formatting_points(self):
        self.assertEqual(compose_score(0, 0, 0), 20)
        self.assertEqual(compose_score(0, 0, 2), 10)

    def test_full_match_without_issues_is_perfect(self):
        self.assertEqual(compose_score(10, 10, 0), 100)

    def test_formatting_points_never_go_negative(self):
        self.assertEqual(compose_score(0, 10, 4), 0)
        self.assertEqual(compose_score(3, 10, 10), 24)

    def test_partial_match(self):
        self.assertEqual(compose_score(5, 10, 0), 60)
        self.assertEqual(compose_score(5, 8, 1), 65)

    def test_halves_round_up(self):
        # 1/32 * 80 = 2.5
        self.assertEqual(compose_score(1, 32, 0), 23)
        self.assertEqual(compose_score(1, 32, 4), 3)

    def test_score_bands(self):
        self.assertEqual(score_band(100), "excellent")
        self.assertEqual(score_band(80), "excellent")
        self.assertEqual(score_band(79), "good")
        self.assertEqual(score_band(60), "good")
        self.assertEqual(score_band(59), "needs_improvement")
        self.assertEqual(score_band(0), "needs_improvement")

    def test_interpretation_follows_band(self):
        self.assertTrue(score_interpretation(90).startswith("Excellent!"))
        self.assertTrue(score_interpretation(65).startswith("Good match."))
        self.assertTrue(score_interpretation(10).startswith("Your resume needs improvement."))


if __name__ == "__main__":
    unittest.main()
