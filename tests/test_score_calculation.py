import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_review.features.score_calculation import (  # noqa: E402
    calculate_resume_score,
    clamp_score,
    length_adjustment,
    score_breakdown,
)
from sample_resumes import (  # noqa: E402
    PLAIN_RESUME_100_WORDS,
    PLAIN_RESUME_250_WORDS,
    PLAIN_RESUME_900_WORDS,
    SHORT_REACT_RESUME,
    STRONG_RESUME,
)


class ScoreCalculationTests(unittest.TestCase):
    def test_short_react_resume_score(self):
        # 60 + 3 achievements + 2 verbs + 2 technical + 4 soft - 10 short + 5 contact
        self.assertEqual(calculate_resume_score(SHORT_REACT_RESUME), 66)

    def test_breakdown_components(self):
        breakdown = score_breakdown(SHORT_REACT_RESUME)
        self.assertEqual(breakdown.base, 60)
        self.assertEqual(breakdown.achievements, 3)
        self.assertEqual(breakdown.action_verbs, 2)
        self.assertEqual(breakdown.technical_skills, 2)
        self.assertEqual(breakdown.soft_skills, 4)
        self.assertEqual(breakdown.length, -10)
        self.assertEqual(breakdown.contact, 5)
        self.assertEqual(breakdown.raw, 66)

    def test_plain_resume_without_contact(self):
        # 250 words is inside the accepted length window, so only the contact penalty applies.
        self.assertEqual(calculate_resume_score(PLAIN_RESUME_250_WORDS), 55)

    def test_low_scores_are_clamped_to_fifty(self):
        self.assertEqual(score_breakdown(PLAIN_RESUME_100_WORDS).raw, 45)
        self.assertEqual(calculate_resume_score(PLAIN_RESUME_100_WORDS), 50)
        self.assertEqual(calculate_resume_score(PLAIN_RESUME_900_WORDS), 50)
        self.assertEqual(calculate_resume_score(""), 50)

    def test_high_scores_are_clamped_to_ninety_eight(self):
        breakdown = score_breakdown(STRONG_RESUME)
        self.assertEqual(breakdown.achievements, 15)
        self.assertEqual(breakdown.action_verbs, 10)
        self.assertEqual(breakdown.technical_skills, 15)
        self.assertEqual(breakdown.soft_skills, 10)
        self.assertEqual(breakdown.raw, 115)
        self.assertEqual(breakdown.score, 98)

    def test_score_is_bounded_int_and_deterministic(self):
        samples = (
            "",
            "   ",
            SHORT_REACT_RESUME,
            STRONG_RESUME,
            PLAIN_RESUME_250_WORDS,
            PLAIN_RESUME_900_WORDS,
            "python " * 1000,
        )
        for content in samples:
            score = calculate_resume_score(content)
            self.assertIsInstance(score, int)
            self.assertGreaterEqual(score, 50)
            self.assertLessEqual(score, 98)
            self.assertEqual(score, calculate_resume_score(content))

    def test_extra_technical_skill_never_lowers_score(self):
        base = "Worked with python every day. jane@example.com"
        richer = "Worked with python docker every day. jane@example.com"
        self.assertGreaterEqual(calculate_resume_score(richer), calculate_resume_score(base))
        self.assertEqual(
            score_breakdown(richer).technical_skills,
            score_breakdown(base).technical_skills + 2,
        )

    def test_length_adjustment_thresholds(self):
        self.assertEqual(length_adjustment(199), -10)
        self.assertEqual(length_adjustment(200), 0)
        self.assertEqual(length_adjustment(800), 0)
        self.assertEqual(length_adjustment(801), -5)

    def test_clamp_rounds_half_up(self):
        self.assertEqual(clamp_score(70.5), 71)
        self.assertEqual(clamp_score(12), 50)
        self.assertEqual(clamp_score(140), 98)


if __name__ == "__main__":
    unittest.main()
