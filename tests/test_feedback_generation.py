import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_review.core.scoring_config import get_scoring_value  # noqa: E402
from resume_review.features import feedback_messages as messages  # noqa: E402
from resume_review.features.feedback_generation import dedupe_keywords, generate_feedback  # noqa: E402
from resume_review.features.score_calculation import calculate_resume_score  # noqa: E402
from resume_review.schemas.analysis import MAX_KEYWORDS, MAX_STRENGTHS  # noqa: E402
from sample_resumes import (  # noqa: E402
    PLAIN_RESUME_250_WORDS,
    PLAIN_RESUME_900_WORDS,
    SHORT_REACT_RESUME,
    STRONG_RESUME,
)


def _feedback(content: str):
    return generate_feedback(content, calculate_resume_score(content))


class FeedbackGenerationTests(unittest.TestCase):
    def test_short_react_resume_feedback(self):
        feedback = _feedback(SHORT_REACT_RESUME)

        self.assertEqual(
            feedback.strengths,
            [
                "Strong technical skills including: react",
                "Good soft skills including: leadership, communication",
                messages.STRENGTH_ACHIEVEMENTS,
            ],
        )
        self.assertEqual(
            feedback.weaknesses,
            [
                messages.WEAKNESS_TOO_SHORT,
                messages.WEAKNESS_TECHNICAL_SKILLS,
                messages.WEAKNESS_ACTION_VERBS,
            ],
        )
        self.assertEqual(
            feedback.suggestions,
            [
                messages.SUGGESTION_ACHIEVEMENTS,
                "Consider adding relevant technical skills like javascript, typescript, node",
                "Begin bullet points with strong action verbs like achieved, improved, trained",
                messages.SUGGESTION_EXPAND,
            ],
        )
        self.assertEqual(
            feedback.keywords,
            [
                "react",
                "leadership",
                "communication",
                "javascript",
                "typescript",
                "node",
                "teamwork",
                "problem solving",
            ],
        )

    def test_plain_resume_reports_first_four_weaknesses(self):
        feedback = _feedback(PLAIN_RESUME_250_WORDS)

        self.assertEqual(feedback.strengths, [messages.STRENGTH_FALLBACK])
        self.assertEqual(
            feedback.weaknesses,
            [
                messages.WEAKNESS_TECHNICAL_SKILLS,
                messages.WEAKNESS_SOFT_SKILLS,
                messages.WEAKNESS_ACHIEVEMENTS,
                messages.WEAKNESS_ACTION_VERBS,
            ],
        )
        self.assertEqual(len(feedback.suggestions), 5)
        self.assertEqual(feedback.suggestions[-1], messages.SUGGESTION_CONTACT)
        # No skills were found, so only missing-skill recommendations remain.
        self.assertEqual(
            feedback.keywords,
            ["javascript", "typescript", "react", "leadership", "communication"],
        )

    def test_long_resume_gets_trim_feedback(self):
        feedback = _feedback(PLAIN_RESUME_900_WORDS)
        self.assertEqual(feedback.weaknesses[0], messages.WEAKNESS_TOO_LONG)
        self.assertIn(messages.SUGGESTION_TRIM, feedback.suggestions)
        self.assertNotIn(messages.SUGGESTION_EXPAND, feedback.suggestions)

    def test_strong_resume_uses_fallbacks_and_caps(self):
        feedback = _feedback(STRONG_RESUME)

        self.assertEqual(len(feedback.strengths), 4)
        self.assertTrue(feedback.strengths[0].startswith("Strong technical skills including: react, python"))
        self.assertTrue(feedback.strengths[0].endswith(" and more"))
        self.assertTrue(feedback.strengths[1].endswith(" and more"))
        self.assertEqual(feedback.weaknesses, list(messages.WEAKNESS_FALLBACKS))
        self.assertEqual(feedback.suggestions, list(messages.SUGGESTION_FALLBACKS))
        self.assertEqual(len(feedback.keywords), 10)
        self.assertEqual(len(set(feedback.keywords)), 10)

    def test_fallback_suggestions_only_fill_to_three(self):
        # Everything is satisfied except the phone number.
        content = STRONG_RESUME.replace("(555) 123-4567", "")
        feedback = _feedback(content)
        self.assertEqual(
            feedback.suggestions,
            [
                messages.SUGGESTION_CONTACT,
                messages.SUGGESTION_FALLBACKS[0],
                messages.SUGGESTION_FALLBACKS[1],
            ],
        )

    def test_blank_content_returns_fixed_feedback(self):
        for content in ("", "  \n\t "):
            feedback = generate_feedback(content, 50)
            self.assertEqual(feedback.strengths, list(messages.EMPTY_STRENGTHS))
            self.assertEqual(feedback.weaknesses, list(messages.EMPTY_WEAKNESSES))
            self.assertEqual(feedback.suggestions, list(messages.EMPTY_SUGGESTIONS))
            self.assertEqual(feedback.keywords, [])

    def test_caps_hold_for_varied_inputs(self):
        samples = (SHORT_REACT_RESUME, STRONG_RESUME, PLAIN_RESUME_250_WORDS, "java " * 900, "x")
        for content in samples:
            feedback = _feedback(content)
            self.assertLessEqual(len(feedback.strengths), 4)
            self.assertLessEqual(len(feedback.weaknesses), 4)
            self.assertLessEqual(len(feedback.suggestions), 5)
            self.assertLessEqual(len(feedback.keywords), 10)
            self.assertEqual(len(set(feedback.keywords)), len(feedback.keywords))

    def test_caps_match_schema_limits(self):
        self.assertIsNone(get_scoring_value("feedback.limits"))
        feedback = _feedback(STRONG_RESUME)
        self.assertEqual(len(feedback.strengths), MAX_STRENGTHS)
        self.assertEqual(len(feedback.keywords), MAX_KEYWORDS)

    def test_length_strength_window_boundaries(self):
        for words, expected in ((299, False), (300, True), (700, True), (701, False)):
            feedback = _feedback(" ".join(["lorem"] * words))
            with self.subTest(words=words):
                self.assertEqual(messages.STRENGTH_LENGTH in feedback.strengths, expected)

        feedback = _feedback(" ".join(["lorem"] * 300))
        self.assertEqual(feedback.strengths, [messages.STRENGTH_LENGTH, messages.STRENGTH_FALLBACK])

    def test_action_verb_strength_needs_more_than_three_verbs(self):
        three = _feedback("Achieved improved trained")
        four = _feedback("Achieved improved trained managed")
        self.assertNotIn(messages.STRENGTH_ACTION_VERBS, three.strengths)
        self.assertIn(messages.STRENGTH_ACTION_VERBS, four.strengths)

    def test_missing_contact_weakness(self):
        content = "Achieved 20% growth, managed and designed Python, Docker, SQL with leadership and teamwork."
        feedback = _feedback(content)
        self.assertEqual(feedback.weaknesses, [messages.WEAKNESS_TOO_SHORT, messages.WEAKNESS_CONTACT])

        with_email = _feedback(content + " jane@example.com")
        self.assertNotIn(messages.WEAKNESS_CONTACT, with_email.weaknesses)

    def test_dedupe_keywords_keeps_first_seen_order(self):
        self.assertEqual(dedupe_keywords(["a", "b", "a", "c", "b"]), ["a", "b", "c"])


if __name__ == "__main__":
    unittest.main()
