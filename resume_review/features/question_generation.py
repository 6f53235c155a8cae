from __future__ import annotations

import logging
import random
import time

from resume_review.schemas.analysis import InterviewQuestion
from resume_review.taxonomy import Lexicon

from .skill_detection import detect_skills

logger = logging.getLogger(__name__)

_TECHNICAL_QUESTION_LIMIT = 3
_BEHAVIORAL_QUESTION_LIMIT = 2

TECHNICAL_TEMPLATES = (
    "Describe your experience with {skill}. What challenging problems have you solved with it?",
    "How have you used {skill} in a production environment?",
    "What advanced features of {skill} are you familiar with?",
    "Can you explain a complex concept related to {skill} in simple terms?",
    "How do you stay updated with the latest developments in {skill}?",
)

SOFT_SKILL_TEMPLATES = (
    "Describe a situation where you demonstrated strong {skill}. What was the outcome?",
    "How do you apply {skill} when working in a team environment?",
    "Tell me about a time when your {skill} helped resolve a conflict",
    "How do you balance {skill} with meeting project deadlines?",
    "Give an example of how you've improved your {skill} over time",
)

GENERAL_QUESTIONS = (
    "Tell me about a challenging project you worked on and how you overcame obstacles.",
    "How do you approach learning new technologies or methodologies?",
    "Describe a situation where you had to make a difficult decision with limited information.",
    "How do you prioritize tasks when working on multiple projects with competing deadlines?",
    "Tell me about a time when you had to collaborate with a difficult team member.",
    "What steps do you take to ensure quality in your work?",
    "How do you stay current with industry trends and developments?",
    "Describe your communication style when working with non-technical stakeholders.",
    "How have you handled a situation where you made a mistake?",
    "What has been your most significant professional achievement and why?",
)


def _skill_questions(
    skills: tuple[str, ...],
    templates: tuple[str, ...],
    limit: int,
    prefix: str,
    category: str,
    rng: random.Random,
    stamp: int,
) -> list[InterviewQuestion]:
    picked = rng.sample(list(skills), k=min(limit, len(skills)))
    return [
        InterviewQuestion(
            id=f"{prefix}-{index}-{stamp}",
            text=rng.choice(templates).format(skill=skill),
            category=category,
        )
        for index, skill in enumerate(picked)
    ]


def generate_questions(
    content: str,
    count: int = 10,
    *,
    rng: random.Random | None = None,
    lexicon: Lexicon | None = None,
) -> list[InterviewQuestion]:
    """Build practice interview questions from the skills found in a resume.

    Technical and behavioral questions come first; general questions fill
    the remaining slots. Pass ``rng`` for reproducible output.
    """
    if count < 1:
        raise ValueError("count must be at least 1")

    rng = rng or random.Random()
    stamp = int(time.time() * 1000)
    skills = detect_skills(content, lexicon=lexicon)

    questions = _skill_questions(
        skills.found_technical_skills,
        TECHNICAL_TEMPLATES,
        _TECHNICAL_QUESTION_LIMIT,
        "tech",
        "Technical",
        rng,
        stamp,
    )
    questions.extend(
        _skill_questions(
            skills.found_soft_skills,
            SOFT_SKILL_TEMPLATES,
            _BEHAVIORAL_QUESTION_LIMIT,
            "soft",
            "Behavioral",
            rng,
            stamp,
        )
    )

    general_needed = max(0, count - len(questions))
    general = list(GENERAL_QUESTIONS)
    rng.shuffle(general)
    for index, text in enumerate(general[:general_needed]):
        category = "Situational" if index % 2 == 0 else "Experience"
        questions.append(InterviewQuestion(id=f"general-{index}-{stamp}", text=text, category=category))

    logger.debug("interview_questions count=%s requested=%s", len(questions), count)
    return questions[:count]
