from __future__ import annotations

import logging

from resume_review.core.scoring_config import get_scoring_value
from resume_review.schemas.analysis import (
    MAX_KEYWORDS,
    MAX_STRENGTHS,
    MAX_SUGGESTIONS,
    MAX_WEAKNESSES,
    ResumeFeedback,
)
from resume_review.taxonomy import Lexicon, get_default_lexicon

from . import feedback_messages as messages
from .achievement_detection import AchievementSignal, detect_achievements, unused_action_verbs
from .skill_detection import DetectionResult, detect_skills
from .text_signals import ContactInfo, count_words, detect_contact_info, is_blank

logger = logging.getLogger(__name__)


def _int(path: str, default: int) -> int:
    return int(get_scoring_value(f"feedback.{path}", default))


def _skill_summary(template: str, skills: tuple[str, ...], shown: int) -> str:
    more = messages.MORE_SUFFIX if len(skills) > shown else ""
    return template.format(skills=", ".join(skills[:shown]), more=more)


def dedupe_keywords(keywords: list[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for keyword in keywords:
        if keyword in seen:
            continue
        seen.add(keyword)
        unique.append(keyword)
    return unique


def empty_content_feedback() -> ResumeFeedback:
    return ResumeFeedback(
        strengths=list(messages.EMPTY_STRENGTHS),
        weaknesses=list(messages.EMPTY_WEAKNESSES),
        suggestions=list(messages.EMPTY_SUGGESTIONS),
        keywords=[],
    )


def build_strengths(
    skills: DetectionResult,
    signal: AchievementSignal,
    word_count: int,
) -> list[str]:
    strengths: list[str] = []

    if skills.found_technical_skills:
        strengths.append(
            _skill_summary(
                messages.STRENGTH_TECHNICAL_SKILLS,
                skills.found_technical_skills,
                _int("strengths.technical_skills_shown", 5),
            )
        )
    if skills.found_soft_skills:
        strengths.append(
            _skill_summary(
                messages.STRENGTH_SOFT_SKILLS,
                skills.found_soft_skills,
                _int("strengths.soft_skills_shown", 3),
            )
        )
    if signal.achievement_matches > 0:
        strengths.append(messages.STRENGTH_ACHIEVEMENTS)
    if signal.action_verb_matches > _int("strengths.strong_verb_threshold", 3):
        strengths.append(messages.STRENGTH_ACTION_VERBS)
    if _int("strengths.ideal_length.min_words", 300) <= word_count <= _int("strengths.ideal_length.max_words", 700):
        strengths.append(messages.STRENGTH_LENGTH)

    if len(strengths) < _int("strengths.min_items", 2):
        strengths.append(messages.STRENGTH_FALLBACK)

    return strengths[:MAX_STRENGTHS]


def build_weaknesses(
    skills: DetectionResult,
    signal: AchievementSignal,
    contact: ContactInfo,
    word_count: int,
) -> list[str]:
    weaknesses: list[str] = []

    if word_count < int(get_scoring_value("scoring.length.min_words", 200)):
        weaknesses.append(messages.WEAKNESS_TOO_SHORT)
    elif word_count > int(get_scoring_value("scoring.length.max_words", 800)):
        weaknesses.append(messages.WEAKNESS_TOO_LONG)

    if len(skills.found_technical_skills) < _int("weaknesses.min_technical_skills", 3):
        weaknesses.append(messages.WEAKNESS_TECHNICAL_SKILLS)
    if len(skills.found_soft_skills) < _int("weaknesses.min_soft_skills", 2):
        weaknesses.append(messages.WEAKNESS_SOFT_SKILLS)
    if signal.achievement_matches == 0:
        weaknesses.append(messages.WEAKNESS_ACHIEVEMENTS)
    if signal.action_verb_matches < _int("weaknesses.min_action_verbs", 3):
        weaknesses.append(messages.WEAKNESS_ACTION_VERBS)
    if contact.missing:
        weaknesses.append(messages.WEAKNESS_CONTACT)

    if len(weaknesses) < _int("weaknesses.min_items", 2):
        weaknesses.extend(messages.WEAKNESS_FALLBACKS)

    return weaknesses[:MAX_WEAKNESSES]


def build_suggestions(
    content: str,
    skills: DetectionResult,
    signal: AchievementSignal,
    contact: ContactInfo,
    word_count: int,
    lexicon: Lexicon,
) -> list[str]:
    suggestions: list[str] = []
    named = _int("suggestions.items_named", 3)

    if signal.achievement_matches < _int("suggestions.achievement_target", 3):
        suggestions.append(messages.SUGGESTION_ACHIEVEMENTS)

    if len(skills.found_technical_skills) < _int("suggestions.technical_skill_target", 5):
        missing = lexicon.missing_technical_skills(skills.found_technical_skills)[:named]
        if missing:
            suggestions.append(messages.SUGGESTION_TECHNICAL_SKILLS.format(skills=", ".join(missing)))

    if signal.action_verb_matches < _int("suggestions.action_verb_target", 5):
        verbs = unused_action_verbs(content, lexicon=lexicon)[:named]
        if verbs:
            suggestions.append(messages.SUGGESTION_ACTION_VERBS.format(verbs=", ".join(verbs)))

    if word_count > int(get_scoring_value("scoring.length.max_words", 800)):
        suggestions.append(messages.SUGGESTION_TRIM)
    elif word_count < _int("suggestions.expand_below_words", 300):
        suggestions.append(messages.SUGGESTION_EXPAND)

    if not contact.complete:
        suggestions.append(messages.SUGGESTION_CONTACT)

    min_items = _int("suggestions.min_items", 3)
    for fallback in messages.SUGGESTION_FALLBACKS:
        if len(suggestions) >= min_items:
            break
        suggestions.append(fallback)

    return suggestions[:MAX_SUGGESTIONS]


def build_keywords(skills: DetectionResult, lexicon: Lexicon) -> list[str]:
    keywords = [
        *skills.found_technical_skills[: _int("keywords.found_technical", 5)],
        *skills.found_soft_skills[: _int("keywords.found_soft", 3)],
        *lexicon.missing_technical_skills(skills.found_technical_skills)[: _int("keywords.missing_technical", 3)],
        *lexicon.missing_soft_skills(skills.found_soft_skills)[: _int("keywords.missing_soft", 2)],
    ]
    return dedupe_keywords(keywords)[:MAX_KEYWORDS]


def generate_feedback(content: str, score: int, *, lexicon: Lexicon | None = None) -> ResumeFeedback:
    """Build strengths, weaknesses, suggestions and keywords for a resume.

    ``score`` must come from ``calculate_resume_score`` for the same content;
    it is not recomputed here. Blank content returns the fixed degraded
    feedback without running any detector.
    """
    if is_blank(content):
        logger.info("resume_feedback_empty_content")
        return empty_content_feedback()

    lexicon = lexicon or get_default_lexicon()
    skills = detect_skills(content, lexicon=lexicon)
    signal = detect_achievements(content, lexicon=lexicon)
    contact = detect_contact_info(content)
    word_count = count_words(content)

    feedback = ResumeFeedback(
        strengths=build_strengths(skills, signal, word_count),
        weaknesses=build_weaknesses(skills, signal, contact, word_count),
        suggestions=build_suggestions(content, skills, signal, contact, word_count, lexicon),
        keywords=build_keywords(skills, lexicon),
    )
    logger.debug(
        "resume_feedback score=%s strengths=%s weaknesses=%s suggestions=%s keywords=%s",
        score,
        len(feedback.strengths),
        len(feedback.weaknesses),
        len(feedback.suggestions),
        len(feedback.keywords),
    )
    return feedback
