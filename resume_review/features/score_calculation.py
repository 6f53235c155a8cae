from __future__ import annotations

import logging
import math

from pydantic import BaseModel

from resume_review.core.scoring_config import get_scoring_value
from resume_review.taxonomy import Lexicon

from .achievement_detection import detect_achievements
from .skill_detection import detect_skills
from .text_signals import count_words, detect_contact_info

logger = logging.getLogger(__name__)


class ScoreBreakdown(BaseModel):
    base: float
    achievements: float
    action_verbs: float
    technical_skills: float
    soft_skills: float
    length: float
    contact: float
    raw: float
    score: int


def _value(path: str, default: float) -> float:
    return float(get_scoring_value(f"scoring.{path}", default))


def _capped(count: int, weight_key: str, default_weight: float, default_cap: float) -> float:
    weight = _value(f"weights.{weight_key}", default_weight)
    cap = _value(f"caps.{weight_key}", default_cap)
    return min(cap, count * weight)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(raw: float) -> int:
    low = int(_value("clamp.min", 50))
    high = int(_value("clamp.max", 98))
    return min(high, max(low, _round_half_up(raw)))


def length_adjustment(word_count: int) -> float:
    if word_count < _value("length.min_words", 200):
        return -_value("length.short_penalty", 10)
    if word_count > _value("length.max_words", 800):
        return -_value("length.long_penalty", 5)
    return 0.0


def score_breakdown(content: str, *, lexicon: Lexicon | None = None) -> ScoreBreakdown:
    skills = detect_skills(content, lexicon=lexicon)
    signal = detect_achievements(content, lexicon=lexicon)
    contact = detect_contact_info(content)

    base = _value("base", 60)
    achievements = _capped(signal.achievement_matches, "achievement", 3, 15)
    action_verbs = _capped(signal.action_verb_matches, "action_verb", 2, 10)
    technical = _capped(len(skills.found_technical_skills), "technical_skill", 2, 15)
    soft = _capped(len(skills.found_soft_skills), "soft_skill", 2, 10)
    length = length_adjustment(count_words(content))

    if contact.complete:
        contact_delta = _value("contact.complete_bonus", 5)
    elif contact.missing:
        contact_delta = -_value("contact.missing_penalty", 5)
    else:
        contact_delta = 0.0

    raw = base + achievements + action_verbs + technical + soft + length + contact_delta
    return ScoreBreakdown(
        base=base,
        achievements=achievements,
        action_verbs=action_verbs,
        technical_skills=technical,
        soft_skills=soft,
        length=length,
        contact=contact_delta,
        raw=raw,
        score=clamp_score(raw),
    )


def calculate_resume_score(content: str, *, lexicon: Lexicon | None = None) -> int:
    breakdown = score_breakdown(content, lexicon=lexicon)
    logger.debug("resume_score raw=%s score=%s", breakdown.raw, breakdown.score)
    return breakdown.score
