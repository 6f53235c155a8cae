from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from resume_review.core.scoring_config import get_scoring_value
from resume_review.taxonomy import Lexicon, get_default_lexicon

logger = logging.getLogger(__name__)

_MATCHING_MODES = {"substring", "word"}


@dataclass(frozen=True)
class DetectionResult:
    found_technical_skills: tuple[str, ...]
    found_soft_skills: tuple[str, ...]


def _skill_matching_mode() -> str:
    mode = str(get_scoring_value("detection.skill_matching", "substring") or "substring").strip().lower()
    if mode not in _MATCHING_MODES:
        logger.warning("skill_detection_unknown_mode mode=%s fallback=substring", mode)
        return "substring"
    return mode


def _contains_phrase(lowered: str, phrase: str, mode: str) -> bool:
    if mode == "word":
        # Phrases like "c#" or "ci/cd" end in non-word chars, so \b is not usable.
        return re.search(rf"(?<![a-z0-9]){re.escape(phrase)}(?![a-z0-9])", lowered) is not None
    return phrase in lowered


def find_phrases(content: str, phrases: tuple[str, ...], *, mode: str | None = None) -> list[str]:
    """Return the phrases found in content, in the order they are listed."""
    lowered = content.lower()
    matching = mode or _skill_matching_mode()
    return [phrase for phrase in phrases if _contains_phrase(lowered, phrase, matching)]


def detect_skills(content: str, *, lexicon: Lexicon | None = None) -> DetectionResult:
    lexicon = lexicon or get_default_lexicon()
    mode = _skill_matching_mode()
    found_technical = find_phrases(content, lexicon.technical_skills, mode=mode)
    found_soft = find_phrases(content, lexicon.soft_skills, mode=mode)
    logger.debug(
        "skill_detection chars=%s technical=%s soft=%s",
        len(content),
        found_technical,
        found_soft,
    )
    return DetectionResult(
        found_technical_skills=tuple(found_technical),
        found_soft_skills=tuple(found_soft),
    )
