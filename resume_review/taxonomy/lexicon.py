from __future__ import annotations

import re
from dataclasses import dataclass


class LexiconError(ValueError):
    """Raised when lexicon data is malformed."""


@dataclass(frozen=True)
class Lexicon:
    technical_skills: tuple[str, ...]
    soft_skills: tuple[str, ...]
    action_verbs: tuple[str, ...]
    achievement_patterns: tuple[re.Pattern[str], ...]

    def __post_init__(self) -> None:
        overlap = set(self.technical_skills) & set(self.soft_skills)
        if overlap:
            raise LexiconError(f"Technical and soft skills overlap: {sorted(overlap)}")

    def missing_technical_skills(self, found: tuple[str, ...] | list[str]) -> list[str]:
        found_set = set(found)
        return [skill for skill in self.technical_skills if skill not in found_set]

    def missing_soft_skills(self, found: tuple[str, ...] | list[str]) -> list[str]:
        found_set = set(found)
        return [skill for skill in self.soft_skills if skill not in found_set]


def _phrases(raw: dict, key: str) -> tuple[str, ...]:
    values = raw.get(key)
    if not isinstance(values, list):
        raise LexiconError(f"Lexicon field '{key}' must be a list.")
    phrases: list[str] = []
    for value in values:
        phrase = str(value).strip().lower()
        if phrase and phrase not in phrases:
            phrases.append(phrase)
    return tuple(phrases)


def build_lexicon(raw: dict) -> Lexicon:
    patterns = raw.get("achievement_patterns")
    if not isinstance(patterns, list):
        raise LexiconError("Lexicon field 'achievement_patterns' must be a list.")
    try:
        compiled = tuple(re.compile(str(pattern), re.IGNORECASE) for pattern in patterns)
    except re.error as exc:
        raise LexiconError(f"Invalid achievement pattern: {exc}") from exc

    return Lexicon(
        technical_skills=_phrases(raw, "technical_skills"),
        soft_skills=_phrases(raw, "soft_skills"),
        action_verbs=_phrases(raw, "action_verbs"),
        achievement_patterns=compiled,
    )
