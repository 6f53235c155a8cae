from __future__ import annotations

from dataclasses import dataclass

from resume_review.taxonomy import Lexicon, get_default_lexicon


@dataclass(frozen=True)
class AchievementSignal:
    achievement_matches: int
    action_verb_matches: int


def used_action_verbs(content: str, *, lexicon: Lexicon | None = None) -> list[str]:
    lexicon = lexicon or get_default_lexicon()
    lowered = content.lower()
    return [verb for verb in lexicon.action_verbs if verb in lowered]


def unused_action_verbs(content: str, *, lexicon: Lexicon | None = None) -> list[str]:
    lexicon = lexicon or get_default_lexicon()
    lowered = content.lower()
    return [verb for verb in lexicon.action_verbs if verb not in lowered]


def detect_achievements(content: str, *, lexicon: Lexicon | None = None) -> AchievementSignal:
    """Count matching achievement patterns and distinct action verbs.

    Patterns run against the original text (they carry IGNORECASE); each
    pattern counts once no matter how often it matches.
    """
    lexicon = lexicon or get_default_lexicon()
    achievement_matches = sum(1 for pattern in lexicon.achievement_patterns if pattern.search(content))
    return AchievementSignal(
        achievement_matches=achievement_matches,
        action_verb_matches=len(used_action_verbs(content, lexicon=lexicon)),
    )
