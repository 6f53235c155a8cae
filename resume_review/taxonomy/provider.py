from __future__ import annotations

from typing import Protocol

from .lexicon import Lexicon


class LexiconProvider(Protocol):
    def get_lexicon(self) -> Lexicon:
        """Return the shared, read-only lexicon."""
