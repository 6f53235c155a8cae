from functools import lru_cache

from .lexicon import Lexicon, LexiconError, build_lexicon
from .local_lexicon import LocalLexicon
from .provider import LexiconProvider


@lru_cache(maxsize=1)
def get_default_lexicon_provider() -> LexiconProvider:
    return LocalLexicon()


def get_default_lexicon() -> Lexicon:
    return get_default_lexicon_provider().get_lexicon()


__all__ = [
    "Lexicon",
    "LexiconError",
    "LexiconProvider",
    "LocalLexicon",
    "build_lexicon",
    "get_default_lexicon",
    "get_default_lexicon_provider",
]
