from contextlib import asynccontextmanager
import logging

from resume_review.core.scoring_config import get_scoring_config
from resume_review.taxonomy import get_default_lexicon

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # Fail at startup rather than on the first request when config is broken.
    config = get_scoring_config()
    lexicon = get_default_lexicon()
    logger.info(
        "resume_review_startup sections=%s technical_skills=%s soft_skills=%s action_verbs=%s",
        sorted(config),
        len(lexicon.technical_skills),
        len(lexicon.soft_skills),
        len(lexicon.action_verbs),
    )
    yield
