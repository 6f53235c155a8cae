from __future__ import annotations

import logging

from resume_review.core.scoring_config import get_scoring_value
from resume_review.schemas.analysis import AnalysisResult
from resume_review.taxonomy import Lexicon

from .feedback_generation import empty_content_feedback, generate_feedback
from .score_calculation import calculate_resume_score
from .text_signals import count_words, is_blank

logger = logging.getLogger(__name__)


def generate_analysis_from_content(content: str, *, lexicon: Lexicon | None = None) -> AnalysisResult:
    if is_blank(content):
        logger.info("resume_analysis_empty_content")
        feedback = empty_content_feedback()
        return AnalysisResult(score=int(get_scoring_value("empty_content.score", 50)), **feedback.model_dump())

    score = calculate_resume_score(content, lexicon=lexicon)
    feedback = generate_feedback(content, score, lexicon=lexicon)
    logger.info("resume_analysis_completed score=%s words=%s", score, count_words(content))
    return AnalysisResult(score=score, **feedback.model_dump())
