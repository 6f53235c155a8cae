import logging

from fastapi import APIRouter, HTTPException, Request, status

from resume_review.core.config import settings
from resume_review.core.rate_limit import rate_limit
from resume_review.features import (
    count_words,
    detect_achievements,
    detect_contact_info,
    detect_skills,
    generate_analysis_from_content,
    generate_feedback,
    generate_questions,
)
from resume_review.schemas.analysis import (
    AnalysisResult,
    ContactInfoResponse,
    FeedbackRequest,
    QuestionsRequest,
    QuestionsResponse,
    ResumeContentRequest,
    ResumeFeedback,
    SkillsResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _check_content_size(content: str) -> None:
    if len(content) > settings.max_resume_chars:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Resume content exceeds {settings.max_resume_chars} characters.",
        )


@router.post("/resume/analysis", response_model=AnalysisResult)
@rate_limit()
def analyze_resume(request: Request, payload: ResumeContentRequest):
    _ = request
    _check_content_size(payload.content)
    return generate_analysis_from_content(payload.content)


@router.post("/resume/feedback", response_model=ResumeFeedback)
@rate_limit()
def resume_feedback(request: Request, payload: FeedbackRequest):
    _ = request
    _check_content_size(payload.content)
    return generate_feedback(payload.content, payload.score)


@router.post("/resume/skills", response_model=SkillsResponse)
@rate_limit()
def resume_skills(request: Request, payload: ResumeContentRequest):
    _ = request
    _check_content_size(payload.content)
    skills = detect_skills(payload.content)
    signal = detect_achievements(payload.content)
    contact = detect_contact_info(payload.content)
    return SkillsResponse(
        technical_skills=list(skills.found_technical_skills),
        soft_skills=list(skills.found_soft_skills),
        achievement_matches=signal.achievement_matches,
        action_verb_matches=signal.action_verb_matches,
        contact=ContactInfoResponse(has_email=contact.has_email, has_phone=contact.has_phone),
        word_count=count_words(payload.content),
    )


@router.post("/resume/questions", response_model=QuestionsResponse)
@rate_limit()
def interview_questions(request: Request, payload: QuestionsRequest):
    _ = request
    _check_content_size(payload.content)
    questions = generate_questions(payload.content, payload.count)
    logger.info("interview_questions_generated count=%s", len(questions))
    return QuestionsResponse(questions=questions)
