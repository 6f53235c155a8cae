from .analysis import (
    MAX_KEYWORDS,
    MAX_STRENGTHS,
    MAX_SUGGESTIONS,
    MAX_WEAKNESSES,
    AnalysisResult,
    ContactInfoResponse,
    FeedbackRequest,
    InterviewQuestion,
    QuestionsRequest,
    QuestionsResponse,
    ResumeContentRequest,
    ResumeFeedback,
    SkillsResponse,
)

__all__ = [
    "MAX_KEYWORDS",
    "MAX_STRENGTHS",
    "MAX_SUGGESTIONS",
    "MAX_WEAKNESSES",
    "AnalysisResult",
    "ContactInfoResponse",
    "FeedbackRequest",
    "InterviewQuestion",
    "QuestionsRequest",
    "QuestionsResponse",
    "ResumeContentRequest",
    "ResumeFeedback",
    "SkillsResponse",
]
