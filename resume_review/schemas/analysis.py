from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

QuestionCategory = Literal["Technical", "Behavioral", "Situational", "Experience"]

MAX_STRENGTHS = 4
MAX_WEAKNESSES = 4
MAX_SUGGESTIONS = 5
MAX_KEYWORDS = 10


class ResumeFeedback(BaseModel):
    strengths: list[str] = Field(default_factory=list, max_length=MAX_STRENGTHS)
    weaknesses: list[str] = Field(default_factory=list, max_length=MAX_WEAKNESSES)
    suggestions: list[str] = Field(default_factory=list, max_length=MAX_SUGGESTIONS)
    keywords: list[str] = Field(default_factory=list, max_length=MAX_KEYWORDS)

    @field_validator("keywords")
    @classmethod
    def _keywords_unique(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("keywords must not contain duplicates")
        return value


class AnalysisResult(ResumeFeedback):
    score: int = Field(ge=50, le=98)


class InterviewQuestion(BaseModel):
    id: str
    text: str
    category: QuestionCategory


class ResumeContentRequest(BaseModel):
    content: str = ""


class FeedbackRequest(ResumeContentRequest):
    score: int = Field(ge=50, le=98)


class QuestionsRequest(ResumeContentRequest):
    count: int = Field(default=10, ge=1, le=20)


class QuestionsResponse(BaseModel):
    questions: list[InterviewQuestion] = Field(default_factory=list)


class ContactInfoResponse(BaseModel):
    has_email: bool
    has_phone: bool


class SkillsResponse(BaseModel):
    technical_skills: list[str] = Field(default_factory=list)
    soft_skills: list[str] = Field(default_factory=list)
    achievement_matches: int = Field(ge=0)
    action_verb_matches: int = Field(ge=0)
    contact: ContactInfoResponse
    word_count: int = Field(ge=0)
