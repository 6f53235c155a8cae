from .achievement_detection import AchievementSignal, detect_achievements
from .feedback_generation import generate_feedback
from .question_generation import generate_questions
from .resume_analysis import generate_analysis_from_content
from .score_calculation import ScoreBreakdown, calculate_resume_score, score_breakdown
from .skill_detection import DetectionResult, detect_skills
from .text_signals import ContactInfo, count_words, detect_contact_info

__all__ = [
    "AchievementSignal",
    "detect_achievements",
    "DetectionResult",
    "detect_skills",
    "ContactInfo",
    "count_words",
    "detect_contact_info",
    "ScoreBreakdown",
    "calculate_resume_score",
    "score_breakdown",
    "generate_feedback",
    "generate_analysis_from_content",
    "generate_questions",
]
