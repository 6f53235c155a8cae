from __future__ import annotations

STRENGTH_TECHNICAL_SKILLS = "Strong technical skills including: {skills}{more}"
STRENGTH_SOFT_SKILLS = "Good soft skills including: {skills}{more}"
STRENGTH_ACHIEVEMENTS = "Resume includes quantifiable achievements with measurable results"
STRENGTH_ACTION_VERBS = "Uses strong action verbs to describe experiences"
STRENGTH_LENGTH = "Appropriate resume length with good level of detail"
STRENGTH_FALLBACK = "Resume provides basic professional information"
MORE_SUFFIX = " and more"

WEAKNESS_TOO_SHORT = "Resume is too short and lacks necessary detail"
WEAKNESS_TOO_LONG = "Resume is too lengthy and should be more concise"
WEAKNESS_TECHNICAL_SKILLS = "Limited technical skills mentioned - consider adding more relevant technologies"
WEAKNESS_SOFT_SKILLS = "Could benefit from highlighting more soft skills"
WEAKNESS_ACHIEVEMENTS = "Lacks quantifiable achievements and metrics to demonstrate impact"
WEAKNESS_ACTION_VERBS = "Uses weak language instead of impactful action verbs"
WEAKNESS_CONTACT = "Missing contact information"
WEAKNESS_FALLBACKS = (
    "Could incorporate more industry-specific terminology",
    "Professional summary could be more tailored",
)

SUGGESTION_ACHIEVEMENTS = "Add 2-3 quantifiable achievements for each role (e.g., 'Increased sales by 20%')"
SUGGESTION_TECHNICAL_SKILLS = "Consider adding relevant technical skills like {skills}"
SUGGESTION_ACTION_VERBS = "Begin bullet points with strong action verbs like {verbs}"
SUGGESTION_TRIM = "Focus on most recent and relevant experiences; aim for 500-700 words"
SUGGESTION_EXPAND = "Expand your experience descriptions with more details about responsibilities and achievements"
SUGGESTION_CONTACT = "Add complete contact information including phone, email, and LinkedIn profile"
SUGGESTION_FALLBACKS = (
    "Tailor your resume for each application with keywords from the job description",
    "Use a clean, modern format with consistent formatting throughout",
    "Have a colleague or professional review your resume for feedback",
)

EMPTY_STRENGTHS = ("Resume upload succeeded",)
EMPTY_WEAKNESSES = (
    "Resume content could not be read or appears to be empty",
    "No text was available to evaluate skills, achievements, or contact details",
)
EMPTY_SUGGESTIONS = (
    "Re-upload your resume in a different format such as PDF, DOCX, or plain text",
    "Make sure the file contains selectable text rather than a scanned image",
)
