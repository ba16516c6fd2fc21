"""
Quiz system for fortune-first

Static coverage-fit questions and the wizard that walks a visitor through
them to the lead capture form.
"""

from .schema import (
    QuizQuestion,
    QuizOption,
    ContactForm,
    COVERAGE_QUIZ,
    validate_answers,
)
from .wizard import InteractiveQuiz, QuestionStep, CaptureStep, QuizStep

__all__ = [
    "QuizQuestion",
    "QuizOption",
    "ContactForm",
    "COVERAGE_QUIZ",
    "validate_answers",
    "InteractiveQuiz",
    "QuestionStep",
    "CaptureStep",
    "QuizStep",
]
