"""
Interactive coverage quiz

A short linear wizard: one screen per question, then a contact form.
Submitting the form sends a lead and hands out the insurance guide.

State is one of two steps:
- QuestionStep(index): showing question ``index`` (0-based)
- CaptureStep: all questions answered, collecting contact details

Picking an option records the answer, waits ``advance_delay`` seconds so
the selected option can render, then moves to the next question (or to
capture after the last one). A successful submission resets the quiz to the
first question; a failed one leaves everything in place for a retry.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..config import config
from ..forms import deliver_lead
from ..leads.base import LeadsClient, LeadSubmission
from ..leads.resources import INSURANCE_GUIDE
from ..notifications import Notifier, ToastLog
from .schema import COVERAGE_QUIZ, ContactForm, QuizQuestion, validate_answers


logger = logging.getLogger(__name__)


QUIZ_SOURCE = "quiz"
QUIZ_INTERESTS = ("coverage_fit",)
QUIZ_SUCCESS_MESSAGE = (
    "Your coverage guide is downloading now. Check your email for additional resources."
)


@dataclass(frozen=True)
class QuestionStep:
    """Showing one question."""
    index: int


@dataclass(frozen=True)
class CaptureStep:
    """Collecting contact details after the last question."""
    pass


QuizStep = Union[QuestionStep, CaptureStep]


class InteractiveQuiz:
    """
    Coverage-fit quiz with lead capture.

    Owns its own view state: the current step, the answers so far, the
    contact form and a pending flag for the in-flight submission.
    """

    def __init__(
        self,
        client: LeadsClient,
        notifier: Optional[Notifier] = None,
        questions: Sequence[QuizQuestion] = COVERAGE_QUIZ,
        advance_delay: Optional[float] = None,
    ):
        """
        Initialize the quiz.

        Args:
            client: Leads API client used on submit
            notifier: Where success/error toasts go
            questions: Questions to ask, in order
            advance_delay: Seconds between picking an option and moving on
                (defaults to config; 0 in tests)
        """
        if not questions:
            raise ValueError("A quiz needs at least one question")

        self.client = client
        self.notifier = notifier or ToastLog()
        self.questions = tuple(questions)
        self.advance_delay = (
            config.quiz.advance_delay_seconds if advance_delay is None else advance_delay
        )

        self.step: QuizStep = QuestionStep(0)
        self.answers: dict[str, str] = {}
        self.form = ContactForm()
        self.is_pending = False
        self._advancing = False

    # -------------------------------------------------------------------------
    # Derived view state
    # -------------------------------------------------------------------------

    @property
    def total_steps(self) -> int:
        return len(self.questions)

    @property
    def is_capturing(self) -> bool:
        return isinstance(self.step, CaptureStep)

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if isinstance(self.step, QuestionStep):
            return self.questions[self.step.index]
        return None

    @property
    def progress(self) -> float:
        """Percent complete: (index + 1) / N while answering, 100 in capture."""
        if isinstance(self.step, CaptureStep):
            return 100.0
        return (self.step.index + 1) / self.total_steps * 100

    @property
    def progress_label(self) -> str:
        if isinstance(self.step, CaptureStep):
            return f"Step {self.total_steps} of {self.total_steps}"
        return f"Step {self.step.index + 1} of {self.total_steps}"

    @property
    def can_submit(self) -> bool:
        return self.is_capturing and not self.is_pending

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    async def select_option(self, value: str) -> QuizStep:
        """
        Answer the current question and move on after the advance delay.

        A second pick while the first is still waiting to advance replaces
        the answer but does not advance again.

        Args:
            value: The chosen option's value

        Returns:
            The step shown after this call

        Raises:
            ValueError: If not on a question, or value isn't one of its options
        """
        question = self.current_question
        if question is None:
            raise ValueError("All questions are answered; the quiz is collecting contact details")

        question.option_for(value)
        self.answers[question.id] = value
        logger.debug(f"Answered {question.id}={value}")

        if self._advancing:
            return self.step

        self._advancing = True
        try:
            if self.advance_delay > 0:
                await asyncio.sleep(self.advance_delay)
            self._advance()
        finally:
            self._advancing = False

        return self.step

    def _advance(self):
        index = self.step.index
        if index < self.total_steps - 1:
            self.step = QuestionStep(index + 1)
        else:
            self.step = CaptureStep()
        logger.debug(f"Quiz advanced to {self.step}")

    def update_form(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ):
        """Edit contact fields; fields left as None are unchanged."""
        if name is not None:
            self.form.name = name
        if email is not None:
            self.form.email = email
        if phone is not None:
            self.form.phone = phone

    def build_submission(self) -> LeadSubmission:
        """Lead record from the contact form plus every answer so far."""
        return LeadSubmission(
            name=self.form.name,
            email=self.form.email,
            phone=self.form.phone or None,
            source=QUIZ_SOURCE,
            interests=list(QUIZ_INTERESTS),
            quiz_answers=dict(self.answers),
        )

    async def submit(self) -> bool:
        """
        Send the lead.

        On success: success toast, guide download, full reset.
        On failure: error toast, state kept for a retry.

        Returns:
            True if the lead was accepted, False if it failed or a
            submission was already in flight

        Raises:
            ValueError: If the quiz isn't at the contact form yet, an answer
                doesn't match its question, or a required field is blank
        """
        if not self.is_capturing:
            raise ValueError("Answer every question before submitting")
        if self.is_pending:
            logger.debug("Ignoring quiz submit while one is in flight")
            return False

        is_valid, errors = validate_answers(self.answers, self.questions)
        if not is_valid:
            raise ValueError(f"Invalid quiz answers: {'; '.join(errors)}")

        missing = self.form.missing_fields()
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")

        lead = self.build_submission()
        self.is_pending = True
        try:
            accepted = await deliver_lead(
                self.client, self.notifier, lead, INSURANCE_GUIDE, QUIZ_SUCCESS_MESSAGE,
            )
        finally:
            self.is_pending = False

        if accepted:
            self.reset()
        return accepted

    def reset(self):
        """Back to the first question with no answers and an empty form."""
        self.step = QuestionStep(0)
        self.answers = {}
        self.form.clear()
        logger.debug("Quiz reset")
