"""
Quiz schema and data structures

Defines the static coverage-fit questions and the contact form shown once
they are answered.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class QuizOption:
    """An answer the visitor can pick."""
    label: str
    description: str
    value: str


@dataclass(frozen=True)
class QuizQuestion:
    """A single quiz question."""
    id: str
    prompt: str
    options: tuple[QuizOption, ...] = ()

    @property
    def values(self) -> list[str]:
        return [o.value for o in self.options]

    def option_for(self, value: str) -> QuizOption:
        """
        Find the option with the given value.

        Raises:
            ValueError: If no option has that value
        """
        for option in self.options:
            if option.value == value:
                return option
        raise ValueError(f"Invalid value for '{self.prompt}': {value}")


@dataclass
class ContactForm:
    """
    Contact details collected after the last question.

    Name and email are required; phone is optional. Email format is left to
    the host form.
    """
    name: str = ""
    email: str = ""
    phone: str = ""

    REQUIRED = ("name", "email")

    def missing_fields(self) -> list[str]:
        return [f for f in self.REQUIRED if not getattr(self, f).strip()]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def clear(self):
        self.name = ""
        self.email = ""
        self.phone = ""


# =============================================================================
# COVERAGE QUIZ (Static)
# =============================================================================

COVERAGE_QUIZ = (
    QuizQuestion(
        id="lifeStage",
        prompt="What's your current life stage?",
        options=(
            QuizOption("Young Professional", "Starting career, building wealth", "young_professional"),
            QuizOption("Growing Family", "Married with children", "growing_family"),
            QuizOption("Peak Earner", "Established career, high income", "peak_earner"),
            QuizOption("Pre-Retirement", "Planning for retirement", "pre_retirement"),
        ),
    ),
    QuizQuestion(
        id="financialGoal",
        prompt="What's your primary financial goal?",
        options=(
            QuizOption("Protect Family Income", "Ensure income replacement", "protect_income"),
            QuizOption("Build Wealth", "Grow assets over time", "build_wealth"),
            QuizOption("Plan for Retirement", "Secure retirement income", "plan_retirement"),
            QuizOption("Leave a Legacy", "Pass wealth to heirs", "leave_legacy"),
        ),
    ),
    QuizQuestion(
        id="currentCoverage",
        prompt="How much life insurance coverage do you currently have?",
        options=(
            QuizOption("None", "No current coverage", "none"),
            QuizOption("Less than $100k", "Basic coverage", "under_100k"),
            QuizOption("$100k - $500k", "Moderate coverage", "100k_500k"),
            QuizOption("More than $500k", "Substantial coverage", "over_500k"),
        ),
    ),
    QuizQuestion(
        id="annualIncome",
        prompt="What's your annual household income?",
        options=(
            QuizOption("Under $50k", "Building financial foundation", "under_50k"),
            QuizOption("$50k - $100k", "Growing income bracket", "50k_100k"),
            QuizOption("$100k - $250k", "Higher income bracket", "100k_250k"),
            QuizOption("Over $250k", "High income earner", "over_250k"),
        ),
    ),
)


def validate_answers(answers: dict, questions=COVERAGE_QUIZ) -> tuple[bool, list[str]]:
    """
    Validate a full set of quiz answers.

    Args:
        answers: Dict mapping question id to chosen option value
        questions: Questions to validate against

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors = []
    known_ids = {q.id for q in questions}

    for question in questions:
        value = answers.get(question.id)

        if not value:
            errors.append(f"'{question.prompt}' is required")
            continue

        if value not in question.values:
            errors.append(f"Invalid value for '{question.prompt}': {value}")

    for key in answers:
        if key not in known_ids:
            errors.append(f"Unknown question: {key}")

    return (len(errors) == 0, errors)
