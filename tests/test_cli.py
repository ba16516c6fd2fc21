"""
Tests for the terminal quiz runner.
"""

import pytest

from fortune_first.cli import parse_choice, play_quiz, submit_landing_form, subscribe
from fortune_first.leads import MockLeadsClient
from fortune_first.notifications import ToastLog
from fortune_first.quiz import InteractiveQuiz, COVERAGE_QUIZ


def scripted(*replies):
    """An ``ask`` that plays back replies in order."""
    replies = list(replies)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return replies.pop(0)

    ask.prompts = prompts
    return ask


class TestParseChoice:
    """Tests for parse_choice."""

    def test_number(self):
        """Test 1-based option numbers."""
        assert parse_choice("2", COVERAGE_QUIZ[0]).value == "growing_family"

    def test_value(self):
        """Test option values."""
        assert parse_choice(" peak_earner ", COVERAGE_QUIZ[0]).label == "Peak Earner"

    def test_out_of_range(self):
        """Test numbers past the options and unknown text."""
        assert parse_choice("0", COVERAGE_QUIZ[0]) is None
        assert parse_choice("5", COVERAGE_QUIZ[0]) is None
        assert parse_choice("retired", COVERAGE_QUIZ[0]) is None


class TestPlayQuiz:
    """Tests for play_quiz."""

    @pytest.mark.asyncio
    async def test_full_run(self):
        """Test a visitor answering everything gets submitted."""
        client = MockLeadsClient()
        quiz = InteractiveQuiz(client, ToastLog(), advance_delay=0)
        ask = scripted("3", "build_wealth", "1", "4", "Jane Doe", "jane@example.com", "")

        assert await play_quiz(quiz, ask=ask) is True

        lead = client.leads[0]
        assert lead.quiz_answers == {
            "lifeStage": "peak_earner",
            "financialGoal": "build_wealth",
            "currentCoverage": "none",
            "annualIncome": "over_250k",
        }
        assert lead.phone is None

    @pytest.mark.asyncio
    async def test_reasks_bad_input(self):
        """Test invalid choices and blank required fields are asked again."""
        client = MockLeadsClient()
        quiz = InteractiveQuiz(client, ToastLog(), advance_delay=0)
        ask = scripted("9", "1", "1", "1", "1", "", "jane@example.com", "", "Jane Doe")

        assert await play_quiz(quiz, ask=ask) is True
        assert client.leads[0].name == "Jane Doe"
        assert "Name is required: " in ask.prompts

    @pytest.mark.asyncio
    async def test_gives_up_after_failure(self):
        """Test declining a retry returns False with state intact."""
        client = MockLeadsClient(fail=True)
        quiz = InteractiveQuiz(client, ToastLog(), advance_delay=0)
        ask = scripted("1", "1", "1", "1", "Jane Doe", "jane@example.com", "", "n")

        assert await play_quiz(quiz, ask=ask) is False
        assert quiz.is_capturing
        assert len(quiz.answers) == 4


class TestFormCommands:
    """Tests for the lead and subscribe helpers."""

    @pytest.mark.asyncio
    async def test_lead_ignores_other_pages_fields(self):
        """Test fields a page doesn't show are dropped."""
        client = MockLeadsClient()
        ok = await submit_landing_form(
            "retirement", client, ToastLog(),
            name="Jane Doe", email="jane@example.com", phone="555-0100", employment_status=None,
        )

        assert ok is True
        assert client.leads[0].phone is None

    @pytest.mark.asyncio
    async def test_lead_missing_field(self, capsys):
        """Test missing fields are reported without a request."""
        client = MockLeadsClient()
        ok = await submit_landing_form(
            "insurance", client, ToastLog(), name="Jane Doe", email="jane@example.com", phone=None,
        )

        assert ok is False
        assert client.leads == []
        assert "phone" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_subscribe(self):
        """Test the subscribe helper."""
        client = MockLeadsClient()

        assert await subscribe("jane@example.com", client, ToastLog()) is True
        assert client.subscribers == ["jane@example.com"]
