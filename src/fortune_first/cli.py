"""
Command-line interface for fortune-first

Plays the coverage quiz in a terminal and submits the landing-page and
newsletter forms, against the real API or an in-memory mock.
"""

import asyncio
import sys
import argparse
import logging
from pathlib import Path
from typing import Callable, Optional

from .config import Config, config
from .forms import LandingLeadForm, NewsletterSignup, LANDING_PAGES, EMPLOYMENT_STATUSES, trigger_download
from .leads import LeadsClient, PDF_RESOURCES, get_client
from .notifications import ConsoleNotifier, Notifier
from .quiz.schema import QuizOption, QuizQuestion
from .quiz.wizard import InteractiveQuiz


Ask = Callable[[str], str]


def parse_choice(raw: str, question: QuizQuestion) -> Optional[QuizOption]:
    """Accept an option number (1-based) or an option value."""
    raw = raw.strip()
    if raw.isdigit():
        index = int(raw) - 1
        if 0 <= index < len(question.options):
            return question.options[index]
        return None
    for option in question.options:
        if option.value == raw:
            return option
    return None


def print_question(quiz: InteractiveQuiz):
    question = quiz.current_question
    print(f"\n{quiz.progress_label}  [{quiz.progress:.0f}%]")
    print(question.prompt)
    for number, option in enumerate(question.options, start=1):
        print(f"  {number}. {option.label} ({option.description})")


async def play_quiz(quiz: InteractiveQuiz, ask: Ask = input) -> bool:
    """
    Walk the visitor through the quiz and submit their details.

    Returns:
        True if the lead was accepted
    """
    print("\nFind Your Coverage Fit in 2 Minutes")
    print("Answer a few questions to discover the protection plan that's right for your family")

    while not quiz.is_capturing:
        print_question(quiz)
        option = parse_choice(ask("Your choice: "), quiz.current_question)
        if option is None:
            print("Please pick one of the listed options.")
            continue
        await quiz.select_option(option.value)

    print("\nGet Your Coverage Results")
    print("Enter your email to receive your coverage recommendations and free guide")
    quiz.update_form(
        name=ask("Your Name: "),
        email=ask("Your Email Address: "),
        phone=ask("Phone Number (Optional): "),
    )

    while True:
        missing = quiz.form.missing_fields()
        if missing:
            for field_name in missing:
                quiz.update_form(**{field_name: ask(f"{field_name.title()} is required: ")})
            continue

        print("Submitting...")
        if await quiz.submit():
            return True
        if ask("Try again? [y/N] ").strip().lower() not in ("y", "yes"):
            return False


async def submit_landing_form(
    page: str,
    client: LeadsClient,
    notifier: Notifier,
    **fields,
) -> bool:
    form = LandingLeadForm(page, client, notifier)
    form.update(**{k: v for k, v in fields.items() if k in form.values and v is not None})

    missing = form.missing_fields()
    if missing:
        print(f"Missing required fields for {page}: {', '.join(missing)}", file=sys.stderr)
        return False
    return await form.submit()


async def subscribe(email: str, client: LeadsClient, notifier: Notifier) -> bool:
    signup = NewsletterSignup(client, notifier)
    signup.email = email
    return await signup.submit()


def build_client(args) -> LeadsClient:
    download_dir = args.download_dir or config.downloads.download_dir
    if args.mock:
        return get_client("mock", download_dir=Path(download_dir))
    return get_client("http", base_url=args.api_url, download_dir=download_dir)


def main():
    """Main CLI entry point."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--mock",
        action="store_true",
        help="Use an in-memory leads API (nothing is sent)"
    )
    common.add_argument(
        "--api-url",
        help=f"Leads API origin (default: {config.api.base_url})"
    )
    common.add_argument(
        "--download-dir",
        help=f"Where guides are saved (default: {config.downloads.download_dir})"
    )
    common.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )

    parser = argparse.ArgumentParser(
        prog="fortune-first",
        description="Fortune First coverage quiz and lead capture",
        epilog="Example: fortune-first quiz --mock"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Quiz command
    quiz_parser = subparsers.add_parser("quiz", parents=[common], help="Take the coverage-fit quiz")
    quiz_parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Skip the pause between questions"
    )

    # Lead command
    lead_parser = subparsers.add_parser("lead", parents=[common], help="Submit a landing page lead form")
    lead_parser.add_argument("page", choices=sorted(LANDING_PAGES), help="Landing page")
    lead_parser.add_argument("--name", required=True)
    lead_parser.add_argument("--email", required=True)
    lead_parser.add_argument("--phone")
    lead_parser.add_argument(
        "--employment-status",
        choices=sorted(EMPLOYMENT_STATUSES),
        help="Recruiting page only"
    )

    # Subscribe command
    subscribe_parser = subparsers.add_parser("subscribe", parents=[common], help="Subscribe to the newsletter")
    subscribe_parser.add_argument("email", help="Email address")

    # Download command
    download_parser = subparsers.add_parser("download", parents=[common], help="Download a PDF guide")
    download_parser.add_argument("resource", choices=sorted(PDF_RESOURCES), help="Guide to download")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    notifier = ConsoleNotifier()

    async def run() -> bool:
        client = build_client(args)
        try:
            if args.command == "quiz":
                settings = Config.fast_mode() if args.no_delay else config
                quiz = InteractiveQuiz(
                    client, notifier, advance_delay=settings.quiz.advance_delay_seconds,
                )
                return await play_quiz(quiz)

            if args.command == "lead":
                return await submit_landing_form(
                    args.page,
                    client,
                    notifier,
                    name=args.name,
                    email=args.email,
                    phone=args.phone,
                    employment_status=args.employment_status,
                )

            if args.command == "subscribe":
                return await subscribe(args.email, client, notifier)

            if args.command == "download":
                path = await trigger_download(client, PDF_RESOURCES[args.resource])
                if path is None:
                    print(f"Could not download {args.resource}", file=sys.stderr)
                    return False
                print(f"Saved {path}")
                return True

            return False
        finally:
            await client.close()

    try:
        ok = asyncio.run(run())
    except (KeyboardInterrupt, EOFError):
        print()
        sys.exit(130)

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
