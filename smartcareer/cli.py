#!/usr/bin/env python3
"""Play the career quiz in a terminal, talking to the model directly."""

import argparse
import sys
from dataclasses import replace

from flask import Config

from smartcareer.config import get_config
from smartcareer.services.errors import ConfigurationError, QuizError
from smartcareer.services.models import QuizQuestion, CareerRecommendationSet
from smartcareer.services.quiz import QuizSettings, build_orchestrator
from smartcareer.services.session import QuizSession


def load_settings(args) -> QuizSettings:
    config = Config(".")
    config.from_object(get_config(args.env))
    settings = QuizSettings.from_config(config)
    overrides = {}
    if args.model:
        overrides["model"] = args.model
    if args.max_retries is not None:
        overrides["max_retries"] = args.max_retries
    if args.retry_delay is not None:
        overrides["retry_delay"] = args.retry_delay
    return replace(settings, **overrides) if overrides else settings


def print_question(q: QuizQuestion, out) -> None:
    print(f"\nQuestion {q.question_number}/{q.total_questions}: {q.question}", file=out)
    for i, opt in enumerate(q.options, 1):
        print(f"  {i}. [{opt.icon_name}] {opt.label}", file=out)


def print_results(results: CareerRecommendationSet, out) -> None:
    print("\nBased on your answers, here are careers that match you:", file=out)
    for career in results.careers:
        print(f"\n  {career.title} ({career.match_percent}% match)", file=out)
        if career.description:
            print(f"    {career.description}", file=out)
        print(f"    Tags: {', '.join(career.tags)}", file=out)


def pick_answer(q: QuizQuestion, raw: str) -> str:
    """Option number, option id, or free text."""
    raw = raw.strip()
    if raw.isdigit() and 1 <= int(raw) <= len(q.options):
        return q.options[int(raw) - 1].label
    for opt in q.options:
        if raw.lower() == opt.id.lower():
            return opt.label
    return raw


def play(session: QuizSession, input_fn=input, out=sys.stdout) -> int:
    step = session.start
    while True:
        try:
            outcome = step()
        except QuizError as e:
            print(f"Quiz error: {e}", file=sys.stderr)
            if input_fn("Retry? [y/N] ").strip().lower() not in ("y", "yes"):
                return 1
            step = session.retry
            continue

        if isinstance(outcome, CareerRecommendationSet):
            print_results(outcome, out)
            return 0

        print_question(outcome, out)
        raw = ""
        while not raw.strip():
            raw = input_fn("Your answer: ")
        answer = pick_answer(outcome, raw)
        step = lambda: session.answer(answer)


def main(argv=None, input_fn=input, out=sys.stdout, orchestrator=None) -> int:
    parser = argparse.ArgumentParser(description="Discover careers that fit you with a 5-question AI quiz")
    parser.add_argument("--env", help="Config to load: development, testing or production")
    parser.add_argument("--model", help="Model id to use (default from QUIZ_MODEL)")
    parser.add_argument("--max-retries", type=int, help="Retries on rate limits (default 5)")
    parser.add_argument("--retry-delay", type=float, help="Seconds between retries (default 6)")
    args = parser.parse_args(argv)

    if orchestrator is None:
        try:
            orchestrator = build_orchestrator(load_settings(args))
        except ConfigurationError as e:
            print(str(e), file=sys.stderr)
            return 1

    try:
        return play(QuizSession(orchestrator), input_fn=input_fn, out=out)
    except (KeyboardInterrupt, EOFError):
        print("\nBye!", file=out)
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
