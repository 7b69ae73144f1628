import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from formkit.adapters.console_view import ConsoleView
from formkit.components.binding import bind
from formkit.components.person_form import (
    BuildOutputInput,
    PersonFormModel,
    PersonKey,
    run_output,
)
from formkit.components.view_model import FormViewModelGenerator
from formkit.domain.fields import Selection
from formkit.rules.loader import default_rules, load_rules
from formkit.rules.models import Rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"
RULES_PATH_ENV = "FORMKIT_RULES_PATH"


def get_rules(path: str | None) -> Rules:
    rules_path = Path(path or os.environ.get(RULES_PATH_ENV, RULES_PATH))
    if not rules_path.exists():
        if path is not None:
            logger.error(f"Rules file {rules_path} not found.")
            sys.exit(1)
        logger.info(f"Rules file {rules_path} not found, using built-in defaults.")
        return default_rules()

    try:
        return load_rules(rules_path)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)


def parse_assignments(model: PersonFormModel, pairs: list[str]) -> list[tuple[PersonKey, Any]]:
    """Turn key=value arguments into typed values for the model's fields."""
    assignments: list[tuple[PersonKey, Any]] = []
    for pair in pairs:
        key_text, sep, raw = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected key=value, got {pair!r}")
        try:
            key = PersonKey(key_text.strip())
        except ValueError:
            known = ", ".join(k.value for k in model.ordered_keys)
            raise ValueError(f"Unknown field {key_text!r} (known: {known})") from None

        value: Any = raw
        if isinstance(model.fields[key], Selection):
            value = int(raw) if raw.strip() else None
        assignments.append((key, value))
    return assignments


def handle_show(rules: Rules, args: argparse.Namespace) -> int:
    model = PersonFormModel(rules.person_form)
    generator = FormViewModelGenerator(
        needs_validation=rules.view.needs_validation and not args.no_validation
    )
    _, presenter = bind(model, ConsoleView(), generator, start=not args.values)

    failed = False
    for key, value in parse_assignments(model, args.values):
        result = presenter.did_set_value(value, key)
        if not result.success:
            print(f"Rejected {key.value}: {result.error}", file=sys.stderr)
            failed = True
    return 1 if failed else 0


def handle_output(rules: Rules, args: argparse.Namespace) -> int:
    model = PersonFormModel(rules.person_form)
    for key, value in parse_assignments(model, args.values):
        model.set_value(value, key)

    result = run_output(BuildOutputInput(), model=model)
    if not result.success:
        for reason in result.reasons:
            print(reason, file=sys.stderr)
        return 1

    output = result.output
    print(f"name={output.name!r} age={output.age!r} gender_id={output.gender_id!r}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    rules_help = f"Path to rules file (default: ${RULES_PATH_ENV} or {RULES_PATH})"
    parser = argparse.ArgumentParser(description="formkit person form CLI")
    parser.add_argument("--rules", help=rules_help)

    # accepted after the subcommand too; SUPPRESS keeps the top-level value
    rules_parent = argparse.ArgumentParser(add_help=False)
    rules_parent.add_argument("--rules", default=argparse.SUPPRESS, help=rules_help)

    subparsers = parser.add_subparsers(dest="command", required=True)

    # show
    show_parser = subparsers.add_parser(
        "show", parents=[rules_parent], help="Set values and print the view-model"
    )
    show_parser.add_argument("values", nargs="*", help="Field assignments, e.g. name=Alba age=15")
    show_parser.add_argument(
        "--no-validation", action="store_true", help="Do not validate text rows"
    )

    # output
    output_parser = subparsers.add_parser(
        "output", parents=[rules_parent], help="Set values and print the parsed output"
    )
    output_parser.add_argument("values", nargs="*", help="Field assignments, e.g. gender=1")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    rules = get_rules(args.rules)

    try:
        if args.command == "show":
            return handle_show(rules, args)
        elif args.command == "output":
            return handle_output(rules, args)
    except ValueError as e:
        logger.error(str(e))
        return 2

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
