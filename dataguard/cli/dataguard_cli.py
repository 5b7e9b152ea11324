"""
Command-line interface for dataguard.

Usage:
    dataguard check <value> --rule <name>[:<arg>[:<arg>]] [--rule ...] [--number]
    dataguard check <value> --field <field> [--rules-file <path>] [--number]
    dataguard sanitize <value>
    dataguard list-rules
    dataguard selftest

Also runnable as ``python -m dataguard.cli.dataguard_cli``.
"""

import argparse
import json
import os
import sys

from dataguard.core.models import ValidationRule
from dataguard.core.rules import RuleConfigError, RuleConfigLoader, evaluate, resolve_rule, rule_names
from dataguard.core.sanitizer import sanitize
from dataguard.harness import TestRunner, register_selftests
from dataguard.observability.logger import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def parse_number(text: str) -> int | float:
    """Parse a command-line number, preferring int when the text is integral."""
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_rule_spec(spec: str) -> ValidationRule:
    """
    Build a rule from a ``name[:arg[:arg]]`` spec.

    Numeric arguments are parsed as numbers; the regex rule takes its pattern
    and message verbatim (the message may itself contain colons).

    Examples:
        email
        min_length:8
        range:0:100
        regex:^[A-Z]+$:Must be upper case
    """
    name, _, rest = spec.partition(":")
    if not rest:
        return resolve_rule(name)
    if name == "regex":
        pattern, sep, message = rest.partition(":")
        if not sep:
            raise RuleConfigError("regex rule needs 'regex:<pattern>:<message>'")
        return resolve_rule(name, pattern, message)

    try:
        args = [parse_number(arg) for arg in rest.split(":")]
    except ValueError as e:
        raise RuleConfigError(f"Invalid numeric parameter in '{spec}': {e}") from e
    return resolve_rule(name, *args)


def check_command(args) -> int:
    """
    Evaluate a value against rules and print the result as JSON.

    Args:
        args: Command-line arguments

    Returns:
        Exit status
    """
    try:
        value = parse_number(args.value) if args.number else args.value
    except ValueError:
        logger.error(f"Not a number: {args.value}")
        return EXIT_USAGE

    try:
        rules = [parse_rule_spec(spec) for spec in args.rule or []]
        if args.field:
            rules_file = args.rules_file or os.getenv("DATAGUARD_RULES_FILE")
            if not rules_file:
                raise RuleConfigError("--field needs --rules-file or DATAGUARD_RULES_FILE")
            field_rules = RuleConfigLoader(rules_file).load_rules()
            if args.field not in field_rules:
                raise RuleConfigError(f"No rules configured for field '{args.field}'")
            rules.extend(field_rules[args.field])
    except (RuleConfigError, FileNotFoundError) as e:
        logger.error(f"Invalid rule configuration: {e}")
        return EXIT_USAGE

    if not rules:
        logger.error("No rules given; use --rule or --field")
        return EXIT_USAGE

    try:
        result = evaluate(value, rules)
    except TypeError as e:
        kind = "number" if args.number else "string"
        logger.error(f"Rule does not apply to a {kind} value: {e}")
        return EXIT_USAGE

    print(json.dumps(result.model_dump()))
    return EXIT_OK if result.is_valid else EXIT_INVALID


def sanitize_command(args) -> int:
    """Print the sanitized value."""
    print(sanitize(args.value))
    return EXIT_OK


def list_rules_command(args) -> int:
    """Print the catalog rule names, one per line."""
    for name in rule_names():
        print(name)
    return EXIT_OK


def selftest_command(args) -> int:
    """Run the built-in self-test suite."""
    runner = TestRunner()
    register_selftests(runner)
    logger.info(f"Running {len(runner.tests)} self-test cases")
    return EXIT_OK if runner.run_tests() else EXIT_INVALID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dataguard",
        description="Input validation and string sanitization",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate an email address
  dataguard check "test@example.com" --rule email

  # Combine rules; every failing rule is reported
  dataguard check "ab" --rule min_length:3 --rule no_sql

  # Validate a number
  dataguard check 10.999 --number --rule currency --rule range:0:100

  # Use rules configured for a field in a YAML file
  dataguard check "O'Brien" --field username --rules-file config/rules.yaml

  # Escape a string
  dataguard sanitize '<b>"quoted"</b>'
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Validate a value")
    check_parser.add_argument("value", help="Value to validate")
    check_parser.add_argument(
        "--rule",
        action="append",
        help="Rule spec name[:arg[:arg]] (repeatable, applied in order)"
    )
    check_parser.add_argument(
        "--number",
        action="store_true",
        help="Treat the value as a number"
    )
    check_parser.add_argument(
        "--field",
        help="Apply the rules configured for this field in the rules file"
    )
    check_parser.add_argument(
        "--rules-file",
        help="YAML rule configuration (default: $DATAGUARD_RULES_FILE)"
    )
    check_parser.set_defaults(func=check_command)

    sanitize_parser = subparsers.add_parser("sanitize", help="Sanitize a string")
    sanitize_parser.add_argument("value", help="String to sanitize")
    sanitize_parser.set_defaults(func=sanitize_command)

    list_parser = subparsers.add_parser("list-rules", help="List catalog rules")
    list_parser.set_defaults(func=list_rules_command)

    selftest_parser = subparsers.add_parser("selftest", help="Run the built-in self-test suite")
    selftest_parser.set_defaults(func=selftest_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
