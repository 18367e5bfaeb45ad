import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from src.adapters.editor_handle import LazyEditor
from src.adapters.html_editor import HtmlClipboardEditor
from src.adapters.rules import RulesAdapter
from src.components.extract import extract_files, extract_images
from src.components.ingest import HtmlToDeltaInput, run_html_to_delta
from src.components.render_html import ToHtmlInput, run_to_html
from src.components.render_text import ToPlainTextInput, run_to_plain_text, to_pure_text
from src.components.schema import delta_v1_to_v2, delta_v2_to_v1
from src.domain.delta import MalformedDeltaError
from src.rules.loader import load_rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules_port(path: str | None) -> RulesAdapter | None:
    if path is not None:
        if not Path(path).exists():
            logger.error(f"Rules file {path} not found.")
            sys.exit(1)
        return RulesAdapter(load_rules(Path(path)))

    if Path(RULES_PATH).exists():
        return RulesAdapter(load_rules(Path(RULES_PATH)))

    logger.info("No rules file, using built-in defaults")
    return None


def read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Cannot read input {source}: {e}")
        sys.exit(1)


def read_delta(source: str) -> Any:
    try:
        return json.loads(read_input(source))
    except json.JSONDecodeError as e:
        logger.error(f"Input is not valid JSON: {e}")
        sys.exit(1)


def print_json(value: Any) -> None:
    print(json.dumps(value, ensure_ascii=False, indent=2))


def handle_html(rules: RulesAdapter | None, args: argparse.Namespace) -> None:
    result = run_to_html(
        ToHtmlInput(delta=read_delta(args.input), expand_file_links=not args.no_file_blot),
        rules=rules,
    )
    for error in result.errors:
        logger.warning(f"Skipped {error.path}: {error.message}")
    print(result.html)


def handle_text(rules: RulesAdapter | None, args: argparse.Namespace) -> None:
    result = run_to_plain_text(ToPlainTextInput(delta=read_delta(args.input)), rules=rules)
    for error in result.errors:
        logger.warning(f"Skipped {error.path}: {error.message}")
    print(result.text)


def handle_from_html(rules: RulesAdapter | None, args: argparse.Namespace) -> None:
    editor = LazyEditor(HtmlClipboardEditor)
    result = run_html_to_delta(
        HtmlToDeltaInput(html=read_input(args.input)), editor=editor, rules=rules
    )
    if not result.success:
        for error in result.errors:
            logger.error(f"{error.path}: {error.message}")
        sys.exit(1)
    print_json(result.delta)


STRICT_COMMANDS = {
    "pure-text": to_pure_text,
    "to-v2": delta_v1_to_v2,
    "to-v1": delta_v2_to_v1,
    "images": extract_images,
    "files": extract_files,
}


def handle_strict(args: argparse.Namespace) -> None:
    convert = STRICT_COMMANDS[args.command]
    try:
        result = convert(read_delta(args.input))
    except MalformedDeltaError as e:
        logger.error(f"Malformed Delta: {e}")
        sys.exit(1)

    if isinstance(result, str):
        print(result)
    else:
        print_json(result)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Delta Bridge CLI")
    parser.add_argument("--rules", help=f"Rules file (default: {RULES_PATH} if present)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    html_parser = subparsers.add_parser("html", help="Render a Delta as HTML")
    html_parser.add_argument("input", nargs="?", default="-", help="Delta JSON file or -")
    html_parser.add_argument(
        "--no-file-blot",
        action="store_true",
        help="Hide file blots and strip media query strings",
    )

    text_parser = subparsers.add_parser("text", help="Render a Delta as plain text")
    text_parser.add_argument("input", nargs="?", default="-", help="Delta JSON file or -")

    from_html_parser = subparsers.add_parser("from-html", help="Convert HTML into a Delta")
    from_html_parser.add_argument("input", nargs="?", default="-", help="HTML file or -")

    helps = {
        "pure-text": "Render a Delta as bare text for indexing",
        "to-v2": "Migrate a v1 Delta to v2",
        "to-v1": "Migrate a v2 Delta to v1",
        "images": "List image URLs",
        "files": "List file URLs",
    }
    for name, help_text in helps.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("input", nargs="?", default="-", help="Delta JSON file or -")

    args = parser.parse_args(argv)

    rules = get_rules_port(args.rules)

    if args.command == "html":
        handle_html(rules, args)
    elif args.command == "text":
        handle_text(rules, args)
    elif args.command == "from-html":
        handle_from_html(rules, args)
    else:
        handle_strict(args)


if __name__ == "__main__":
    main()
