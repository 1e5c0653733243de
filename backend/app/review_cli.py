"""Command-line entry point for the PR review steps (prepare, request, extract)."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from app.services.review_client import DEFAULT_RESPONSE_FILE, request_review
from app.services.review_extractor import DEFAULT_REVIEW_FILE, extract_review
from app.services.review_prompt import (
    DEFAULT_CONVENTIONS_FILE,
    DEFAULT_DIFF_FILE,
    DEFAULT_GLOSSARY_FILE,
    DEFAULT_REQUEST_FILE,
    prepare_review,
)

logger = logging.getLogger("app.review_cli")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="AI pull-request review helpers")
    subparsers = parser.add_subparsers(dest="command", required=True)

    prepare_parser = subparsers.add_parser("prepare", help="Build request.json from the PR diff")
    prepare_parser.add_argument("--diff", type=Path, default=DEFAULT_DIFF_FILE, help="PR diff text file")
    prepare_parser.add_argument("--glossary", type=Path, default=DEFAULT_GLOSSARY_FILE, help="Company glossary")
    prepare_parser.add_argument(
        "--conventions",
        type=Path,
        default=DEFAULT_CONVENTIONS_FILE,
        help="Naming conventions document",
    )
    prepare_parser.add_argument("--output", type=Path, default=DEFAULT_REQUEST_FILE, help="Request payload file")
    prepare_parser.add_argument("--model", default=None, help="Model id (default: REVIEW_MODEL)")
    prepare_parser.add_argument("--max-tokens", type=int, default=None, help="Token limit (default: REVIEW_MAX_TOKENS)")
    prepare_parser.add_argument("--project-name", default=None, help="Project named in the prompt")

    request_parser = subparsers.add_parser("request", help="Send request.json to Claude")
    request_parser.add_argument("--input", type=Path, default=DEFAULT_REQUEST_FILE, help="Request payload file")
    request_parser.add_argument("--output", type=Path, default=DEFAULT_RESPONSE_FILE, help="Response payload file")

    extract_parser = subparsers.add_parser("extract", help="Write the review text from the response payload")
    extract_parser.add_argument("--input", type=Path, default=DEFAULT_RESPONSE_FILE, help="Response payload file")
    extract_parser.add_argument("--output", type=Path, default=DEFAULT_REVIEW_FILE, help="Review text file")

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for CLI usage. Returns the process exit code."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s:     %(message)s")

    args = _parse_args(argv)
    try:
        if args.command == "prepare":
            prepare_review(
                diff_file=args.diff,
                glossary_file=args.glossary,
                conventions_file=args.conventions,
                request_file=args.output,
                model=args.model,
                max_tokens=args.max_tokens,
                project_name=args.project_name,
            )
        elif args.command == "request":
            request_review(request_file=args.input, response_file=args.output)
        elif args.command == "extract":
            extract_review(response_file=args.input, review_file=args.output)
    except FileNotFoundError as e:
        logger.error("Input file not found: %s", e.filename)
        return 1
    except ValueError as e:
        # configuration errors and invalid request payloads
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
