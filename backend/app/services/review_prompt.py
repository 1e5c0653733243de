"""
Prepare step of the PR review: build the prompt from the diff and the company
docs, then write the provider request payload.
"""

import logging
from pathlib import Path

from app.core.config import get_settings
from app.schemas.review import ReviewMessage, ReviewRequest

logger = logging.getLogger(__name__)

DEFAULT_DIFF_FILE = Path("pr-diff.txt")
DEFAULT_GLOSSARY_FILE = Path("docs") / "glossary.md"
DEFAULT_CONVENTIONS_FILE = Path("docs") / "naming-conventions.md"
DEFAULT_REQUEST_FILE = Path("request.json")


def _read_optional(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace") if path.is_file() else ""


def build_company_prompt(diff: str, glossary: str, conventions: str, project_name: str = "AccountApi") -> str:
    """Prompt that enforces the company glossary and naming conventions."""
    return f"""You are reviewing code for the {project_name} project. Your job is to:

1. **Check naming conventions** - Verify all naming follows the company standards
2. **Check terminology** - Ensure correct use of domain terms (Account, not Customer)
3. **Identify violations** - Point out specific naming issues with line references
4. **Suggest corrections** - Provide the correct names according to conventions
5. **Provide other feedback** - Note any other code quality issues

## CRITICAL: Company Glossary and Terminology
{glossary}

## CRITICAL: Naming Conventions to Enforce
{conventions}

## Code Changes to Review:
{diff}

## Your Review Format:

### 🔍 Naming Convention Issues
For each issue found:
- **Current name**: What was used
- **Issue**: Why it violates conventions
- **Correct name**: What it should be
- **Reference**: Quote the relevant convention/glossary entry
- **Example**: Show corrected code

### ✅ What Looks Good
Mention things that follow conventions correctly.

### 💡 Other Code Quality Notes
Any other observations (bugs, best practices, etc.)

Be specific, educational, and constructive. If everything looks good, say so!
"""


def build_generic_prompt(diff: str) -> str:
    return f"""You are reviewing code changes. Check for:
- Code quality issues
- Potential bugs
- Best practices
- Naming consistency

Code changes:
{diff}

Note: Company documentation not found. Review will be generic.
"""


def build_prompt(diff: str, glossary: str, conventions: str, project_name: str = "AccountApi") -> str:
    """Company prompt when both docs have content, generic prompt otherwise."""
    if glossary and conventions:
        return build_company_prompt(diff, glossary, conventions, project_name)
    return build_generic_prompt(diff)


def build_review_request(prompt: str, model: str, max_tokens: int) -> ReviewRequest:
    return ReviewRequest(
        model=model,
        max_tokens=max_tokens,
        messages=[ReviewMessage(role="user", content=prompt)],
    )


def prepare_review(
    diff_file: Path = DEFAULT_DIFF_FILE,
    glossary_file: Path = DEFAULT_GLOSSARY_FILE,
    conventions_file: Path = DEFAULT_CONVENTIONS_FILE,
    request_file: Path = DEFAULT_REQUEST_FILE,
    model: str | None = None,
    max_tokens: int | None = None,
    project_name: str | None = None,
) -> ReviewRequest:
    """
    Read the diff (required) and the optional docs, write the request payload
    to request_file and return it. Raises FileNotFoundError if the diff is missing
    and pydantic.ValidationError for a non-positive max_tokens.
    """
    settings = get_settings()
    # invalid bytes become U+FFFD; the diff content is never rejected
    diff = Path(diff_file).read_text(encoding="utf-8", errors="replace")
    glossary = _read_optional(Path(glossary_file))
    conventions = _read_optional(Path(conventions_file))
    if not (glossary and conventions):
        logger.warning(
            "Company docs missing or empty (glossary=%s, conventions=%s); using generic prompt",
            bool(glossary),
            bool(conventions),
        )

    if project_name is None:
        project_name = settings.review_project_name
    prompt = build_prompt(diff, glossary, conventions, project_name)
    request = build_review_request(
        prompt,
        model=settings.review_model if model is None else model,
        max_tokens=settings.review_max_tokens if max_tokens is None else max_tokens,
    )
    Path(request_file).write_text(request.model_dump_json(indent=2), encoding="utf-8")
    logger.info("✅ Prompt prepared and saved to %s (prompt_len=%s)", request_file, len(prompt))
    return request
