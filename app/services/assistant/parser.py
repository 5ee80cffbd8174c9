"""
Assistant response parsing.

Extracts structured fields from the model's free-text replies by locating the
section markers the prompts asked for. Parsing never raises: a missing marker
falls back to a documented default.
"""

import re

from app.services.assistant.constants import (
    CONFIDENCE_LEVELS,
    DEFAULT_CONFIDENCE,
    DEFAULT_REASONING,
    MAX_RELEVANT_FILES,
    SKIPPED_LINE_PREFIXES,
)
from app.services.assistant.types import ChatAction, FileAnalysis, ParsedResponse

EXPLANATION_PATTERN = re.compile(r"EXPLANATION:\s*(.*?)(?=CONTENT:|\Z)", re.DOTALL)
CONTENT_PATTERN = re.compile(r"CONTENT:\s*```markdown\s*(.*?)\s*```", re.DOTALL)

REASONING_PATTERN = re.compile(r"REASONING:\s*(.*?)(?=RELEVANT_FILES:|\Z)", re.DOTALL)
FILES_PATTERN = re.compile(r"RELEVANT_FILES:\s*(.*?)(?=CONFIDENCE:|\Z)", re.DOTALL)
CONFIDENCE_PATTERN = re.compile(
    r"CONFIDENCE:\s*(" + "|".join(CONFIDENCE_LEVELS) + r")", re.IGNORECASE
)

# "- path", "* path", "3. path"
LIST_BULLET_PATTERN = re.compile(r"^(?:[-*]|\d+[.)])\s+")


def parse_task_response(text: str, action: ChatAction | str) -> ParsedResponse:
    """
    Split a model reply into explanation and suggested markdown content.

    Args:
        text: Raw reply text
        action: Action the prompt was built for

    Returns:
        ParsedResponse; for chat the whole reply is the explanation. Without an
        EXPLANATION marker the whole reply is used, and content is None unless
        a ```markdown fence follows CONTENT:.
    """
    if action == ChatAction.CHAT:
        return ParsedResponse(explanation=text)

    explanation_match = EXPLANATION_PATTERN.search(text)
    content_match = CONTENT_PATTERN.search(text)

    return ParsedResponse(
        explanation=explanation_match.group(1).strip() if explanation_match else text,
        content=content_match.group(1).strip() if content_match else None,
    )


def _clean_file_line(line: str) -> str:
    line = LIST_BULLET_PATTERN.sub("", line.strip())
    return line.strip("`").strip()


def parse_file_analysis(text: str) -> FileAnalysis:
    """
    Parse a codebase-analysis reply (REASONING / RELEVANT_FILES / CONFIDENCE).

    File lines are taken in order; blank lines and lines starting with "[" or
    "//" are dropped, and at most MAX_RELEVANT_FILES are kept.
    """
    reasoning_match = REASONING_PATTERN.search(text)
    files_match = FILES_PATTERN.search(text)
    confidence_match = CONFIDENCE_PATTERN.search(text)

    reasoning = reasoning_match.group(1).strip() if reasoning_match else DEFAULT_REASONING
    files_text = files_match.group(1).strip() if files_match else ""
    confidence = confidence_match.group(1).lower() if confidence_match else DEFAULT_CONFIDENCE

    relevant_files: list[str] = []
    for line in files_text.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith(SKIPPED_LINE_PREFIXES):
            continue
        cleaned = _clean_file_line(stripped)
        if cleaned:
            relevant_files.append(cleaned)

    return FileAnalysis(
        relevant_files=relevant_files[:MAX_RELEVANT_FILES],
        reasoning=reasoning or DEFAULT_REASONING,
        confidence=confidence,
    )
