"""
Tests for assistant reply parsing.

Tests cover:
- EXPLANATION / CONTENT extraction for content-bearing actions
- Chat replies passed through whole
- Codebase analysis parsing (reasoning, file list, confidence)
- Defaults when markers are missing
"""

from app.services.assistant import ChatAction
from app.services.assistant.constants import MAX_RELEVANT_FILES
from app.services.assistant.parser import parse_file_analysis, parse_task_response

EDIT_REPLY = """EXPLANATION:
Tightened the intro and added an install section.

CONTENT:
```markdown
# Title

## Install
```
"""


class TestParseTaskResponse:
    """Tests for explanation/content extraction."""

    def test_extracts_explanation_and_content(self) -> None:
        parsed = parse_task_response(EDIT_REPLY, ChatAction.EDIT)

        assert parsed.explanation == "Tightened the intro and added an install section."
        assert parsed.content == "# Title\n\n## Install"

    def test_chat_returns_whole_reply(self) -> None:
        parsed = parse_task_response(EDIT_REPLY, ChatAction.CHAT)

        assert parsed.explanation == EDIT_REPLY
        assert parsed.content is None

    def test_missing_markers_use_whole_text(self) -> None:
        """Without EXPLANATION the reply is the explanation; content is absent."""
        parsed = parse_task_response("Just some prose.", ChatAction.GENERATE)

        assert parsed.explanation == "Just some prose."
        assert parsed.content is None

    def test_content_without_markdown_fence_is_absent(self) -> None:
        reply = "EXPLANATION: Done\nCONTENT:\n```\nplain fence\n```"
        parsed = parse_task_response(reply, ChatAction.EDIT)

        assert parsed.explanation == "Done"
        assert parsed.content is None

    def test_explanation_without_content(self) -> None:
        parsed = parse_task_response("EXPLANATION:\n  Nothing to change.  ", ChatAction.EDIT)

        assert parsed.explanation == "Nothing to change."
        assert parsed.content is None


class TestParseFileAnalysis:
    """Tests for codebase analysis parsing."""

    def test_full_reply(self) -> None:
        reply = """REASONING:
The entry point and config explain the app.

RELEVANT_FILES:
src/index.ts
package.json

CONFIDENCE:
high"""
        analysis = parse_file_analysis(reply)

        assert analysis.reasoning == "The entry point and config explain the app."
        assert analysis.relevant_files == ["src/index.ts", "package.json"]
        assert analysis.confidence == "high"

    def test_defaults_when_markers_missing(self) -> None:
        analysis = parse_file_analysis("I could not decide.")

        assert analysis.relevant_files == []
        assert analysis.reasoning == "Analysis completed"
        assert analysis.confidence == "medium"

    def test_confidence_case_insensitive(self) -> None:
        analysis = parse_file_analysis("RELEVANT_FILES:\na.py\nCONFIDENCE: LOW")

        assert analysis.confidence == "low"

    def test_skips_placeholders_comments_and_blanks(self) -> None:
        reply = """RELEVANT_FILES:
[List the file paths here]

// most important first
src/app.py

CONFIDENCE: medium"""
        analysis = parse_file_analysis(reply)

        assert analysis.relevant_files == ["src/app.py"]

    def test_strips_list_bullets_and_backticks(self) -> None:
        reply = "RELEVANT_FILES:\n- `src/a.py`\n* src/b.py\n1. src/c.py\nCONFIDENCE: high"
        analysis = parse_file_analysis(reply)

        assert analysis.relevant_files == ["src/a.py", "src/b.py", "src/c.py"]

    def test_caps_relevant_files(self) -> None:
        files = "\n".join(f"src/file_{i}.py" for i in range(MAX_RELEVANT_FILES + 5))
        analysis = parse_file_analysis(f"RELEVANT_FILES:\n{files}\nCONFIDENCE: high")

        assert len(analysis.relevant_files) == MAX_RELEVANT_FILES
        assert analysis.relevant_files[0] == "src/file_0.py"

    def test_unknown_confidence_falls_back(self) -> None:
        analysis = parse_file_analysis("RELEVANT_FILES:\na.py\nCONFIDENCE: very sure")

        assert analysis.confidence == "medium"
