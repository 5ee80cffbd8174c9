"""
Assistant prompt builders.

One template per chat action. User text is embedded verbatim; content-bearing
templates ask for an EXPLANATION / CONTENT reply with the markdown fenced, the
analysis template for REASONING / RELEVANT_FILES / CONFIDENCE.
"""

from app.services.assistant.constants import (
    CONFIDENCE_MARKER,
    CONTENT_MARKER,
    EXPLANATION_MARKER,
    REASONING_MARKER,
    RELEVANT_FILES_MARKER,
)
from app.services.assistant.types import ChatAction, ChatTask
from app.services.codebase import FileEntry

UNKNOWN_PATH = "Unknown"


def _reply_format(explanation_hint: str, content_hint: str) -> str:
    return f"""Format your response as:
{EXPLANATION_MARKER}
[{explanation_hint}]

{CONTENT_MARKER}
```markdown
[{content_hint}]
```"""


def build_edit_prompt(task: ChatTask) -> str:
    """Prompt for rewriting the current document according to the user's request."""
    current_content = task.current_content or ""
    reply_format = _reply_format("Your explanation here", "Updated markdown content here")

    return f"""You are an expert technical documentation editor. The user wants to edit their markdown documentation.

Current document content:
```markdown
{current_content}
```

File path: {task.file_path or UNKNOWN_PATH}

User request: {task.message}

Please provide:
1. A brief explanation of what changes you're making
2. The complete updated markdown content

{reply_format}

Focus on maintaining proper markdown formatting, improving clarity, and following technical documentation best practices."""


def build_generate_prompt(task: ChatTask) -> str:
    """Prompt for writing a new document from scratch."""
    path_line = f"File path: {task.file_path}" if task.file_path else ""
    reply_format = _reply_format("Your explanation here", "New markdown content here")

    return f"""You are an expert technical documentation writer. The user wants you to generate new markdown documentation.

{path_line}

User request: {task.message}

Please provide:
1. A brief explanation of what you're creating
2. Complete markdown documentation content

{reply_format}

Create comprehensive, well-structured technical documentation with:
- Clear headings and sections
- Code examples where appropriate
- Proper markdown formatting
- Professional tone suitable for technical documentation"""


def build_chat_prompt(task: ChatTask) -> str:
    """Free-form guidance prompt; the reply is returned to the user as-is."""
    sections = [
        "You are a helpful assistant for technical documentation. The user is working on "
        "a markdown document and has a question or needs guidance.",
        "",
    ]

    if task.current_content:
        sections.extend(
            [
                "Current document content:",
                "```markdown",
                task.current_content,
                "```",
                "",
            ]
        )

    if task.file_path:
        sections.extend([f"File path: {task.file_path}", ""])

    sections.extend(
        [
            f"User question: {task.message}",
            "",
            "Provide helpful guidance, suggestions, or answers related to their documentation. "
            "If they're asking for specific changes, explain what you would recommend and why.",
        ]
    )

    return "\n".join(sections)


def format_file_listing(files: list[FileEntry]) -> str:
    """Render entries as "path (kind, N bytes)", one per line."""
    lines = []
    for entry in files:
        size = f", {entry.size} bytes" if entry.size else ""
        lines.append(f"{entry.path} ({entry.kind}{size})")
    return "\n".join(lines)


def build_analysis_prompt(task: ChatTask) -> str:
    """Prompt asking which codebase files matter for a documentation task."""
    files_list = format_file_listing(task.codebase_files or [])

    return f"""You are an expert technical documentation analyst. I need to create comprehensive technical documentation and I want you to analyze which files from the codebase would be most relevant for the following documentation task:

DOCUMENTATION TASK: {task.message}

CURRENT DOCUMENT: {task.file_path or UNKNOWN_PATH}

AVAILABLE CODEBASE FILES:
{files_list}

Please analyze the task and determine which files would be most relevant to create accurate and comprehensive technical documentation. Consider:

1. **Core Application Files**: Main entry points, core logic, and primary functionality
2. **Configuration Files**: Setup, environment, and configuration files (package.json, config files, etc.)
3. **Component/Module Files**: Key components, services, utilities, and modules
4. **API/Interface Files**: Routes, controllers, API definitions, and interfaces
5. **Documentation Files**: Existing README files, comments, and documentation
6. **Build/Deployment Files**: Build scripts, deployment configurations, and setup files
7. **Test Files**: Unit tests, integration tests that show expected behavior and usage

Focus on files that will help create documentation that explains:
- What the application/system does
- How to set it up and use it
- Architecture and key components
- API endpoints and interfaces
- Configuration options
- Examples and usage patterns

Respond in this exact format:

{REASONING_MARKER}
[Explain your analysis of the codebase and why these specific files are most relevant for creating comprehensive technical documentation]

{RELEVANT_FILES_MARKER}
[List the file paths, one per line, in order of importance for documentation]

{CONFIDENCE_MARKER}
[high/medium/low - based on how certain you are about the file selection for documentation purposes]"""


def build_documentation_prompt(task: ChatTask, file_bundle: str) -> str:
    """Prompt for writing documentation from the contents of the selected files."""
    current_content = task.current_content or ""
    reply_format = _reply_format(
        "Brief explanation of what documentation you're creating and the key insights "
        "from the codebase analysis",
        "Complete technical documentation in markdown format",
    )

    return f"""You are an expert technical documentation writer. I need you to create/update comprehensive technical documentation based on the provided codebase files.

DOCUMENTATION TASK: {task.message}

CURRENT DOCUMENT CONTENT:
```markdown
{current_content}
```

CURRENT DOCUMENT PATH: {task.file_path or UNKNOWN_PATH}

SELECTED CODEBASE FILES AND THEIR CONTENT:
{file_bundle}

Please analyze the code and create comprehensive technical documentation. Focus on:

1. **Project Overview**: What the application/system does, its purpose and main features
2. **Architecture**: High-level architecture, key components, and how they interact
3. **Setup & Installation**: How to set up, install dependencies, and configure the project
4. **Usage**: How to use the application, key features, and common workflows
5. **API Documentation**: If applicable, document API endpoints, parameters, and responses
6. **Configuration**: Available configuration options and environment variables
7. **Code Examples**: Practical examples showing how to use key features
8. **File Structure**: Explanation of important directories and files
9. **Development**: How to contribute, build, test, and deploy

Create documentation that is:
- **Accurate**: Reflects the actual code implementation
- **Complete**: Covers all important aspects shown in the code
- **Clear**: Easy to understand for developers at different skill levels
- **Practical**: Includes real examples from the codebase
- **Well-structured**: Uses proper markdown formatting and logical organization

{reply_format}"""


def build_prompt(task: ChatTask, file_bundle: str | None = None) -> str:
    """Build the prompt for a task's action."""
    if task.action == ChatAction.EDIT:
        return build_edit_prompt(task)
    if task.action == ChatAction.GENERATE:
        return build_generate_prompt(task)
    if task.action == ChatAction.CHAT:
        return build_chat_prompt(task)
    if task.action == ChatAction.ANALYZE_CODEBASE:
        return build_analysis_prompt(task)
    if task.action == ChatAction.PROCESS_WITH_FILES:
        return build_documentation_prompt(task, file_bundle or "")
    raise ValueError(f"Invalid action type: {task.action}")
