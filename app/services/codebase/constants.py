"""
Codebase scanning constants.

Ignore rules for the directory scan, the documentation-relevance allow-list,
and limits for reading selected files into a prompt.
"""

# ─────────────────────────────────────────────────────────────
# Ignore Policy (directory scan)
# ─────────────────────────────────────────────────────────────

# Any path component with one of these names drops the entry and its subtree
IGNORED_DIRECTORIES = {
    # Dependencies
    "node_modules",
    "vendor",
    "venv",
    "__pycache__",
    # Build outputs
    "dist",
    "build",
    "out",
    "target",
    # IDE metadata
    ".vscode",
    ".idea",
}

IGNORED_FILES = {
    # OS metadata
    ".DS_Store",
    "Thumbs.db",
    # Lockfiles
    "package-lock.json",
    "yarn.lock",
    "composer.lock",
}

IGNORED_EXTENSIONS = {
    # Logs
    ".log",
    # Binaries
    ".exe",
    ".dll",
    ".so",
    ".dylib",
    ".bin",
    ".img",
    ".iso",
    # Media
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".bmp",
    ".svg",
    ".ico",
    ".mp4",
    ".mp3",
    ".wav",
    ".avi",
}

# ─────────────────────────────────────────────────────────────
# Relevance Filter
# ─────────────────────────────────────────────────────────────

RELEVANT_EXTENSIONS = {
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".py",
    ".java",
    ".cpp",
    ".c",
    ".h",
    ".cs",
    ".php",
    ".rb",
    ".go",
    ".rs",
    ".swift",
    ".kt",
    ".scala",
    ".json",
    ".yaml",
    ".yml",
    ".toml",
    ".xml",
    ".md",
    ".txt",
    ".sql",
    ".sh",
    ".bat",
    ".ps1",
    ".dockerfile",
    ".env",
}

# Files whose (lower-cased) name contains one of these are always relevant
RELEVANT_NAME_MARKERS = ("readme", "config", "package", "makefile")

# ─────────────────────────────────────────────────────────────
# Selected-file Reading
# ─────────────────────────────────────────────────────────────

# Files above 1 MiB are replaced by a placeholder
MAX_FILE_SIZE = 1024 * 1024

# Combined content budget for one prompt (100k tokens at ~4 chars per token)
MAX_BUNDLE_CHARS = 400_000

# Code fence language per extension
LANGUAGE_BY_EXTENSION: dict[str, str] = {
    ".js": "javascript",
    ".jsx": "jsx",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".py": "python",
    ".java": "java",
    ".cpp": "cpp",
    ".c": "c",
    ".h": "c",
    ".cs": "csharp",
    ".php": "php",
    ".rb": "ruby",
    ".go": "go",
    ".rs": "rust",
    ".swift": "swift",
    ".kt": "kotlin",
    ".scala": "scala",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
    ".xml": "xml",
    ".md": "markdown",
    ".sql": "sql",
    ".sh": "bash",
    ".bat": "batch",
    ".ps1": "powershell",
    ".dockerfile": "dockerfile",
    ".env": "bash",
}
