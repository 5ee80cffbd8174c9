"""Assistant constants: reply markers and parsing limits."""

# Section markers the prompts ask the model to use
EXPLANATION_MARKER = "EXPLANATION:"
CONTENT_MARKER = "CONTENT:"
REASONING_MARKER = "REASONING:"
RELEVANT_FILES_MARKER = "RELEVANT_FILES:"
CONFIDENCE_MARKER = "CONFIDENCE:"

# Upper bound on files suggested by a codebase analysis
MAX_RELEVANT_FILES = 15

CONFIDENCE_LEVELS = ("high", "medium", "low")
DEFAULT_CONFIDENCE = "medium"
DEFAULT_REASONING = "Analysis completed"

# Lines in the RELEVANT_FILES section starting with these are template echoes or comments
SKIPPED_LINE_PREFIXES = ("[", "//")
