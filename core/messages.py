# core/messages.py

# Prompt formatting
PROMPT_SUFFIX = ":"

# Error prefixes, rendered as "<prefix>: <cause>"
WRITE_ERROR_PREFIX = "Failed to write to stdout"
FLUSH_ERROR_PREFIX = "Failed to flush stdout"
READ_ERROR_PREFIX = "Failed to read from stdin"

# Demo text (overridable through config/demo_config.json)
DEMO_TITLE = "=== line-input Demo ==="
DEMO_DEFAULT_PORT = "8080"

PROMPT_NAME = "Enter your name"
PROMPT_PORT = "Enter port"
PROMPT_TEXT_PRESERVED = "Enter text (whitespace preserved)"
PROMPT_TEXT_TRIMMED = "Enter text (whitespace trimmed)"
PROMPT_EMPTY = ""

NO_NAME_ENTERED = "No name entered!"
DEMO_COMPLETED = "Demo completed successfully!"
