"""Output adapters - Slack JSON and the system clipboard."""

from .slack import build_slack_message, generate_slack_json
from .clipboard import clipboard_command, copy_to_clipboard

__all__ = [
    "build_slack_message",
    "generate_slack_json",
    "clipboard_command",
    "copy_to_clipboard",
]
