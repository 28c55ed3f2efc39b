"""Rule-based chat replies."""

from .resolver import ChatIntentResolver, render_reply

__all__ = [
    "ChatIntentResolver",
    "render_reply",
]
