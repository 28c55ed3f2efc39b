"""Canned-response chat bot.

Intent rules are data: each one pairs a regex with reply templates. The
resolver tries them in configured order and the first pattern found in the
input decides the reply. Nothing here is stateful; the last stress result is
passed in by the caller.
"""

import logging
import re
import uuid
from datetime import datetime, timezone
from typing import List, Optional, Pattern, Tuple

from stressmate.config.loader import load_default_config
from stressmate.config.models import ChatRules, IntentRule
from stressmate.domain.models import ChatMessage, Sender, StressResult
from stressmate.logging import get_logger
from stressmate.utils.text import normalize_for_matching

logger = get_logger(__name__, component="chat")

FALLBACK_INTENT = "fallback"


def render_reply(intent: IntentRule, last_result: Optional[StressResult]) -> str:
    """Produce the reply text for a matched intent.

    Without a result, no_result is used when the intent defines one.
    With a result, a by_category entry for its category wins over reply.
    Templates may use {score} and {category} (the category label).
    """
    if last_result is None:
        template = intent.no_result or intent.reply
        return template.format(score="-", category="-")

    template = intent.by_category.get(last_result.category, intent.reply)
    return template.format(score=last_result.score, category=last_result.label)


class ChatIntentResolver:
    """Maps free-text chat input to one canned reply."""

    def __init__(self, rules: Optional[ChatRules] = None, logger_instance: logging.Logger = None):
        """Initialize ChatIntentResolver.

        Args:
            rules: Chat rule tables (defaults to the packaged rules)
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.rules = rules or load_default_config().chat
        self.logger = logger_instance or logger
        self._patterns: List[Tuple[IntentRule, Pattern]] = [
            (intent, re.compile(intent.pattern, re.IGNORECASE)) for intent in self.rules.intents
        ]

    @property
    def quick_replies(self) -> List[str]:
        """Suggested inputs shown under the chat box."""
        return list(self.rules.quick_replies)

    def match_intent(self, user_text: str) -> Optional[IntentRule]:
        """First intent whose pattern occurs in the normalized input, or None."""
        text = normalize_for_matching(user_text)
        for intent, pattern in self._patterns:
            if pattern.search(text):
                return intent
        return None

    def reply(self, user_text: str, last_result: Optional[StressResult] = None) -> str:
        """Reply to a chat message.

        Args:
            user_text: Raw user input
            last_result: Last stress result held by the UI, if any

        Returns:
            Reply text. Unrecognized input gets the fallback reply.
        """
        intent = self.match_intent(user_text)

        self.logger.debug(
            "Chat intent resolved",
            extra={
                "event": "chat.intent_matched",
                "intent": intent.name if intent else FALLBACK_INTENT,
                "has_result": last_result is not None,
            },
        )

        if intent is None:
            return self.rules.fallback
        return render_reply(intent, last_result)

    def greeting_message(self, now: Optional[datetime] = None) -> ChatMessage:
        """The bot's opening message for a fresh transcript."""
        return self._message(Sender.BOT, self.rules.greeting, now)

    def respond(
        self,
        user_text: str,
        last_result: Optional[StressResult] = None,
        now: Optional[datetime] = None,
    ) -> Tuple[ChatMessage, ChatMessage]:
        """Wrap a user message and the bot's reply for the transcript.

        Args:
            user_text: Raw user input
            last_result: Last stress result held by the UI, if any
            now: Timestamp for both messages (defaults to current UTC time)

        Returns:
            Tuple of (user message, bot message)

        Raises:
            ValueError: If user_text is blank
        """
        text = (user_text or "").strip()
        if not text:
            raise ValueError("Cannot respond to an empty message")

        now = now or datetime.now(timezone.utc)
        user_message = self._message(Sender.USER, text, now)
        bot_message = self._message(Sender.BOT, self.reply(text, last_result), now)
        return user_message, bot_message

    @staticmethod
    def _message(sender: Sender, text: str, now: Optional[datetime]) -> ChatMessage:
        prefix = "u" if sender == Sender.USER else "b"
        return ChatMessage(
            id=f"{prefix}-{uuid.uuid4().hex[:12]}",
            sender=sender,
            text=text,
            timestamp=now or datetime.now(timezone.utc),
        )
