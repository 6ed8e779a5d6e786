"""
Chat panel session.

Forwards a bounded transcript plus a fixed preamble to the chat model.
"""

from typing import Optional

from .errors import TranslatorError
from .history import ChatHistory
from .logger import translator_logger as logger
from ..sdk.openai_client import TranslationClient

CHAT_SYSTEM_PROMPT = (
    "You are a helpful assistant inside a document translator. Answer questions about "
    "translation, terminology, grammar and wording clearly and concisely. Reply in the "
    "language the user writes in unless asked otherwise."
)

CHAT_TEMPERATURE = 0.7


class ChatSession:
    """Chat transcript and the client it talks through."""

    def __init__(
        self,
        client: TranslationClient,
        history: Optional[ChatHistory] = None,
        system_prompt: str = CHAT_SYSTEM_PROMPT
    ):
        self.client = client
        self.history = history if history is not None else ChatHistory()
        self.system_prompt = system_prompt

    def send(self, message: str) -> str:
        """Send a user message and return the assistant reply.

        Both turns are added to the transcript only after a reply arrives.
        On failure the transcript is left untouched and the error is
        re-raised for the caller to show inline.

        Raises:
            ValueError: If message is empty
            TranslatorError: On any API failure
        """
        if not message or not message.strip():
            raise ValueError("message is required and cannot be empty")

        user_turn = {"role": "user", "content": message.strip()}
        # Sent transcript stays within the cap once the user turn is included
        keep = self.history.limit - 1
        recent = self.history.messages()[-keep:] if keep else []
        messages = [{"role": "system", "content": self.system_prompt}] + recent + [user_turn]

        try:
            completion = self.client.complete(messages, temperature=CHAT_TEMPERATURE)
        except TranslatorError:
            logger.warning("Chat request failed; user turn not added to transcript")
            raise

        self.history.append(user_turn["role"], user_turn["content"])
        self.history.append("assistant", completion.content)
        return completion.content

    def clear(self) -> None:
        self.history.clear()
