"""
SDK for the word translator.

Provides the chat-completion client used by translate and chat actions.
"""

from .openai_client import TranslationClient

__all__ = ["TranslationClient"]
