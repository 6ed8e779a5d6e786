"""
Translator error kinds.

Every failure a translate or chat action can surface to the user.
"""

from typing import Optional


class TranslatorError(Exception):
    """Base class for all translator failures."""


class NoSelectionError(TranslatorError):
    """Raised when the selection is empty or whitespace only."""
    def __init__(self, message: str = "No text selected. Please select text to translate."):
        super().__init__(message)


class SameLanguageError(TranslatorError):
    """Raised when source and target languages match and source is not auto."""
    def __init__(self, language: str):
        super().__init__(f"Source and target languages are the same: {language}")
        self.language = language


class MissingApiKeyError(TranslatorError):
    """Raised when no API key has been saved or configured."""
    def __init__(self, message: str = "Please enter and save your API Key first"):
        super().__init__(message)


class TranslationInProgressError(TranslatorError):
    """Raised when an action starts while another one is still running."""
    def __init__(self, message: str = "A translation is already in progress"):
        super().__init__(message)


class AlignmentMismatchError(TranslatorError):
    """Raised when a batched reply does not split back into one chunk per paragraph."""
    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Translated text has {actual} paragraph(s) but the selection has {expected}"
        )
        self.expected = expected
        self.actual = actual


class RemoteError(TranslatorError):
    """Base class for failures talking to the chat-completion API."""


class RemoteTransportError(RemoteError):
    """The API could not be reached."""


class RemoteAuthError(RemoteError):
    """The API rejected the credential."""


class RemoteQuotaError(RemoteError):
    """The account quota is exhausted."""


class RemoteProtocolError(RemoteError):
    """The API answered with a malformed or empty completion."""


class RemoteAPIError(RemoteError):
    """Any other non-success HTTP status."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
