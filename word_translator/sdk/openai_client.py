"""
OpenAI chat-completion client.

Builds translation and chat requests and classifies API failures.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import openai
from openai import OpenAI

from ..core.errors import (
    MissingApiKeyError,
    RemoteAPIError,
    RemoteAuthError,
    RemoteProtocolError,
    RemoteQuotaError,
    RemoteTransportError,
)
from ..core.logger import translator_logger as logger
from ..core.prompts import TranslationRequest, build_prompt_spec, split_detected_language
from ..core.token_counter import TokenUsage

DEFAULT_MAX_TOKENS = 3000

# Model families that reject max_tokens in favour of max_completion_tokens
COMPLETION_TOKEN_FAMILIES = ("gpt-5", "o1", "o3", "o4")

QUOTA_ERROR_CODES = {"insufficient_quota"}


@dataclass(frozen=True)
class Completion:
    """First completion choice and the reported usage."""
    content: str
    usage: Optional[TokenUsage]


@dataclass(frozen=True)
class TranslationResult:
    translation: str
    detected_language: Optional[str]
    usage: Optional[TokenUsage]


def token_limit_field(model: str) -> str:
    """Name of the request field carrying the output token limit for a model."""
    if model.startswith(COMPLETION_TOKEN_FAMILIES):
        return "max_completion_tokens"
    return "max_tokens"


def _provider_message(error: openai.APIStatusError) -> str:
    body = error.body
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP Error: {error.status_code}"


def _provider_code(error: openai.APIStatusError) -> Optional[str]:
    body = error.body
    if isinstance(body, dict):
        return body.get("code") or body.get("type")
    return getattr(error, "code", None)


def classify_api_error(error: openai.OpenAIError) -> Exception:
    """Map an SDK exception to a translator error kind.

    Uses exception types, HTTP status and the provider error code; the
    provider's wording is only carried along as the message.
    """
    if isinstance(error, openai.APIConnectionError):
        return RemoteTransportError("Failed to connect to the translation API. Check your internet.")

    if isinstance(error, openai.APIStatusError):
        if error.status_code == 401:
            return RemoteAuthError("Invalid API Key. Please check your key.")
        if error.status_code == 429 and _provider_code(error) in QUOTA_ERROR_CODES:
            return RemoteQuotaError("API quota exceeded. Add credits to your OpenAI account.")
        return RemoteAPIError(_provider_message(error), status_code=error.status_code)

    return RemoteProtocolError(f"Unexpected API failure: {error}")


class TranslationClient:
    """Chat-completion client bound to one model and credential.

    A single failed call is surfaced directly; there are no retries.
    """

    def __init__(self, api_key: Optional[str], model: str, max_tokens: int = DEFAULT_MAX_TOKENS):
        """Initialize the client.

        Args:
            api_key: OpenAI API key (required)
            model: Model identifier (required)
            max_tokens: Output token limit per call

        Raises:
            MissingApiKeyError: If api_key is missing/empty
            ValueError: If model is missing/empty
        """
        if not api_key or not api_key.strip():
            raise MissingApiKeyError()
        if not model or not model.strip():
            raise ValueError("model is required and cannot be empty")

        self.model = model
        self.max_tokens = max_tokens
        self.client = OpenAI(api_key=api_key, max_retries=0)

    def complete(self, messages: List[Dict[str, str]], temperature: Optional[float] = None) -> Completion:
        """Send messages and return the first completion choice.

        Raises:
            ValueError: If messages is empty
            RemoteError subclasses: On any API failure or malformed response
        """
        if not messages:
            raise ValueError("messages is required and cannot be empty")

        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            token_limit_field(self.model): self.max_tokens,
        }
        if temperature is not None:
            params["temperature"] = temperature

        logger.debug(f"Requesting completion from {self.model} ({len(messages)} messages)")
        try:
            response = self.client.chat.completions.create(**params)
        except openai.OpenAIError as e:
            raise classify_api_error(e) from e

        if not response.choices:
            raise RemoteProtocolError("Unexpected API response")

        message = response.choices[0].message
        content = getattr(message, "content", None) if message is not None else None
        if content is None:
            raise RemoteProtocolError("Unexpected API response")

        usage = None
        if response.usage is not None:
            usage = TokenUsage(
                prompt_tokens=response.usage.prompt_tokens or 0,
                completion_tokens=response.usage.completion_tokens or 0
            )

        return Completion(content=content.strip(), usage=usage)

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """Translate one piece of text.

        For auto-detect requests the trailing detected-language marker is
        split out of the reply.
        """
        spec = build_prompt_spec(request)
        completion = self.complete(
            [
                {"role": "system", "content": spec.system_prompt},
                {"role": "user", "content": request.text},
            ],
            temperature=spec.temperature
        )

        translation, detected = completion.content, None
        if request.is_auto_detect:
            translation, detected = split_detected_language(completion.content)

        return TranslationResult(
            translation=translation,
            detected_language=detected,
            usage=completion.usage
        )
