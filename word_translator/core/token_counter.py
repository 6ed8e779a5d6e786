"""
Token and word counting.

Holds the usage figures reported by the API and the word count of submitted text.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenUsage:
    """Token usage reported for one completion."""
    prompt_tokens: int
    completion_tokens: int

    @property
    def total_tokens(self) -> int:
        """Total tokens used (prompt + completion)."""
        return self.prompt_tokens + self.completion_tokens

    def __add__(self, other: "TokenUsage") -> "TokenUsage":
        return TokenUsage(
            prompt_tokens=self.prompt_tokens + other.prompt_tokens,
            completion_tokens=self.completion_tokens + other.completion_tokens
        )


def count_words(text: str) -> int:
    """Count whitespace-separated words in the trimmed text."""
    if not text or not text.strip():
        return 0
    return len(text.split())
