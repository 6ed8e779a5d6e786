"""
Data models for storage layer.

Defines the records kept in the local key-value store.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class UsageStats:
    """Running totals of translation volume, tokens and estimated cost.

    Mutated after every successful call and written back in full.
    """
    total_translations: int = 0
    total_words: int = 0
    total_input_tokens: int = 0
    total_output_tokens: int = 0
    total_cost: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the stored record's key names."""
        return {
            "totalTranslations": self.total_translations,
            "totalWords": self.total_words,
            "totalInputTokens": self.total_input_tokens,
            "totalOutputTokens": self.total_output_tokens,
            "totalCost": self.total_cost,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UsageStats":
        """Rebuild from a stored record; missing keys count as zero."""
        return cls(
            total_translations=int(data.get("totalTranslations", 0)),
            total_words=int(data.get("totalWords", 0)),
            total_input_tokens=int(data.get("totalInputTokens", 0)),
            total_output_tokens=int(data.get("totalOutputTokens", 0)),
            total_cost=float(data.get("totalCost", 0.0)),
        )
