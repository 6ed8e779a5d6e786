"""
Usage accounting.

Accumulates translation counts, words, tokens and cost, persisting after every update.
"""

from typing import Callable, Optional

from .logger import translator_logger as logger
from .pricing import PRICING_TABLE, calculate_cost
from .token_counter import TokenUsage
from ..storage.models import UsageStats
from ..storage.repository import SettingsRepository


class UsageTracker:
    """Owns the usage counters for one translator session.

    The counters are loaded once at construction and written back in full
    after each change.
    """

    def __init__(self, repository: SettingsRepository):
        self.repository = repository
        self.stats = repository.load_usage_stats()

    def record(self, word_count: int, usage: Optional[TokenUsage], model: str) -> UsageStats:
        """Add one successful call to the counters.

        Args:
            word_count: Words in the submitted text
            usage: Token usage reported by the API
            model: Model the call was made with

        Returns:
            The updated counters
        """
        if usage is None:
            logger.warning("No usage data returned from API")
            return self.stats

        self.stats.total_translations += 1
        self.stats.total_words += word_count
        self.stats.total_input_tokens += usage.prompt_tokens
        self.stats.total_output_tokens += usage.completion_tokens

        if PRICING_TABLE.is_priced(model):
            self.stats.total_cost += calculate_cost(model, usage)
        else:
            logger.warning(f"No pricing data for model: {model}")

        self.repository.save_usage_stats(self.stats)
        return self.stats

    def reset(self, confirm: Callable[[], bool]) -> bool:
        """Zero and persist the counters if the user confirms.

        Returns:
            True when the counters were reset
        """
        if not confirm():
            return False
        self.stats = UsageStats()
        self.repository.save_usage_stats(self.stats)
        logger.info("Usage statistics reset")
        return True
