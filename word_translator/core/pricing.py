"""
Pricing calculations and rate management.

Handles cost computations for the supported chat models.
"""

from dataclasses import dataclass
from typing import Dict
from decimal import Decimal

from .token_counter import TokenUsage

ONE_MILLION = Decimal("1000000")


@dataclass(frozen=True)
class ModelPricing:
    """Per-token pricing for a specific model."""
    input_cost_per_1m: Decimal  # Cost per 1M prompt tokens
    output_cost_per_1m: Decimal  # Cost per 1M completion tokens


@dataclass(frozen=True)
class PricingTable:
    """Fixed pricing table for supported models."""
    prices: Dict[str, ModelPricing]

    def is_priced(self, model: str) -> bool:
        return model in self.prices

    def get_pricing(self, model: str) -> ModelPricing:
        """Get pricing for a specific model.

        Args:
            model: Model identifier

        Returns:
            ModelPricing for the model

        Raises:
            ValueError: If model is not supported
        """
        if model not in self.prices:
            raise ValueError(f"Unsupported model: {model}")
        return self.prices[model]


PRICING_TABLE = PricingTable({
    "gpt-4.1": ModelPricing(
        input_cost_per_1m=Decimal("3.00"),
        output_cost_per_1m=Decimal("12.00")
    ),
    "gpt-5.2": ModelPricing(
        input_cost_per_1m=Decimal("20.00"),
        output_cost_per_1m=Decimal("80.00")
    ),
    "gpt-4o-mini": ModelPricing(
        input_cost_per_1m=Decimal("0.150"),
        output_cost_per_1m=Decimal("0.600")
    )
})


def calculate_cost(model: str, usage: TokenUsage) -> float:
    """Calculate the cost of one completion.

    Args:
        model: Model identifier
        usage: Token usage data

    Returns:
        Cost in USD, unrounded

    Raises:
        ValueError: If model is not supported
    """
    pricing = PRICING_TABLE.get_pricing(model)

    input_cost = (Decimal(usage.prompt_tokens) / ONE_MILLION) * pricing.input_cost_per_1m
    output_cost = (Decimal(usage.completion_tokens) / ONE_MILLION) * pricing.output_cost_per_1m

    return float(input_cost + output_cost)
