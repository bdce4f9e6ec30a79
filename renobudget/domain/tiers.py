# renobudget/domain/tiers.py
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping


class Tier(str, Enum):
    """Budgeting scenarios, ordered by increasing scope and aggressiveness."""
    LOW = "low"
    MIDDLE = "middle"
    HIGH = "high"


@dataclass(frozen=True)
class RateConfig:
    contingency: float       # share of initial budget held in reserve
    monthly_savings: float   # share of monthly income put aside


# One source of truth for per-tier rates (fractions, e.g., 0.10 = 10%)
TIER_RATES: Mapping[Tier, RateConfig] = MappingProxyType({
    Tier.LOW:    RateConfig(contingency=0.10, monthly_savings=0.20),
    Tier.MIDDLE: RateConfig(contingency=0.15, monthly_savings=0.25),
    Tier.HIGH:   RateConfig(contingency=0.25, monthly_savings=0.30),
})

TIER_ORDER: List[Tier] = [Tier.LOW, Tier.MIDDLE, Tier.HIGH]


def as_tier(tier) -> Tier:
    if isinstance(tier, Tier):
        return tier
    try:
        return Tier(str(tier).lower())
    except ValueError:
        raise ValueError(f"Unknown tier: {tier}") from None


def tier_rates(tier) -> RateConfig:
    return TIER_RATES[as_tier(tier)]
