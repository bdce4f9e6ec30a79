# renobudget/domain/project_types.py
from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import InvalidConfiguration
from .tiers import Tier, as_tier

# Dropdown placeholder; never a real project type
PLACEHOLDER = "select"

# Must stay in sync with both tables below and the UI dropdown.
# "ADU" and "Accessory Dwelling Unit" are deliberately separate keys.
PROJECT_TYPES: Tuple[str, ...] = (
    "Bathroom",
    "Kitchen",
    "Roof Replacement",
    "Window Replacement",
    "Garage Door Replacement",
    "Deck Addition",
    "Attic Insulation",
    "Siding Replacement",
    "Room Addition",
    "Accessory Dwelling Unit",
    "ADU",
    "Landscaping",
    "Solar Panel Installation",
)


def _freeze(table: dict) -> Mapping[Tier, Mapping[str, float]]:
    return MappingProxyType({tier: MappingProxyType(dict(rows)) for tier, rows in table.items()})


# Fraction of current home value allocated to the project
BUDGET_COEFFICIENTS = _freeze({
    Tier.LOW: {
        "Bathroom": 0.025,
        "Kitchen": 0.05,
        "Roof Replacement": 0.02,
        "Window Replacement": 0.015,
        "Garage Door Replacement": 0.01,
        "Deck Addition": 0.02,
        "Attic Insulation": 0.005,
        "Siding Replacement": 0.02,
        "Room Addition": 0.1,
        "Accessory Dwelling Unit": 0.15,
        "ADU": 0.15,
        "Landscaping": 0.05,
        "Solar Panel Installation": 0.05,
    },
    Tier.MIDDLE: {
        "Bathroom": 0.0625,
        "Kitchen": 0.1,
        "Roof Replacement": 0.035,
        "Window Replacement": 0.0325,
        "Garage Door Replacement": 0.015,
        "Deck Addition": 0.04,
        "Attic Insulation": 0.0075,
        "Siding Replacement": 0.045,
        "Room Addition": 0.15,
        "Accessory Dwelling Unit": 0.225,
        "ADU": 0.225,
        "Landscaping": 0.075,
        "Solar Panel Installation": 0.075,
    },
    Tier.HIGH: {
        "Bathroom": 0.1,
        "Kitchen": 0.15,
        "Roof Replacement": 0.05,
        "Window Replacement": 0.05,
        "Garage Door Replacement": 0.02,
        "Deck Addition": 0.06,
        "Attic Insulation": 0.01,
        "Siding Replacement": 0.07,
        "Room Addition": 0.2,
        "Accessory Dwelling Unit": 0.3,
        "ADU": 0.3,
        "Landscaping": 0.1,
        "Solar Panel Installation": 0.1,
    },
})

# Value gain as a fraction of total budget (0.9 -> home value rises by 90% of spend)
ROI_COEFFICIENTS = _freeze({
    Tier.LOW: {
        "Kitchen": 0.9,
        "Bathroom": 0.8,
        "Roof Replacement": 0.75,
        "Window Replacement": 0.8,
        "Garage Door Replacement": 0.95,
        "Deck Addition": 0.8,
        "Attic Insulation": 0.85,
        "Siding Replacement": 0.8,
        "Room Addition": 0.65,
        "Accessory Dwelling Unit": 1.05,
        "ADU": 1.05,
        "Landscaping": 0.85,
        "Solar Panel Installation": 0.85,
    },
    Tier.MIDDLE: {
        "Kitchen": 1.05,
        "Bathroom": 0.9,
        "Roof Replacement": 0.83,
        "Window Replacement": 0.85,
        "Garage Door Replacement": 1.1,
        "Deck Addition": 0.87,
        "Attic Insulation": 0.92,
        "Siding Replacement": 0.9,
        "Room Addition": 0.75,
        "Accessory Dwelling Unit": 1.05,
        "ADU": 1.05,
        "Landscaping": 0.85,
        "Solar Panel Installation": 0.85,
    },
    Tier.HIGH: {
        "Kitchen": 1.2,
        "Bathroom": 1.0,
        "Roof Replacement": 0.9,
        "Window Replacement": 0.95,
        "Garage Door Replacement": 1.2,
        "Deck Addition": 0.9,
        "Attic Insulation": 1.0,
        "Siding Replacement": 0.9,
        "Room Addition": 0.75,
        "Accessory Dwelling Unit": 1.05,
        "ADU": 1.05,
        "Landscaping": 0.85,
        "Solar Panel Installation": 0.85,
    },
})


def _lookup(table: Mapping[Tier, Mapping[str, float]], name: str, project_type: str, tier) -> float:
    try:
        t = as_tier(tier)
    except ValueError:
        raise InvalidConfiguration(str(tier), project_type, table=name) from None
    rows = table.get(t)
    if rows is None or project_type not in rows:
        raise InvalidConfiguration(t.value, project_type, table=name)
    return rows[project_type]


def budget_coefficient(project_type: str, tier) -> float:
    return _lookup(BUDGET_COEFFICIENTS, "budget", project_type, tier)


def roi_coefficient(project_type: str, tier) -> float:
    return _lookup(ROI_COEFFICIENTS, "roi", project_type, tier)
