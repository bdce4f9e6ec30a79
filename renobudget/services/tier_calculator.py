# renobudget/services/tier_calculator.py

from dataclasses import asdict, dataclass
from typing import Dict

from ..domain.project_types import budget_coefficient, roi_coefficient
from ..domain.tiers import TIER_ORDER, as_tier, tier_rates
from ..utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class TierResult:
    tier: str
    project_type: str
    initial_budget: float
    contingency_fund: float
    monthly_savings: float
    total_budget: float
    time_to_save: float       # months, unrounded
    roi: float                # percent (e.g., 90.0)
    value_increase: float
    updated_home_value: float

    def to_dict(self) -> Dict:
        return asdict(self)


def compute_tier(home_value: float, yearly_income: float, project_type: str, tier) -> TierResult:
    """
    Project one budgeting tier for a renovation.

    Inputs are assumed validated (positive, in range). Only table membership is
    checked here: a (tier, project_type) pair missing from either coefficient
    table raises InvalidConfiguration before anything is computed.

    The ROI coefficient is a fractional gain on the total budget, so
    value_increase = total_budget * coefficient and roi = coefficient * 100.
    """
    # both lookups first, so a miss never leaves a half-built result
    coefficient = budget_coefficient(project_type, tier)
    roi_coef = roi_coefficient(project_type, tier)
    t = as_tier(tier)
    rates = tier_rates(t)

    initial_budget = home_value * coefficient
    contingency_fund = initial_budget * rates.contingency
    total_budget = initial_budget + contingency_fund

    monthly_income = yearly_income / 12
    monthly_savings = monthly_income * rates.monthly_savings
    time_to_save = total_budget / monthly_savings

    value_increase = total_budget * roi_coef
    updated_home_value = home_value + value_increase

    return TierResult(
        tier=t.value,
        project_type=project_type,
        initial_budget=initial_budget,
        contingency_fund=contingency_fund,
        monthly_savings=monthly_savings,
        total_budget=total_budget,
        time_to_save=time_to_save,
        roi=roi_coef * 100,
        value_increase=value_increase,
        updated_home_value=updated_home_value,
    )


def compute_all_tiers(home_value: float, yearly_income: float, project_type: str) -> Dict[str, TierResult]:
    """
    Run compute_tier for low, middle and high. Either all three come back or the
    first lookup failure propagates; callers never see a partial set.
    """
    results: Dict[str, TierResult] = {}
    for tier in TIER_ORDER:
        res = compute_tier(home_value, yearly_income, project_type, tier)
        log.debug(
            f"tier={tier.value} project={project_type} total_budget={res.total_budget} "
            f"time_to_save={res.time_to_save}"
        )
        results[tier.value] = res
    return results
