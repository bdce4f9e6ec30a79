# renobudget/services/validation.py

from __future__ import annotations
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from ..domain.errors import BadRequest
from ..domain.project_types import PLACEHOLDER, PROJECT_TYPES
from ..utils.config import settings
from ..utils.formatting import fmt_usd

_NON_NUMERIC = re.compile(r"[^0-9.]")


@dataclass(frozen=True)
class EstimateInputs:
    home_value: float
    yearly_income: float
    project_type: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def sanitize_number(raw: Any) -> Optional[float]:
    """
    Keep only digits and the decimal point ("$300,000" -> 300000.0).
    Returns None for empty or unparseable input.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    cleaned = _NON_NUMERIC.sub("", str(raw))
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def is_valid_project_type(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    v = value.strip()
    return bool(v) and v.lower() != PLACEHOLDER and v in PROJECT_TYPES


def _range_problem(label: str, value: Optional[float], lo: float, hi: float) -> Optional[str]:
    if value is None or value != value:  # NaN
        return f"{label} must be a number"
    if value < lo:
        return f"{label} must be at least {fmt_usd(lo)}"
    if value > hi:
        return f"{label} must be at most {fmt_usd(hi)}"
    return None


def validate_inputs(home_value: Any, yearly_income: Any, project_type: Any) -> EstimateInputs:
    """
    Enforce the calculator's input contract. Every problem found is reported at
    once as a bullet list; raises BadRequest when anything is off.
    """
    hv = sanitize_number(home_value)
    yi = sanitize_number(yearly_income)

    problems: List[str] = []
    p = _range_problem("Home value", hv, settings.HOME_VALUE_MIN, settings.HOME_VALUE_MAX)
    if p:
        problems.append(p)
    p = _range_problem("Yearly income", yi, settings.YEARLY_INCOME_MIN, settings.YEARLY_INCOME_MAX)
    if p:
        problems.append(p)
    if not is_valid_project_type(project_type):
        problems.append("Project type must be selected")

    if problems:
        raise BadRequest("Please check your inputs:\n" + "\n".join(f"• {x}" for x in problems))

    return EstimateInputs(home_value=hv, yearly_income=yi, project_type=project_type.strip())
