# renobudget/services/summary_service.py

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..domain.tiers import TIER_ORDER
from ..utils.formatting import fmt_months, fmt_pct, fmt_usd

# (label, key, formatter) for each row of the tier table
_ROWS = [
    ("Initial budget", "initial_budget", fmt_usd),
    ("Contingency fund", "contingency_fund", fmt_usd),
    ("Total budget", "total_budget", fmt_usd),
    ("Monthly savings", "monthly_savings", fmt_usd),
    ("Time to save", "time_to_save", fmt_months),
    ("ROI", "roi", fmt_pct),
    ("Value increase", "value_increase", fmt_usd),
    ("Updated home value", "updated_home_value", fmt_usd),
]


# ------------------------------ time & picking ------------------------------

def _now_iso() -> str:
    return datetime.now(timezone.utc).astimezone().isoformat(timespec="seconds")


def _pick(tiers: Dict[str, Dict[str, Any]], key: str, lowest: bool) -> Optional[str]:
    """
    Name of the tier with the lowest/highest value for `key`.
    Ties go to the earlier tier in low -> middle -> high order.
    """
    best_name: Optional[str] = None
    best_val: Optional[float] = None
    for t in TIER_ORDER:
        row = tiers.get(t.value)
        if not row or row.get(key) is None:
            continue
        try:
            v = float(row[key])
        except (TypeError, ValueError):
            continue
        if best_val is None or (v < best_val if lowest else v > best_val):
            best_name, best_val = t.value, v
    return best_name


# ------------------------------ deterministic report ------------------------------

def _build_report_markdown(calc_out: Dict[str, Any]) -> str:
    """
    Build markdown with sections:
      - Inputs
      - Tier comparison (one column per tier)
      - Highlights
    """
    inputs = calc_out.get("inputs")
    if not isinstance(inputs, dict):
        inputs = {}
    tiers = calc_out.get("tiers", {})
    present = [t.value for t in TIER_ORDER if t.value in tiers]

    input_lines = [
        f"- **Project type**: {inputs.get('project_type', '—')}",
        f"- **Current home value**: {fmt_usd(inputs.get('home_value'))}",
        f"- **Yearly income**: {fmt_usd(inputs.get('yearly_income'))}",
    ]

    header = "| | " + " | ".join(t.capitalize() for t in present) + " |"
    divider = "|---|" + "---|" * len(present)
    table_lines = [header, divider]
    for label, key, fmt in _ROWS:
        cells = [fmt(tiers[t].get(key)) for t in present]
        table_lines.append(f"| {label} | " + " | ".join(cells) + " |")

    fastest = _pick(tiers, "time_to_save", lowest=True)
    biggest = _pick(tiers, "value_increase", lowest=False)
    highlight_lines: List[str] = []
    if fastest:
        highlight_lines.append(
            f"- **Quickest to fund**: {fastest} tier, about {fmt_months(tiers[fastest]['time_to_save'])} of saving."
        )
    if biggest:
        highlight_lines.append(
            f"- **Largest value increase**: {biggest} tier, {fmt_usd(tiers[biggest]['value_increase'])} "
            f"(home worth {fmt_usd(tiers[biggest]['updated_home_value'])})."
        )

    md_sections: List[str] = []
    md_sections += ["## Your inputs", *input_lines, ""]
    md_sections += ["## Tier comparison"]
    md_sections += table_lines if present else ["(no tiers provided)"]
    md_sections += ["", "## Highlights", *(highlight_lines or ["(nothing to highlight)"])]

    return "\n".join(md_sections).strip()


# ------------------------------ public entry point ------------------------------

def build_plan_summary(calc_out: Dict[str, Any]) -> Dict[str, Any]:
    """
    Entry point used by /estimate/summary.

    Input: the JSON returned from /estimate/calculate (must include 'tiers').
    Output:
      {
        "markdown": "<report>",
        "generated_at": "<iso timestamp>"
      }
    """
    return {"markdown": _build_report_markdown(calc_out), "generated_at": _now_iso()}
