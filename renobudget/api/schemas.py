
from dataclasses import dataclass
from typing import Any, Dict, Optional

@dataclass
class EstimateRequest:
    home_value: Any = None       # number or text like "$300,000"
    yearly_income: Any = None
    project_type: Optional[str] = None

    @classmethod
    def from_body(cls, body: Dict) -> "EstimateRequest":
        return cls(
            home_value=body.get("home_value"),
            yearly_income=body.get("yearly_income"),
            project_type=body.get("project_type"),
        )
