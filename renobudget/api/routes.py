# renobudget/api/routes.py
from flask import Blueprint, jsonify, request
from ..utils.config import settings
from ..utils.logging import get_logger
from ..services.tier_calculator import compute_all_tiers
from ..services.validation import validate_inputs
from ..domain.project_types import PROJECT_TYPES
from ..domain.tiers import TIER_ORDER
from ..domain.errors import BadRequest
from .schemas import EstimateRequest

bp = Blueprint('api', __name__)
log = get_logger(__name__)

@bp.get('/health')
def health():
    return jsonify({"status": "ok", "env": settings.ENV})

@bp.get('/estimate/project-types')
def project_types():
    return jsonify({
        "project_types": list(PROJECT_TYPES),
        "tiers": [t.value for t in TIER_ORDER],
    })

@bp.post('/estimate/calculate')
def estimate_calculate():
    body = request.get_json(force=True, silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise BadRequest("request body must be a JSON object")
    req = EstimateRequest.from_body(body)
    inputs = validate_inputs(req.home_value, req.yearly_income, req.project_type)

    # InvalidConfiguration propagates to the app handler; no partial tiers are returned
    results = compute_all_tiers(inputs.home_value, inputs.yearly_income, inputs.project_type)
    log.info(f"estimate project={inputs.project_type} home_value={inputs.home_value} tiers={len(results)}")

    return jsonify({
        "inputs": inputs.to_dict(),
        "tiers": {name: res.to_dict() for name, res in results.items()},
    })
