# renobudget/api/summary.py

from __future__ import annotations
from flask import Blueprint, request, jsonify

from ..services.summary_service import build_plan_summary

bp = Blueprint("summary_api", __name__)

@bp.post("/estimate/summary")
def estimate_summary():
    """
    POST /estimate/summary
    Body: either the full calculation output from /estimate/calculate,
          or an object with a key "calculation" that contains it.

    Returns: { markdown, generated_at }
    """
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return jsonify({"error": "expected a JSON object"}), 400
    calc_out = payload.get("calculation") or payload
    tiers = calc_out.get("tiers") if isinstance(calc_out, dict) else None
    if not isinstance(tiers, dict) or not all(isinstance(t, dict) for t in tiers.values()):
        return jsonify({"error": "expected calculation output (must include 'tiers')"}), 400

    return jsonify(build_plan_summary(calc_out)), 200
