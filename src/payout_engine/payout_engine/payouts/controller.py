from __future__ import annotations

from dataclasses import asdict
from datetime import date
from decimal import Decimal

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..core.enums import PayoutStatus
from ..core.exceptions import StoreReadError, ValidationError
from ..periods.model import PayPeriod
from .model import PayoutBreakdown, PayoutRecord
from .summary import summarize


def _json_value(value):
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, PayoutStatus):
        return value.value
    return value


def payout_to_dict(record: PayoutRecord) -> dict:
    return {k: _json_value(v) for k, v in asdict(record).items()}


def breakdown_to_dict(breakdown: PayoutBreakdown) -> dict:
    out = {k: _json_value(v) for k, v in asdict(breakdown).items()}
    out["total_payout"] = str(breakdown.total_payout)
    return out


def _period_from(values) -> PayPeriod:
    start = values.get("start")
    end = values.get("end")
    if not start and not end:
        return PayPeriod.month_of(today_local())
    if not start or not end:
        raise ValidationError("Both start and end are required")
    return PayPeriod.parse(start, end)


def register(app: Flask, container) -> None:
    service = container.payout_service

    @app.errorhandler(ValidationError)
    def _bad_request(exc):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(StoreReadError)
    def _store_unavailable(exc):
        app.logger.error("[payouts] store read failed: %s", exc)
        return jsonify({"error": "Calculation failed, try again"}), 503

    @app.route("/api/payouts/recalculate", methods=["POST"])
    def recalculate_payouts():
        period = _period_from(request.get_json(silent=True) or {})
        result = service.recalculate(period)
        return jsonify(
            {
                "period": {"start": period.start.isoformat(), "end": period.end.isoformat()},
                "payouts": [payout_to_dict(r) for r in result.to_display],
                "inserted": len(result.inserted),
                "unconfigured": [breakdown_to_dict(b) for b in result.unconfigured],
                "write_error": result.write_error,
                "summary": {k: _json_value(v) for k, v in asdict(summarize(result.to_display)).items()},
            }
        )

    @app.route("/api/payouts", methods=["GET"])
    def list_payouts():
        period = _period_from(request.args)
        status_raw = (request.args.get("status") or "").strip().lower()
        status = None
        if status_raw and status_raw != "all":
            try:
                status = PayoutStatus(status_raw)
            except ValueError as exc:
                raise ValidationError(f"Unknown status {status_raw!r}") from exc

        rows = service.list_payouts(period, status=status)
        return jsonify(
            {
                "payouts": [payout_to_dict(r) for r in rows],
                "summary": {k: _json_value(v) for k, v in asdict(summarize(rows)).items()},
            }
        )
