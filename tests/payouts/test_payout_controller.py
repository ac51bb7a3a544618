from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest
from flask import Flask

from src.payout_engine.payout_engine.core.enums import PayoutStatus
from src.payout_engine.payout_engine.core.exceptions import StoreReadError
from src.payout_engine.payout_engine.payouts import controller as payouts_controller
from src.payout_engine.payout_engine.payouts.model import PayoutRecord
from src.payout_engine.payout_engine.payouts.service import RecalculationResult


def _rec(status=PayoutStatus.PENDING, total="2000"):
    return PayoutRecord(
        id="p1",
        worker_id="w1",
        job_id="j1",
        period_start=date(2024, 1, 1),
        period_end=date(2024, 1, 31),
        days_worked=4,
        total_days=23,
        deliverables=Decimal(0),
        target_deliverables=Decimal(0),
        base_pay=Decimal(total),
        commission=Decimal(0),
        total_payout=Decimal(total),
        status=status,
        payment_type="flat",
    )


class FakePayoutService:
    def __init__(self, *, fail=False, write_error=None):
        self.fail = fail
        self.write_error = write_error
        self.periods = []
        self.statuses = []

    def recalculate(self, period):
        self.periods.append(period)
        if self.fail:
            raise StoreReadError("timeout")
        return RecalculationResult(period=period, to_display=[_rec()], inserted=[_rec()], write_error=self.write_error)

    def list_payouts(self, period, *, status=None):
        self.periods.append(period)
        self.statuses.append(status)
        return [_rec(PayoutStatus.APPROVED, "100")]


def _client(service):
    app = Flask(__name__)
    app.config["TESTING"] = True
    payouts_controller.register(app, SimpleNamespace(payout_service=service))
    return app.test_client()


def test_recalculate_with_explicit_period():
    service = FakePayoutService()
    resp = _client(service).post("/api/payouts/recalculate", json={"start": "2024-01-01", "end": "2024-01-31"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["inserted"] == 1
    assert body["write_error"] is None
    assert body["payouts"][0]["total_payout"] == "2000"
    assert body["payouts"][0]["status"] == "pending"
    assert body["summary"]["total_pending"] == "2000"
    assert service.periods[0].start == date(2024, 1, 1)


def test_recalculate_defaults_to_current_month(monkeypatch):
    monkeypatch.setattr(payouts_controller, "today_local", lambda: date(2024, 2, 10))
    service = FakePayoutService()

    resp = _client(service).post("/api/payouts/recalculate")

    assert resp.status_code == 200
    assert service.periods[0].start == date(2024, 2, 1)
    assert service.periods[0].end == date(2024, 2, 29)


def test_recalculate_reports_write_error():
    resp = _client(FakePayoutService(write_error="disk full")).post("/api/payouts/recalculate", json={})

    assert resp.status_code == 200
    assert resp.get_json()["write_error"] == "disk full"
    assert len(resp.get_json()["payouts"]) == 1


def test_read_failure_is_503():
    resp = _client(FakePayoutService(fail=True)).post("/api/payouts/recalculate", json={})
    assert resp.status_code == 503


@pytest.mark.parametrize("payload", [{"start": "2024-01-01"}, {"start": "01/01/2024", "end": "2024-01-31"}])
def test_bad_period_is_400(payload):
    resp = _client(FakePayoutService()).post("/api/payouts/recalculate", json=payload)
    assert resp.status_code == 400


def test_list_payouts_with_status_filter():
    service = FakePayoutService()
    resp = _client(service).get("/api/payouts?start=2024-01-01&end=2024-01-31&status=approved")

    assert resp.status_code == 200
    assert service.statuses == [PayoutStatus.APPROVED]
    assert resp.get_json()["summary"]["total_approved"] == "100"


def test_list_payouts_all_status_means_no_filter():
    service = FakePayoutService()
    _client(service).get("/api/payouts?start=2024-01-01&end=2024-01-31&status=all")
    assert service.statuses == [None]


def test_list_payouts_rejects_unknown_status():
    resp = _client(FakePayoutService()).get("/api/payouts?start=2024-01-01&end=2024-01-31&status=paid")
    assert resp.status_code == 400


def test_payout_adjustments_serialize_as_strings_or_null():
    rec = replace(_rec(PayoutStatus.APPROVED), bonus=Decimal("100"), deductions=None)

    out = payouts_controller.payout_to_dict(rec)

    assert out["bonus"] == "100"
    assert out["deductions"] is None
    assert out["status"] == "approved"
