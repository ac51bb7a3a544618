"""Recalculate payouts for one period from the command line.

Usage: python scripts/recalculate.py [START END]   (dates as YYYY-MM-DD,
default: current month)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.payout_engine.payout_engine.common.datetime_utils import today_local
from src.payout_engine.payout_engine.container import build_container
from src.payout_engine.payout_engine.payouts.summary import summarize
from src.payout_engine.payout_engine.periods.model import PayPeriod


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = load_settings()
    container = build_container(db_config=settings.DB_CONFIG)

    if len(argv) == 2:
        period = PayPeriod.parse(argv[0], argv[1])
    elif not argv:
        period = PayPeriod.month_of(today_local())
    else:
        raise SystemExit(__doc__)

    result = container.payout_service.recalculate(period)
    summary = summarize(result.to_display)
    print(
        f"{period.label()}: {summary.count} payouts, {len(result.inserted)} new, "
        f"pending={summary.total_pending} approved={summary.total_approved} processed={summary.total_processed}"
    )
    for b in result.unconfigured:
        print(f"  unconfigured: job={b.job_id} worker={b.worker_id} pay_structure={b.pay_structure!r}")
    if not result.ok:
        print(f"ERROR: payouts not stored: {result.write_error}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
