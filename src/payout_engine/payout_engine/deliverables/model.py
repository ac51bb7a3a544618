from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Union


@dataclass(frozen=True)
class IndividualDeliverable:
    """Output attributed to a single worker."""

    worker_id: str
    job_id: str
    date: date
    quantity: Decimal


@dataclass(frozen=True)
class TeamDeliverable:
    """Team-level output of a pooled job, recorded without a worker."""

    job_id: str
    date: date
    quantity: Decimal


DeliverableRecord = Union[IndividualDeliverable, TeamDeliverable]


def deliverable_from_row(*, worker_id: Optional[str], job_id: str, date: date, quantity: Decimal) -> DeliverableRecord:
    if worker_id:
        return IndividualDeliverable(worker_id=worker_id, job_id=job_id, date=date, quantity=quantity)
    return TeamDeliverable(job_id=job_id, date=date, quantity=quantity)
