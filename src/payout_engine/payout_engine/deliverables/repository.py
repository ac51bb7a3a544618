from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import DeliverableRecord


class DeliverableRepository(Protocol):
    def list_for_period(self, *, start_date: date, end_date: date) -> Sequence[DeliverableRecord]:
        raise NotImplementedError
