from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import PayoutStatus
from .model import PayoutRecord


class PayoutRepository(Protocol):
    def list_for_period(
        self,
        *,
        period_start: date,
        status: Optional[PayoutStatus] = None,
    ) -> Sequence[PayoutRecord]:
        raise NotImplementedError

    def insert_new(self, records: Sequence[PayoutRecord]) -> list[PayoutRecord]:
        """Insert rows in one transaction and return those actually written.

        A row whose ``(worker_id, job_id, period_start)`` already exists is
        left untouched and omitted from the result. Status changes and
        deletions are not part of this interface.
        """

        raise NotImplementedError
