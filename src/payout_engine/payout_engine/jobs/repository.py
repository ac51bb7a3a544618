from __future__ import annotations

from typing import Protocol, Sequence

from .model import JobPayConfig, RosterEntry


class JobRepository(Protocol):
    def list_pay_configs(self) -> Sequence[JobPayConfig]:
        raise NotImplementedError

    def list_active_roster(self) -> Sequence[RosterEntry]:
        """Active job-worker assignments."""

        raise NotImplementedError
