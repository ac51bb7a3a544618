class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UnconfiguredPayStructureError(DomainError):
    """Raised when a job's pay structure has no calculation rule."""

    def __init__(self, job_id: str, pay_structure: object):
        super().__init__(f"Job {job_id} has unsupported pay structure {pay_structure!r}")
        self.job_id = job_id
        self.pay_structure = pay_structure


class StoreError(Exception):
    """Base exception for persistence failures."""


class StoreReadError(StoreError):
    """Raised when reading engine inputs from the store fails."""


class StoreWriteError(StoreError):
    """Raised when new payout rows could not be persisted."""
