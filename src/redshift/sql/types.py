from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_SECONDS = 1.0


class StatementState(Enum):
    """
    Enum representing the status of a statement in the Redshift Data API.

    Attributes:
        SUBMITTED: The statement was accepted by the service
        PICKED: The statement was picked up by the workgroup or cluster
        STARTED: The statement is executing
        FINISHED: The statement completed successfully
        ABORTED: The statement was cancelled
        FAILED: The statement failed
        ALL: Listing filter used by the service, never reported for one statement
    """

    SUBMITTED = "SUBMITTED"
    PICKED = "PICKED"
    STARTED = "STARTED"
    FINISHED = "FINISHED"
    ABORTED = "ABORTED"
    FAILED = "FAILED"
    ALL = "ALL"

    @classmethod
    def from_service_state(cls, state: Optional[str]) -> "StatementState":
        """
        Map a Data API status string to a StatementState.

        Unrecognised strings are reported as SUBMITTED so that the watcher
        keeps polling instead of treating them as terminal.
        """
        try:
            return cls((state or "").upper())
        except ValueError:
            logger.debug("Unrecognised statement status %r, treating as pending", state)
            return cls.SUBMITTED

    @property
    def is_terminal(self) -> bool:
        return self in (StatementState.FINISHED, StatementState.ABORTED, StatementState.FAILED)

    @property
    def is_failure(self) -> bool:
        return self in (StatementState.ABORTED, StatementState.FAILED)


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings shared by every call made through one Client."""

    workgroup_name: str
    default_database: str
    poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS
    max_wait_seconds: Optional[float] = None
    strict_decoding: bool = False

    def __post_init__(self):
        if self.poll_interval < 0:
            raise ValueError("poll_interval must not be negative")
        if self.max_wait_seconds is not None and self.max_wait_seconds <= 0:
            raise ValueError("max_wait_seconds must be positive when set")
