"""Submission notifier port: where completed build requests are delivered."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import uuid4

from enquiries.wizard.schemas import BuildRequest


@dataclass(frozen=True)
class SubmissionResult:
    success: bool
    message: str | None = None
    reference: str | None = None


def new_reference() -> str:
    return f"BR-{uuid4().hex[:8].upper()}"


class SubmissionNotifier(ABC):
    """Abstract interface for build request delivery."""

    @abstractmethod
    def submit(self, request: BuildRequest) -> SubmissionResult:
        """Deliver a validated build request.

        Expected failures are reported through ``SubmissionResult`` with a
        customer-facing ``message``. Anything raised is treated as unexpected.
        """
        ...
