"""Fake submission notifier: records build requests for testing."""

from enquiries.notifier.port import SubmissionNotifier, SubmissionResult, new_reference
from enquiries.wizard.schemas import BuildRequest


class FakeNotifier(SubmissionNotifier):
    """Notifier that records requests in memory for test assertions."""

    def __init__(self):
        self.submitted: list[BuildRequest] = []
        self.should_succeed = True
        self.failure_message: str | None = None
        self.error: Exception | None = None

    def configure(self, should_succeed: bool = True, failure_message: str | None = None, error=None):
        """Configure the fake notifier behavior for testing.

        ``error`` is raised from ``submit`` instead of returning a result.
        """
        self.should_succeed = should_succeed
        self.failure_message = failure_message
        self.error = error

    def submit(self, request: BuildRequest) -> SubmissionResult:
        if self.error is not None:
            raise self.error
        if not self.should_succeed:
            return SubmissionResult(success=False, message=self.failure_message)

        self.submitted.append(request)
        return SubmissionResult(success=True, reference=new_reference())

    def reset(self):
        """Clear recorded requests (useful between tests)."""
        self.submitted.clear()
        self.should_succeed = True
        self.failure_message = None
        self.error = None
