"""Notifier that only writes the build request to the application log.

Used when no delivery channel is configured, so submissions in development
are still visible.
"""

import structlog

from enquiries.notifier.port import SubmissionNotifier, SubmissionResult, new_reference
from enquiries.wizard.schemas import BuildRequest

logger = structlog.get_logger(__name__)


class LoggingNotifier(SubmissionNotifier):
    def submit(self, request: BuildRequest) -> SubmissionResult:
        reference = new_reference()
        logger.info(
            "build_request_received",
            reference=reference,
            **request.model_dump(mode="json", exclude={"step4"}),
            contact=f"{request.step4.first_name} {request.step4.last_name}",
            location=request.step4.location,
        )
        return SubmissionResult(success=True, message="Build request submitted successfully!", reference=reference)
