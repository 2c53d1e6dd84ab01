"""Enquiries bounded context: the build configuration wizard.

Collects a customer's fitout project details over four steps and hands the
completed request to a submission notifier (Slack, logs, or a test double).
"""

import structlog
from protean.domain import Domain

enquiries = Domain(name="enquiries")

logger = structlog.get_logger(__name__)
