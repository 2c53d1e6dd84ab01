"""Slack incoming-webhook notifier.

Posts a header block and a section of contact and project fields to the
webhook in ``SLACK_WEBHOOK_URL``.
"""

import httpx
import structlog

from enquiries.notifier.port import SubmissionNotifier, SubmissionResult, new_reference
from enquiries.wizard.schemas import (
    BASE_KIT_LABELS,
    BUDGET_LABELS,
    PROJECT_TYPE_LABELS,
    TIMELINE_LABELS,
    BuildRequest,
    label_for,
)

logger = structlog.get_logger(__name__)

HEADER_TEXT = "🚐 New Build Request"
DELIVERY_FAILED_MESSAGE = "Failed to submit build request. Please try again."


def build_slack_message(request: BuildRequest) -> dict:
    step1, step3, step4 = request.step1, request.step3, request.step4
    base_kit = label_for(BASE_KIT_LABELS, step1.base_kit) if step1.base_kit else "N/A"
    fields = [
        f"*Name:* {step4.first_name} {step4.last_name}",
        f"*Email:* {step4.email}",
        f"*Phone:* {step4.phone}",
        f"*Location:* {step4.location}",
        f"*Project:* {label_for(PROJECT_TYPE_LABELS, step1.project_type)}",
        f"*Base Kit:* {base_kit}",
        f"*Budget:* {label_for(BUDGET_LABELS, step3.budget)}",
        f"*Timeline:* {label_for(TIMELINE_LABELS, step3.timeline)}",
    ]
    return {
        "text": HEADER_TEXT,
        "blocks": [
            {"type": "header", "text": {"type": "plain_text", "text": HEADER_TEXT}},
            {"type": "section", "fields": [{"type": "mrkdwn", "text": text} for text in fields]},
        ],
    }


class SlackWebhookNotifier(SubmissionNotifier):
    def __init__(self, webhook_url: str, transport: httpx.BaseTransport | None = None, timeout: float = 10.0):
        self.webhook_url = webhook_url
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def submit(self, request: BuildRequest) -> SubmissionResult:
        reference = new_reference()
        try:
            response = self._client.post(self.webhook_url, json=build_slack_message(request))
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("slack_webhook_failed", reference=reference, error=str(exc))
            return SubmissionResult(success=False, message=DELIVERY_FAILED_MESSAGE)

        logger.info("slack_webhook_sent", reference=reference)
        return SubmissionResult(success=True, message="Build request submitted successfully!", reference=reference)
