"""Submission notifier registry: where completed build requests go.

Selected with SUBMISSION_NOTIFIER: ``logging`` (default), ``slack`` (needs
SLACK_WEBHOOK_URL) or ``fake``.
"""

import os

import structlog

from enquiries.notifier.port import SubmissionNotifier

logger = structlog.get_logger(__name__)

_notifier_instance: SubmissionNotifier | None = None


def get_notifier() -> SubmissionNotifier:
    """Return the configured submission notifier (singleton)."""
    global _notifier_instance
    if _notifier_instance is None:
        kind = os.environ.get("SUBMISSION_NOTIFIER", "logging")
        webhook_url = os.environ.get("SLACK_WEBHOOK_URL")
        if kind == "slack" and webhook_url:
            from enquiries.notifier.slack_notifier import SlackWebhookNotifier

            _notifier_instance = SlackWebhookNotifier(webhook_url)
        elif kind == "fake":
            from enquiries.notifier.fake_notifier import FakeNotifier

            _notifier_instance = FakeNotifier()
        elif kind in ("logging", "slack"):
            if kind == "slack":
                logger.warning("slack_webhook_not_configured")
            from enquiries.notifier.logging_notifier import LoggingNotifier

            _notifier_instance = LoggingNotifier()
        else:
            raise ValueError(f"Unknown submission notifier: {kind}")
    return _notifier_instance


def set_notifier(notifier: SubmissionNotifier) -> None:
    """Override the active notifier (useful for tests)."""
    global _notifier_instance
    _notifier_instance = notifier


def reset_notifier():
    """Reset the notifier singleton (useful for testing)."""
    global _notifier_instance
    _notifier_instance = None
