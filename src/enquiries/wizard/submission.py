"""Build request submission.

Runs when the customer presses "next" on the last step. The whole form is
validated again before it is handed to the notifier. No outcome here is
fatal to the wizard: failures leave it on step 4 with the data intact and a
message to show.
"""

import pydantic
import structlog

from enquiries.notifier import get_notifier
from enquiries.wizard.schemas import validate_form
from enquiries.wizard.wizard import INVALID_FORM_MESSAGE, UNEXPECTED_ERROR_MESSAGE, BuildWizard

logger = structlog.get_logger(__name__)


def submit_build_request(wizard: BuildWizard) -> bool:
    """Submit ``wizard``'s form data. Returns whether the request was accepted."""
    log = logger.bind(wizard_id=str(wizard.id))
    wizard.begin_submission()

    try:
        request = validate_form(wizard.data)
    except pydantic.ValidationError as exc:
        log.info("build_request_invalid", error_count=exc.error_count())
        wizard.fail_submission(INVALID_FORM_MESSAGE)
        return False

    try:
        result = get_notifier().submit(request)
    except Exception:
        log.exception("build_request_submit_error")
        wizard.fail_submission(UNEXPECTED_ERROR_MESSAGE)
        return False

    if not result.success:
        log.warning("build_request_rejected", message=result.message)
        wizard.fail_submission(result.message)
        return False

    wizard.complete_submission(reference=result.reference)
    log.info("build_request_submitted", reference=result.reference)
    return True
