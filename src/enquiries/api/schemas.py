"""Pydantic request/response schemas for the Enquiries API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from enquiries.wizard.schemas import STEP_TITLES
from enquiries.wizard.wizard import BuildWizard


class WizardIdResponse(BaseModel):
    wizard_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class WizardResponse(BaseModel):
    wizard_id: str
    current_step: int
    step_title: str
    status: str
    error_message: str | None = None
    form_data: dict[str, Any] | None = None
    reference: str | None = None
    submitted_at: datetime | None = None

    @classmethod
    def from_wizard(cls, wizard: BuildWizard) -> "WizardResponse":
        return cls(
            wizard_id=str(wizard.id),
            current_step=wizard.current_step,
            step_title=STEP_TITLES[wizard.current_step],
            status=wizard.status,
            error_message=wizard.error_message,
            form_data=wizard.data or None,
            reference=wizard.reference,
            submitted_at=wizard.submitted_at,
        )
