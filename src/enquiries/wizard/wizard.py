"""BuildWizard aggregate: the four-step build request form.

State machine::

    In_Progress (step 1..4) --advance at step 4--> Submitting
    Submitting --notifier accepted--> Complete
    Submitting --notifier failed--> In_Progress (step 4, data kept)

Each step has a "next" guard over a fixed list of fields (see
``STEP_FIELDS``). A failed guard sets ``error_message`` and leaves the
wizard on the same step. Going back is never guarded. Nothing here
discards entered data except a successful submission.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String, Text

from enquiries.domain import enquiries
from enquiries.wizard.events import (
    BuildRequestFailed,
    BuildRequestSubmitted,
    WizardStarted,
    WizardStepCompleted,
)
from enquiries.wizard.prefill import prefill_form_data
from enquiries.wizard.schemas import (
    FIRST_STEP,
    LAST_STEP,
    STEP_MODELS,
    validate_step,
)

STEP_INCOMPLETE_MESSAGE = "Please complete all required fields in this step"
TIMELINE_INCOMPLETE_MESSAGE = "Please select a Timeline, Budget, and Installation preference to continue"
INVALID_FORM_MESSAGE = "Please check all form fields are filled correctly."
DEFAULT_FAILURE_MESSAGE = "Submission failed. Please try again."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again or contact us directly."

TIMELINE_STEP = 3
TIMELINE_FIELDS = ("timeline", "budget", "installation_preference")


class WizardStatus(Enum):
    IN_PROGRESS = "In_Progress"
    SUBMITTING = "Submitting"
    COMPLETE = "Complete"


@enquiries.aggregate
class BuildWizard:
    current_step = Integer(default=FIRST_STEP, min_value=FIRST_STEP, max_value=LAST_STEP)
    status = String(choices=WizardStatus, default=WizardStatus.IN_PROGRESS.value)
    error_message = String(max_length=500)
    form_data = Text()  # JSON: {"step1": {...}, ..., "step4": {...}}
    reference = String(max_length=100)  # Notifier's reference for the submitted request
    submitted_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def start(cls, params=None):
        """Create a wizard on step 1 with default values and any link pre-fill applied."""
        now = datetime.now(UTC)
        data = prefill_form_data(params)
        wizard = cls(
            current_step=FIRST_STEP,
            status=WizardStatus.IN_PROGRESS.value,
            form_data=json.dumps(data),
            created_at=now,
            updated_at=now,
        )
        wizard.raise_(
            WizardStarted(
                wizard_id=str(wizard.id),
                project_type=data["step1"]["project_type"],
                base_kit=data["step1"]["base_kit"],
            )
        )
        return wizard

    # -------------------------------------------------------------------
    # Form data
    # -------------------------------------------------------------------
    @property
    def data(self) -> dict:
        return json.loads(self.form_data) if self.form_data else {}

    def step_values(self, step: int) -> dict:
        return dict(self.data.get(f"step{step}", {}))

    @property
    def is_complete(self) -> bool:
        return self.status == WizardStatus.COMPLETE.value

    def _touch(self):
        self.updated_at = datetime.now(UTC)

    def _ensure_editable(self):
        if self.status != WizardStatus.IN_PROGRESS.value:
            raise ValidationError({"wizard": [f"Build request cannot be changed while {self.status}"]})

    def update_step(self, step: int, values: dict):
        """Merge ``values`` into one step's form data. Unknown field names are rejected."""
        self._ensure_editable()
        if step not in STEP_MODELS:
            raise ValidationError({"step": [f"Unknown wizard step {step}"]})

        known = STEP_MODELS[step].model_fields
        unknown = sorted(set(values) - set(known))
        if unknown:
            raise ValidationError({"values": [f"Unknown field(s) for step {step}: {', '.join(unknown)}"]})

        data = self.data
        data.setdefault(f"step{step}", {}).update(values)
        self.form_data = json.dumps(data)
        self._touch()

    # -------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------
    def step_errors(self, step: int | None = None) -> dict[str, str]:
        return validate_step(step or self.current_step, self.step_values(step or self.current_step))

    def advance(self) -> bool:
        """Run the current step's guard and move forward when it passes.

        On the last step a passing guard does not move the wizard; the
        caller submits the request instead. Returns whether the guard passed.
        """
        self._ensure_editable()
        self.error_message = None

        errors = self.step_errors()
        if self.current_step == TIMELINE_STEP:
            values = self.step_values(TIMELINE_STEP)
            if errors or not all(values.get(field) for field in TIMELINE_FIELDS):
                self.error_message = TIMELINE_INCOMPLETE_MESSAGE
                return False
        elif errors:
            self.error_message = STEP_INCOMPLETE_MESSAGE
            return False

        if self.current_step < LAST_STEP:
            completed = self.current_step
            self.current_step += 1
            self._touch()
            self.raise_(WizardStepCompleted(wizard_id=str(self.id), step=completed))
        return True

    def back(self):
        """Go to the previous step. Does nothing on step 1."""
        self._ensure_editable()
        if self.current_step > FIRST_STEP:
            self.current_step -= 1
            self._touch()

    def dismiss_error(self):
        self.error_message = None

    # -------------------------------------------------------------------
    # Submission
    # -------------------------------------------------------------------
    def begin_submission(self):
        if self.current_step != LAST_STEP:
            raise ValidationError({"wizard": ["Build request can only be submitted from the last step"]})
        self._ensure_editable()
        self.status = WizardStatus.SUBMITTING.value
        self.error_message = None

    def complete_submission(self, reference=None):
        """Mark the request submitted and discard the entered form data."""
        now = datetime.now(UTC)
        step1 = self.step_values(1)

        self.status = WizardStatus.COMPLETE.value
        self.reference = reference
        self.submitted_at = now
        self.error_message = None
        self.form_data = None
        self._touch()
        self.raise_(
            BuildRequestSubmitted(
                wizard_id=str(self.id),
                project_type=step1.get("project_type"),
                base_kit=step1.get("base_kit"),
                reference=reference,
                submitted_at=now,
            )
        )

    def fail_submission(self, message=None):
        """Return to step 4 with every entered value intact and show ``message``."""
        self.status = WizardStatus.IN_PROGRESS.value
        self.current_step = LAST_STEP
        self.error_message = (message or DEFAULT_FAILURE_MESSAGE)[:500]
        self._touch()
        self.raise_(BuildRequestFailed(wizard_id=str(self.id), reason=self.error_message))
