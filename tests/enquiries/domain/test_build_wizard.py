"""Tests for BuildWizard aggregate navigation and submission state."""

import pytest
from protean.exceptions import ValidationError

from enquiries.wizard.events import (
    BuildRequestFailed,
    BuildRequestSubmitted,
    WizardStarted,
    WizardStepCompleted,
)
from enquiries.wizard.wizard import (
    DEFAULT_FAILURE_MESSAGE,
    STEP_INCOMPLETE_MESSAGE,
    TIMELINE_INCOMPLETE_MESSAGE,
    BuildWizard,
    WizardStatus,
)


def _wizard_at(step, step_values):
    wizard = BuildWizard.start()
    for number in range(1, step):
        wizard.update_step(number, step_values[number])
        assert wizard.advance() is True
    wizard._events.clear()
    return wizard


class TestStart:
    def test_starts_on_first_step(self):
        wizard = BuildWizard.start()

        assert wizard.current_step == 1
        assert wizard.status == WizardStatus.IN_PROGRESS.value
        assert wizard.error_message is None
        assert wizard.step_values(1)["project_type"] == "flat-pack"

    def test_start_with_link_params(self):
        wizard = BuildWizard.start({"base": "premium", "finish": "plain-birch"})

        assert wizard.step_values(1)["base_kit"] == "premium"
        event = wizard._events[-1]
        assert isinstance(event, WizardStarted)
        assert event.base_kit == "premium"


class TestUpdateStep:
    def test_merges_values(self):
        wizard = BuildWizard.start()
        wizard.update_step(2, {"features": ["lighting", "inverter"]})

        values = wizard.step_values(2)
        assert values["features"] == ["lighting", "inverter"]
        assert values["vehicle_type"] == "troopcarrier"

    def test_any_step_can_be_edited(self):
        wizard = BuildWizard.start()
        wizard.update_step(4, {"first_name": "Jo"})
        assert wizard.current_step == 1
        assert wizard.step_values(4)["first_name"] == "Jo"

    def test_unknown_field(self):
        wizard = BuildWizard.start()
        with pytest.raises(ValidationError) as exc:
            wizard.update_step(1, {"vehicle_type": "van"})
        assert "values" in exc.value.messages

    def test_unknown_step(self):
        with pytest.raises(ValidationError):
            BuildWizard.start().update_step(5, {})


class TestAdvance:
    def test_defaults_pass_first_two_steps(self):
        wizard = BuildWizard.start()

        assert wizard.advance() is True
        assert wizard.advance() is True
        assert wizard.current_step == 3
        assert [e.step for e in wizard._events if isinstance(e, WizardStepCompleted)] == [1, 2]

    def test_invalid_step_stays_put(self):
        wizard = BuildWizard.start()
        wizard.update_step(1, {"project_type": "space-station"})

        assert wizard.advance() is False
        assert wizard.current_step == 1
        assert wizard.error_message == STEP_INCOMPLETE_MESSAGE

    def test_timeline_step_needs_all_three(self, step_values):
        wizard = _wizard_at(3, step_values)
        wizard.update_step(3, {"timeline": "asap", "budget": "discuss"})

        assert wizard.advance() is False
        assert wizard.current_step == 3
        assert wizard.error_message == TIMELINE_INCOMPLETE_MESSAGE

    def test_passing_clears_error(self, step_values):
        wizard = _wizard_at(3, step_values)
        wizard.advance()
        wizard.update_step(3, step_values[3])

        assert wizard.advance() is True
        assert wizard.current_step == 4
        assert wizard.error_message is None

    def test_contact_step_guard(self, step_values):
        wizard = _wizard_at(4, step_values)
        wizard.update_step(4, {**step_values[4], "email": "not-an-email"})

        assert wizard.advance() is False
        assert wizard.error_message == STEP_INCOMPLETE_MESSAGE

    def test_last_step_does_not_move(self, step_values):
        wizard = _wizard_at(4, step_values)
        wizard.update_step(4, step_values[4])

        assert wizard.advance() is True
        assert wizard.current_step == 4
        assert wizard._events == []


class TestBack:
    def test_back(self, step_values):
        wizard = _wizard_at(3, step_values)
        wizard.back()
        assert wizard.current_step == 2

    def test_back_on_first_step(self):
        wizard = BuildWizard.start()
        wizard.back()
        assert wizard.current_step == 1

    def test_back_keeps_entered_data(self, step_values):
        wizard = _wizard_at(4, step_values)
        wizard.update_step(4, {"first_name": "Jo"})
        wizard.back()
        wizard.back()
        assert wizard.step_values(4)["first_name"] == "Jo"
        assert wizard.step_values(3) == step_values[3]

    def test_back_is_never_guarded(self, step_values):
        wizard = _wizard_at(3, step_values)
        wizard.update_step(3, {"timeline": None})
        wizard.back()
        assert wizard.current_step == 2

    def test_dismiss_error(self):
        wizard = BuildWizard.start()
        wizard.update_step(1, {"project_type": "space-station"})
        wizard.advance()

        wizard.dismiss_error()

        assert wizard.error_message is None


class TestSubmission:
    def test_only_from_last_step(self):
        with pytest.raises(ValidationError):
            BuildWizard.start().begin_submission()

    def test_complete(self, step_values):
        wizard = _wizard_at(4, step_values)
        wizard.begin_submission()
        assert wizard.status == WizardStatus.SUBMITTING.value

        wizard.complete_submission("BR-12345678")

        assert wizard.is_complete
        assert wizard.reference == "BR-12345678"
        assert wizard.submitted_at is not None
        assert wizard.data == {}
        event = wizard._events[-1]
        assert isinstance(event, BuildRequestSubmitted)
        assert event.project_type == "flat-pack"
        assert event.base_kit == "wander"

    def test_no_edits_while_submitting(self, step_values):
        wizard = _wizard_at(4, step_values)
        wizard.begin_submission()

        with pytest.raises(ValidationError):
            wizard.update_step(4, {"first_name": "Sam"})
        with pytest.raises(ValidationError):
            wizard.back()

    def test_failure_keeps_data(self, step_values):
        wizard = _wizard_at(4, step_values)
        wizard.update_step(4, step_values[4])
        wizard.begin_submission()

        wizard.fail_submission("Slack is down")

        assert wizard.status == WizardStatus.IN_PROGRESS.value
        assert wizard.current_step == 4
        assert wizard.error_message == "Slack is down"
        assert wizard.step_values(4) == step_values[4]
        assert isinstance(wizard._events[-1], BuildRequestFailed)

    def test_failure_without_message(self, step_values):
        wizard = _wizard_at(4, step_values)
        wizard.begin_submission()
        wizard.fail_submission()
        assert wizard.error_message == DEFAULT_FAILURE_MESSAGE
