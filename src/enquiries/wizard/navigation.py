"""Wizard navigation: editing steps, moving between them and dismissing errors."""

import json

from protean import handle
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from enquiries.domain import enquiries
from enquiries.wizard.schemas import LAST_STEP
from enquiries.wizard.submission import submit_build_request
from enquiries.wizard.wizard import BuildWizard


@enquiries.command(part_of="BuildWizard")
class UpdateWizardStep:
    wizard_id = Identifier(required=True)
    step = Integer(required=True, min_value=1, max_value=LAST_STEP)
    values = Text(required=True)  # JSON object of field values for the step


@enquiries.command(part_of="BuildWizard")
class AdvanceWizard:
    """Press "next": move forward, or submit from the last step."""

    wizard_id = Identifier(required=True)


@enquiries.command(part_of="BuildWizard")
class ReturnToPreviousStep:
    wizard_id = Identifier(required=True)


@enquiries.command(part_of="BuildWizard")
class DismissWizardError:
    wizard_id = Identifier(required=True)


@enquiries.command_handler(part_of=BuildWizard)
class WizardNavigationHandler:
    @handle(UpdateWizardStep)
    def update_step(self, command):
        repo = current_domain.repository_for(BuildWizard)
        wizard = repo.get(command.wizard_id)
        wizard.update_step(command.step, json.loads(command.values))
        repo.add(wizard)

    @handle(AdvanceWizard)
    def advance(self, command):
        """Returns whether the wizard moved forward (or, on the last step, was submitted)."""
        repo = current_domain.repository_for(BuildWizard)
        wizard = repo.get(command.wizard_id)

        at_last_step = wizard.current_step == LAST_STEP
        passed = wizard.advance()
        if passed and at_last_step:
            passed = submit_build_request(wizard)

        repo.add(wizard)
        return passed

    @handle(ReturnToPreviousStep)
    def back(self, command):
        repo = current_domain.repository_for(BuildWizard)
        wizard = repo.get(command.wizard_id)
        wizard.back()
        repo.add(wizard)

    @handle(DismissWizardError)
    def dismiss_error(self, command):
        repo = current_domain.repository_for(BuildWizard)
        wizard = repo.get(command.wizard_id)
        wizard.dismiss_error()
        repo.add(wizard)
