"""Wizard creation: command and handler."""

import json

from protean import handle
from protean.fields import Text
from protean.utils.globals import current_domain

from enquiries.domain import enquiries
from enquiries.wizard.wizard import BuildWizard


@enquiries.command(part_of="BuildWizard")
class StartBuildWizard:
    """Start a new build request, optionally pre-filled from link parameters."""

    params = Text()  # JSON object of link query parameters


@enquiries.command_handler(part_of=BuildWizard)
class StartBuildWizardHandler:
    @handle(StartBuildWizard)
    def start_build_wizard(self, command):
        params = json.loads(command.params) if command.params else {}
        wizard = BuildWizard.start(params)
        current_domain.repository_for(BuildWizard).add(wizard)
        return str(wizard.id)
