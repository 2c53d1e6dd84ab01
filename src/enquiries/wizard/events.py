"""Domain events for the BuildWizard aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from enquiries.domain import enquiries


@enquiries.event(part_of="BuildWizard")
class WizardStarted:
    __version__ = 1

    wizard_id = Identifier(required=True)
    project_type = String()
    base_kit = String()


@enquiries.event(part_of="BuildWizard")
class WizardStepCompleted:
    """The customer moved forward past a step."""

    __version__ = 1

    wizard_id = Identifier(required=True)
    step = Integer(required=True)


@enquiries.event(part_of="BuildWizard")
class BuildRequestSubmitted:
    """The notifier accepted the build request. Contact details are not carried."""

    __version__ = 1

    wizard_id = Identifier(required=True)
    project_type = String(required=True)
    base_kit = String()
    reference = String()
    submitted_at = DateTime(required=True)


@enquiries.event(part_of="BuildWizard")
class BuildRequestFailed:
    __version__ = 1

    wizard_id = Identifier(required=True)
    reason = String(required=True)
