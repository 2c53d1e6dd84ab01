"""Shared BDD fixtures and step definitions for the build wizard."""

import pytest
from pytest_bdd import given, parsers, then

from enquiries.wizard.wizard import BuildWizard


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given("a new build wizard", target_fixture="wizard")
def new_wizard():
    wizard = BuildWizard.start()
    wizard._events.clear()
    return wizard


@given(parsers.cfparse("the wizard is on step {step:d} with earlier steps completed"), target_fixture="wizard")
def wizard_on_step(step, step_values):
    wizard = BuildWizard.start()
    for number in range(1, step):
        wizard.update_step(number, step_values[number])
        wizard.advance()
    wizard._events.clear()
    return wizard


@given(parsers.cfparse("the customer has filled in step {step:d}"))
def filled_in_step(wizard, step, step_values):
    wizard.update_step(step, step_values[step])


@then(parsers.cfparse("the wizard is on step {step:d}"))
def wizard_is_on_step(wizard, step):
    assert wizard.current_step == step


@then(parsers.cfparse('the wizard shows the error "{message}"'))
def wizard_shows_error(wizard, message):
    assert wizard.error_message == message


@then("the wizard shows no error")
def wizard_shows_no_error(wizard):
    assert wizard.error_message is None


@then(parsers.cfparse('the wizard status is "{status}"'))
def wizard_status_is(wizard, status):
    assert wizard.status == status
