"""FastAPI routes for the Enquiries domain: the build request wizard."""

import json
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request
from protean.utils.globals import current_domain

from enquiries.api.schemas import StatusResponse, WizardIdResponse, WizardResponse
from enquiries.wizard.management import StartBuildWizard
from enquiries.wizard.navigation import (
    AdvanceWizard,
    DismissWizardError,
    ReturnToPreviousStep,
    UpdateWizardStep,
)
from enquiries.wizard.schemas import STEP_MODELS
from enquiries.wizard.wizard import BuildWizard

build_router = APIRouter(prefix="/build-requests", tags=["build-requests"])


def _wizard_response(wizard_id: str) -> WizardResponse:
    return WizardResponse.from_wizard(current_domain.repository_for(BuildWizard).get(wizard_id))


@build_router.post("", status_code=201, response_model=WizardIdResponse)
async def start_build_request(request: Request) -> WizardIdResponse:
    """Start a wizard. Query parameters (project, base, fridge, finish) pre-fill it."""
    params = dict(request.query_params)
    result = current_domain.process(StartBuildWizard(params=json.dumps(params)), asynchronous=False)
    return WizardIdResponse(wizard_id=result)


@build_router.get("/{wizard_id}", response_model=WizardResponse)
async def get_build_request(wizard_id: str) -> WizardResponse:
    return _wizard_response(wizard_id)


@build_router.put("/{wizard_id}/steps/{step}", response_model=StatusResponse)
async def update_build_request_step(
    wizard_id: str, step: int, values: dict[str, Any] = Body(...)
) -> StatusResponse:
    if step not in STEP_MODELS:
        raise HTTPException(status_code=404, detail=f"Step {step} not found")
    command = UpdateWizardStep(wizard_id=wizard_id, step=step, values=json.dumps(values))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@build_router.post("/{wizard_id}/next", response_model=WizardResponse)
async def advance_build_request(wizard_id: str) -> WizardResponse:
    current_domain.process(AdvanceWizard(wizard_id=wizard_id), asynchronous=False)
    return _wizard_response(wizard_id)


@build_router.post("/{wizard_id}/previous", response_model=WizardResponse)
async def return_to_previous_step(wizard_id: str) -> WizardResponse:
    current_domain.process(ReturnToPreviousStep(wizard_id=wizard_id), asynchronous=False)
    return _wizard_response(wizard_id)


@build_router.delete("/{wizard_id}/error", response_model=WizardResponse)
async def dismiss_build_request_error(wizard_id: str) -> WizardResponse:
    current_domain.process(DismissWizardError(wizard_id=wizard_id), asynchronous=False)
    return _wizard_response(wizard_id)
