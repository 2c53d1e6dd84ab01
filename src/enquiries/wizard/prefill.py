"""Pre-fill wizard form data from shareable link parameters.

Only a hard-coded subset of values can be set from a link: roam and custom
base kits are not offered, and the "none" fridge option is left to the
customer. Unknown parameters and values outside the allow-lists are ignored.
"""

import copy

import structlog

from enquiries.wizard.schemas import Finish, ProjectType, default_form_data

logger = structlog.get_logger(__name__)

PROJECT_PARAM_VALUES = frozenset(p.value for p in ProjectType)
BASE_PARAM_VALUES = frozenset({"wander", "premium"})
FRIDGE_PARAM_VALUES = frozenset({"chest", "upright"})
FINISH_PARAM_VALUES = frozenset(f.value for f in Finish)

# (link parameter, form step, form field, allowed values)
_PREFILL_RULES = (
    ("project", "step1", "project_type", PROJECT_PARAM_VALUES),
    ("base", "step1", "base_kit", BASE_PARAM_VALUES),
    ("fridge", "step2", "fridge_type", FRIDGE_PARAM_VALUES),
    ("finish", "step2", "finish", FINISH_PARAM_VALUES),
)


def prefill_form_data(params: dict | None, form_data: dict | None = None) -> dict:
    """Return a copy of ``form_data`` (defaults when omitted) with link values applied."""
    data = copy.deepcopy(form_data) if form_data is not None else default_form_data()

    for param, step, field, allowed in _PREFILL_RULES:
        value = (params or {}).get(param)
        if value is None:
            continue
        if value in allowed:
            data[step][field] = value
        else:
            logger.debug("wizard_prefill_ignored", param=param, value=value)

    return data
