"""Build wizard form schemas: one pydantic model per step.

Form data is kept as a nested dict (``step1`` .. ``step4``) on the wizard
aggregate; these models validate it. Each step has a fixed list of fields
that must validate before the wizard may move past that step.
"""

from enum import Enum

from pydantic import BaseModel, Field, ValidationError, field_validator


class ProjectType(Enum):
    FLAT_PACK = "flat-pack"
    CUSTOM_FITOUT = "custom-fitout"
    CONSULTATION = "consultation"


class BaseKit(Enum):
    WANDER = "wander"
    ROAM = "roam"
    PREMIUM = "premium"
    CUSTOM = "custom"


class VehicleType(Enum):
    TROOPCARRIER = "troopcarrier"
    FOUR_WD = "4wd"
    VAN = "van"
    OTHER = "other"


class FridgeType(Enum):
    CHEST = "chest"
    UPRIGHT = "upright"
    NONE = "none"


class Finish(Enum):
    PLAIN_HARDWOOD = "plain-hardwood"
    EUCALYPTUS_BLACK_HEX = "eucalyptus-black-hex"
    BIRCH_BLACK_HEX = "birch-black-hex"
    BLACK_HEX = "black-hex"
    WHITE = "white"
    PLAIN_BIRCH = "plain-birch"
    PREMIUM = "premium"


class Feature(Enum):
    STORAGE_DRAWERS = "storage-drawers"
    KITCHEN_SETUP = "kitchen-setup"
    BED_PLATFORM = "bed-platform"
    ELECTRICAL_SYSTEM = "electrical-system"
    WATER_SYSTEM = "water-system"
    LIGHTING = "lighting"
    SOLAR_PANEL = "solar-panel"
    INVERTER = "inverter"


class Timeline(Enum):
    ASAP = "asap"
    ONE_MONTH = "1-month"
    TWO_TO_THREE_MONTHS = "2-3-months"
    THREE_TO_SIX_MONTHS = "3-6-months"
    FLEXIBLE = "flexible"


class Budget(Enum):
    UNDER_5K = "under-5k"
    FROM_5K_TO_10K = "5k-10k"
    FROM_10K_TO_20K = "10k-20k"
    OVER_20K = "20k-plus"
    DISCUSS = "discuss"


class InstallationPreference(Enum):
    DIY = "diy"
    PROFESSIONAL = "professional"
    PARTIAL_HELP = "partial-help"


# ---------------------------------------------------------------------------
# Step models
# ---------------------------------------------------------------------------
class Step1(BaseModel):
    project_type: ProjectType
    base_kit: BaseKit | None = None


class Step2(BaseModel):
    vehicle_type: VehicleType
    fridge_type: FridgeType | None = None
    finish: Finish | None = None
    features: list[Feature] = Field(default_factory=list)


class Step3(BaseModel):
    timeline: Timeline
    budget: Budget
    installation_preference: InstallationPreference


class Step4(BaseModel):
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    email: str
    phone: str = Field(min_length=10)
    location: str = Field(min_length=2)
    message: str | None = None
    marketing_consent: bool = False

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        """Structural check only: one @, a dotted domain, no whitespace."""
        if any(ch.isspace() for ch in value) or value.count("@") != 1:
            raise ValueError("Please enter a valid email address")
        local_part, domain_part = value.split("@", 1)
        if not local_part or "." not in domain_part.strip("."):
            raise ValueError("Please enter a valid email address")
        if ".." in value or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValueError("Please enter a valid email address")
        return value


class BuildRequest(BaseModel):
    """A complete, validated build request ready to hand to a notifier."""

    step1: Step1
    step2: Step2
    step3: Step3
    step4: Step4


STEP_MODELS: dict[int, type[BaseModel]] = {1: Step1, 2: Step2, 3: Step3, 4: Step4}

# Fields checked by the "next" guard for each step. Step 4's optional
# message and consent flag are not part of the guard.
STEP_FIELDS: dict[int, tuple[str, ...]] = {
    1: ("project_type", "base_kit"),
    2: ("vehicle_type", "fridge_type", "finish", "features"),
    3: ("timeline", "budget", "installation_preference"),
    4: ("first_name", "last_name", "email", "phone", "location"),
}

FIRST_STEP = 1
LAST_STEP = 4

STEP_TITLES = {
    1: "Project Type",
    2: "Configuration",
    3: "Timeline & Budget",
    4: "Contact Info",
}


def default_form_data() -> dict:
    return {
        "step1": {"project_type": ProjectType.FLAT_PACK.value, "base_kit": None},
        "step2": {
            "vehicle_type": VehicleType.TROOPCARRIER.value,
            "fridge_type": None,
            "finish": None,
            "features": [],
        },
        "step3": {"timeline": None, "budget": None, "installation_preference": None},
        "step4": {
            "first_name": "",
            "last_name": "",
            "email": "",
            "phone": "",
            "location": "",
            "message": "",
            "marketing_consent": False,
        },
    }


def validate_step(step: int, values: dict) -> dict[str, str]:
    """Validate the guarded fields of one step.

    Returns a mapping of field name to the first error message for that field.
    Errors on fields outside the step's guard list are ignored.
    """
    model = STEP_MODELS[step]
    try:
        model.model_validate(values or {})
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            if field in STEP_FIELDS[step] and field not in errors:
                errors[field] = error["msg"]
        return errors
    return {}


def validate_form(form_data: dict) -> BuildRequest:
    """Validate every step. Raises ``pydantic.ValidationError`` on any problem."""
    return BuildRequest.model_validate(form_data)


# ---------------------------------------------------------------------------
# Display labels
# ---------------------------------------------------------------------------
PROJECT_TYPE_LABELS = {
    "flat-pack": "Flat Pack Solution",
    "custom-fitout": "Custom Fitout",
    "consultation": "Consultation Only",
}

BASE_KIT_LABELS = {
    "wander": "Wander Kit (Budget)",
    "roam": "Roam Kit (Popular)",
    "premium": "Premium Kit (Luxury)",
    "custom": "Custom Solution",
}

VEHICLE_TYPE_LABELS = {
    "troopcarrier": "Toyota Troopcarrier",
    "4wd": "4WD Vehicle",
    "van": "Van/Campervan",
    "other": "Other Vehicle",
}

TIMELINE_LABELS = {
    "asap": "ASAP",
    "1-month": "1 Month",
    "2-3-months": "2-3 Months",
    "3-6-months": "3-6 Months",
    "flexible": "Flexible",
}

BUDGET_LABELS = {
    "under-5k": "Under $5,000",
    "5k-10k": "$5,000 - $10,000",
    "10k-20k": "$10,000 - $20,000",
    "20k-plus": "$20,000+",
    "discuss": "Prefer to Discuss",
}


def label_for(labels: dict[str, str], value) -> str:
    if isinstance(value, Enum):
        value = value.value
    return labels.get(value, value)
