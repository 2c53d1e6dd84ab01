"""Tests for build wizard step validation."""

import pydantic
import pytest

from enquiries.wizard.schemas import (
    BASE_KIT_LABELS,
    BaseKit,
    default_form_data,
    label_for,
    validate_form,
    validate_step,
)


class TestDefaults:
    def test_default_form_data(self):
        data = default_form_data()
        assert data["step1"] == {"project_type": "flat-pack", "base_kit": None}
        assert data["step2"]["vehicle_type"] == "troopcarrier"
        assert data["step2"]["features"] == []
        assert data["step3"] == {"timeline": None, "budget": None, "installation_preference": None}
        assert data["step4"]["marketing_consent"] is False

    def test_defaults_are_fresh_copies(self):
        first = default_form_data()
        first["step2"]["features"].append("lighting")
        assert default_form_data()["step2"]["features"] == []


class TestValidateStep:
    def test_default_first_two_steps_pass(self):
        data = default_form_data()
        assert validate_step(1, data["step1"]) == {}
        assert validate_step(2, data["step2"]) == {}

    def test_default_timeline_step_fails(self):
        errors = validate_step(3, default_form_data()["step3"])
        assert set(errors) == {"timeline", "budget", "installation_preference"}

    def test_unknown_enum_value(self):
        errors = validate_step(1, {"project_type": "space-station"})
        assert set(errors) == {"project_type"}

    def test_unknown_feature(self):
        assert "features" in validate_step(2, {"vehicle_type": "van", "features": ["hot-tub"]})

    def test_contact_details(self, step_values):
        assert validate_step(4, step_values[4]) == {}

    def test_short_contact_fields(self, step_values):
        values = {**step_values[4], "first_name": "J", "phone": "0412", "location": "X"}
        assert set(validate_step(4, values)) == {"first_name", "phone", "location"}

    def test_optional_message_is_not_guarded(self, step_values):
        values = {**step_values[4], "message": None}
        assert validate_step(4, values) == {}


class TestEmailValidation:
    @pytest.mark.parametrize(
        "email",
        ["jo@example.com", "jo.bloggs+vans@mail.example.com.au"],
    )
    def test_valid(self, step_values, email):
        assert validate_step(4, {**step_values[4], "email": email}) == {}

    @pytest.mark.parametrize(
        "email",
        ["", "jo", "jo@", "@example.com", "jo@example", "jo @example.com", "jo@@example.com", "jo@example..com"],
    )
    def test_invalid(self, step_values, email):
        errors = validate_step(4, {**step_values[4], "email": email})
        assert "Please enter a valid email address" in errors["email"]


class TestValidateForm:
    def test_complete_form(self, complete_form):
        request = validate_form(complete_form)
        assert request.step1.base_kit is BaseKit.WANDER
        assert request.step4.marketing_consent is True

    def test_incomplete_form(self, complete_form):
        complete_form["step3"]["budget"] = None
        with pytest.raises(pydantic.ValidationError):
            validate_form(complete_form)


class TestLabels:
    def test_label_for_value_and_enum(self):
        assert label_for(BASE_KIT_LABELS, "roam") == "Roam Kit (Popular)"
        assert label_for(BASE_KIT_LABELS, BaseKit.PREMIUM) == "Premium Kit (Luxury)"

    def test_unknown_value_is_returned_as_is(self):
        assert label_for(BASE_KIT_LABELS, "mystery") == "mystery"
