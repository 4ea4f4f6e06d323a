from __future__ import annotations

import asyncio

import pytest

from auto_world.forms import FormState, Min, Number, OneOf, Pattern, Required, handle_submit, login_form, vehicle_form


def test_required_rejects_empty_but_accepts_zero_and_spaces():
    form = FormState()
    form.register("name", [Required("Name is required")], default="")
    form.register("count", [Required("Count is required")], default=0)
    assert form.validate() == {"name": "Name is required"}
    form.set_value("name", "   ")
    assert form.validate() == {}


def test_first_failing_rule_wins():
    form = FormState()
    form.register("price", [Required("Price is required"), Number("Not a number"), Min(0, "Too low")])
    form.set_value("price", "abc")
    assert form.validate() == {"price": "Not a number"}
    form.set_value("price", "-1", validate=True)
    assert form.errors == {"price": "Too low"}
    form.set_value("price", "12.5", validate=True)
    assert form.errors == {}


def test_optional_field_skips_rules_when_empty():
    form = FormState()
    form.register("code", [Pattern(r"^\d+$", "Digits only")], default="")
    assert form.validate() == {}
    form.set_value("code", "x1")
    assert form.validate() == {"code": "Digits only"}


def test_one_of_accepts_numeric_strings():
    rule = OneOf(range(1, 9), "Pick one")
    form = FormState()
    form.register("n", [rule], default=1)
    for ok in (1, "8", 3.0):
        form.set_value("n", ok)
        assert form.validate() == {}
    for bad in (0, "9", "two", 2.5):
        form.set_value("n", bad)
        assert form.validate() == {"n": "Pick one"}


def test_reset_restores_defaults_and_clears_errors():
    form = vehicle_form()
    form.set_value("carModel", "Civic")
    form.set_value("images", ["x"])
    form.set_value("price", "-3", validate=True)
    assert form.errors
    form.reset()
    assert form.values() == {
        "carModel": "",
        "price": "",
        "phoneNumber": "",
        "numOfPictures": 1,
        "images": [],
    }
    assert form.errors == {}


@pytest.mark.parametrize(
    "password,ok",
    [
        ("abcdef1!", True),
        ("Secr3t-pass?", True),
        ("abcdefgh", False),
        ("12345678!", False),
        ("abc1!", False),
        ("abcdefg1", False),
    ],
)
def test_password_pattern(password, ok):
    form = login_form()
    form.set_value("email", "a@b.c")
    form.set_value("password", password)
    errors = form.validate()
    assert ("password" not in errors) is ok


def test_vehicle_form_messages():
    form = vehicle_form()
    form.set_value("carModel", "")
    form.set_value("price", "")
    form.set_value("phoneNumber", "abc")
    form.set_value("numOfPictures", "")
    assert form.validate() == {
        "carModel": "Car model is required",
        "price": "Price is required",
        "phoneNumber": "Invalid phone number",
        "numOfPictures": "Please select number of pictures",
    }


def test_handle_submit_only_calls_back_on_clean_form():
    form = login_form()
    seen = []

    async def cb(values):
        seen.append(values)

    assert asyncio.run(handle_submit(form, cb)) is False
    assert seen == []
    form.set_value("email", "a@b.c")
    form.set_value("password", "abcdef1!")
    assert asyncio.run(handle_submit(form, cb)) is True
    assert seen == [{"email": "a@b.c", "password": "abcdef1!"}]


def test_patterns_reject_trailing_newline():
    vehicle = vehicle_form()
    vehicle.set_value("carModel", "Civic")
    vehicle.set_value("price", "100")
    vehicle.set_value("phoneNumber", "+15551234567\n")
    assert vehicle.validate() == {"phoneNumber": "Invalid phone number"}

    login = login_form()
    login.set_value("email", "a@b.c")
    login.set_value("password", "abcdef1!\n")
    assert set(login.validate()) == {"password"}
