from __future__ import annotations

from auto_world.config import MAX_IMAGES

from .fields import FormState, Min, Number, OneOf, Pattern, Required


PASSWORD_PATTERN = r'^(?=.*[a-zA-Z])(?=.*[0-9])(?=.*[!@#$%^&*(),.?":{}|<>]).{8,}$'
PHONE_PATTERN = r"^\+?[1-9]\d{1,14}$"
PICTURE_CHOICES = range(1, MAX_IMAGES + 1)


def login_form() -> FormState:
    form = FormState()
    form.register("email", [Required("Email is required")], default="")
    form.register(
        "password",
        [
            Required("Password is required"),
            Pattern(
                PASSWORD_PATTERN,
                "Password must be at least 8 characters long, include at least one "
                "special character, and be alphanumeric",
            ),
        ],
        default="",
    )
    return form


def vehicle_form() -> FormState:
    form = FormState()
    form.register("carModel", [Required("Car model is required")], default="")
    form.register(
        "price",
        [
            Required("Price is required"),
            Number("Price must be a number"),
            Min(0, "Price cannot be negative"),
        ],
        default="",
    )
    form.register(
        "phoneNumber",
        [
            Required("Phone number is required"),
            Pattern(PHONE_PATTERN, "Invalid phone number"),
        ],
        default="",
    )
    form.register(
        "numOfPictures",
        [
            Required("Please select number of pictures"),
            OneOf(PICTURE_CHOICES, "Please select number of pictures"),
        ],
        default=1,
    )
    form.register("images", default=[])
    return form
