from .fields import FieldState, FormState, Min, Number, OneOf, Pattern, Required, Rule, handle_submit
from .rules import login_form, vehicle_form

__all__ = [
    "FieldState",
    "FormState",
    "Min",
    "Number",
    "OneOf",
    "Pattern",
    "Required",
    "Rule",
    "handle_submit",
    "login_form",
    "vehicle_form",
]
