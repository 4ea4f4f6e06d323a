"""HTTP service layer for the Auto World backend."""

from .cars import build_car_form, submit_car
from .http import ApiResponse, HttpClient
from .login import login

__all__ = ["ApiResponse", "HttpClient", "build_car_form", "login", "submit_car"]
