from .login import LoginPage
from .vehicle import VehicleSubmissionPage

__all__ = ["LoginPage", "VehicleSubmissionPage"]
