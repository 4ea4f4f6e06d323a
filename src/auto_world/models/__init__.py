from .auth import Credentials, LoginResponse
from .listing import Car, ImageFile, SubmitCarRequest, SubmitCarResponse

__all__ = [
    "Car",
    "Credentials",
    "ImageFile",
    "LoginResponse",
    "SubmitCarRequest",
    "SubmitCarResponse",
]
