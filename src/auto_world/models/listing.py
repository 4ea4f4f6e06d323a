"""Data models for vehicle listings sent to the cars endpoint."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ImageFile(BaseModel):
    """A selected image file, kept in memory until it is uploaded."""

    filename: str
    content: bytes = Field(repr=False)
    content_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path: str | Path) -> "ImageFile":
        p = Path(path)
        ctype, _ = mimetypes.guess_type(p.name)
        return cls(
            filename=p.name,
            content=p.read_bytes(),
            content_type=ctype or "application/octet-stream",
        )

    @property
    def size(self) -> int:
        return len(self.content)


class SubmitCarRequest(BaseModel):
    """Listing draft as posted to the backend."""

    model_config = ConfigDict(populate_by_name=True)

    car_model: str = Field(alias="carModel")
    price: float = Field(ge=0)
    phone_number: str = Field(alias="phoneNumber")
    num_of_pictures: int = Field(alias="numOfPictures", ge=1, le=8)
    images: List[ImageFile] = Field(default_factory=list, max_length=8)


class Car(BaseModel):
    """A listing as stored by the backend."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = Field(default=None, alias="_id")
    car_model: str = Field(default="", alias="carModel")
    price: float = 0.0
    phone_number: str = Field(default="", alias="phoneNumber")
    images: List[str] = Field(default_factory=list)


class SubmitCarResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: bool = False
    message: Optional[str] = None
    data: Optional[Car] = None

    @field_validator("status", mode="before")
    @classmethod
    def _truthy(cls, v: Any) -> bool:
        return bool(v)

    @field_validator("message", mode="before")
    @classmethod
    def _text(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @field_validator("data", mode="wrap")
    @classmethod
    def _drop_malformed_data(cls, v: Any, handler: Any) -> Optional[Car]:
        # status and message decide the outcome; a bad echo of the car is ignored
        try:
            return handler(v)
        except ValidationError:
            return None
