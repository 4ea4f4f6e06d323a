from __future__ import annotations

import os
from dataclasses import dataclass, field


DEFAULT_USER_BASE_URL = os.environ.get("AUTO_WORLD_USER_BASE_URL", "http://localhost:5000/api/user")
DEFAULT_CARS_BASE_URL = os.environ.get("AUTO_WORLD_CARS_BASE_URL", "http://localhost:5000/api/cars")
MAX_IMAGES = 8


@dataclass
class BaseUrl:
    user: str = DEFAULT_USER_BASE_URL
    cars: str = DEFAULT_CARS_BASE_URL


@dataclass
class AppConfig:
    base_url: BaseUrl = field(default_factory=BaseUrl)
    # pause between a successful login and the redirect to the cars page
    login_redirect_delay_secs: float = float(os.environ.get("AUTO_WORLD_LOGIN_DELAY_SECS", "4"))
    request_timeout_secs: float = float(os.environ.get("AUTO_WORLD_REQUEST_TIMEOUT_SECS", "15"))
    user_agent: str = os.environ.get("HTTP_USER_AGENT", "AutoWorld/0.1")
    max_images: int = MAX_IMAGES
