from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Dict, Optional

from auto_world.config import AppConfig
from auto_world.errors import error_message
from auto_world.forms import handle_submit, login_form
from auto_world.models import Credentials, LoginResponse
from auto_world.navigation import DelayedNavigation, Router
from auto_world.services import HttpClient, login
from auto_world.state import Failed, Idle, SubmissionState, Submitting, Succeeded, message_of


logger = logging.getLogger(__name__)

CARS_PATH = "/cars"
UNEXPECTED_ERROR = "An unexpected error occurred."


class LoginPage:
    """Sign-in page: credential form, login call and delayed redirect.

    After a successful login the button stays disabled until the redirect
    to the cars page fires ``login_redirect_delay_secs`` later.
    """

    def __init__(
        self,
        client: HttpClient | None = None,
        router: Router | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.config = config or (client.config if client else AppConfig())
        self.client = client or HttpClient(self.config)
        self.router = router or Router()
        self.form = login_form()
        self.state: SubmissionState = Idle()
        self.is_loading = False
        self.token: Optional[str] = None
        self.pending_navigation: Optional[DelayedNavigation] = None

    @property
    def api_error(self) -> Optional[str]:
        return self.state.message if isinstance(self.state, Failed) else None

    @property
    def message(self) -> Optional[str]:
        return message_of(self.state)

    @property
    def button_disabled(self) -> bool:
        return self.is_loading

    @property
    def button_label(self) -> str:
        return "Signing in..." if self.is_loading else "Sign in"

    async def submit(self) -> bool:
        """Validate and send the credentials. Returns False when nothing was sent."""
        if self.is_loading:
            logger.debug("Login already in progress; ignoring submit")
            return False
        self.state = Idle()
        return await handle_submit(self.form, self._on_submit)

    async def _on_submit(self, values: Dict[str, Any]) -> None:
        self.is_loading = True
        self.state = Submitting()
        credentials = Credentials(email=values["email"], password=values["password"])
        loop = asyncio.get_running_loop()
        try:
            resp = await loop.run_in_executor(None, functools.partial(login, credentials, self.client))
            body = LoginResponse.model_validate(resp.data)
        except Exception as e:
            logger.exception("Login request failed")
            self.is_loading = False
            self.state = Failed(error_message(e, UNEXPECTED_ERROR))
            return

        if body.status:
            logger.info("Login successful for %s", credentials.email)
            self.token = body.token
            self.state = Succeeded(body.message or "Login successful")
            self.pending_navigation = DelayedNavigation(
                self.router,
                CARS_PATH,
                self.config.login_redirect_delay_secs,
                on_fire=self._finish_loading,
            )
        else:
            self.is_loading = False
            self.state = Failed(f"Login failed: {body.message or 'unknown error'}")

    def _finish_loading(self) -> None:
        self.is_loading = False

    def unmount(self) -> None:
        if self.pending_navigation is not None and self.pending_navigation.cancel():
            logger.debug("Cancelled pending redirect to %s", CARS_PATH)
            self.is_loading = False
