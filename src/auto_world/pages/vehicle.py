from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Dict, Optional, Sequence

from auto_world.config import AppConfig
from auto_world.errors import error_message
from auto_world.forms import handle_submit, vehicle_form
from auto_world.forms.fields import to_number
from auto_world.models import ImageFile, SubmitCarRequest, SubmitCarResponse
from auto_world.previews import ObjectUrlRegistry, PreviewSet
from auto_world.services import HttpClient, submit_car
from auto_world.state import Failed, Idle, SubmissionState, Submitting, Succeeded


logger = logging.getLogger(__name__)

SUBMITTED = "Vehicle information submitted successfully!"
UNEXPECTED_RESPONSE = "Unexpected response from the server."
SUBMIT_FAILED = "Failed to submit the form. Please try again."


class VehicleSubmissionPage:
    """Vehicle listing page: form, image previews and multipart submission.

    Preview URLs are owned by the page. They are released whenever the
    selection changes, after a successful submit and on :meth:`unmount`.
    """

    def __init__(
        self,
        client: HttpClient | None = None,
        config: AppConfig | None = None,
        registry: ObjectUrlRegistry | None = None,
    ) -> None:
        self.config = config or (client.config if client else AppConfig())
        self.client = client or HttpClient(self.config)
        self.form = vehicle_form()
        self.previews = PreviewSet(registry)
        self.state: SubmissionState = Idle()
        self.is_submitting = False

    @property
    def api_error(self) -> Optional[str]:
        return self.state.message if isinstance(self.state, Failed) else None

    @property
    def success_message(self) -> Optional[str]:
        return self.state.message if isinstance(self.state, Succeeded) else None

    @property
    def busy(self) -> bool:
        return self.is_submitting

    @property
    def button_label(self) -> str:
        return "Submitting..." if self.is_submitting else "Submit"

    def select_images(self, files: Optional[Sequence[ImageFile]]) -> None:
        if files is None:
            return
        self.previews.replace(files, limit=self.config.max_images)
        # the full selection goes into the form; truncation happens on submit
        self.form.set_value("images", list(files), validate=True)

    async def submit(self) -> bool:
        """Validate and post the listing. Returns False when nothing was sent."""
        if self.is_submitting:
            logger.debug("Submission already in progress; ignoring submit")
            return False
        self.state = Idle()
        return await handle_submit(self.form, self._on_submit)

    async def _on_submit(self, values: Dict[str, Any]) -> None:
        self.is_submitting = True
        self.state = Submitting()
        try:
            images = list(values["images"] or [])[: self.config.max_images]
            num_of_pictures = int(to_number(values["numOfPictures"]))
            if num_of_pictures != len(images):
                logger.warning(
                    "numOfPictures is %d but %d image(s) are selected", num_of_pictures, len(images)
                )
            request = SubmitCarRequest(
                carModel=values["carModel"],
                price=to_number(values["price"]),
                phoneNumber=values["phoneNumber"],
                numOfPictures=num_of_pictures,
                images=images,
            )
            logger.debug("Form submitted with data: %s", {**values, "images": images})
            loop = asyncio.get_running_loop()
            resp = await loop.run_in_executor(None, functools.partial(submit_car, request, self.client))
            body = SubmitCarResponse.model_validate(resp.data)
            logger.info("Backend response: %s %s", resp.status_code, body.message)
            if resp.status_code == 201 and body.status:
                self.state = Succeeded(body.message or SUBMITTED)
                self.form.reset()
                self.previews.release_all()
            else:
                self.state = Failed(body.message or UNEXPECTED_RESPONSE)
        except Exception as e:
            logger.exception("Submission error")
            self.state = Failed(error_message(e, SUBMIT_FAILED))
        finally:
            self.is_submitting = False

    def unmount(self) -> None:
        self.previews.release_all()
