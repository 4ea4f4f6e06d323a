from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from auto_world.config import AppConfig
from auto_world.models import ImageFile
from auto_world.navigation import Router
from auto_world.pages import LoginPage, VehicleSubmissionPage
from auto_world.services import HttpClient


app = FastAPI(title="Auto World")
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
_client: Optional[HttpClient] = None


def get_client() -> HttpClient:
    global _client
    if _client is None:
        _client = HttpClient(AppConfig())
    return _client


@app.on_event("shutdown")
def on_shutdown() -> None:
    if _client is not None:
        _client.close()


async def _to_image_files(uploads: List[UploadFile]) -> List[ImageFile]:
    files: List[ImageFile] = []
    for up in uploads:
        # browsers send one empty part when no file was picked
        if not up.filename:
            continue
        files.append(
            ImageFile(
                filename=up.filename,
                content=await up.read(),
                content_type=up.content_type or "application/octet-stream",
            )
        )
    return files


@app.get("/", response_class=HTMLResponse)
def login_view(request: Request, client: HttpClient = Depends(get_client)) -> HTMLResponse:
    return templates.TemplateResponse(request, "login.html", {"page": LoginPage(client=client)})


@app.post("/")
async def login_submit(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    client: HttpClient = Depends(get_client),
) -> Response:
    router = Router("/")
    page = LoginPage(client=client, router=router)
    page.form.set_value("email", email)
    page.form.set_value("password", password)
    try:
        await page.submit()
        if page.pending_navigation is not None:
            await page.pending_navigation.wait()
            return RedirectResponse(router.path, status_code=303)
        status = 400 if page.form.errors else 401
        return templates.TemplateResponse(request, "login.html", {"page": page}, status_code=status)
    finally:
        page.unmount()


@app.get("/cars", response_class=HTMLResponse)
def cars_view(request: Request, client: HttpClient = Depends(get_client)) -> HTMLResponse:
    page = VehicleSubmissionPage(client=client)
    return templates.TemplateResponse(request, "cars.html", {"page": page, "previews": []})


@app.post("/cars", response_class=HTMLResponse)
async def cars_submit(
    request: Request,
    carModel: str = Form(""),
    price: str = Form(""),
    phoneNumber: str = Form(""),
    numOfPictures: str = Form("1"),
    images: List[UploadFile] = File(default=[]),
    client: HttpClient = Depends(get_client),
) -> HTMLResponse:
    page = VehicleSubmissionPage(client=client)
    try:
        page.form.set_value("carModel", carModel)
        page.form.set_value("price", price)
        page.form.set_value("phoneNumber", phoneNumber)
        page.form.set_value("numOfPictures", numOfPictures)
        page.select_images(await _to_image_files(images))
        await page.submit()
        previews = [page.previews.registry.data_uri(u) for u in page.previews.urls]
        status = 200 if page.success_message else 400
        return templates.TemplateResponse(
            request,
            "cars.html",
            {"page": page, "previews": previews},
            status_code=status,
        )
    finally:
        page.unmount()
