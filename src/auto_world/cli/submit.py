from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from auto_world.config import AppConfig
from auto_world.models import ImageFile
from auto_world.navigation import Router
from auto_world.pages import LoginPage, VehicleSubmissionPage
from auto_world.services import HttpClient
from auto_world.utils.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Submit a vehicle listing to Auto World")
    parser.add_argument("images", nargs="*", type=Path, help="Image files (first 8 are used)")
    parser.add_argument("--model", required=True, help="Car model")
    parser.add_argument("--price", required=True, help="Price in dollars")
    parser.add_argument("--phone", required=True, help="Phone number, e.g. +15551234567")
    parser.add_argument("--pictures", default="1", help="Number of pictures (1-8)")
    parser.add_argument("--email", help="Sign in with this email before submitting")
    parser.add_argument("--password", help="Password for --email")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _print_errors(errors: dict[str, str]) -> None:
    for name, msg in errors.items():
        print(f"{name}: {msg}")


async def run(args: argparse.Namespace, client: HttpClient) -> int:
    if args.email:
        router = Router("/")
        login_page = LoginPage(client=client, router=router)
        login_page.form.set_value("email", args.email)
        login_page.form.set_value("password", args.password or "")
        await login_page.submit()
        if login_page.pending_navigation is None:
            _print_errors(login_page.form.errors)
            if login_page.api_error:
                print(login_page.api_error)
            return 1
        print("Signed in, continuing shortly...")
        await login_page.pending_navigation.wait()

    page = VehicleSubmissionPage(client=client)
    try:
        page.form.set_value("carModel", args.model)
        page.form.set_value("price", args.price)
        page.form.set_value("phoneNumber", args.phone)
        page.form.set_value("numOfPictures", args.pictures)
        page.select_images([ImageFile.from_path(p) for p in args.images])
        await page.submit()
        if page.form.errors:
            _print_errors(page.form.errors)
            return 1
        if page.success_message:
            print(page.success_message)
            return 0
        print(page.api_error)
        return 1
    finally:
        page.unmount()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.email and not args.password:
        parser.error("--password is required with --email")
    missing = [p for p in args.images if not p.is_file()]
    if missing:
        parser.error(f"image not found: {missing[0]}")
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    client = HttpClient(AppConfig())
    try:
        return asyncio.run(run(args, client))
    finally:
        client.close()


if __name__ == "__main__":
    raise SystemExit(main())
