"""Shared test helpers for alfresco_uploader tests."""

from __future__ import annotations

import asyncio
import re
from typing import Any

import httpx


def multipart_fields(request: httpx.Request) -> dict[str, str]:
    """Decode the parts of a multipart request body by field name."""
    boundary = request.headers["content-type"].split("boundary=", 1)[1].encode()
    fields: dict[str, str] = {}
    for part in request.content.split(b"--" + boundary):
        head, sep, body = part.partition(b"\r\n\r\n")
        if not sep:
            continue
        match = re.search(rb'; name="([^"]+)"', head)
        if match:
            fields[match.group(1).decode()] = body[:-2].decode()
    return fields


def uploaded_file_name(request: httpx.Request) -> str | None:
    match = re.search(rb'filename="([^"]+)"', request.content)
    return match.group(1).decode() if match else None


class AlfrescoStub:
    """In-memory stand-in for the Alfresco children endpoint."""

    def __init__(
        self,
        *,
        fail_files: tuple[str, ...] = (),
        folders: list[dict[str, str]] | None = None,
        page_size: int | None = None,
        list_status: int = 200,
        delay: float = 0.0,
    ) -> None:
        self.fail_files = fail_files
        self.folders = folders or []
        self.page_size = page_size
        self.list_status = list_status
        self.delay = delay
        self.uploads: list[httpx.Request] = []
        self.listings: list[httpx.Request] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return await self._create(request)
        return self._list(request)

    async def _create(self, request: httpx.Request) -> httpx.Response:
        self.uploads.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1

        name = uploaded_file_name(request)
        if name in self.fail_files:
            return httpx.Response(409, json={"error": {"statusCode": 409}})
        return httpx.Response(
            201, json={"entry": {"id": f"node-{len(self.uploads)}", "name": name}}
        )

    def _list(self, request: httpx.Request) -> httpx.Response:
        self.listings.append(request)
        if self.list_status != 200:
            return httpx.Response(self.list_status, json={"error": {}})

        skip = int(request.url.params.get("skipCount", 0))
        size = self.page_size or len(self.folders) or 1
        page = self.folders[skip : skip + size]
        body: dict[str, Any] = {
            "list": {
                "pagination": {
                    "count": len(page),
                    "skipCount": skip,
                    "hasMoreItems": skip + len(page) < len(self.folders),
                },
                "entries": [{"entry": dict(folder, isFolder=True)} for folder in page],
            }
        }
        return httpx.Response(200, json=body)
