"""
Shared fixtures for the designer test suite.

FakeGlassesService stands in for the glasses web service behind an
httpx.MockTransport, recording every request it receives.
"""

import asyncio
import json
from urllib.parse import parse_qs

import httpx
import pytest

from services.directory import Device
from utils.config import Config


LEFT = Device(name="CHEMION_L", address="AA:BB:CC:DD:EE:01")
RIGHT = Device(name="CHEMION_R", address="AA:BB:CC:DD:EE:02")

# Shape of a real /encode answer: UART bytes split in 20 byte chunks
ENCODED_FRAME = [[0xFA, 0x03, 0x00, 0x39, 0x01, 0x00, 0x06], [0x07, 0x55, 0xA9]]


class FakeGlassesService:
    """Minimal in-memory version of the glasses web service"""

    def __init__(self):
        self.devices = [LEFT, RIGHT]
        self.requests = []
        self.failures = {}
        self.hold = {}
        self.connected = None

    def fail(self, path: str, message: str, status: int = 500):
        """Make every request to path fail with the given message"""
        self.failures[path] = (status, {"message": message})

    def block(self, path: str) -> asyncio.Event:
        """Keep requests to path pending until the returned event is set"""
        event = asyncio.Event()
        self.hold[path] = event
        return event

    def paths(self):
        return [path for _, path, _ in self.requests]

    def body(self, path: str):
        """Body of the last request sent to path"""
        for _, request_path, body in reversed(self.requests):
            if request_path == path:
                return body
        raise AssertionError(f"No request to {path}")

    @staticmethod
    def _decode(request: httpx.Request):
        if not request.content:
            return None
        content_type = request.headers.get("content-type", "")
        if content_type.startswith("application/x-www-form-urlencoded"):
            return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
        return json.loads(request.content)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requests.append((request.method, path, self._decode(request)))

        if path in self.hold:
            await self.hold[path].wait()

        if path in self.failures:
            status, body = self.failures[path]
            return httpx.Response(status, json=body)

        if path == "/discover":
            return httpx.Response(200, json=[device.to_json() for device in self.devices])
        if path == "/connect":
            self.connected = self._decode(request)
            return httpx.Response(200)
        if path == "/disconnect":
            if self.connected is None:
                return httpx.Response(500, json={"message": "Couldn't get stored address"})
            self.connected = None
            return httpx.Response(200)
        if path == "/encode":
            return httpx.Response(200, json={"glasses_frame": ENCODED_FRAME})
        if path == "/display":
            if self.connected is None:
                return httpx.Response(500, json={"message": "Please connect to a device first"})
            return httpx.Response(200)
        return httpx.Response(404)


@pytest.fixture
def service():
    return FakeGlassesService()


@pytest.fixture
def transport(service):
    return httpx.MockTransport(service.handler)


@pytest.fixture
def test_config():
    """Config that never touches the filesystem or the console"""
    return Config(
        log_file="",
        console_log=False,
        service_url="http://glasses.test",
        request_timeout=5.0,
    )
