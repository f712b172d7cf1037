"""
HTTP client for the Chemion glasses web service
"""
import logging
from typing import Any, List, Optional, Type

import httpx

from services.directory import Device
from utils.constants import ENDPOINTS
from utils.exceptions import (
    RemoteServiceError, DiscoveryError, DeviceConnectionError,
    EncodingError, DisplayError
)


class GlassesClient:
    """Wraps the five service endpoints used by the designer

    Every failure, whether the service answered with an error body or the
    request never completed, is raised as the matching RemoteServiceError
    subclass with the service message left untouched.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.logger = logger or logging.getLogger("Chemion")
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "GlassesClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        error_type: Type[RemoteServiceError],
        **kwargs,
    ) -> httpx.Response:
        """Send a request, raising error_type on any failure"""
        self.logger.debug(f"{method} {path}")
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            self.logger.debug(f"{method} {path} failed: {e!r}")
            raise error_type(str(e) or type(e).__name__) from e

        self.logger.debug(f"{method} {path} -> {response.status_code}")
        if response.is_error:
            raise error_type(self._error_message(response), response.status_code)
        return response

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract the service message from an error response"""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            return body["message"]
        return response.text or response.reason_phrase

    @staticmethod
    def _json(response: httpx.Response, error_type: Type[RemoteServiceError]) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise error_type(f"Invalid response from service: {e}", response.status_code) from e

    async def discover(self) -> List[Device]:
        """GET /discover"""
        response = await self._request("GET", ENDPOINTS.DISCOVER, DiscoveryError)
        data = self._json(response, DiscoveryError)
        try:
            return [Device.from_json(entry) for entry in data]
        except (TypeError, KeyError) as e:
            raise DiscoveryError(f"Invalid device list from service: {e}", response.status_code) from e

    async def connect(self, device: Device):
        """POST /connect with the device record as a form"""
        await self._request(
            "POST", ENDPOINTS.CONNECT, DeviceConnectionError, data=device.to_json()
        )

    async def disconnect(self):
        """GET /disconnect"""
        await self._request("GET", ENDPOINTS.DISCONNECT, DeviceConnectionError)

    async def encode(self, frame: List[List[int]]) -> Any:
        """POST /encode, returns the encoded frame as sent back"""
        response = await self._request(
            "POST", ENDPOINTS.ENCODE, EncodingError, json={"glasses_frame": frame}
        )
        data = self._json(response, EncodingError)
        if not isinstance(data, dict) or "glasses_frame" not in data:
            raise EncodingError("Invalid response from service: missing glasses_frame", response.status_code)
        return data["glasses_frame"]

    async def display(self, encoded_frame: Any):
        """POST /display with an encoded frame"""
        await self._request(
            "POST", ENDPOINTS.DISPLAY, DisplayError, json={"glasses_frame": encoded_frame}
        )
