"""OpenSky ingestor for aircraft state vectors inside a bounding box."""

from __future__ import annotations

import logging

import httpx

from skytrack.config import settings
from skytrack.exceptions import OpenSkyFetchError
from skytrack.models.air_traffic import BoundBox
from skytrack.services.bound_box import validate_bound_box
from skytrack.services.response_decoder import (
    RawStateResponse,
    ResponseDecodeResult,
    decode_response,
)

logger = logging.getLogger("skytrack.ingestors.opensky")


class OpenSkyIngestor:
    """Fetch state vectors from the OpenSky REST API."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        username: str | None = None,
        password: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.opensky_base_url
        self.timeout = timeout or settings.opensky_timeout
        self.username = username or settings.opensky_username
        self.password = password or settings.opensky_password
        self.transport = transport

    def _auth(self) -> httpx.BasicAuth | None:
        if self.username and self.password:
            return httpx.BasicAuth(self.username, self.password)
        if self.username or self.password:
            logger.warning(
                "Only one of OpenSky username/password is configured; "
                "sending the request without authentication"
            )
        return None

    async def fetch_states(self, box: BoundBox) -> RawStateResponse:
        """Return the undecoded states for ``box``.

        The box is validated before any request is made, so a
        ``BoundBoxValidationError`` propagates untouched. Transport and HTTP
        failures are raised as ``OpenSkyFetchError``.
        """

        validate_bound_box(box)
        params = box.to_query_params()

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport, auth=self._auth()
            ) as client:
                response = await client.get(self.base_url, params=params)
        except httpx.TimeoutException as exc:
            logger.warning("OpenSky request timed out: %s", exc)
            raise OpenSkyFetchError("OpenSky request timed out") from exc
        except httpx.RequestError as exc:
            logger.warning("OpenSky request failed: %s", exc)
            raise OpenSkyFetchError("OpenSky request failed") from exc

        if response.status_code == 429:
            logger.warning("OpenSky rate limit encountered: %s", response.text)
            raise OpenSkyFetchError("OpenSky rate limit encountered")
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "OpenSky returned HTTP %s: %s", exc.response.status_code, exc
            )
            raise OpenSkyFetchError(
                f"OpenSky returned HTTP {exc.response.status_code}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Failed to parse OpenSky JSON response: %s", exc)
            raise OpenSkyFetchError("OpenSky returned invalid JSON") from exc

        if not isinstance(payload, dict):
            logger.warning("Unexpected OpenSky payload type: %s", type(payload).__name__)
            raise OpenSkyFetchError("OpenSky returned an unexpected payload")

        raw = RawStateResponse.from_payload(payload)
        logger.debug(
            "Fetched %s raw state vectors",
            len(raw.states) if isinstance(raw.states, list) else 0,
        )
        return raw

    async def get_states(self, box: BoundBox) -> ResponseDecodeResult:
        """Fetch and decode the state vectors inside ``box``."""

        raw = await self.fetch_states(box)
        return decode_response(raw)


__all__ = ["OpenSkyIngestor"]
