from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .adapters.http import HttpClient, HttpResponseLike, UrllibHttpClient
from .decoding import decode_body, decode_json
from .domain.models import ForecastReport, ParamsInput, build_request_params
from .errors import ReportDecodeError, RequestFailedError, ValidationError
from .settings import ClientSettings, build_settings
from .urls import build_url

LOGGER = logging.getLogger(__name__)


class Astro7Timer:
    """Client for the 7Timer! forecast API.

    ``get_response`` returns the HTTP response untouched so callers can handle
    failures themselves. ``get`` raises ``RequestFailedError`` on a non-success
    status and returns the body, decoded per ``output`` when ``decode=True``.

    Example::

        client = Astro7Timer()
        report = client.get(product="astro", lat=51.2, lon=-1.8, decode=True)
    """

    def __init__(
        self,
        *,
        scheme: str | None = None,
        timeout: float | None = None,
        agent: str | None = None,
        http_client: HttpClient | None = None,
    ) -> None:
        self._settings = build_settings(scheme=scheme, timeout=timeout, agent=agent)
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        *,
        http_client: HttpClient | None = None,
    ) -> Astro7Timer:
        return cls(
            scheme=settings.scheme,
            timeout=settings.timeout,
            agent=settings.agent,
            http_client=http_client,
        )

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def http_client(self) -> HttpClient | None:
        return self._http_client

    def _ensure_http_client(self) -> HttpClient:
        if self._http_client is None:
            LOGGER.debug("Creating default HTTP client")
            self._http_client = UrllibHttpClient()
        return self._http_client

    def url_for(self, params: ParamsInput = None, /, **fields: Any) -> str:
        return build_url(self._settings.scheme, build_request_params(params, **fields))

    def get_response(self, params: ParamsInput = None, /, **fields: Any) -> HttpResponseLike:
        request = build_request_params(params, **fields)
        url = build_url(self._settings.scheme, request)

        http_client = self._ensure_http_client()
        http_client.agent = self._settings.agent
        http_client.timeout = self._settings.timeout

        LOGGER.debug("Requesting 7Timer forecast %s", url)
        return http_client.get(url)

    def get(
        self,
        params: ParamsInput = None,
        /,
        *,
        decode: bool = False,
        **fields: Any,
    ) -> str | dict[str, Any]:
        request = build_request_params(params, **fields)
        # output and lang are always sent, even when left at their defaults
        request = request.model_copy(update={"output": request.output, "lang": request.lang})

        response = self.get_response(request)
        if not response.is_success:
            LOGGER.warning(
                "7Timer request for product '%s' failed: %s",
                request.product,
                response.status_line,
            )
            raise RequestFailedError(response.status_line, response)

        body = response.text
        if not decode:
            return body
        return decode_body(body, request.output)

    def get_report(self, params: ParamsInput = None, /, **fields: Any) -> dict[str, Any]:
        """Fetch a forecast and decode it per its ``output`` format."""
        return self.get(params, decode=True, **fields)

    def get_forecast(self, params: ParamsInput = None, /, **fields: Any) -> ForecastReport:
        """Fetch a JSON forecast as a ``ForecastReport``."""
        request = build_request_params(params, **fields)
        if "output" in request.model_fields_set and request.output != "json":
            raise ValidationError(
                "get_forecast only supports json output",
                [("output", "get_forecast only supports json output")],
            )

        body = self.get(request.model_copy(update={"output": "json"}))
        document = decode_json(body)
        try:
            return ForecastReport.model_validate(document)
        except PydanticValidationError as exc:
            raise ReportDecodeError("7Timer response was missing forecast fields") from exc
