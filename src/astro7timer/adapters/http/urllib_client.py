from __future__ import annotations

from urllib.error import HTTPError
from urllib.request import OpenerDirector, Request, build_opener

from ...settings import DEFAULT_AGENT, DEFAULT_TIMEOUT_SECONDS
from .base import HttpResponse


class UrllibHttpClient:
    """Blocking HTTP client on top of ``urllib.request``.

    Error statuses come back as ``HttpResponse`` values. Connection failures
    and timeouts (``URLError``, ``TimeoutError``) propagate to the caller.
    """

    def __init__(
        self,
        *,
        agent: str = DEFAULT_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        opener: OpenerDirector | None = None,
    ) -> None:
        self.agent = agent
        self.timeout = timeout
        self._opener = opener or build_opener()

    def get(self, url: str) -> HttpResponse:
        request = Request(url, headers={"User-Agent": self.agent}, method="GET")
        try:
            with self._opener.open(request, timeout=self.timeout) as response:
                return HttpResponse(
                    status=response.status,
                    reason=response.reason or "",
                    content=response.read(),
                    headers=dict(response.headers.items()),
                    url=response.geturl(),
                )
        except HTTPError as exc:
            try:
                content = exc.read()
            finally:
                exc.close()
            return HttpResponse(
                status=exc.code,
                reason=str(exc.reason or ""),
                content=content or b"",
                headers=dict(exc.headers.items()) if exc.headers is not None else {},
                url=exc.geturl() or url,
            )
