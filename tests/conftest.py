from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from astro7timer import HttpResponse

ASTRO_JSON = '{"product":"astro","init":"2023032606","dataseries":[]}'


@dataclass
class StubHttpClient:
    """Records every requested URL and answers with a canned response."""

    response: HttpResponse = field(
        default_factory=lambda: HttpResponse(
            status=200,
            reason="OK",
            content=ASTRO_JSON.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )
    )
    agent: str = "stub-agent"
    timeout: float = 0
    calls: list[str] = field(default_factory=list)
    seen_settings: list[tuple[str, float]] = field(default_factory=list)

    def get(self, url: str) -> HttpResponse:
        self.calls.append(url)
        self.seen_settings.append((self.agent, self.timeout))
        return self.response


@pytest.fixture
def stub_http_client() -> StubHttpClient:
    return StubHttpClient()


def _make_response(status: int, reason: str, body: str = "", content_type: str = "text/plain") -> HttpResponse:
    return HttpResponse(
        status=status,
        reason=reason,
        content=body.encode("utf-8"),
        headers={"Content-Type": content_type},
    )


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def astro_json() -> str:
    return ASTRO_JSON
