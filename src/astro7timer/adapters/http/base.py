from __future__ import annotations

from dataclasses import dataclass, field
from email.message import Message
from typing import Mapping, Protocol


@dataclass(slots=True)
class HttpResponse:
    status: int
    reason: str
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    url: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def status_line(self) -> str:
        return f"{self.status} {self.reason}".strip()

    @property
    def charset(self) -> str:
        content_type = next(
            (value for key, value in self.headers.items() if key.lower() == "content-type"),
            "",
        )
        message = Message()
        message["Content-Type"] = content_type or "text/plain"
        return message.get_content_charset() or "utf-8"

    @property
    def text(self) -> str:
        try:
            return self.content.decode(self.charset, errors="replace")
        except LookupError:
            return self.content.decode("utf-8", errors="replace")


class HttpResponseLike(Protocol):
    @property
    def is_success(self) -> bool: ...

    @property
    def status_line(self) -> str: ...

    @property
    def text(self) -> str: ...


class HttpClient(Protocol):
    agent: str
    timeout: float

    def get(self, url: str) -> HttpResponseLike:
        """Issue a GET request and return the response, whatever its status."""
