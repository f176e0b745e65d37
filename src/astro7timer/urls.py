from __future__ import annotations

from urllib.parse import urlencode

from .domain.models import RequestParams

API_HOST = "www.7timer.info"


def build_url(scheme: str, params: RequestParams) -> str:
    """Return the product endpoint URL with the caller's explicit parameters as query."""
    return f"{scheme}://{API_HOST}/bin/{params.product}.php?{urlencode(params.query_items())}"
