from __future__ import annotations

from typing import Literal

from .errors import ValidationError

Product = Literal["astro", "two", "civil", "civillight", "meteo"]

PRODUCTS: tuple[str, ...] = ("astro", "two", "civil", "civillight", "meteo")

PRODUCT_DESCRIPTIONS = {
    "astro": "ASTRO 3-day forecast for astronomy with 3h step, including seeing and transparency",
    "two": "TWO two-week overview forecast",
    "civil": "CIVIL 8-day forecast with a weather type per 3h step",
    "civillight": "CIVIL Light simplified per-day forecast for the next week",
    "meteo": "METEO detailed forecast with humidity and wind profile from 950hPa to 200hPa",
}


def products() -> tuple[str, ...]:
    """Return the forecast products supported by the 7Timer API."""
    return PRODUCTS


def is_supported_product(value: object) -> bool:
    return isinstance(value, str) and value in PRODUCTS


def describe_product(product: str) -> str:
    if not is_supported_product(product):
        raise ValidationError("product not supported", [("product", "product not supported")])
    return PRODUCT_DESCRIPTIONS[product]
