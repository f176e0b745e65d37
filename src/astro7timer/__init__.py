from .adapters.http import HttpClient, HttpResponse, UrllibHttpClient
from .client import Astro7Timer
from .decoding import decode_body, decode_json, decode_xml
from .domain.models import ForecastReport, RequestParams, build_request_params
from .errors import Astro7TimerError, ReportDecodeError, RequestFailedError, ValidationError
from .products import PRODUCTS, describe_product, products
from .settings import VERSION, ClientSettings, load_settings
from .urls import build_url

__version__ = VERSION

__all__ = [
    "Astro7Timer",
    "Astro7TimerError",
    "ClientSettings",
    "ForecastReport",
    "HttpClient",
    "HttpResponse",
    "PRODUCTS",
    "ReportDecodeError",
    "RequestFailedError",
    "RequestParams",
    "UrllibHttpClient",
    "ValidationError",
    "__version__",
    "build_request_params",
    "build_url",
    "decode_body",
    "decode_json",
    "decode_xml",
    "describe_product",
    "load_settings",
    "products",
]
