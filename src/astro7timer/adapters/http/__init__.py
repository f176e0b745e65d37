from .base import HttpClient, HttpResponse, HttpResponseLike
from .urllib_client import UrllibHttpClient

__all__ = ["HttpClient", "HttpResponse", "HttpResponseLike", "UrllibHttpClient"]
