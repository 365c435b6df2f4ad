__version__ = "0.1.0"

from .client import OdbClient
from .config_types import ClientConfig, Option, build_config, with_api_key, with_base_url, with_http_client
from .errors import DecodeError, HTTPStatusError, NetworkError, OdbClientError, ValidationError
from .request_spec import RequestSpec

__all__ = [
    "__version__",
    "OdbClient",
    "ClientConfig",
    "Option",
    "build_config",
    "with_api_key",
    "with_base_url",
    "with_http_client",
    "RequestSpec",
    "OdbClientError",
    "ValidationError",
    "NetworkError",
    "HTTPStatusError",
    "DecodeError",
]
