"""Client for the instance metadata service reachable from inside a cloud instance."""

__version__ = "0.1.0"

from loguru import logger

from .body import JsonBody, RawBody, as_request_body
from .categories import Dynamic, MetaData
from .client import REQUEST_HEADERS, Client
from .config import DEFAULT_BASE_URL, ClientConfig
from .destinations import IntoModel, IntoString, IntoWriter
from .exceptions import *
from .models import InstanceIdentity
from .utils.log import disable_debug_logging, enable_debug_logging

# Silent unless the host application opts in (see enable_debug_logging)
logger.disable(__name__)

__all__ = [
    "Client",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "REQUEST_HEADERS",
    "MetaData",
    "Dynamic",
    "InstanceIdentity",
    "RawBody",
    "JsonBody",
    "as_request_body",
    "IntoString",
    "IntoWriter",
    "IntoModel",
    "enable_debug_logging",
    "disable_debug_logging",
    "InstanceMetadataError",
    "InvalidURL",
    "UnsupportedBodyType",
    "DecodeError",
    "ResponseError",
    "NotFound",
    "UnknownError",
]
