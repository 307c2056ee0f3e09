""" IoT Hub HTTPS Device Library

This library provides a client for sending device-to-cloud telemetry to Azure IoT Hub over
HTTPS, authenticated with a Shared Access Signature derived from a device connection string.
"""

from .device_client import DeviceClient  # noqa: F401
from .config import DeviceConfiguration, TransportOptions, ProxyOptions  # noqa: F401
from .connection_string import ConnectionDescriptor, parse_connection_string  # noqa: F401
from .sastoken import SasToken, generate_sastoken  # noqa: F401
from .envelope import MessageEnvelope, build_envelope  # noqa: F401
from .http_map_error import get_error_description  # noqa: F401
from .models import Sent, Failed, SendOutcome  # noqa: F401
from .exceptions import (  # noqa: F401
    IoTHubHTTPError,
    ConfigurationError,
    CryptoError,
    TransportError,
    TransportTimeoutError,
    ServiceError,
    ArgumentError,
    UnauthorizedError,
    QuotaExceededError,
    NotFoundError,
    PreconditionFailedError,
    ThrottlingError,
    InternalServerError,
)
from .constant import VERSION as __version__  # noqa: F401
