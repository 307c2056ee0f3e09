# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Define user-facing exceptions to be shared across the package"""
from typing import Optional


class IoTHubHTTPError(Exception):
    """Base class for all errors raised by this package"""

    pass


# Client construction exceptions
class ConfigurationError(IoTHubHTTPError, ValueError):
    """Represents invalid client configuration (e.g. a malformed connection string)"""

    pass


class CryptoError(IoTHubHTTPError, ValueError):
    """Represents a failure to produce or interpret a SAS credential"""

    pass


# Transport exceptions
class TransportError(IoTHubHTTPError):
    """The HTTP exchange with IoT Hub could not be completed"""

    pass


class TransportTimeoutError(TransportError):
    """The HTTP exchange with IoT Hub timed out"""

    pass


# Service exceptions
class ServiceError(IoTHubHTTPError):
    """Represents a failure reported by IoT Hub"""

    def __init__(self, status_code: int, description: str, reason: Optional[str] = None) -> None:
        super().__init__("{}: {}".format(status_code, description))
        self.status_code = status_code
        self.description = description
        self.reason = reason


class ArgumentError(ServiceError):
    """
    Service returned 400
    """

    pass


class UnauthorizedError(ServiceError):
    """
    Service returned 401
    """

    pass


class QuotaExceededError(ServiceError):
    """
    Service returned 403
    """

    pass


class NotFoundError(ServiceError):
    """
    Service returned 404
    """

    pass


class PreconditionFailedError(ServiceError):
    """
    Service returned 412
    """

    pass


class ThrottlingError(ServiceError):
    """
    Service returned 429
    """

    # Retry with back-off is left to the caller
    pass


class InternalServerError(ServiceError):
    """
    Service returned 500
    """

    pass
