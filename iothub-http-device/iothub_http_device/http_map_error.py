# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module maps HTTP status codes returned by the IoT Hub events endpoint to
human-readable descriptions and service exceptions.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Type, Union
from . import exceptions as exc

UNKNOWN_ERROR_DESCRIPTION = "Unknown error occurred."

_error_descriptions = {
    400: "The body of the request is not valid; for example, it cannot be parsed, or the object cannot be validated.",
    401: "The authorization token cannot be validated; for example, it is expired or does not apply to the request's URI and/or method.",
    403: "IoT Hub has reached its daily message quota or the device's message quota has been exceeded.",
    404: "The IoT Hub instance or a device identity does not exist.",
    412: "The etag in the request does not match the etag of the existing resource, as per RFC7232.",
    429: "This IoT Hub's identity registry operations are being throttled by the service; retry with exponential back-off.",
    500: "An internal error occurred.",
}

_error_classes = {
    400: exc.ArgumentError,
    401: exc.UnauthorizedError,
    403: exc.QuotaExceededError,
    404: exc.NotFoundError,
    412: exc.PreconditionFailedError,
    429: exc.ThrottlingError,
    500: exc.InternalServerError,
}

ERROR_DESCRIPTIONS: Mapping[int, str] = MappingProxyType(_error_descriptions)
ERROR_CLASSES: Mapping[int, Type[exc.ServiceError]] = MappingProxyType(_error_classes)


def get_error_description(status_code: Union[int, str]) -> str:
    """Return the description of an IoT Hub HTTP status code

    :param status_code: The HTTP status code, as an int or numeric string
    :returns: The description, or a generic one if the status code is not known
    """
    try:
        return ERROR_DESCRIPTIONS.get(int(status_code), UNKNOWN_ERROR_DESCRIPTION)
    except (TypeError, ValueError):
        return UNKNOWN_ERROR_DESCRIPTION


def translate_error(
    status_code: Union[int, str], reason: Optional[str] = None
) -> exc.ServiceError:
    """Return the ServiceError corresponding to an IoT Hub HTTP status code"""
    try:
        code = int(status_code)
    except (TypeError, ValueError):
        return exc.ServiceError(status_code, UNKNOWN_ERROR_DESCRIPTION, reason)  # type: ignore
    error_class = ERROR_CLASSES.get(code, exc.ServiceError)
    return error_class(code, get_error_description(code), reason)
