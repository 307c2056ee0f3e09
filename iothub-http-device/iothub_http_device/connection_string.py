# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains tools for working with Connection Strings"""

import logging
from .exceptions import ConfigurationError

__all__ = ["ConnectionDescriptor", "parse_connection_string"]

logger = logging.getLogger(__name__)

CS_DELIMITER = ";"

HOST_NAME = "HostName"
DEVICE_ID = "DeviceId"
SHARED_ACCESS_KEY = "SharedAccessKey"

# Order matters: fields are assigned by position, not by label
_field_prefixes = [HOST_NAME + "=", DEVICE_ID + "=", SHARED_ACCESS_KEY + "="]

EXPECTED_FORMAT = "HostName=<host>;DeviceId=<device>;SharedAccessKey=<key>"


class ConnectionDescriptor:
    """The connection details of a single IoT Hub device.

    Instances are only ever created fully populated, via .parse()
    """

    __slots__ = ("_hostname", "_device_id", "_shared_access_key")

    def __init__(self, hostname: str, device_id: str, shared_access_key: str) -> None:
        """
        :param str hostname: Hostname of the IoT Hub
        :param str device_id: The device identity registered with the IoT Hub
        :param str shared_access_key: Base64 encoded symmetric key of the device
        """
        self._hostname = hostname
        self._device_id = device_id
        self._shared_access_key = shared_access_key

    @classmethod
    def parse(cls, connection_string: str) -> "ConnectionDescriptor":
        """Create a ConnectionDescriptor from a device connection string

        :param str connection_string: String of the form
            HostName=<host>;DeviceId=<device>;SharedAccessKey=<key>

        :raises: ConfigurationError if the connection string is malformed
        """
        hostname, device_id, shared_access_key = _parse_connection_string(connection_string)
        return cls(hostname, device_id, shared_access_key)

    def __repr__(self) -> str:
        # Never expose the key
        return "ConnectionDescriptor(hostname={!r}, device_id={!r})".format(
            self._hostname, self._device_id
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConnectionDescriptor):
            return NotImplemented
        return (self._hostname, self._device_id, self._shared_access_key) == (
            other._hostname,
            other._device_id,
            other._shared_access_key,
        )

    def __hash__(self) -> int:
        return hash((self._hostname, self._device_id, self._shared_access_key))

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def device_id(self) -> str:
        return self._device_id

    @property
    def shared_access_key(self) -> str:
        return self._shared_access_key


def parse_connection_string(connection_string: str) -> ConnectionDescriptor:
    """Return a ConnectionDescriptor for the given device connection string"""
    return ConnectionDescriptor.parse(connection_string)


def _parse_connection_string(connection_string):
    """Return the (hostname, device_id, shared_access_key) contained in a connection string"""
    if not isinstance(connection_string, str):
        raise ConfigurationError(
            "Connection String must be of type str, in the format: {}".format(EXPECTED_FORMAT)
        )
    stripped = connection_string
    for prefix in _field_prefixes:
        stripped = stripped.replace(prefix, "")
    segments = [segment for segment in stripped.split(CS_DELIMITER) if segment]
    if len(segments) != 3:
        logger.debug(
            "Connection string parsed into {} segments instead of 3".format(len(segments))
        )
        raise ConfigurationError(
            "Invalid Connection String - expected format: {}".format(EXPECTED_FORMAT)
        )
    return segments[0], segments[1], segments[2]
