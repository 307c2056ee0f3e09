# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the client used to send telemetry to IoT Hub over HTTPS as a device.
"""

import logging
import urllib.parse
from types import TracebackType
from typing import Any, Optional, Type
from . import config
from . import constant
from . import envelope
from . import http_map_error
from . import product_info
from . import sastoken as st
from .connection_string import ConnectionDescriptor
from .http_transport import HTTPTransport
from .models import Failed, Sent, SendOutcome

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODE = 204


class DeviceClient:
    """A synchronous client that sends device-to-cloud messages to IoT Hub over HTTPS.

    The SAS token used for authentication is generated once, upon instantiation, and is
    valid for the configured expiry. It is not refreshed. Once it expires, a new client
    must be created.
    """

    def __init__(self, device_config: config.DeviceConfiguration) -> None:
        """Initializer for a DeviceClient.

        :param device_config: The configuration of the client
        :type device_config: :class:`DeviceConfiguration`

        :raises: ConfigurationError if the connection string or transport options are invalid
        :raises: CryptoError if the shared access key cannot be used to sign a token
        """
        self._config = device_config
        self._descriptor = ConnectionDescriptor.parse(device_config.connection_string)
        self._sastoken = st.generate_sastoken(
            resource_uri=_format_sas_uri(self._descriptor.hostname, self._descriptor.device_id),
            signing_key=self._descriptor.shared_access_key,
            policy_name=device_config.policy_name,
            expiry_seconds=device_config.expiry_in_seconds,
        )
        transport_options = device_config.transport_options
        self._user_agent = product_info.get_iothub_user_agent(transport_options.product_info)
        self._transport = HTTPTransport(
            hostname=self._descriptor.hostname,
            server_verification_cert=transport_options.server_verification_cert,
            cipher=transport_options.cipher,
            proxy_options=transport_options.proxy_options,
            timeout=transport_options.timeout,
        )
        logger.debug(
            "DeviceClient created for device {} on {}".format(
                self._descriptor.device_id, self._descriptor.hostname
            )
        )

    @classmethod
    def create_from_connection_string(
        cls,
        connection_string: str,
        expiry_in_seconds: int = constant.DEFAULT_SASTOKEN_TTL,
        policy_name: str = "",
        **kwargs: Any,
    ) -> "DeviceClient":
        """Instantiate a DeviceClient using an IoT Hub device connection string

        :param str connection_string: The IoT Hub device connection string
        :param int expiry_in_seconds: Time-to-live (in seconds) for the SAS token used for
            authentication. Default is 3600 seconds (1 hour).
        :param str policy_name: Name of the shared access policy (optional)

        :keyword float timeout: Seconds to wait for IoT Hub to respond. Default is 10 seconds
        :keyword str server_verification_cert: PEM certificate to validate IoT Hub with
        :keyword str cipher: Cipher string in OpenSSL cipher list format
        :keyword proxy_options: Configuration structure for sending traffic through a proxy server
        :type: proxy_options: :class:`ProxyOptions`
        :keyword str product_info: Arbitrary product information which will be included in the
            User-Agent string

        :returns: A new instance of DeviceClient
        :rtype: DeviceClient

        :raises: ConfigurationError if the connection string or transport options are invalid
        :raises: CryptoError if the shared access key cannot be used to sign a token
        :raises: TypeError if an unsupported keyword argument is provided
        """
        _validate_kwargs(**kwargs)
        device_config = config.DeviceConfiguration(
            connection_string=connection_string,
            expiry_in_seconds=expiry_in_seconds,
            transport_options=config.TransportOptions(**kwargs),
            policy_name=policy_name,
        )
        return cls(device_config)

    def __enter__(self) -> "DeviceClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    @property
    def hostname(self) -> str:
        return self._descriptor.hostname

    @property
    def device_id(self) -> str:
        return self._descriptor.device_id

    @property
    def sastoken(self) -> st.SasToken:
        return self._sastoken

    def send(self, payload: Any, batch: bool = False) -> SendOutcome:
        """Send telemetry to IoT Hub

        :param payload: The JSON-compatible data to send. If batch is True, an iterable of
            JSON-compatible values, each of which is sent as an individual message.
        :param bool batch: Send the payload as a batch of messages. Default is False.

        :returns: Sent (with the number of messages accepted) if IoT Hub accepted the
            messages, otherwise Failed (with the status code and a description)
        :rtype: :class:`Sent` or :class:`Failed`

        :raises: TransportError if the request to IoT Hub could not be completed
        :raises: TypeError if the payload cannot be framed
        """
        if self._sastoken.is_expired():
            logger.warning("SAS token has expired - IoT Hub will reject this request")

        message_envelope = envelope.build_envelope(payload, batch=batch)
        headers = {
            "authorization": str(self._sastoken),
            "User-Agent": self._user_agent,
        }
        response = self._transport.post(
            path=_format_events_path(self._descriptor.device_id),
            headers=headers,
            body=message_envelope.serialize(),
            content_type=message_envelope.content_type,
        )

        if response.status_code == SUCCESS_STATUS_CODE:
            logger.debug("IoT Hub accepted {} message(s)".format(message_envelope.message_count))
            return Sent(count=message_envelope.message_count)
        else:
            description = http_map_error.get_error_description(response.status_code)
            logger.warning(
                "IoT Hub rejected message(s) with status {}: {}".format(
                    response.status_code, description
                )
            )
            return Failed(
                code=str(response.status_code), description=description, reason=response.reason
            )

    def close(self) -> None:
        """Release the resources held by the underlying HTTP transport"""
        self._transport.close()


def _validate_kwargs(**kwargs) -> None:
    """Helper function to validate user provided kwargs.
    Raises TypeError if an invalid option has been provided"""
    valid_kwargs = [
        "timeout",
        "server_verification_cert",
        "cipher",
        "proxy_options",
        "product_info",
    ]

    for kwarg in kwargs:
        if kwarg not in valid_kwargs:
            # NOTE: TypeError is the conventional error that is returned when an invalid kwarg is
            # supplied. It feels like it should be a ValueError, but it's not.
            raise TypeError("Unsupported keyword argument: '{}'".format(kwarg))


def _format_sas_uri(hostname: str, device_id: str) -> str:
    """Format the SAS URI for using IoT Hub"""
    return "{hostname}/devices/{device_id}".format(hostname=hostname, device_id=device_id)


def _format_events_path(device_id: str) -> str:
    """Format the path of the device-to-cloud events endpoint"""
    return "/devices/{device_id}/messages/events?api-version={api_version}".format(
        device_id=urllib.parse.quote(device_id, safe=""),
        api_version=constant.IOTHUB_API_VERSION,
    )
