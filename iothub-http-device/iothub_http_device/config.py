# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import logging
import socks
from typing import Any, Optional, Union
from . import constant
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


string_to_socks_constant_map = {"HTTP": socks.HTTP, "SOCKS4": socks.SOCKS4, "SOCKS5": socks.SOCKS5}
socks_constant_to_string_map = {socks.HTTP: "HTTP", socks.SOCKS4: "SOCKS4", socks.SOCKS5: "SOCKS5"}


class ProxyOptions:
    """
    A class containing various options to send traffic through proxy servers.
    """

    def __init__(
        self,
        proxy_type: Union[str, int],
        proxy_address: str,
        proxy_port: Optional[int] = None,
        proxy_username: Optional[str] = None,
        proxy_password: Optional[str] = None,
    ) -> None:
        """
        Initializer for proxy options.
        :param str proxy_type: The type of the proxy server. This can be one of three possible choices: "HTTP", "SOCKS4", or "SOCKS5"
        :param str proxy_address: IP address or DNS name of proxy server
        :param int proxy_port: The port of the proxy server. Defaults to 1080 for socks and 8080 for http.
        :param str proxy_username: (optional) username for the proxy server.
            If it is not provided, authentication will not be used (servers may accept unauthenticated requests).
        :param str proxy_password: (optional) The password for the username provided.
        """
        (self._proxy_type, self._proxy_type_socks) = _format_proxy_type(proxy_type)
        self._proxy_address = proxy_address
        if proxy_port is None:
            self._proxy_port = _derive_default_proxy_port(self._proxy_type)
        else:
            self._proxy_port = int(proxy_port)
        self._proxy_username = proxy_username
        self._proxy_password = proxy_password

    @property
    def proxy_type(self) -> str:
        return self._proxy_type

    @property
    def proxy_type_socks(self) -> int:
        return self._proxy_type_socks

    @property
    def proxy_address(self) -> str:
        return self._proxy_address

    @property
    def proxy_port(self) -> int:
        return self._proxy_port

    @property
    def proxy_username(self) -> Optional[str]:
        return self._proxy_username

    @property
    def proxy_password(self) -> Optional[str]:
        return self._proxy_password


class TransportOptions:
    """Options for the underlying HTTPS transport"""

    def __init__(
        self,
        *,
        timeout: float = constant.HTTP_TIMEOUT,
        server_verification_cert: Optional[str] = None,
        cipher: Optional[str] = None,
        proxy_options: Optional[ProxyOptions] = None,
        product_info: str = "",
    ) -> None:
        """
        :param float timeout: Seconds to wait for the server to respond (default 10)
        :param str server_verification_cert: PEM certificate used to validate the server-side
            TLS connection (optional). If not provided, default system certificates are used
        :param str cipher: Cipher string in OpenSSL cipher list format (optional)
        :param proxy_options: Details of proxy configuration (optional)
        :type proxy_options: :class:`ProxyOptions`
        :param str product_info: Arbitrary product information which will be included in the
            User-Agent string

        :raises: ConfigurationError if an invalid option value is provided
        """
        self._timeout = _sanitize_timeout(timeout)
        self._server_verification_cert = server_verification_cert
        self._cipher = cipher
        self._proxy_options = proxy_options
        self._product_info = product_info

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def server_verification_cert(self) -> Optional[str]:
        return self._server_verification_cert

    @property
    def cipher(self) -> Optional[str]:
        return self._cipher

    @property
    def proxy_options(self) -> Optional[ProxyOptions]:
        return self._proxy_options

    @property
    def product_info(self) -> str:
        return self._product_info


class DeviceConfiguration:
    """
    Configuration of a DeviceClient. Immutable once created.
    """

    def __init__(
        self,
        *,
        connection_string: str,
        expiry_in_seconds: int = constant.DEFAULT_SASTOKEN_TTL,
        transport_options: Optional[TransportOptions] = None,
        policy_name: str = "",
    ) -> None:
        """Initializer for DeviceConfiguration

        :param str connection_string: The IoT Hub device connection string
        :param int expiry_in_seconds: Time-to-live (in seconds) for the SAS token used for
            authentication. Default is 3600 seconds (1 hour).
        :param transport_options: Options for the HTTPS transport
        :type transport_options: :class:`TransportOptions`
        :param str policy_name: Name of the shared access policy to include in the SAS token
            (optional)

        :raises: ConfigurationError if an invalid option value is provided
        """
        self._connection_string = connection_string
        self._expiry_in_seconds = _sanitize_expiry(expiry_in_seconds)
        if transport_options is None:
            transport_options = TransportOptions()
        self._transport_options = transport_options
        self._policy_name = policy_name or ""

    def __repr__(self) -> str:
        # The connection string contains the key
        return "DeviceConfiguration(expiry_in_seconds={}, policy_name={!r})".format(
            self._expiry_in_seconds, self._policy_name
        )

    @property
    def connection_string(self) -> str:
        return self._connection_string

    @property
    def expiry_in_seconds(self) -> int:
        return self._expiry_in_seconds

    @property
    def transport_options(self) -> TransportOptions:
        return self._transport_options

    @property
    def policy_name(self) -> str:
        return self._policy_name


# Sanitization #


def _format_proxy_type(proxy_type: Any):
    """Returns a tuple of formats for proxy type (string, socks library constant)"""
    try:
        return (proxy_type, string_to_socks_constant_map[proxy_type])
    except KeyError:
        # Also accept the socks library constants
        try:
            return (socks_constant_to_string_map[proxy_type], proxy_type)
        except KeyError:
            raise ValueError("Invalid Proxy Type")


def _derive_default_proxy_port(proxy_type: str) -> int:
    if proxy_type == "HTTP":
        return 8080
    else:
        return 1080


def _sanitize_expiry(expiry_in_seconds: Any) -> int:
    if isinstance(expiry_in_seconds, bool):
        raise ConfigurationError("Invalid type for 'expiry_in_seconds'. Must be an integer.")
    try:
        expiry_in_seconds = int(expiry_in_seconds)
    except (ValueError, TypeError):
        raise ConfigurationError("Invalid type for 'expiry_in_seconds'. Must be an integer.")

    if expiry_in_seconds <= 0:
        raise ConfigurationError("'expiry_in_seconds' must be greater than 0")

    return expiry_in_seconds


def _sanitize_timeout(timeout: Any) -> float:
    try:
        timeout = float(timeout)
    except (ValueError, TypeError):
        raise ConfigurationError("Invalid type for 'timeout'. Must be a numeric value.")

    if timeout <= 0:
        raise ConfigurationError("'timeout' must be greater than 0")

    return timeout
