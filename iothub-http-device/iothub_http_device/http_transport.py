# --------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import logging
import ssl
from typing import Dict, NamedTuple, Optional
import requests  # type: ignore
from . import constant
from . import exceptions as exc
from .config import ProxyOptions

logger = logging.getLogger(__name__)


class HTTPResponse(NamedTuple):
    status_code: int
    reason: str
    text: str


class HTTPTransport:
    """
    A wrapper class that provides an implementation-agnostic HTTP interface.
    """

    def __init__(
        self,
        hostname: str,
        server_verification_cert: Optional[str] = None,
        cipher: Optional[str] = None,
        proxy_options: Optional[ProxyOptions] = None,
        timeout: float = constant.HTTP_TIMEOUT,
    ) -> None:
        """
        Constructor to instantiate an HTTP protocol wrapper.

        :param str hostname: Hostname or IP address of the remote host.
        :param str server_verification_cert: Certificate which can be used to validate a server-side TLS connection (optional).
        :param str cipher: Cipher string in OpenSSL cipher list format (optional)
        :param proxy_options: Options for sending traffic through proxy servers.
        :param float timeout: Seconds to wait for the server before giving up.

        :raises: ConfigurationError if the certificate or cipher cannot be loaded
        """
        self._hostname = hostname
        self._server_verification_cert = server_verification_cert
        self._cipher = cipher
        self._proxies = format_proxies(proxy_options)
        self._timeout = timeout
        self._http_adapter = self._create_http_adapter()
        self._session = self._create_session()

    @property
    def base_url(self) -> str:
        return "https://{}".format(self._hostname)

    def _create_http_adapter(self) -> requests.adapters.HTTPAdapter:
        """
        This method creates a custom HTTPAdapter for use with a requests library session.
        It will allow for use of a custom configured SSL context.
        """
        ssl_context = self._create_ssl_context()

        class CustomSSLContextHTTPAdapter(requests.adapters.HTTPAdapter):
            def init_poolmanager(self, *args, **kwargs):
                kwargs["ssl_context"] = ssl_context
                return super().init_poolmanager(*args, **kwargs)

            def proxy_manager_for(self, *args, **kwargs):
                kwargs["ssl_context"] = ssl_context
                return super().proxy_manager_for(*args, **kwargs)

        return CustomSSLContextHTTPAdapter()

    def _create_ssl_context(self) -> ssl.SSLContext:
        """
        This method creates the SSLContext object used to authenticate the connection.
        """
        logger.debug("creating a SSL context")
        ssl_context = ssl.SSLContext(protocol=ssl.PROTOCOL_TLS_CLIENT)
        ssl_context.minimum_version = ssl.TLSVersion.TLSv1_2

        if self._server_verification_cert:
            try:
                ssl_context.load_verify_locations(cadata=self._server_verification_cert)
            except ssl.SSLError as e:
                raise exc.ConfigurationError("Invalid server verification certificate") from e
        else:
            ssl_context.load_default_certs()

        if self._cipher:
            try:
                ssl_context.set_ciphers(self._cipher)
            except ssl.SSLError as e:
                raise exc.ConfigurationError("Invalid cipher: {}".format(self._cipher)) from e

        ssl_context.verify_mode = ssl.CERT_REQUIRED
        ssl_context.check_hostname = True

        return ssl_context

    def _create_session(self) -> requests.Session:
        # Mount the transport adapter to a requests session
        session = requests.Session()
        session.mount("https://", self._http_adapter)
        return session

    def post(
        self,
        path: str,
        headers: Dict[str, str],
        body: str,
        content_type: str = constant.JSON_CONTENT_TYPE,
    ) -> HTTPResponse:
        """
        Send a POST request to the remote host and wait for the response.

        :param str path: The path (and query string) of the URL, starting with "/"
        :param dict headers: Extra HTTP headers to be sent with the request.
        :param str body: The body of the HTTP request.
        :param str content_type: The content type of the body.

        :returns: The status code, reason and text of the response
        :raises: TransportTimeoutError if the request timed out
        :raises: TransportError if the request could not be completed
        """
        url = self.base_url + path
        request_headers = dict(headers)
        request_headers["content-type"] = content_type

        logger.info("sending https POST request to {} .".format(path.split("?")[0]))
        try:
            # Note that various configuration options are not set here due to them being set
            # via the HTTPAdapter that was mounted at session level.
            response = self._session.post(
                url,
                data=body.encode("utf-8"),
                headers=request_headers,
                proxies=self._proxies,
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as e:
            raise exc.TransportTimeoutError("HTTPS request timed out") from e
        except requests.exceptions.RequestException as e:
            raise exc.TransportError("Unexpected HTTPS failure during request") from e

        logger.debug("received https response status {}".format(response.status_code))
        return HTTPResponse(
            status_code=response.status_code, reason=response.reason, text=response.text
        )

    def close(self) -> None:
        """Release the pooled connections of the underlying session"""
        self._session.close()


def format_proxies(proxy_options: Optional[ProxyOptions]) -> Dict[str, str]:
    """
    Format the data from the proxy_options object into a format for use with the requests library
    """
    proxies = {}
    if proxy_options:
        # Basic address/port formatting
        proxy = "{address}:{port}".format(
            address=proxy_options.proxy_address, port=proxy_options.proxy_port
        )
        # Add credentials if necessary
        if proxy_options.proxy_username and proxy_options.proxy_password:
            auth = "{username}:{password}".format(
                username=proxy_options.proxy_username, password=proxy_options.proxy_password
            )
            proxy = auth + "@" + proxy
        # Set proxy for use on HTTP or HTTPS connections
        if proxy_options.proxy_type == "HTTP":
            proxies["http"] = "http://" + proxy
            proxies["https"] = "http://" + proxy
        elif proxy_options.proxy_type == "SOCKS4":
            proxies["http"] = "socks4://" + proxy
            proxies["https"] = "socks4://" + proxy
        elif proxy_options.proxy_type == "SOCKS5":
            proxies["http"] = "socks5://" + proxy
            proxies["https"] = "socks5://" + proxy
        else:
            # This should be unreachable due to validation on the ProxyOptions object
            raise ValueError("Invalid proxy type: {}".format(proxy_options.proxy_type))

    return proxies
