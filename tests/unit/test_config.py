# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest
import logging
import socks
from iothub_http_device.config import DeviceConfiguration, TransportOptions, ProxyOptions
from iothub_http_device.exceptions import ConfigurationError

logging.basicConfig(level=logging.DEBUG)

FAKE_CONNECTION_STRING = "HostName=h.net;DeviceId=d;SharedAccessKey=Zm9vYmFy"


@pytest.mark.describe("ProxyOptions")
class TestProxyOptions(object):
    @pytest.mark.it("Instantiates with the provided values")
    def test_values(self):
        proxy = ProxyOptions("SOCKS5", "127.0.0.1", 9050, "user", "pass")
        assert proxy.proxy_type == "SOCKS5"
        assert proxy.proxy_type_socks == socks.SOCKS5
        assert proxy.proxy_address == "127.0.0.1"
        assert proxy.proxy_port == 9050
        assert proxy.proxy_username == "user"
        assert proxy.proxy_password == "pass"

    @pytest.mark.it("Accepts the socks library constants as the proxy type")
    @pytest.mark.parametrize(
        "proxy_type, expected",
        [
            pytest.param(socks.HTTP, "HTTP", id="HTTP"),
            pytest.param(socks.SOCKS4, "SOCKS4", id="SOCKS4"),
            pytest.param(socks.SOCKS5, "SOCKS5", id="SOCKS5"),
        ],
    )
    def test_socks_constants(self, proxy_type, expected):
        proxy = ProxyOptions(proxy_type, "127.0.0.1", 8888)
        assert proxy.proxy_type == expected
        assert proxy.proxy_type_socks == proxy_type

    @pytest.mark.it("Defaults the port to 8080 for HTTP proxies and 1080 for SOCKS proxies")
    @pytest.mark.parametrize(
        "proxy_type, expected_port",
        [
            pytest.param("HTTP", 8080, id="HTTP"),
            pytest.param("SOCKS4", 1080, id="SOCKS4"),
            pytest.param("SOCKS5", 1080, id="SOCKS5"),
        ],
    )
    def test_default_port(self, proxy_type, expected_port):
        assert ProxyOptions(proxy_type, "127.0.0.1").proxy_port == expected_port

    @pytest.mark.it("Raises a ValueError if the proxy type is invalid")
    def test_invalid_type(self):
        with pytest.raises(ValueError):
            ProxyOptions("FTP", "127.0.0.1")


@pytest.mark.describe("TransportOptions")
class TestTransportOptions(object):
    @pytest.mark.it("Instantiates with default values if none are provided")
    def test_defaults(self):
        options = TransportOptions()
        assert options.timeout == 10
        assert options.server_verification_cert is None
        assert options.cipher is None
        assert options.proxy_options is None
        assert options.product_info == ""

    @pytest.mark.it("Raises a ConfigurationError if the timeout is not greater than 0")
    @pytest.mark.parametrize("timeout", [0, -1])
    def test_bad_timeout_value(self, timeout):
        with pytest.raises(ConfigurationError):
            TransportOptions(timeout=timeout)

    @pytest.mark.it("Raises a ConfigurationError if the timeout is not numeric")
    @pytest.mark.parametrize("timeout", ["soon", None, [5]])
    def test_bad_timeout_type(self, timeout):
        with pytest.raises(ConfigurationError):
            TransportOptions(timeout=timeout)

    @pytest.mark.it("Only accepts keyword arguments")
    def test_keyword_only(self):
        with pytest.raises(TypeError):
            TransportOptions(5)


@pytest.mark.describe("DeviceConfiguration")
class TestDeviceConfiguration(object):
    @pytest.mark.it("Instantiates with default values if none are provided")
    def test_defaults(self):
        device_config = DeviceConfiguration(connection_string=FAKE_CONNECTION_STRING)
        assert device_config.connection_string == FAKE_CONNECTION_STRING
        assert device_config.expiry_in_seconds == 3600
        assert isinstance(device_config.transport_options, TransportOptions)
        assert device_config.policy_name == ""

    @pytest.mark.it("Is immutable once created")
    @pytest.mark.parametrize(
        "attribute",
        ["connection_string", "expiry_in_seconds", "transport_options", "policy_name"],
    )
    def test_read_only(self, attribute):
        device_config = DeviceConfiguration(connection_string=FAKE_CONNECTION_STRING)
        with pytest.raises(AttributeError):
            setattr(device_config, attribute, None)

    @pytest.mark.it("Raises a ConfigurationError if the expiry is not a positive integer")
    @pytest.mark.parametrize(
        "expiry",
        [
            pytest.param(0, id="Zero"),
            pytest.param(-60, id="Negative"),
            pytest.param("an hour", id="Not numeric"),
            pytest.param(None, id="None"),
            pytest.param(True, id="Boolean"),
        ],
    )
    def test_bad_expiry(self, expiry):
        with pytest.raises(ConfigurationError):
            DeviceConfiguration(connection_string=FAKE_CONNECTION_STRING, expiry_in_seconds=expiry)

    @pytest.mark.it("Does not include the connection string in its repr")
    def test_repr(self):
        device_config = DeviceConfiguration(connection_string=FAKE_CONNECTION_STRING)
        assert "Zm9vYmFy" not in repr(device_config)
