# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
import pytest
import platform
from iothub_http_device import product_info
from iothub_http_device.constant import VERSION, IOTHUB_IDENTIFIER


check_agent_format = (
    "{identifier}/{version}({python_runtime};{os_type} {os_release};{architecture})"
)


@pytest.mark.describe(".get_iothub_user_agent()")
class TestGetIothubUserAgent(object):
    @pytest.mark.it(
        "Returns a user agent string containing the library version, python version, operating system and architecture of the system"
    )
    def test_get_iothub_user_agent(self):
        user_agent = product_info.get_iothub_user_agent()

        expected_agent = check_agent_format.format(
            identifier=IOTHUB_IDENTIFIER,
            version=VERSION,
            python_runtime=platform.python_version(),
            os_type=platform.system(),
            os_release=platform.version(),
            architecture=platform.machine(),
        )
        assert user_agent == expected_agent

    @pytest.mark.it("Appends the provided product info to the end of the user agent string")
    def test_product_info(self):
        user_agent = product_info.get_iothub_user_agent("my-product/2.0")

        assert user_agent.startswith(product_info.get_iothub_user_agent())
        assert user_agent.endswith("my-product/2.0")
