# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module is for creating the User-Agent string sent to IoT Hub."""

import platform
from .constant import VERSION, IOTHUB_IDENTIFIER

python_runtime = platform.python_version()
os_type = platform.system()
os_release = platform.version()
architecture = platform.machine()


def _get_common_user_agent() -> str:
    return "({python_runtime};{os_type} {os_release};{architecture})".format(
        python_runtime=python_runtime,
        os_type=os_type,
        os_release=os_release,
        architecture=architecture,
    )


def get_iothub_user_agent(product_info: str = "") -> str:
    """
    Create the user agent for IotHub, with optional custom product info appended
    """
    return "{iothub_iden}/{version}{common}{product_info}".format(
        iothub_iden=IOTHUB_IDENTIFIER,
        version=VERSION,
        common=_get_common_user_agent(),
        product_info=product_info,
    )
