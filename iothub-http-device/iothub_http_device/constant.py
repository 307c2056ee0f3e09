# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines constants for use across the iothub-http-device package
"""

VERSION = "1.0.0"
IOTHUB_IDENTIFIER = "iothub-http-device-py"
IOTHUB_API_VERSION = "2018-06-30"

DEFAULT_SASTOKEN_TTL = 3600
HTTP_TIMEOUT = 10

# Content types
JSON_CONTENT_TYPE = "application/json"
BATCH_CONTENT_TYPE = "application/vnd.microsoft.iothub.json"

# System properties carried on every message
CORRELATION_ID_PROPERTY = "iothub-correlationid"
MESSAGE_ID_PROPERTY = "iothub-messageid"
