# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest
import logging
from iothub_http_device import http_map_error
from iothub_http_device.http_map_error import (
    get_error_description,
    translate_error,
    UNKNOWN_ERROR_DESCRIPTION,
)
from iothub_http_device import exceptions as exc

logging.basicConfig(level=logging.DEBUG)


@pytest.mark.describe("get_error_description()")
class TestGetErrorDescription(object):
    @pytest.mark.it("Returns the description of a known status code")
    @pytest.mark.parametrize("status_code", [400, 401, 403, 404, 412, 429, 500])
    def test_known(self, status_code):
        description = get_error_description(status_code)
        assert description == http_map_error.ERROR_DESCRIPTIONS[status_code]
        assert description != UNKNOWN_ERROR_DESCRIPTION

    @pytest.mark.it("Describes a 401 as a failure to validate the authorization token")
    def test_401(self):
        assert get_error_description(401).startswith(
            "The authorization token cannot be validated"
        )

    @pytest.mark.it("Accepts status codes as strings")
    def test_string_code(self):
        assert get_error_description("429") == get_error_description(429)

    @pytest.mark.it("Returns a generic description for an unknown status code")
    @pytest.mark.parametrize(
        "status_code",
        [
            pytest.param(418, id="Unmapped"),
            pytest.param(204, id="Success code"),
            pytest.param("abc", id="Not a number"),
        ],
    )
    def test_unknown(self, status_code):
        assert get_error_description(status_code) == "Unknown error occurred."

    @pytest.mark.it("Maintains the description table as read-only")
    def test_read_only(self):
        with pytest.raises(TypeError):
            http_map_error.ERROR_DESCRIPTIONS[418] = "I'm a teapot"


@pytest.mark.describe("translate_error()")
class TestTranslateError(object):
    @pytest.mark.it("Returns the ServiceError subclass corresponding to the status code")
    @pytest.mark.parametrize(
        "status_code, error_cls",
        [
            pytest.param(400, exc.ArgumentError, id="400"),
            pytest.param(401, exc.UnauthorizedError, id="401"),
            pytest.param(403, exc.QuotaExceededError, id="403"),
            pytest.param(404, exc.NotFoundError, id="404"),
            pytest.param(412, exc.PreconditionFailedError, id="412"),
            pytest.param(429, exc.ThrottlingError, id="429"),
            pytest.param(500, exc.InternalServerError, id="500"),
        ],
    )
    def test_known(self, status_code, error_cls):
        error = translate_error(str(status_code), "Some Reason")
        assert type(error) is error_cls
        assert error.status_code == status_code
        assert error.description == get_error_description(status_code)
        assert error.reason == "Some Reason"

    @pytest.mark.it("Returns a generic ServiceError for an unknown status code")
    def test_unknown(self):
        error = translate_error(418)
        assert type(error) is exc.ServiceError
        assert error.description == UNKNOWN_ERROR_DESCRIPTION
