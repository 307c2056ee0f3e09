# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import pytest

"""
NOTE: Tests that need some kind of non-specific, arbitrary exception should use one of the
following fixtures. Raising Exception directly can hide other errors that are also caught by
an "except Exception" block. A subclass defined nowhere else is guaranteed to be unexpected.
"""


@pytest.fixture
def arbitrary_exception():
    class ArbitraryException(Exception):
        pass

    return ArbitraryException("This exception is completely arbitrary")

