# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the results of a send operation.
"""

from typing import NoReturn, Optional, Union
from .http_map_error import translate_error


class Sent:
    """IoT Hub accepted the messages

    :ivar int count: The number of messages accepted
    """

    __slots__ = ("_count",)
    succeeded = True

    def __init__(self, count: int) -> None:
        self._count = count

    @property
    def count(self) -> int:
        return self._count

    def raise_for_failure(self) -> None:
        """Does nothing, as the send succeeded"""
        pass

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sent):
            return NotImplemented
        return self._count == other._count

    def __hash__(self) -> int:
        return hash(("Sent", self._count))

    def __repr__(self) -> str:
        return "Sent(count={})".format(self._count)


class Failed:
    """IoT Hub rejected the messages

    :ivar str code: The HTTP status code returned by IoT Hub
    :ivar str description: A description of the failure
    """

    __slots__ = ("_code", "_description", "_reason")
    succeeded = False

    def __init__(self, code: str, description: str, reason: Optional[str] = None) -> None:
        self._code = code
        self._description = description
        self._reason = reason

    @property
    def code(self) -> str:
        return self._code

    @property
    def description(self) -> str:
        return self._description

    @property
    def reason(self) -> Optional[str]:
        """The HTTP reason phrase of the response, if any"""
        return self._reason

    def raise_for_failure(self) -> NoReturn:
        """Raise the ServiceError corresponding to this failure

        :raises: ServiceError (or the subclass specific to the status code)
        """
        raise translate_error(self._code, self._reason)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failed):
            return NotImplemented
        return (self._code, self._description) == (other._code, other._description)

    def __hash__(self) -> int:
        return hash(("Failed", self._code, self._description))

    def __repr__(self) -> str:
        return "Failed(code={!r}, description={!r})".format(self._code, self._description)


SendOutcome = Union[Sent, Failed]
