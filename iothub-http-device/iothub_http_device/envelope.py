# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains the framing of telemetry payloads into the body that the IoT Hub
HTTPS events endpoint expects, for both single messages and batches.
"""

import base64
import json
import logging
import uuid
from typing import Any, Iterable
from . import constant
from .custom_typing import EnvelopeBody, EnvelopeMessage, JSONSerializable

logger = logging.getLogger(__name__)


class MessageEnvelope:
    """The wire representation of one send operation.

    Data Attributes:
    body: The JSON-compatible body (an object for a single message, an array for a batch)
    content_type (str): The content type the body must be sent with
    message_count (int): The number of messages framed in the body
    """

    __slots__ = ("_body", "_content_type", "_message_count")

    def __init__(self, body: EnvelopeBody, content_type: str, message_count: int) -> None:
        self._body = body
        self._content_type = content_type
        self._message_count = message_count

    @property
    def body(self) -> EnvelopeBody:
        return self._body

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def message_count(self) -> int:
        return self._message_count

    @property
    def is_batch(self) -> bool:
        return self._content_type == constant.BATCH_CONTENT_TYPE

    def serialize(self) -> str:
        """Return the body as JSON text"""
        return _to_json(self._body)


def build_envelope(payload: Any, batch: bool = False) -> MessageEnvelope:
    """Frame a payload for the IoT Hub events endpoint

    :param payload: A JSON-compatible value, or (if batch is True) an iterable of them
    :param bool batch: Send each element of payload as an individual message

    :raises: TypeError if batch is True and payload is not an iterable of messages
    :raises: TypeError if payload cannot be serialized as JSON
    """
    if batch:
        return _build_batch_envelope(payload)
    else:
        return _build_single_envelope(payload)


def _build_single_envelope(payload: JSONSerializable) -> MessageEnvelope:
    correlation_id = _new_id()
    body: EnvelopeMessage = {
        "body": payload,
        "base64Encoded": False,
        "properties": {
            constant.CORRELATION_ID_PROPERTY: correlation_id,
            constant.MESSAGE_ID_PROPERTY: correlation_id,
        },
    }
    # Fail now rather than on the wire
    _to_json(body)
    logger.debug("Built single message envelope (correlation id: {})".format(correlation_id))
    return MessageEnvelope(body, constant.JSON_CONTENT_TYPE, 1)


def _build_batch_envelope(payload: Iterable[Any]) -> MessageEnvelope:
    if isinstance(payload, (str, bytes, bytearray, dict)):
        raise TypeError(
            "Batch payload must be a sequence of messages, not {}".format(type(payload).__name__)
        )
    try:
        elements = list(payload)
    except TypeError as e:
        raise TypeError("Batch payload must be a sequence of messages") from e

    correlation_id = _new_id()
    body = [
        {
            "body": base64.b64encode(_text_of(element)).decode("ascii"),
            "base64Encoded": True,
            "properties": {
                constant.CORRELATION_ID_PROPERTY: correlation_id,
                constant.MESSAGE_ID_PROPERTY: _new_id(),
            },
        }
        for element in elements
    ]
    logger.debug(
        "Built batch envelope of {} messages (correlation id: {})".format(
            len(body), correlation_id
        )
    )
    return MessageEnvelope(body, constant.BATCH_CONTENT_TYPE, len(body))


def _text_of(element: Any) -> bytes:
    """Return the bytes that constitute the body of one batched message"""
    if isinstance(element, (bytes, bytearray)):
        return bytes(element)
    elif isinstance(element, str):
        return element.encode("utf-8")
    else:
        return _to_json(element).encode("utf-8")


def _to_json(value: Any) -> str:
    """Serialize as strict JSON. NaN and Infinity have no JSON representation."""
    try:
        return json.dumps(value, allow_nan=False)
    except ValueError as e:
        raise TypeError("Payload cannot be serialized as JSON: {}".format(e)) from e


def _new_id() -> str:
    return str(uuid.uuid4())
