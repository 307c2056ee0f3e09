# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
from typing import Union, Dict, List, Tuple
from typing_extensions import TypedDict


# typing does not support recursion, so we must use forward references here (PEP484)
JSONSerializable = Union[
    Dict[str, "JSONSerializable"],
    List["JSONSerializable"],
    Tuple["JSONSerializable", ...],
    str,
    int,
    float,
    bool,
    None,
]


# Property names contain hyphens, so the functional syntax is required
MessageProperties = TypedDict(
    "MessageProperties", {"iothub-correlationid": str, "iothub-messageid": str}
)


class EnvelopeMessage(TypedDict):
    body: JSONSerializable
    base64Encoded: bool
    properties: MessageProperties


EnvelopeBody = Union[EnvelopeMessage, List[EnvelopeMessage]]
