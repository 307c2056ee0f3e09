# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module defines an abstract SigningMechanism, as well as common child implementations of it
"""

import abc
import base64
import binascii
import hashlib
import hmac
from typing import AnyStr, Union


class SigningMechanism(abc.ABC):
    @abc.abstractmethod
    def sign(self, data_str: AnyStr) -> str:
        pass


class SymmetricKeySigningMechanism(SigningMechanism):
    def __init__(self, key: Union[str, bytes]) -> None:
        """
        A mechanism that signs data using a symmetric key

        :param key: Symmetric Key (base64 encoded)
        :type key: str or bytes

        :raises: ValueError if the key is not valid base64
        """
        # Convert key to bytes
        try:
            key_bytes = key.encode("utf-8")  # type: ignore
        except AttributeError:
            # If byte string, no need to encode
            key_bytes = key

        # Derives the signing key (the decoded bytes, not the base64 text)
        try:
            self._signing_key = base64.b64decode(key_bytes, validate=True)
        except (binascii.Error, TypeError) as e:
            raise ValueError("Invalid Symmetric Key") from e

    def sign(self, data_str: AnyStr) -> str:
        """
        Sign a data string with symmetric key and the HMAC-SHA256 algorithm.

        :param data_str: Data string to be signed
        :type data_str: str or bytes

        :returns: The signed data
        :rtype: str
        """
        # Convert data_str to bytes
        try:
            data_bytes = data_str.encode("utf-8")  # type: ignore
        except AttributeError:
            # If byte string, no need to encode
            data_bytes = data_str

        # Derive signature via HMAC-SHA256 algorithm
        try:
            hmac_digest = hmac.HMAC(
                key=self._signing_key, msg=data_bytes, digestmod=hashlib.sha256
            ).digest()
            signed_data = base64.b64encode(hmac_digest)
        except TypeError as e:
            raise ValueError("Unable to sign string using the provided symmetric key") from e
        # Convert from bytes to string
        return signed_data.decode("utf-8")
