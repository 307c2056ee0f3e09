# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""This module contains tools for working with Shared Access Signature (SAS) Tokens"""

import logging
import time
import urllib.parse
from typing import Dict, List, Optional, Union
from .exceptions import CryptoError
from .signing_mechanism import SigningMechanism, SymmetricKeySigningMechanism
from . import constant


logger = logging.getLogger(__name__)

REQUIRED_SASTOKEN_FIELDS: List[str] = ["sr", "sig", "se"]
VALID_SASTOKEN_FIELDS: List[str] = REQUIRED_SASTOKEN_FIELDS + ["skn"]
TOKEN_FORMAT: str = "SharedAccessSignature sr={resource}&sig={signature}&se={expiry}"
AUTH_RULE_TOKEN_FORMAT: str = TOKEN_FORMAT + "&skn={keyname}"


class SasToken:
    """A Shared Access Signature Token used to authenticate requests.

    A SasToken is immutable. It is not renewable: once it expires, a new one must be generated.

    Data Attributes:
    value (str): The token string, as sent in the authorization header
    expiry_time (int): Time that token will expire (in UTC, since epoch)
    resource_uri (str): URI of the resource the token provides access to
    """

    __slots__ = ("_token_str", "_token_info")

    def __init__(self, sastoken_str: str) -> None:
        """Create a SasToken object from a SAS Token string
        :param str sastoken_str: The SAS Token string

        :raises: CryptoError if SAS Token string is invalid
        """
        self._token_str: str = sastoken_str
        self._token_info: Dict[str, str] = _get_sastoken_info_from_string(sastoken_str)

    @classmethod
    def from_string(cls, sastoken_str: str) -> "SasToken":
        return cls(sastoken_str)

    def __str__(self) -> str:
        return self._token_str

    def __repr__(self) -> str:
        return "SasToken(resource_uri={!r}, expiry_time={})".format(
            self.resource_uri, self.expiry_time
        )

    def is_expired(self) -> bool:
        return time.time() >= self.expiry_time

    @property
    def value(self) -> str:
        return self._token_str

    @property
    def expiry_time(self) -> int:
        return int(self._token_info["se"])

    @property
    def resource_uri(self) -> str:
        uri = self._token_info["sr"]
        return urllib.parse.unquote(uri)

    @property
    def signature(self) -> str:
        signature = self._token_info["sig"]
        return urllib.parse.unquote(signature)

    @property
    def policy_name(self) -> Optional[str]:
        return self._token_info.get("skn")


def generate_sastoken(
    resource_uri: str,
    signing_key: Union[str, bytes, SigningMechanism],
    policy_name: str = "",
    expiry_seconds: int = constant.DEFAULT_SASTOKEN_TTL,
    now: Optional[float] = None,
) -> SasToken:
    """Generate a new SasToken

    :param str resource_uri: The URI of the resource the token provides access to
    :param signing_key: A base64 encoded symmetric key, or a SigningMechanism to sign with
    :param str policy_name: Name of the shared access policy. Only included in the token if
        not empty
    :param int expiry_seconds: Time to live for the token, in seconds (default 3600)
    :param float now: The current time, in seconds since epoch. Defaults to time.time()

    :raises: CryptoError if the token cannot be generated
    """
    if isinstance(signing_key, SigningMechanism):
        signing_mechanism = signing_key
    else:
        try:
            signing_mechanism = SymmetricKeySigningMechanism(signing_key)
        except ValueError as e:
            raise CryptoError("Unable to generate SasToken - invalid signing key") from e

    if now is None:
        now = time.time()
    expiry_time = int(now) + int(expiry_seconds)
    url_encoded_uri = urllib.parse.quote(resource_uri, safe="")
    message = url_encoded_uri + "\n" + str(expiry_time)
    try:
        signature = signing_mechanism.sign(message)
    except Exception as e:
        # Because of variant signing mechanisms, we don't know what error might be raised.
        # So we catch all of them.
        raise CryptoError("Unable to generate SasToken") from e
    url_encoded_signature = urllib.parse.quote(signature, safe="")

    if policy_name:
        token_str = AUTH_RULE_TOKEN_FORMAT.format(
            resource=url_encoded_uri,
            signature=url_encoded_signature,
            expiry=str(expiry_time),
            keyname=policy_name,
        )
    else:
        token_str = TOKEN_FORMAT.format(
            resource=url_encoded_uri,
            signature=url_encoded_signature,
            expiry=str(expiry_time),
        )
    logger.debug("Generated SasToken for {} expiring at {}".format(resource_uri, expiry_time))
    return SasToken(token_str)


def _get_sastoken_info_from_string(sastoken_string: str) -> Dict[str, str]:
    """Given a SAS Token string, return a dictionary of it's keys and values"""
    if not isinstance(sastoken_string, str):
        raise CryptoError("Invalid SAS Token string: Not a string")
    pieces = sastoken_string.split("SharedAccessSignature ")
    if len(pieces) != 2 or pieces[0]:
        raise CryptoError("Invalid SAS Token string: Not a SAS Token")

    # Get sastoken info as dictionary
    try:
        sastoken_info = dict(map(str.strip, sub.split("=", 1)) for sub in pieces[1].split("&"))  # type: ignore
    except ValueError as e:
        raise CryptoError("Invalid SAS Token string: Incorrectly formatted") from e

    # Validate that all required fields are present
    if not all(key in sastoken_info for key in REQUIRED_SASTOKEN_FIELDS):
        raise CryptoError("Invalid SAS Token string: Not all required fields present")

    # Validate that no unexpected fields are present
    if not all(key in VALID_SASTOKEN_FIELDS for key in sastoken_info):
        raise CryptoError("Invalid SAS Token string: Unexpected fields present")

    try:
        int(sastoken_info["se"])
    except ValueError as e:
        raise CryptoError("Invalid SAS Token string: Expiry is not an integer") from e

    return sastoken_info
