"""OAuth1 request signing for the FatSecret API."""

import base64
import hashlib
import hmac
import logging
import secrets
import string
import time
from collections.abc import Callable, Mapping
from typing import Any

from .config import Settings
from .models import SignedRequest
from .params import ParameterSet, percent_encode

logger = logging.getLogger(__name__)

HTTP_METHOD = "GET"

NONCE_ALPHABET = string.ascii_letters + string.digits
NONCE_LENGTH = 7


def generate_timestamp() -> str:
    """Return the current Unix time in whole seconds."""
    return str(int(time.time()))


def generate_nonce() -> str:
    """Generate a random nonce for the request.

    Returns:
        A 7-character string drawn from ``[a-zA-Z0-9]``.
    """
    return "".join(secrets.choice(NONCE_ALPHABET) for _ in range(NONCE_LENGTH))


def signature_base_string(
    method: str,
    url: str,
    params: Mapping[str, Any],
) -> str:
    """Create the OAuth1 signature base string.

    Args:
        method: HTTP method.
        url: The request URL, without a query string.
        params: All parameters to include, excluding ``oauth_signature``.

    Returns:
        ``METHOD&enc(url)&enc(normalized parameters)``.
    """
    if not isinstance(params, ParameterSet):
        params = ParameterSet(params)

    return "&".join(
        [
            method.upper(),
            percent_encode(url),
            percent_encode(params.canonical_query()),
        ]
    )


def signing_key(consumer_secret: str, token_secret: str = "") -> str:
    """Create the HMAC key (``consumer_secret&token_secret``).

    Two-legged requests have no token, so the token secret is empty.
    """
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"


def sign(base_string: str, key: str) -> str:
    """Compute the HMAC-SHA1 signature of a base string.

    Args:
        base_string: The signature base string.
        key: The signing key, see :func:`signing_key`.

    Returns:
        Base64-encoded HMAC-SHA1 signature.
    """
    hashed = hmac.new(
        key.encode("utf-8"),
        base_string.encode("utf-8"),
        hashlib.sha1,
    )
    return base64.b64encode(hashed.digest()).decode("utf-8")


def build_request(
    params: ParameterSet,
    signature: str,
    base_url: str,
    method: str = HTTP_METHOD,
) -> SignedRequest:
    """Assemble the signed request.

    Args:
        params: The canonicalized parameters, without ``oauth_signature``.
        signature: The signature computed over ``params``.
        base_url: The API endpoint.
        method: HTTP method.

    Returns:
        A request whose query holds every parameter in canonical order
        followed by ``oauth_signature``.
    """
    query = "&".join(
        [
            params.canonical_query(),
            f"oauth_signature={percent_encode(signature)}",
        ]
    )
    # Transports read a literal "+" in a query as a space
    query = query.replace("+", "%2B")

    return SignedRequest(method=method.upper(), base_url=base_url, query=query)


class OAuth1Signer:
    """Signs two-legged FatSecret requests using OAuth1 HMAC-SHA1."""

    def __init__(
        self,
        settings: Settings,
        nonce_factory: Callable[[], str] = generate_nonce,
        timestamp_factory: Callable[[], str] = generate_timestamp,
    ) -> None:
        """Initialize the OAuth1 signer.

        Args:
            settings: Application settings containing OAuth1 credentials.
            nonce_factory: Produces the ``oauth_nonce`` for each request.
            timestamp_factory: Produces the ``oauth_timestamp`` for each request.
        """
        self._settings = settings
        self._signing_key = signing_key(settings.consumer_secret)
        self._nonce_factory = nonce_factory
        self._timestamp_factory = timestamp_factory

    def canonicalize(
        self,
        params: Mapping[str, Any],
        nonce: str,
        timestamp: str,
    ) -> tuple[ParameterSet, str]:
        """Merge protocol and call parameters and build the base string.

        Args:
            params: Call-specific parameters (API method name included).
            nonce: The request nonce.
            timestamp: The request timestamp.

        Returns:
            The merged parameter set and its signature base string.

        Raises:
            ParameterConflictError: If a call parameter shadows a protocol one.
        """
        merged = ParameterSet(self._settings.protocol_params())
        merged.merge(params)
        merged.merge({"oauth_nonce": nonce, "oauth_timestamp": timestamp})

        base_string = signature_base_string(
            HTTP_METHOD, self._settings.api_base_url, merged
        )
        return merged, base_string

    def sign_request(self, params: Mapping[str, Any]) -> SignedRequest:
        """Sign a request with a fresh nonce and timestamp.

        Args:
            params: Call-specific parameters.

        Returns:
            The signed request, ready for the transport.
        """
        merged, base_string = self.canonicalize(
            params, self._nonce_factory(), self._timestamp_factory()
        )
        signature = sign(base_string, self._signing_key)

        logger.debug(
            "Signed %s request for %s", HTTP_METHOD, merged.get("method", "<none>")
        )
        return build_request(merged, signature, self._settings.api_base_url)
