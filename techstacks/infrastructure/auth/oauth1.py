"""
OAuth 1.0a request signing (RFC 5849, HMAC-SHA1).

Used by the Twitter sign-in flow and by the Twitter status client.
"""

import base64
import hashlib
import hmac
import secrets
import time
from typing import Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, quote, urlsplit, urlunsplit

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"


def percent_encode(value: str) -> str:
    return quote(str(value), safe="~")


def normalize_url(url: str) -> Tuple[str, List[Tuple[str, str]]]:
    """Split ``url`` into the signature base URL and its query parameters."""
    parts = urlsplit(url)
    netloc = parts.netloc.lower()
    if (parts.scheme == "https" and netloc.endswith(":443")) or (
        parts.scheme == "http" and netloc.endswith(":80")
    ):
        netloc = netloc.rsplit(":", 1)[0]
    base_url = urlunsplit((parts.scheme.lower(), netloc, parts.path or "/", "", ""))
    return base_url, parse_qsl(parts.query, keep_blank_values=True)


def signature_base_string(
    method: str, url: str, params: Iterable[Tuple[str, str]]
) -> str:
    base_url, query_params = normalize_url(url)
    encoded = sorted(
        (percent_encode(key), percent_encode(value))
        for key, value in list(params) + query_params
    )
    param_string = "&".join(f"{key}={value}" for key, value in encoded)
    return "&".join(
        [method.upper(), percent_encode(base_url), percent_encode(param_string)]
    )


def sign(base_string: str, consumer_secret: str, token_secret: Optional[str]) -> str:
    key = f"{percent_encode(consumer_secret)}&{percent_encode(token_secret or '')}"
    digest = hmac.new(
        key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def authorization_header(
    method: str,
    url: str,
    consumer_key: str,
    consumer_secret: str,
    token: Optional[str] = None,
    token_secret: Optional[str] = None,
    body_params: Optional[Mapping[str, str]] = None,
    extra_oauth_params: Optional[Mapping[str, str]] = None,
    nonce: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> str:
    """
    Build the ``Authorization: OAuth ...`` header for a request.

    Args:
        method: HTTP method
        url: Request URL, query parameters are part of the signature
        consumer_key: Application key
        consumer_secret: Application secret
        token: Request or access token, when the flow has one
        token_secret: Secret matching ``token``
        body_params: Form encoded body parameters
        extra_oauth_params: Additional ``oauth_*`` parameters
            (``oauth_callback``, ``oauth_verifier``)
        nonce: Fixed nonce, generated when omitted
        timestamp: Fixed timestamp, the current time when omitted

    Returns:
        The header value
    """
    oauth_params: Dict[str, str] = {
        "oauth_consumer_key": consumer_key,
        "oauth_nonce": nonce or secrets.token_hex(16),
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_timestamp": timestamp or str(int(time.time())),
        "oauth_version": OAUTH_VERSION,
    }
    if token:
        oauth_params["oauth_token"] = token
    if extra_oauth_params:
        oauth_params.update(extra_oauth_params)

    params = list(oauth_params.items()) + list((body_params or {}).items())
    base_string = signature_base_string(method, url, params)
    oauth_params["oauth_signature"] = sign(base_string, consumer_secret, token_secret)

    header_params = ", ".join(
        f'{percent_encode(key)}="{percent_encode(value)}"'
        for key, value in sorted(oauth_params.items())
    )
    return f"OAuth {header_params}"
