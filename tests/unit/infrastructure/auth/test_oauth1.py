from __future__ import annotations

from techstacks.infrastructure.auth.oauth1 import (
    authorization_header,
    normalize_url,
    percent_encode,
    sign,
)

# Worked example from Twitter's "Creating a signature" documentation.
CONSUMER_KEY = "xvz1evFS4wEEPTGEFPHBog"
CONSUMER_SECRET = "kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw"
TOKEN = "370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb"
TOKEN_SECRET = "LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE"
NONCE = "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg"
TIMESTAMP = "1318622958"


def test_percent_encode_reserved_characters() -> None:
    assert percent_encode("Ladies + Gentlemen") == "Ladies%20%2B%20Gentlemen"
    assert percent_encode("a-b._~c") == "a-b._~c"
    assert percent_encode("!") == "%21"


def test_normalize_url_drops_default_port_and_query() -> None:
    base_url, params = normalize_url("HTTPS://API.Twitter.com:443/1.1/x.json?a=1&b=")

    assert base_url == "https://api.twitter.com/1.1/x.json"
    assert params == [("a", "1"), ("b", "")]


def test_authorization_header_matches_reference_signature() -> None:
    header = authorization_header(
        "POST",
        "https://api.twitter.com/1.1/statuses/update.json?include_entities=true",
        CONSUMER_KEY,
        CONSUMER_SECRET,
        token=TOKEN,
        token_secret=TOKEN_SECRET,
        body_params={"status": "Hello Ladies + Gentlemen, a signed OAuth request!"},
        nonce=NONCE,
        timestamp=TIMESTAMP,
    )

    assert header.startswith("OAuth ")
    assert 'oauth_signature="hCtSmYh%2BiHYCEqBWrE7C7hYmtUk%3D"' in header
    assert f'oauth_consumer_key="{CONSUMER_KEY}"' in header
    assert f'oauth_token="{TOKEN}"' in header
    assert "status" not in header


def test_sign_without_token_secret() -> None:
    first = sign("POST&url&params", "secret", None)
    second = sign("POST&url&params", "secret", "")

    assert first == second
