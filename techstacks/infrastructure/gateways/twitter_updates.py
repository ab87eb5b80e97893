"""
Twitter updates client - Infrastructure Layer

Posts status updates from the site's own Twitter account (new stacks and
technologies are announced there).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from techstacks.domain.entities.errors import ConfigurationError
from techstacks.infrastructure.auth.oauth1 import authorization_header
from techstacks.shared import get_logger

logger = get_logger(__name__)


class TwitterUpdates:
    """HTTP client for the Twitter status API."""

    status_update_url = "https://api.twitter.com/1.1/statuses/update.json"

    def __init__(
        self,
        consumer_key: Optional[str],
        consumer_secret: Optional[str],
        access_token: Optional[str],
        access_secret: Optional[str],
        timeout: float = 30.0,
    ):
        """
        Initialize the Twitter client.

        Args:
            consumer_key: ``WebStacks.ConsumerKey``
            consumer_secret: ``WebStacks.ConsumerSecret``
            access_token: ``WebStacks.AccessToken``
            access_secret: ``WebStacks.AccessSecret``
        """
        self.consumer_key = consumer_key or ""
        self.consumer_secret = consumer_secret or ""
        self.access_token = access_token or ""
        self.access_secret = access_secret or ""
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return all(
            (
                self.consumer_key,
                self.consumer_secret,
                self.access_token,
                self.access_secret,
            )
        )

    async def post_status(self, status: str) -> Dict[str, Any]:
        """
        Publish a status update.

        Returns:
            The tweet returned by the API

        Raises:
            ConfigurationError: If any of the four credentials is missing
            httpx.HTTPError: If the request fails
        """
        if not self.is_configured:
            raise ConfigurationError("Twitter update credentials are not configured")

        body = {"status": status}
        header = authorization_header(
            "POST",
            self.status_update_url,
            self.consumer_key,
            self.consumer_secret,
            token=self.access_token,
            token_secret=self.access_secret,
            body_params=body,
        )

        logger.info("twitter.status.posting", length=len(status))
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                self.status_update_url,
                data=body,
                headers={"Authorization": header},
            )
            response.raise_for_status()
            tweet = response.json()

        logger.info("twitter.status.posted", tweet_id=tweet.get("id_str"))
        return tweet
