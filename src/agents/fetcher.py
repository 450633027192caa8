"""
Profile Fetcher.

Reads the monitored account's public profile page with its session cookies.
"""

import logging

from src.models.account import Account
from src.utils.http_client import FunpayHttpClient

logger = logging.getLogger(__name__)


class ProfileFetcher:
    """
    Stateless reader of `/users/<id>/`.

    Transport failures propagate as FetchError from the client.
    """

    PROFILE_PATH = "/users/{user_id}/"

    def __init__(self, client: FunpayHttpClient, account: Account):
        self.client = client
        self.account = account

    @property
    def profile_path(self) -> str:
        return self.PROFILE_PATH.format(user_id=self.account.user_id)

    async def fetch_profile(self) -> str:
        """
        Fetch raw profile markup.

        Returns:
            HTML of the profile page
        """
        html = await self.client.get(self.profile_path, cookies=self.account.cookies())
        logger.debug(f"Fetched profile page for user {self.account.user_id}")
        return html
