"""
Account data model.

Identity and session credentials of the monitored marketplace account.
"""

import os
from dataclasses import dataclass, field
from typing import Dict

import config.settings as settings


GOLDEN_KEY_COOKIE = "golden_key"
SESSION_COOKIE = "PHPSESSID"


@dataclass
class Account:
    """
    Monitored account.

    Tokens are only checked for presence; the marketplace decides
    whether they are still valid.
    """
    user_id: int
    golden_key: str = field(repr=False)
    phpsessid: str = field(repr=False)

    def __post_init__(self):
        if isinstance(self.user_id, bool) or not isinstance(self.user_id, int) or self.user_id <= 0:
            raise ValueError(f"Invalid user_id: {self.user_id!r}. Must be a positive int")
        if not self.golden_key:
            raise ValueError("golden_key is required")
        if not self.phpsessid:
            raise ValueError("phpsessid is required")

    def cookies(self) -> Dict[str, str]:
        """Cookie mapping sent with every authenticated request."""
        return {
            GOLDEN_KEY_COOKIE: self.golden_key,
            SESSION_COOKIE: self.phpsessid,
        }

    @classmethod
    def from_env(cls, environ=None) -> "Account":
        """
        Build an account from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ValueError: If a variable is missing or the user id is not numeric
        """
        env = os.environ if environ is None else environ
        raw_user_id = env.get(settings.USER_ID_ENV, "")
        try:
            user_id = int(raw_user_id)
        except ValueError:
            raise ValueError(
                f"{settings.USER_ID_ENV} must be numeric, got {raw_user_id!r}"
            ) from None

        return cls(
            user_id=user_id,
            golden_key=env.get(settings.GOLDEN_KEY_ENV, ""),
            phpsessid=env.get(settings.PHPSESSID_ENV, ""),
        )
