"""Referral codes and referral rewards."""

import logging
import random
import string
import threading
import uuid

from where_app.config import Settings, get_settings
from where_app.models.referral import Referral
from where_app.services.points_service import PointsService

logger = logging.getLogger(__name__)

CODE_PREFIX = "WHERE-"
CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_LENGTH = 8


def generate_random_code() -> str:
    return "".join(random.choices(CODE_ALPHABET, k=CODE_LENGTH))


class ReferralRegistry:
    """Issued codes and claimed referrals, shared across service instances."""

    def __init__(self):
        self.codes: dict[str, str] = {}  # user_id -> code
        self.referrals: list[Referral] = []
        self.lock = threading.Lock()


class ReferralService:
    def __init__(
        self,
        points: PointsService,
        registry: ReferralRegistry | None = None,
        settings: Settings | None = None,
    ):
        self.points = points
        self.registry = registry or ReferralRegistry()
        self.settings = settings or get_settings()

    def generate_referral_code(self, user_id: str) -> str:
        """Return the user's code, creating one on first use."""
        with self.registry.lock:
            existing = self.registry.codes.get(user_id)
            if existing:
                return existing
            taken = set(self.registry.codes.values())
            code = f"{CODE_PREFIX}{generate_random_code()}"
            while code in taken:
                code = f"{CODE_PREFIX}{generate_random_code()}"
            self.registry.codes[user_id] = code
        logger.info("Generated referral code for %s", user_id)
        return code

    def get_referral_code(self, user_id: str) -> str | None:
        return self.registry.codes.get(user_id)

    def _referrer_for(self, code: str) -> str | None:
        return next((uid for uid, c in self.registry.codes.items() if c == code), None)

    def claim_referral(self, code: str, new_user_id: str) -> bool:
        """Credit the code's owner for bringing in ``new_user_id``.

        Returns False for unknown codes, self-referrals and codes that
        were already claimed.
        """
        with self.registry.lock:
            referrer_id = self._referrer_for(code)
            if not referrer_id or referrer_id == new_user_id:
                return False
            # A code pays out once
            if any(r.code == code for r in self.registry.referrals):
                return False

            referral = Referral(
                id=f"ref_{uuid.uuid4().hex[:12]}",
                referrer_id=referrer_id,
                referred_id=new_user_id,
                code=code,
            )
            self.registry.referrals.append(referral)

        self.points.ledger.append_activity(
            referrer_id,
            self.settings.system_location_id,
            "referral",
            self.settings.referral_points,
            metadata={"referral_code": code},
        )
        self.points.refresh_cached_total(referrer_id)
        logger.info("Referral %s claimed by %s", code, new_user_id)
        return True

    def get_user_referrals(self, user_id: str) -> list[Referral]:
        return [r for r in self.registry.referrals if r.referrer_id == user_id]

    def get_referral_count(self, user_id: str) -> int:
        return sum(1 for r in self.registry.referrals if r.referrer_id == user_id and r.claimed)
