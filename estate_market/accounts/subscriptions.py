"""Per-user subscription capabilities."""

from __future__ import annotations

import dataclasses
import logging

from estate_market.exceptions import ValidationError
from estate_market.models import SubscriptionKind, SubscriptionRecord
from estate_market.storage.ports import PersistencePort
from estate_market.store import DataclassCodec, Layout, PersistentStore
from estate_market.store.ids import Clock

logger = logging.getLogger(__name__)


class SubscriptionGate:
    """Buy/sell capability flags, persisted as one record per user id.

    Every read and every activation starts from the latest persisted state,
    so a flag activated through another gate on the same storage is never
    dropped. Flags are never switched off here.
    """

    def __init__(
        self,
        port: PersistencePort,
        key: str = "subscriptions",
        clock: Clock | None = None,
        pretty: bool = False,
    ) -> None:
        self.store: PersistentStore[SubscriptionRecord] = PersistentStore(
            port,
            key,
            DataclassCodec(SubscriptionRecord, key_field="user_id"),
            layout=Layout.MAPPING,
            clock=clock,
            pretty=pretty,
        )

    def load(self) -> list[SubscriptionRecord]:
        return self.store.load_or_seed()

    def get_user_subscriptions(self, user_id: str) -> SubscriptionRecord:
        """The user's record, or an all-inactive default for unknown users."""
        self.store.reload()
        return self.store.get(user_id) or SubscriptionRecord(user_id=user_id)

    def has_buy_subscription(self, user_id: str) -> bool:
        return self.get_user_subscriptions(user_id).buy_active

    def has_sell_subscription(self, user_id: str) -> bool:
        return self.get_user_subscriptions(user_id).sell_active

    def activate_subscription(self, user_id: str, kind: SubscriptionKind | str) -> SubscriptionRecord:
        """Switch on ``kind`` for the user and stamp the activation time.

        Reactivating an active kind only refreshes its timestamp.
        """
        try:
            kind = SubscriptionKind(kind)
        except ValueError as e:
            raise ValidationError(f"Unknown subscription kind: {kind!r}") from e
        if not user_id:
            raise ValidationError("user_id is required")

        current = self.get_user_subscriptions(user_id)
        now = self.store.clock()
        if kind == SubscriptionKind.BUY:
            updated = dataclasses.replace(current, buy_active=True, buy_since=now)
        else:
            updated = dataclasses.replace(current, sell_active=True, sell_since=now)

        self.store.put(updated)
        logger.info("Activated %s subscription for user %s", kind.value, user_id)
        return updated
