"""Per-user subscription record."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class SubscriptionRecord:
    """Capability flags for one user. Flags only ever go from False to True."""

    user_id: str
    buy_active: bool = False
    sell_active: bool = False
    buy_since: datetime | None = None
    sell_since: datetime | None = None
