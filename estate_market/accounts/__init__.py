"""User-facing account state: subscriptions and wishlist."""

from estate_market.accounts.subscriptions import SubscriptionGate
from estate_market.accounts.wishlist import WishlistSet

__all__ = ["SubscriptionGate", "WishlistSet"]
