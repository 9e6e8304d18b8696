"""Custom exception hierarchy for estate-market."""


class MarketError(Exception):
    """Base exception for all estate-market errors."""


class ValidationError(MarketError):
    """Raised when a creation or patch payload is missing or has invalid fields."""


class ReferenceNotFoundError(MarketError):
    """Raised when a new entity references an entity that does not exist."""


class InvalidTransitionError(MarketError):
    """Raised when an order lifecycle move is not permitted from its current state."""

    def __init__(self, order_id: str, status: str, action: str, reason: str = "") -> None:
        self.order_id = order_id
        self.status = status
        self.action = action
        message = f"Cannot {action} order {order_id} in status {status}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SubscriptionRequiredError(MarketError):
    """Raised when a gated action is attempted without the matching subscription."""


class StorageError(MarketError):
    """Raised when a persistence port cannot read or write."""


class ParseError(StorageError):
    """Raised when persisted data cannot be decoded."""


class ConfigurationError(MarketError):
    """Raised when configuration is invalid or missing."""
