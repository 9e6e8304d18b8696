"""Tests for custom exception hierarchy."""

from estate_market.exceptions import (
    ConfigurationError,
    InvalidTransitionError,
    MarketError,
    ParseError,
    ReferenceNotFoundError,
    StorageError,
    SubscriptionRequiredError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_market_error_is_exception(self) -> None:
        assert isinstance(MarketError("test"), Exception)

    def test_validation_error_is_market_error(self) -> None:
        assert isinstance(ValidationError("test"), MarketError)

    def test_reference_not_found_is_market_error(self) -> None:
        assert isinstance(ReferenceNotFoundError("test"), MarketError)

    def test_parse_error_is_storage_error(self) -> None:
        err = ParseError("test")
        assert isinstance(err, StorageError)
        assert isinstance(err, MarketError)

    def test_subscription_required_is_market_error(self) -> None:
        assert isinstance(SubscriptionRequiredError("test"), MarketError)

    def test_configuration_error_is_market_error(self) -> None:
        assert isinstance(ConfigurationError("test"), MarketError)

    def test_validation_is_not_transition_error(self) -> None:
        assert not isinstance(ValidationError("test"), InvalidTransitionError)


class TestInvalidTransitionError:
    """Tests for InvalidTransitionError details."""

    def test_attributes(self) -> None:
        err = InvalidTransitionError("1700000000000", "pending", "sign", "identity not verified")

        assert err.order_id == "1700000000000"
        assert err.status == "pending"
        assert err.action == "sign"
        assert isinstance(err, MarketError)

    def test_message(self) -> None:
        err = InvalidTransitionError("42", "cancelled", "cancel")
        assert str(err) == "Cannot cancel order 42 in status cancelled"

    def test_message_with_reason(self) -> None:
        err = InvalidTransitionError("42", "pending", "sign", "identity not verified")
        assert str(err) == "Cannot sign order 42 in status pending: identity not verified"
