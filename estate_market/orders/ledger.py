"""Order ledger: order creation and the order lifecycle.

Lifecycle::

    pending ──verify_identity──▶ pending (id verified) ──sign_contract──▶ confirmed
       │
       └──cancel_order──▶ cancelled

``confirmed`` and ``cancelled`` are terminal. Blank identity input is
ignored, while signing an unverified order is rejected.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from estate_market.catalog.properties import PropertyCatalog
from estate_market.config import OrderConfig
from estate_market.exceptions import (
    InvalidTransitionError,
    ReferenceNotFoundError,
    ValidationError,
)
from estate_market.models import CustomerDetails, Order, OrderStatus
from estate_market.orders.contracts import ContractArchive, render_contract
from estate_market.orders.pricing import compute_pricing
from estate_market.orders.signing import PendingSignature
from estate_market.storage.ports import PersistencePort
from estate_market.store import DataclassCodec, PersistentStore
from estate_market.store.ids import Clock

logger = logging.getLogger(__name__)


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _customer_details(details: CustomerDetails | dict[str, Any]) -> CustomerDetails:
    if isinstance(details, dict):
        try:
            details = CustomerDetails(**details)
        except TypeError as e:
            raise ValidationError(f"Invalid customer details: {e}") from e
    missing = [name for name in ("name", "email", "phone") if _blank(getattr(details, name))]
    if missing:
        raise ValidationError(f"Customer details missing: {', '.join(missing)}")
    return details


class OrderLedger:
    """Persisted orders and the transitions between their states.

    Parameters
    ----------
    port : PersistencePort
        Storage for the ``orders`` collection and signed contracts.
    catalog : PropertyCatalog
        Source of listing price, type and title.
    config : OrderConfig | None
        Commission and signing settings.
    key : str
        Storage key for orders.
    contracts_prefix : str
        Storage key prefix for contract documents.
    clock : Clock | None
        Timestamp source.
    timer, sleep : Callable
        Monotonic clock and sleep used by delayed signing.
    pretty : bool
        Indent the persisted JSON.
    """

    def __init__(
        self,
        port: PersistencePort,
        catalog: PropertyCatalog,
        config: OrderConfig | None = None,
        key: str = "orders",
        contracts_prefix: str = "contracts",
        clock: Clock | None = None,
        timer: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        pretty: bool = False,
    ) -> None:
        self.catalog = catalog
        self.config = config or OrderConfig()
        self.store: PersistentStore[Order] = PersistentStore(
            port, key, DataclassCodec(Order), clock=clock, pretty=pretty
        )
        self.archive = ContractArchive(port, contracts_prefix)
        self._timer = timer
        self._sleep = sleep

    def load(self) -> list[Order]:
        """Load persisted orders. A new ledger starts empty."""
        return self.store.load_or_seed()

    def create_order(
        self,
        user_id: str,
        property_id: str,
        payment_method: str,
        customer_details: CustomerDetails | dict[str, Any],
    ) -> str:
        """Place a pending order for a listing and return its id.

        Raises
        ------
        ValidationError
            If the user, payment method or customer details are missing.
        ReferenceNotFoundError
            If the listing does not exist.
        """
        if _blank(user_id):
            raise ValidationError("user_id is required")
        if _blank(payment_method):
            raise ValidationError("payment_method is required")
        details = _customer_details(customer_details)

        prop = self.catalog.get(property_id)
        if prop is None:
            raise ReferenceNotFoundError(f"Property {property_id} not found")

        pricing = compute_pricing(
            prop.price,
            prop.listing_type,
            rate=self.config.commission_rate,
            flat=self.config.commission_flat,
        )
        order = self.store.create(
            {
                "user_id": user_id,
                "property_id": prop.id,
                "order_type": prop.listing_type,
                "amount": pricing.amount,
                "commission": pricing.commission,
                "status": OrderStatus.PENDING,
                "payment_method": payment_method,
                "customer_details": details,
            }
        )
        logger.info(
            "Created %s order %s for property %s (amount=%d, commission=%d)",
            order.order_type.value,
            order.id,
            prop.id,
            order.amount,
            order.commission,
            extra={"order_id": order.id, "property_id": prop.id, "user_id": user_id},
        )
        return order.id

    def get_order(self, order_id: str) -> Order | None:
        return self.store.get(order_id)

    def verify_identity(self, order_id: str, govt_id: str, signer_name: str) -> bool:
        """Mark the order's buyer as identity-verified.

        Blank ``govt_id`` or ``signer_name`` leaves the order untouched.
        Returns whether the order is verified afterwards.

        Raises
        ------
        InvalidTransitionError
            If the order is no longer pending.
        """
        order = self.get_order(order_id)
        if order is None:
            return False
        if _blank(govt_id) or _blank(signer_name):
            logger.debug("Identity verification for order %s ignored: blank input", order_id)
            return order.id_verified

        self._require_pending(order, "verify identity for")
        if not order.id_verified:
            self.store.update(order.id, {"id_verified": True})
            logger.info("Verified identity for order %s", order.id, extra={"order_id": order.id})
        return True

    def sign_contract(self, order_id: str, signer_name: str) -> Order | None:
        """Sign the contract for a verified order and confirm it.

        Returns ``None`` for an unknown order.

        Raises
        ------
        InvalidTransitionError
            If identity is not verified or the order is not pending.
        ValidationError
            If ``signer_name`` is blank.
        """
        order = self.get_order(order_id)
        if order is None:
            return None
        self._require_signable(order)
        if _blank(signer_name):
            raise ValidationError("signer_name is required")
        signer_name = signer_name.strip()

        prop = self.catalog.get(order.property_id)
        title = prop.title if prop is not None else f"Property {order.property_id}"
        signed_at = self.store.clock()
        text = render_contract(order, title, signer_name, signed_at, self.config.currency_symbol)
        contract_url = self.archive.save(order.id, text)

        signed = self.store.update(
            order.id,
            {
                "contract_signed": True,
                "contract_url": contract_url,
                "signer_name": signer_name,
                "status": OrderStatus.CONFIRMED,
            },
        )
        logger.info("Order %s signed by %s and confirmed", order.id, signer_name, extra={"order_id": order.id})
        return signed

    def begin_signing(
        self,
        order_id: str,
        signer_name: str,
        delay: float | None = None,
    ) -> PendingSignature:
        """Schedule :meth:`sign_contract` to complete after the signing delay.

        The order is checked now and again when the completion runs; if it
        left ``pending`` in between (for example it was cancelled) the
        completion applies nothing.

        Raises
        ------
        ReferenceNotFoundError
            If the order does not exist.
        InvalidTransitionError
            If the order cannot be signed right now.
        """
        order = self.get_order(order_id)
        if order is None:
            raise ReferenceNotFoundError(f"Order {order_id} not found")
        self._require_signable(order)
        if _blank(signer_name):
            raise ValidationError("signer_name is required")

        def complete() -> Order | None:
            current = self.get_order(order_id)
            if current is None or current.status != OrderStatus.PENDING or not current.id_verified:
                logger.warning("Skipping stale signature for order %s", order_id)
                return None
            return self.sign_contract(order_id, signer_name)

        if delay is None:
            delay = self.config.signing_delay_seconds
        return PendingSignature(order_id, complete, delay, timer=self._timer, sleep=self._sleep)

    def cancel_order(self, order_id: str) -> Order | None:
        """Cancel a pending order. Returns ``None`` for an unknown order.

        Raises
        ------
        InvalidTransitionError
            If the order is not pending.
        """
        order = self.get_order(order_id)
        if order is None:
            return None
        self._require_pending(order, "cancel")
        cancelled = self.store.update(order.id, {"status": OrderStatus.CANCELLED})
        logger.info("Cancelled order %s", order.id, extra={"order_id": order.id})
        return cancelled

    def get_user_orders(self, user_id: str) -> list[Order]:
        """Orders placed by ``user_id``, most recent first."""
        orders = [o for o in self.store if o.user_id == user_id]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def get_all_orders(self) -> list[Order]:
        return self.store.all()

    def _require_pending(self, order: Order, action: str) -> None:
        if order.status != OrderStatus.PENDING:
            logger.warning("Rejected %s on order %s in status %s", action, order.id, order.status.value)
            raise InvalidTransitionError(order.id, order.status.value, action)

    def _require_signable(self, order: Order) -> None:
        self._require_pending(order, "sign")
        if not order.id_verified:
            logger.warning("Rejected signing of order %s: identity not verified", order.id)
            raise InvalidTransitionError(order.id, order.status.value, "sign", "identity not verified")

