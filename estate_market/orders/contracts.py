"""Contract documents produced when an order is signed."""

from datetime import datetime

from estate_market.models import ListingType, Order
from estate_market.storage.ports import PersistencePort

TITLES = {
    ListingType.BUY: "Property Purchase Agreement",
    ListingType.RENT: "Property Rental Agreement",
}


def render_contract(
    order: Order,
    property_title: str,
    signer_name: str,
    signed_at: datetime,
    currency: str = "₹",
) -> str:
    """Plain-text agreement naming the signer, property, amount and order."""
    party = "Buyer" if order.order_type == ListingType.BUY else "Tenant"
    lines = [
        TITLES[order.order_type],
        "",
        f"{party}: {signer_name}",
        f"Property: {property_title}",
        f"Amount: {currency}{order.amount:,}",
        f"Order ID: {order.id}",
        f"Date: {signed_at.isoformat(timespec='seconds')}",
        "",
        f"Signature: {signer_name}",
    ]
    return "\n".join(lines) + "\n"


class ContractArchive:
    """Stores rendered contracts next to the collections and hands out references."""

    def __init__(self, port: PersistencePort, prefix: str = "contracts") -> None:
        self.port = port
        self.prefix = prefix

    def _key(self, order_id: str) -> str:
        return f"{self.prefix}/{order_id}.txt"

    def save(self, order_id: str, text: str) -> str:
        """Store a contract and return its reference (``contractUrl``)."""
        key = self._key(order_id)
        self.port.write(key, text)
        return self.port.locate(key)

    def read(self, order_id: str) -> str | None:
        return self.port.read(self._key(order_id))
