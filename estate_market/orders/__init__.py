"""Order pricing, lifecycle and contracts."""

from estate_market.orders.contracts import ContractArchive, render_contract
from estate_market.orders.ledger import OrderLedger
from estate_market.orders.pricing import Pricing, compute_pricing
from estate_market.orders.signing import PendingSignature, SigningState

__all__ = [
    "ContractArchive",
    "OrderLedger",
    "PendingSignature",
    "Pricing",
    "SigningState",
    "compute_pricing",
    "render_contract",
]
