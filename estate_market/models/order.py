"""Order model."""

from dataclasses import dataclass, field
from datetime import datetime

from estate_market.models.base import CustomerDetails
from estate_market.models.enums import ListingType, OrderStatus


@dataclass
class Order:
    """Purchase or rental order for a single property.

    ``contract_signed`` implies ``id_verified``; a confirmed buy order is
    always signed.
    """

    id: str
    user_id: str
    property_id: str  # Not kept in sync with the catalog after creation
    order_type: ListingType = field(metadata={"json": "type"})
    amount: int
    commission: int
    status: OrderStatus
    payment_method: str
    customer_details: CustomerDetails
    created_at: datetime
    id_verified: bool = False
    contract_signed: bool = False
    contract_url: str | None = None
    signer_name: str | None = None
    completed_at: datetime | None = None
