"""Order amount and commission computation."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from estate_market.models import ListingType

COMMISSION_RATE = Decimal("0.01599")
COMMISSION_FLAT = 1599


@dataclass(frozen=True)
class Pricing:
    commission: int
    amount: int


def compute_pricing(
    price: int,
    order_type: ListingType | str,
    rate: Decimal = COMMISSION_RATE,
    flat: int = COMMISSION_FLAT,
) -> Pricing:
    """Price an order for a listing.

    Purchases carry ``round(price * rate) + flat`` commission (half-up
    rounding); rentals carry none.

    Examples
    --------
    >>> compute_pricing(850000, "buy")
    Pricing(commission=15191, amount=865191)
    >>> compute_pricing(25000, "rent")
    Pricing(commission=0, amount=25000)
    """
    if ListingType(order_type) == ListingType.RENT:
        return Pricing(commission=0, amount=price)
    variable = (Decimal(str(price)) * rate).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    commission = int(variable) + flat
    return Pricing(commission=commission, amount=price + commission)
