"""Cart pricing."""

from dataclasses import dataclass
from decimal import Decimal

from ..money import ZERO, round2, to_decimal
from .state import Cart

HUNDRED = Decimal(100)


@dataclass(frozen=True)
class PricingResult:
    subtotal: Decimal
    normalized_discount: Decimal
    taxable_base: Decimal
    tax_amount: Decimal
    total: Decimal


def normalize_discount(discount: Decimal, subtotal: Decimal) -> Decimal:
    """Clamp a discount into [0, subtotal]."""
    return min(max(discount, ZERO), subtotal)


def compute_totals(cart: Cart) -> PricingResult:
    """Derive subtotal, discount, taxable base, tax and total for a cart.

    Only the tax amount is rounded (half-up, two places); the other figures
    keep full precision. Amounts set directly on the cart or its lines are
    coerced the same way the setters coerce them. Does not mutate the cart.
    """
    subtotal = sum((item.line_total() for item in cart.items), ZERO)
    discount = normalize_discount(to_decimal(cart.discount_amount), subtotal)
    taxable_base = max(subtotal - discount, ZERO)
    tax_rate = max(to_decimal(cart.tax_rate_percent), ZERO)
    tax_amount = round2(taxable_base * tax_rate / HUNDRED)

    return PricingResult(
        subtotal=subtotal,
        normalized_discount=discount,
        taxable_base=taxable_base,
        tax_amount=tax_amount,
        total=taxable_base + tax_amount,
    )
