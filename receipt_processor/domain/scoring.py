"""Receipt scoring engine - core business logic for awarding points"""

import math
import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import Sequence

from receipt_processor.domain.models import Item, Receipt, ScoreBreakdown

ALPHANUMERIC = re.compile(r"[A-Za-z0-9]")

# Plain ASCII numerals only: no underscores, Unicode digits or padding
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
AMOUNT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

ROUND_TOTAL_BONUS = 50
QUARTER_TOTAL_BONUS = 25
POINTS_PER_ITEM_PAIR = 5
ODD_DAY_BONUS = 6
AFTERNOON_BONUS = 10

QUARTERS_PER_DOLLAR = Decimal(4)
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16  # exclusive

# Amounts beyond double range are treated as unparseable, and amounts too
# small for a double read as zero
MAX_AMOUNT_EXPONENT = 308


def parse_amount(value: str) -> Decimal:
    """Parse a decimal money string, returning zero when it can't be read"""
    if not AMOUNT_PATTERN.fullmatch(value):
        return Decimal(0)
    try:
        amount = Decimal(value)
    except (InvalidOperation, ValueError):
        return Decimal(0)
    if amount.is_zero() or abs(amount.adjusted()) > MAX_AMOUNT_EXPONENT:
        return Decimal(0)
    return amount


def parse_int(value: str) -> int:
    """Parse an integer field, returning zero when it can't be read"""
    if not INTEGER_PATTERN.fullmatch(value):
        return 0
    try:
        return int(value)
    except ValueError:
        # longer than the interpreter's integer string limit
        return 0


def exact_product(amount: Decimal, factor: Decimal) -> Decimal:
    """Multiply with enough precision that no digits are rounded away"""
    with localcontext() as ctx:
        ctx.prec = len(amount.as_tuple().digits) + len(factor.as_tuple().digits) + 1
        return amount * factor


def retailer_points(retailer: str) -> int:
    """One point per ASCII letter or digit in the retailer name"""
    return len(ALPHANUMERIC.findall(retailer))


def round_total_points(total: Decimal) -> int:
    return ROUND_TOTAL_BONUS if total == total.to_integral_value() else 0


def quarter_total_points(total: Decimal) -> int:
    quarters = exact_product(total, QUARTERS_PER_DOLLAR)
    return QUARTER_TOTAL_BONUS if quarters == quarters.to_integral_value() else 0


def item_pair_points(items: Sequence[Item]) -> int:
    return (len(items) // 2) * POINTS_PER_ITEM_PAIR


def description_points(item: Item) -> int:
    """
    Award ceil(price * 0.2) when the trimmed description length is a multiple of 3.

    Length is measured in UTF-8 bytes. An empty (or all-whitespace)
    description has length 0 and qualifies.
    """
    if len(item.short_description.strip().encode("utf-8", "surrogatepass")) % 3 != 0:
        return 0
    price = parse_amount(item.price)
    return math.ceil(exact_product(price, DESCRIPTION_PRICE_MULTIPLIER))


def odd_day_points(purchase_date: str) -> int:
    """Bonus when the day of the purchase date is odd; malformed dates count as day 0"""
    parts = purchase_date.split("-")
    day = parse_int(parts[2]) if len(parts) > 2 else 0
    return ODD_DAY_BONUS if day % 2 == 1 else 0


def afternoon_points(purchase_time: str) -> int:
    """Bonus for purchases between 14:00 and 16:00"""
    hour = parse_int(purchase_time.split(":")[0])
    return AFTERNOON_BONUS if AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR else 0


def score_breakdown(receipt: Receipt) -> ScoreBreakdown:
    """
    Apply every scoring rule to a receipt and report each rule's contribution.

    Rules (additive):
    - 1 point per alphanumeric character in the retailer name
    - 50 points if the total is a round dollar amount
    - 25 points if the total is a multiple of 0.25
    - 5 points for every two items
    - ceil(price * 0.2) for each item whose trimmed description length is a multiple of 3
    - 6 points if the purchase day is odd
    - 10 points if the purchase time is after 14:00 and before 16:00

    Unparseable numbers (total, prices, day, hour) are read as zero, so this
    never raises for a well-typed Receipt.
    """
    total = parse_amount(receipt.total)

    return ScoreBreakdown(
        retailer_points=retailer_points(receipt.retailer),
        round_total_points=round_total_points(total),
        quarter_total_points=quarter_total_points(total),
        item_pair_points=item_pair_points(receipt.items),
        description_points=sum(description_points(item) for item in receipt.items),
        odd_day_points=odd_day_points(receipt.purchase_date),
        afternoon_points=afternoon_points(receipt.purchase_time),
    )


def score(receipt: Receipt) -> int:
    """Main entry point: total points awarded to a receipt"""
    return score_breakdown(receipt).total
