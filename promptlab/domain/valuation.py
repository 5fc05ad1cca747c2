"""Holding and portfolio valuation.

Each check returns a Result so that a valuation stops at the first invalid
field and reports it as a VALIDATION_ERROR instead of raising.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal, localcontext

from promptlab.domain.models import (
    MONEY_CONTEXT,
    ApiError,
    Holding,
    HoldingQuote,
    Portfolio,
    RiskProfile,
)
from promptlab.shared.result import Result, failure, success

logger = logging.getLogger(__name__)

MAX_QUANTITY = 10**12
MAX_PRICE = Decimal("1E12")
MAX_PRICE_DECIMAL_PLACES = 8


def _check_symbol(quote: HoldingQuote) -> Result[HoldingQuote, ApiError]:
    symbol = quote.symbol.strip().upper()
    if not symbol:
        return failure(ApiError.validation("Symbol is required", field="symbol"))
    return success(quote.model_copy(update={"symbol": symbol}))


def _check_quantity(quote: HoldingQuote) -> Result[HoldingQuote, ApiError]:
    if quote.quantity < 0:
        return failure(
            ApiError.validation(
                "Quantity cannot be negative", field="quantity", value=quote.quantity
            )
        )
    if quote.quantity > MAX_QUANTITY:
        return failure(
            ApiError.validation(
                f"Quantity cannot exceed {MAX_QUANTITY}", field="quantity", value=quote.quantity
            )
        )
    return success(quote)


def _check_price(field: str, value: Decimal) -> ApiError | None:
    if not value.is_finite():
        return ApiError.validation(
            f"{field} must be a finite number", field=field, value=str(value)
        )
    if value < 0:
        return ApiError.validation(f"{field} cannot be negative", field=field, value=str(value))
    if value > MAX_PRICE:
        return ApiError.validation(
            f"{field} cannot exceed {MAX_PRICE}", field=field, value=str(value)
        )
    with localcontext(MONEY_CONTEXT):
        exponent = value.normalize().as_tuple().exponent
    if exponent < -MAX_PRICE_DECIMAL_PLACES:
        return ApiError.validation(
            f"{field} cannot have more than {MAX_PRICE_DECIMAL_PLACES} decimal places",
            field=field,
            value=str(value),
        )
    return None


def _check_prices(quote: HoldingQuote) -> Result[HoldingQuote, ApiError]:
    if quote.current_price is None:
        return failure(ApiError.validation("Current price is required", field="current_price"))
    for field in ("average_cost", "current_price"):
        error = _check_price(field, getattr(quote, field))
        if error is not None:
            return failure(error)
    return success(quote)


def _to_holding(quote: HoldingQuote) -> Holding:
    return Holding(
        symbol=quote.symbol,
        name=quote.name,
        quantity=quote.quantity,
        average_cost=quote.average_cost,
        current_price=quote.current_price,
    )


def value_holding(quote: HoldingQuote) -> Result[Holding, ApiError]:
    """Validate a quote and compute its market value and gain/loss.

    Args:
        quote: Raw holding input

    Returns:
        Success(Holding) or Failure(ApiError) naming the first invalid field
    """
    return (
        success(quote)
        .flat_map(_check_symbol)
        .flat_map(_check_quantity)
        .flat_map(_check_prices)
        .map(_to_holding)
    )


def value_portfolio(
    name: str,
    quotes: Sequence[HoldingQuote],
    decimal_places: int = 2,
    risk_profile: RiskProfile | None = None,
) -> Result[Portfolio, ApiError]:
    """Value every quote and total the portfolio.

    The first invalid quote fails the whole portfolio; its position is added
    to the error details as ``index``.

    Args:
        name: Portfolio name
        quotes: Holdings to value, in order
        decimal_places: Precision of total_value (rounded HALF_UP)
        risk_profile: Optional risk profile to attach

    Returns:
        Success(Portfolio) or Failure(ApiError)
    """
    holdings: list[Holding] = []
    for index, quote in enumerate(quotes):
        result = value_holding(quote)
        error = result.get_error()
        if error is not None:
            logger.info(f"Portfolio '{name}' rejected at holding {index}: {error}")
            return failure(error.add_detail("index", index))
        holdings.append(result.get_or_throw())

    with localcontext(MONEY_CONTEXT):
        scale = Decimal(1).scaleb(-decimal_places)
        total = sum((h.market_value for h in holdings), Decimal("0"))
        total_value = total.quantize(scale)

    logger.debug(f"Valued portfolio '{name}' ({len(holdings)} holdings): {total_value}")
    return success(
        Portfolio(name=name, holdings=holdings, total_value=total_value, risk_profile=risk_profile)
    )
