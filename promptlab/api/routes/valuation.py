"""Valuation API routes.

Endpoints for valuing holdings and portfolios.
"""

import logging

from fastapi import APIRouter, Depends

from promptlab.api.dependencies import get_settings
from promptlab.api.models import ErrorResponse, HoldingValuationRequest, PortfolioValuationRequest
from promptlab.api.responses import unwrap_or_raise
from promptlab.domain.models import Holding, Portfolio
from promptlab.domain.valuation import value_holding, value_portfolio
from promptlab.shared.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/valuation", tags=["Valuation"])

_ERROR_RESPONSES = {
    422: {"model": ErrorResponse, "description": "A holding failed validation"},
}


@router.post(
    "/holding",
    response_model=Holding,
    summary="Value a single holding",
    description="""
    Compute market value, cost basis and gain/loss for one holding.

    Invalid input (blank symbol, negative quantity or price, missing current price)
    is rejected with **422** and an error body naming the offending `field`.
    """,
    responses=_ERROR_RESPONSES,
)
async def value_single_holding(request: HoldingValuationRequest) -> Holding:
    """Value one holding.

    Raises:
        HTTPException: 422 if the holding is invalid
    """
    logger.info(f"Valuing holding {request.symbol!r}")
    return unwrap_or_raise(value_holding(request.to_domain()))


@router.post(
    "/portfolio",
    response_model=Portfolio,
    summary="Value a portfolio",
    description="""
    Value every holding and return the portfolio with its total market value,
    rounded to the configured number of currency decimal places.

    The first invalid holding fails the request with **422**; its position is
    reported as `details.index`.
    """,
    responses=_ERROR_RESPONSES,
)
async def value_whole_portfolio(
    request: PortfolioValuationRequest, settings: Settings = Depends(get_settings)
) -> Portfolio:
    """Value a portfolio.

    Raises:
        HTTPException: 422 if any holding is invalid
    """
    logger.info(f"Valuing portfolio {request.name!r} ({len(request.holdings)} holdings)")
    result = value_portfolio(
        request.name,
        [holding.to_domain() for holding in request.holdings],
        decimal_places=settings.currency_decimal_places,
        risk_profile=request.risk_profile,
    )
    return unwrap_or_raise(result)
