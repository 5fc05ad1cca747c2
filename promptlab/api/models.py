"""API request/response models.

Separate from domain models to allow different validation rules: requests are
only shape-checked here, value checks happen in the domain and come back as
Result failures.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from promptlab.domain.models import HoldingQuote, RiskProfile


class HoldingValuationRequest(BaseModel):
    """Request model for valuing a single holding."""

    symbol: str = Field(description="Ticker symbol", examples=["AAPL"])
    name: str = Field(default="", description="Display name", examples=["Apple Inc."])
    quantity: int = Field(description="Number of shares held", examples=[10])
    average_cost: Decimal = Field(description="Average cost per share", examples=["150.00"])
    current_price: Decimal | None = Field(
        default=None, description="Current market price per share", examples=["175.50"]
    )

    def to_domain(self) -> HoldingQuote:
        """Convert to the domain input model."""
        return HoldingQuote(
            symbol=self.symbol,
            name=self.name,
            quantity=self.quantity,
            average_cost=self.average_cost,
            current_price=self.current_price,
        )


class PortfolioValuationRequest(BaseModel):
    """Request model for valuing a whole portfolio."""

    name: str = Field(min_length=1, max_length=200, description="Portfolio name")
    risk_profile: RiskProfile | None = Field(default=None, description="Optional risk profile")
    holdings: list[HoldingValuationRequest] = Field(
        default_factory=list, max_length=1000, description="Holdings to value"
    )


class ErrorResponse(BaseModel):
    """Error body returned when a Result failure reaches the HTTP boundary."""

    code: str = Field(description="Machine-readable error code", examples=["VALIDATION_ERROR"])
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict, description="Extra error context")
