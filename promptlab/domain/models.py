"""Domain models for portfolio valuation.

All models use Pydantic for validation, serialization, and type safety.
"""

from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

PERCENT_SCALE = Decimal("0.0001")

# Decimal context for quantize() on money values
MONEY_CONTEXT = Context(prec=60, rounding=ROUND_HALF_UP)

# ============================================================================
# Errors
# ============================================================================


class ErrorCode(str, Enum):
    """Error codes carried by ApiError."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ApiError(BaseModel):
    """Standardized error payload, used as the error side of a Result."""

    code: str = Field(description="Machine-readable error code (see ErrorCode)")
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict, description="Extra error context")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When the error was created"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def validation(cls, message: str, **details: Any) -> "ApiError":
        """Create a VALIDATION_ERROR with the given details."""
        return cls(code=ErrorCode.VALIDATION_ERROR.value, message=message, details=details)

    def add_detail(self, key: str, value: Any) -> "ApiError":
        """Return a copy of this error with one more detail entry."""
        return self.model_copy(update={"details": {**self.details, key: value}})

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


# ============================================================================
# Holdings
# ============================================================================


class HoldingQuote(BaseModel):
    """Unvalidated holding input, checked by value_holding()."""

    symbol: str
    name: str = ""
    quantity: int
    average_cost: Decimal
    current_price: Decimal | None = None

    model_config = ConfigDict(frozen=True)


class Holding(BaseModel):
    """A single valued holding within a portfolio."""

    symbol: str = Field(min_length=1, description="Ticker symbol (upper case)")
    name: str = Field(default="", description="Display name of the security")
    quantity: int = Field(ge=0, description="Number of shares held")
    average_cost: Decimal = Field(ge=0, description="Average cost per share")
    current_price: Decimal = Field(ge=0, description="Current market price per share")

    model_config = ConfigDict(frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def market_value(self) -> Decimal:
        return self.current_price * self.quantity

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cost_basis(self) -> Decimal:
        return self.average_cost * self.quantity

    @computed_field  # type: ignore[prop-decorator]
    @property
    def gain_loss(self) -> Decimal:
        return self.market_value - self.cost_basis

    @computed_field  # type: ignore[prop-decorator]
    @property
    def gain_loss_percent(self) -> Decimal:
        """Gain/loss as a percentage of cost basis (ratio rounded to 4 places)."""
        with localcontext(MONEY_CONTEXT):
            if self.cost_basis == 0:
                return Decimal("0")
            ratio = (self.gain_loss / self.cost_basis).quantize(PERCENT_SCALE)
            return ratio * 100


# ============================================================================
# Portfolios
# ============================================================================


class RiskProfile(str, Enum):
    """Investor risk profile of a portfolio."""

    CONSERVATIVE = "CONSERVATIVE"
    MODERATE = "MODERATE"
    AGGRESSIVE = "AGGRESSIVE"


class Portfolio(BaseModel):
    """A user's investment portfolio."""

    id: str | None = Field(default=None, description="Portfolio identifier")
    user_id: str | None = Field(default=None, description="Owning user identifier")
    name: str = Field(description="Portfolio name")
    holdings: list[Holding] = Field(default_factory=list)
    total_value: Decimal = Field(default=Decimal("0"), description="Rounded total market value")
    risk_profile: RiskProfile | None = None
    last_updated: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = ConfigDict(frozen=True)
