# This project was developed with assistance from AI tools.
"""Payment and affordability calculator schemas."""

import enum

from pydantic import BaseModel, ConfigDict, Field


class AffordabilityTier(str, enum.Enum):
    COMFORTABLE = "comfortable"
    STRETCHED = "stretched"
    UNAFFORDABLE = "unaffordable"


class PaymentRequest(BaseModel):
    """Input for the monthly payment calculator.

    The financed principal is ``amount - down_payment``; the processing fee
    is a percentage of that principal, paid once.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    amount: float = Field(gt=0)
    interest_rate: float = Field(ge=0, le=50)
    term_months: int = Field(gt=0, le=480)
    down_payment: float = Field(default=0, ge=0)
    processing_fee: float = Field(default=0, ge=0, le=100, description="Percent of principal.")


class AmortizationPeriod(BaseModel):
    period: int
    payment: float
    principal: float
    interest: float
    balance: float


class PaymentResponse(BaseModel):
    principal: float
    monthly_payment: float
    total_repayment: float = Field(description="Sum of all installments.")
    total_interest: float
    processing_fee_amount: float = 0
    total_cost: float = Field(description="Installments plus the processing fee.")
    schedule: list[AmortizationPeriod] = Field(default_factory=list)


class AffordabilityRequest(BaseModel):
    """Input for the affordability calculator. Monetary figures are monthly."""

    model_config = ConfigDict(allow_inf_nan=False)

    monthly_income: float = Field(gt=0)
    monthly_expenses: float = Field(default=0, ge=0)
    monthly_debts: float = Field(default=0, ge=0)
    amount: float = Field(gt=0)
    interest_rate: float = Field(ge=0, le=50)
    term_months: int = Field(gt=0, le=480)


class AffordabilityResponse(BaseModel):
    """Affordability calculation results."""

    monthly_payment: float
    payment_to_income: float
    dti_ratio: float = Field(description="Percent, including the new payment.")
    tier: AffordabilityTier
    dti_warning: str | None = None
