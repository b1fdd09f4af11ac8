# This project was developed with assistance from AI tools.
"""Loan offer schemas: catalog entries, bundles and scored results."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from . import Pagination


class LoanOffer(BaseModel):
    """A lender's offer. Read-only to the scoring engine."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str
    bank_name: str = Field(validation_alias=AliasChoices("bank_name", "lender_name"))
    amount: float
    interest_rate: float = Field(description="Annual rate, percent.")
    term: int = Field(
        validation_alias=AliasChoices("term", "term_months"),
        description="Months.",
    )
    monthly_payment: float | None = Field(
        default=None,
        description="Precomputed installment. Derived by amortization when absent.",
    )
    minimum_credit_score: int | None = None
    type: str | None = Field(default=None, description="Loan category, e.g. 'Personal Loan'.")

    lender_id: str | None = None
    processing_fee: float = 0
    early_repayment_fee: float = 0
    minimum_income: float | None = None
    approval_speed: str | None = None
    is_promoted: bool = False
    features: list[str] = Field(default_factory=list)
    documents: list[str] = Field(default_factory=list)


class OfferListResponse(BaseModel):
    data: list[LoanOffer]
    pagination: Pagination


class BundledOffer(BaseModel):
    """Several offers taken together as one combined facility."""

    id: str
    name: str
    description: str
    offer_ids: list[str]
    lenders: list[str]
    total_amount: float
    average_interest_rate: float
    average_term: int
    total_monthly_payment: float


class ScoredOffer(BaseModel):
    """Standard-strategy result for one offer."""

    offer_id: str
    score: float = Field(ge=0, le=100)
    match_reason: list[str]
    is_personalized: bool = True


class AIRecommendationResult(BaseModel):
    """Weighted-strategy result for a user."""

    recommendations: list[LoanOffer]
    top_pick: LoanOffer | None = None
    reasonings: dict[str, str] = Field(default_factory=dict)
