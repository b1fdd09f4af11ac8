# This project was developed with assistance from AI tools.
"""Recommendation request schemas."""

import enum

from pydantic import BaseModel, ConfigDict, Field

from .borrower import BorrowerCriteria, UserPreferences
from .offers import LoanOffer


class ScoringStrategy(str, enum.Enum):
    """Named scoring algorithms. Scales differ and must not be mixed."""

    STANDARD = "standard"  # additive, 0-100
    WEIGHTED = "weighted"  # five weighted factors, 0-1


class RecommendationRequest(BaseModel):
    criteria: BorrowerCriteria
    offers: list[LoanOffer] | None = Field(
        default=None,
        description="Candidate offers. Defaults to the catalog filtered by loan amount.",
    )


class ProfileCriteriaRequest(BaseModel):
    """Loan details combined with a stored profile to build criteria."""

    model_config = ConfigDict(allow_inf_nan=False)

    loan_amount: float
    loan_purpose: str
    preferred_term: int | None = None
    preferences: UserPreferences | None = None
