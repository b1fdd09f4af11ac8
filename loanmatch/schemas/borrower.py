# This project was developed with assistance from AI tools.
"""Borrower-side schemas: scoring criteria, financial data and stored profiles."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class UserPreferences(BaseModel):
    """Optional ranking boosts chosen by the borrower."""

    prioritize_low_interest: bool = False
    prioritize_long_term: bool = False
    prioritize_low_monthly_payment: bool = False
    preferred_banks: list[str] = Field(default_factory=list)


class BorrowerCriteria(BaseModel):
    """Scoring input for the standard strategy.

    Monetary figures are monthly. NaN and infinity are rejected at
    validation. Positivity of ``loan_amount`` and ``monthly_income`` is
    checked by the engine, which raises ``InvalidInputError`` instead of a
    schema validation error.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    loan_amount: float
    loan_purpose: str
    monthly_income: float
    credit_score: int
    employment_status: str = "employed"
    existing_loans: int = Field(default=0, ge=0)
    existing_debt: float = Field(default=0, ge=0)
    expenses: float = Field(default=0, ge=0)
    age: int | None = None
    preferred_term: int | None = None
    preferred_interest_rate: float | None = None
    user_preferences: UserPreferences | None = None


class LoanHistory(BaseModel):
    on_time_payments: int = 0
    missed_payments: int = 0
    total_loans: int = 0


class BorrowerFinancialData(BaseModel):
    """Annual financial snapshot used by the weighted strategy."""

    model_config = ConfigDict(allow_inf_nan=False)

    user_id: str
    income: float
    expenses: float = Field(default=0, ge=0)
    existing_debt: float = Field(default=0, ge=0)
    credit_score: int
    employment_status: str = "full-time"
    employment_duration: int = Field(default=0, ge=0, description="Months in current job.")
    savings_amount: float = 0
    loan_purpose: str = ""
    previous_loan_history: LoanHistory = Field(default_factory=LoanHistory)


class IncomeDetails(BaseModel):
    monthly: float
    annual: float


class ExistingLoan(BaseModel):
    """A loan the borrower is already repaying."""

    id: str
    type: str
    amount: float
    remaining_balance: float
    monthly_payment: float
    interest_rate: float
    term: int
    status: str = "active"


class UserProfile(BaseModel):
    """Stored borrower profile, as kept by the profile repository."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    full_name: str
    date_of_birth: date
    employment_status: str
    employment_duration: int = 0
    income: IncomeDetails
    credit_score: int
    monthly_expenses: float = 0
    loans: list[ExistingLoan] = Field(default_factory=list)
    preferences: UserPreferences | None = None
