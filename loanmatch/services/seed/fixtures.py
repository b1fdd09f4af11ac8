# This project was developed with assistance from AI tools.
"""
Demo fixture data for the in-memory store.

All fixture data is defined as Python dicts and validated through the
pydantic schemas when seeded.

Simulated for demonstration purposes -- not real financial data.
"""

# ---------------------------------------------------------------------------
# Borrower references
# ---------------------------------------------------------------------------

TAN_WEI_MING_ID = "USR10028"
NUR_AISYAH_ID = "USR10042"


# ---------------------------------------------------------------------------
# Offers
# ---------------------------------------------------------------------------

OFFERS: list[dict] = [
    {
        "id": "offer-1",
        "lender_id": "lender-1",
        "bank_name": "First Bank",
        "amount": 20000,
        "interest_rate": 4.5,
        "term": 36,
        "monthly_payment": 595.48,
        "type": "Personal Loan",
        "processing_fee": 200,
        "early_repayment_fee": 0,
        "approval_speed": "fast",
        "minimum_credit_score": 700,
        "minimum_income": 60000,
        "is_promoted": True,
        "features": ["No early repayment fee", "Flexible loan amount", "Fixed interest rate"],
        "documents": ["NRIC", "Latest payslip", "Bank statements (3 months)"],
    },
    {
        "id": "offer-2",
        "lender_id": "lender-2",
        "bank_name": "Prosperity Credit",
        "amount": 15000,
        "interest_rate": 3.9,
        "term": 24,
        "monthly_payment": 652.75,
        "type": "Personal Loan",
        "processing_fee": 150,
        "early_repayment_fee": 100,
        "approval_speed": "standard",
        "minimum_credit_score": 680,
        "minimum_income": 48000,
        "features": ["Low interest rate", "Online application", "Same-day disbursement"],
        "documents": ["NRIC", "Latest payslip", "Income tax notice"],
    },
    {
        "id": "offer-3",
        "lender_id": "lender-3",
        "bank_name": "TechFinance",
        "amount": 25000,
        "interest_rate": 5.1,
        "term": 48,
        "monthly_payment": 577.12,
        "type": "Personal Loan",
        "processing_fee": 0,
        "early_repayment_fee": 200,
        "approval_speed": "instant",
        "minimum_credit_score": 650,
        "minimum_income": 36000,
        "is_promoted": True,
        "features": ["No processing fee", "Instant approval", "Flexible repayment options"],
        "documents": ["NRIC", "Latest 2 payslips"],
    },
    {
        "id": "offer-4",
        "lender_id": "lender-4",
        "bank_name": "Heritage Bank",
        "amount": 30000,
        "interest_rate": 4.8,
        "term": 60,
        "monthly_payment": 563.35,
        "type": "Home Improvement",
        "processing_fee": 300,
        "early_repayment_fee": 0,
        "approval_speed": "standard",
        "minimum_credit_score": 720,
        "minimum_income": 72000,
        "features": [
            "Special rate for home improvement",
            "Fixed monthly payments",
            "No early repayment fee",
        ],
        "documents": ["NRIC", "Latest payslip", "Bank statements (6 months)", "Property documents"],
    },
    {
        "id": "offer-5",
        "lender_id": "lender-5",
        "bank_name": "Unity Finance",
        "amount": 12000,
        "interest_rate": 6.2,
        "term": 24,
        "monthly_payment": 533.42,
        "type": "Personal Loan",
        "processing_fee": 100,
        "early_repayment_fee": 50,
        "approval_speed": "fast",
        "minimum_credit_score": 620,
        "minimum_income": 30000,
        "features": ["Lower credit score requirements", "Quick approval", "Minimal documentation"],
        "documents": ["NRIC", "Proof of income"],
    },
    {
        "id": "offer-6",
        "lender_id": "lender-6",
        "bank_name": "EasyCredit",
        "amount": 18000,
        "interest_rate": 7.5,
        "term": 36,
        "monthly_payment": 557.89,
        "type": "Debt Consolidation",
        "processing_fee": 180,
        "early_repayment_fee": 100,
        "approval_speed": "fast",
        "minimum_credit_score": 600,
        "minimum_income": 24000,
        "is_promoted": True,
        "features": [
            "Consolidate multiple debts",
            "Reduce your monthly payments",
            "Simple application process",
        ],
        "documents": ["NRIC", "Latest payslip", "Existing loan statements"],
    },
]


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------

PROFILES: list[dict] = [
    {
        "id": TAN_WEI_MING_ID,
        "full_name": "Tan Wei Ming",
        "date_of_birth": "1985-08-15",
        "employment_status": "employed",
        "employment_duration": 60,
        "income": {"monthly": 8500, "annual": 102000},
        "credit_score": 785,
        "monthly_expenses": 3200,
        "loans": [
            {
                "id": "loan-car-1",
                "type": "auto",
                "amount": 60000,
                "remaining_balance": 38000,
                "monthly_payment": 1100,
                "interest_rate": 2.78,
                "term": 60,
                "status": "active",
            },
            {
                "id": "loan-study-1",
                "type": "education",
                "amount": 20000,
                "remaining_balance": 0,
                "monthly_payment": 400,
                "interest_rate": 4.5,
                "term": 48,
                "status": "paid",
            },
        ],
        "preferences": {"prioritize_low_interest": True, "preferred_banks": ["Heritage Bank"]},
    },
    {
        "id": NUR_AISYAH_ID,
        "full_name": "Nur Aisyah",
        "date_of_birth": "1996-02-29",
        "employment_status": "employed",
        "employment_duration": 18,
        "income": {"monthly": 3800, "annual": 45600},
        "credit_score": 655,
        "monthly_expenses": 1900,
        "loans": [],
    },
]


# ---------------------------------------------------------------------------
# Financial data (annual figures)
# ---------------------------------------------------------------------------

FINANCIAL_DATA: list[dict] = [
    {
        "user_id": TAN_WEI_MING_ID,
        "income": 75000,
        "expenses": 25000,
        "existing_debt": 10000,
        "credit_score": 720,
        "employment_status": "full-time",
        "employment_duration": 36,
        "savings_amount": 15000,
        "loan_purpose": "home renovation",
        "previous_loan_history": {"on_time_payments": 24, "missed_payments": 1, "total_loans": 2},
    },
    {
        "user_id": NUR_AISYAH_ID,
        "income": 45600,
        "expenses": 22800,
        "existing_debt": 6000,
        "credit_score": 655,
        "employment_status": "full-time",
        "employment_duration": 18,
        "savings_amount": 4000,
        "loan_purpose": "debt consolidation",
        "previous_loan_history": {"on_time_payments": 10, "missed_payments": 2, "total_loans": 1},
    },
]
