from pydantic import Field
from datetime import datetime
from typing import Optional

from app.core.schemas import CamelModel
from app.modules.loans.models import Loan, LoanStatus


class LoanOfferCreate(CamelModel):
    amount: float = Field(..., gt=0)
    interest_rate: float = Field(..., ge=0)
    duration_months: int = Field(..., gt=0)


class LenderSummary(CamelModel):
    """Lender fields shown alongside an offer"""
    id: str
    name: str
    email: str
    occupation: Optional[str] = None
    contact_number: Optional[str] = None


class LoanResponse(CamelModel):
    id: str
    amount: float
    interest_rate: float
    duration_months: int
    lender_id: str
    loan_taker_id: Optional[str] = None
    status: LoanStatus
    created_at: datetime


class LoanCreatedResponse(CamelModel):
    message: str
    loan: LoanResponse


class LoanListing(LoanResponse):
    """Offer with the lender reference resolved (None if the account is gone)"""
    lender_id: Optional[LenderSummary] = None

    @classmethod
    def from_loan(cls, loan: Loan) -> "LoanListing":
        return cls(
            id=loan.id,
            amount=loan.amount,
            interest_rate=loan.interest_rate,
            duration_months=loan.duration_months,
            lender_id=LenderSummary.model_validate(loan.lender) if loan.lender is not None else None,
            loan_taker_id=loan.loan_taker_id,
            status=loan.status,
            created_at=loan.created_at
        )
