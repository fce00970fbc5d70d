from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.database import get_db
from app.core.dependencies import TokenIdentity, get_current_identity, require_lender
from app.modules.loans.schemas import LoanOfferCreate, LoanCreatedResponse, LoanListing, LoanResponse
from app.modules.loans.services import LoanService

router = APIRouter(prefix="/api/loans", tags=["loans"])


@router.post("", response_model=LoanCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_loan_offer(
    offer: LoanOfferCreate,
    db: AsyncSession = Depends(get_db),
    identity: TokenIdentity = Depends(require_lender)
):
    """Publish a loan offer (lenders only)"""
    service = LoanService(db)
    loan = await service.create_offer(identity, offer)
    return LoanCreatedResponse(message="Loan offer created", loan=LoanResponse.model_validate(loan))


@router.get("", response_model=List[LoanListing])
async def list_available_loans(
    db: AsyncSession = Depends(get_db),
    identity: TokenIdentity = Depends(get_current_identity)
):
    """List every available offer with its lender's contact details"""
    service = LoanService(db)
    loans = await service.list_available()
    return [LoanListing.from_loan(loan) for loan in loans]
