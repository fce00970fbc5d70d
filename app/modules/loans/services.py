from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import List
import logging

from app.core.dependencies import TokenIdentity
from app.core.exceptions import ErrorKind, ServiceError
from app.modules.loans.models import Loan, LoanStatus
from app.modules.loans.schemas import LoanOfferCreate
from app.modules.users.models import User, UserRole

logger = logging.getLogger(__name__)


class LoanService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_offer(self, identity: TokenIdentity, offer: LoanOfferCreate) -> Loan:
        """Publish a loan offer on behalf of a lender

        The stored account, not the token claim, decides whether the caller
        may lend: unknown ids and non-lender accounts are both rejected.
        """
        lender = await self.db.get(User, identity.user_id)
        if lender is None or lender.role != UserRole.LENDER:
            logger.warning(f"Rejected loan offer from non-lender account {identity.user_id}")
            raise ServiceError(ErrorKind.FORBIDDEN, "Only lenders allowed")

        db_loan = Loan(
            amount=offer.amount,
            interest_rate=offer.interest_rate,
            duration_months=offer.duration_months,
            lender_id=lender.id,
            status=LoanStatus.AVAILABLE
        )
        self.db.add(db_loan)
        await self.db.commit()
        await self.db.refresh(db_loan)

        logger.info(f"Lender {identity.user_id} created loan offer {db_loan.id}")
        return db_loan

    async def list_available(self) -> List[Loan]:
        """All offers still open whose lender exists, lender loaded, newest first"""
        result = await self.db.execute(
            select(Loan)
            .join(Loan.lender)
            .options(selectinload(Loan.lender))
            .where(Loan.status == LoanStatus.AVAILABLE)
            .order_by(Loan.created_at.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())
