from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.modules.users.models import generate_id
import enum


class LoanStatus(str, enum.Enum):
    """Loan offer status; only AVAILABLE is ever written by the API"""
    AVAILABLE = "available"
    REQUESTED = "requested"
    APPROVED = "approved"
    REJECTED = "rejected"


class Loan(Base):
    __tablename__ = "loans"

    id = Column(String(32), primary_key=True, default=generate_id)
    amount = Column(Float, nullable=False)
    interest_rate = Column(Float, nullable=False)
    duration_months = Column(Integer, nullable=False)
    lender_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    loan_taker_id = Column(String(32), ForeignKey("users.id"), nullable=True, default=None)
    status = Column(
        SQLEnum(LoanStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=LoanStatus.AVAILABLE,
        index=True
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    lender = relationship("User", foreign_keys=[lender_id], lazy="raise")
    loan_taker = relationship("User", foreign_keys=[loan_taker_id], lazy="raise")
