# Loans module
from app.modules.loans.models import Loan, LoanStatus
from app.modules.loans.services import LoanService
from app.modules.loans.router import router

__all__ = ["Loan", "LoanStatus", "LoanService", "router"]
