from sqlalchemy import Column, String, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
from app.core.database import Base
import enum
import uuid


def generate_id() -> str:
    """Opaque primary key"""
    return uuid.uuid4().hex


class UserRole(str, enum.Enum):
    """Account role"""
    LENDER = "lender"
    BORROWER = "borrower"


class User(Base):
    """Registered account; the password is only ever stored hashed"""
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_id)

    # Authentication
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    role = Column(SQLEnum(UserRole, values_callable=lambda e: [m.value for m in e]), nullable=False)

    # Profile
    name = Column(String(100), nullable=False)
    occupation = Column(String(100), nullable=True)
    contact_number = Column(String(20), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<User {self.email} ({self.role})>"
