"""add users and loans tables

Revision ID: 20261018_1200_users_loans
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20261018_1200_users_loans'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.Enum('lender', 'borrower', name='userrole'), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('occupation', sa.String(length=100), nullable=True),
        sa.Column('contact_number', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    # Create loans table
    op.create_table(
        'loans',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('interest_rate', sa.Float(), nullable=False),
        sa.Column('duration_months', sa.Integer(), nullable=False),
        sa.Column('lender_id', sa.String(length=32), nullable=False),
        sa.Column('loan_taker_id', sa.String(length=32), nullable=True),
        sa.Column('status', sa.Enum('available', 'requested', 'approved', 'rejected', name='loanstatus'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['lender_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['loan_taker_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_loans_lender_id'), 'loans', ['lender_id'], unique=False)
    op.create_index(op.f('ix_loans_status'), 'loans', ['status'], unique=False)


def downgrade() -> None:
    # Drop loans
    op.drop_index(op.f('ix_loans_status'), table_name='loans')
    op.drop_index(op.f('ix_loans_lender_id'), table_name='loans')
    op.drop_table('loans')

    # Drop users
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')

    # Drop enums
    op.execute('DROP TYPE IF EXISTS loanstatus')
    op.execute('DROP TYPE IF EXISTS userrole')
