"""Customer master — the CUSTMAST table read by the inquiry service.

Revision ID: 001_customer_master
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_customer_master"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "custmast",
        sa.Column("custno", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("custname", sa.String(30), nullable=True),
        sa.Column("addr1", sa.String(30), nullable=True),
        sa.Column("city", sa.String(20), nullable=True),
        sa.Column("state", sa.CHAR(2), nullable=True),
        sa.Column("zip", sa.Integer, nullable=True),
        sa.Column("phone", sa.String(12), nullable=True),
        sa.Column("balance", sa.Numeric(9, 2), nullable=True),
        sa.Column("creditlim", sa.Numeric(9, 2), nullable=True),
        sa.Column("lastorder", sa.Date, nullable=True),
        sa.CheckConstraint("custno BETWEEN 1 AND 99999", name="ck_custmast_custno_range"),
        sa.CheckConstraint("creditlim >= 0", name="ck_custmast_creditlim_nonneg"),
    )


def downgrade() -> None:
    op.drop_table("custmast")
