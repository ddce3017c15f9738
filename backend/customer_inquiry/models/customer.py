"""Customer ORM — maps the legacy customer master table (CUSTMAST).

Invariants:
    - custno is the primary key; a keyed read returns at most one row
    - Money columns are NUMERIC(9,2) and load as decimal.Decimal
    - Read-only from this service: nothing here inserts or updates rows

Design Decisions:
    - Legacy column names kept (custno, custname, ...): the table is shared with the
      system of record; Python attribute names are descriptive
    - to_record() converts to the core snapshot so the ORM never crosses into core/
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import CHAR, Date, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from customer_inquiry.core.customer_record import CustomerRecord
from customer_inquiry.core.domain_types import (
    ADDRESS_MAX_LENGTH, CITY_MAX_LENGTH, CustomerKey, NAME_MAX_LENGTH,
    MONEY_FRACTION_DIGITS, MONEY_PRECISION, PHONE_MAX_LENGTH, STATE_LENGTH,
)
from customer_inquiry.db.base import Base


class Customer(Base):
    """Customer master row."""
    __tablename__ = "custmast"

    customer_number: Mapped[int] = mapped_column(
        "custno", Integer, primary_key=True, autoincrement=False,
    )
    customer_name: Mapped[str | None] = mapped_column(
        "custname", String(NAME_MAX_LENGTH), nullable=True,
    )
    address1: Mapped[str | None] = mapped_column(
        "addr1", String(ADDRESS_MAX_LENGTH), nullable=True,
    )
    city: Mapped[str | None] = mapped_column(
        "city", String(CITY_MAX_LENGTH), nullable=True,
    )
    state: Mapped[str | None] = mapped_column(
        "state", CHAR(STATE_LENGTH), nullable=True,
    )
    zip_code: Mapped[int | None] = mapped_column("zip", Integer, nullable=True)
    phone: Mapped[str | None] = mapped_column(
        "phone", String(PHONE_MAX_LENGTH), nullable=True,
    )
    balance: Mapped[Decimal | None] = mapped_column(
        "balance", Numeric(MONEY_PRECISION, MONEY_FRACTION_DIGITS, asdecimal=True), nullable=True,
    )
    credit_limit: Mapped[Decimal | None] = mapped_column(
        "creditlim", Numeric(MONEY_PRECISION, MONEY_FRACTION_DIGITS, asdecimal=True), nullable=True,
    )
    last_order_date: Mapped[date | None] = mapped_column(
        "lastorder", Date, nullable=True,
    )

    def to_record(self) -> CustomerRecord:
        return CustomerRecord(
            customer_number=CustomerKey(self.customer_number),
            customer_name=self.customer_name,
            address1=self.address1,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
            phone=self.phone,
            balance=self.balance,
            credit_limit=self.credit_limit,
            last_order_date=self.last_order_date,
        )
