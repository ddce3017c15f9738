"""ORM Models — SQLAlchemy declarative models for the customer master.

Invariants:
    - All models inherit from Base (db/base.py)
    - Imported here so Base.metadata is populated before create_all / autogenerate
"""

from customer_inquiry.models.customer import Customer  # noqa: F401
