# Standard library imports
from datetime import datetime

# Third-party imports
from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from smartmunic.utils.datetime_utils import utc_now


class IntTimeStampMixin:
    """A reusable mixin that:
    - Provides an auto-incrementing integer primary key named 'id'
    - Includes created_at and updated_at timestamps, set in Python so every
      backend (PostgreSQL or SQLite) stores the same UTC instant

    This mixin is abstract and is not mapped as its own table.
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )
