"""SQLAlchemy models for cashbook database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Time,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Token(Base):
    """Sales token model: one test performed for a customer."""

    __tablename__ = "tokens"

    id = Column(Integer, primary_key=True)
    token_no = Column(String, unique=True, nullable=False)
    date = Column(Date, nullable=False)
    time = Column(Time, nullable=True)
    name = Column(String, nullable=True)
    test = Column(String, nullable=True)
    amount = Column(Numeric(10, 2), nullable=False)
    is_paid = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)
    expense_type = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    paid_to = Column(String, nullable=True)
    pay_mode = Column(String, nullable=True)
    remarks = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class CashAdjustment(Base):
    """Manual cash adjustment model."""

    __tablename__ = "cash_adjustments"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)
    time = Column(Time, nullable=True)
    amount = Column(Numeric(10, 2), nullable=False)
    adjustment_type = Column(String, nullable=False)
    reason = Column(String, nullable=False)
    reference_number = Column(String, nullable=True)
    entered_by = Column(String, nullable=True)
    remarks = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory.

    SQLite connections may be used from the fetch worker threads.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
