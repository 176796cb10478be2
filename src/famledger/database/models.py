"""SQLAlchemy models for famledger database."""

from decimal import Decimal, InvalidOperation

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Index,
    create_engine,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class ExactDecimal(TypeDecorator):
    """Decimal stored as its text form.

    SQLite has no decimal type; NUMERIC columns round-trip through float.
    Reading a value that is not a finite decimal raises ValueError.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"Stored amount {value!r} is not a decimal") from e
        if not amount.is_finite():
            raise ValueError(f"Stored amount {value!r} is not finite")
        return amount


class Transaction(Base):
    """Ledger transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    datetime = Column(DateTime, nullable=False)
    from_person = Column(String, nullable=False)
    to_person = Column(String, nullable=False)
    action = Column(String, nullable=False)
    amount = Column(ExactDecimal, nullable=False)
    category = Column(String, nullable=False, default="")
    note = Column(String, nullable=False, default="")

    __table_args__ = (
        Index("ix_transactions_from_person", "from_person"),
        Index("ix_transactions_to_person", "to_person"),
    )


def create_database_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine. No connection is made until first use."""
    return create_engine(database_url, echo=False)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory bound to engine."""
    return sessionmaker(bind=engine)
