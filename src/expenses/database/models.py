"""SQLAlchemy models for the expenses registry database."""

from datetime import datetime, UTC

from sqlalchemy import (
    BigInteger,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(UTC)


class Actor(Base):
    """Participant model, keyed by name."""

    __tablename__ = "actors"

    name = Column(String(100), primary_key=True)
    flags = Column(Integer, default=0, nullable=False)
    headers = Column(Text, default="", nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)


class Label(Base):
    """Label model with hierarchical structure, keyed by name."""

    __tablename__ = "labels"

    name = Column(String(100), primary_key=True)
    parent_name = Column(String(100), ForeignKey("labels.name"), nullable=True)
    flags = Column(Integer, default=0, nullable=False)
    headers = Column(Text, default="", nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    parent = relationship("Label", remote_side=[name], backref="children")


class Transaction(Base):
    """Transaction model, keyed by UUID."""

    __tablename__ = "transactions"

    uuid = Column(String(36), primary_key=True)
    date = Column(Date, index=True, nullable=False)
    amount = Column(BigInteger, nullable=False)
    label_name = Column(String(100), ForeignKey("labels.name"), nullable=False)
    sender_name = Column(String(100), ForeignKey("actors.name"), nullable=False)
    receiver_name = Column(String(100), ForeignKey("actors.name"), nullable=False)
    flags = Column(Integer, default=0, nullable=False)
    headers = Column(Text, default="", nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    label = relationship("Label")
    sender = relationship("Actor", foreign_keys=[sender_name])
    receiver = relationship("Actor", foreign_keys=[receiver_name])
    details = relationship(
        "Detail",
        back_populates="transaction",
        order_by=lambda: [Detail.position, Detail.created_at, Detail.uuid],
    )


class Detail(Base):
    """Transaction detail model. Rows are only ever inserted."""

    __tablename__ = "details"

    uuid = Column(String(36), primary_key=True)
    transaction_uuid = Column(String(36), ForeignKey("transactions.uuid"), index=True, nullable=False)
    label_name = Column(String(100), ForeignKey("labels.name"), nullable=False)
    amount = Column(BigInteger, nullable=False)
    position = Column(Integer, default=0, nullable=False)
    flags = Column(Integer, default=0, nullable=False)
    headers = Column(Text, default="", nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    transaction = relationship("Transaction", back_populates="details")
    label = relationship("Label")


# Creation order; tables are dropped in reverse
TABLES: tuple[Table, ...] = (
    Actor.__table__,
    Label.__table__,
    Transaction.__table__,
    Detail.__table__,
)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine, enforcing foreign keys on SQLite."""
    engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    return sessionmaker(bind=engine)
