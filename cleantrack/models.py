import uuid

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_id():
    """Generate an opaque UUID primary key"""
    return str(uuid.uuid4())


class Apartment(Base):
    __tablename__ = "apartments"

    id = Column(String(36), primary_key=True, default=generate_id)
    apartment_number = Column(String(50), unique=True, index=True, nullable=False)
    owner_name = Column(String(100), nullable=False)
    owner_email = Column(String(255), nullable=True)
    address = Column(String(200), nullable=True)
    # Fixed amount paid to the cleaner per session here (not the customer price)
    cleaner_payout = Column(Numeric(10, 2), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    sessions = relationship("CleaningSession", back_populates="apartment")


class Cleaner(Base):
    __tablename__ = "cleaners"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(100), nullable=False, index=True)
    phone = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    sessions = relationship("CleaningSession", back_populates="cleaner")


class CleaningSession(Base):
    __tablename__ = "cleaning_sessions"

    id = Column(String(36), primary_key=True, default=generate_id)
    apartment_id = Column(String(36), ForeignKey("apartments.id"), nullable=False, index=True)
    cleaner_id = Column(String(36), ForeignKey("cleaners.id"), nullable=False, index=True)
    cleaning_date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)  # NULL = billed at the default price
    welcome_pack_fee = Column(Numeric(10, 2), nullable=True)  # Fee applied at creation, if any
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    apartment = relationship("Apartment", back_populates="sessions")
    cleaner = relationship("Cleaner", back_populates="sessions")

    # A cleaner can only be booked once per day
    __table_args__ = (
        UniqueConstraint("cleaner_id", "cleaning_date", name="uq_cleaner_cleaning_date"),
    )


class AppSetting(Base):
    """Process-wide key/value settings (e.g. welcome_pack_fee)"""

    __tablename__ = "app_settings"

    key = Column(String(100), primary_key=True)
    value = Column(String(255), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
