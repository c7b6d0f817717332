"""Database models for users, services, offerings, vacancies and schedulings."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    TypeDecorator,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _now() -> datetime:
    return datetime.now(timezone.utc)


class _Model(DeclarativeBase):
    pass


class Base(_Model):
    """Columns shared by every table: a UUID key, timestamps and a soft-delete marker."""

    __abstract__ = True

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, onupdate=_now
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), index=True
    )


_DAY_NAMES = ("Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado")


class DayOfWeek(enum.IntEnum):
    """Day of the week, Sunday first, stored as an integer."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_db(cls, value):
        """Build a day from a stored integer, rejecting anything else."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("invalid value for DayOfWeek")
        try:
            return cls(value)
        except ValueError:
            raise ValueError("invalid value for DayOfWeek") from None

    def __str__(self) -> str:
        return _DAY_NAMES[self.value]


class SchedulingStatus(str, enum.Enum):
    """State of a scheduling request."""

    PENDING = "pending"
    CANCELLED = "cancelled"
    ACCEPTED = "accepted"

    @classmethod
    def from_db(cls, value):
        """Build a status from a stored string, rejecting anything else."""
        if not isinstance(value, str):
            raise ValueError("invalid scheduling status")
        try:
            return cls(value)
        except ValueError:
            raise ValueError("invalid scheduling status") from None

    def __str__(self) -> str:
        return self.value


class UserRole(str, enum.Enum):
    """Role a user plays in the system."""

    ADMIN = "admin"
    PROVIDER = "provider"
    CUSTOMER = "customer"

    def __str__(self) -> str:
        return self.value


class _DayOfWeekType(TypeDecorator):
    impl = Integer
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return None if value is None else int(value)

    def process_result_value(self, value, dialect):
        return None if value is None else DayOfWeek.from_db(value)


class _SchedulingStatusType(TypeDecorator):
    impl = String(20)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return None if value is None else SchedulingStatus(value).value

    def process_result_value(self, value, dialect):
        return None if value is None else SchedulingStatus.from_db(value)


class User(Base):
    """An account that provides or books services."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    profile_picture: Mapped[str] = mapped_column(Text, nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    access_level: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.PROVIDER.value
    )
    services: Mapped[list[Service]] = relationship(
        cascade="all, delete-orphan", passive_deletes=True
    )


class Service(Base):
    """A service a user offers."""

    __tablename__ = "services"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Optional[int]] = mapped_column(Integer)
    slug: Mapped[Optional[str]] = mapped_column(Text, unique=True)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    offerings: Mapped[list[Offering]] = relationship(
        cascade="all, delete-orphan", passive_deletes=True
    )


class Offering(Base):
    """A weekly time window in which a service can be booked."""

    __tablename__ = "offerings"

    service_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("services.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    day_of_week: Mapped[DayOfWeek] = mapped_column(_DayOfWeekType(), nullable=False)
    start_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    requires_approval: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    need_contact: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    vacancies: Mapped[list[Vacancy]] = relationship(
        back_populates="offering", cascade="all, delete-orphan", passive_deletes=True
    )


class Vacancy(Base):
    """A concrete slot of an offering with a number of free places."""

    __tablename__ = "vacancies"

    offering_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("offerings.id", ondelete="CASCADE"), nullable=False
    )
    offering: Mapped[Offering] = relationship(back_populates="vacancies")
    start_at: Mapped[datetime] = mapped_column(DateTime(), nullable=False)
    end_at: Mapped[datetime] = mapped_column(DateTime(), nullable=False)
    vacancies: Mapped[int] = mapped_column(Integer, nullable=False)


class RequestingUser(Base):
    """Contact details of someone asking for a booking."""

    __tablename__ = "requesting_users"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone_number: Mapped[str] = mapped_column(Text, nullable=False)


class Scheduling(Base):
    """A booking of a vacancy by a user."""

    __tablename__ = "schedulings"

    vacancy_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("vacancies.id"), nullable=False
    )
    vacancy: Mapped[Vacancy] = relationship()
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    status: Mapped[SchedulingStatus] = mapped_column(
        _SchedulingStatusType(), nullable=False, default=SchedulingStatus.PENDING
    )