from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, relationship

naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    # avoid constraint_name token to allow unnamed CheckConstraint
    "ck": "ck_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=naming_convention)


class Base(DeclarativeBase):
    metadata = metadata


def utc_now() -> datetime:
    return datetime.now(UTC)


class Patient(Base):
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String, nullable=False)
    address = Column(String, nullable=False)
    phone_number = Column(String, nullable=False)
    email = Column(String, nullable=True)
    medical_history = Column(Text, nullable=True)
    allergies = Column(Text, nullable=True)
    current_medications = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    medical_records = relationship(
        "MedicalRecord", back_populates="patient", cascade="all, delete-orphan", passive_deletes=True
    )
    invoices = relationship(
        "Invoice", back_populates="patient", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint("gender in ('Male','Female','Other')", name="ck_patients_gender"),
    )


class StaffMember(Base):
    __tablename__ = "staff"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    phone_number = Column(String, nullable=False)
    email = Column(String, nullable=True)
    address = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    shift_assignments = relationship(
        "ShiftAssignment", back_populates="staff", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint("role in ('Doctor','Nurse','Admin','Technician')", name="ck_staff_role"),
    )


class MedicalRecord(Base):
    __tablename__ = "medical_records"

    id = Column(Integer, primary_key=True)
    patient_id = Column(Integer, ForeignKey("patients.id", ondelete="CASCADE"), nullable=False)
    doctor_notes = Column(Text, nullable=False)
    nurse_notes = Column(Text, nullable=True)
    diagnosis = Column(Text, nullable=False)
    prescription = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    patient = relationship("Patient", back_populates="medical_records")

    __table_args__ = (Index("ix_medical_records_patient_id", "patient_id"),)


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True)
    patient_id = Column(Integer, ForeignKey("patients.id", ondelete="CASCADE"), nullable=False)
    item = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    cost = Column(Float, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    patient = relationship("Patient", back_populates="invoices")

    __table_args__ = (Index("ix_invoices_patient_id", "patient_id"),)


class ShiftAssignment(Base):
    __tablename__ = "shift_assignments"

    id = Column(Integer, primary_key=True)
    staff_id = Column(Integer, ForeignKey("staff.id", ondelete="CASCADE"), nullable=False)
    shift_date = Column(Date, nullable=False)
    shift_kind = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    staff = relationship("StaffMember", back_populates="shift_assignments")

    __table_args__ = (
        CheckConstraint("shift_kind in ('Morning','Afternoon','Night')", name="ck_shift_assignments_shift_kind"),
        Index("ix_shift_assignments_staff_id_shift_date", "staff_id", "shift_date"),
    )
