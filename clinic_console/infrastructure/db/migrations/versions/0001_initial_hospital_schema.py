"""Initial hospital schema: patients, staff, records, invoices, shifts"""
from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_initial_hospital_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "patients",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("gender", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("phone_number", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("medical_history", sa.Text(), nullable=True),
        sa.Column("allergies", sa.Text(), nullable=True),
        sa.Column("current_medications", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("(CURRENT_TIMESTAMP)")),
        sa.CheckConstraint("gender in ('Male','Female','Other')", name="ck_patients_gender"),
    )

    op.create_table(
        "staff",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False),
        sa.Column("phone_number", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("(CURRENT_TIMESTAMP)")),
        sa.CheckConstraint("role in ('Doctor','Nurse','Admin','Technician')", name="ck_staff_role"),
    )

    op.create_table(
        "medical_records",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "patient_id",
            sa.Integer(),
            sa.ForeignKey("patients.id", ondelete="CASCADE", name="fk_medical_records_patient_id_patients"),
            nullable=False,
        ),
        sa.Column("doctor_notes", sa.Text(), nullable=False),
        sa.Column("nurse_notes", sa.Text(), nullable=True),
        sa.Column("diagnosis", sa.Text(), nullable=False),
        sa.Column("prescription", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("(CURRENT_TIMESTAMP)")),
    )

    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "patient_id",
            sa.Integer(),
            sa.ForeignKey("patients.id", ondelete="CASCADE", name="fk_invoices_patient_id_patients"),
            nullable=False,
        ),
        sa.Column("item", sa.String(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("cost", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("(CURRENT_TIMESTAMP)")),
    )

    op.create_table(
        "shift_assignments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "staff_id",
            sa.Integer(),
            sa.ForeignKey("staff.id", ondelete="CASCADE", name="fk_shift_assignments_staff_id_staff"),
            nullable=False,
        ),
        sa.Column("shift_date", sa.Date(), nullable=False),
        sa.Column("shift_kind", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.text("(CURRENT_TIMESTAMP)")),
        sa.CheckConstraint(
            "shift_kind in ('Morning','Afternoon','Night')",
            name="ck_shift_assignments_shift_kind",
        ),
    )

    op.create_index("ix_medical_records_patient_id", "medical_records", ["patient_id"], unique=False)
    op.create_index("ix_invoices_patient_id", "invoices", ["patient_id"], unique=False)
    op.create_index(
        "ix_shift_assignments_staff_id_shift_date",
        "shift_assignments",
        ["staff_id", "shift_date"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_shift_assignments_staff_id_shift_date", table_name="shift_assignments")
    op.drop_index("ix_invoices_patient_id", table_name="invoices")
    op.drop_index("ix_medical_records_patient_id", table_name="medical_records")
    op.drop_table("shift_assignments")
    op.drop_table("invoices")
    op.drop_table("medical_records")
    op.drop_table("staff")
    op.drop_table("patients")
