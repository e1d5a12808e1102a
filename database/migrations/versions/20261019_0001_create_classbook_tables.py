"""create classbook tables

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from alembic import op
import sqlalchemy as sa

revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def _id_column() -> sa.Column:
    return sa.Column("id", sa.String(length=36), primary_key=True, nullable=False)


def _timestamp(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True)


def upgrade() -> None:
    op.create_table(
        "ledger_entries",
        _id_column(),
        sa.Column("booking_date", sa.String(length=10), nullable=False),
        sa.Column("room_number", sa.String(length=50), nullable=False),
        sa.Column("time_slot", sa.String(length=11), nullable=False),
        sa.Column("batch_name", sa.String(length=100), nullable=True),
        sa.Column("teacher_name", sa.String(length=200), nullable=True),
        sa.Column("course_name", sa.String(length=200), nullable=True),
        _timestamp("created_at"),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("booking_date", "room_number", "time_slot", name="uq_ledger_cell"),
    )
    op.create_index("ix_ledger_entries_booking_date", "ledger_entries", ["booking_date"])

    op.create_table(
        "teachers",
        _id_column(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("department", sa.String(length=200), nullable=False),
        sa.Column("subjects", sa.JSON(), nullable=False),
        _timestamp("joined_at"),
    )
    op.create_index("ix_teachers_email", "teachers", ["email"])

    op.create_table(
        "students",
        _id_column(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("batch", sa.String(length=100), nullable=False),
        sa.Column("enrollment_number", sa.String(length=100), nullable=False),
        _timestamp("joined_at"),
    )
    op.create_index("ix_students_email", "students", ["email"])
    op.create_index("ix_students_batch", "students", ["batch"])

    op.create_table(
        "subjects",
        _id_column(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("department", sa.String(length=200), nullable=False),
        sa.Column("credits", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _timestamp("created_at"),
    )
    op.create_index("ix_subjects_code", "subjects", ["code"])

    op.create_table(
        "rooms",
        _id_column(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("number", sa.String(length=20), nullable=False),
        sa.Column("floor", sa.String(length=20), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        _timestamp("created_at"),
    )
    op.create_index("ix_rooms_number", "rooms", ["number"])

    op.create_table(
        "floors",
        _id_column(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("number", sa.String(length=20), nullable=False),
        sa.Column("building", sa.String(length=200), nullable=False),
        _timestamp("created_at"),
    )

    op.create_table(
        "announcements",
        _id_column(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("teacher_name", sa.String(length=200), nullable=True),
        sa.Column("batch_name", sa.String(length=100), nullable=True),
        _timestamp("created_at"),
    )
    op.create_index("ix_announcements_date", "announcements", ["date"])

    op.create_table(
        "announcement_replies",
        _id_column(),
        sa.Column(
            "announcement_id",
            sa.String(length=36),
            sa.ForeignKey("announcements.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author", sa.String(length=20), nullable=False),
        sa.Column("author_name", sa.String(length=200), nullable=False),
        _timestamp("created_at"),
    )
    op.create_index("ix_announcement_replies_announcement_id", "announcement_replies", ["announcement_id"])

    op.create_table(
        "study_materials",
        _id_column(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("file_url", sa.String(length=500), nullable=False),
        sa.Column("file_name", sa.String(length=255), nullable=False),
        sa.Column("file_type", sa.String(length=100), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("uploaded_by", sa.String(length=200), nullable=False),
        sa.Column("subject", sa.String(length=200), nullable=True),
        sa.Column("batch", sa.String(length=100), nullable=True),
        _timestamp("uploaded_at"),
    )
    op.create_index("ix_study_materials_subject", "study_materials", ["subject"])


def downgrade() -> None:
    op.drop_index("ix_study_materials_subject", table_name="study_materials")
    op.drop_table("study_materials")
    op.drop_index("ix_announcement_replies_announcement_id", table_name="announcement_replies")
    op.drop_table("announcement_replies")
    op.drop_index("ix_announcements_date", table_name="announcements")
    op.drop_table("announcements")
    op.drop_table("floors")
    op.drop_index("ix_rooms_number", table_name="rooms")
    op.drop_table("rooms")
    op.drop_index("ix_subjects_code", table_name="subjects")
    op.drop_table("subjects")
    op.drop_index("ix_students_batch", table_name="students")
    op.drop_index("ix_students_email", table_name="students")
    op.drop_table("students")
    op.drop_index("ix_teachers_email", table_name="teachers")
    op.drop_table("teachers")
    op.drop_index("ix_ledger_entries_booking_date", table_name="ledger_entries")
    op.drop_table("ledger_entries")
