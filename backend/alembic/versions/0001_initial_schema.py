"""Initial hotel inventory and reservation schema.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "properties",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False, unique=True),
        sa.Column("timezone", sa.String(length=64), nullable=False),
        sa.Column("check_in_time", sa.Time()),
        sa.Column("check_out_time", sa.Time()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        "room_types",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "property_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("properties.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("description", sa.String(length=1024)),
        sa.Column("base_rate", sa.Numeric(10, 2), nullable=False),
        sa.Column("max_occupancy", sa.Integer(), nullable=False, server_default="2"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index("ix_room_types_property", "room_types", ["property_id"])

    room_status_enum = sa.Enum(
        "AVAILABLE",
        "OCCUPIED",
        "CLEANING",
        "MAINTENANCE",
        "OUT_OF_ORDER",
        name="roomstatus",
    )
    op.create_table(
        "rooms",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "property_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("properties.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "room_type_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("room_types.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("room_number", sa.String(length=32), nullable=False),
        sa.Column("status", room_status_enum, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.UniqueConstraint("property_id", "room_number", name="uq_rooms_property_number"),
    )

    reservation_status_enum = sa.Enum(
        "PENDING",
        "PROVISIONAL",
        "CONFIRMED",
        "CHECKED_IN",
        "CHECKED_OUT",
        "CANCELLED",
        "NO_SHOW",
        name="reservationstatus",
    )
    op.create_table(
        "reservations",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "property_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("properties.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("status", reservation_status_enum, nullable=False),
        sa.Column("check_in_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("check_out_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("guest_name", sa.String(length=255)),
        sa.Column("guest_email", sa.String(length=255)),
        *_timestamps(),
    )
    op.create_index(
        "ix_reservations_property_dates",
        "reservations",
        ["property_id", "check_in_date", "check_out_date"],
    )

    op.create_table(
        "reservation_rooms",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "reservation_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("reservations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "room_type_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("room_types.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "room_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("rooms.id", ondelete="SET NULL"),
        ),
        *_timestamps(),
    )
    op.create_index(
        "ix_reservation_rooms_room_type", "reservation_rooms", ["room_type_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_reservation_rooms_room_type", table_name="reservation_rooms")
    op.drop_table("reservation_rooms")

    op.drop_index("ix_reservations_property_dates", table_name="reservations")
    op.drop_table("reservations")
    sa.Enum(name="reservationstatus").drop(op.get_bind(), checkfirst=True)

    op.drop_table("rooms")
    sa.Enum(name="roomstatus").drop(op.get_bind(), checkfirst=True)

    op.drop_index("ix_room_types_property", table_name="room_types")
    op.drop_table("room_types")
    op.drop_table("properties")
