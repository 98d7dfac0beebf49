"""Entity permission grants and creator rights revocations.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "entity_permission_grant",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("entity_type", sa.String(20), nullable=False),
        sa.Column("entity_id", sa.UUID(), nullable=False),
        sa.Column("subject_type", sa.String(20), nullable=False),
        sa.Column("subject_id", sa.UUID(), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("granted_by", sa.UUID(), nullable=False),
        sa.Column("granted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("revoked_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint(
            "entity_type IN ('track', 'subtrack')", name="ck_grant_entity_type"
        ),
        sa.CheckConstraint(
            "subject_type IN ('user', 'group')", name="ck_grant_subject_type"
        ),
        sa.CheckConstraint(
            "role IN ('editor', 'commenter', 'viewer')", name="ck_grant_role_not_owner"
        ),
    )
    # One active grant per entity and subject; revoked rows are kept for audit.
    op.create_index(
        "uq_grant_active_subject",
        "entity_permission_grant",
        ["entity_type", "entity_id", "subject_type", "subject_id"],
        unique=True,
        postgresql_where=sa.text("revoked_at IS NULL"),
    )
    op.create_index(
        "ix_grant_entity",
        "entity_permission_grant",
        ["entity_type", "entity_id"],
    )
    op.create_index(
        "ix_grant_subject",
        "entity_permission_grant",
        ["subject_type", "subject_id"],
    )

    op.create_table(
        "creator_rights_revocation",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("entity_type", sa.String(20), nullable=False),
        sa.Column("entity_id", sa.UUID(), nullable=False),
        sa.Column("creator_user_id", sa.UUID(), nullable=False),
        sa.Column("revoked_by", sa.UUID(), nullable=False),
        sa.Column("revoked_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "entity_type IN ('track', 'subtrack')", name="ck_revocation_entity_type"
        ),
        sa.UniqueConstraint(
            "entity_type", "entity_id", "creator_user_id", name="uq_revocation_creator"
        ),
    )


def downgrade() -> None:
    op.drop_table("creator_rights_revocation")
    op.drop_index("ix_grant_subject", table_name="entity_permission_grant")
    op.drop_index("ix_grant_entity", table_name="entity_permission_grant")
    op.drop_index("uq_grant_active_subject", table_name="entity_permission_grant")
    op.drop_table("entity_permission_grant")
