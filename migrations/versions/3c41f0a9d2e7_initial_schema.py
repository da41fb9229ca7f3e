"""initial_schema

Create the schema for the civic backend:
- Roles (vote weight per role)
- Users (role assignment, administrator flag)
- Groups and Issues (denormalized vote/comment/issue counters)
- Comments and Votes (polymorphic over issue/group)
- Group join requests (one pending request per issue/group pair)
- Role change requests (one pending request per user)

Revision ID: 3c41f0a9d2e7
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41f0a9d2e7"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUM_TYPES = {
    "subject_type": ("issue", "group"),
    "join_request_status": ("pending", "approved", "declined", "cancelled"),
    "role_change_status": ("pending", "approved", "rejected"),
}


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp_column(name: str, nullable: bool = False) -> sa.Column:
    if nullable:
        return sa.Column(name, sa.TIMESTAMP(timezone=True), nullable=True)
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in ENUM_TYPES.items():
        labels = ", ".join(f"'{v}'" for v in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    subject_type = postgresql.ENUM(
        *ENUM_TYPES["subject_type"], name="subject_type", create_type=False
    )

    # ========================================================================
    # ROLES table
    # ========================================================================
    op.create_table(
        "roles",
        _id_column(),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("upvote_weight", sa.Integer(), nullable=False, server_default="1"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("title", name="uq_role_title"),
        sa.CheckConstraint("upvote_weight >= 1", name="check_upvote_weight_positive"),
    )

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("full_name", sa.String(200), nullable=False, server_default=""),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("role_id", sa.UUID(), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_user_username"),
    )
    op.create_index("idx_users_role_id", "users", ["role_id"])

    # ========================================================================
    # GROUPS table
    # ========================================================================
    op.create_table(
        "groups",
        _id_column(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("upvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("issue_count", sa.Integer(), nullable=False, server_default="0"),
        _timestamp_column("created_at"),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvote_count >= 0", name="check_group_upvote_count"),
        sa.CheckConstraint("comment_count >= 0", name="check_group_comment_count"),
        sa.CheckConstraint("issue_count >= 0", name="check_group_issue_count"),
    )
    op.create_index("idx_groups_owner_id", "groups", ["owner_id"])

    # ========================================================================
    # ISSUES table
    # ========================================================================
    op.create_table(
        "issues",
        _id_column(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("group_id", sa.UUID(), nullable=True),
        sa.Column("upvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        _timestamp_column("posted_at"),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvote_count >= 0", name="check_issue_upvote_count"),
        sa.CheckConstraint("comment_count >= 0", name="check_issue_comment_count"),
    )
    op.create_index("idx_issues_owner_id", "issues", ["owner_id"])
    op.create_index("idx_issues_group_id", "issues", ["group_id"])

    # ========================================================================
    # COMMENTS table (polymorphic subject)
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("subject_type", subject_type, nullable=False),
        sa.Column("subject_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _timestamp_column("posted_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_subject", "comments", ["subject_type", "subject_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    # ========================================================================
    # VOTES table (polymorphic subject, weighted)
    # ========================================================================
    op.create_table(
        "votes",
        _id_column(),
        sa.Column("subject_type", subject_type, nullable=False),
        sa.Column("subject_id", sa.UUID(), nullable=False),
        sa.Column("voter_id", sa.UUID(), nullable=False),
        sa.Column("weight", sa.Integer(), nullable=False),
        _timestamp_column("cast_at"),
        sa.ForeignKeyConstraint(["voter_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "subject_type", "subject_id", "voter_id", name="uq_vote_subject_voter"
        ),
        sa.CheckConstraint("weight >= 1", name="check_vote_weight_positive"),
    )
    op.create_index("idx_votes_subject", "votes", ["subject_type", "subject_id"])

    # ========================================================================
    # GROUP_JOIN_REQUESTS table
    # ========================================================================
    op.create_table(
        "group_join_requests",
        _id_column(),
        sa.Column("issue_id", sa.UUID(), nullable=False),
        sa.Column("group_id", sa.UUID(), nullable=False),
        sa.Column("initiated_by_group", sa.Boolean(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                *ENUM_TYPES["join_request_status"],
                name="join_request_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        _timestamp_column("requested_at"),
        _timestamp_column("handled_at", nullable=True),
        sa.ForeignKeyConstraint(["issue_id"], ["issues.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "(status = 'pending') = (handled_at IS NULL)",
            name="check_join_request_handled_at",
        ),
    )
    op.create_index(
        "idx_group_join_requests_issue_id", "group_join_requests", ["issue_id"]
    )
    op.create_index(
        "idx_group_join_requests_group_id", "group_join_requests", ["group_id"]
    )
    op.create_index(
        "idx_group_join_requests_unique_pending",
        "group_join_requests",
        ["issue_id", "group_id"],
        unique=True,
        postgresql_where=sa.text("status = 'pending'"),
    )

    # ========================================================================
    # ROLE_CHANGE_REQUESTS table
    # ========================================================================
    op.create_table(
        "role_change_requests",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("requested_role_id", sa.UUID(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                *ENUM_TYPES["role_change_status"],
                name="role_change_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        _timestamp_column("submitted_at"),
        _timestamp_column("reviewed_at", nullable=True),
        sa.Column("reviewer_id", sa.UUID(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["requested_role_id"], ["roles.id"]),
        sa.ForeignKeyConstraint(["reviewer_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_role_change_requests_unique_pending_user",
        "role_change_requests",
        ["user_id"],
        unique=True,
        postgresql_where=sa.text("status = 'pending'"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("role_change_requests")
    op.drop_table("group_join_requests")
    op.drop_table("votes")
    op.drop_table("comments")
    op.drop_table("issues")
    op.drop_table("groups")
    op.drop_table("users")
    op.drop_table("roles")

    for name in reversed(list(ENUM_TYPES)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
