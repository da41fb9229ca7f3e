"""SQLAlchemy table definitions for the civic backend.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from civic.domain.repository.constraint import (
    PENDING_JOIN_REQUEST,
    PENDING_ROLE_CHANGE_REQUEST,
    VOTE_SUBJECT_VOTER,
)

# Metadata object for all tables
metadata = MetaData()

subject_type_enum = Enum("issue", "group", name="subject_type", create_type=False)

# ============================================================================
# ROLES TABLE
# ============================================================================
roles_table = Table(
    "roles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(100), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    Column("upvote_weight", Integer, nullable=False, server_default="1"),
    CheckConstraint("upvote_weight >= 1", name="check_upvote_weight_positive"),
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(100), nullable=False, unique=True),
    Column("full_name", String(200), nullable=False, server_default=""),
    Column("email", String(255), nullable=True),
    Column("role_id", UUID, ForeignKey("roles.id"), nullable=False),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_role_id", users_table.c.role_id)

# ============================================================================
# GROUPS TABLE
# ============================================================================
groups_table = Table(
    "groups",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("issue_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvote_count >= 0", name="check_group_upvote_count"),
    CheckConstraint("comment_count >= 0", name="check_group_comment_count"),
    CheckConstraint("issue_count >= 0", name="check_group_issue_count"),
)

Index("idx_groups_owner_id", groups_table.c.owner_id)

# ============================================================================
# ISSUES TABLE
# ============================================================================
issues_table = Table(
    "issues",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "group_id", UUID, ForeignKey("groups.id", ondelete="SET NULL"), nullable=True
    ),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "posted_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvote_count >= 0", name="check_issue_upvote_count"),
    CheckConstraint("comment_count >= 0", name="check_issue_comment_count"),
)

Index("idx_issues_owner_id", issues_table.c.owner_id)
Index("idx_issues_group_id", issues_table.c.group_id)

# ============================================================================
# COMMENTS TABLE (polymorphic subject)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("subject_type", subject_type_enum, nullable=False),
    Column("subject_id", UUID, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "posted_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_subject", comments_table.c.subject_type, comments_table.c.subject_id
)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# VOTES TABLE (polymorphic subject, weighted)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("subject_type", subject_type_enum, nullable=False),
    Column("subject_id", UUID, nullable=False),
    # Not a foreign key: votes survive deletion of their voter
    Column("voter_id", UUID, nullable=False),
    Column("weight", Integer, nullable=False),
    Column(
        "cast_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "subject_type", "subject_id", "voter_id", name=VOTE_SUBJECT_VOTER
    ),
    CheckConstraint("weight >= 1", name="check_vote_weight_positive"),
)

Index("idx_votes_subject", votes_table.c.subject_type, votes_table.c.subject_id)
Index("idx_votes_voter_id", votes_table.c.voter_id)

# ============================================================================
# GROUP JOIN REQUESTS TABLE
# ============================================================================
group_join_requests_table = Table(
    "group_join_requests",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "issue_id", UUID, ForeignKey("issues.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "group_id", UUID, ForeignKey("groups.id", ondelete="CASCADE"), nullable=False
    ),
    Column("initiated_by_group", Boolean, nullable=False),
    Column(
        "status",
        Enum(
            "pending",
            "approved",
            "declined",
            "cancelled",
            name="join_request_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "requested_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("handled_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "(status = 'pending') = (handled_at IS NULL)",
        name="check_join_request_handled_at",
    ),
)

Index("idx_group_join_requests_issue_id", group_join_requests_table.c.issue_id)
Index("idx_group_join_requests_group_id", group_join_requests_table.c.group_id)

# Only one pending request per (issue, group) pair
Index(
    PENDING_JOIN_REQUEST,
    group_join_requests_table.c.issue_id,
    group_join_requests_table.c.group_id,
    unique=True,
    postgresql_where=group_join_requests_table.c.status == "pending",
)

# ============================================================================
# ROLE CHANGE REQUESTS TABLE
# ============================================================================
role_change_requests_table = Table(
    "role_change_requests",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("requested_role_id", UUID, ForeignKey("roles.id"), nullable=False),
    Column(
        "status",
        Enum(
            "pending",
            "approved",
            "rejected",
            name="role_change_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "submitted_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "reviewer_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
)

# Only one pending request per user
Index(
    PENDING_ROLE_CHANGE_REQUEST,
    role_change_requests_table.c.user_id,
    unique=True,
    postgresql_where=role_change_requests_table.c.status == "pending",
)
