"""votes_outlive_voter

Drop the votes -> users foreign key. Deleting a user no longer cascades
into the vote ledger, so stored weights keep matching upvote_count, and a
vote from a user without a row is recorded at the default weight.

Revision ID: d4a81c6e2b57
Revises: 9b7d25e4c1f0
Create Date: 2026-10-18 16:02:47.530118

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "d4a81c6e2b57"
down_revision: Union[str, Sequence[str], None] = "9b7d25e4c1f0"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Drop the voter foreign key."""
    op.drop_constraint("votes_voter_id_fkey", "votes", type_="foreignkey")
    op.create_index("idx_votes_voter_id", "votes", ["voter_id"])


def downgrade() -> None:
    """Restore the voter foreign key, discarding votes by deleted users."""
    op.drop_index("idx_votes_voter_id", table_name="votes")
    op.execute("DELETE FROM votes WHERE voter_id NOT IN (SELECT id FROM users)")
    op.create_foreign_key(
        "votes_voter_id_fkey",
        "votes",
        "users",
        ["voter_id"],
        ["id"],
        ondelete="CASCADE",
    )
