"""seed_default_role

Every user needs a role; registration assigns "Citizen" (weight 1).

Revision ID: 9b7d25e4c1f0
Revises: 3c41f0a9d2e7
Create Date: 2026-10-18 10:31:02.114590

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "9b7d25e4c1f0"
down_revision: Union[str, Sequence[str], None] = "3c41f0a9d2e7"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Insert the default role."""
    op.execute("""
        INSERT INTO roles (title, description, upvote_weight)
        VALUES ('Citizen', 'Default role for all registered users', 1)
        ON CONFLICT (title) DO NOTHING
    """)


def downgrade() -> None:
    """Remove the default role."""
    op.execute("DELETE FROM roles WHERE title = 'Citizen'")
