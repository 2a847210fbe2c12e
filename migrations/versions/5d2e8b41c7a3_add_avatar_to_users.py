"""add avatar to users

Revision ID: 5d2e8b41c7a3
Revises: 3c1f7a2d9b10
Create Date: 2026-10-19 09:41:02.771530

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5d2e8b41c7a3"
down_revision: Union[str, Sequence[str], None] = "3c1f7a2d9b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column("users", sa.Column("avatar", sa.String(500), nullable=True))


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_column("users", "avatar")
