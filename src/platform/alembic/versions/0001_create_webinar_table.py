"""create_webinar_table

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- webinar: Webinars with organizer, schedule and seat capacity (1..1000)
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the webinar table."""
    op.create_table(
        'webinar',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('organizer_id', sa.String(length=64), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('seats', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint('seats >= 1 AND seats <= 1000', name='ck_webinar_seats_range'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_webinar_organizer_id'), 'webinar', ['organizer_id'], unique=False)


def downgrade() -> None:
    """Drop the webinar table."""
    op.drop_index(op.f('ix_webinar_organizer_id'), table_name='webinar')
    op.drop_table('webinar')
