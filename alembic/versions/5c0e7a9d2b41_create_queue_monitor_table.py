"""Create queue_monitor table

Revision ID: 5c0e7a9d2b41
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c0e7a9d2b41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the job execution record table."""
    op.create_table(
        'queue_monitor',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('job_id', sa.String(), nullable=True),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('queue', sa.String(), nullable=False),
        sa.Column('started_at', sa.DateTime(), nullable=False),
        sa.Column('finished_at', sa.DateTime(), nullable=True),
        sa.Column('time_elapsed', sa.Float(), nullable=True),
        sa.Column('failed', sa.Boolean(), nullable=False, server_default='0'),
        sa.Column('attempt', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('progress', sa.Integer(), nullable=True),
        sa.Column('exception_message', sa.Text(), nullable=True),
        sa.Column('data', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_queue_monitor_job_id', 'queue_monitor', ['job_id'])
    op.create_index('ix_queue_monitor_queue', 'queue_monitor', ['queue'])
    op.create_index('ix_queue_monitor_started_at', 'queue_monitor', ['started_at'])


def downgrade() -> None:
    """Remove the job execution record table."""
    op.drop_index('ix_queue_monitor_started_at', table_name='queue_monitor')
    op.drop_index('ix_queue_monitor_queue', table_name='queue_monitor')
    op.drop_index('ix_queue_monitor_job_id', table_name='queue_monitor')
    op.drop_table('queue_monitor')
