from alembic import op
import sqlalchemy as sa

revision = '0001_feedback'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'feedback',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('source', sa.String(), nullable=False),
        sa.Column('timestamp', sa.String(), nullable=False),
        sa.Column('created_at', sa.String(), nullable=False),
        sa.Column('theme', sa.String(), nullable=False),
        sa.Column('urgency', sa.String(), nullable=False),
        sa.Column('severity', sa.String(), nullable=False),
        sa.Column('sentiment', sa.String(), nullable=False),
        sa.Column('escalated', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_feedback_id', 'feedback', ['id'])
    op.create_index('ix_feedback_theme', 'feedback', ['theme'])

def downgrade():
    op.drop_index('ix_feedback_theme', table_name='feedback')
    op.drop_index('ix_feedback_id', table_name='feedback')
    op.drop_table('feedback')
