"""
Add AuditLog table
"""
from alembic import op
import sqlalchemy as sa

revision = 'add_audit_log_table'
down_revision = 'add_stored_value_table'

def upgrade():
    op.create_table(
        'audit_log',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('actor', sa.String(length=128), nullable=True),
        sa.Column('action', sa.String(length=256), nullable=False),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=True)
    )

def downgrade():
    op.drop_table('audit_log')
