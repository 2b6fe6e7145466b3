"""
Add StoredValue table holding the JSON collections
"""
from alembic import op
import sqlalchemy as sa

revision = 'add_stored_value_table'
down_revision = None

def upgrade():
    op.create_table(
        'stored_value',
        sa.Column('key', sa.String(length=128), primary_key=True),
        sa.Column('value', sa.Text(), nullable=False)
    )

def downgrade():
    op.drop_table('stored_value')
