"""Key-value table backing the assessment record store.

Revision ID: 001_record_store
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op


# revision identifiers, used by Alembic.
revision = '001_record_store'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """One row per collection key; value holds the JSON list."""
    op.execute('''CREATE TABLE IF NOT EXISTS record_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )''')

    op.execute('CREATE INDEX IF NOT EXISTS idx_record_store_updated_at ON record_store(updated_at)')


def downgrade() -> None:
    op.execute('DROP INDEX IF EXISTS idx_record_store_updated_at')
    op.execute('DROP TABLE IF EXISTS record_store')
