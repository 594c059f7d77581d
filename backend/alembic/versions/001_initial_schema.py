"""Create extension_documents table for the document store.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

One JSON document per (collection, document_id), with an integer etag
for optimistic concurrency.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'extension_documents',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('collection', sa.String(100), nullable=False),
        sa.Column('document_id', sa.String(200), nullable=False),
        sa.Column('etag', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('body', sa.JSON(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint(
            'collection', 'document_id', name='uq_extension_documents_key',
        ),
    )
    op.create_index(
        'ix_extension_documents_collection', 'extension_documents', ['collection'],
    )


def downgrade() -> None:
    op.drop_index('ix_extension_documents_collection', table_name='extension_documents')
    op.drop_table('extension_documents')
