"""initial schema

Revision ID: 20261019_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000

Creates the registration schema from scratch:
- users, locations, purposes: plain name lists for the registration form
- categories: product grouping
- products: product master with QR code and optional attachment
- registrations: append-only usage history (names stored as text)
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20261019_initial'
down_revision = None
branch_labels = None
depends_on = None


def _name_list(table_name):
    op.create_table(
        table_name,
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
        sqlite_autoincrement=True
    )


def upgrade():
    # ============================================================================
    # Reference lists
    # ============================================================================
    _name_list('users')
    _name_list('locations')
    _name_list('purposes')

    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
        sqlite_autoincrement=True
    )

    # ============================================================================
    # products: category_id is a weak reference (no foreign key)
    # ============================================================================
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('qr_code', sa.String(length=64), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('attachment_url', sa.String(length=1024), nullable=True),
        sa.Column('attachment_name', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True
    )
    op.create_index('ix_products_name', 'products', ['name'], unique=False)
    op.create_index('ix_products_qr_code', 'products', ['qr_code'], unique=False)

    # ============================================================================
    # registrations: append-only history
    # ============================================================================
    op.create_table(
        'registrations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_name', sa.String(length=255), nullable=False),
        sa.Column('product_name', sa.String(length=255), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('purpose', sa.String(length=255), nullable=False),
        sa.Column('occurred_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('date', sa.String(length=10), nullable=False),
        sa.Column('time', sa.String(length=8), nullable=False),
        sa.Column('qr_code', sa.String(length=64), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True
    )
    op.create_index('ix_registrations_user', 'registrations', ['user_name'], unique=False)
    op.create_index('ix_registrations_location', 'registrations', ['location'], unique=False)
    op.create_index('ix_registrations_occurred_at', 'registrations', ['occurred_at'], unique=False)


def downgrade():
    op.drop_index('ix_registrations_occurred_at', table_name='registrations')
    op.drop_index('ix_registrations_location', table_name='registrations')
    op.drop_index('ix_registrations_user', table_name='registrations')
    op.drop_table('registrations')
    op.drop_index('ix_products_qr_code', table_name='products')
    op.drop_index('ix_products_name', table_name='products')
    op.drop_table('products')
    op.drop_table('categories')
    op.drop_table('purposes')
    op.drop_table('locations')
    op.drop_table('users')
