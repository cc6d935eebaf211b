"""create shop tables

Revision ID: 7d1e4a2b9c10
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '7d1e4a2b9c10'
down_revision = None
branch_labels = None
depends_on = None

BIGINT = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade():
    op.create_table(
        'shop_user',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(128), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('is_admin', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_table(
        'shop_item',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('image', sa.String(500), nullable=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('available_count', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('price >= 0', name='ck_shop_item_price_non_negative'),
        sa.CheckConstraint('available_count >= 0', name='ck_shop_item_available_count_non_negative'),
    )
    op.create_index('ix_shop_item_category', 'shop_item', ['category'])
    op.create_table(
        'cart_line',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', BIGINT, sa.ForeignKey('shop_user.id'), nullable=False),
        sa.Column('item_id', BIGINT, nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('added_at', sa.DateTime(), nullable=True),
        sa.Column('last_updated', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('user_id', 'item_id', name='uq_cart_line_user_item'),
        sa.CheckConstraint('quantity >= 1', name='ck_cart_line_quantity_positive'),
    )
    op.create_table(
        'shop_order',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('user_id', BIGINT, sa.ForeignKey('shop_user.id'), nullable=False),
        sa.Column('total_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('shipping_address', sa.String(255), nullable=False),
        sa.Column('shipping_city', sa.String(100), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_shop_order_user_created', 'shop_order', ['user_id', 'created_at'])
    op.create_table(
        'order_item',
        sa.Column('id', BIGINT, primary_key=True),
        sa.Column('order_id', BIGINT, sa.ForeignKey('shop_order.id'), nullable=False),
        sa.Column('item_id', BIGINT, nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('price', sa.Numeric(12, 4), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
    )


def downgrade():
    op.drop_table('order_item')
    op.drop_index('ix_shop_order_user_created', table_name='shop_order')
    op.drop_table('shop_order')
    op.drop_table('cart_line')
    op.drop_index('ix_shop_item_category', table_name='shop_item')
    op.drop_table('shop_item')
    op.drop_table('shop_user')
