"""initial

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_init'
down_revision = None
branch_labels = None
depends_on = None


def _user_look_table(name: str) -> None:
    op.create_table(name,
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('look_id', sa.Integer(), sa.ForeignKey('looks.id', ondelete='CASCADE'), primary_key=True),
    )


def upgrade() -> None:
    op.create_table('users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.Text(), nullable=True, unique=True),
        sa.Column('name', sa.Text(), nullable=True),
        sa.Column('sex', sa.String(length=16), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
    )
    op.create_table('wardrobe_categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('slug', sa.String(length=200), nullable=False, unique=True),
        sa.Column('parent_category', sa.String(length=200), nullable=True),
    )
    op.create_table('wardrobe_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('slug', sa.String(length=200), nullable=False),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('sex', sa.String(length=16), nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('wardrobe_categories.id', ondelete='SET NULL'), nullable=True),
    )
    op.create_table('looks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('slug', sa.String(length=200), nullable=False, unique=True),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('desc', sa.Text(), nullable=True),
        sa.Column('sex', sa.String(length=16), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()')),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_looks_sex', 'looks', ['sex'])
    op.create_table('categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('slug', sa.String(length=200), nullable=False, unique=True),
    )
    op.create_table('look_items',
        sa.Column('look_id', sa.Integer(), sa.ForeignKey('looks.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('wardrobe_item_id', sa.Integer(), sa.ForeignKey('wardrobe_items.id', ondelete='CASCADE'), primary_key=True),
    )
    op.create_table('look_categories',
        sa.Column('look_id', sa.Integer(), sa.ForeignKey('looks.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id', ondelete='CASCADE'), primary_key=True),
    )
    op.create_table('users_wardrobe',
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('wardrobe_item_id', sa.Integer(), sa.ForeignKey('wardrobe_items.id', ondelete='CASCADE'), primary_key=True),
    )
    for name in ('saved_looks', 'liked_looks', 'disliked_looks'):
        _user_look_table(name)


def downgrade() -> None:
    for name in ('disliked_looks', 'liked_looks', 'saved_looks', 'users_wardrobe', 'look_categories', 'look_items'):
        op.drop_table(name)
    op.drop_table('categories')
    op.drop_index('ix_looks_sex', table_name='looks')
    op.drop_table('looks')
    op.drop_table('wardrobe_items')
    op.drop_table('wardrobe_categories')
    op.drop_table('users')
