"""Initial forum schema

Revision ID: 001_initial_forum
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial_forum'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# (table, column) pairs carrying a non-unique index
INDEXES = [
    ('users', 'follower_count'),
    ('users', 'created_at'),
    ('questions', 'user_id'),
    ('questions', 'answer_count'),
    ('questions', 'vote_count'),
    ('questions', 'created_at'),
    ('questions', 'updated_at'),
    ('answers', 'question_id'),
    ('answers', 'user_id'),
    ('answers', 'vote_count'),
    ('answers', 'created_at'),
    ('comments', 'commentable_type'),
    ('comments', 'commentable_id'),
    ('comments', 'user_id'),
    ('comments', 'created_at'),
    ('votes', 'user_id'),
    ('votes', 'votable_type'),
    ('votes', 'votable_id'),
    ('votes', 'created_at'),
]


def upgrade() -> None:
    """
    Create the forum tables:
    - users, questions, answers
    - comments and votes (polymorphic on question/answer)
    """
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('headline', sa.String(length=200), nullable=True),
        sa.Column('follower_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'questions',
        sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=80), nullable=False),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        sa.Column('answer_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('vote_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'answers',
        sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
        sa.Column('question_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('vote_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'comments',
        sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
        sa.Column('commentable_type', sa.String(length=20), nullable=False),
        sa.Column('commentable_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'votes',
        sa.Column('id', sa.Integer(), nullable=False, autoincrement=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('votable_type', sa.String(length=20), nullable=False),
        sa.Column('votable_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=10), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    for table, column in INDEXES:
        op.create_index(f'ix_{table}_{column}', table, [column])


def downgrade() -> None:
    for table, column in reversed(INDEXES):
        op.drop_index(f'ix_{table}_{column}', table_name=table)
    op.drop_index('ix_users_username', table_name='users')

    for table in ('votes', 'comments', 'answers', 'questions', 'users'):
        op.drop_table(table)
