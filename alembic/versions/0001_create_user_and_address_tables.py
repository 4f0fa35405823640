"""create_user_and_address_tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00.000000

사용자/주소 테이블 생성: address_table, user_table.
Create user and address tables: address_table, user_table.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # address_table: 사용자 소유 주소 (Address owned by exactly one user)
    op.create_table(
        'address_table',
        sa.Column('id', sa.Integer(), sa.Identity(), primary_key=True),
        sa.Column('street', sa.String(200), nullable=True),
        sa.Column('city', sa.String(100), nullable=True),
        sa.Column('state', sa.String(100), nullable=True),
        sa.Column('country', sa.String(100), nullable=True),
        sa.Column('zipcode', sa.String(20), nullable=True),
    )

    # user_table: 사용자 계정, 이메일 고유 제약 없음 (No unique constraint on email)
    op.create_table(
        'user_table',
        sa.Column('id', sa.Integer(), sa.Identity(), primary_key=True),
        sa.Column('keycloak_id', sa.String(100), nullable=True),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('email', sa.String(100), nullable=True),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('role', sa.String(20), server_default='CUSTOMER', nullable=False),
        sa.Column('address_id', sa.Integer(), sa.ForeignKey('address_table.id'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        # 사용자당 주소 최대 1개 (At most one user per address row)
        sa.UniqueConstraint('address_id', name='uq_user_table_address_id'),
    )


def downgrade() -> None:
    # 외래키 순서대로 삭제 (Drop in foreign key order)
    op.drop_table('user_table')
    op.drop_table('address_table')
