"""Add job posting and application tracker tables

Revision ID: 0001
Revises:
Create Date: 2025-01-01

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
    # Create job_postings table
    op.create_table(
        'job_postings',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('company', sa.String(length=100), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('salary', sa.String(length=255), nullable=False, default=''),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('experience', sa.String(length=50), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('skills', sa.JSON(), nullable=False),
        sa.Column('posted_by', sa.String(length=255), nullable=False),
        sa.Column('logo', sa.String(length=255), nullable=False, default=''),
        sa.Column('saved_by', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_job_postings_company', 'job_postings', ['company'], unique=False)
    op.create_index('ix_job_postings_posted_by', 'job_postings', ['posted_by'], unique=False)
    op.create_index('ix_job_postings_created_at', 'job_postings', ['created_at'], unique=False)

    # Create job_applications table; job_id is a reference without a foreign key
    op.create_table(
        'job_applications',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('job_id', sa.String(length=32), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, default='saved'),
        sa.Column('applied_date', sa.DateTime(), nullable=True),
        sa.Column('response_date', sa.DateTime(), nullable=True),
        sa.Column('salary', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('interview_date', sa.DateTime(), nullable=True),
        sa.Column('interview_time', sa.String(length=50), nullable=True),
        sa.Column('interview_type', sa.String(length=50), nullable=True),
        sa.Column('interview_location', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_job_applications_user_id', 'job_applications', ['user_id'], unique=False)
    op.create_index('ix_job_applications_job_id', 'job_applications', ['job_id'], unique=False)
    op.create_index('ix_job_applications_created_at', 'job_applications', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_job_applications_created_at', table_name='job_applications')
    op.drop_index('ix_job_applications_job_id', table_name='job_applications')
    op.drop_index('ix_job_applications_user_id', table_name='job_applications')
    op.drop_table('job_applications')
    op.drop_index('ix_job_postings_created_at', table_name='job_postings')
    op.drop_index('ix_job_postings_posted_by', table_name='job_postings')
    op.drop_index('ix_job_postings_company', table_name='job_postings')
    op.drop_table('job_postings')
