"""Initial JobConnect schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-03-02 10:00:00.000000

"""
from typing import List, Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def base_columns() -> List[sa.Column]:
    """id / created_at / updated_at shared by every table."""
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def fk(column: str, target: str, nullable: bool = False, ondelete: str = 'CASCADE') -> List:
    return [
        sa.Column(column, sa.Uuid(), nullable=nullable),
        sa.ForeignKeyConstraint([column], [target], ondelete=ondelete),
    ]


def upgrade() -> None:
    # Users
    op.create_table(
        'users',
        *base_columns(),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('profile_image', sa.String(length=500), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'])
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    # Skill catalog
    op.create_table(
        'skills',
        *base_columns(),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_index(op.f('ix_skills_id'), 'skills', ['id'])

    # Profiles
    op.create_table(
        'job_seekers',
        *base_columns(),
        *fk('user_id', 'users.id'),
        sa.Column('professional_title', sa.String(length=200), nullable=True),
        sa.Column('years_experience', sa.String(length=20), nullable=True),
        sa.Column('skills', sa.JSON(), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('resume_url', sa.String(length=500), nullable=True),
        sa.Column('portfolio_url', sa.String(length=500), nullable=True),
        sa.Column('linkedin_url', sa.String(length=500), nullable=True),
        sa.Column('github_url', sa.String(length=500), nullable=True),
        sa.Column('website_url', sa.String(length=500), nullable=True),
        sa.Column('expected_salary_min', sa.Integer(), nullable=True),
        sa.Column('expected_salary_max', sa.Integer(), nullable=True),
        sa.Column('salary_type', sa.String(length=20), nullable=True),
        sa.Column('work_preference', sa.String(length=50), nullable=True),
        sa.Column('availability', sa.String(length=100), nullable=True),
        sa.Column('notice_period', sa.String(length=50), nullable=True),
        sa.Column('education', sa.JSON(), nullable=True),
        sa.Column('experience', sa.JSON(), nullable=True),
        sa.Column('certifications', sa.JSON(), nullable=True),
        sa.Column('languages', sa.JSON(), nullable=True),
        sa.Column('open_to_relocate', sa.Boolean(), nullable=False),
        sa.Column('job_alerts', sa.Boolean(), nullable=False),
        sa.Column('profile_visibility', sa.String(length=20), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_job_seekers_id'), 'job_seekers', ['id'])
    op.create_index(op.f('ix_job_seekers_user_id'), 'job_seekers', ['user_id'], unique=True)

    op.create_table(
        'employers',
        *base_columns(),
        *fk('user_id', 'users.id'),
        sa.Column('job_title', sa.String(length=200), nullable=True),
        sa.Column('company_name', sa.String(length=200), nullable=False),
        sa.Column('company_size', sa.String(length=20), nullable=True),
        sa.Column('industry', sa.String(length=100), nullable=True),
        sa.Column('company_location', sa.String(length=200), nullable=True),
        sa.Column('company_description', sa.Text(), nullable=True),
        sa.Column('company_logo', sa.String(length=500), nullable=True),
        sa.Column('website', sa.String(length=500), nullable=True),
        sa.Column('linkedin_url', sa.String(length=500), nullable=True),
        sa.Column('founded_year', sa.Integer(), nullable=True),
        sa.Column('employee_count', sa.Integer(), nullable=True),
        sa.Column('headquarters', sa.String(length=200), nullable=True),
        sa.Column('benefits', sa.JSON(), nullable=True),
        sa.Column('company_values', sa.JSON(), nullable=True),
        sa.Column('work_culture', sa.Text(), nullable=True),
        sa.Column('remote_policy', sa.String(length=50), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.Column('is_hiring', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_employers_id'), 'employers', ['id'])
    op.create_index(op.f('ix_employers_user_id'), 'employers', ['user_id'], unique=True)
    op.create_index(op.f('ix_employers_company_name'), 'employers', ['company_name'])

    # Jobs
    op.create_table(
        'jobs',
        *base_columns(),
        *fk('employer_id', 'employers.id'),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('department', sa.String(length=100), nullable=True),
        sa.Column('employment_type', sa.String(length=50), nullable=False),
        sa.Column('experience_level', sa.String(length=50), nullable=True),
        sa.Column('work_location', sa.String(length=50), nullable=True),
        sa.Column('salary_min', sa.Integer(), nullable=True),
        sa.Column('salary_max', sa.Integer(), nullable=True),
        sa.Column('salary_type', sa.String(length=20), nullable=True),
        sa.Column('currency', sa.String(length=3), nullable=True),
        sa.Column('required_skills', sa.JSON(), nullable=True),
        sa.Column('preferred_skills', sa.JSON(), nullable=True),
        sa.Column('responsibilities', sa.JSON(), nullable=True),
        sa.Column('requirements', sa.JSON(), nullable=True),
        sa.Column('benefits', sa.JSON(), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('application_deadline', sa.DateTime(), nullable=True),
        sa.Column('start_date', sa.DateTime(), nullable=True),
        sa.Column('is_urgent', sa.Boolean(), nullable=False),
        sa.Column('is_featured', sa.Boolean(), nullable=False),
        sa.Column('views', sa.Integer(), nullable=False),
        sa.Column('applications_count', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_jobs_id'), 'jobs', ['id'])
    op.create_index(op.f('ix_jobs_employer_id'), 'jobs', ['employer_id'])
    op.create_index(op.f('ix_jobs_title'), 'jobs', ['title'])
    op.create_index('idx_jobs_status_created', 'jobs', ['status', 'created_at'])

    # Applications
    op.create_table(
        'applications',
        *base_columns(),
        *fk('job_id', 'jobs.id'),
        *fk('job_seeker_id', 'job_seekers.id'),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('cover_letter', sa.Text(), nullable=True),
        sa.Column('custom_resume', sa.String(length=500), nullable=True),
        sa.Column('expected_salary', sa.Integer(), nullable=True),
        sa.Column('availability', sa.String(length=100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('job_id', 'job_seeker_id', name='unique_job_seeker_application'),
    )
    op.create_index(op.f('ix_applications_id'), 'applications', ['id'])
    op.create_index(op.f('ix_applications_job_id'), 'applications', ['job_id'])
    op.create_index(op.f('ix_applications_job_seeker_id'), 'applications', ['job_seeker_id'])

    # Interviews
    op.create_table(
        'interviews',
        *base_columns(),
        *fk('application_id', 'applications.id'),
        *fk('employer_id', 'employers.id'),
        *fk('job_seeker_id', 'job_seekers.id'),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('scheduled_at', sa.DateTime(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('interviewer_notes', sa.Text(), nullable=True),
        sa.Column('candidate_notes', sa.Text(), nullable=True),
        sa.Column('rating', sa.Integer(), nullable=True),
        sa.Column('feedback', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_interviews_id'), 'interviews', ['id'])
    op.create_index(op.f('ix_interviews_application_id'), 'interviews', ['application_id'])
    op.create_index('idx_interviews_employer', 'interviews', ['employer_id'])
    op.create_index('idx_interviews_job_seeker', 'interviews', ['job_seeker_id'])
    op.create_index('idx_interviews_scheduled_at', 'interviews', ['scheduled_at'])

    # Company reviews
    op.create_table(
        'company_reviews',
        *base_columns(),
        *fk('employer_id', 'employers.id'),
        *fk('job_seeker_id', 'job_seekers.id'),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('pros', sa.Text(), nullable=True),
        sa.Column('cons', sa.Text(), nullable=True),
        sa.Column('advice', sa.Text(), nullable=True),
        sa.Column('work_life_balance', sa.Integer(), nullable=True),
        sa.Column('compensation', sa.Integer(), nullable=True),
        sa.Column('culture', sa.Integer(), nullable=True),
        sa.Column('management', sa.Integer(), nullable=True),
        sa.Column('is_current_employee', sa.Boolean(), nullable=False),
        sa.Column('job_title', sa.String(length=255), nullable=True),
        sa.Column('department', sa.String(length=255), nullable=True),
        sa.Column('is_anonymous', sa.Boolean(), nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_company_reviews_id'), 'company_reviews', ['id'])
    op.create_index(op.f('ix_company_reviews_employer_id'), 'company_reviews', ['employer_id'])

    # Saved jobs & matches
    op.create_table(
        'saved_jobs',
        *base_columns(),
        *fk('job_seeker_id', 'job_seekers.id'),
        *fk('job_id', 'jobs.id'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_saved_jobs_id'), 'saved_jobs', ['id'])
    op.create_index('idx_saved_jobs_job_seeker', 'saved_jobs', ['job_seeker_id'])
    op.create_index('idx_saved_jobs_job', 'saved_jobs', ['job_id'])
    op.create_index(
        'idx_saved_jobs_job_seeker_job', 'saved_jobs', ['job_seeker_id', 'job_id'], unique=True
    )

    op.create_table(
        'job_matches',
        *base_columns(),
        *fk('job_seeker_id', 'job_seekers.id'),
        *fk('job_id', 'jobs.id'),
        sa.Column('match_score', sa.Numeric(precision=3, scale=2), nullable=True),
        sa.Column('match_reasons', sa.JSON(), nullable=True),
        sa.Column('is_viewed', sa.Boolean(), nullable=False),
        sa.Column('is_dismissed', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_job_matches_id'), 'job_matches', ['id'])
    op.create_index(
        'idx_job_matches_job_seeker_score', 'job_matches', ['job_seeker_id', 'match_score']
    )
    op.create_index(
        'idx_job_matches_job_seeker_job', 'job_matches', ['job_seeker_id', 'job_id'], unique=True
    )

    # Messages
    op.create_table(
        'messages',
        *base_columns(),
        *fk('sender_id', 'users.id'),
        *fk('receiver_id', 'users.id'),
        *fk('application_id', 'applications.id', nullable=True, ondelete='SET NULL'),
        sa.Column('subject', sa.String(length=255), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.Column('attachments', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_messages_id'), 'messages', ['id'])
    op.create_index('idx_messages_sender_receiver', 'messages', ['sender_id', 'receiver_id'])
    op.create_index('idx_messages_receiver_read', 'messages', ['receiver_id', 'is_read'])
    op.create_index('idx_messages_created_at', 'messages', ['created_at'])

    # User skills
    op.create_table(
        'user_skills',
        *base_columns(),
        *fk('user_id', 'users.id'),
        *fk('skill_id', 'skills.id'),
        sa.Column('proficiency_level', sa.String(length=20), nullable=True),
        sa.Column('years_experience', sa.Integer(), nullable=True),
        sa.Column('is_endorsed', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'skill_id', name='unique_user_skill'),
    )
    op.create_index(op.f('ix_user_skills_id'), 'user_skills', ['id'])
    op.create_index(op.f('ix_user_skills_user_id'), 'user_skills', ['user_id'])


def downgrade() -> None:
    for table in (
        'user_skills',
        'messages',
        'job_matches',
        'saved_jobs',
        'company_reviews',
        'interviews',
        'applications',
        'jobs',
        'employers',
        'job_seekers',
        'skills',
        'users',
    ):
        op.drop_table(table)
