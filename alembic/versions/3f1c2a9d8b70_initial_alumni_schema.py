"""initial alumni schema

Revision ID: 3f1c2a9d8b70
Revises:
Create Date: 2026-10-17 10:12:44.501213
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d8b70'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

account_role = sa.Enum('alumni', 'admin', name='accountrole')
ecard_status = sa.Enum('pending', 'approved', 'rejected', name='ecardstatus')


def _owner_fk():
    return sa.ForeignKey(
        'users.registration_number', ondelete='CASCADE', onupdate='CASCADE'
    )


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('registration_number', sa.String(length=50), nullable=False),
        sa.Column('graduation_year', sa.Integer(), nullable=True),
        sa.Column('department', sa.String(length=100), nullable=True),
        sa.Column('whatsapp_number', sa.String(length=20), nullable=True),
        sa.Column('profile_picture', sa.String(length=255), nullable=True),
        sa.Column('certificates', sa.String(length=255), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('is_employed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('looking_for_job', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('is_verified', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('role', account_role, server_default='alumni', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('email', name='users_email_key'),
        sa.UniqueConstraint('registration_number', name='users_registration_number_key'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'])
    op.create_index('users_email_lower_key', 'users', [sa.text('lower(email)')], unique=True)

    op.create_table(
        'internships',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('registration_number', sa.String(length=50), _owner_fk(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('company', sa.String(length=200), nullable=True),
        sa.Column('duration', sa.String(length=50), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('paid', sa.Boolean(), server_default=sa.false(), nullable=False),
    )
    op.create_index(op.f('ix_internships_registration_number'), 'internships', ['registration_number'])

    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('registration_number', sa.String(length=50), _owner_fk(), nullable=False),
        sa.Column('project_title', sa.String(length=200), nullable=False),
        sa.Column('project_description', sa.Text(), nullable=True),
        sa.Column('completion_date', sa.Date(), nullable=True),
        sa.Column('months_taken', sa.Integer(), nullable=True),
    )
    op.create_index(op.f('ix_projects_registration_number'), 'projects', ['registration_number'])

    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('registration_number', sa.String(length=50), _owner_fk(), nullable=False),
        sa.Column('job_title', sa.String(length=200), nullable=False),
        sa.Column('organization', sa.String(length=200), nullable=True),
        sa.Column('joining_date', sa.Date(), nullable=True),
        sa.Column('job_description', sa.Text(), nullable=True),
    )
    op.create_index(op.f('ix_jobs_registration_number'), 'jobs', ['registration_number'])

    op.create_table(
        'achievements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('registration_number', sa.String(length=50), _owner_fk(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('file_path', sa.String(length=255), nullable=True),
    )
    op.create_index(op.f('ix_achievements_registration_number'), 'achievements', ['registration_number'])

    op.create_table(
        'edu_info',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('registration_number', sa.String(length=50), _owner_fk(), nullable=False),
        sa.Column('matric_institute', sa.String(length=200), nullable=True),
        sa.Column('matric_degree', sa.String(length=100), nullable=True),
        sa.Column('matric_year', sa.Integer(), nullable=True),
        sa.Column('matric_percentage', sa.String(length=10), nullable=True),
        sa.Column('fsc_institute', sa.String(length=200), nullable=True),
        sa.Column('fsc_degree', sa.String(length=100), nullable=True),
        sa.Column('fsc_year', sa.Integer(), nullable=True),
        sa.Column('fsc_percentage', sa.String(length=10), nullable=True),
        sa.UniqueConstraint('registration_number', name='edu_info_registration_number_key'),
    )

    op.create_table(
        'user_skills',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('registration_number', sa.String(length=50), _owner_fk(), nullable=False),
        sa.Column('skills', sa.Text(), server_default='[]', nullable=False),
        sa.UniqueConstraint('registration_number', name='user_skills_registration_number_key'),
    )

    op.create_table(
        'e_cards',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('registration_number', sa.String(length=50), nullable=False),
        sa.Column('status', ecard_status, server_default='pending', nullable=False),
        sa.Column('card_image', sa.String(length=255), nullable=True),
        sa.Column('request_date', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('approved_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('rejection_reason', sa.Text(), nullable=True),
        sa.Column('expiry_date', sa.Date(), nullable=False),
        sa.UniqueConstraint('user_id', 'registration_number', name='uq_e_cards_owner'),
    )


def downgrade() -> None:
    op.drop_table('e_cards')
    op.drop_table('user_skills')
    op.drop_table('edu_info')
    op.drop_index(op.f('ix_achievements_registration_number'), table_name='achievements')
    op.drop_table('achievements')
    op.drop_index(op.f('ix_jobs_registration_number'), table_name='jobs')
    op.drop_table('jobs')
    op.drop_index(op.f('ix_projects_registration_number'), table_name='projects')
    op.drop_table('projects')
    op.drop_index(op.f('ix_internships_registration_number'), table_name='internships')
    op.drop_table('internships')
    op.drop_index('users_email_lower_key', table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')

    ecard_status.drop(op.get_bind(), checkfirst=True)
    account_role.drop(op.get_bind(), checkfirst=True)
