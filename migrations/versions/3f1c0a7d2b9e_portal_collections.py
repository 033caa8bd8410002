"""Create the portal collections

Revision ID: 3f1c0a7d2b9e
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c0a7d2b9e'
down_revision = None
branch_labels = None
depends_on = None

ENUMS = {
    'startupstage': ('idea', 'prototype', 'seed', 'series_a', 'series_b', 'series_c_plus'),
    'teamsize': ('tiny', 'small', 'medium', 'large', 'huge'),
    'fundingstage': ('bootstrapped', 'pre_seed', 'seed', 'series_a', 'series_b',
                     'series_c_plus', 'not_seeking'),
    'railconnectivity': ('passenger', 'freight', 'both', 'none'),
    'industrystatus': ('active', 'inactive'),
    'policycategory': ('government', 'company', 'event', 'standards'),
    'policystatus': ('draft', 'published'),
    'backgroundtype': ('color', 'image'),
    'animationspeed': ('slow', 'normal', 'fast'),
}


def enum(name):
    return sa.Enum(*ENUMS[name], name=name)


def timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade():
    op.create_table(
        'companies',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('company_name', sa.String(length=256), nullable=False),
        sa.Column('director_ceo', sa.String(length=128), nullable=False),
        sa.Column('industry', sa.String(length=128), nullable=True),
        sa.Column('email', sa.String(length=128), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=False),
        sa.Column('website', sa.String(length=512), nullable=True),
        sa.Column('logo', sa.String(length=512), nullable=True),
        sa.Column('banner', sa.String(length=512), nullable=True),
        sa.Column('address', sa.String(length=512), nullable=True),
        sa.Column('city', sa.String(length=128), nullable=True),
        sa.Column('state', sa.String(length=128), nullable=True),
        sa.Column('country', sa.String(length=128), nullable=True),
        sa.Column('pincode', sa.String(length=16), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'startups',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('startup_name', sa.String(length=256), nullable=False),
        sa.Column('founder_name', sa.String(length=128), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('industry', sa.String(length=128), nullable=False),
        sa.Column('stage', enum('startupstage'), nullable=False),
        sa.Column('email', sa.String(length=128), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=False),
        sa.Column('website', sa.String(length=512), nullable=True),
        sa.Column('logo', sa.String(length=512), nullable=False),
        sa.Column('pitch_deck', sa.String(length=512), nullable=True),
        sa.Column('founded_year', sa.Integer(), nullable=True),
        sa.Column('team_size', enum('teamsize'), nullable=True),
        sa.Column('funding_stage', enum('fundingstage'), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'districts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('district_name', sa.String(length=128), nullable=False),
        sa.Column('state', sa.String(length=128), nullable=True),
        sa.Column('population', sa.Integer(), nullable=True),
        sa.Column('area_size', sa.Float(), nullable=True),
        sa.Column('headquarters', sa.String(length=128), nullable=True),
        sa.Column('postal_code', sa.String(length=16), nullable=True),
        sa.Column('contact_email', sa.String(length=128), nullable=True),
        sa.Column('website_url', sa.String(length=512), nullable=True),
        sa.Column('contact_phone', sa.String(length=32), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('literacy_rate', sa.Float(), nullable=True),
        sa.Column('primary_languages', sa.JSON(), nullable=False),
        sa.Column('major_industries', sa.JSON(), nullable=False),
        sa.Column('infrastructure', sa.Text(), nullable=True),
        sa.Column('midc_sez_presence', sa.JSON(), nullable=False),
        sa.Column('rail_connectivity', enum('railconnectivity'), nullable=False),
        sa.Column('airport_availability', sa.JSON(), nullable=False),
        sa.Column('power_supply', sa.String(length=256), nullable=True),
        sa.Column('water_availability', sa.String(length=256), nullable=True),
        sa.Column('awards_photos', sa.JSON(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'industries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('overview', sa.Text(), nullable=True),
        sa.Column('investment_opportunities', sa.Text(), nullable=True),
        sa.Column('infrastructure_requirements', sa.Text(), nullable=True),
        sa.Column('government_incentives', sa.Text(), nullable=True),
        sa.Column('growth_potential', sa.Text(), nullable=True),
        sa.Column('leadership', sa.JSON(), nullable=False),
        sa.Column('press_releases', sa.JSON(), nullable=False),
        sa.Column('media_coverage', sa.JSON(), nullable=False),
        sa.Column('government_papers', sa.JSON(), nullable=False),
        sa.Column('logo', sa.String(length=512), nullable=True),
        sa.Column('cover_image', sa.String(length=512), nullable=True),
        sa.Column('gallery', sa.JSON(), nullable=False),
        sa.Column('status', enum('industrystatus'), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('full_name', sa.String(length=128), nullable=False),
        sa.Column('designation', sa.String(length=128), nullable=True),
        sa.Column('department', sa.String(length=128), nullable=True),
        sa.Column('profile_image', sa.String(length=512), nullable=True),
        sa.Column('social', sa.JSON(), nullable=False),
        sa.Column('priority', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_members_department'), 'members', ['department'], unique=False)
    op.create_table(
        'policies',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=256), nullable=False),
        sa.Column('category', enum('policycategory'), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('published_on', sa.DateTime(timezone=True), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False),
        sa.Column('file_url', sa.String(length=512), nullable=False),
        sa.Column('status', enum('policystatus'), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'popups',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=False),
        sa.Column('ctas', sa.JSON(), nullable=False),
        sa.Column('priority', sa.Integer(), nullable=False),
        sa.Column('background_type', enum('backgroundtype'), nullable=False),
        sa.Column('background_color', sa.String(length=7), nullable=False),
        sa.Column('background_image', sa.String(length=512), nullable=True),
        sa.Column('display_duration', sa.Integer(), nullable=False),
        sa.Column('closable', sa.Boolean(), nullable=False),
        sa.Column('enabled', sa.Boolean(), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('daily_schedule', sa.JSON(), nullable=False),
        sa.Column('delay_seconds', sa.Integer(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'gallery',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('image_url', sa.String(length=512), nullable=False),
        sa.Column('alt_text', sa.String(length=200), nullable=True),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'announcements',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('content', sa.String(length=500), nullable=False),
        sa.Column('url', sa.String(length=512), nullable=True),
        sa.Column('background_color', sa.String(length=7), nullable=False),
        sa.Column('text_color', sa.String(length=7), nullable=False),
        sa.Column('animation_speed', enum('animationspeed'), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'contact_forms',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('full_name', sa.String(length=128), nullable=False),
        sa.Column('email', sa.String(length=128), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=True),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'top_utility_configs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('countdown_title', sa.String(length=128), nullable=False),
        sa.Column('target_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=False),
        sa.Column('email', sa.String(length=128), nullable=False),
        sa.Column('social_links', sa.JSON(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade():
    op.drop_table('top_utility_configs')
    op.drop_table('contact_forms')
    op.drop_table('announcements')
    op.drop_table('gallery')
    op.drop_table('popups')
    op.drop_table('policies')
    op.drop_index(op.f('ix_members_department'), table_name='members')
    op.drop_table('members')
    op.drop_table('industries')
    op.drop_table('districts')
    op.drop_table('startups')
    op.drop_table('companies')
    for name in ENUMS:
        sa.Enum(name=name).drop(op.get_bind(), checkfirst=True)
