"""Initial schema

Revision ID: 001
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa

revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(128)),
        sa.Column('first_name', sa.String(64)),
        sa.Column('last_name', sa.String(64)),
        sa.Column('role', sa.Enum('USER', 'ADMIN', 'GUIDE', name='userrole'), nullable=False),
        sa.Column('phone', sa.String(32)),
        sa.Column('city', sa.String(128)),
        sa.Column('country', sa.String(128)),
        sa.Column('bio', sa.Text()),
        sa.Column('avatar_url', sa.String(1024)),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'cities',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(128), nullable=False),
        sa.Column('country', sa.String(128), nullable=False),
        sa.Column('continent', sa.String(32)),
        sa.Column('description', sa.Text()),
        sa.Column('latitude', sa.Float()),
        sa.Column('longitude', sa.Float()),
        sa.Column('cost_index', sa.Integer(), default=3),
        sa.Column('popularity', sa.Integer(), default=0),
        sa.Column('timezone', sa.String(64)),
    )
    op.create_index('ix_cities_name', 'cities', ['name'])
    op.create_index('ix_cities_country', 'cities', ['country'])
    op.create_index('ix_cities_continent', 'cities', ['continent'])

    op.create_table(
        'trips',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(128), nullable=False),
        sa.Column('destination', sa.String(255)),
        sa.Column('description', sa.Text()),
        sa.Column('cover_photo', sa.String(1024)),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column(
            'status',
            sa.Enum('DRAFT', 'UPCOMING', 'ONGOING', 'COMPLETED', name='tripstatus'),
            nullable=False,
        ),
        sa.Column('total_budget', sa.Float()),
        sa.Column('is_public', sa.Boolean(), default=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_trips_user_id', 'trips', ['user_id'])
    op.create_index('ix_trips_status', 'trips', ['status'])

    op.create_table(
        'stops',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('trip_id', sa.Integer(), sa.ForeignKey('trips.id', ondelete='CASCADE'), nullable=False),
        sa.Column('city_id', sa.Integer(), sa.ForeignKey('cities.id', ondelete='SET NULL')),
        sa.Column('city_name', sa.String(128), nullable=False),
        sa.Column('country', sa.String(128), nullable=False),
        sa.Column('start_date', sa.Date()),
        sa.Column('end_date', sa.Date()),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('budget', sa.Float()),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_stops_trip_id', 'stops', ['trip_id'])

    op.create_table(
        'activities',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('stop_id', sa.Integer(), sa.ForeignKey('stops.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('category', sa.String(32), nullable=False),
        sa.Column('cost', sa.Float(), nullable=False),
        sa.Column('currency', sa.String(3)),
        sa.Column('date', sa.Date()),
        sa.Column('start_time', sa.String(5)),
        sa.Column('duration_minutes', sa.Integer()),
        sa.Column('location', sa.String(255)),
        sa.Column('is_booked', sa.Boolean(), default=False),
        sa.Column('booking_reference', sa.String(128)),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_activities_stop_id', 'activities', ['stop_id'])


def downgrade():
    op.drop_table('activities')
    op.drop_table('stops')
    op.drop_table('trips')
    op.drop_table('cities')
    op.drop_table('users')
