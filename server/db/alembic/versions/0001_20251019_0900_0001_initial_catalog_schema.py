"""Initial catalog schema

Revision ID: 0001
Revises:
Create Date: 2025-10-19 09:00:00.000000

"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade database schema."""
    # Create users table
    op.create_table('users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('username', sa.String(length=64), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('avatar', sa.String(length=1024), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('length(username) > 0', name='ck_user_username_not_empty'),
        sa.CheckConstraint('length(email) > 0', name='ck_user_email_not_empty'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    # Create tours table
    op.create_table('tours',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('city', sa.String(length=128), nullable=False),
        sa.Column('category', sa.String(length=128), nullable=False),
        sa.Column('date', sa.String(length=64), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('max_people', sa.Integer(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('price >= 0', name='ck_tour_price_non_negative'),
        sa.CheckConstraint('duration > 0', name='ck_tour_duration_positive'),
        sa.CheckConstraint('max_people > 0', name='ck_tour_max_people_positive'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_tours_name'), 'tours', ['name'], unique=False)
    op.create_index(op.f('ix_tours_price'), 'tours', ['price'], unique=False)
    op.create_index(op.f('ix_tours_city'), 'tours', ['city'], unique=False)
    op.create_index(op.f('ix_tours_category'), 'tours', ['category'], unique=False)
    op.create_index(op.f('ix_tours_created_at'), 'tours', ['created_at'], unique=False)

    # Create cars table
    op.create_table('cars',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tour_id', sa.Uuid(), nullable=True),
        sa.Column('category', sa.String(length=128), nullable=False),
        sa.Column('brand', sa.String(length=128), nullable=False),
        sa.Column('model', sa.String(length=128), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('drive', sa.String(length=64), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('places', sa.Integer(), nullable=False),
        sa.Column('transmission', sa.String(length=64), nullable=False),
        sa.Column('fuel_type', sa.String(length=64), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('price >= 0', name='ck_car_price_non_negative'),
        sa.CheckConstraint('capacity > 0', name='ck_car_capacity_positive'),
        sa.CheckConstraint('places > 0', name='ck_car_places_positive'),
        sa.ForeignKeyConstraint(['tour_id'], ['tours.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_cars_tour_id'), 'cars', ['tour_id'], unique=False)
    op.create_index(op.f('ix_cars_category'), 'cars', ['category'], unique=False)
    op.create_index(op.f('ix_cars_brand'), 'cars', ['brand'], unique=False)
    op.create_index(op.f('ix_cars_price'), 'cars', ['price'], unique=False)
    op.create_index(op.f('ix_cars_year'), 'cars', ['year'], unique=False)
    op.create_index(op.f('ix_cars_transmission'), 'cars', ['transmission'], unique=False)
    op.create_index(op.f('ix_cars_created_at'), 'cars', ['created_at'], unique=False)

    # Create review tables
    op.create_table('tour_reviews',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('tour_id', sa.Uuid(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_tour_review_rating_range'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tour_id'], ['tours.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'tour_id', name='uq_tour_review_user_tour')
    )
    op.create_index(op.f('ix_tour_reviews_user_id'), 'tour_reviews', ['user_id'], unique=False)
    op.create_index(op.f('ix_tour_reviews_tour_id'), 'tour_reviews', ['tour_id'], unique=False)

    op.create_table('car_reviews',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('car_id', sa.Uuid(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_car_review_rating_range'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['car_id'], ['cars.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'car_id', name='uq_car_review_user_car')
    )
    op.create_index(op.f('ix_car_reviews_user_id'), 'car_reviews', ['user_id'], unique=False)
    op.create_index(op.f('ix_car_reviews_car_id'), 'car_reviews', ['car_id'], unique=False)

    op.create_table('site_reviews',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=False),
        sa.Column('category', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_site_review_rating_range'),
        sa.CheckConstraint("category IN ('service', 'website', 'support')", name='ck_site_review_category'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_site_reviews_user_id'), 'site_reviews', ['user_id'], unique=False)
    op.create_index(op.f('ix_site_reviews_category'), 'site_reviews', ['category'], unique=False)
    op.create_index(op.f('ix_site_reviews_created_at'), 'site_reviews', ['created_at'], unique=False)

    # Create favorite tables
    op.create_table('favorite_tours',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('tour_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tour_id'], ['tours.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'tour_id', name='uq_favorite_tour_user_tour')
    )
    op.create_index(op.f('ix_favorite_tours_user_id'), 'favorite_tours', ['user_id'], unique=False)
    op.create_index(op.f('ix_favorite_tours_tour_id'), 'favorite_tours', ['tour_id'], unique=False)

    op.create_table('favorite_cars',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('car_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['car_id'], ['cars.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'car_id', name='uq_favorite_car_user_car')
    )
    op.create_index(op.f('ix_favorite_cars_user_id'), 'favorite_cars', ['user_id'], unique=False)
    op.create_index(op.f('ix_favorite_cars_car_id'), 'favorite_cars', ['car_id'], unique=False)

    # Create itinerary tables
    op.create_table('tour_days',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tour_id', sa.Uuid(), nullable=False),
        sa.Column('day_number', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('day_number >= 1', name='ck_tour_day_number_positive'),
        sa.ForeignKeyConstraint(['tour_id'], ['tours.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_tour_days_tour_id'), 'tour_days', ['tour_id'], unique=False)

    op.create_table('tour_day_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('day_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('point_start', sa.String(length=255), nullable=True),
        sa.Column('point_end', sa.String(length=255), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('price', sa.Float(), nullable=True),
        sa.Column('duration', sa.String(length=64), nullable=True),
        sa.Column('complexity', sa.String(length=64), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['day_id'], ['tour_days.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_tour_day_items_day_id'), 'tour_day_items', ['day_id'], unique=False)
    op.create_index(op.f('ix_tour_day_items_created_at'), 'tour_day_items', ['created_at'], unique=False)


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse dependency order
    op.drop_table('tour_day_items')
    op.drop_table('tour_days')
    op.drop_table('favorite_cars')
    op.drop_table('favorite_tours')
    op.drop_table('site_reviews')
    op.drop_table('car_reviews')
    op.drop_table('tour_reviews')
    op.drop_table('cars')
    op.drop_table('tours')
    op.drop_table('users')
