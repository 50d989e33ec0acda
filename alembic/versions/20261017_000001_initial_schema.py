"""Initial rental marketplace schema

Revision ID: 20261017_000001
Revises: None
Create Date: 2026-10-17

Creates profiles, locations (PostGIS points), properties, leases,
applications, payments and the tenant/property link tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from geoalchemy2 import Geometry
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '20261017_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PROPERTY_TYPES = ('Rooms', 'Tinyhouse', 'Apartment', 'Villa', 'Townhouse', 'Cottage')
PAYMENT_STATUSES = ('Pending', 'Paid', 'PartiallyPaid', 'Overdue')


def _profile_table(name: str) -> None:
    op.create_table(
        name,
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('cognito_id', sa.String(length=128), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone_number', sa.String(length=50), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(f'ix_{name}_cognito_id', name, ['cognito_id'], unique=True)


def upgrade() -> None:
    """Create all tables."""
    op.execute("CREATE EXTENSION IF NOT EXISTS postgis")

    _profile_table('tenants')
    _profile_table('managers')

    op.create_table(
        'locations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('address', sa.String(length=255), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('state', sa.String(length=100), nullable=False),
        sa.Column('country', sa.String(length=100), nullable=False),
        sa.Column('postal_code', sa.String(length=20), nullable=False),
        sa.Column(
            'coordinates',
            Geometry(geometry_type='POINT', srid=4326, spatial_index=False),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_locations_coordinates', 'locations', ['coordinates'], postgresql_using='gist'
    )

    op.create_table(
        'properties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price_per_month', sa.Float(), nullable=False),
        sa.Column('security_deposit', sa.Float(), nullable=False),
        sa.Column('application_fee', sa.Float(), nullable=False),
        sa.Column('photo_urls', postgresql.JSONB(), nullable=False),
        sa.Column('amenities', postgresql.JSONB(), nullable=False),
        sa.Column('highlights', postgresql.JSONB(), nullable=False),
        sa.Column('is_pets_allowed', sa.Boolean(), nullable=False),
        sa.Column('is_parking_included', sa.Boolean(), nullable=False),
        sa.Column('beds', sa.Integer(), nullable=False),
        sa.Column('baths', sa.Float(), nullable=False),
        sa.Column('square_feet', sa.Integer(), nullable=False),
        sa.Column('property_type', sa.Enum(*PROPERTY_TYPES, name='property_type'), nullable=False),
        sa.Column('posted_date', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('average_rating', sa.Float(), nullable=True),
        sa.Column('number_of_reviews', sa.Integer(), nullable=True),
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.Column('manager_cognito_id', sa.String(length=128), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id'], name='fk_properties_location_id'),
        sa.ForeignKeyConstraint(
            ['manager_cognito_id'], ['managers.cognito_id'], name='fk_properties_manager_cognito_id'
        ),
    )
    op.create_index('ix_properties_manager_cognito_id', 'properties', ['manager_cognito_id'])
    op.create_index(
        'ix_properties_amenities', 'properties', ['amenities'], postgresql_using='gin'
    )

    op.create_table(
        'leases',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('rent', sa.Float(), nullable=False),
        sa.Column('deposit', sa.Float(), nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('tenant_cognito_id', sa.String(length=128), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_leases_property_id'),
        sa.ForeignKeyConstraint(
            ['tenant_cognito_id'], ['tenants.cognito_id'], name='fk_leases_tenant_cognito_id'
        ),
    )
    op.create_index('ix_leases_property_id', 'leases', ['property_id'])
    op.create_index('ix_leases_tenant_cognito_id', 'leases', ['tenant_cognito_id'])

    op.create_table(
        'applications',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('application_date', sa.DateTime(), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone_number', sa.String(length=50), nullable=False),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('tenant_cognito_id', sa.String(length=128), nullable=False),
        sa.Column('lease_id', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('lease_id', name='uq_applications_lease_id'),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], name='fk_applications_property_id'),
        sa.ForeignKeyConstraint(
            ['tenant_cognito_id'], ['tenants.cognito_id'], name='fk_applications_tenant_cognito_id'
        ),
        sa.ForeignKeyConstraint(
            ['lease_id'], ['leases.id'], name='fk_applications_lease_id', ondelete='SET NULL'
        ),
    )
    op.create_index('ix_applications_status', 'applications', ['status'])
    op.create_index('ix_applications_property_id', 'applications', ['property_id'])
    op.create_index('ix_applications_tenant_cognito_id', 'applications', ['tenant_cognito_id'])

    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('amount_due', sa.Float(), nullable=False),
        sa.Column('amount_paid', sa.Float(), nullable=False),
        sa.Column('due_date', sa.DateTime(), nullable=False),
        sa.Column('payment_date', sa.DateTime(), nullable=True),
        sa.Column(
            'payment_status',
            sa.Enum(*PAYMENT_STATUSES, name='payment_status'),
            nullable=False,
        ),
        sa.Column('lease_id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['lease_id'], ['leases.id'], name='fk_payments_lease_id', ondelete='CASCADE'
        ),
    )
    op.create_index('ix_payments_lease_id', 'payments', ['lease_id'])
    op.create_index('ix_payments_due_date', 'payments', ['due_date'])

    for table in ('tenant_favorites', 'tenant_residences'):
        op.create_table(
            table,
            sa.Column('tenant_id', sa.Integer(), nullable=False),
            sa.Column('property_id', sa.Integer(), nullable=False),
            sa.PrimaryKeyConstraint('tenant_id', 'property_id'),
            sa.ForeignKeyConstraint(
                ['tenant_id'], ['tenants.id'], name=f'fk_{table}_tenant_id', ondelete='CASCADE'
            ),
            sa.ForeignKeyConstraint(
                ['property_id'], ['properties.id'], name=f'fk_{table}_property_id', ondelete='CASCADE'
            ),
        )


def downgrade() -> None:
    """Drop all tables and enum types."""
    op.drop_table('tenant_residences')
    op.drop_table('tenant_favorites')
    op.drop_table('payments')
    op.drop_table('applications')
    op.drop_table('leases')
    op.drop_table('properties')
    op.drop_table('locations')
    op.drop_table('managers')
    op.drop_table('tenants')

    op.execute("DROP TYPE IF EXISTS payment_status")
    op.execute("DROP TYPE IF EXISTS property_type")
