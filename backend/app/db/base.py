"""
Base module for SQLAlchemy models.
"""
from sqlalchemy import MetaData, Column, DateTime, func
from sqlalchemy.orm import declarative_base, declared_attr

# Define naming convention for constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

# Create metadata with naming convention
db_metadata = MetaData(naming_convention=convention)

# Create base model class
Base = declarative_base(metadata=db_metadata)

# Largest value an Integer id column holds (int4 on PostgreSQL)
MAX_ID = 2**31 - 1


class TimestampMixin:
    @declared_attr
    def created_at(cls):
        return Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    @declared_attr
    def updated_at(cls):
        return Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
