from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.orm import DeclarativeBase, declared_attr

# Имена ограничений в DDL из create_all() детерминированы,
# без них PostgreSQL придумывает свои (departments_pkey и т.п.)
NAMING_CONVENTION = {
    'ix': 'ix_%(column_0_label)s',
    'uq': 'uq_%(table_name)s_%(column_0_name)s',
    'fk': 'fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s',
    'pk': 'pk_%(table_name)s',
}


class Base(DeclarativeBase):
    metadata = sa.MetaData(naming_convention=NAMING_CONVENTION)


class TimeStampMixin:
    """
    Служебные колонки аудита, заполняются самой БД.

    В доменные сущности не попадают и через API не отдаются,
    нужны только при разборе данных прямо в БД.
    """

    @declared_attr
    def created_at(cls):
        return sa.Column(
            sa.TIMESTAMP(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        )

    @declared_attr
    def updated_at(cls):
        return sa.Column(
            sa.TIMESTAMP(timezone=True),
            server_default=sa.func.now(),
            onupdate=sa.func.now(),
            nullable=False,
        )
