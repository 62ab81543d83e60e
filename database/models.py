from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimeStampMixin


class Department(TimeStampMixin, Base):
    __tablename__ = 'departments'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    abbreviation: Mapped[str] = mapped_column(String(20), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    employees: Mapped[list['Employee']] = relationship(back_populates='department')


class Employee(TimeStampMixin, Base):
    __tablename__ = 'employees'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    position: Mapped[str] = mapped_column(String(200), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False)
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    password: Mapped[str] = mapped_column(String(200), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    department_id: Mapped[int] = mapped_column(Integer, ForeignKey('departments.id'))

    # FK - на саму себя: руководитель (NULL - вершина иерархии)
    supervisor_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey('employees.id'), nullable=True
    )

    department: Mapped['Department'] = relationship(back_populates='employees')

    supervisor: Mapped[Optional['Employee']] = relationship(
        back_populates='subordinates',
        remote_side='Employee.id',
    )

    subordinates: Mapped[list['Employee']] = relationship(back_populates='supervisor')
