from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class QueryRequest:
    """Фильтр по одному полю: (атрибут, значение)."""

    attribute: str
    value: str


class DepartmentAttribute(str, Enum):
    ID = 'id'
    NAME = 'name'
    ABBREVIATION = 'abbreviation'
    ACTIVE = 'active'


class EmployeeAttribute(str, Enum):
    ID = 'id'
    NAME = 'name'
    DEPARTMENT = 'department'
    ACTIVE = 'active'
    POSITION = 'position'
    PHONE = 'phone'
    USERNAME = 'username'
    SUPERVISOR = 'supervisor'
