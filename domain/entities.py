from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Department:
    """Подразделение"""

    name: str
    abbreviation: str
    active: bool = True
    id: int | None = None


@dataclass
class Employee:
    """Сотрудник.

    password: bcrypt-хэш после сохранения; открытый текст живёт только
    во входящих данных до вызова EmployeeLogicService.
    """

    name: str
    position: str
    phone_number: str
    username: str
    password: str
    department_id: int
    supervisor_id: int | None = None
    active: bool = True
    id: int | None = None


# Диапазон колонки Integer (PostgreSQL INTEGER)
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


def id_in_range(id: int) -> bool:
    return MIN_ID <= id <= MAX_ID
