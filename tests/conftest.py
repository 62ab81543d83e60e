"""
Общие фикстуры: SQLite в памяти (aiosqlite) на каждый тест, сервисы
логики поверх одной сессии и HTTP-клиент с подменённой зависимостью
get_session.
"""

import os

# До импорта приложения: быстрый bcrypt и тихие логи
os.environ.setdefault('BCRYPT_ROUNDS', '4')
os.environ.setdefault('LOG_LEVEL', 'WARNING')

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from database import models  # noqa: F401
from database.base import Base
from database.repositories.department_repo import DepartmentRepo
from database.repositories.employee_repo import EmployeeRepo
from domain.entities import Department, Employee
from services.department_service import DepartmentLogicService
from services.employee_service import EmployeeLogicService
from services.password import PasswordService


@pytest.fixture
async def engine():
    engine = create_async_engine(
        'sqlite+aiosqlite://',
        poolclass=StaticPool,
        connect_args={'check_same_thread': False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def password_service():
    return PasswordService(rounds=4)


@pytest.fixture
def department_service(session):
    return DepartmentLogicService(DepartmentRepo(session))


@pytest.fixture
def employee_service(session, password_service):
    return EmployeeLogicService(EmployeeRepo(session), DepartmentRepo(session), password_service)


@pytest.fixture
async def it_department(department_service):
    return await department_service.add(Department(id=1, name='IT', abbreviation='IT', active=True))


def make_employee(id: int | None = 10, name: str = 'Ann', **overrides) -> Employee:
    fields = {
        'id': id,
        'name': name,
        'position': 'developer',
        'phone_number': '06205007447',
        'username': name.lower(),
        'password': 'pw1',
        'active': True,
        'department_id': 1,
        'supervisor_id': None,
    }
    fields.update(overrides)
    return Employee(**fields)


@pytest.fixture
async def client(session_factory):
    from main import app
    from presentation.dependencies import get_session

    async def override_session():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as client:
        yield client
    app.dependency_overrides.clear()
