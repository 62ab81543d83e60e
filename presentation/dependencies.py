from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database.database import database
from database.repositories.department_repo import DepartmentRepo
from database.repositories.employee_repo import EmployeeRepo
from services.department_service import DepartmentLogicService
from services.employee_service import EmployeeLogicService
from services.password import PasswordService

password_service = PasswordService()


async def get_session():
    async with database.get_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def get_password_service() -> PasswordService:
    return password_service


def get_department_service(
    session: AsyncSession = Depends(get_session),
) -> DepartmentLogicService:
    return DepartmentLogicService(DepartmentRepo(session))


def get_employee_service(
    session: AsyncSession = Depends(get_session),
    passwords: PasswordService = Depends(get_password_service),
) -> EmployeeLogicService:
    return EmployeeLogicService(EmployeeRepo(session), DepartmentRepo(session), passwords)
