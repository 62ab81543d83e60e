from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import logger
from domain.entities import Department, Employee
from services.department_service import DepartmentLogicService
from services.employee_service import EmployeeLogicService
from services.password import PasswordService

from .models import Department as DepartmentORM
from .repositories.department_repo import DepartmentRepo
from .repositories.employee_repo import EmployeeRepo

DEMO_PASSWORD = 'testpassword'
DEMO_PHONE = '06205007447'


async def seed_demo_data(session: AsyncSession, password_service: PasswordService) -> bool:
    """Заполнить пустую БД демо-данными. Возвращает False, если данные уже есть."""
    result = await session.execute(select(DepartmentORM.id).limit(1))
    if result.scalar_one_or_none() is not None:
        logger.info('[SEED] Подразделения уже есть, пропускаем')
        return False

    department_repo = DepartmentRepo(session)
    departments = DepartmentLogicService(department_repo)
    employees = EmployeeLogicService(EmployeeRepo(session), department_repo, password_service)

    hr = await departments.add(Department(name='Human Resources', abbreviation='HR'))
    it = await departments.add(Department(name='Information Technology', abbreviation='IT'))
    await departments.add(Department(name='Finance', abbreviation='FIN', active=False))

    def employee(name: str, department: Department, supervisor: Employee | None, active: bool = True) -> Employee:
        return Employee(
            name=name,
            position='manager',
            phone_number=DEMO_PHONE,
            username=name,
            password=DEMO_PASSWORD,
            active=active,
            department_id=department.id,
            supervisor_id=supervisor.id if supervisor else None,
        )

    john = await employees.add(employee('John', hr, None))
    jane = await employees.add(employee('Jane', it, john))
    for name, department, active in (
        ('James', hr, True),
        ('Jill', it, True),
        ('Jack', hr, True),
        ('Jenny', it, False),
    ):
        await employees.add(employee(name, department, jane, active))

    logger.info('[SEED] Демо-данные созданы')
    return True
