from dataclasses import replace

from sqlalchemy.orm import aliased

from core.logger import logger
from database.models import Department as DepartmentORM
from database.models import Employee as EmployeeORM
from database.repositories.department_repo import DepartmentRepo
from database.repositories.employee_repo import EmployeeRepo
from domain.entities import Employee
from domain.exceptions import (
    AlreadyExistsError,
    DepartmentNotFoundError,
    NotFoundError,
    StorageFailure,
    SupervisorCycleError,
    SupervisorNotFoundError,
)
from domain.query import EmployeeAttribute, QueryRequest

from .password import PasswordService
from .query_dispatcher import FieldRule, Match, QueryDispatcher

SupervisorORM = aliased(EmployeeORM, name='supervisor')

EMPLOYEE_QUERY_RULES = {
    EmployeeAttribute.ID: FieldRule(EmployeeORM.id, Match.EXACT),
    EmployeeAttribute.NAME: FieldRule(EmployeeORM.name, Match.CONTAINS),
    EmployeeAttribute.DEPARTMENT: FieldRule(
        DepartmentORM.name,
        Match.CONTAINS,
        fk=EmployeeORM.department_id,
        key=DepartmentORM.id,
    ),
    EmployeeAttribute.ACTIVE: FieldRule(EmployeeORM.active, Match.FLAG),
    EmployeeAttribute.POSITION: FieldRule(EmployeeORM.position, Match.CONTAINS),
    EmployeeAttribute.PHONE: FieldRule(EmployeeORM.phone_number, Match.CONTAINS),
    EmployeeAttribute.USERNAME: FieldRule(EmployeeORM.username, Match.CONTAINS),
    EmployeeAttribute.SUPERVISOR: FieldRule(
        SupervisorORM.name,
        Match.CONTAINS,
        fk=EmployeeORM.supervisor_id,
        key=SupervisorORM.id,
    ),
}


class EmployeeLogicService:
    """
    CRUD и поиск сотрудников.

    Помимо существования записи проверяет ссылки на подразделение и
    руководителя (до любых изменений в БД), хэширует пароль и не даёт
    построить цикл в иерархии руководителей.
    """

    def __init__(
        self,
        repo: EmployeeRepo,
        department_repo: DepartmentRepo,
        password_service: PasswordService,
    ):
        self.repo = repo
        self.department_repo = department_repo
        self.password_service = password_service
        self.dispatcher = QueryDispatcher(EmployeeAttribute, EMPLOYEE_QUERY_RULES)

    async def get_by_id(self, id: int) -> Employee:
        employee = await self.repo.get(id)
        if employee is None:
            logger.error(f'Сотрудник с ID={id} не найден')
            raise NotFoundError('Employee', id)
        return employee

    async def add(self, employee: Employee) -> Employee:
        if employee.id is not None and await self.repo.get(employee.id) is not None:
            logger.error(f'Сотрудник с ID={employee.id} уже существует')
            raise AlreadyExistsError('Employee', employee.id)

        # Объект вызывающего кода не меняется, хэш уходит в копию
        hashed = await self.password_service.hash_password(employee, employee.password)

        await self._check_department(employee.department_id)
        if employee.supervisor_id is not None:
            await self._check_supervisor(employee.supervisor_id)

        saved = await self.repo.save(replace(employee, password=hashed))
        await self.repo.commit()
        return saved

    async def update(self, employee: Employee, password_changed: bool = False) -> Employee:
        """
        Полная замена изменяемых полей сотрудника.

        Пароль хэшируется заново только при password_changed=True,
        иначе остаётся сохранённый хэш.
        """
        current = await self.get_by_id(employee.id)

        await self._check_department(employee.department_id)
        if employee.supervisor_id is not None:
            await self._check_supervisor(employee.supervisor_id)
            await self._check_no_cycle(employee.id, employee.supervisor_id)

        if password_changed:
            hashed = await self.password_service.hash_password(employee, employee.password)
        else:
            hashed = current.password

        await self.repo.update(replace(employee, password=hashed))
        await self.repo.commit()

        refreshed = await self.repo.get(employee.id)
        if refreshed is None:
            raise StorageFailure(f'Сотрудник ID={employee.id} пропал после обновления')
        return refreshed

    async def delete(self, id: int) -> None:
        employee = await self.get_by_id(id)
        await self.repo.delete(employee)
        await self.repo.commit()

    async def query(self, request: QueryRequest) -> list[Employee]:
        predicate = self.dispatcher.predicate(request)
        return await self.repo.find_where(predicate)

    async def list_active(self) -> list[Employee]:
        return await self.query(QueryRequest(EmployeeAttribute.ACTIVE.value, 'true'))

    async def verify_password(self, id: int, password: str) -> bool:
        employee = await self.get_by_id(id)
        return await self.password_service.verify_password(employee, employee.password, password)

    async def _check_department(self, department_id: int) -> None:
        if await self.department_repo.get(department_id) is None:
            logger.error(f'Подразделение с ID={department_id} не найдено')
            raise DepartmentNotFoundError(department_id)

    async def _check_supervisor(self, supervisor_id: int) -> None:
        if await self.repo.get(supervisor_id) is None:
            logger.error(f'Руководитель с ID={supervisor_id} не найден')
            raise SupervisorNotFoundError(supervisor_id)

    async def _check_no_cycle(self, employee_id: int, supervisor_id: int) -> None:
        """Поднимается по цепочке руководителей от supervisor_id."""
        visited: set[int] = set()
        current_id: int | None = supervisor_id

        while current_id is not None and current_id not in visited:
            if current_id == employee_id:
                logger.error(
                    f'Цикл в иерархии: ID={supervisor_id} не может быть руководителем ID={employee_id}'
                )
                raise SupervisorCycleError(employee_id, supervisor_id)
            visited.add(current_id)
            current = await self.repo.get(current_id)
            current_id = current.supervisor_id if current else None
