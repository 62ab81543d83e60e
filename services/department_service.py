from core.logger import logger
from database.models import Department as DepartmentORM
from database.repositories.department_repo import DepartmentRepo
from domain.entities import Department
from domain.exceptions import AlreadyExistsError, NotFoundError, StorageFailure
from domain.query import DepartmentAttribute, QueryRequest

from .query_dispatcher import FieldRule, Match, QueryDispatcher

DEPARTMENT_QUERY_RULES = {
    DepartmentAttribute.ID: FieldRule(DepartmentORM.id, Match.EXACT),
    DepartmentAttribute.NAME: FieldRule(DepartmentORM.name, Match.CONTAINS),
    DepartmentAttribute.ABBREVIATION: FieldRule(DepartmentORM.abbreviation, Match.CONTAINS),
    DepartmentAttribute.ACTIVE: FieldRule(DepartmentORM.active, Match.FLAG),
}


class DepartmentLogicService:
    """CRUD и поиск подразделений.

    Все изменения фиксируются сразу (repo.commit()); ошибки поднимаются
    наверх типизированными исключениями из domain.exceptions.
    """

    def __init__(self, repo: DepartmentRepo):
        self.repo = repo
        self.dispatcher = QueryDispatcher(DepartmentAttribute, DEPARTMENT_QUERY_RULES)

    async def get_by_id(self, id: int) -> Department:
        department = await self.repo.get(id)
        if department is None:
            logger.error(f'Департамент с ID={id} не найден')
            raise NotFoundError('Department', id)
        return department

    async def add(self, department: Department) -> Department:
        if department.id is not None and await self.repo.get(department.id) is not None:
            logger.error(f'Департамент с ID={department.id} уже существует')
            raise AlreadyExistsError('Department', department.id)

        saved = await self.repo.save(department)
        await self.repo.commit()
        return saved

    async def update(self, department: Department) -> Department:
        await self.get_by_id(department.id)

        await self.repo.update(department)
        await self.repo.commit()

        refreshed = await self.repo.get(department.id)
        if refreshed is None:
            raise StorageFailure(f'Департамент ID={department.id} пропал после обновления')
        return refreshed

    async def delete(self, id: int) -> None:
        department = await self.get_by_id(id)
        await self.repo.delete(department)
        await self.repo.commit()

    async def query(self, request: QueryRequest) -> list[Department]:
        predicate = self.dispatcher.predicate(request)
        return await self.repo.find_where(predicate)

    async def list_active(self) -> list[Department]:
        return await self.query(QueryRequest(DepartmentAttribute.ACTIVE.value, 'true'))
