from sqlalchemy import ColumnElement, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import logger
from domain.entities import Department, id_in_range
from domain.exceptions import StorageFailure

from ..mappers import DepartmentMapper
from ..models import Department as DepartmentORM


class DepartmentRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_orm(self, id: int) -> DepartmentORM | None:
        # Такой строки не может быть в колонке INTEGER
        if not id_in_range(id):
            return None
        stmt = select(DepartmentORM).where(DepartmentORM.id == id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get(self, id: int) -> Department | None:
        try:
            orm_department = await self._get_orm(id)
            if not orm_department:
                return None
            return DepartmentMapper.to_domain(orm_department)

        except SQLAlchemyError as e:
            logger.error(f'Ошибка БД при получении департамента ID={id}: {e}')
            raise StorageFailure('Ошибка при получении департамента') from e

    async def find_where(self, predicate: ColumnElement[bool]) -> list[Department]:
        try:
            stmt = select(DepartmentORM).where(predicate).order_by(DepartmentORM.id)
            result = await self.session.execute(stmt)
            return [DepartmentMapper.to_domain(d) for d in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f'Ошибка БД при поиске департаментов: {e}')
            raise StorageFailure('Ошибка при поиске департаментов') from e

    async def save(self, department: Department) -> Department:
        try:
            orm_department = DepartmentMapper.to_orm(department)
            self.session.add(orm_department)
            await self.session.flush()
            department.id = orm_department.id
            logger.info(f'Департамент сохранён. ID={department.id}')
            return department

        except SQLAlchemyError as e:
            logger.error(f'Ошибка при сохранении департамента: {e}')
            raise StorageFailure('Ошибка при сохранении департамента') from e

    async def update(self, upd_department: Department) -> Department | None:
        try:
            orm_department = await self._get_orm(upd_department.id)

            if not orm_department:
                logger.error(f'Департамент с ID={upd_department.id} не найден.')
                return None

            orm_department.name = upd_department.name
            orm_department.abbreviation = upd_department.abbreviation
            orm_department.active = upd_department.active
            await self.session.flush()

            logger.info(f'Департамент обновлён. ID={orm_department.id}')
            return DepartmentMapper.to_domain(orm_department)

        except SQLAlchemyError as e:
            logger.error(f'Ошибка БД при обновлении департамента ID={upd_department.id}: {e}')
            raise StorageFailure('Ошибка при обновлении департамента') from e

    async def delete(self, department: Department) -> bool:
        try:
            orm_department = await self._get_orm(department.id)

            if not orm_department:
                logger.warning(f'Департамент ID={department.id} не найден при удалении')
                return False

            await self.session.delete(orm_department)
            await self.session.flush()
            logger.info(f'Департамент удалён. ID={department.id}')
            return True

        except SQLAlchemyError as e:
            logger.error(f'Ошибка при удалении департамента ID={department.id}: {e}')
            raise StorageFailure('Ошибка при удалении департамента') from e

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f'Ошибка при фиксации изменений (департаменты): {e}')
            await self.session.rollback()
            raise StorageFailure('Ошибка при сохранении изменений департамента') from e
