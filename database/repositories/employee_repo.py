from sqlalchemy import ColumnElement, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import logger
from domain.entities import Employee, id_in_range
from domain.exceptions import StorageFailure

from ..mappers import EmployeeMapper
from ..models import Employee as EmployeeORM


class EmployeeRepo:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_orm(self, id: int) -> EmployeeORM | None:
        # Такой строки не может быть в колонке INTEGER
        if not id_in_range(id):
            return None
        stmt = select(EmployeeORM).where(EmployeeORM.id == id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get(self, id: int) -> Employee | None:
        try:
            orm_employee = await self._get_orm(id)
            if not orm_employee:
                return None
            return EmployeeMapper.to_domain(orm_employee)

        except SQLAlchemyError as e:
            logger.error(f'Ошибка БД при получении сотрудника ID={id}: {e}')
            raise StorageFailure('Ошибка при получении сотрудника') from e

    async def find_where(self, predicate: ColumnElement[bool]) -> list[Employee]:
        try:
            stmt = select(EmployeeORM).where(predicate).order_by(EmployeeORM.id)
            result = await self.session.execute(stmt)
            return [EmployeeMapper.to_domain(e) for e in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f'Ошибка БД при поиске сотрудников: {e}')
            raise StorageFailure('Ошибка при поиске сотрудников') from e

    async def save(self, employee: Employee) -> Employee:
        try:
            # 1. Конвертация доменной сущности в ORM-объект
            orm_employee = EmployeeMapper.to_orm(employee)

            # 2. Добавление в сессию
            self.session.add(orm_employee)

            # 3. flush() — отправляем в БД, получаем ID
            await self.session.flush()

            # 4. Обновляем ID в доменном объекте
            employee.id = orm_employee.id

            logger.info(f'Сотрудник сохранён. ID - {employee.id}')
            return employee

        except SQLAlchemyError as e:
            logger.error(f'Ошибка при сохранении. {e}')
            raise StorageFailure('Ошибка при сохранении сотрудника') from e

    async def update(self, upd_employee: Employee) -> Employee | None:
        try:
            orm_employee = await self._get_orm(upd_employee.id)

            if not orm_employee:
                logger.error(f'Сотрудник с ID={upd_employee.id} не найден.')
                return None

            # Полная замена изменяемых полей
            orm_employee.name = upd_employee.name
            orm_employee.position = upd_employee.position
            orm_employee.phone_number = upd_employee.phone_number
            orm_employee.username = upd_employee.username
            orm_employee.password = upd_employee.password
            orm_employee.active = upd_employee.active
            orm_employee.department_id = upd_employee.department_id
            orm_employee.supervisor_id = upd_employee.supervisor_id
            await self.session.flush()

            logger.info(f'Сотрудник обновлён. ID - {orm_employee.id}')
            return EmployeeMapper.to_domain(orm_employee)

        except SQLAlchemyError as e:
            logger.error(f'Ошибка при обновлении сотрудника ID={upd_employee.id}. {e}')
            raise StorageFailure('Ошибка при обновлении сотрудника') from e

    async def delete(self, employee: Employee) -> bool:
        try:
            # 1. Выполнение запроса на извлечение данных из БД
            orm_employee = await self._get_orm(employee.id)

            if not orm_employee:
                logger.warning(f'Сотрудник ID={employee.id} не найден при удалении')
                return False

            # 2. Удаление
            await self.session.delete(orm_employee)
            await self.session.flush()
            logger.info(f'Сотрудник удалён. ID - {employee.id}')
            return True

        except SQLAlchemyError as e:
            logger.error(f'Ошибка при удалении. {e}')
            raise StorageFailure('Ошибка при удалении сотрудника') from e

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f'Ошибка при фиксации изменений (сотрудники): {e}')
            await self.session.rollback()
            raise StorageFailure('Ошибка при сохранении изменений сотрудника') from e
