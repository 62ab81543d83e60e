import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.logger import logger
from core.settings import Settings, settings

from . import models  # noqa: F401  регистрирует модели в Base.metadata
from .base import Base


class DataBaseConnection:
    """
    Управление подключением к PostgreSQL с async поддержкой.

    - Все параметры берутся из Settings
    - Один engine и sessionmaker на приложение
    - Коммит делает слой логики (repo.commit()), здесь только сессии
    """

    def __init__(self, config: Settings = settings):
        self.config = config
        self.engine = create_async_engine(
            config.url(),
            echo=config.ECHO,  # Логгирование SQL-запросов для отладки
            pool_pre_ping=config.POOL_PRE_PING,  # Проверять соединение перед использованием
            pool_size=config.POOL_SIZE,
            max_overflow=config.MAX_OVERFLOW,
            connect_args={
                'timeout': 10,  # Таймаут подключения (секунды)
                'command_timeout': 60,  # Таймаут выполнения команд (секунды)
                'server_settings': {
                    'application_name': 'employee_manager',
                },
            },
        )

        self.AsyncSessionLocal = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Объекты остаются доступны после commit()
            autoflush=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async context manager для создания сессии БД.

        Только создаёт и закрывает сессию. Коммит выполняют сервисы логики
        через repo.commit(), откат при ошибке делает зависимость FastAPI.
        """
        session = self.AsyncSessionLocal()
        try:
            yield session
        finally:
            await session.close()

    async def connect(self, max_retries: int = 10, retry_delay: float = 3) -> None:
        """Подключиться к БД (для lifespan startup) с retry логикой."""
        db_url = self.config.url()
        logger.info(f'[DATABASE] Попытка подключения к БД: {db_url.render_as_string(hide_password=True)}')

        for attempt in range(1, max_retries + 1):
            try:
                logger.info(f'[DATABASE] Попытка подключения {attempt}/{max_retries}...')
                async with self.engine.begin() as conn:
                    await conn.execute(text('SELECT 1'))
                logger.info('[DATABASE] Успешно подключились к PostgreSQL')
                return
            except Exception as e:
                if attempt == max_retries:
                    logger.error(f'[DATABASE] Не удалось подключиться после {max_retries} попыток: {e}')
                    raise
                logger.warning(
                    f'[DATABASE] Попытка подключения {attempt}/{max_retries} не удалась: {type(e).__name__}: {e}. '
                    f'Повтор через {retry_delay} сек...'
                )
                await asyncio.sleep(retry_delay)
                retry_delay = min(retry_delay * 1.5, 10)  # Экспоненциальная задержка, но не больше 10 сек

    async def create_schema(self) -> None:
        """Создать недостающие таблицы (create_all не трогает существующие)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info('[DATABASE] Схема БД проверена/создана')

    async def is_connected(self) -> bool:
        """Проверить, подключена ли БД."""
        try:
            async with self.engine.begin() as conn:
                await conn.execute(text('SELECT 1'))
            return True
        except Exception as e:
            logger.warning(f'[DATABASE] Проверка соединения не удалась: {e}')
            return False

    async def dispose(self) -> None:
        """Корректно закрыть соединения пула (при завершении приложения)."""
        try:
            await self.engine.dispose()
            logger.info('[DATABASE] Пул соединений закрыт')
        except Exception as e:
            logger.error(f'[DATABASE] Ошибка при закрытии: {e}')
            raise


# Глобальный экземпляр
database = DataBaseConnection()
