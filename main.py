from contextlib import asynccontextmanager

from fastapi import FastAPI

from core.logger import logger
from core.settings import settings
from database.database import database
from database.seed import seed_demo_data
from presentation.department import router as department_router
from presentation.dependencies import password_service
from presentation.employee import router as employee_router
from presentation.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения."""
    # Startup
    logger.info('[STARTUP] Запуск приложения...')
    try:
        await database.connect()
        if settings.CREATE_SCHEMA:
            await database.create_schema()
        if settings.SEED_DEMO_DATA:
            async with database.get_session() as session:
                await seed_demo_data(session, password_service)
        logger.info('[STARTUP] Приложение успешно запущено')
    except Exception as e:
        logger.error(f'[STARTUP] Ошибка при запуске: {e}')
        raise

    yield

    # Shutdown
    logger.info('[SHUTDOWN] Остановка приложения...')
    try:
        await database.dispose()
        logger.info('[SHUTDOWN] Приложение остановлено')
    except Exception as e:
        logger.error(f'[SHUTDOWN] Ошибка при остановке: {e}')


# Создание FastAPI приложения
app = FastAPI(
    title='Employee Manager API',
    description='API для управления сотрудниками и подразделениями',
    version='0.1.0',
    lifespan=lifespan,
)

register_exception_handlers(app)

# Подключение роутеров
app.include_router(department_router)
app.include_router(employee_router)


@app.get('/', tags=['health'])
async def root():
    """Health check endpoint."""
    return {
        'status': 'ok',
        'message': 'Employee Manager API is running',
        'db_connected': await database.is_connected(),
    }


if __name__ == '__main__':
    import uvicorn

    uvicorn.run(
        'main:app',
        host='0.0.0.0',
        port=8000,
        reload=True,
    )
