from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from domain.entities import MAX_ID
from domain.query import QueryRequest
from services.department_service import DepartmentLogicService

from .dependencies import get_department_service
from .dto import DepartmentCreateRequest, DepartmentResponse, DepartmentUpdateRequest

# ========== ROUTER ==========
router = APIRouter(prefix='/api/v0', tags=['department'])


# ========== ENDPOINTS ==========

@router.get(
    '/departments',
    response_model=list[DepartmentResponse],
    summary='Список активных подразделений',
)
async def list_departments(
    service: DepartmentLogicService = Depends(get_department_service),
) -> list[DepartmentResponse]:
    departments = await service.list_active()
    return [DepartmentResponse.model_validate(d) for d in departments]


@router.get(
    '/departments/query',
    response_model=list[DepartmentResponse],
    summary='Поиск подразделений по атрибуту',
)
async def query_departments(
    attribute: str = Query(..., description='id, name, abbreviation, active'),
    value: str = Query(...),
    service: DepartmentLogicService = Depends(get_department_service),
) -> list[DepartmentResponse]:
    departments = await service.query(QueryRequest(attribute=attribute, value=value))
    return [DepartmentResponse.model_validate(d) for d in departments]


@router.get(
    '/departments/{id}',
    response_model=DepartmentResponse,
    summary='Получить подразделение',
)
async def get_department(
    id: Annotated[int, Path(le=MAX_ID)],
    service: DepartmentLogicService = Depends(get_department_service),
) -> DepartmentResponse:
    department = await service.get_by_id(id)
    return DepartmentResponse.model_validate(department)


@router.post(
    '/departments',
    response_model=DepartmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary='Создание нового подразделения',
)
async def create_department(
    request: DepartmentCreateRequest,
    service: DepartmentLogicService = Depends(get_department_service),
) -> DepartmentResponse:
    saved = await service.add(request.to_entity())
    return DepartmentResponse.model_validate(saved)


@router.put(
    '/departments/{id}',
    response_model=DepartmentResponse,
    summary='Обновить подразделение (полная замена)',
)
async def update_department(
    id: Annotated[int, Path(le=MAX_ID)],
    request: DepartmentUpdateRequest,
    service: DepartmentLogicService = Depends(get_department_service),
) -> DepartmentResponse:
    if request.id != id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='ID в пути и в теле запроса не совпадают',
        )

    updated = await service.update(request.to_entity())
    return DepartmentResponse.model_validate(updated)


@router.delete(
    '/departments/{id}',
    status_code=status.HTTP_204_NO_CONTENT,
    summary='Удаление подразделения',
    responses={
        204: {'description': 'Подразделение успешно удалено'},
        404: {'description': 'Подразделение не найдено'},
    },
)
async def delete_department(
    id: Annotated[int, Path(le=MAX_ID)],
    service: DepartmentLogicService = Depends(get_department_service),
) -> None:
    await service.delete(id)
