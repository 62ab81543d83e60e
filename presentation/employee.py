from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from domain.entities import MAX_ID
from domain.query import QueryRequest
from services.employee_service import EmployeeLogicService

from .dependencies import get_employee_service
from .dto import EmployeeCreateRequest, EmployeeResponse, EmployeeUpdateRequest

# ========== ROUTER ==========
router = APIRouter(prefix='/api/v0', tags=['employee'])


# ========== ENDPOINTS ==========

@router.get(
    '/employees',
    response_model=list[EmployeeResponse],
    summary='Список активных сотрудников',
)
async def list_employees(
    service: EmployeeLogicService = Depends(get_employee_service),
) -> list[EmployeeResponse]:
    employees = await service.list_active()
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.get(
    '/employees/query',
    response_model=list[EmployeeResponse],
    summary='Поиск сотрудников по атрибуту',
)
async def query_employees(
    attribute: str = Query(
        ...,
        description='id, name, department, active, position, phone, username, supervisor',
    ),
    value: str = Query(...),
    service: EmployeeLogicService = Depends(get_employee_service),
) -> list[EmployeeResponse]:
    employees = await service.query(QueryRequest(attribute=attribute, value=value))
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.get(
    '/employees/{id}',
    response_model=EmployeeResponse,
    summary='Получить сотрудника',
)
async def get_employee(
    id: Annotated[int, Path(le=MAX_ID)],
    service: EmployeeLogicService = Depends(get_employee_service),
) -> EmployeeResponse:
    employee = await service.get_by_id(id)
    return EmployeeResponse.model_validate(employee)


@router.post(
    '/employees',
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary='Создание нового сотрудника',
)
async def create_employee(
    request: EmployeeCreateRequest,
    service: EmployeeLogicService = Depends(get_employee_service),
) -> EmployeeResponse:
    saved = await service.add(request.to_entity())
    return EmployeeResponse.model_validate(saved)


@router.put(
    '/employees/{id}',
    response_model=EmployeeResponse,
    summary='Обновить сотрудника (полная замена, пароль по желанию)',
)
async def update_employee(
    id: Annotated[int, Path(le=MAX_ID)],
    request: EmployeeUpdateRequest,
    service: EmployeeLogicService = Depends(get_employee_service),
) -> EmployeeResponse:
    if request.id != id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='ID в пути и в теле запроса не совпадают',
        )

    updated = await service.update(
        request.to_entity(),
        password_changed=request.password is not None,
    )
    return EmployeeResponse.model_validate(updated)


@router.delete(
    '/employees/{id}',
    status_code=status.HTTP_204_NO_CONTENT,
    summary='Удаление сотрудника',
)
async def delete_employee(
    id: Annotated[int, Path(le=MAX_ID)],
    service: EmployeeLogicService = Depends(get_employee_service),
) -> None:
    await service.delete(id)
