from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.entities import MAX_ID, Department, Employee
from services.password import MAX_PASSWORD_BYTES


# ============ Department ============

class DepartmentCreateRequest(BaseModel):
    id: int | None = Field(default=None, ge=1, le=MAX_ID)
    name: str = Field(..., min_length=1, max_length=200)
    abbreviation: str = Field(..., min_length=1, max_length=20)
    active: bool = True

    @field_validator('name', 'abbreviation')
    @classmethod
    def strip_fields(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Поле не может быть пустым')
        return v

    def to_entity(self) -> Department:
        return Department(id=self.id, name=self.name, abbreviation=self.abbreviation, active=self.active)


class DepartmentUpdateRequest(DepartmentCreateRequest):
    id: int = Field(..., ge=1, le=MAX_ID)


class DepartmentResponse(BaseModel):
    id: int
    name: str
    abbreviation: str
    active: bool

    model_config = ConfigDict(from_attributes=True)


# ============ Employee ============

class EmployeeCreateRequest(BaseModel):
    id: int | None = Field(default=None, ge=1, le=MAX_ID)
    name: str = Field(..., min_length=1, max_length=200)
    position: str = Field(..., min_length=1, max_length=200)
    phone_number: str = Field(..., min_length=1, max_length=50)
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    active: bool = True
    department_id: int = Field(..., le=MAX_ID)
    supervisor_id: int | None = Field(default=None, le=MAX_ID)

    @field_validator('name', 'position', 'phone_number', 'username')
    @classmethod
    def strip_fields(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Поле не может быть пустым')
        return v

    @field_validator('password')
    @classmethod
    def check_password_bytes(cls, v: str | None) -> str | None:
        # bcrypt учитывает не больше 72 байт, считаем байты, а не символы
        if v is not None and len(v.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise ValueError(f'Пароль длиннее {MAX_PASSWORD_BYTES} байт в UTF-8')
        return v

    def to_entity(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.name,
            position=self.position,
            phone_number=self.phone_number,
            username=self.username,
            password=self.password,
            active=self.active,
            department_id=self.department_id,
            supervisor_id=self.supervisor_id,
        )


class EmployeeUpdateRequest(EmployeeCreateRequest):
    id: int = Field(..., ge=1, le=MAX_ID)
    # None - пароль не меняется
    password: str | None = Field(default=None, min_length=1)

    def to_entity(self) -> Employee:
        entity = super().to_entity()
        entity.password = self.password or ''
        return entity


class EmployeeResponse(BaseModel):
    """Сотрудник без хэша пароля."""

    id: int
    name: str
    position: str
    phone_number: str
    username: str
    active: bool
    department_id: int
    supervisor_id: int | None

    model_config = ConfigDict(from_attributes=True)
