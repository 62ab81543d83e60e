class DomainError(Exception):
    """Базовая ошибка слоя бизнес-логики."""


class NotFoundError(DomainError):
    def __init__(self, entity: str, id: int):
        self.entity = entity
        self.id = id
        super().__init__(f'{entity} с ID={id} не найден')


class DepartmentNotFoundError(NotFoundError):
    """Ссылка сотрудника на несуществующее подразделение."""

    def __init__(self, id: int):
        super().__init__('Department', id)


class SupervisorNotFoundError(NotFoundError):
    """Ссылка сотрудника на несуществующего руководителя."""

    def __init__(self, id: int):
        super().__init__('Supervisor', id)


class AlreadyExistsError(DomainError):
    def __init__(self, entity: str, id: int):
        self.entity = entity
        self.id = id
        super().__init__(f'{entity} с ID={id} уже существует')


class SupervisorCycleError(DomainError):
    def __init__(self, employee_id: int, supervisor_id: int):
        self.employee_id = employee_id
        self.supervisor_id = supervisor_id
        super().__init__(
            f'Нельзя назначить ID={supervisor_id} руководителем ID={employee_id}: '
            'получится цикл в иерархии'
        )


class InvalidAttributeError(DomainError):
    def __init__(self, attribute: str):
        self.attribute = attribute
        super().__init__(f'Атрибут "{attribute}" не поддерживается для поиска')


class InvalidQueryValueError(DomainError):
    def __init__(self, attribute: str, value: str):
        self.attribute = attribute
        self.value = value
        super().__init__(f'Недопустимое значение "{value}" для атрибута "{attribute}"')


class InvalidPasswordError(DomainError):
    """Пароль не подходит для bcrypt (длиннее 72 байт в UTF-8)."""


class StorageFailure(DomainError):
    """Ошибка хранилища. Исходное исключение доступно через __cause__."""
