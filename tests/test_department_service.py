import pytest

from domain.entities import Department
from domain.exceptions import AlreadyExistsError, InvalidAttributeError, NotFoundError
from domain.query import QueryRequest


async def seed(service):
    await service.add(Department(id=1, name='Human Resources', abbreviation='HR', active=True))
    await service.add(Department(id=2, name='Information Technology', abbreviation='IT', active=True))
    await service.add(Department(id=3, name='Finance', abbreviation='FIN', active=False))


async def test_add_then_get_returns_equal_entity(department_service):
    department = Department(id=5, name='Legal', abbreviation='LEG', active=True)

    await department_service.add(department)
    loaded = await department_service.get_by_id(5)

    assert loaded == Department(id=5, name='Legal', abbreviation='LEG', active=True)


async def test_add_without_id_assigns_one(department_service):
    saved = await department_service.add(Department(name='Legal', abbreviation='LEG'))

    assert saved.id is not None
    assert (await department_service.get_by_id(saved.id)).name == 'Legal'


async def test_add_duplicate_id_fails_without_mutation(department_service):
    await department_service.add(Department(id=1, name='IT', abbreviation='IT'))

    with pytest.raises(AlreadyExistsError) as exc_info:
        await department_service.add(Department(id=1, name='Other', abbreviation='OT'))

    assert exc_info.value.id == 1
    assert (await department_service.get_by_id(1)).name == 'IT'
    assert await department_service.query(QueryRequest('name', 'Other')) == []


@pytest.mark.parametrize('operation', ['get', 'update', 'delete'])
async def test_missing_id_raises_not_found(department_service, operation):
    await seed(department_service)

    with pytest.raises(NotFoundError) as exc_info:
        if operation == 'get':
            await department_service.get_by_id(42)
        elif operation == 'update':
            await department_service.update(Department(id=42, name='X', abbreviation='X'))
        else:
            await department_service.delete(42)

    assert exc_info.value.id == 42
    assert len(await department_service.query(QueryRequest('name', ''))) == 3


async def test_update_replaces_fields(department_service):
    await seed(department_service)

    updated = await department_service.update(
        Department(id=3, name='Finance & Control', abbreviation='FC', active=True)
    )

    assert updated == Department(id=3, name='Finance & Control', abbreviation='FC', active=True)
    assert await department_service.get_by_id(3) == updated


async def test_delete_removes_department(department_service):
    await seed(department_service)

    await department_service.delete(2)

    with pytest.raises(NotFoundError):
        await department_service.get_by_id(2)


@pytest.mark.parametrize('value', ['true', 'TRUE', 'True'])
async def test_query_active_ignores_value_case(department_service, value):
    await seed(department_service)

    result = await department_service.query(QueryRequest('active', value))

    assert [d.id for d in result] == [1, 2]


async def test_query_active_false_and_inactive_still_addressable(department_service):
    await seed(department_service)

    result = await department_service.query(QueryRequest('active', 'false'))

    assert [d.id for d in result] == [3]
    assert (await department_service.get_by_id(3)).active is False
    assert [d.id for d in await department_service.list_active()] == [1, 2]


async def test_query_by_name_and_abbreviation_is_case_insensitive(department_service):
    await seed(department_service)

    by_name = await department_service.query(QueryRequest('NAME', 'tech'))
    by_abbreviation = await department_service.query(QueryRequest('abbreviation', 'fi'))

    assert [d.id for d in by_name] == [2]
    assert [d.id for d in by_abbreviation] == [3]


async def test_query_by_id_returns_single_result(department_service):
    await seed(department_service)

    assert [d.name for d in await department_service.query(QueryRequest('id', '2'))] == [
        'Information Technology'
    ]
    assert await department_service.query(QueryRequest('id', '99')) == []


async def test_query_unknown_attribute(department_service):
    with pytest.raises(InvalidAttributeError) as exc_info:
        await department_service.query(QueryRequest('nonexistent', 'x'))

    assert exc_info.value.attribute == 'nonexistent'
