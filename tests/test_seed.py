from database.seed import DEMO_PASSWORD, seed_demo_data
from domain.query import QueryRequest


async def test_seed_creates_hierarchy_once(session, password_service, department_service, employee_service):
    assert await seed_demo_data(session, password_service) is True
    assert await seed_demo_data(session, password_service) is False

    departments = await department_service.query(QueryRequest('name', ''))
    active_employees = await employee_service.list_active()
    under_jane = await employee_service.query(QueryRequest('supervisor', 'jane'))

    assert [d.abbreviation for d in departments] == ['HR', 'IT', 'FIN']
    assert [e.name for e in active_employees] == ['John', 'Jane', 'James', 'Jill', 'Jack']
    assert [e.name for e in under_jane] == ['James', 'Jill', 'Jack', 'Jenny']
    assert await employee_service.verify_password(active_employees[0].id, DEMO_PASSWORD)
