import database.models as orm
import domain.entities as domain


class DepartmentMapper:
    @staticmethod
    def to_domain(model: orm.Department) -> domain.Department:
        return domain.Department(
            id=model.id,
            name=model.name,
            abbreviation=model.abbreviation,
            active=model.active,
        )

    @staticmethod
    def to_orm(entity: domain.Department) -> orm.Department:
        return orm.Department(
            id=entity.id,
            name=entity.name,
            abbreviation=entity.abbreviation,
            active=entity.active,
        )


class EmployeeMapper:
    @staticmethod
    def to_domain(model: orm.Employee) -> domain.Employee:
        return domain.Employee(
            id=model.id,
            name=model.name,
            position=model.position,
            phone_number=model.phone_number,
            username=model.username,
            password=model.password,
            active=model.active,
            department_id=model.department_id,
            supervisor_id=model.supervisor_id,
        )

    @staticmethod
    def to_orm(entity: domain.Employee) -> orm.Employee:
        return orm.Employee(
            id=entity.id,
            name=entity.name,
            position=entity.position,
            phone_number=entity.phone_number,
            username=entity.username,
            password=entity.password,
            active=entity.active,
            department_id=entity.department_id,
            supervisor_id=entity.supervisor_id,
        )
