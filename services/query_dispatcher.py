"""
Диспетчер атрибутных запросов.

Превращает QueryRequest(attribute, value) в SQL-предикат для
Repo.find_where(). Набор атрибутов задаётся Enum-ом, правило для каждого
атрибута задаёт FieldRule (колонка + способ сравнения). Таблица правил
неизменяема после создания диспетчера.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, false, func, select

from core.logger import logger
from domain.entities import id_in_range
from domain.exceptions import InvalidAttributeError, InvalidQueryValueError
from domain.query import QueryRequest

A = TypeVar('A', bound=Enum)


class Match(Enum):
    EXACT = 'exact'  # равенство целого числа (id)
    CONTAINS = 'contains'  # подстрока без учёта регистра
    FLAG = 'flag'  # подстрока строкового представления bool ('true' / 'false')


@dataclass(frozen=True)
class FieldRule:
    """Правило сравнения для одного атрибута.

    column: колонка, с которой сравнивается значение. Если колонка
    принадлежит связанной таблице, fk это внешний ключ сущности, а key
    первичный ключ связанной таблицы; тогда предикат строится как
    fk IN (SELECT key FROM related WHERE ...). Пустой fk (NULL) ни с чем
    не совпадает.
    """

    column: Any
    match: Match
    fk: Any = None
    key: Any = None


class QueryDispatcher(Generic[A]):
    def __init__(self, attributes: type[A], rules: Mapping[A, FieldRule]):
        missing = [a.value for a in attributes if a not in rules]
        if missing:
            raise ValueError(f'Нет правил поиска для атрибутов: {missing}')

        self._attributes = attributes
        self._rules: Mapping[A, FieldRule] = MappingProxyType(dict(rules))

    @property
    def attributes(self) -> list[str]:
        return [a.value for a in self._attributes]

    def resolve(self, attribute: str) -> A:
        try:
            return self._attributes(attribute.strip().lower())
        except ValueError:
            logger.error(f'[QUERY] Недопустимый атрибут поиска: "{attribute}"')
            raise InvalidAttributeError(attribute) from None

    def predicate(self, request: QueryRequest) -> ColumnElement[bool]:
        attribute = self.resolve(request.attribute)
        rule = self._rules[attribute]
        condition = self._condition(attribute, rule, request.value)

        if rule.fk is None:
            return condition
        return rule.fk.in_(select(rule.key).where(condition))

    @staticmethod
    def _condition(attribute: A, rule: FieldRule, raw: str) -> ColumnElement[bool]:
        value = raw.strip().lower()

        if rule.match is Match.EXACT:
            try:
                number = int(value)
            except ValueError:
                raise InvalidQueryValueError(attribute.value, raw) from None
            # Вне диапазона INTEGER драйвер упадёт при подстановке параметра
            if not id_in_range(number):
                raise InvalidQueryValueError(attribute.value, raw)
            return rule.column == number

        if rule.match is Match.CONTAINS:
            return func.lower(rule.column).contains(value, autoescape=True)

        if rule.match is Match.FLAG:
            flags = [flag for flag in (True, False) if value in str(flag).lower()]
            if not flags:
                return false()
            return rule.column.in_(flags)

        raise ValueError(f'Неизвестный тип сравнения: {rule.match}')
