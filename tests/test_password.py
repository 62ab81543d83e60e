import pytest

from conftest import make_employee
from domain.exceptions import InvalidPasswordError


async def test_hash_is_salted_per_call(password_service):
    owner = make_employee()

    first = await password_service.hash_password(owner, 'secret')
    second = await password_service.hash_password(owner, 'secret')

    assert first != second
    assert first.startswith('$2')
    assert await password_service.verify_password(owner, first, 'secret')
    assert await password_service.verify_password(owner, second, 'secret')


async def test_verify_rejects_wrong_password(password_service):
    owner = make_employee()
    hashed = await password_service.hash_password(owner, 'secret')

    assert not await password_service.verify_password(owner, hashed, 'Secret')


async def test_verify_rejects_non_hash(password_service):
    assert not await password_service.verify_password(make_employee(), 'plain-text', 'plain-text')


async def test_password_limit_counts_bytes(password_service):
    owner = make_employee()

    # 36 кириллических букв это ровно 72 байта
    hashed = await password_service.hash_password(owner, 'я' * 36)
    assert await password_service.verify_password(owner, hashed, 'я' * 36)

    with pytest.raises(InvalidPasswordError):
        await password_service.hash_password(owner, 'я' * 37)
