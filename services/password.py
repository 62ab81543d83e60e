import asyncio

import bcrypt

from core.settings import settings
from domain.entities import Employee
from domain.exceptions import InvalidPasswordError

# bcrypt учитывает не больше 72 байт пароля
MAX_PASSWORD_BYTES = 72


class PasswordService:
    """Хэширование и проверка паролей сотрудников (bcrypt).

    owner принимается ради общего интерфейса (хэш привязан к сотруднику),
    но bcrypt он не нужен: соль генерируется заново для каждого хэша и
    хранится внутри него, так что у каждого сотрудника она своя.
    bcrypt работает в отдельном потоке, чтобы не блокировать event loop.
    """

    def __init__(self, rounds: int | None = None):
        self.rounds = rounds or settings.BCRYPT_ROUNDS

    async def hash_password(self, owner: Employee, password: str) -> str:
        return await asyncio.to_thread(self._hash, password)

    async def verify_password(self, owner: Employee, hashed_password: str, password: str) -> bool:
        return await asyncio.to_thread(self._verify, hashed_password, password)

    def _hash(self, password: str) -> str:
        encoded = password.encode('utf-8')
        # bcrypt 4.x молча обрезает длинный пароль, 5.x бросает ValueError
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise InvalidPasswordError(f'Пароль длиннее {MAX_PASSWORD_BYTES} байт в UTF-8')
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(encoded, salt).decode('utf-8')

    @staticmethod
    def _verify(hashed_password: str, password: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed_password.encode('utf-8'))
        except ValueError:
            # Строка не является bcrypt-хэшем
            return False
