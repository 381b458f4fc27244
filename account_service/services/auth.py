"""Password hashing for stored credentials."""

from passlib.context import CryptContext

DEFAULT_BCRYPT_ROUNDS = 12


class PasswordHasher:
    """Salted bcrypt hashing with a fixed work factor.

    Every call to :meth:`hash` draws a new salt, so hashing the same password
    twice yields two different strings that both verify.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password."""
        return self._context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        """Verify a password against its hash.

        A mismatch returns False. A hash passlib cannot identify raises ValueError.
        """
        return self._context.verify(password, hashed_password)
