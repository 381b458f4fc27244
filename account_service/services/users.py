"""Persistence for user accounts."""

from sqlalchemy import Engine, Row, delete, select, text, update
from sqlalchemy.exc import IntegrityError

from account_service.database import create_session_factory, init_db
from account_service.models.user import User

# Signed 32-bit INTEGER column; larger ids cannot name a row
MAX_USER_ID = 2**31 - 1


def _id_in_range(user_id: int) -> bool:
    return 0 < user_id <= MAX_USER_ID


class DuplicateUserError(Exception):
    """Raised when an insert collides with an existing user name."""

    def __init__(self, name: str):
        super().__init__(f"User name already exists: {name}")
        self.name = name


class UserRepository:
    """Single-statement operations on the ``user`` table.

    Each method checks a session out of the pool, runs one parameterized
    statement in its own transaction and returns the connection.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = create_session_factory(engine)

    def check_connection(self) -> None:
        """Acquire a pooled connection and run a trivial query."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def ensure_schema(self) -> None:
        """Create the user table if it does not exist."""
        init_db(self.engine)

    def find_id_and_password_by_name(self, name: str) -> Row | None:
        """Get ``(id, password)`` for the user with this name."""
        with self.session_factory() as db:
            return db.execute(select(User.id, User.password).where(User.name == name)).first()

    def find_id_by_name(self, name: str) -> int | None:
        """Get the id of the user with this name."""
        with self.session_factory() as db:
            return db.execute(select(User.id).where(User.name == name)).scalar_one_or_none()

    def insert_user(self, name: str, hashed_password: str, email: str | None = None) -> int:
        """Create a user and return the generated id.

        Raises DuplicateUserError when the unique constraint on ``name`` rejects
        the row, which also covers two registrations racing for one name.
        """
        user = User(name=name, password=hashed_password, email=email)
        with self.session_factory() as db:
            db.add(user)
            try:
                db.flush()
                user_id = user.id
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise DuplicateUserError(name) from e
        return user_id

    def list_users(self) -> list[Row]:
        """Get ``(id, name, email, created_at)`` for every user, ordered by id."""
        with self.session_factory() as db:
            return db.execute(
                select(User.id, User.name, User.email, User.created_at).order_by(User.id)
            ).all()

    def delete_user_by_id(self, user_id: int) -> int:
        """Delete a user. Returns the number of rows removed (0 or 1)."""
        if not _id_in_range(user_id):
            return 0
        with self.session_factory() as db:
            result = db.execute(
                delete(User).where(User.id == user_id).execution_options(synchronize_session=False)
            )
            db.commit()
            return result.rowcount

    def update_email_by_id(self, user_id: int, email: str) -> int:
        """Set a user's email. Returns the number of rows matched (0 or 1)."""
        if not _id_in_range(user_id):
            return 0
        with self.session_factory() as db:
            result = db.execute(
                update(User)
                .where(User.id == user_id)
                .values(email=email)
                .execution_options(synchronize_session=False)
            )
            db.commit()
            return result.rowcount
