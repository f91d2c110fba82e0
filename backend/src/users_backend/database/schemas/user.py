"""User database schema."""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from users_backend.database.base import BaseSchema
from users_backend.shared import User

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
UserIdType = BigInteger().with_variant(Integer(), "sqlite")


class UserSchema(BaseSchema):
    """SQLAlchemy model for application users."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(UserIdType, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def to_user(self) -> User:
        """Detach the row into a plain :class:`User`."""
        return User(id=self.id, name=self.name, email=self.email)
