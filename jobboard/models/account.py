"""User account model."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.core.storage import Base


class Account(Base):
    """Registered user. ``password_hash`` holds a bcrypt hash, never the secret."""

    __tablename__ = "usuarios"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("nombre", Text, nullable=False)
    code: Mapped[str] = mapped_column("codigo", Text, nullable=False)
    email: Mapped[str] = mapped_column("correo", Text, nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column("contrasena", Text, nullable=False)
