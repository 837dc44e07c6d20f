"""Job vacancy model."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.core.storage import Base


class Vacancy(Base):
    """Job posting. Not owned by any account."""

    __tablename__ = "vacantes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column("titulo", Text, nullable=False)
    description: Mapped[str] = mapped_column("descripcion", Text, nullable=False)
    location: Mapped[str] = mapped_column("ubicacion", Text, nullable=False)
    salary: Mapped[str | None] = mapped_column("salario", Text, nullable=True)
