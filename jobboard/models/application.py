"""Applicant submission model."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.core.storage import Base


class Application(Base):
    """Applicant data plus the stored path of the uploaded resume.

    ``vacancy_id`` is a plain integer, not a foreign key: the referenced
    vacancy is never checked for existence.
    """

    __tablename__ = "datos_usuario"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column("correo", Text, nullable=False)
    first_names: Mapped[str] = mapped_column("nombres", Text, nullable=False)
    last_names: Mapped[str] = mapped_column("apellidos", Text, nullable=False)
    cv_path: Mapped[str] = mapped_column("url_cv", Text, nullable=False)
    vacancy_id: Mapped[int] = mapped_column("vacante_id", Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.current_timestamp()
    )
