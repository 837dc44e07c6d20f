"""Applicant submissions with an uploaded resume."""

import logging

from fastapi import UploadFile, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from jobboard.core.exceptions import NotFoundError, StorageError, ValidationError
from jobboard.core.files import FileStore
from jobboard.core.storage import Database
from jobboard.models.application import Application

logger = logging.getLogger(__name__)


class ApplicationService:
    """Stores applications and the resume files that come with them."""

    def __init__(self, db: Database, file_store: FileStore):
        self.db = db
        self.file_store = file_store

    async def submit(
        self,
        email: str | None,
        first_names: str | None,
        last_names: str | None,
        vacancy_id: int | None,
        cv: UploadFile | None,
    ) -> int:
        """Save the resume, then record the application.

        The file is written before the insert and is not removed if the
        insert fails. ``vacancy_id`` is stored as given, without checking
        that the vacancy exists.
        """
        if cv is None:
            raise ValidationError("El CV es requerido.")

        cv_path = await self.file_store.save(cv)

        application = Application(
            email=email,
            first_names=first_names,
            last_names=last_names,
            cv_path=cv_path,
            vacancy_id=vacancy_id,
        )
        try:
            async with self.db.session() as session:
                session.add(application)
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Database error storing application ({cv_path} kept): {e}")
            raise StorageError(
                "Error al almacenar los datos.",
                str(e),
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(
            f"Stored application {application.id} for vacancy {vacancy_id} from {email}"
        )
        return application.id

    async def get(self, application_id: int) -> Application:
        try:
            async with self.db.session() as session:
                application = await session.get(Application, application_id)
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching application {application_id}: {e}")
            raise StorageError("Error al obtener los datos.", str(e))

        if application is None:
            raise NotFoundError("Aplicación no encontrada.")
        return application

    async def list_all(self) -> list[Application]:
        try:
            async with self.db.session() as session:
                result = await session.execute(
                    select(Application).order_by(Application.id)
                )
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Database error listing applications: {e}")
            raise StorageError("Error al obtener los datos.", str(e))


def create_application_service(
    db: Database, file_store: FileStore
) -> ApplicationService:
    """Factory function to create ApplicationService with dependencies."""
    return ApplicationService(db, file_store)
