"""FastAPI dependencies exposing the process-wide resources."""

from fastapi import Depends, Request

from jobboard.core.files import FileStore
from jobboard.core.storage import Database
from jobboard.services.account_service import AccountService, create_account_service
from jobboard.services.application_service import (
    ApplicationService,
    create_application_service,
)
from jobboard.services.vacancy_service import VacancyService, create_vacancy_service


def get_database(request: Request) -> Database:
    """Database handle opened by the application lifespan."""
    return request.app.state.db


def get_file_store(request: Request) -> FileStore:
    return request.app.state.file_store


async def get_account_service(db: Database = Depends(get_database)) -> AccountService:
    return create_account_service(db)


async def get_vacancy_service(db: Database = Depends(get_database)) -> VacancyService:
    return create_vacancy_service(db)


async def get_application_service(
    db: Database = Depends(get_database),
    file_store: FileStore = Depends(get_file_store),
) -> ApplicationService:
    """Create application service with dependencies."""
    return create_application_service(db, file_store)
