"""API routers."""

from jobboard.routers.accounts import router as accounts_router
from jobboard.routers.applications import router as applications_router
from jobboard.routers.vacancies import router as vacancies_router

__all__ = ["accounts_router", "applications_router", "vacancies_router"]
