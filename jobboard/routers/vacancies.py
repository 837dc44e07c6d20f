"""API routes for job vacancies."""

from fastapi import APIRouter, Depends, status

from jobboard.dependencies import get_vacancy_service
from jobboard.schemas.common import CreatedResponse, MessageResponse
from jobboard.schemas.vacancy import VacancyRequest, VacancyResponse
from jobboard.services.vacancy_service import VacancyService

router = APIRouter(prefix="/vacantes", tags=["vacancies"])


@router.get("/{vacancy_id}", response_model=VacancyResponse)
async def get_vacancy(
    vacancy_id: int,
    service: VacancyService = Depends(get_vacancy_service),
):
    """Get a single vacancy by ID."""
    return await service.get(vacancy_id)


@router.get("", response_model=list[VacancyResponse])
async def list_vacancies(service: VacancyService = Depends(get_vacancy_service)):
    """List all vacancies."""
    return await service.list_all()


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_vacancy(
    request: VacancyRequest,
    service: VacancyService = Depends(get_vacancy_service),
):
    """Create a vacancy."""
    vacancy_id = await service.create(request)
    return CreatedResponse(message="Vacante creada exitosamente.", id=vacancy_id)


@router.put("/{vacancy_id}", response_model=MessageResponse)
async def update_vacancy(
    vacancy_id: int,
    request: VacancyRequest,
    service: VacancyService = Depends(get_vacancy_service),
):
    """Replace all fields of a vacancy. Unknown IDs are not an error."""
    await service.update(vacancy_id, request)
    return MessageResponse(message="Vacante actualizada exitosamente.")
