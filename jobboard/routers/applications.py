"""API routes for applicant submissions."""

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from jobboard.dependencies import get_application_service
from jobboard.schemas.application import (
    ApplicationDetailResponse,
    ApplicationListResponse,
    ApplicationResponse,
)
from jobboard.schemas.common import CreatedResponse
from jobboard.services.application_service import ApplicationService

router = APIRouter(tags=["applications"])


@router.post(
    "/datos_usuario",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_application(
    correo: str | None = Form(None),
    nombres: str | None = Form(None),
    apellidos: str | None = Form(None),
    vacante_id: int | None = Form(None, alias="vacanteId"),
    cv: UploadFile | None = File(None),
    service: ApplicationService = Depends(get_application_service),
):
    """Store an application together with its PDF resume."""
    application_id = await service.submit(
        email=correo,
        first_names=nombres,
        last_names=apellidos,
        vacancy_id=vacante_id,
        cv=cv,
    )
    return CreatedResponse(
        message="Aplicación almacenada exitosamente.", id=application_id
    )


@router.get("/api/applications", response_model=ApplicationListResponse)
async def list_applications(
    service: ApplicationService = Depends(get_application_service),
):
    """List every stored application."""
    applications = await service.list_all()
    return ApplicationListResponse(
        data=[ApplicationResponse.model_validate(a) for a in applications]
    )


@router.get("/api/applications/{application_id}", response_model=ApplicationDetailResponse)
async def get_application(
    application_id: int,
    service: ApplicationService = Depends(get_application_service),
):
    """Get a single application by ID."""
    application = await service.get(application_id)
    return ApplicationDetailResponse(data=ApplicationResponse.model_validate(application))
