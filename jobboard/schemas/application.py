"""Schemas for applicant submissions."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ApplicationResponse(BaseModel):
    """A stored submission, including the path of its resume file."""

    id: int
    email: str = Field(..., alias="correo")
    first_names: str = Field(..., alias="nombres")
    last_names: str = Field(..., alias="apellidos")
    cv_path: str = Field(..., alias="url_cv")
    vacancy_id: int = Field(..., alias="vacante_id")
    created_at: datetime | None = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class ApplicationListResponse(BaseModel):
    message: str = "Datos obtenidos exitosamente."
    data: list[ApplicationResponse]


class ApplicationDetailResponse(BaseModel):
    message: str = "Datos obtenidos exitosamente."
    data: ApplicationResponse
