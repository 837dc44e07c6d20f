"""Schemas for job vacancies."""

from pydantic import BaseModel, ConfigDict, Field


class VacancyRequest(BaseModel):
    """Body of ``POST /vacantes`` and ``PUT /vacantes/{id}``.

    Presence is not enforced here; the store's NOT NULL constraints decide.
    """

    title: str | None = Field(None, alias="titulo")
    description: str | None = Field(None, alias="descripcion")
    location: str | None = Field(None, alias="ubicacion")
    salary: str | None = Field(None, alias="salario")

    model_config = ConfigDict(populate_by_name=True)


class VacancyResponse(BaseModel):
    id: int
    title: str = Field(..., alias="titulo")
    description: str = Field(..., alias="descripcion")
    location: str = Field(..., alias="ubicacion")
    salary: str | None = Field(None, alias="salario")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
