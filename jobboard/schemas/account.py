"""Schemas for account registration and login."""

from pydantic import BaseModel, ConfigDict, Field


class AccountCredentials(BaseModel):
    """Body of both ``POST /usuarios`` and ``POST /login``.

    Fields are optional at the schema level so that a missing field is
    reported by the service as a 400, not by FastAPI as a 422.
    """

    name: str | None = Field(None, alias="nombre", description="Display name")
    code: str | None = Field(None, alias="codigo", description="Institutional code")
    email: str | None = Field(None, alias="correo", description="Unique email")
    secret: str | None = Field(None, alias="contrasena", description="Password")

    model_config = ConfigDict(populate_by_name=True)


class AccountResponse(BaseModel):
    """Account data safe to return to clients (no password)."""

    id: int
    name: str = Field(..., alias="nombre")
    code: str = Field(..., alias="codigo")
    email: str = Field(..., alias="correo")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class LoginResponse(BaseModel):
    message: str = "Login exitoso"
    account: AccountResponse = Field(..., alias="usuario")

    model_config = ConfigDict(populate_by_name=True)
