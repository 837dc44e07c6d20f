"""Response envelopes shared by several routers."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(MessageResponse):
    """Returned by endpoints that insert a row."""

    id: int
