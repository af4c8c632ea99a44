from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    organization: Optional[str] = Field(None, max_length=255)
    email: EmailStr = Field(..., description="A valid email address.")
    subject: Optional[str] = Field(None, max_length=255)
    message: Optional[str] = None
    send_copy: bool = Field(False, alias="sendCopy", description="Send a copy of the message to the sender.")

    model_config = ConfigDict(populate_by_name=True)


class ContactResponse(BaseModel):
    success: bool = True
    id: int
