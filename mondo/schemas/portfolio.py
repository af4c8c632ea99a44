from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mondo.models.portfolio import PortfolioCategory


class PortfolioItemCreate(BaseModel):
    title: str = Field(..., min_length=1, title="Project Title")
    text: str = Field(..., min_length=1, title="Description", description="Description in the original language.")
    category: PortfolioCategory = Field(..., title="Category")
    thumbnail: Optional[str] = Field(None, title="Thumbnail URL")
    project_url: Optional[str] = Field(None, title="Project URL")
    technologies: Optional[list[str]] = Field(None, title="Technologies")


class PortfolioItemResponse(BaseModel):
    """A portfolio item resolved for the requested language.

    ``description``, ``image_url`` and ``url`` are the names the front end
    reads; they map onto the ``text``, ``thumbnail`` and ``project_url``
    columns.
    """

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    title: str
    description: str
    image_url: Optional[str] = None
    url: Optional[str] = None
    category: PortfolioCategory
    technologies: Optional[list[str]] = None
    created_at: datetime
    language: Optional[str] = None
    translated: bool = False

    @classmethod
    def from_resolved(cls, resolved: dict) -> "PortfolioItemResponse":
        return cls(
            id=resolved["id"],
            title=resolved["title"],
            description=resolved["text"],
            image_url=resolved["thumbnail"],
            url=resolved["project_url"],
            category=resolved["category"],
            technologies=resolved["technologies"],
            created_at=resolved["created_at"],
            language=resolved["language"],
            translated=resolved["translated"],
        )


class PortfolioTranslationUpsert(BaseModel):
    title: Optional[str] = Field(None, title="Translated Title")
    text: Optional[str] = Field(None, title="Translated Description")


class PortfolioTranslationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    item_id: int
    language: str
    title: Optional[str]
    text: Optional[str]
    created_at: datetime
    updated_at: datetime
