from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    slug: str = Field(..., min_length=1, max_length=255, title="Slug", description="Unique URL slug of the post.")
    title: str = Field(..., min_length=1, title="Post Title", description="Title in the original language.")
    content: str = Field(..., min_length=1, title="Post Content", description="Body in the original language.")
    excerpt: Optional[str] = Field(None, title="Excerpt", description="Short summary shown in listings.")
    author: Optional[str] = Field(None, max_length=255, title="Author")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "slug": "welcome",
                "title": "Bienvenido a Mondo",
                "content": "Mondo es una plataforma para desarrollo web social, cultural y gentil.",
                "excerpt": "Descubre qué hace especial a Mondo.",
                "author": "Mondo",
            }
        }
    )


class PostResponse(BaseModel):
    """A post resolved for the requested language."""

    id: int = Field(..., title="Post ID")
    slug: str = Field(..., title="Slug")
    title: str = Field(..., title="Title")
    content: str = Field(..., title="Content")
    excerpt: Optional[str] = Field(None, title="Excerpt")
    author: Optional[str] = Field(None, title="Author")
    created_at: datetime = Field(..., title="Created At")
    language: Optional[str] = Field(None, description="Language the post was resolved for; null for the original.")
    translated: bool = Field(False, description="True when a translation row contributed to the response.")

    model_config = ConfigDict(from_attributes=True)


class PostTranslationUpsert(BaseModel):
    """Full replacement payload for one (post, language) translation."""

    title: Optional[str] = Field(None, title="Translated Title")
    content: Optional[str] = Field(None, title="Translated Content")
    excerpt: Optional[str] = Field(None, title="Translated Excerpt")


class PostTranslationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    language: str
    title: Optional[str]
    content: Optional[str]
    excerpt: Optional[str]
    created_at: datetime
    updated_at: datetime
