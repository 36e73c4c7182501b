"""Pydantic DTOs (Data Transfer Objects) for the Penguin feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class PenguinCreate(BaseModel):
    """Schema for creating a new penguin — every record field except ``id``."""

    species: str = Field(..., min_length=1, max_length=255, examples=["Emperor Penguin"])
    habitat: str = Field(..., min_length=1, max_length=255, examples=["Antarctica"])
    height: str = Field(..., min_length=1, max_length=100, examples=["100-130 cm"])
    diet: str = Field(..., min_length=1, max_length=255, examples=["Fish, squid, and krill"])
    fun_fact: str = Field(..., min_length=1, examples=["Emperor penguins can dive over 500 meters!"])
    image_url: str | None = Field(None, max_length=2048, examples=["🐧"])
    is_favorite: bool = False


class PenguinForm(PenguinCreate):
    """Values submitted from the add/edit form.

    Same field set as ``PenguinCreate`` so the form binding stays checked
    against the record schema.
    """


class PenguinUpdate(BaseModel):
    """Schema for updating an existing penguin — all fields optional.

    Only fields that were explicitly provided are applied.
    """

    species: str | None = Field(None, min_length=1, max_length=255)
    habitat: str | None = Field(None, min_length=1, max_length=255)
    height: str | None = Field(None, min_length=1, max_length=100)
    diet: str | None = Field(None, min_length=1, max_length=255)
    fun_fact: str | None = Field(None, min_length=1)
    image_url: str | None = Field(None, max_length=2048)
    is_favorite: bool | None = None

    def changes(self) -> dict:
        """Explicitly-set fields, dropping nulls for fields that cannot be null."""
        values = self.model_dump(exclude_unset=True)
        return {
            k: v for k, v in values.items() if v is not None or k == "image_url"
        }


class PenguinResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    species: str
    habitat: str
    height: str
    diet: str
    fun_fact: str
    image_url: str | None
    is_favorite: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PenguinEnvelope(BaseModel):
    """``{success, data}`` wrapper for a single penguin."""

    success: bool = True
    data: PenguinResponse


class PenguinListEnvelope(BaseModel):
    """``{success, data}`` wrapper for the penguin list."""

    success: bool = True
    data: list[PenguinResponse]
