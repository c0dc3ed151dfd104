"""Response models decoded from the Runware envelope."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class GenerationRecord(BaseModel):
    """One generated image.

    Only the field matching the requested output type is populated:
    ``image_url`` for URL, ``image_base64_data`` for base64Data and
    ``image_data_uri`` for dataURI.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    task_type: Optional[str] = Field(default=None, alias="taskType")
    task_id: str = Field(alias="taskUUID")
    image_id: Optional[str] = Field(default=None, alias="imageUUID")
    image_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("imageURL", "imageUrl", "image_url"),
        serialization_alias="imageURL",
    )
    image_base64_data: Optional[str] = Field(default=None, alias="imageBase64Data")
    image_data_uri: Optional[str] = Field(default=None, alias="imageDataURI")
    seed: Optional[int] = None
    cost: Optional[float] = None
    nsfw_content: Optional[bool] = Field(default=None, alias="nsfwContent")

    @property
    def image_payload(self) -> Optional[str]:
        """Return whichever image representation the provider populated."""

        return self.image_url or self.image_base64_data or self.image_data_uri


class ProviderErrorRecord(BaseModel):
    """One error entry reported by Runware."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    code: Optional[str] = None
    message: Optional[str] = None
    parameter: Optional[str] = None
    error_type: Optional[str] = Field(default=None, alias="type")
    task_type: Optional[str] = Field(default=None, alias="taskType")


class ResponseEnvelope(BaseModel):
    """Top-level body holding parallel success and error arrays."""

    model_config = ConfigDict(extra="ignore")

    data: List[GenerationRecord] = Field(default_factory=list)
    errors: List[ProviderErrorRecord] = Field(default_factory=list)

    @field_validator("data", "errors", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


__all__ = ["GenerationRecord", "ProviderErrorRecord", "ResponseEnvelope"]
