from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class LocalizedText(BaseModel):
    """Text value tagged with a language code"""
    lang: str = Field("", description="Language code (e.g., 'en')")
    value: str = Field("", description="Text in that language")

    @field_validator("lang", "value", mode="before")
    @classmethod
    def coerce_null(cls, v):
        """Treat JSON null as an empty string"""
        return "" if v is None else v


class ProgrammeEntry(BaseModel):
    """One broadcast instance as persisted by the grabbers"""
    model_config = ConfigDict(extra="ignore")

    site: str = Field(..., min_length=1, description="Source site tag (e.g., 'example.com')")
    channel: str | None = Field(None, description="XMLTV channel ID this programme belongs to")
    start: int | float | None = Field(None, description="Unix epoch seconds")
    stop: int | float | None = Field(None, description="Unix epoch seconds")
    title: list[LocalizedText] = Field(default_factory=list)
    description: list[LocalizedText] = Field(default_factory=list)
    categories: list[LocalizedText] = Field(default_factory=list)
    icons: list[str] = Field(default_factory=list)
    icon: str | None = Field(None, description="Single legacy icon URL, not serialized")

    @field_validator("title", "description", "categories", "icons", mode="before")
    @classmethod
    def coerce_missing_list(cls, v):
        """Treat JSON null as an empty list"""
        return [] if v is None else v


# null entries are kept in place and skipped when rendering
AssociationTable = dict[str, list[ProgrammeEntry | None]]

association_table_adapter: TypeAdapter[AssociationTable] = TypeAdapter(
    dict[str, Annotated[list[ProgrammeEntry | None], Field(min_length=1)]]
)
