from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BookBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookPayload(BookBase):
    # name is optional here so a missing name surfaces as the repository's
    # own validation failure rather than a schema error
    name: str | None = None
    year: int | None = None
    author: str | None = None
    summary: str | None = None
    publisher: str | None = None
    page_count: int = Field(default=0, ge=0)
    read_page: int = Field(default=0, ge=0)
    reading: bool = False


class BookOut(BookBase):
    id: str
    name: str
    year: int | None
    author: str | None
    summary: str | None
    publisher: str | None
    page_count: int
    read_page: int
    finished: bool
    reading: bool
    inserted_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class BookSummary(BookBase):
    id: str
    name: str
    publisher: str | None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
