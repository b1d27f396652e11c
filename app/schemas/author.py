from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import ClassVar
from datetime import date

from app.models.author import Author
from app.schemas.book import BookSummary
from app.schemas.prize import PrizeSummary

# Author base schema
class AuthorBase(BaseModel):
    name: str
    birth_date: date
    description: str | None = None

    @field_validator("name", mode="after")
    @classmethod
    def trim_and_check(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v

    def to_entity(self) -> Author:
        return Author(**self.model_dump())

# Author create schema
class AuthorCreate(AuthorBase):
    pass

# Author update schema
class AuthorUpdate(AuthorBase):
    pass

# Author read schema
class AuthorRead(AuthorBase):
    id: int

    model_config: ClassVar[ConfigDict] = ConfigDict(from_attributes=True)

# Author read schema with associations
class AuthorDetail(AuthorRead):
    books: list[BookSummary] = Field(default_factory=list)
    prizes: list[PrizeSummary] = Field(default_factory=list)
