from pydantic import BaseModel, ConfigDict
from typing import ClassVar
from datetime import date

# Book summary nested in author responses
class BookSummary(BaseModel):
    id: int
    name: str
    isbn: str | None = None
    publishing_date: date | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(from_attributes=True)
