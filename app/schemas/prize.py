from pydantic import BaseModel, ConfigDict
from typing import ClassVar
from datetime import date

# Prize summary nested in author responses
class PrizeSummary(BaseModel):
    id: int
    name: str
    premiation_date: date | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(from_attributes=True)
