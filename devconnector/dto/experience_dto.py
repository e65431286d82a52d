from datetime import date
from pydantic import Field
from devconnector.dto.base_dto import BaseDto


class ExperienceDto(BaseDto):
    id: str
    title: str
    company: str
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    location: str | None = None
    current: bool = False
    description: str | None = None
