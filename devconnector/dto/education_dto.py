from datetime import date
from pydantic import Field
from devconnector.dto.base_dto import BaseDto


class EducationDto(BaseDto):
    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None
