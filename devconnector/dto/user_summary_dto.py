from uuid import UUID
from devconnector.dto.base_dto import BaseDto


class UserSummaryDto(BaseDto):
    id: UUID
    name: str
    avatar: str | None = None
