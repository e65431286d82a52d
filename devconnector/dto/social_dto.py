from devconnector.dto.base_dto import BaseDto


class SocialDto(BaseDto):
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None
