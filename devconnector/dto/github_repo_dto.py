from devconnector.dto.base_dto import BaseDto


class GithubRepoDto(BaseDto):
    name: str
    html_url: str
    description: str | None = None
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
