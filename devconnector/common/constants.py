from enum import Enum
from uuid import UUID


class SocialNetwork(str, Enum):
    YOUTUBE = "youtube"
    TWITTER = "twitter"
    FACEBOOK = "facebook"
    LINKEDIN = "linkedin"
    INSTAGRAM = "instagram"


SOCIAL_NETWORK_FIELDS: list[str] = [network.value for network in SocialNetwork]


class ProfileSection(str, Enum):
    EXPERIENCE = "experience"
    EDUCATION = "education"

    @property
    def not_found_message(self) -> str:
        return f"{self.value.capitalize()} not found"


PROFILE_SCHEMA = "profile.schema.json"
EXPERIENCE_SCHEMA = "experience.schema.json"
EDUCATION_SCHEMA = "education.schema.json"

NO_PROFILE_FOR_USER_MESSAGE = "There is no profile for this user"
PROFILE_NOT_FOUND_MESSAGE = "Profile not found"
USER_DELETED_MESSAGE = "User deleted"

AUTH_TOKEN_HEADER = "x-auth-token"
JWT_ALGORITHM = "HS256"

GITHUB_API_URL = "https://api.github.com"
GITHUB_USER_REPOS_PATH = "/users/{username}/repos"
GITHUB_REPOS_PER_PAGE = 5
GITHUB_REPOS_SORT = "created"
GITHUB_REPOS_DIRECTION = "desc"
GITHUB_REQUEST_TIMEOUT_SECONDS = 5
GITHUB_USER_AGENT = "devconnector-api"
NO_GITHUB_PROFILE_MESSAGE = "No Github profile found"

# Fixed caller used by the development runner and seeded by tools/init_db.py
DEV_USER_ID = UUID("00000000-0000-0000-0000-000000000001")
DEV_USER_NAME = "Dev User"
DEV_USER_EMAIL = "dev@devconnector.local"
