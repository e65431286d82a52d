from dataclasses import dataclass
from uuid import UUID


@dataclass
class UserContextDto:
    user_id: UUID
