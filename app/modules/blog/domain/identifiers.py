from dataclasses import dataclass
from enum import Enum

from modules.content.domain.identifiers import EntityId


@dataclass(frozen=True)
class PostId(EntityId):
    pass


class PostStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"
