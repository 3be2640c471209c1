from typing import List

from pydantic import BaseModel, Field


class Tag(BaseModel):
    name: str
    url: str = ""


class Author(BaseModel):
    name: str
    avatar_url: str = ""


class Post(BaseModel):
    id: int
    title: str
    url: str = ""
    date: str = ""
    thumb: str = ""
    tags: List[Tag] = Field(default_factory=list)
    author: Author

    def translated(self, t) -> "Post":
        """Return a copy with display strings resolved through ``t``."""
        return self.model_copy(
            update={
                "title": t(self.title),
                "date": t(self.date),
                "tags": [tag.model_copy(update={"name": t(tag.name)}) for tag in self.tags],
            }
        )
