from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ExtractedArticle(BaseModel):
    text: str
    title: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("article text is empty")
        return v
