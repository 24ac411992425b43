"""
Emoji record schema.

Mirrors one object of the EmojiHub /api/all array:
    {"name": ..., "category": ..., "group": ...,
     "htmlCode": ["&#128512;"], "unicode": ["U+1F600"]}

Records are frozen once decoded; extra upstream keys are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class EmojiRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    category: str
    group: str
    html_code: tuple[str, ...] = Field(alias="htmlCode")
    unicode: tuple[str, ...]

    @property
    def glyph(self) -> str:
        """First htmlCode entry, or "" when upstream sent none."""
        return self.html_code[0] if self.html_code else ""
