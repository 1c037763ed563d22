"""Data models for markdown blocks, parsed entries, and the content index"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


Scalar = Union[str, int, float, bool]
Value = Union[Scalar, list[Scalar]]


@dataclass(frozen=True)
class Heading:
    level: int                      # 1-3
    text: str


@dataclass(frozen=True)
class CodeBlock:
    lang: str                       # empty when the fence has no language tag
    raw_text: str


@dataclass(frozen=True)
class Paragraph:
    text: str


Block = Union[Heading, CodeBlock, Paragraph]


class IndexEntry(BaseModel):
    """One record of the published content index (data/content.json)."""
    model_config = ConfigDict(populate_by_name=True)

    id:           Scalar
    title:        Scalar
    section:      Scalar
    slug:         str
    type:         Optional[Scalar] = None
    year:         Optional[Scalar] = None
    full_date:    Optional[Scalar] = Field(default=None, alias="fullDate")
    tags:         Optional[list[Scalar]] = None
    summary:      Optional[Scalar] = None
    images:       list[Scalar] = []
    featured:     bool = False
    pinned:       bool = False
    link:         Optional[Scalar] = None
    content_path: str = Field(alias="contentPath")

    def to_json(self) -> dict:
        """Index shape: camelCase keys, unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass
class ParsedDoc:
    """Internal parse result for one entry file; not persisted."""
    path:       Path
    slug:       str
    raw:        str                 # full file content (includes frontmatter)
    body:       str                 # body only (frontmatter stripped)
    attributes: dict[str, Value]
    hash:       str
