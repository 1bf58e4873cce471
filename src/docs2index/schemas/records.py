"""Search record models.

The JSON shape produced by ``model_dump(by_alias=True)`` is what the downstream
indexer consumes, so field aliases follow its camelCase names.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class PageRecord(BaseModel):
    """Page-level record (type 0).

    ``content`` holds the full markdown-body text only for pages without
    section headings; otherwise the text lives in the section records.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str
    type: Literal[0] = 0
    section_ref: str = Field(default="#", alias="sectionRef")
    url: str
    content: str = ""
    keywords: str = ""
    version: str | None = None


class SectionRecord(BaseModel):
    """Section-level record (type 1) for one ``h2``/``h3`` heading."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    type: Literal[1] = 1
    page_title: str = Field(alias="pageTitle")
    url: str
    content: str = ""
    version: str | None = None
    tag_name: str = Field(alias="tagName")


SearchRecord = Annotated[Union[PageRecord, SectionRecord], Field(discriminator="type")]


class SearchIndex(BaseModel):
    """Document written for the downstream indexer."""

    model_config = ConfigDict(populate_by_name=True)

    search_docs: list[SearchRecord] = Field(default_factory=list, alias="searchDocs")
