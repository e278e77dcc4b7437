"""Page records."""

from datetime import datetime
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cms.core.constants import NAME_LENGTH, TITLE_LENGTH, URL_LENGTH
from cms.schemas.module import Module


class PageBase(BaseModel):
    page_name: str = Field(max_length=NAME_LENGTH)
    page_url: str = Field(max_length=URL_LENGTH)
    page_title: str = Field(max_length=TITLE_LENGTH)


class MutPage(PageBase):
    """
    Writable projection of a page, used for both insert and update.

    ``time_created`` is absent: the backend assigns it on insert. An update
    with a MutPage overwrites all three fields.
    """

    @field_validator("page_name")
    @classmethod
    def validate_page_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("page_name cannot be empty")
        return v


class Page(PageBase):
    """A stored page."""

    model_config = ConfigDict(from_attributes=True)

    time_created: datetime

    def writable(self) -> MutPage:
        """Project back onto the writable fields."""
        return MutPage(
            page_name=self.page_name,
            page_url=self.page_url,
            page_title=self.page_title,
        )


class PageModuleRelation(Page):
    """
    A page together with its modules, keyed by module title.

    Read-only view; never persisted. When two modules share a title the one
    folded in last wins.
    """

    fields: Dict[str, Module] = Field(default_factory=dict)
