"""Module records."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from cms.core.constants import NAME_LENGTH, TITLE_LENGTH


class MutModule(BaseModel):
    """Insert and update payload for a module."""

    page_name: str = Field(min_length=1, max_length=NAME_LENGTH)
    title: str = Field(min_length=1, max_length=TITLE_LENGTH)
    content: Optional[str] = None


class Module(MutModule):
    """A stored module."""

    model_config = ConfigDict(from_attributes=True)

    module_id: int
