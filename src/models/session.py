"""Session models for the Trello sessions service.

This module defines the Trello records read from the API and the simplified
session record returned to the front-end.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BoardList(BaseModel):
    """A list on a Trello board."""

    id: str
    name: str = ""


class TrelloLabel(BaseModel):
    """A label attached to a card. Trello allows unnamed (color-only) labels."""

    name: Optional[str] = None


class TrelloCard(BaseModel):
    """A card as returned by ``GET /lists/{id}/cards?fields=name,desc,due,labels,idList``."""

    id: str
    name: str = ""
    desc: Optional[str] = ""
    due: Optional[str] = None
    labels: List[TrelloLabel] = Field(default_factory=list)
    id_list: Optional[str] = Field(default=None, alias="idList")


class SessionRecord(BaseModel):
    """Front-end facing session, serialized with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    order: int = Field(ge=1)
    name: str
    status: str
    due_date: Optional[str] = Field(default=None, alias="dueDate")
    host: str
    co_host: str = Field(alias="coHost")
    list_name: str = Field(alias="listName")
    is_joinable: bool = Field(default=False, alias="isJoinable")

    def to_public_dict(self) -> dict:
        return self.model_dump(by_alias=True)
