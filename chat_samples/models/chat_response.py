# Role: What a handler decided to show next, one variant per call. Controllers return these typed objects;
# render() turns each into the Chat JSON envelope, so tests can assert on either level.

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class StatusCode(str, Enum):
    OK = "OK"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class OpenDialog(BaseModel):
    sections: List[Dict[str, Any]]

    def render(self) -> Dict[str, Any]:
        return {
            "actionResponse": {
                "type": "DIALOG",
                "dialogAction": {"dialog": {"body": {"sections": self.sections}}},
            }
        }


class UpdateMessage(BaseModel):
    sections: List[Dict[str, Any]]
    viewer: Optional[Dict[str, Any]] = None

    def render(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"actionResponse": {"type": "UPDATE_MESSAGE"}}
        if self.viewer is not None:
            body["privateMessageViewer"] = self.viewer
        body["cardsV2"] = [{"card": {"sections": self.sections}}]
        return body


class PostMessage(BaseModel):
    text: str
    viewer: Optional[Dict[str, Any]] = None
    cards: List[Dict[str, Any]] = Field(default_factory=list)
    accessory_widgets: List[Dict[str, Any]] = Field(default_factory=list)
    # Key line: NEW_MESSAGE is only sent when answering a card click with a fresh message.
    new_message: bool = False

    def render(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if self.new_message:
            body["actionResponse"] = {"type": "NEW_MESSAGE"}
        if self.viewer is not None:
            body["privateMessageViewer"] = self.viewer
        body["text"] = self.text
        if self.accessory_widgets:
            body["accessoryWidgets"] = self.accessory_widgets
        if self.cards:
            body["cardsV2"] = self.cards
        return body


class ActionStatus(BaseModel):
    """Dialog status notification. INVALID_ARGUMENT keeps the dialog open; OK closes it."""

    status_code: StatusCode
    user_facing_message: str

    @classmethod
    def invalid(cls, message: str) -> "ActionStatus":
        return cls(status_code=StatusCode.INVALID_ARGUMENT, user_facing_message=message)

    @classmethod
    def ok(cls, message: str) -> "ActionStatus":
        return cls(status_code=StatusCode.OK, user_facing_message=message)

    def render(self) -> Dict[str, Any]:
        return {
            "actionResponse": {
                "type": "DIALOG",
                "dialogAction": {
                    "actionStatus": {
                        "statusCode": self.status_code.value,
                        "userFacingMessage": self.user_facing_message,
                    }
                },
            }
        }


class EmptyResponse(BaseModel):
    def render(self) -> Dict[str, Any]:
        return {}


ChatResponse = Union[OpenDialog, UpdateMessage, PostMessage, ActionStatus, EmptyResponse]
