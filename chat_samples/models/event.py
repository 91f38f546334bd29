# Role: Typed schema for one inbound Chat interaction event (the JSON body Chat POSTs to our endpoints).
# JSON keys are camelCase; attributes are snake_case with aliases. Form inputs are a tagged union
# (text vs date), so readers match on the type instead of probing for keys.

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chat_samples.models.errors import MalformedEventError


class EventType(str, Enum):
    MESSAGE = "MESSAGE"
    CARD_CLICKED = "CARD_CLICKED"
    ADDED_TO_SPACE = "ADDED_TO_SPACE"
    REMOVED_FROM_SPACE = "REMOVED_FROM_SPACE"


class DialogEventType(str, Enum):
    NONE = "TYPE_UNSPECIFIED"
    REQUEST_DIALOG = "REQUEST_DIALOG"
    SUBMIT_DIALOG = "SUBMIT_DIALOG"
    CANCEL_DIALOG = "CANCEL_DIALOG"


class _ChatModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class User(_ChatModel):
    # Key line: extra="allow" so the viewer is echoed back to Chat exactly as received.
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    email: Optional[str] = None
    type: Optional[str] = None

    def as_viewer(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Space(_ChatModel):
    name: Optional[str] = None
    type: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")


class SlashCommand(_ChatModel):
    # Chat sends commandId as an int64-in-a-string; accept bare numbers too.
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    command_id: str = Field(alias="commandId")


class ChatMessage(_ChatModel):
    name: Optional[str] = None
    text: Optional[str] = None
    argument_text: Optional[str] = Field(default=None, alias="argumentText")
    slash_command: Optional[SlashCommand] = Field(default=None, alias="slashCommand")
    sender: Optional[User] = None
    space: Optional[Space] = None


# ----------------------------
# Form inputs (tagged union)
# ----------------------------
class StringInputs(_ChatModel):
    value: List[str] = Field(default_factory=list)


class StringFormInput(_ChatModel):
    string_inputs: StringInputs = Field(alias="stringInputs")


class DateInput(_ChatModel):
    # int64 as string on the wire ("631152000000"); lax mode coerces it.
    ms_since_epoch: Optional[int] = Field(default=None, alias="msSinceEpoch")


class DateFormInput(_ChatModel):
    date_input: DateInput = Field(alias="dateInput")


FormInput = Union[StringFormInput, DateFormInput]


def form_input_value(item: FormInput) -> Optional[Union[str, int]]:
    """
    Value a user entered into one widget, or None when the widget was left empty.
    Text widgets yield their first string value; date widgets yield raw milliseconds since epoch.
    """
    if isinstance(item, StringFormInput):
        values = item.string_inputs.value
        return values[0] if values else None
    if isinstance(item, DateFormInput):
        return item.date_input.ms_since_epoch
    raise MalformedEventError(f"Unsupported form input: {item!r}")


class CommonEventObject(_ChatModel):
    invoked_function: Optional[str] = Field(default=None, alias="invokedFunction")
    form_inputs: Optional[Dict[str, FormInput]] = Field(default=None, alias="formInputs")
    parameters: Optional[Dict[str, str]] = None


class InteractionEvent(_ChatModel):
    type: EventType
    message: Optional[ChatMessage] = None
    common: Optional[CommonEventObject] = None
    user: Optional[User] = None
    space: Optional[Space] = None
    is_dialog_event: bool = Field(default=False, alias="isDialogEvent")
    dialog_event_type: DialogEventType = Field(default=DialogEventType.NONE, alias="dialogEventType")

    @field_validator("dialog_event_type", mode="before")
    @classmethod
    def _default_dialog_event_type(cls, value):
        # Missing, null, "NONE" and values this app does not know all mean "not a dialog event".
        if isinstance(value, DialogEventType):
            return value
        if isinstance(value, str) and value in {member.value for member in DialogEventType}:
            return value
        return DialogEventType.NONE

    @property
    def is_dialog_submission(self) -> bool:
        return self.dialog_event_type == DialogEventType.SUBMIT_DIALOG

    def viewer(self) -> Optional[dict]:
        return self.user.as_viewer() if self.user is not None else None

    def require_common(self) -> CommonEventObject:
        if self.common is None:
            raise MalformedEventError("CARD_CLICKED event has no 'common' block")
        return self.common

    def require_form_inputs(self) -> Dict[str, FormInput]:
        form_inputs = self.require_common().form_inputs
        if form_inputs is None:
            raise MalformedEventError("Event has no 'common.formInputs' map")
        return form_inputs

    def require_parameters(self) -> Dict[str, str]:
        parameters = self.require_common().parameters
        if parameters is None:
            raise MalformedEventError("Event has no 'common.parameters' map")
        return parameters
