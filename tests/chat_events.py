from typing import Optional

from chat_samples.models.event import InteractionEvent

USER = {"name": "users/123", "displayName": "Ada Admin", "type": "HUMAN"}


def message_event(text: str = "hello", command_id: Optional[str] = None, space: str = "spaces/AAA") -> InteractionEvent:
    message = {"text": text, "argumentText": text, "sender": USER, "space": {"name": space}}
    if command_id is not None:
        message["slashCommand"] = {"commandId": command_id}
    return InteractionEvent.model_validate(
        {"type": "MESSAGE", "message": message, "user": USER, "space": {"name": space}}
    )


def form_inputs(name: Optional[str] = "Ada", millis: Optional[int] = 631152000000, contact_type: Optional[str] = "Work") -> dict:
    return {
        "contactName": {"stringInputs": {"value": [name] if name is not None else []}},
        "contactBirthdate": {"dateInput": {"msSinceEpoch": str(millis) if millis is not None else None}},
        "contactType": {"stringInputs": {"value": [contact_type] if contact_type is not None else []}},
    }


def card_click_payload(function: str, common: Optional[dict] = None, dialog: bool = False, submit: bool = False) -> dict:
    payload = {
        "type": "CARD_CLICKED",
        "common": {"invokedFunction": function, **(common or {})},
        "user": USER,
        "isDialogEvent": dialog,
    }
    if submit:
        payload["dialogEventType"] = "SUBMIT_DIALOG"
    return payload


def card_click(function: str, common: Optional[dict] = None, dialog: bool = False, submit: bool = False) -> InteractionEvent:
    return InteractionEvent.model_validate(card_click_payload(function, common, dialog, submit))
