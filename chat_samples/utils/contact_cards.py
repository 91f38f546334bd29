# Role: Deterministic card/dialog builders for the contact form. Every builder returns fresh dicts,
# so a response can never alias (and mutate) another response's widgets.

from __future__ import annotations

from typing import Any, Dict, List

from chat_samples.models.contact import (
    BIRTHDATE_FIELD,
    NAME_FIELD,
    TYPE_FIELD,
    ContactDraft,
    ContactType,
)
from chat_samples.models.dialog_step import DialogStep
from chat_samples.utils.dates import format_birthdate

ABOUT_TEXT = (
    "Manage your personal and business contacts 📇. To add a contact, use the slash command `/addContact`."
)
FORM_PROMPT_TEXT = "To add a contact, try `/addContact` or complete the form below:"


def contact_form_widgets() -> List[Dict[str, Any]]:
    # The three input widgets shared by the dialog and the card message.
    return [
        {
            "textInput": {
                "name": NAME_FIELD,
                "label": "First and last name",
                "type": "SINGLE_LINE",
            }
        },
        {
            "dateTimePicker": {
                "name": BIRTHDATE_FIELD,
                "label": "Birthdate",
                "type": "DATE_ONLY",
            }
        },
        {
            "selectionInput": {
                "name": TYPE_FIELD,
                "label": "Contact type",
                "type": "RADIO_BUTTON",
                "items": [
                    {"text": t.value, "value": t.value, "selected": False} for t in ContactType
                ],
            }
        },
    ]


def _button(text: str, action: Dict[str, Any]) -> Dict[str, Any]:
    return {"buttonList": {"buttons": [{"text": text, "onClick": {"action": action}}]}}


def review_button() -> Dict[str, Any]:
    return _button("Review and submit", {"function": DialogStep.OPEN_CONFIRMATION.value})


def add_contact_button() -> Dict[str, Any]:
    return _button(
        "Add Contact",
        {"function": DialogStep.OPEN_INITIAL_DIALOG.value, "interaction": "OPEN_DIALOG"},
    )


def initial_dialog_sections() -> List[Dict[str, Any]]:
    return [{"header": "Add new contact", "widgets": contact_form_widgets() + [review_button()]}]


def contact_form_card() -> Dict[str, Any]:
    # Card message variant of the initial step (plain messages cannot open a dialog).
    return {
        "cardId": "addContactForm",
        "card": {
            "header": {"title": "Add a contact"},
            "sections": [{"widgets": contact_form_widgets() + [review_button()]}],
        },
    }


def confirmation_sections(draft: ContactDraft) -> List[Dict[str, Any]]:
    # 1) Read-only summary of what the user entered
    # 2) Submit button carrying the values forward as action parameters
    params = draft.as_parameters()
    contact_type = draft.contact_type.value if draft.contact_type else ""

    return [
        {
            "header": "Your contact",
            "widgets": [
                {"textParagraph": {"text": "Confirm contact information and submit:"}},
                {"textParagraph": {"text": "<b>Name:</b> " + draft.name}},
                {"textParagraph": {"text": "<b>Birthday:</b> " + format_birthdate(draft.birthdate_millis)}},
                {"textParagraph": {"text": "<b>Type:</b> " + contact_type}},
                _button(
                    "Submit",
                    {
                        "function": DialogStep.SUBMIT_FORM.value,
                        "parameters": [{"key": k, "value": v} for k, v in params.items()],
                    },
                ),
            ],
        }
    ]
