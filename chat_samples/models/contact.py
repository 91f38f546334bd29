# Role: Transient contact being entered in the form. Rebuilt from the event on every call and never stored;
# the in-progress values round-trip through the client as form inputs / action parameters.

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel

from chat_samples.models.errors import MalformedEventError
from chat_samples.models.event import FormInput, form_input_value

# Widget names shared by the form widgets, the event reader and the Submit button parameters.
NAME_FIELD = "contactName"
BIRTHDATE_FIELD = "contactBirthdate"
TYPE_FIELD = "contactType"


class ContactType(str, Enum):
    WORK = "Work"
    PERSONAL = "Personal"


class ContactDraft(BaseModel):
    name: str = ""
    birthdate_millis: Optional[int] = None
    contact_type: Optional[ContactType] = None

    @classmethod
    def from_form_inputs(cls, form_inputs: Dict[str, FormInput]) -> "ContactDraft":
        # 1) Read each widget (a widget missing from the map counts as left empty)
        # 2) Normalize types: name -> str, birthdate -> int millis, type -> ContactType
        name = _read(form_inputs, NAME_FIELD)
        birthdate = _read(form_inputs, BIRTHDATE_FIELD)
        contact_type = _read(form_inputs, TYPE_FIELD)

        if birthdate is not None and not isinstance(birthdate, int):
            try:
                birthdate = int(birthdate)
            except ValueError:
                raise MalformedEventError(f"Birthdate is not a timestamp: {birthdate!r}") from None

        parsed_type: Optional[ContactType] = None
        if contact_type not in (None, ""):
            try:
                parsed_type = ContactType(str(contact_type))
            except ValueError:
                raise MalformedEventError(f"Unknown contact type: {contact_type!r}") from None

        return cls(
            name=str(name) if name is not None else "",
            birthdate_millis=birthdate,
            contact_type=parsed_type,
        )

    def as_parameters(self) -> Dict[str, str]:
        # Key line: action parameters are strings on the wire; absent values travel as "".
        return {
            NAME_FIELD: self.name,
            BIRTHDATE_FIELD: str(self.birthdate_millis) if self.birthdate_millis is not None else "",
            TYPE_FIELD: self.contact_type.value if self.contact_type else "",
        }


def _read(form_inputs: Dict[str, FormInput], field: str):
    item = form_inputs.get(field)
    if item is None:
        return None
    return form_input_value(item)
