# Role: Central enum of contact-form dialog steps. Values are the action function names the cards send back
# as common.invokedFunction, so parsing the event and building buttons share one source of truth.

from __future__ import annotations

from enum import Enum

from chat_samples.models.errors import MalformedEventError


class DialogStep(str, Enum):
    OPEN_INITIAL_DIALOG = "openInitialDialog"
    OPEN_CONFIRMATION = "openConfirmation"
    SUBMIT_FORM = "submitForm"

    @classmethod
    def from_invoked_function(cls, name: str | None) -> "DialogStep":
        try:
            return cls(name)
        except ValueError:
            raise MalformedEventError(f"Unknown invoked function: {name!r}") from None
