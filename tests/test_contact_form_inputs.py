from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from chat_samples.models.contact import ContactDraft, ContactType
from chat_samples.models.errors import MalformedEventError
from chat_samples.models.event import (
    CommonEventObject,
    DateFormInput,
    DialogEventType,
    InteractionEvent,
    StringFormInput,
    form_input_value,
)
from chat_samples.utils.dates import format_birthdate

from chat_events import card_click_payload, form_inputs


def _common(inputs: dict) -> CommonEventObject:
    return CommonEventObject.model_validate({"formInputs": inputs})


def test_form_inputs_parse_into_tagged_union():
    common = _common(form_inputs())

    assert isinstance(common.form_inputs["contactName"], StringFormInput)
    assert isinstance(common.form_inputs["contactBirthdate"], DateFormInput)
    # int64 arrives as a string on the wire
    assert form_input_value(common.form_inputs["contactBirthdate"]) == 631152000000


def test_text_input_takes_first_value_or_none():
    common = _common(
        {
            "a": {"stringInputs": {"value": ["first", "second"]}},
            "b": {"stringInputs": {"value": []}},
        }
    )

    assert form_input_value(common.form_inputs["a"]) == "first"
    assert form_input_value(common.form_inputs["b"]) is None


def test_null_date_is_absent():
    common = _common({"d": {"dateInput": {"msSinceEpoch": None}}})

    assert form_input_value(common.form_inputs["d"]) is None


def test_unknown_form_input_shape_is_rejected():
    with pytest.raises(ValidationError):
        _common({"x": {"somethingElse": {}}})


def test_draft_from_form_inputs():
    draft = ContactDraft.from_form_inputs(_common(form_inputs()).form_inputs)

    assert draft == ContactDraft(name="Ada", birthdate_millis=631152000000, contact_type=ContactType.WORK)


def test_draft_missing_widget_counts_as_empty():
    draft = ContactDraft.from_form_inputs(_common({}).form_inputs)

    assert draft == ContactDraft()
    assert draft.as_parameters() == {"contactName": "", "contactBirthdate": "", "contactType": ""}


def test_draft_rejects_unknown_contact_type():
    with pytest.raises(MalformedEventError):
        ContactDraft.from_form_inputs(_common(form_inputs(contact_type="Enemy")).form_inputs)


def test_format_birthdate_long_form_english():
    assert format_birthdate(631152000000) == "January 1, 1990"
    assert format_birthdate(0) == "January 1, 1970"
    assert format_birthdate(None) == ""


def test_format_birthdate_out_of_range_is_malformed():
    with pytest.raises(MalformedEventError):
        format_birthdate(10**18)


def test_format_birthdate_lands_on_same_utc_day():
    millis = 631152000000 + 23 * 3600 * 1000  # late on the same day

    parsed = datetime.strptime(format_birthdate(millis), "%B %d, %Y").date()

    assert parsed == datetime.fromtimestamp(millis / 1000, tz=timezone.utc).date()


@pytest.mark.parametrize("value", [None, "", "NONE", "TYPE_UNSPECIFIED", "SOMETHING_NEW"])
def test_dialog_event_type_defaults_to_none(value):
    payload = card_click_payload("submitForm")
    payload["dialogEventType"] = value

    event = InteractionEvent.model_validate(payload)

    assert event.dialog_event_type == DialogEventType.NONE
    assert not event.is_dialog_submission
