# Role: State machine for the contact-form sample. One interaction event in, one ChatResponse out.
# Steps: initial form -> confirmation summary -> submission. No session is kept: the form values
# travel with the client (form inputs, then Submit action parameters), so handle() is a pure function.

from __future__ import annotations

import chat_samples.config as config
from chat_samples.models.chat_response import (
    ActionStatus,
    ChatResponse,
    EmptyResponse,
    OpenDialog,
    PostMessage,
    UpdateMessage,
)
from chat_samples.models.contact import NAME_FIELD, ContactDraft
from chat_samples.models.dialog_step import DialogStep
from chat_samples.models.event import DialogEventType, EventType, InteractionEvent
from chat_samples.utils.contact_cards import (
    ABOUT_TEXT,
    FORM_PROMPT_TEXT,
    add_contact_button,
    confirmation_sections,
    contact_form_card,
    initial_dialog_sections,
)

ABOUT_COMMAND_ID = "1"
ADD_CONTACT_COMMAND_ID = "2"

MISSING_NAME_MESSAGE = "Don't forget to name your new contact!"


class DialogController:
    def handle(self, event: InteractionEvent) -> ChatResponse:
        if event.type == EventType.MESSAGE:
            return self.on_message(event)
        if event.type == EventType.CARD_CLICKED:
            return self.on_card_click(event)
        # Key line: space membership events need no reply from this app.
        return EmptyResponse()

    def on_message(self, event: InteractionEvent) -> ChatResponse:
        # 1) /about -> text + button that opens the dialog
        # 2) /addContact -> open the dialog directly
        # 3) anything else -> private card with the same form
        slash_command = event.message.slash_command if event.message else None
        command_id = slash_command.command_id if slash_command else None

        if config.DEBUG:
            print("\n--- DIALOG CONTROLLER (MESSAGE) ---")
            print("SLASH COMMAND:", command_id)
            print("-----------------------------------\n")

        if command_id == ABOUT_COMMAND_ID:
            return PostMessage(text=ABOUT_TEXT, accessory_widgets=[add_contact_button()])

        if command_id == ADD_CONTACT_COMMAND_ID:
            return self.open_initial_dialog()

        return PostMessage(
            text=FORM_PROMPT_TEXT,
            viewer=event.viewer(),
            cards=[contact_form_card()],
        )

    def on_card_click(self, event: InteractionEvent) -> ChatResponse:
        # Key line: closing the dialog sends no invoked function and needs no reply.
        if event.dialog_event_type == DialogEventType.CANCEL_DIALOG:
            return EmptyResponse()

        step = DialogStep.from_invoked_function(event.require_common().invoked_function)

        if config.DEBUG:
            print("\n--- DIALOG CONTROLLER (CARD_CLICKED) ---")
            print("STEP:", step)
            print("IS DIALOG EVENT:", event.is_dialog_event)
            print("DIALOG EVENT TYPE:", event.dialog_event_type)
            print("----------------------------------------\n")

        if step == DialogStep.OPEN_INITIAL_DIALOG:
            return self.open_initial_dialog()
        if step == DialogStep.OPEN_CONFIRMATION:
            return self.open_confirmation(event)
        if step == DialogStep.SUBMIT_FORM:
            return self.submit_form(event)
        raise AssertionError(f"Unhandled dialog step: {step}")

    def open_initial_dialog(self) -> OpenDialog:
        return OpenDialog(sections=initial_dialog_sections())

    def open_confirmation(self, event: InteractionEvent) -> ChatResponse:
        # Key line: no validation here; an empty name is caught at submission.
        draft = ContactDraft.from_form_inputs(event.require_form_inputs())
        sections = confirmation_sections(draft)

        if event.is_dialog_event:
            return OpenDialog(sections=sections)
        # Card flow: replace the form card with the summary card.
        return UpdateMessage(sections=sections, viewer=event.viewer())

    def submit_form(self, event: InteractionEvent) -> ChatResponse:
        # 1) Read the name carried by the Submit button parameters
        # 2) Empty name -> error (dialog status or private message)
        # 3) Otherwise -> success (close dialog or private confirmation message)
        contact_name = event.require_parameters().get(NAME_FIELD, "")

        if not contact_name:
            if event.is_dialog_submission:
                return ActionStatus.invalid(MISSING_NAME_MESSAGE)
            return PostMessage(text=MISSING_NAME_MESSAGE, viewer=event.viewer())

        if event.is_dialog_submission:
            return ActionStatus.ok("Success " + contact_name)

        return PostMessage(
            text="✅ " + contact_name + " has been added to your contacts.",
            viewer=event.viewer(),
            new_message=True,
        )
