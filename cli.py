# Role: Local developer CLI to drive the two chat handlers without Google Chat.
# Builds InteractionEvents from typed input and prints the JSON the webhook would return.

from __future__ import annotations

import json
import uuid

import chat_samples.config
chat_samples.config.load_env()

from chat_samples.config import load_settings
from chat_samples.core.dialog_controller import DialogController
from chat_samples.main import build_assistant_controller
from chat_samples.models.event import InteractionEvent

_USER = {"name": "users/local", "displayName": "Local Developer", "type": "HUMAN"}


def _new_space() -> str:
    return f"spaces/cli-{uuid.uuid4().hex[:8]}"


def _message_event(text: str, space: str, command_id: str | None = None) -> InteractionEvent:
    message = {"text": text, "argumentText": text, "sender": _USER, "space": {"name": space}}
    if command_id:
        message["slashCommand"] = {"commandId": command_id}
    return InteractionEvent.model_validate(
        {"type": "MESSAGE", "message": message, "user": _USER, "space": {"name": space}}
    )


def _card_click(function: str, common: dict, dialog: bool) -> InteractionEvent:
    return InteractionEvent.model_validate(
        {
            "type": "CARD_CLICKED",
            "common": {"invokedFunction": function, **common},
            "user": _USER,
            "isDialogEvent": dialog,
            "dialogEventType": "SUBMIT_DIALOG" if dialog else "NONE",
        }
    )


def _review_event(args: str) -> InteractionEvent:
    # /review Ada Lovelace|631152000000|Work
    name, _, rest = args.partition("|")
    millis, _, contact_type = rest.partition("|")
    form_inputs = {
        "contactName": {"stringInputs": {"value": [name.strip()] if name.strip() else []}},
        "contactBirthdate": {"dateInput": {"msSinceEpoch": millis.strip() or None}},
        "contactType": {"stringInputs": {"value": [contact_type.strip()] if contact_type.strip() else []}},
    }
    return _card_click("openConfirmation", {"formInputs": form_inputs}, dialog=True)


def _submit_event(name: str) -> InteractionEvent:
    return _card_click("submitForm", {"parameters": {"contactName": name.strip()}}, dialog=True)


def main() -> None:
    # 1) Build controllers (assistant only when an API key is configured)
    # 2) Route each line: slash commands -> contact form, text -> assistant
    # 3) Print the rendered webhook response
    print("Chat App Samples CLI")
    print("Commands: /about, /addContact, /review name|millis|type, /submit name, /new, /exit")
    print("-" * 50)

    settings = load_settings()
    dialog = DialogController()
    assistant = build_assistant_controller(settings) if settings.gemini_api_key else None
    space = _new_space()
    print(f"space: {space}")

    while True:
        try:
            line = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not line:
            continue

        cmd, _, args = line.partition(" ")
        cmd = cmd.lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd == "/new":
            space = _new_space()
            print(f"New space: {space}")
            continue

        if cmd == "/about":
            response = dialog.handle(_message_event(line, space, command_id="1"))
        elif cmd == "/addcontact":
            response = dialog.handle(_message_event(line, space, command_id="2"))
        elif cmd == "/review":
            response = dialog.handle(_review_event(args))
        elif cmd == "/submit":
            response = dialog.handle(_submit_event(args))
        elif assistant is None:
            print("Assistant disabled: set GEMINI_API_KEY in .env")
            continue
        else:
            response = assistant.handle(_message_event(line, space))

        print("\nApp:", json.dumps(response.render(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
