# Role: Request-scoped accessors for the controllers that create_app() built at startup and stored on app.state.
# Routes depend on these (FastAPI Depends), so tests can swap controllers by building their own app.

from fastapi import Request

from chat_samples.core.assistant_controller import AssistantController
from chat_samples.core.dialog_controller import DialogController


def get_dialog_controller(request: Request) -> DialogController:
    return request.app.state.dialog_controller


def get_assistant_controller(request: Request) -> AssistantController:
    return request.app.state.assistant_controller
