# Role: FastAPI app bootstrap. Loads environment config early, builds every component once
# (controllers, model client, history store), registers routers, and exposes health/docs endpoints.

from __future__ import annotations

from typing import Optional

import uvicorn
from fastapi import FastAPI

import chat_samples.config as config
config.load_env()

from chat_samples.api.assistant import router as assistant_router
from chat_samples.api.contact_form import router as contact_form_router
from chat_samples.config import Settings, load_settings
from chat_samples.core.assistant_controller import AssistantController
from chat_samples.core.dialog_controller import DialogController
from chat_samples.core.history_store import HistoryStore
from chat_samples.llm.assistant_service import AssistantService
from chat_samples.llm.gemini_client import GeminiClient


def build_assistant_controller(settings: Settings) -> AssistantController:
    client = GeminiClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        temperature=settings.temperature,
        max_output_tokens=settings.max_output_tokens,
    )
    return AssistantController(
        service=AssistantService(client, assistant_name=settings.assistant_name),
        history=HistoryStore(
            max_messages=settings.history_max_messages,
            ttl_minutes=settings.history_ttl_minutes,
        ),
    )


def create_app(
    settings: Optional[Settings] = None,
    dialog_controller: Optional[DialogController] = None,
    assistant_controller: Optional[AssistantController] = None,
) -> FastAPI:
    # 1) Resolve settings and build components (injected ones win, for tests)
    # 2) Store them on app.state for the route dependencies
    # 3) The assistant route only exists when it has a model client to talk to
    settings = settings or load_settings()

    if assistant_controller is None and settings.gemini_api_key:
        assistant_controller = build_assistant_controller(settings)

    app = FastAPI(title="Chat App Samples", version="0.1.0")
    app.state.settings = settings
    app.state.dialog_controller = dialog_controller or DialogController()
    app.state.assistant_controller = assistant_controller

    app.include_router(contact_form_router)
    if assistant_controller is not None:
        app.include_router(assistant_router)
    elif config.DEBUG:
        print("ASSISTANT DISABLED: GEMINI_API_KEY is not set")

    @app.get("/")
    def root() -> dict:
        # Role: quick discoverability for clients (where are docs/health/webhooks).
        endpoints = ["/contact-form"]
        if assistant_controller is not None:
            endpoints.append("/assistant")
        return {
            "message": "Chat App Samples API is running",
            "endpoints": endpoints,
            "docs": "/docs",
            "health": "/health",
        }

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
