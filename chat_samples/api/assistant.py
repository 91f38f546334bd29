# Role: Thin HTTP adapter for the knowledge-assistant webhook. Model failures are not caught here:
# they surface as HTTP 500 and Chat shows the app as not responding.

from typing import Any, Dict

from fastapi import APIRouter, Depends

from chat_samples.api.deps import get_assistant_controller
from chat_samples.core.assistant_controller import AssistantController
from chat_samples.models.event import InteractionEvent

router = APIRouter(tags=["assistant"])


@router.post("/assistant")
def assistant(
    event: InteractionEvent,
    controller: AssistantController = Depends(get_assistant_controller),
) -> Dict[str, Any]:
    return controller.handle(event).render()
