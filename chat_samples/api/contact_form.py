# Role: Thin HTTP adapter for the contact-form webhook. Validates the event shape and delegates the whole
# interaction to DialogController (business logic lives in core, not in the API layer).

from typing import Any, Dict

from fastapi import APIRouter, Depends

from chat_samples.api.deps import get_dialog_controller
from chat_samples.core.dialog_controller import DialogController
from chat_samples.models.event import InteractionEvent

router = APIRouter(tags=["contact-form"])


@router.post("/contact-form")
def contact_form(
    event: InteractionEvent,
    controller: DialogController = Depends(get_dialog_controller),
) -> Dict[str, Any]:
    # 1) Forward the event to the dialog state machine
    # 2) Return the Chat JSON envelope for the chosen response
    return controller.handle(event).render()
