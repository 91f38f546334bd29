# Role: The two failure types that cross module boundaries. Both propagate to the HTTP layer uncaught,
# where FastAPI turns them into a 500; user-facing validation problems are NOT exceptions (see chat_response).

from __future__ import annotations


class MalformedEventError(ValueError):
    """An interaction event is missing a block the current step needs, or carries a value we cannot read."""


class UpstreamError(RuntimeError):
    """The hosted model call failed (network, auth, quota) or returned nothing usable."""
