"""Session state for a chat view.

The view is always in exactly one of three states. Sending gates new
submissions; Errored records the failure of the most recent turn and behaves
like Idle otherwise.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Idle:
    """No request in flight, last turn (if any) succeeded."""

    name = "idle"


@dataclass(frozen=True)
class Sending:
    """Exactly one request is in flight."""

    name = "sending"


@dataclass(frozen=True)
class Errored:
    """No request in flight, the last turn failed."""

    message: str
    name = "errored"


SessionState = Idle | Sending | Errored

IDLE = Idle()
SENDING = Sending()
