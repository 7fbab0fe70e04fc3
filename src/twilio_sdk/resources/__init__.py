"""Resource types of the 2010-04-01 API."""

from .call import CALL, Call, CallStatus
from .notification import NOTIFICATION, Notification
from .recording import RECORDING, Recording

__all__ = [
    "CALL",
    "Call",
    "CallStatus",
    "NOTIFICATION",
    "Notification",
    "RECORDING",
    "Recording",
]
