from .mocks import ScriptedHttpClient, TrackingBody, json_response, raw_response
from .factories import call_json, notification_json, page_payload, recording_json

__all__ = [
    "ScriptedHttpClient",
    "TrackingBody",
    "json_response",
    "raw_response",
    "call_json",
    "notification_json",
    "page_payload",
    "recording_json",
]
