"""
Tests for resource record models.
"""

from datetime import datetime, timezone

import pydantic
import pytest

from helpers import call_json, notification_json, recording_json
from helpers.factories import ACCOUNT_SID, CALL_SID

from twilio_sdk.base.resource import parse_datetime
from twilio_sdk.http.request import HttpMethod
from twilio_sdk.resources import CALL, NOTIFICATION, RECORDING
from twilio_sdk.resources.call import Call, CallStatus
from twilio_sdk.resources.notification import Notification
from twilio_sdk.resources.recording import Recording


class TestParseDatetime:
    """Tests for API timestamp parsing."""

    def test_rfc2822(self):
        assert parse_datetime("Tue, 10 Feb 2015 16:17:34 +0000") == datetime(2015, 2, 10, 16, 17, 34, tzinfo=timezone.utc)

    def test_iso8601_zulu(self):
        assert parse_datetime("2015-02-10T16:17:34Z") == datetime(2015, 2, 10, 16, 17, 34, tzinfo=timezone.utc)

    def test_naive_taken_as_utc(self):
        assert parse_datetime("2015-02-10T16:17:34").tzinfo is not None

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value):
        assert parse_datetime(value) is None

    def test_garbage(self):
        with pytest.raises(ValueError):
            parse_datetime("yesterday-ish")


class TestRecording:
    """Tests for the Recording model."""

    def test_decode(self):
        recording = Recording.model_validate(recording_json("RE1", channels=2, unknown_field="x"))
        assert recording.call_sid == CALL_SID
        assert recording.date_created == datetime(2015, 2, 10, 16, 17, 34, tzinfo=timezone.utc)
        assert recording.channels == 2

    def test_immutable(self):
        recording = Recording.model_validate(recording_json("RE1"))
        with pytest.raises(pydantic.ValidationError):
            recording.duration = "99"

    def test_identity_is_sid(self):
        """Test equality and hashing follow the SID only."""
        first = Recording.model_validate(recording_json("RE1", duration="1"))
        second = Recording.model_validate(recording_json("RE1", duration="2"))
        other = Recording.model_validate(recording_json("RE2"))
        assert first == second
        assert hash(first) == hash(second)
        assert first != other
        assert len({first, second, other}) == 2

    def test_different_types_not_equal(self):
        recording = Recording.model_validate(recording_json("XX1"))
        notification = Notification.model_validate(notification_json("XX1"))
        assert recording != notification

    def test_sid_required(self):
        with pytest.raises(pydantic.ValidationError):
            Recording.model_validate({"account_sid": ACCOUNT_SID})


class TestNotification:
    """Tests for the Notification model."""

    def test_decode(self):
        notification = Notification.model_validate(notification_json("NO1"))
        assert notification.request_method is HttpMethod.GET
        assert notification.log == "0"
        assert notification.message_date == datetime(2010, 9, 13, 20, 2, 0, tzinfo=timezone.utc)
        assert notification.more_info == "https://www.twilio.com/docs/errors/11200"

    def test_filters(self, client):
        reader = Notification.read(ACCOUNT_SID, CALL_SID).filter(log="1", message_date="2010-09-13")
        request = reader.build_request(client)
        assert request.query_values("Log") == ["1"]
        assert request.query_values("MessageDate") == ["2010-09-13"]

    def test_instance_paths(self):
        fetcher = Notification.fetch(ACCOUNT_SID, CALL_SID, "NO1")
        assert fetcher.uri == f"/2010-04-01/Accounts/{ACCOUNT_SID}/Calls/{CALL_SID}/Notifications/NO1.json"
        deleter = Notification.delete(ACCOUNT_SID, CALL_SID, "NO1")
        assert deleter.uri == fetcher.uri


class TestCall:
    """Tests for the Call model."""

    def test_decode_aliases_and_enum(self):
        call = Call.model_validate(call_json("CA1", status="in-progress"))
        assert call.from_ == "+14155550199"
        assert call.status is CallStatus.IN_PROGRESS

    def test_unknown_status_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Call.model_validate(call_json("CA1", status="teleported"))


class TestDescriptors:
    """Tests for the descriptors of each resource."""

    @pytest.mark.parametrize("descriptor,key", [
        (CALL, "calls"),
        (RECORDING, "recordings"),
        (NOTIFICATION, "notifications"),
    ])
    def test_keys(self, descriptor, key):
        assert descriptor.key == key
        assert descriptor.list_path.endswith(".json")
        assert descriptor.instance_path.endswith("{sid}.json")
