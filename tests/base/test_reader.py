"""
Tests for the generic list reader.
"""

from datetime import date, datetime, timezone

import pytest

from helpers import json_response, page_payload, recording_json
from helpers.factories import ACCOUNT_SID, CALL_SID

from twilio_sdk.base.reader import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PAGE_SIZE_PARAM, Reader
from twilio_sdk.base.resource_set import ResourceSet
from twilio_sdk.exceptions import ApiConnectionError, ApiError, DecodeError
from twilio_sdk.http.request import HttpMethod
from twilio_sdk.resources.call import CALL, CallStatus
from twilio_sdk.resources.recording import RECORDING, Recording

RECORDINGS_PATH = f"/2010-04-01/Accounts/{ACCOUNT_SID}/Calls/{CALL_SID}/Recordings.json"


@pytest.fixture
def reader():
    return Reader(RECORDING, account_sid=ACCOUNT_SID, call_sid=CALL_SID)


class TestReaderConfiguration:
    """Tests for filter and page size configuration."""

    def test_list_uri_rendered(self, reader):
        assert reader.uri == RECORDINGS_PATH

    def test_missing_path_parameter(self):
        with pytest.raises(ValueError):
            Reader(RECORDING, account_sid=ACCOUNT_SID)

    def test_unexpected_path_parameter(self):
        with pytest.raises(TypeError):
            Reader(RECORDING, account_sid=ACCOUNT_SID, call_sid=CALL_SID, sid="RE1")

    def test_path_parameters_are_escaped(self):
        reader = Reader(CALL, account_sid="AC/../x")
        assert reader.uri == "/2010-04-01/Accounts/AC%2F..%2Fx/Calls.json"

    def test_chaining_returns_same_reader(self, reader):
        assert reader.filter(date_created="2015-06-01") is reader
        assert reader.page_size(10) is reader
        assert reader.limit(5) is reader

    def test_unknown_filter_rejected(self, reader):
        with pytest.raises(ValueError):
            reader.filter(status="completed")

    def test_none_clears_filter(self, reader):
        reader.filter(date_created="2015-06-01")
        reader.filter(date_created=None)
        assert reader.filters == {}

    @pytest.mark.parametrize("empty", [[], ()])
    def test_empty_sequence_clears_filter(self, client, empty):
        """Test an empty list leaves no filter behind and sends no parameter."""
        reader = Reader(CALL, account_sid=ACCOUNT_SID).filter(status=["busy"])
        reader.filter(status=empty)

        assert reader.filters == {}
        assert reader.build_request(client).query_values("Status") == []

    def test_default_page_size(self, reader):
        assert reader.get_page_size() == DEFAULT_PAGE_SIZE

    def test_page_size_clamped(self, reader):
        reader.page_size(5000)
        assert reader.get_page_size() == MAX_PAGE_SIZE

    @pytest.mark.parametrize("bad", [0, -3])
    def test_page_size_must_be_positive(self, reader, bad):
        with pytest.raises(ValueError):
            reader.page_size(bad)

    def test_page_size_must_be_int(self, reader):
        with pytest.raises(TypeError):
            reader.page_size("20")

    def test_limit_sets_page_size(self, reader):
        """Test a limit shrinks the default page size."""
        reader.limit(7)
        assert reader.get_page_size() == 7
        assert reader.get_page_limit() == 1

    def test_explicit_page_size_wins_over_limit(self, reader):
        reader.page_size(3).limit(7)
        assert reader.get_page_size() == 3
        assert reader.get_page_limit() == 3

    def test_limit_must_be_positive(self, reader):
        with pytest.raises(ValueError):
            reader.limit(0)

    @pytest.mark.parametrize("bad", ["3", True, 2.5])
    def test_limit_must_be_int(self, reader, bad):
        with pytest.raises(TypeError):
            reader.limit(bad)
        assert reader.get_limit() is None

    def test_limit_none_clears(self, reader):
        reader.limit(4).limit(None)
        assert reader.get_limit() is None


class TestBuildRequest:
    """Tests for building the first-page request."""

    def test_only_set_filters_sent(self, client):
        """Test each set filter becomes one parameter and unset ones are omitted."""
        reader = Reader(CALL, account_sid=ACCOUNT_SID).filter(to="+14155550100", status=CallStatus.BUSY)
        request = reader.build_request(client)

        names = [name for name, _ in request.query_params]
        assert names == ["To", "Status", PAGE_SIZE_PARAM]
        assert request.query_values("To") == ["+14155550100"]
        assert request.query_values("Status") == ["busy"]

    def test_page_size_always_present(self, client, reader):
        request = reader.build_request(client)
        assert request.query_params == ((PAGE_SIZE_PARAM, str(DEFAULT_PAGE_SIZE)),)

    def test_request_stamped_with_account(self, client, reader):
        request = reader.build_request(client)
        assert request.method is HttpMethod.GET
        assert request.uri == RECORDINGS_PATH
        assert request.account_sid == client.account_sid

    def test_value_encoding(self, client):
        reader = Reader(CALL, account_sid=ACCOUNT_SID).filter(
            start_time=date(2015, 7, 30),
            end_time_before=datetime(2015, 7, 31, 12, 0, tzinfo=timezone.utc),
        )
        request = reader.build_request(client)
        assert request.query_values("StartTime") == ["2015-07-30"]
        assert request.query_values("EndTime<") == ["2015-07-31T12:00:00+00:00"]

    def test_list_values_repeat_key(self, client):
        reader = Reader(CALL, account_sid=ACCOUNT_SID).filter(status=["busy", CallStatus.FAILED])
        request = reader.build_request(client)
        assert request.query_values("Status") == ["busy", "failed"]


class TestExecute:
    """Tests for executing a reader."""

    def test_execute_returns_resource_set(self, client, http, reader):
        http.queue(json_response(200, page_payload("recordings", [recording_json("RE1")])))

        records = reader.execute(client)

        assert isinstance(records, ResourceSet)
        assert len(http.requests) == 1
        assert http.requests[0].uri == RECORDINGS_PATH
        assert [r.sid for r in records] == ["RE1"]

    def test_execute_closes_response(self, client, http, reader):
        http.queue(json_response(200, page_payload("recordings", [])))
        reader.execute(client)
        assert http.responses[0].closed

    def test_execute_connection_error(self, client, http, reader):
        """Test an absent response raises ApiConnectionError with the transport cause."""
        cause = OSError("unreachable")
        http.queue(cause)
        with pytest.raises(ApiConnectionError) as exc_info:
            reader.execute(client)
        assert "Recording read failed" in exc_info.value.message
        assert exc_info.value.cause is cause

    def test_execute_api_error(self, client, http, reader):
        http.queue(json_response(500, {"message": "boom", "code": 20001, "status": 500}))
        with pytest.raises(ApiError) as exc_info:
            reader.execute(client)
        assert exc_info.value.code == 20001

    def test_decode_error_closes_response(self, client, http, reader):
        """Test the response is released when decoding fails."""
        http.queue(json_response(200, {"calls": []}))
        with pytest.raises(DecodeError):
            reader.execute(client)
        assert http.responses[0].closed

    def test_mutation_after_execute_does_not_leak(self, client, http, reader):
        """Test changing filters after execute leaves the continuation untouched."""
        http.queue(
            json_response(200, page_payload("recordings", [recording_json("RE1")], next_page_uri="/page2")),
            json_response(200, page_payload("recordings", [recording_json("RE2")])),
        )
        records = reader.filter(date_created="2015-06-01").execute(client)
        reader.filter(date_created="2016-01-01").page_size(3)

        assert [r.sid for r in records] == ["RE1", "RE2"]
        assert http.requests[0].query_values("DateCreated") == ["2015-06-01"]
        assert http.requests[1].uri == "/page2"
        assert http.requests[1].query_params == ()


class TestPageAccess:
    """Tests for explicit page access."""

    def test_fetch_page_uses_target_verbatim(self, client, http, reader):
        target = "https://api.twilio.com" + RECORDINGS_PATH + "?PageSize=2&Page=1&PageToken=PA1"
        http.queue(json_response(200, page_payload("recordings", [recording_json("RE3")])))

        reader.filter(date_created="2015-06-01")
        page = reader.fetch_page(target, client)

        assert http.requests[0].uri == target
        assert http.requests[0].query_params == ()
        assert [r.sid for r in page] == ["RE3"]

    def test_first_and_next_page(self, client, http, reader):
        http.queue(
            json_response(200, page_payload("recordings", [recording_json("RE1")], next_page_uri="/p2")),
            json_response(200, page_payload("recordings", [recording_json("RE2")])),
        )
        first = reader.first_page(client)
        second = reader.next_page(first, client)

        assert [r.sid for r in second] == ["RE2"]
        assert reader.next_page(second, client) is None
        assert len(http.requests) == 2

    def test_read_classmethod(self):
        reader = Recording.read(ACCOUNT_SID, CALL_SID)
        assert reader.descriptor is RECORDING
        assert reader.uri == RECORDINGS_PATH
