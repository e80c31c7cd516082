"""Unit tests for upstream body normalization."""

import logging

import pytest

from tests.conftest import ok_body
from tripdistance.domain.entities import RouteFound, RouteUnavailable
from tripdistance.domain.errors import InternalError
from tripdistance.domain.normalize import first_element, normalize


class TestSuccess:
    def test_traffic_duration_preferred(self):
        result = normalize(ok_body())
        assert isinstance(result, RouteFound)
        assert result.to_payload() == {
            "status": "OK",
            "distanceMeters": 4200,
            "distanceText": "4.2 km",
            "durationText": "12 mins",
        }

    def test_falls_back_to_baseline_duration(self):
        result = normalize(ok_body(traffic_text=None))
        assert result.ok
        assert result.duration_text == "10 mins"

    def test_missing_distance_is_internal(self):
        body = ok_body()
        del body["rows"][0]["elements"][0]["distance"]
        with pytest.raises(InternalError):
            normalize(body)

    def test_missing_duration_is_internal(self):
        body = ok_body(traffic_text=None)
        del body["rows"][0]["elements"][0]["duration"]
        with pytest.raises(InternalError):
            normalize(body)

    @pytest.mark.parametrize(
        "field, bad",
        [("value", "n/a"), ("value", True), ("value", None), ("text", 4.2)],
    )
    def test_mistyped_distance_is_internal(self, field, bad):
        body = ok_body()
        body["rows"][0]["elements"][0]["distance"][field] = bad
        with pytest.raises(InternalError):
            normalize(body)

    def test_mistyped_duration_text_is_internal(self):
        body = ok_body(traffic_text=None)
        body["rows"][0]["elements"][0]["duration"]["text"] = 600
        with pytest.raises(InternalError):
            normalize(body)

    def test_traffic_duration_without_text_falls_back(self):
        body = ok_body()
        del body["rows"][0]["elements"][0]["duration_in_traffic"]["text"]
        assert normalize(body).duration_text == "10 mins"

    def test_float_distance_value_accepted(self):
        body = ok_body()
        body["rows"][0]["elements"][0]["distance"]["value"] = 4200.5
        assert normalize(body).distance_meters == 4200.5


class TestSoftFailure:
    def test_top_level_over_query_limit(self):
        result = normalize({"status": "OVER_QUERY_LIMIT", "rows": []})
        assert isinstance(result, RouteUnavailable)
        assert result.to_payload() == {
            "status": "OVER_QUERY_LIMIT",
            "distanceMeters": None,
            "durationText": None,
        }

    def test_element_status_reported(self):
        body = {"status": "OK", "rows": [{"elements": [{"status": "ZERO_RESULTS"}]}]}
        assert normalize(body) == RouteUnavailable(status="ZERO_RESULTS")

    def test_element_status_wins_over_top_level(self):
        body = {
            "status": "INVALID_REQUEST",
            "rows": [{"elements": [{"status": "NOT_FOUND"}]}],
        }
        assert normalize(body).status == "NOT_FOUND"

    def test_ok_element_under_failed_top_level(self):
        body = ok_body()
        body["status"] = "UNKNOWN_ERROR"
        assert normalize(body) == RouteUnavailable(status="UNKNOWN_ERROR")

    def test_missing_element_uses_sentinel(self):
        assert normalize({"status": "OK", "rows": []}).status == "ERROR"
        assert normalize({"status": "OK"}).status == "ERROR"
        assert normalize({}).status == "ERROR"

    def test_unknown_codes_pass_through(self):
        body = {"status": "OK", "rows": [{"elements": [{"status": "SOMETHING_NEW"}]}]}
        assert normalize(body).status == "SOMETHING_NEW"

    def test_soft_failure_payload_has_no_distance_text(self):
        payload = normalize({"status": "OK", "rows": []}).to_payload()
        assert "distanceText" not in payload


class TestFirstElement:
    def test_only_first_pair_is_read(self, caplog):
        body = ok_body()
        body["rows"][0]["elements"].append({"status": "ZERO_RESULTS"})
        body["rows"].append({"elements": [{"status": "NOT_FOUND"}]})

        with caplog.at_level(logging.WARNING):
            result = normalize(body)

        assert result.ok
        assert result.distance_meters == 4200
        assert "only the first pair" in caplog.text

    def test_malformed_grid(self):
        assert first_element({"rows": "nope"}) is None
        assert first_element({"rows": [{"elements": []}]}) is None
        assert first_element({"rows": [{"elements": ["x"]}]}) is None
