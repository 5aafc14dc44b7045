"""Tests for request and output models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from openai_costs.models import CostOutput, CostResponse, DateRange, FilterMode


class TestCostResponse:
    def test_reads_both_fields(self) -> None:
        resp = CostResponse.model_validate({"total_usage": 12.5, "project_id": "proj_x"})
        assert resp.total_usage == 12.5
        assert resp.project_id == "proj_x"

    def test_missing_fields_default(self) -> None:
        resp = CostResponse.model_validate({})
        assert resp.total_usage == 0
        assert resp.project_id == ""

    def test_null_fields_default(self) -> None:
        resp = CostResponse.model_validate({"total_usage": None, "project_id": None})
        assert resp.total_usage == 0
        assert resp.project_id == ""

    def test_numeric_project_id_is_stringified(self) -> None:
        resp = CostResponse.model_validate({"total_usage": 3, "project_id": 42})
        assert resp.project_id == "42"
        assert resp.total_usage == 3

    def test_numeric_string_total_is_parsed(self) -> None:
        assert CostResponse.model_validate({"total_usage": "12.5"}).total_usage == 12.5

    def test_non_numeric_total_defaults(self) -> None:
        assert CostResponse.model_validate({"total_usage": "n/a"}).total_usage == 0
        assert CostResponse.model_validate({"total_usage": {"value": 1}}).total_usage == 0
        assert CostResponse.model_validate({"total_usage": True}).total_usage == 0

    def test_unknown_fields_are_kept(self) -> None:
        resp = CostResponse.model_validate({"object": "page", "data": [], "has_more": False})
        assert resp.total_usage == 0
        assert resp.model_extra == {"object": "page", "data": [], "has_more": False}


class TestCostOutput:
    def test_from_response_json(self) -> None:
        output = CostOutput.from_response(CostResponse(total_usage=12.5, project_id="proj_x"))
        assert output.to_json() == '{"amount":{"value":12.5,"currency":"usd"},"project_id":"proj_x"}'

    def test_empty_response_json(self) -> None:
        output = CostOutput.from_response(CostResponse.model_validate({}))
        assert json.loads(output.to_json()) == {
            "amount": {"value": 0, "currency": "usd"},
            "project_id": "",
        }
        assert output.to_json() == '{"amount":{"value":0,"currency":"usd"},"project_id":""}'

    def test_integer_total_stays_integer(self) -> None:
        output = CostOutput.from_response(CostResponse.model_validate({"total_usage": 7}))
        assert '"value":7,' in output.to_json()

    def test_currency_is_always_usd(self) -> None:
        resp = CostResponse.model_validate({"total_usage": 1, "currency": "eur"})
        assert CostOutput.from_response(resp).amount.currency == "usd"

    def test_output_is_frozen(self) -> None:
        output = CostOutput()
        with pytest.raises(ValidationError):
            output.project_id = "other"  # type: ignore[misc]


class TestDateRange:
    def test_unset_by_default(self) -> None:
        rng = DateRange()
        assert rng.date_from is None
        assert rng.date_to is None

    def test_filter_mode_values(self) -> None:
        assert FilterMode("bucketed") is FilterMode.BUCKETED
        assert FilterMode("date") is FilterMode.DATE
