"""Tests for the per-operation Rich renderers."""

from __future__ import annotations

from datetime import datetime

from usage_tracker.output.renderers import render_quiet, render_result
from usage_tracker.services.result import ServiceError, ServiceResult

ISO_1 = "2024-03-01T12:00:00+00:00"
ISO_2 = "2024-03-02T08:30:00+00:00"


def _need(predicted: int | None) -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="need",
        data={
            "name": "milk",
            "magnitude": 2,
            "unit": "week",
            "requested_seconds": 2 * 604800,
            "predicted": predicted,
            "sufficient_data": predicted is not None,
        },
    )


class TestRenderResult:
    def test_generic(self) -> None:
        result = ServiceResult(ok=True, op="add", data={"name": "milk", "usage_count": 0})
        output = render_result(result)
        assert "OK" in output
        assert "add" in output
        assert "name: milk" in output

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="remove",
            error=ServiceError(code="NOT_FOUND", message="No thing named 'milk' exists"),
        )
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "No thing named 'milk' exists" in output

    def test_use_formats_time_in_utc(self) -> None:
        result = ServiceResult(
            ok=True,
            op="use",
            data={"name": "milk", "used_at": ISO_1, "usage_count": 1},
        )
        output = render_result(result, utc=True, time_format="%Y-%m-%d %H:%M")
        assert "used at: 2024-03-01 12:00" in output

    def test_show(self) -> None:
        result = ServiceResult(
            ok=True,
            op="show",
            data={"name": "milk", "usages": [ISO_1, ISO_2], "count": 2},
        )
        output = render_result(result, utc=True, time_format="%d.%m.%Y %H:%M")
        assert "milk" in output
        assert "(2 usages)" in output
        lines = output.splitlines()
        assert lines[1].strip() == "01.03.2024 12:00"
        assert lines[2].strip() == "02.03.2024 08:30"

    def test_show_single_usage(self) -> None:
        result = ServiceResult(
            ok=True, op="show", data={"name": "milk", "usages": [ISO_1], "count": 1}
        )
        assert "(1 usage)" in render_result(result, utc=True)

    def test_list(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list",
            data={
                "items": [
                    {"name": "eggs", "usage_count": 0},
                    {"name": "milk", "usage_count": 3},
                ],
                "count": 2,
            },
        )
        output = render_result(result)
        assert "eggs" in output
        assert "milk" in output
        assert "used at" not in output

    def test_list_with_usages(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list",
            data={"items": [{"name": "milk", "usage_count": 1, "usages": [ISO_1]}], "count": 1},
        )
        output = render_result(result, utc=True, time_format="%Y-%m-%d")
        assert "used at: 2024-03-01" in output

    def test_list_empty(self) -> None:
        result = ServiceResult(ok=True, op="list", data={"items": [], "count": 0})
        assert "No things are tracked yet." in render_result(result)

    def test_need(self) -> None:
        assert "milk: 5 needed for 2 weeks" in render_result(_need(5))

    def test_need_insufficient(self) -> None:
        output = render_result(_need(None))
        assert "not enough data" in output
        assert "needed" not in output

    def test_name_with_markup_is_literal(self) -> None:
        result = ServiceResult(ok=True, op="add", data={"name": "[bold]milk[/bold]"})
        assert "[bold]milk[/bold]" in render_result(result)


class TestRenderQuiet:
    def test_list_names_only(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list",
            data={"items": [{"name": "eggs"}, {"name": "milk"}], "count": 2},
        )
        assert render_quiet(result) == "eggs\nmilk"

    def test_show_iso_utc(self) -> None:
        result = ServiceResult(
            ok=True, op="show", data={"name": "milk", "usages": [ISO_1, ISO_2], "count": 2}
        )
        assert render_quiet(result, utc=True) == f"{ISO_1}\n{ISO_2}"

    def test_show_iso_local_time(self) -> None:
        result = ServiceResult(
            ok=True, op="show", data={"name": "milk", "usages": [ISO_1], "count": 1}
        )
        expected = datetime.fromisoformat(ISO_1).astimezone().isoformat()
        assert render_quiet(result) == expected

    def test_need(self) -> None:
        assert render_quiet(_need(5)) == "5"
        assert render_quiet(_need(None)) == "unknown"

    def test_other_ops(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="clear")) == "OK: clear"
