# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json
import os

import pytest

from scangate.errors import ReportParseError, ReportReadError, ReportWriteError, StructuralError
from scangate.models import BillOfMaterials
from scangate.reports import (
    build_bill_of_materials,
    load_content_reports,
    merge_content,
    write_bill_of_materials,
)


def _write(path, payload):
    path.write_text(json.dumps(payload))
    return path


def test_merge_concatenates_in_input_order():
    documents = [
        {"content": [{"package": "musl"}, {"package": "busybox"}]},
        {"content": []},
        {"content": [{"package": "left-pad"}]},
    ]

    merged = merge_content(documents)

    assert merged == [{"package": "musl"}, {"package": "busybox"}, {"package": "left-pad"}]
    assert len(merged) == sum(len(d["content"]) for d in documents)


def test_merge_passes_records_through_untouched():
    record = {"package": "openssl", "unknown_field": {"nested": [1, None, True]}}

    assert merge_content([{"content": [record, "bare-string", 7]}]) == [record, "bare-string", 7]


def test_merge_missing_content_fails_with_offending_path():
    with pytest.raises(StructuralError) as excinfo:
        merge_content(
            [{"content": [{"a": 1}]}, {"contents": []}],
            paths=["reports/content-os.json", "reports/content-npm.json"],
        )

    assert excinfo.value.path == "reports/content-npm.json"
    assert "missing 'content'" in str(excinfo.value)
    assert "reports/content-npm.json" in str(excinfo.value)


@pytest.mark.parametrize("document", [[], "content", {"content": {"a": 1}}, {"content": None}])
def test_merge_rejects_wrong_shapes(document):
    with pytest.raises(StructuralError):
        merge_content([document])


def test_load_content_reports_reads_each_file(tmp_path):
    first = _write(tmp_path / "content-os.json", {"content": [{"a": 1}]})
    second = _write(tmp_path / "content-npm.json", {"content": [{"b": 2}]})

    assert load_content_reports([first, second]) == [{"content": [{"a": 1}]}, {"content": [{"b": 2}]}]


def test_load_invalid_json_names_the_file(tmp_path):
    broken = tmp_path / "content-os.json"
    broken.write_text("{not json")

    with pytest.raises(ReportParseError) as excinfo:
        load_content_reports([broken])

    assert excinfo.value.path == str(broken)


def test_load_missing_file_is_not_swallowed(tmp_path):
    with pytest.raises(ReportReadError) as excinfo:
        load_content_reports([tmp_path / "content-gone.json"])

    assert "content-gone.json" in str(excinfo.value)


def test_build_bill_of_materials_scenario(tmp_path):
    _write(tmp_path / "content-os.json", {"content": [{"a": 1}]})
    _write(tmp_path / "content-npm.json", {"content": [{"b": 2}]})

    bom = build_bill_of_materials(tmp_path)

    by_name = {"content-os.json": {"a": 1}, "content-npm.json": {"b": 2}}
    expected = [by_name[name] for name in os.listdir(tmp_path) if name in by_name]
    assert bom.to_dict() == {"packages": expected}


def test_build_bill_of_materials_empty_directory(tmp_path):
    assert build_bill_of_materials(tmp_path).packages == []


def test_build_bill_of_materials_fails_closed_without_partial_output(tmp_path):
    _write(tmp_path / "content-os.json", {"content": [{"a": 1}]})
    _write(tmp_path / "content-npm.json", {"packages": [{"b": 2}]})
    target = tmp_path / "out" / "content.json"

    with pytest.raises(StructuralError):
        write_bill_of_materials(build_bill_of_materials(tmp_path), target)

    assert not target.exists()


def test_rerun_is_byte_identical(tmp_path):
    _write(tmp_path / "content-os.json", {"content": [{"a": 1}, {"c": [3]}]})
    _write(tmp_path / "content-java.json", {"content": [{"b": 2}]})
    target = tmp_path / "content.json"

    write_bill_of_materials(build_bill_of_materials(tmp_path), target)
    first = target.read_bytes()
    write_bill_of_materials(build_bill_of_materials(tmp_path), target)

    assert target.read_bytes() == first


def test_write_bill_of_materials_is_compact_and_overwrites(tmp_path):
    target = tmp_path / "reports" / "content.json"
    target.parent.mkdir()
    target.write_text("stale")

    write_bill_of_materials(BillOfMaterials(packages=[{"a": 1}, {"b": 2}]), target)

    assert target.read_text() == '{"packages":[{"a":1},{"b":2}]}'


def test_write_bill_of_materials_failure_names_the_path(tmp_path):
    target = tmp_path / "content.json"
    target.mkdir()

    with pytest.raises(ReportWriteError) as excinfo:
        write_bill_of_materials(BillOfMaterials(packages=[{"a": 1}]), target)

    assert excinfo.value.path == str(target)
