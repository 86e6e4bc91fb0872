# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from scangate.errors import ReportParseError, StructuralError
from scangate.reports.policy import (
    LEVEL_EVALUATIONS,
    LEVEL_IMAGE_ID,
    LEVEL_IMAGE_TAG,
    LEVEL_RESULT,
    LEVEL_RESULTS,
    extract_policy_verdict,
    load_policy_verdict,
)


def test_extracts_fail_status():
    verdict = extract_policy_verdict([{"img1": {"tag1": [{"status": "fail"}]}}])

    assert verdict.status == "fail"
    assert verdict.image_id == "img1"
    assert verdict.image_tag == "tag1"
    assert str(verdict) == "fail"


def test_status_is_not_normalized():
    evaluation = [{"sha256:abc": {"docker.io/alpine:latest": [{"status": "Pass", "policyId": "x"}]}}]

    verdict = extract_policy_verdict(evaluation)

    assert verdict.status == "Pass"
    assert verdict.matches("pass") is False
    assert verdict.matches("Pass") is True


def test_empty_evaluation_list_is_structural_error():
    with pytest.raises(StructuralError) as excinfo:
        extract_policy_verdict([])

    assert excinfo.value.level == LEVEL_EVALUATIONS


@pytest.mark.parametrize(
    ("evaluation", "level"),
    [
        ({"img1": {}}, LEVEL_EVALUATIONS),
        ([{}], LEVEL_IMAGE_ID),
        ([[]], LEVEL_IMAGE_ID),
        ([{"img1": {}}], LEVEL_IMAGE_TAG),
        ([{"img1": ["tag1"]}], LEVEL_IMAGE_TAG),
        ([{"img1": {"tag1": []}}], LEVEL_RESULTS),
        ([{"img1": {"tag1": {"status": "pass"}}}], LEVEL_RESULTS),
        ([{"img1": {"tag1": ["pass"]}}], LEVEL_RESULT),
        ([{"img1": {"tag1": [{"detail": {}}]}}], LEVEL_RESULT),
        ([{"img1": {"tag1": [{"status": None}]}}], LEVEL_RESULT),
    ],
)
def test_malformed_levels_name_the_level(evaluation, level):
    with pytest.raises(StructuralError) as excinfo:
        extract_policy_verdict(evaluation)

    assert excinfo.value.level == level
    assert level in str(excinfo.value)


def test_multiple_image_ids_are_rejected():
    evaluation = [{"img1": {"tag1": [{"status": "pass"}]}, "img2": {"tag1": [{"status": "fail"}]}}]

    with pytest.raises(StructuralError) as excinfo:
        extract_policy_verdict(evaluation)

    assert excinfo.value.level == LEVEL_IMAGE_ID
    assert "img1, img2" in str(excinfo.value)


def test_multiple_tags_are_rejected():
    evaluation = [{"img1": {"a:1": [{"status": "pass"}], "a:2": [{"status": "pass"}]}}]

    with pytest.raises(StructuralError) as excinfo:
        extract_policy_verdict(evaluation)

    assert excinfo.value.level == LEVEL_IMAGE_TAG


def test_source_is_named_in_errors():
    with pytest.raises(StructuralError) as excinfo:
        extract_policy_verdict([], source="anchore-reports/policy_evaluation.json")

    assert "anchore-reports/policy_evaluation.json" in str(excinfo.value)


def test_load_policy_verdict_from_file(tmp_path):
    path = tmp_path / "policy_evaluation.json"
    path.write_text(json.dumps([{"sha256:1": {"alpine:3": [{"status": "pass", "final_action": "go"}]}}]))

    assert load_policy_verdict(path).status == "pass"


def test_load_policy_verdict_invalid_json(tmp_path):
    path = tmp_path / "policy_evaluation.json"
    path.write_text("[{")

    with pytest.raises(ReportParseError) as excinfo:
        load_policy_verdict(path)

    assert excinfo.value.path == str(path)
