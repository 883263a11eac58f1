import json

from notionify.extraction import (
    FALLBACK_TITLE,
    extract_template_candidate,
    fallback_template,
    find_json_span,
)
from notionify.validation import validate_template


def test_extracts_object_surrounded_by_prose() -> None:
    raw = 'Here you go: {"title":"T","sections":[],"properties":[]} thanks'

    candidate = extract_template_candidate(raw)

    assert candidate == {"title": "T", "sections": [], "properties": []}


def test_extracts_object_from_markdown_fence() -> None:
    raw = '```json\n{"title": "Fenced", "sections": [], "properties": []}\n```'

    assert extract_template_candidate(raw)["title"] == "Fenced"


def test_nested_braces_are_kept() -> None:
    raw = 'x {"title": "T", "sections": [{"name": "a", "description": "b"}], "properties": []} y'

    candidate = extract_template_candidate(raw)

    assert candidate["sections"] == [{"name": "a", "description": "b"}]


def test_script_blocks_are_removed_before_parsing() -> None:
    raw = '<script>var x = {"evil": true};</script>{"title": "Safe", "sections": [], "properties": []}'

    assert extract_template_candidate(raw)["title"] == "Safe"


def test_text_without_braces_returns_fallback() -> None:
    candidate = extract_template_candidate("I could not build that template, sorry.")

    assert candidate == fallback_template()
    assert candidate["title"] == FALLBACK_TITLE


def test_unparseable_span_returns_fallback() -> None:
    candidate = extract_template_candidate('{"title": "T", "sections": [} oops }')

    assert candidate["title"] == FALLBACK_TITLE


def test_reversed_braces_return_fallback() -> None:
    assert find_json_span("} nothing here {") is None


def test_deeply_nested_span_returns_fallback() -> None:
    reply = '{"a":' + "[" * 100_000 + "]" * 100_000 + "}"

    candidate = extract_template_candidate(reply)

    assert candidate["title"] == FALLBACK_TITLE


def test_fallback_passes_validation_with_warnings_only() -> None:
    result = validate_template(extract_template_candidate("no json"))

    assert result.is_valid
    assert result.warnings == ["No sections defined", "No properties defined"]


def test_fallback_is_a_fresh_copy() -> None:
    first = extract_template_candidate("none")
    first["sections"].append({"name": "x", "description": "y"})

    assert extract_template_candidate("none")["sections"] == []


def test_validated_template_round_trips(valid_template: dict) -> None:
    first = validate_template(valid_template)

    reparsed = extract_template_candidate(json.dumps(valid_template))
    second = validate_template(reparsed)

    assert second.is_valid
    assert second.warnings == first.warnings
