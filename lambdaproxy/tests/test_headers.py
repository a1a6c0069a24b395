import pytest

from lambdaproxy.core.headers import (
    flatten_headers,
    from_envelope_headers,
    group_headers,
    to_envelope_headers,
)


@pytest.mark.parametrize(
    "pairs",
    [
        [],
        [("Content-Type", "application/json")],
        [("Accept", "text/html"), ("X-Trace", "abc"), ("Host", "example.com")],
        [("Set-Cookie", "a=1"), ("Set-Cookie", "b=2"), ("Set-Cookie", "c=3")],
        [("X-Token", "v"), ("x-token", "v")],
    ],
)
def test_pairs_survive_envelope_round_trip(pairs):
    headers, multi = to_envelope_headers(pairs)

    assert sorted(from_envelope_headers(headers, multi)) == sorted(pairs)


def test_single_value_map_keeps_last_value():
    headers, multi = to_envelope_headers([("Accept", "text/html"), ("Accept", "application/json")])

    assert headers == {"Accept": "application/json"}
    assert multi == {"Accept": ["text/html", "application/json"]}


def test_names_differing_in_case_stay_separate():
    headers, _ = to_envelope_headers([("ETag", "1"), ("etag", "2")])

    assert headers == {"ETag": "1", "etag": "2"}


def test_identical_lines_keep_name_and_value_apart():
    pairs = [("Vary", "Accept"), ("Vary", "Accept")]

    headers, multi = to_envelope_headers(pairs)

    assert headers == {"Vary": "Accept"}
    assert from_envelope_headers(headers, multi) == pairs


def test_from_envelope_merges_headers_not_in_multi():
    pairs = from_envelope_headers(
        {"Content-Type": "text/plain", "X-Extra": "1"},
        {"Content-Type": ["text/plain"], "Set-Cookie": ["a=1", "b=2"]},
    )

    assert sorted(pairs) == sorted(
        [
            ("Content-Type", "text/plain"),
            ("Set-Cookie", "a=1"),
            ("Set-Cookie", "b=2"),
            ("X-Extra", "1"),
        ]
    )


def test_from_envelope_appends_distinct_single_value():
    pairs = from_envelope_headers({"Cache-Control": "no-store"}, {"Cache-Control": ["private"]})

    assert pairs == [("Cache-Control", "private"), ("Cache-Control", "no-store")]


def test_from_envelope_accepts_missing_maps():
    assert from_envelope_headers(None, None) == []
    assert from_envelope_headers({"A": "1"}) == [("A", "1")]


def test_group_and_flatten_are_inverse():
    pairs = [("A", "1"), ("B", "2"), ("A", "3")]

    grouped = group_headers(pairs)

    assert grouped == {"A": ["1", "3"], "B": ["2"]}
    assert flatten_headers(grouped) == [("A", "1"), ("A", "3"), ("B", "2")]
