"""
Unit tests for coordinate detection and collection.
"""

from json_variant_extractor.coordinates import (
    CoordinatePair,
    collect_coordinates,
    is_coordinate_string,
    parse_coordinate_string,
)


class TestCoordinateDetection:
    def test_parse_compact(self):
        assert parse_coordinate_string("geo:12.5,-45.25") == (12.5, -45.25)

    def test_parse_with_spaces(self):
        assert parse_coordinate_string("geo: 0, 0") == (0, 0)

    def test_parse_returns_floats(self):
        lat, lng = parse_coordinate_string("geo:1,2")
        assert isinstance(lat, float)
        assert isinstance(lng, float)

    def test_prefix_case_insensitive(self):
        assert is_coordinate_string("GEO:1,2")
        assert parse_coordinate_string("Geo:1,2") == (1.0, 2.0)

    def test_surrounding_whitespace_trimmed(self):
        assert is_coordinate_string("  geo:1.5 , 2.5\n")

    def test_missing_prefix_rejected(self):
        assert not is_coordinate_string("12.5,-45.25")
        assert parse_coordinate_string("12.5,-45.25") is None

    def test_non_numeric_rejected(self):
        assert not is_coordinate_string("geo:abc,def")

    def test_missing_comma_rejected(self):
        assert not is_coordinate_string("geo:1 2")

    def test_extra_tokens_rejected(self):
        assert not is_coordinate_string("geo:1,2,3")
        assert not is_coordinate_string("geo:1,2 north")
        assert not is_coordinate_string("at geo:1,2")

    def test_unsupported_number_forms_rejected(self):
        assert not is_coordinate_string("geo:+1,2")
        assert not is_coordinate_string("geo:1e3,2")
        assert not is_coordinate_string("geo:.5,2")

    def test_non_string_never_matches(self):
        assert not is_coordinate_string(None)
        assert not is_coordinate_string(12.5)
        assert parse_coordinate_string(["geo:1,2"]) is None

    def test_match_and_parse_agree(self):
        samples = ["geo:1,2", "geo: -1.5 ,2", "geo:1,", "geo:", "GEO:9,9", "geo:1;2", " geo:3,4 "]
        for s in samples:
            assert is_coordinate_string(s) == (parse_coordinate_string(s) is not None)


class TestCollectCoordinates:
    def test_duplicates_suppressed_in_order(self):
        doc = [{"p": "geo:1,2"}, {"p": "geo:1,2"}, {"p": "geo:3,4"}]
        assert collect_coordinates(doc) == [(1, 2), (3, 4)]

    def test_returns_coordinate_pairs(self):
        pairs = collect_coordinates({"p": "geo:1,2"})
        assert pairs == [CoordinatePair(lat=1.0, lng=2.0)]
        assert pairs[0].as_dict() == {"lat": 1.0, "lng": 2.0}

    def test_single_string_document(self):
        assert collect_coordinates("geo:5,6") == [(5, 6)]

    def test_pre_order_discovery(self):
        doc = {
            "a": "geo:1,1",
            "b": {"c": ["geo:2,2", {"d": "geo:3,3"}], "e": "geo:4,4"},
            "f": "geo:5,5",
        }
        assert collect_coordinates(doc) == [(1, 1), (2, 2), (3, 3), (4, 4), (5, 5)]

    def test_keys_are_ignored(self):
        assert collect_coordinates({"geo:1,2": "plain"}) == []

    def test_other_primitives_ignored(self):
        assert collect_coordinates([1, None, True, "text", []]) == []

    def test_textual_dedup_keeps_distinct_spellings(self):
        pairs = collect_coordinates(["geo:1.0,2", "geo:1,2", "geo: 1,2"])
        # same float value, different text for the first pair
        assert pairs == [(1.0, 2.0), (1.0, 2.0)]

    def test_deeply_nested_document(self):
        doc = "geo:7,8"
        for _ in range(5000):
            doc = [doc]
        assert collect_coordinates(doc) == [(7, 8)]

    def test_input_not_mutated(self):
        doc = [{"p": ["geo:1,2"]}]
        collect_coordinates(doc)
        assert doc == [{"p": ["geo:1,2"]}]
