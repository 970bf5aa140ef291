import pytest

from clausecheck.core.compare import assert_includes, find_mismatch, includes, json_equal
from clausecheck.errors import AssertionFailure


class TestJsonEqual:
    def test_nested_structures(self) -> None:
        assert json_equal({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]})

    def test_bool_differs_from_number(self) -> None:
        assert not json_equal(True, 1)
        assert not json_equal(0, False)

    def test_int_equals_float(self) -> None:
        assert json_equal(2, 2.0)

    def test_extra_key_is_not_equal(self) -> None:
        assert not json_equal({"a": 1}, {"a": 1, "b": 2})

    def test_string_differs_from_number(self) -> None:
        assert not json_equal("1", 1)


class TestIncludes:
    def test_subset_of_object(self) -> None:
        assert includes({"a": 1}, {"a": 1, "b": 2})

    def test_differing_value(self) -> None:
        assert not includes({"a": 1}, {"a": 2})

    def test_missing_key(self) -> None:
        assert find_mismatch({"a": 1}, {"b": 1}) == "$: missing key 'a'"

    def test_nested_values_compared_for_equality(self) -> None:
        assert not includes({"a": {"x": 1}}, {"a": {"x": 1, "y": 2}})

    def test_array_index_wise_with_extras(self) -> None:
        expected = [{"a": 1}, {"b": 2}]
        actual = [{"a": 1, "x": 9}, {"b": 2, "y": 8}, {"c": 3}]
        assert includes(expected, actual)

    def test_array_order_matters(self) -> None:
        assert not includes([{"b": 2}, {"a": 1}], [{"a": 1}, {"b": 2}])

    def test_array_shorter_actual(self) -> None:
        assert "missing" in find_mismatch([{"a": 1}, {"b": 2}], [{"a": 1}])

    def test_array_against_object(self) -> None:
        assert not includes([{"a": 1}], {"a": 1})

    def test_scalar(self) -> None:
        assert includes("done", "done")
        assert not includes("done", "pending")


class TestAssertIncludes:
    def test_passes(self) -> None:
        assert_includes({"a": 1}, {"a": 1, "b": 2}, label="response")

    def test_failure_carries_values(self) -> None:
        with pytest.raises(AssertionFailure) as exc_info:
            assert_includes({"a": 1}, {"a": 2}, label="response")

        assert exc_info.value.expected == {"a": 1}
        assert exc_info.value.actual == {"a": 2}
        assert "response.a" in str(exc_info.value)

    def test_failure_is_assertion_error(self) -> None:
        with pytest.raises(AssertionError):
            assert_includes([1], [2])
