"""Unit tests for the SET / WHERE clause builder."""

import pytest

from jobly.errors import BadRequestError
from jobly.query import (
    COMPANY_FILTERS,
    JOB_FILTERS,
    ClauseResult,
    EmptyInputError,
    FilterFields,
    RangeConflictError,
    build_filter_clause,
    build_set_clause,
    resolve_column,
)


class TestResolveColumn:
    def test_translated(self) -> None:
        assert resolve_column({"firstName": "first_name"}, "firstName") == "first_name"

    def test_falls_back_to_key(self) -> None:
        assert resolve_column({"lastName": "last_name"}, "firstName") == "firstName"

    def test_no_table(self) -> None:
        assert resolve_column(None, "age") == "age"

    def test_empty_mapping_falls_back(self) -> None:
        assert resolve_column({"age": ""}, "age") == "age"


class TestBuildSetClause:
    def test_valid_inputs(self) -> None:
        result = build_set_clause(
            {"firstName": "test1", "lastName": "test2"},
            {"firstName": "first_name", "lastName": "last_name"},
        )
        assert result == ClauseResult('"first_name"=$1, "last_name"=$2', ["test1", "test2"])

    def test_missing_translation_entry(self) -> None:
        result = build_set_clause(
            {"firstName": "test1", "lastName": "test2"},
            {"lastName": "last_name"},
        )
        assert result.clause == '"firstName"=$1, "last_name"=$2'
        assert result.values == ["test1", "test2"]

    def test_empty_data(self) -> None:
        with pytest.raises(EmptyInputError):
            build_set_clause({}, {"firstName": "first_name"})

    def test_empty_data_is_bad_request(self) -> None:
        with pytest.raises(BadRequestError) as exc:
            build_set_clause({}, {})
        assert exc.value.status == 400

    def test_values_follow_key_order(self) -> None:
        data = {"c": 3, "a": 1, "b": 2}
        result = build_set_clause(data, {})
        assert result.clause == '"c"=$1, "a"=$2, "b"=$3'
        assert result.values == [3, 1, 2]

    def test_none_passes_through(self) -> None:
        result = build_set_clause({"salary": None, "equity": None}, {})
        assert result.values == [None, None]
        assert result.clause.count("$") == 2

    def test_quotes_are_doubled(self) -> None:
        result = build_set_clause({'we"ird': 1}, {})
        assert result.clause == '"we""ird"=$1'

    def test_next_placeholder(self) -> None:
        result = build_set_clause({"name": "x", "description": "y"}, {})
        assert result.next_placeholder == "$3"

    def test_idempotent(self) -> None:
        data = {"numEmployees": 4, "logoUrl": None}
        table = {"numEmployees": "num_employees", "logoUrl": "logo_url"}
        assert build_set_clause(data, table) == build_set_clause(data, table)


class TestBuildFilterClause:
    def test_empty(self) -> None:
        with pytest.raises(EmptyInputError):
            build_filter_clause({})

    def test_only_unrecognized_keys(self) -> None:
        with pytest.raises(EmptyInputError):
            build_filter_clause({"handle": "c1"})

    def test_empty_name_is_not_usable(self) -> None:
        with pytest.raises(EmptyInputError):
            build_filter_clause({"name": ""})

    def test_name_only(self) -> None:
        result = build_filter_clause({"name": "C1"})
        assert result.clause == "name ILIKE $1"
        assert result.values == ["%C1%"]

    def test_all_criteria(self) -> None:
        result = build_filter_clause({"name": "C1", "minEmployees": 1, "maxEmployees": 3})
        assert result.clause == 'name ILIKE $1 AND "num_employees">$2 AND "num_employees"<$3'
        assert result.values == ["%C1%", 1, 3]

    def test_fixed_order_regardless_of_input_order(self) -> None:
        result = build_filter_clause({"maxEmployees": 3, "minEmployees": 1, "name": "C1"})
        assert result.clause == 'name ILIKE $1 AND "num_employees">$2 AND "num_employees"<$3'
        assert result.values == ["%C1%", 1, 3]

    def test_no_numbering_gaps(self) -> None:
        result = build_filter_clause({"name": "net", "maxEmployees": 300})
        assert result.clause == 'name ILIKE $1 AND "num_employees"<$2'
        assert result.values == ["%net%", 300]

    def test_zero_bound_is_present(self) -> None:
        result = build_filter_clause({"minEmployees": 0})
        assert result.clause == '"num_employees">$1'
        assert result.values == [0]

    def test_range_conflict(self) -> None:
        with pytest.raises(RangeConflictError):
            build_filter_clause({"minEmployees": 3, "maxEmployees": 1})

    def test_range_conflict_beyond_float_precision(self) -> None:
        with pytest.raises(RangeConflictError):
            build_filter_clause({"minEmployees": 2**53 + 1, "maxEmployees": 2**53})

    def test_range_conflict_with_string_bounds(self) -> None:
        with pytest.raises(RangeConflictError):
            build_filter_clause({"minEmployees": "10", "maxEmployees": "9"})

    def test_non_numeric_string_bound(self) -> None:
        with pytest.raises(BadRequestError):
            build_filter_clause({"minEmployees": "ten", "maxEmployees": "9"})

    def test_equal_bounds_allowed(self) -> None:
        result = build_filter_clause({"minEmployees": 2, "maxEmployees": 2})
        assert result.values == [2, 2]

    def test_range_conflict_checked_before_text(self) -> None:
        with pytest.raises(RangeConflictError):
            build_filter_clause({"name": "C1", "minEmployees": 10, "maxEmployees": 9})

    def test_job_fields(self) -> None:
        result = build_filter_clause({"title": "eng", "minSalary": 50000}, JOB_FILTERS)
        assert result.clause == 'title ILIKE $1 AND "salary">$2'
        assert result.values == ["%eng%", 50000]

    def test_inclusive_bounds(self) -> None:
        fields = FilterFields(
            text_key=COMPANY_FILTERS.text_key,
            text_column=COMPANY_FILTERS.text_column,
            min_key=COMPANY_FILTERS.min_key,
            max_key=COMPANY_FILTERS.max_key,
            translation=COMPANY_FILTERS.translation,
            inclusive_bounds=True,
        )
        result = build_filter_clause({"minEmployees": 1, "maxEmployees": 3}, fields)
        assert result.clause == '"num_employees">=$1 AND "num_employees"<=$2'

    def test_bound_without_translation_uses_key(self) -> None:
        fields = FilterFields(text_key="name", text_column="name", min_key="minAge", max_key="maxAge")
        result = build_filter_clause({"minAge": 18}, fields)
        assert result.clause == '"minAge">$1'

    def test_idempotent(self) -> None:
        criteria = {"name": "C1", "minEmployees": 1}
        assert build_filter_clause(criteria) == build_filter_clause(criteria)

    def test_placeholder_count_matches_values(self) -> None:
        result = build_filter_clause({"name": "a", "minEmployees": 1, "maxEmployees": 9})
        assert result.clause.count("$") == len(result.values)
