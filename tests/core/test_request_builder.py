"""Request Builder — tests for parameter-model serialization.

Tests cover:
    - unset / blank fields are omitted
    - dates formatted YYYY-MM-DD, date ranges validated before dispatch
    - id lists comma-joined in input order, empty lists omitted
    - enum filters mapped to wire tokens; unknown values rejected
    - orderBy filtered to the endpoint whitelist, order preserved
    - limit/offset emitted only when strictly positive
"""

from datetime import date, datetime

import pytest

from marvelapi.core.domain.enums import ComicFormat, ComicFormatType, DateDescriptor, OrderBy
from marvelapi.core.domain.parameters import (
    CharacterQuery,
    ComicQuery,
    CreatorQuery,
    SeriesQuery,
    StoryQuery,
)
from marvelapi.core.errors import InvalidEnumValueError, MalformedParametersError
from marvelapi.core.services.request_builder import build_request


# ─── Omission of unset fields ────────────────────────────────────

def test_no_params_gives_bare_path():
    descriptor = build_request("/stories")
    assert descriptor.path == "/stories"
    assert descriptor.params == {}


def test_default_model_emits_nothing():
    for model in (CharacterQuery(), ComicQuery(), CreatorQuery(), SeriesQuery(), StoryQuery()):
        assert build_request("/x", model).params == {}


def test_blank_strings_are_omitted():
    params = CreatorQuery(first_name="", last_name="   ", suffix="Jr.")
    assert build_request("/creators", params).params == {"suffix": "Jr."}


def test_series_scenario_title_limit_offset_zero():
    params = SeriesQuery(title_starts_with="Amazing", limit=10, offset=0)
    descriptor = build_request("/series", params)
    assert descriptor.params == {"titleStartsWith": "Amazing", "limit": "10"}


def test_only_set_fields_become_parameters():
    params = CharacterQuery(name="Hulk", comics=[1, 2], limit=5)
    assert build_request("/characters", params).params == {
        "name": "Hulk",
        "comics": "1,2",
        "limit": "5",
    }


# ─── Dates ───────────────────────────────────────────────────────

def test_modified_since_formats_date_and_datetime():
    assert build_request("/stories", StoryQuery(modified_since=date(2014, 1, 5))).params == {
        "modifiedSince": "2014-01-05"
    }
    assert build_request(
        "/stories", StoryQuery(modified_since=datetime(2014, 1, 5, 23, 59))
    ).params == {"modifiedSince": "2014-01-05"}


def test_date_range_emits_begin_and_end():
    params = ComicQuery(date_range_begin=date(2013, 1, 1), date_range_end=date(2013, 12, 31))
    assert build_request("/comics", params).params == {"dateRange": "2013-01-01,2013-12-31"}


def test_date_range_same_day_is_valid():
    params = ComicQuery(date_range_begin=date(2013, 6, 1), date_range_end=date(2013, 6, 1))
    assert build_request("/comics", params).params["dateRange"] == "2013-06-01,2013-06-01"


def test_date_range_begin_after_end_fails():
    params = ComicQuery(date_range_begin=date(2014, 1, 2), date_range_end=date(2014, 1, 1))
    with pytest.raises(MalformedParametersError) as exc_info:
        build_request("/comics", params)
    assert exc_info.value.field == "dateRange"


def test_date_range_accepts_mixed_date_and_datetime():
    params = ComicQuery(date_range_begin=date(2020, 1, 1), date_range_end=datetime(2020, 2, 1, 10))
    assert build_request("/comics", params).params == {"dateRange": "2020-01-01,2020-02-01"}


def test_date_range_same_day_datetime_end_is_valid():
    params = ComicQuery(date_range_begin=datetime(2020, 1, 1, 18), date_range_end=date(2020, 1, 1))
    assert build_request("/comics", params).params == {"dateRange": "2020-01-01,2020-01-01"}


def test_date_range_mixed_bounds_begin_after_end_fails():
    params = ComicQuery(date_range_begin=datetime(2020, 3, 1, 0, 5), date_range_end=date(2020, 2, 1))
    with pytest.raises(MalformedParametersError) as exc_info:
        build_request("/comics", params)
    assert exc_info.value.field == "dateRange"


@pytest.mark.parametrize(
    "begin,end",
    [(date(2014, 1, 1), None), (None, date(2014, 1, 1))],
)
def test_one_sided_date_range_fails(begin, end):
    with pytest.raises(MalformedParametersError):
        build_request("/comics", ComicQuery(date_range_begin=begin, date_range_end=end))


def test_malformed_parameters_is_a_value_error():
    params = ComicQuery(date_range_begin=date(2014, 1, 1))
    with pytest.raises(ValueError):
        build_request("/comics", params)


# ─── Id lists ────────────────────────────────────────────────────

def test_id_list_preserves_input_order_and_duplicates():
    params = StoryQuery(characters=[1009610, 3, 1009610, 2])
    assert build_request("/stories", params).params == {"characters": "1009610,3,1009610,2"}


def test_empty_id_list_is_omitted():
    params = StoryQuery(characters=[], comics=[7])
    assert build_request("/stories", params).params == {"comics": "7"}


def test_non_integer_id_fails():
    with pytest.raises(MalformedParametersError):
        build_request("/stories", StoryQuery(comics=[1, "two"]))


# ─── Enums and scalars ───────────────────────────────────────────

def test_comic_enums_map_to_wire_tokens():
    params = ComicQuery(
        format=ComicFormat.TRADE_PAPERBACK,
        format_type=ComicFormatType.COLLECTION,
        date_descriptor=DateDescriptor.THIS_MONTH,
    )
    assert build_request("/comics", params).params == {
        "format": "trade paperback",
        "formatType": "collection",
        "dateDescriptor": "thisMonth",
    }


def test_enum_accepts_raw_wire_token():
    params = SeriesQuery(series_type="one shot")
    assert build_request("/series", params).params == {"seriesType": "one shot"}


def test_unknown_enum_value_fails():
    with pytest.raises(InvalidEnumValueError) as exc_info:
        build_request("/comics", ComicQuery(format="pamphlet"))
    assert exc_info.value.enum_name == "ComicFormat"


def test_contains_joins_format_tokens():
    params = SeriesQuery(contains=[ComicFormat.COMIC, ComicFormat.DIGITAL_COMIC])
    assert build_request("/series", params).params == {"contains": "comic,digital comic"}


def test_contains_with_unknown_format_fails():
    with pytest.raises(InvalidEnumValueError):
        build_request("/series", SeriesQuery(contains=[ComicFormat.COMIC, "scroll"]))


def test_booleans_are_lowercase():
    params = ComicQuery(no_variants=True, has_digital_issue=False)
    assert build_request("/comics", params).params == {
        "noVariants": "true",
        "hasDigitalIssue": "false",
    }


def test_integer_scalars_are_decimal():
    params = ComicQuery(start_year=1963, issue_number=0, digital_id=4)
    assert build_request("/comics", params).params == {
        "startYear": "1963",
        "issueNumber": "0",
        "digitalId": "4",
    }


# ─── orderBy ─────────────────────────────────────────────────────

def test_order_by_drops_tokens_outside_whitelist():
    params = StoryQuery(order=[OrderBy.NAME, OrderBy.MODIFIED_DESC, OrderBy.TITLE, OrderBy.ID])
    assert build_request("/stories", params).params == {"orderBy": "-modified,id"}


def test_order_by_all_dropped_emits_nothing():
    params = CharacterQuery(order=[OrderBy.TITLE, OrderBy.FOC_DATE])
    assert build_request("/characters", params).params == {}


def test_order_by_override_whitelist():
    params = ComicQuery(order=[OrderBy.TITLE, OrderBy.MODIFIED])
    descriptor = build_request("/comics", params, allowed_order=[OrderBy.MODIFIED])
    assert descriptor.params == {"orderBy": "modified"}


def test_single_order_token_is_not_split():
    assert build_request("/characters", CharacterQuery(order="name")).params == {"orderBy": "name"}
    assert build_request("/stories", StoryQuery(order=OrderBy.MODIFIED_DESC)).params == {
        "orderBy": "-modified"
    }


def test_order_by_comes_before_pagination():
    params = SeriesQuery(title="X-Men", order=[OrderBy.START_YEAR_DESC], limit=20, offset=40)
    assert list(build_request("/series", params).params) == ["title", "orderBy", "limit", "offset"]


# ─── Pagination ──────────────────────────────────────────────────

@pytest.mark.parametrize("value", [0, -1, -100])
def test_non_positive_pagination_is_omitted(value):
    params = StoryQuery(limit=value, offset=value)
    assert build_request("/stories", params).params == {}


def test_positive_pagination_is_verbatim():
    params = StoryQuery(limit=100, offset=1)
    assert build_request("/stories", params).params == {"limit": "100", "offset": "1"}


def test_non_integer_limit_fails():
    with pytest.raises(MalformedParametersError):
        build_request("/stories", StoryQuery(limit="10"))


def test_blank_enum_filter_is_omitted():
    assert build_request("/comics", ComicQuery(format="", format_type="  ")).params == {}
