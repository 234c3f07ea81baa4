import json

import pytest

from scheduling.data import CatalogLoader, CourseRecordParser
from scheduling.exceptions import CatalogError, CatalogLoadError, CourseRecordError
from scheduling.models import MeetingBlock, Weekday


def test_load_catalog_filters_by_term(write_catalog, make_record):
    path = write_catalog([
        make_record("CSCI 0320", term="202420"),
        make_record("MATH 0520", term="202420"),
        make_record("CSCI 0330", term="202510"),
    ])

    catalog = CatalogLoader(path).load_catalog("202420")

    assert catalog.term == "202420"
    assert catalog.codes == ["CSCI 0320", "MATH 0520"]
    assert "CSCI 0330" not in catalog
    assert len(catalog) == 2


def test_parsed_course_fields(write_catalog, make_record):
    path = write_catalog([
        make_record("CSCI 0320", "TTh 1-2:20p", days=(1, 3), start="1300", end="1420",
                    writ=True, prereqs=[["CSCI 0150", "CSCI 0170"], ["CSCI 0160"]]),
    ])

    course = CatalogLoader(path).load_catalog("202420").require("CSCI 0320")

    assert course.meets == "TTh 1-2:20p"
    assert course.is_writ
    assert course.department == "CSCI"
    assert course.meeting_times == (
        MeetingBlock(Weekday.TUESDAY, 780, 860),
        MeetingBlock(Weekday.THURSDAY, 780, 860),
    )
    assert course.prereq_groups == (frozenset({"CSCI 0150", "CSCI 0170"}), frozenset({"CSCI 0160"}))


def test_catalog_is_cached_per_term(write_catalog, make_record):
    loader = CatalogLoader(write_catalog([make_record("CSCI 0320")]))
    assert loader.load_catalog("202420") is loader.load_catalog("202420")


def test_duplicate_codes_keep_first_record(write_catalog, make_record):
    path = write_catalog([
        make_record("CSCI 0320", "TTh 1-2:20p", days=(1, 3), start="1300", end="1420"),
        make_record("CSCI 0320", "MWF 2-2:50p", days=(0, 2, 4), start="1400", end="1450"),
    ])
    catalog = CatalogLoader(path).load_catalog("202420")
    assert len(catalog) == 1
    assert catalog.get("CSCI 0320").meets == "TTh 1-2:20p"


def test_malformed_record_skipped_but_require_fails_fast(write_catalog, make_record):
    broken = make_record("CLPS 0010")
    del broken["prereqGroups"]
    path = write_catalog([make_record("CSCI 0320"), broken])

    catalog = CatalogLoader(path).load_catalog("202420")

    assert "CLPS 0010" not in catalog
    assert catalog.get("CLPS 0010") is None
    with pytest.raises(CatalogError, match="prereqGroups"):
        catalog.require("CLPS 0010")


def test_require_unknown_code(write_catalog, make_record):
    catalog = CatalogLoader(write_catalog([make_record("CSCI 0320")])).load_catalog("202420")
    with pytest.raises(CatalogError, match="NOPE 0001"):
        catalog.require("NOPE 0001")


def test_available_terms(write_catalog, make_record):
    path = write_catalog([
        make_record("A 1", term="202510"),
        make_record("B 1", term="202420"),
        make_record("C 1", term="202420"),
    ])
    assert CatalogLoader(path).available_terms() == ["202420", "202510"]


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(CatalogLoadError, match="not found"):
        CatalogLoader(tmp_path / "missing.json").load_catalog("202420")


def test_invalid_json_is_fatal(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="not valid JSON"):
        CatalogLoader(path).load_catalog("202420")


def test_missing_results_array_is_fatal(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"courses": []}), encoding="utf-8")
    with pytest.raises(CatalogLoadError, match="results"):
        CatalogLoader(path).load_catalog("202420")


def test_parser_accepts_json_encoded_prereq_groups(make_record):
    record = make_record("CSCI 0320")
    record["prereqGroups"] = '[["CSCI 0150"], []]'
    course = CourseRecordParser().parse(record)
    assert course.prereq_groups == (frozenset({"CSCI 0150"}),)


def test_parser_reports_every_missing_field():
    with pytest.raises(CourseRecordError) as excinfo:
        CourseRecordParser().parse({"code": "CSCI 0320", "title": "x"})
    assert excinfo.value.missing_fields == ("meets", "meetingTimes", "writ", "prereqGroups", "srcdb")


def test_parser_tolerates_bad_meeting_times(make_record):
    record = make_record("CSCI 0320")
    record["meetingTimes"] = "{bad json}"
    course = CourseRecordParser().parse(record)
    assert course.meeting_times == ()


def test_non_utf8_catalog_is_fatal(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"results": [{"code": "\xff\xfe"}]}')
    with pytest.raises(CatalogLoadError, match="not valid UTF-8"):
        CatalogLoader(path).load_catalog("202420")


def test_record_with_non_string_meets_is_skipped(write_catalog, make_record):
    broken = make_record("CLPS 0010")
    broken["meets"] = 5
    path = write_catalog([broken, make_record("CSCI 0320")])

    catalog = CatalogLoader(path).load_catalog("202420")

    assert catalog.codes == ["CSCI 0320"]
    with pytest.raises(CatalogError, match="meets must be a string"):
        catalog.require("CLPS 0010")


def test_parser_rejects_non_string_title(make_record):
    record = make_record("CSCI 0320")
    record["title"] = ["Software", "Engineering"]
    with pytest.raises(CourseRecordError, match="title must be a string"):
        CourseRecordParser().parse(record)
