from datetime import date

import pytest

from genlayout.schemas import LayoutEdge, LayoutResult, Member, MemberRecordError


def test_from_record_reads_storage_fields():
    record = {
        "_id": 7,
        "name": "  Bob Lee ",
        "relationship": "Father",
        "dateOfBirth": "1965-03-02T00:00:00.000Z",
        "motherId": 1,
        "fatherId": None,
        "spouseIds": [9, ""],
        "childrenIds": [11],
        "gender": "male",
    }
    member = Member.from_record(record)
    assert member.id == "7"
    assert member.name == "Bob Lee"
    assert member.mother_id == "1"
    assert member.father_id is None
    assert member.spouse_ids == ["9"]
    assert member.children_ids == ["11"]
    assert member.birth_year == 1965


def test_from_record_accepts_snake_case():
    member = Member.from_record(
        {"id": "a", "name": "Ann", "relationship": "Self", "date_of_birth": date(1940, 5, 1), "father_id": "b"}
    )
    assert member.father_id == "b"
    assert member.birth_year == 1940


def test_from_record_requires_name_and_relationship():
    with pytest.raises(MemberRecordError):
        Member.from_record({"id": 1, "name": " ", "relationship": "Son"})
    with pytest.raises(MemberRecordError):
        Member.from_record({"id": 1, "name": "Cid"})
    with pytest.raises(MemberRecordError):
        Member.from_record({"name": "Cid", "relationship": "Son"})


def test_birth_year_parsing():
    assert Member("1", "A", "x", date_of_birth="1940").birth_year == 1940
    assert Member("1", "A", "x", date_of_birth=1972).birth_year == 1972
    assert Member("1", "A", "x", date_of_birth="born 12/04/1988").birth_year == 1988
    assert Member("1", "A", "x", date_of_birth="unknown").birth_year is None
    assert Member("1", "A", "x").birth_year is None
    assert Member("1", "A", "x", date_of_death="2001-01-01").death_year == 2001


def test_layout_result_helpers():
    result = LayoutResult(
        rows=[["1"], ["2", "3"]],
        edges=[LayoutEdge("1", "2", "pc"), LayoutEdge("2", "3", "sp")],
        roots=["1"],
        generations={"1": 0, "2": 1, "3": 1},
    )
    assert result.row_of("3") == 1
    assert [edge.target for edge in result.parent_child_edges] == ["2"]
    assert [edge.target for edge in result.spouse_edges] == ["3"]
    assert result.to_dict()["edges"][1] == {"from": "2", "to": "3", "type": "sp", "inferred": False}
