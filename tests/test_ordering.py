from genlayout.graph import build_edges, index_members
from genlayout.ordering import MISSING_YEAR, clustering_token, order_rows
from genlayout.schemas import Member


def _family():
    return [
        Member("f1", "John Brown", "Father", date_of_birth="1950"),
        Member("f2", "Mary Adams", "Mother", date_of_birth="1952"),
        Member("k1", "Zed Brown", "Son", date_of_birth="1980", father_id="f1"),
        Member("k2", "Al Brown", "Son", date_of_birth="1980", father_id="f1"),
        Member("k3", "Bea Adams", "Daughter", date_of_birth="1975", mother_id="f2"),
        Member("k4", "Cal Nobody", "Friend"),
        Member("k5", "Dan Brown", "Son", father_id="f1"),
        Member("k6", "Eve Clark", "Daughter", date_of_birth="1990", mother_id="f2"),
    ]


def test_rows_cluster_by_parent_surname():
    members = _family()
    edges = build_edges(members, index_members(members))
    generations = {"f1": 0, "f2": 0, "k1": 1, "k2": 1, "k3": 1, "k4": 1, "k5": 1, "k6": 1}
    rows = order_rows(members, generations, edges, 2)
    assert rows[0] == ["f2", "f1"]
    # adams cluster (Eve follows her mother's name), brown cluster by year then
    # name with the undated member last, then Cal's own surname
    assert rows[1] == ["k3", "k6", "k2", "k1", "k5", "k4"]


def test_clustering_token_uses_first_parent():
    members = [
        Member("dad", "Carl Otto Berg", "Father"),
        Member("mum", "Lena Falk", "Mother"),
        Member("kid", "Mia Falk-Berg", "Daughter", father_id="dad", mother_id="mum"),
        Member("solo", "Ola  Nordmann ", "Uncle"),
    ]
    index = index_members(members)
    edges = build_edges(members, index)
    first_parent = {}
    for parent, child in edges.parent_edges:
        first_parent.setdefault(child, parent)
    assert clustering_token(index["kid"], first_parent, index) == "berg"
    assert clustering_token(index["solo"], first_parent, index) == "nordmann"


def test_empty_rows_are_kept():
    members = [Member("a", "A One", "x"), Member("b", "B Two", "y")]
    edges = build_edges(members, index_members(members))
    assert order_rows(members, {"a": 0, "b": 2}, edges, 3) == [["a"], [], ["b"]]


def test_missing_year_sorts_as_far_future():
    assert MISSING_YEAR == 9999
    members = [
        Member("late", "Ann Roe", "x", date_of_birth="2020"),
        Member("none", "Abe Roe", "y"),
    ]
    edges = build_edges(members, index_members(members))
    assert order_rows(members, {"late": 0, "none": 0}, edges, 1) == [["late", "none"]]
