import pytest

from genlayout.graph import (
    DuplicateMemberError,
    build_edges,
    find_parent_cycle,
    index_members,
    pick_oldest,
    select_roots,
    to_networkx,
)
from genlayout.schemas import Member


def _edges(members):
    return build_edges(members, index_members(members))


def test_build_edges_from_children_and_parent_ids():
    members = [
        Member("g", "Gus Hart", "Grandfather", children_ids=["p"]),
        Member("p", "Pam Hart", "Mother", father_id="g", spouse_ids=["q"]),
        Member("q", "Quinn Hart", "Father", spouse_ids=["p"]),
        Member("k", "Kit Hart", "Son", father_id="q", mother_id="p"),
    ]
    edges = _edges(members)
    # g lists p as child and p lists g as father: one edge
    assert edges.parent_edges == [("g", "p"), ("q", "k"), ("p", "k")]
    assert edges.spouse_edges == [("p", "q")]
    assert edges.dropped == []


def test_one_sided_spouse_listing_is_kept():
    members = [Member("a", "Al", "Self"), Member("b", "Bea", "Wife", spouse_ids=["a"])]
    assert _edges(members).spouse_edges == [("a", "b")]


def test_dangling_and_self_references_are_dropped():
    members = [
        Member("a", "Al", "Self", father_id="ghost", spouse_ids=["a"], children_ids=["nobody"]),
        Member("b", "Bo", "Son", mother_id="b"),
    ]
    edges = _edges(members)
    assert edges.parent_edges == []
    assert edges.spouse_edges == []
    assert ("a", "father", "ghost") in edges.dropped
    assert ("a", "children", "nobody") in edges.dropped
    assert ("a", "spouse", "a") in edges.dropped
    assert ("b", "mother", "b") in edges.dropped


def test_index_members_rejects_duplicates():
    members = [Member("1", "A", "x"), Member("2", "B", "y"), Member("1", "C", "z")]
    with pytest.raises(DuplicateMemberError, match="1"):
        index_members(members)


def test_roots_are_linked_members_without_parents():
    members = [
        Member("loner", "Lone Wolf", "Uncle"),
        Member("dad", "Dan Fox", "Father", children_ids=["kid"]),
        Member("kid", "Kim Fox", "Son"),
        Member("mum", "Meg Fox", "Mother", spouse_ids=["dad"]),
    ]
    assert select_roots(members, _edges(members)) == ["dad", "mum"]


def test_fallback_root_is_oldest_member():
    members = [
        Member("a", "A", "x", date_of_birth="1970"),
        Member("b", "B", "y", date_of_birth="1950"),
        Member("c", "C", "z"),
    ]
    assert select_roots(members, _edges(members)) == ["b"]


def test_fallback_root_ties_keep_input_order():
    members = [Member("a", "A", "x"), Member("b", "B", "y")]
    assert select_roots(members, _edges(members)) == ["a"]
    assert pick_oldest([Member("x", "X", "x", date_of_birth="1900"), Member("y", "Y", "y", date_of_birth="1900")]).id == "x"
    assert pick_oldest([]) is None


def test_cyclic_parents_fall_back_to_single_root():
    members = [Member("a", "A", "x", father_id="b"), Member("b", "B", "y", father_id="a")]
    edges = _edges(members)
    assert select_roots(members, edges) == ["a"]
    cycle = find_parent_cycle(to_networkx(members, edges))
    assert {node for edge in cycle for node in edge} == {"a", "b"}


def test_to_networkx_projection():
    members = [
        Member("p", "Pat", "Father", date_of_birth="1960", children_ids=["c"], spouse_ids=["s"]),
        Member("s", "Sal", "Mother"),
        Member("c", "Cal", "Son"),
    ]
    graph = to_networkx(members, _edges(members))
    assert graph.number_of_nodes() == 3
    assert graph.nodes["p"]["birth_year"] == 1960
    relations = sorted(data["relation"] for _, _, data in graph.edges(data=True))
    assert relations == ["child", "spouse"]
    assert find_parent_cycle(graph) == []
