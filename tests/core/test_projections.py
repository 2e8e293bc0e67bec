"""Tests for downstream projections — order filter and tag label display."""

from uuid import uuid4

from replication_order.core.projections import (
    filter_by_order, join_tag_labels, tag_labels_by_article,
)
from replication_order.core.records import (
    ArticleTagRecord, ReconciledArticle, TagRecord,
)


def _reconciled(*items):
    return {a.id: a for a in (ReconciledArticle(uuid4(), label, order) for label, order in items)}


def test_filter_keeps_only_matching_order():
    reconciled = _reconciled(("A1", 1), ("A2", 0))
    assert [a.label for a in filter_by_order(reconciled, 0)] == ["A2"]


def test_filter_sorts_by_label():
    reconciled = _reconciled(("Zeta", 0), ("Alpha", 0), ("Mid", 3))
    assert [a.label for a in filter_by_order(reconciled, 0)] == ["Alpha", "Zeta"]


def test_filter_with_no_match_is_empty():
    assert filter_by_order(_reconciled(("A1", 1)), 0) == []


def test_tag_labels_grouped_and_sorted_per_article():
    a1, a2 = uuid4(), uuid4()
    t1 = TagRecord(uuid4(), "T1")
    t2 = TagRecord(uuid4(), "T2")
    links = [
        ArticleTagRecord(a1, t2.id, 0),
        ArticleTagRecord(a1, t1.id, 0),
        ArticleTagRecord(a2, t2.id, 3),
    ]
    labels = tag_labels_by_article(links, {t1.id: t1, t2.id: t2})
    assert labels == {a1: ["T1", "T2"], a2: ["T2"]}


def test_tag_labels_skip_unknown_tags():
    a1 = uuid4()
    labels = tag_labels_by_article([ArticleTagRecord(a1, uuid4(), 0)], {})
    assert labels == {}


def test_join_tag_labels_default_separator():
    assert join_tag_labels(["T1", "T2"]) == "T1, T2"


def test_join_tag_labels_custom_separator_and_empty():
    assert join_tag_labels(["T1", "T2"], " | ") == "T1 | T2"
    assert join_tag_labels([]) == ""
