"""Tests for the relationship graph projection."""
from __future__ import annotations

from ensgraph.application.graph_projection import graph_stats, project


def _rel(rel_id, source, target):
    return {"id": rel_id, "source_ens": source, "target_ens": target, "created_at": "2024-01-01T00:00:00"}


class TestProject:
    """Test node and link derivation."""

    def test_empty(self):
        assert project([]) == {"nodes": [], "links": []}

    def test_shared_source_is_one_node(self):
        """Names appearing in several edges are listed once."""
        graph = project([_rel("1", "a.eth", "b.eth"), _rel("2", "a.eth", "c.eth")])

        assert {node["id"] for node in graph["nodes"]} == {"a.eth", "b.eth", "c.eth"}
        assert len(graph["nodes"]) == 3
        assert graph["links"] == [
            {"source": "a.eth", "target": "b.eth", "id": "1"},
            {"source": "a.eth", "target": "c.eth", "id": "2"},
        ]

    def test_reverse_edges_are_distinct_links(self):
        graph = project([_rel("1", "a.eth", "b.eth"), _rel("2", "b.eth", "a.eth")])

        assert len(graph["nodes"]) == 2
        assert [link["id"] for link in graph["links"]] == ["1", "2"]

    def test_nodes_in_first_seen_order(self):
        graph = project([_rel("1", "z.eth", "m.eth"), _rel("2", "a.eth", "z.eth")])
        assert [node["id"] for node in graph["nodes"]] == ["z.eth", "m.eth", "a.eth"]

    def test_accepts_any_iterable(self):
        graph = project(_rel(str(i), f"n{i}.eth", "hub.eth") for i in range(3))
        assert len(graph["links"]) == 3
        assert len(graph["nodes"]) == 4

    def test_does_not_mutate_input(self):
        relationships = [_rel("1", "a.eth", "b.eth")]
        project(relationships)
        assert relationships == [_rel("1", "a.eth", "b.eth")]


class TestGraphStats:
    def test_counts(self):
        graph = project([_rel("1", "a.eth", "b.eth"), _rel("2", "a.eth", "c.eth")])
        assert graph_stats(graph) == {"nodes": 3, "links": 2}
