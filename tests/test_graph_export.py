from nfa.graph_export import to_graph
from nfa.nfa import EPSILON
from regex_parser.rd_parser import build_nfa


def test_nodes_carry_role_flags():
    graph = to_graph(build_nfa("a*"))

    assert [n.label for n in graph.nodes] == ["q0", "q1", "q2", "q3"]
    initial = [n.state_id for n in graph.nodes if n.is_initial]
    accepting = [n.state_id for n in graph.nodes if n.is_accepting]
    assert initial == [2]
    assert accepting == [3]


def test_one_edge_per_triple():
    nfa = build_nfa("a*")
    graph = to_graph(nfa)

    assert len(graph.edges) == len(list(nfa.edges()))
    ids = {e.edge_id for e in graph.edges}
    assert "e0-a-1" in ids
    assert f"e2-{EPSILON}-0" in ids
    assert f"e1-{EPSILON}-3" in ids


def test_epsilon_edges_are_marked():
    graph = to_graph(build_nfa("ab"))
    by_id = {e.edge_id: e for e in graph.edges}

    assert not by_id["e0-a-1"].is_epsilon
    assert not by_id["e2-b-3"].is_epsilon
    assert by_id[f"e1-{EPSILON}-2"].is_epsilon
    assert by_id[f"e1-{EPSILON}-2"].source == 1
    assert by_id[f"e1-{EPSILON}-2"].target == 2


def test_empty_regex_graph():
    graph = to_graph(build_nfa(""))
    assert len(graph.nodes) == 1
    assert graph.nodes[0].is_initial and graph.nodes[0].is_accepting
    assert graph.edges == []


def test_str_marks_roles():
    text = str(to_graph(build_nfa("a")))
    assert "q0[START]" in text
    assert "q1[ACCEPT]" in text
    assert "e0-a-1" in text
