import pytest

from ekflow.algorithms.flow_matrix import derive_flow_matrix
from ekflow.algorithms.max_flow import MaxFlowEngine
from ekflow.errors import MalformedMatrixError


def test_derive_single_edge(single_edge):
    residual = [[0, 0], [5, 0]]
    assert derive_flow_matrix(single_edge, residual) == [[0, 5], [0, 0]]


def test_reverse_cells_clamped_to_zero(diamond4):
    engine = MaxFlowEngine()
    engine.compute_max_flow(diamond4, 0, 3)
    flow = derive_flow_matrix(diamond4, engine.get_residual_graph())
    # Reverse residual cells exceed their zero capacity; no negative flow
    assert all(value >= 0 for row in flow for value in row)
    assert flow[1][0] == 0
    assert flow[3][1] == 0


def test_derive_is_idempotent_and_pure(clrs6):
    engine = MaxFlowEngine()
    engine.compute_max_flow(clrs6, 0, 5)
    residual = engine.get_residual_graph()
    capacity_before = [row[:] for row in clrs6]
    residual_before = [row[:] for row in residual]

    first = derive_flow_matrix(clrs6, residual)
    second = derive_flow_matrix(clrs6, residual)
    assert first == second
    assert clrs6 == capacity_before
    assert residual == residual_before


def test_flow_never_exceeds_capacity(clrs6):
    engine = MaxFlowEngine()
    engine.compute_max_flow(clrs6, 0, 5)
    flow = derive_flow_matrix(clrs6, engine.get_residual_graph())
    for u, row in enumerate(flow):
        for v, value in enumerate(row):
            assert value <= clrs6[u][v]


def test_untouched_graph_has_no_flow(disconnected3):
    assert derive_flow_matrix(disconnected3, disconnected3) == [[0] * 3 for _ in range(3)]


def test_size_mismatch(single_edge, empty3):
    with pytest.raises(MalformedMatrixError):
        derive_flow_matrix(single_edge, empty3)


def test_malformed_residual(single_edge):
    with pytest.raises(MalformedMatrixError):
        derive_flow_matrix(single_edge, [[0, 0], [0]])
