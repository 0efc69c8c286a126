"""Global pytest configuration and sample capacity matrices.

Node indices are written as letters in the diagrams: A=0, B=1, and so on.
Each fixture returns a fresh matrix, so tests may edit it freely.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def single_edge():
    # Capacity:
    #     [5]
    #  A──────►B

    return [
        [0, 5],
        [0, 0],
    ]


@pytest.fixture
def diamond4():
    # Capacity:
    #       [3]        [2]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   D
    #   │                   ▲
    #   │   [2]        [3]  │
    #   └────────►C─────────┘

    return [
        [0, 3, 2, 0],
        [0, 0, 0, 2],
        [0, 0, 0, 3],
        [0, 0, 0, 0],
    ]


@pytest.fixture
def empty3():
    return [
        [0, 0, 0],
        [0, 0, 0],
        [0, 0, 0],
    ]


@pytest.fixture
def disconnected3():
    # Capacity:
    #     [4]
    #  A──────►B        C

    return [
        [0, 4, 0],
        [0, 0, 0],
        [0, 0, 0],
    ]


@pytest.fixture
def clrs6():
    # Textbook network, max flow 23 from A to F.
    #
    #   A->B [16]   A->C [13]   B->D [12]
    #   C->B [4]    C->E [14]   D->C [9]
    #   D->F [20]   E->D [7]    E->F [4]

    return [
        [0, 16, 13, 0, 0, 0],
        [0, 0, 0, 12, 0, 0],
        [0, 4, 0, 0, 14, 0],
        [0, 0, 9, 0, 0, 20],
        [0, 0, 0, 7, 0, 4],
        [0, 0, 0, 0, 0, 0],
    ]


@pytest.fixture
def cancel8():
    # All capacities are 1. The unique shortest path A-B-C-D is found first;
    # the second path A-E-F-C-B-G-H-D must cancel the flow on B->C.
    #
    #   A->B->C->D
    #   A->E->F->C
    #   B->G->H->D

    n = 8
    m = [[0] * n for _ in range(n)]
    for u, v in [(0, 1), (1, 2), (2, 3), (0, 4), (4, 5), (5, 2), (1, 6), (6, 7), (7, 3)]:
        m[u][v] = 1
    return m
