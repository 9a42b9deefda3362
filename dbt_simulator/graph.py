"""Dependency graph and deterministic build order."""

from __future__ import annotations

import heapq
from collections.abc import Sequence

from dbt_simulator.domain import Model


def build_dependency_map(models: Sequence[Model]) -> dict[str, list[str]]:
    """Map each model to the in-set models it references (first-seen order).

    References to models outside ``models`` are dropped.
    """
    known = {m.name for m in models}
    return {m.name: [r for r in m.unique_refs if r in known] for m in models}


def build_downstream_map(models: Sequence[Model]) -> dict[str, list[str]]:
    """Map each model to the in-set models that reference it."""
    downstream: dict[str, list[str]] = {m.name: [] for m in models}
    for name, upstream in build_dependency_map(models).items():
        for ref in upstream:
            downstream[ref].append(name)
    return downstream


def _kahn_order(models: Sequence[Model]) -> list[Model]:
    """Kahn's algorithm, smallest ready name first. May be partial."""
    by_name = {m.name: m for m in models}
    downstream = build_downstream_map(models)
    in_degree = {name: len(refs) for name, refs in build_dependency_map(models).items()}

    ready = [name for name, degree in in_degree.items() if degree == 0]
    heapq.heapify(ready)

    order: list[Model] = []
    while ready:
        name = heapq.heappop(ready)
        order.append(by_name[name])
        for child in downstream[name]:
            in_degree[child] -= 1
            if in_degree[child] == 0:
                heapq.heappush(ready, child)
    return order


def topological_sort(models: Sequence[Model]) -> list[Model]:
    """
    Order models so each one comes after everything it references.

    Among ready models the lexicographically smallest name goes first, so
    equal inputs always give equal orders. When not every model can be
    placed (a cycle, a self-reference, two models with the same name) the
    whole input is returned sorted by path instead.
    """
    order = _kahn_order(models)
    if len(order) != len(models):
        return sorted(models, key=lambda m: m.path)
    return order


def unordered_models(models: Sequence[Model]) -> list[str]:
    """Names that cannot be placed in a build order (cycle members and
    everything downstream of them), sorted."""
    placed = {m.name for m in _kahn_order(models)}
    return sorted({m.name for m in models} - placed)
