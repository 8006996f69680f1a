"""Effective scope computation for the authorization page."""

from __future__ import annotations

from collections.abc import Callable

from authlete_bridge.schemas import DynamicScope, Scope

ComputeScopes = Callable[[list[Scope] | None, list[DynamicScope] | None], list[Scope]]


def compute_scopes(
    scopes: list[Scope] | None = None,
    dynamic_scopes: list[DynamicScope] | None = None,
) -> list[Scope]:
    """Merge static and dynamic scopes.

    Without dynamic scopes ``scopes`` is returned as is (``[]`` when ``None``).
    Otherwise a new list is built; the inputs are never mutated.
    """
    if dynamic_scopes is None:
        return scopes if scopes is not None else []

    computed = list(scopes) if scopes is not None else []
    computed.extend(Scope(name=dynamic_scope.name) for dynamic_scope in dynamic_scopes)
    return computed
