"""Project caller input onto the nested request bodies the API expects.

Each resource declares two class-level constants:

``parameter_mappings``
    flat input key -> dotted output path, e.g. ``{"trackOpens":
    "options.open_tracking"}``. An empty table means every input key is used
    as its own (single segment) output path.

``structure``
    the default body every request starts from.

`build_request_model` copies the structure and writes each input value at
its mapped path. Keys missing from a non-empty table are dropped.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from types import MappingProxyType
from typing import Any

PATH_SEPARATOR = "."


def freeze(value: Any) -> Any:
    """Return a read-only deep copy of ``value`` suitable for module constants."""

    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Return an independent mutable deep copy of ``value``.

    Mappings (including mapping proxies) become dicts and tuples become lists.
    """

    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


def set_mapped_value(model: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Write ``value`` into ``model`` at the dotted ``path``.

    Missing intermediate segments are created as empty dicts; an intermediate
    segment holding a non-mapping value is replaced by an empty dict.
    """

    _assign(model, path.split(PATH_SEPARATOR), value)


def resolve_path(key: str, mapping_table: Mapping[str, str]) -> list[str] | None:
    """Return the output path segments for ``key`` or ``None`` to skip it."""

    if not mapping_table:
        return [key]
    if key in mapping_table:
        return mapping_table[key].split(PATH_SEPARATOR)
    return None


def build_request_model(
    request_config: Mapping[str, Any],
    template: Mapping[str, Any],
    mapping_table: Mapping[str, str],
) -> dict[str, Any]:
    """Build a request body from ``request_config`` on a copy of ``template``.

    Input keys are applied in iteration order, so the last key to target a
    given path wins. ``template`` is never modified.
    """

    for name, argument in (
        ("request_config", request_config),
        ("template", template),
        ("mapping_table", mapping_table),
    ):
        if not isinstance(argument, Mapping):
            raise TypeError(f"{name} must be a mapping, got {type(argument).__name__}")

    model: dict[str, Any] = thaw(template)
    for key, value in request_config.items():
        segments = resolve_path(key, mapping_table)
        if segments is None:
            continue
        # Copy so later deeper paths never write into the caller's objects.
        _assign(model, segments, thaw(value))
    return model


def _assign(model: MutableMapping[str, Any], segments: list[str], value: Any) -> None:
    target = model
    for segment in segments[:-1]:
        child = target.get(segment)
        if not isinstance(child, MutableMapping):
            child = {}
            target[segment] = child
        target = child
    target[segments[-1]] = value


__all__ = [
    "build_request_model",
    "freeze",
    "resolve_path",
    "set_mapped_value",
    "thaw",
]
