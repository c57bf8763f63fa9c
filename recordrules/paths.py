"""Dotted path access for records and error maps."""

import re
import typing
from collections.abc import Mapping, MutableMapping, Sequence

import pydantic as _pydantic


_MISSING = object()
_INDEX_RE = re.compile(r"^(?:0|[1-9][0-9]*)$")
_BRACKET_RE = re.compile(r"\[([0-9]+)\]")


def split_path(path: typing.Any) -> list[str]:
    """Split a path into its segments.

    Args:
        path: Dotted string (``"a.b.0"``), bracket form (``"a.b[0]"``),
            an int index, or an already split list/tuple of segments

    Returns:
        List of string segments
    """
    if isinstance(path, (list, tuple)):
        return [str(segment) for segment in path]
    if isinstance(path, int) and not isinstance(path, bool):
        return [str(path)]
    text = _BRACKET_RE.sub(r".\1", str(path))
    if text.startswith(".") and text != ".":
        text = text[1:]
    return text.split(".")


def _is_index(segment: str) -> bool:
    return bool(_INDEX_RE.match(segment))


def _is_sequence(value: typing.Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _read(container: typing.Any, segment: str) -> typing.Any:
    """Read one segment from a container, returning _MISSING when absent."""
    if isinstance(container, Mapping):
        if segment in container:
            return container[segment]
        if _is_index(segment) and int(segment) in container:
            return container[int(segment)]
        return _MISSING
    if isinstance(container, _pydantic.BaseModel):
        extra = container.model_extra or {}
        if segment in type(container).model_fields:
            return getattr(container, segment)
        if segment in extra:
            return extra[segment]
        return _MISSING
    if _is_sequence(container):
        if _is_index(segment) and int(segment) < len(container):
            return container[int(segment)]
        return _MISSING
    return _MISSING


def get_path(record: typing.Any, path: typing.Any, default: typing.Any = None) -> typing.Any:
    """Get the value at a dotted path.

    Numeric segments index into sequences, and are treated as mapping keys
    everywhere else. Structurally absent paths never raise.

    Args:
        record: Mapping, Pydantic model or sequence to read from
        path: Dotted path to the value
        default: Returned when any segment along the path is missing

    Returns:
        The value at the path, or default

    Example:
        >>> get_path({"address": {"city": "Oslo"}}, "address.city")
        'Oslo'
    """
    current = record
    for segment in split_path(path):
        current = _read(current, segment)
        if current is _MISSING:
            return default
    return current


def _write(container: typing.Any, segment: str, value: typing.Any) -> None:
    if isinstance(container, list):
        if not _is_index(segment):
            raise TypeError(
                f"Cannot set non-numeric key {segment!r} on a list"
            )
        index = int(segment)
        if index >= len(container):
            container.extend([None] * (index + 1 - len(container)))
        container[index] = value
    elif isinstance(container, MutableMapping):
        container[segment] = value
    else:
        raise TypeError(f"Cannot set {segment!r} on {type(container).__name__}")


def _list_to_mapping(items: list) -> dict[str, typing.Any]:
    return {str(index): item for index, item in enumerate(items) if item is not None}


def _child_for_write(container: typing.Any, segment: str) -> typing.Any:
    if isinstance(container, list):
        if _is_index(segment) and int(segment) < len(container):
            return container[int(segment)]
        return None
    return container.get(segment)


def set_path(target: typing.Any, path: typing.Any, value: typing.Any) -> typing.Any:
    """Set the value at a dotted path, creating containers along the way.

    A missing level becomes a list when the following segment is numeric and a
    dict otherwise. Lists are padded with None up to the written index. A
    scalar sitting where a container is needed is replaced, and a list that
    has to take a named key becomes a dict keyed by index.

    Args:
        target: Mutable mapping (or list) to write into
        path: Dotted path to write at
        value: Value to store

    Returns:
        The mutated target

    Raises:
        TypeError: If target itself is a list and the first segment is named
    """
    segments = split_path(path)
    current = target
    for segment, following in zip(segments, segments[1:]):
        child = _child_for_write(current, segment)
        if isinstance(child, list) and not _is_index(following):
            child = _list_to_mapping(child)
            _write(current, segment, child)
        elif not isinstance(child, (MutableMapping, list)):
            child = [] if _is_index(following) else {}
            _write(current, segment, child)
        current = child
    _write(current, segments[-1], value)
    return target


def merge_errors(target: typing.Any, path: typing.Any, value: typing.Any) -> typing.Any:
    """Write an error value at a path, merging nested maps recursively.

    Nested mapping keys are treated as paths themselves, so ``{"a.b": "x"}``
    and ``{"a": {"b": "x"}}`` land in the same place. Strings and other
    leaves overwrite whatever is already there. None entries mean "no error"
    and are skipped, so are mappings holding no messages at all. A list of
    errors already at the path is turned into a dict keyed by index before a
    mapping is merged into it.

    Args:
        target: Error map to write into
        path: Dotted path to write at
        value: Message string or nested mapping of messages

    Returns:
        The mutated target
    """
    if value is None:
        return target
    if not isinstance(value, Mapping):
        return set_path(target, path, value)
    if not flatten_errors(value):
        return target
    existing = get_path(target, path, _MISSING)
    if isinstance(existing, list):
        existing = _list_to_mapping(existing)
        set_path(target, path, existing)
    elif not isinstance(existing, MutableMapping):
        existing = {}
        set_path(target, path, existing)
    for key, item in value.items():
        merge_errors(existing, key, item)
    return target


def flatten_errors(errors: typing.Any, prefix: str = "") -> dict[str, typing.Any]:
    """Flatten a nested error map into ``{dotted_path: message}``.

    None entries (list padding, valid fields) are omitted.

    Example:
        >>> flatten_errors({"address": {"city": "Required"}})
        {'address.city': 'Required'}
    """
    flat: dict[str, typing.Any] = {}
    if isinstance(errors, Mapping):
        items: typing.Iterable[tuple[typing.Any, typing.Any]] = errors.items()
    elif _is_sequence(errors):
        items = enumerate(errors)
    else:
        if errors is not None:
            flat[prefix] = errors
        return flat
    for key, item in items:
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(item, Mapping) or _is_sequence(item):
            flat.update(flatten_errors(item, path))
        elif item is not None:
            flat[path] = item
    return flat
