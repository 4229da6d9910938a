# src/taskbook/tasks/codecs.py

"""
JSON codecs for the task value types.

Each type has an explicit encode/decode pair producing plain JSON-compatible
Python values (dict/list/str/int/None). The JSON shape is part of the on-disk
format, so keep these in sync with existing files:

    Id     <-> {"id": 3}
    State  <-> {"state": "active"} | {"state": "completed", "date": "<ISO-8601>"}
    Tag    <-> {"tag": "food"}
    Task   <-> {"state": {...}, "description": "...", "notes": null, "tags": [...]}
    Tasks  <-> [{"id": 3, "task": {...}}, ...]

Extra fields are ignored; missing or mistyped fields raise DecodeError.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from .ids import Id
from .task_models import ACTIVE, Completed, State, StateKind, Tag, Tags, Task, Tasks

Json = Any

# ZonedDateTime.toString() appends the region id, e.g. "...+01:00[Europe/Paris]".
_ZONE_SUFFIX = re.compile(r"\[[^\]]*\]$")


class DecodeError(ValueError):
    """Persisted JSON could not be decoded into task data."""


def _field(obj: Json, name: str, expected: type) -> Any:
    if not isinstance(obj, dict):
        raise DecodeError(f"expected a JSON object with field {name!r}, got {type(obj).__name__}")
    if name not in obj:
        raise DecodeError(f"missing required field {name!r}")
    value = obj[name]
    # bool is an int subclass
    if not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool):
        raise DecodeError(f"field {name!r} has wrong type {type(value).__name__}")
    return value


def _list(obj: Json, what: str) -> list[Any]:
    if not isinstance(obj, list):
        raise DecodeError(f"expected a JSON array of {what}, got {type(obj).__name__}")
    return obj


# ---- Id ----

def encode_id(task_id: Id) -> Json:
    return {"id": task_id.value}


def decode_id(obj: Json) -> Id:
    return _make_id(_field(obj, "id", int))


def _make_id(raw: int) -> Id:
    try:
        return Id(raw)
    except ValueError as exc:
        raise DecodeError(str(exc)) from exc


# ---- State ----

def encode_state(state: State) -> Json:
    if isinstance(state, Completed):
        return {"state": state.kind.value, "date": state.date.isoformat()}
    return {"state": state.kind.value}


def decode_state(obj: Json) -> State:
    raw = _field(obj, "state", str)
    if raw == StateKind.ACTIVE:
        return ACTIVE
    if raw == StateKind.COMPLETED:
        return Completed(_parse_date(_field(obj, "date", str)))
    raise DecodeError(
        f"The task state {raw!r} is not one of the expected states 'active' or 'completed'"
    )


def _parse_date(raw: str) -> datetime:
    try:
        date = datetime.fromisoformat(_ZONE_SUFFIX.sub("", raw))
    except ValueError as exc:
        raise DecodeError(f"invalid completion date {raw!r}") from exc
    return date


# ---- Tag / Tags ----

def encode_tag(tag: Tag) -> Json:
    return {"tag": tag.tag}


def decode_tag(obj: Json) -> Tag:
    raw = _field(obj, "tag", str)
    try:
        return Tag(raw)
    except ValueError as exc:
        raise DecodeError(str(exc)) from exc


def encode_tags(tags: Tags) -> Json:
    return [encode_tag(t) for t in tags]


def decode_tags(obj: Json) -> Tags:
    return Tags(tuple(decode_tag(t) for t in _list(obj, "tags")))


# ---- Task ----

def encode_task(task: Task) -> Json:
    return {
        "state": encode_state(task.state),
        "description": task.description,
        "notes": task.notes,
        "tags": [encode_tag(t) for t in task.tags],
    }


def decode_task(obj: Json) -> Task:
    state = decode_state(_field(obj, "state", dict))
    description = _field(obj, "description", str)
    # notes may be absent or null
    notes = obj.get("notes")
    if notes is not None and not isinstance(notes, str):
        raise DecodeError(f"field 'notes' has wrong type {type(notes).__name__}")
    tags = tuple(decode_tag(t) for t in _list(_field(obj, "tags", list), "tags"))
    return Task(state=state, description=description, notes=notes, tags=tags)


# ---- Tasks ----

def encode_tasks(tasks: Tasks) -> Json:
    return [{"id": task_id.value, "task": encode_task(task)} for task_id, task in tasks]


def decode_tasks(obj: Json) -> Tasks:
    entries: dict[Id, Task] = {}
    for item in _list(obj, "tasks"):
        task_id = _make_id(_field(item, "id", int))
        entries[task_id] = decode_task(_field(item, "task", dict))
    return Tasks.from_mapping(entries)
