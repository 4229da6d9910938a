# tests/test_codecs.py

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from taskbook.tasks.codecs import (
    DecodeError,
    decode_id,
    decode_state,
    decode_tags,
    decode_task,
    decode_tasks,
    encode_id,
    encode_state,
    encode_task,
    encode_tasks,
)
from taskbook.tasks.ids import Id
from taskbook.tasks.task_models import ACTIVE, Completed, Tag, Tags, Task, Tasks

WHEN = datetime(2024, 3, 9, 18, 30, 5, tzinfo=timezone(timedelta(hours=1)))


def test_wire_shapes() -> None:
    assert encode_id(Id(4)) == {"id": 4}
    assert encode_state(ACTIVE) == {"state": "active"}
    assert encode_state(Completed(WHEN)) == {
        "state": "completed",
        "date": "2024-03-09T18:30:05+01:00",
    }

    task = Task(ACTIVE, "Make a sandwich", None, (Tag("food"),))
    assert encode_tasks(Tasks(((Id(2), task),))) == [
        {
            "id": 2,
            "task": {
                "state": {"state": "active"},
                "description": "Make a sandwich",
                "notes": None,
                "tags": [{"tag": "food"}],
            },
        }
    ]


@pytest.mark.parametrize(
    "task",
    [
        Task(ACTIVE, "plain"),
        Task(ACTIVE, "with notes", "some notes", (Tag("a"),)),
        Task(Completed(WHEN), "done", None, (Tag("a"), Tag("b"), Tag("a"))),
        Task(Completed(WHEN), "done with notes", "", ()),
    ],
)
def test_task_survives_json_text(task: Task) -> None:
    text = json.dumps(encode_task(task), indent=2)
    assert decode_task(json.loads(text)) == task


def test_tasks_keep_order() -> None:
    tasks = Tasks(((Id(5), Task(ACTIVE, "x")), (Id(1), Task(ACTIVE, "y"))))
    assert decode_tasks(encode_tasks(tasks)).ids() == [Id(5), Id(1)]


def test_unknown_state_is_a_decode_error() -> None:
    with pytest.raises(DecodeError, match="'archived'"):
        decode_state({"state": "archived"})


def test_completed_without_date_fails() -> None:
    with pytest.raises(DecodeError, match="date"):
        decode_state({"state": "completed"})


def test_jvm_zoned_date_is_accepted() -> None:
    state = decode_state({"state": "completed", "date": "2024-03-09T18:30:05+01:00[Europe/Paris]"})
    assert state == Completed(WHEN)


def test_missing_notes_decode_as_none_and_extra_fields_are_ignored() -> None:
    task = decode_task(
        {"state": {"state": "active"}, "description": "d", "tags": [], "priority": 3}
    )
    assert task == Task(ACTIVE, "d", None, ())


@pytest.mark.parametrize(
    "raw",
    [
        {"description": "d", "tags": []},
        {"state": {"state": "active"}, "tags": []},
        {"state": {"state": "active"}, "description": "d"},
        {"state": {"state": "active"}, "description": 5, "tags": []},
        {"state": {"state": "active"}, "description": "d", "notes": 1, "tags": []},
        {"state": {"state": "active"}, "description": "d", "tags": [{"tag": ""}]},
        [],
    ],
)
def test_incomplete_task_fails(raw) -> None:
    with pytest.raises(DecodeError):
        decode_task(raw)


def test_id_decode_rejects_bad_values() -> None:
    assert decode_id({"id": 3}) == Id(3)
    for bad in ({"id": -1}, {"id": "3"}, {"id": True}, {}):
        with pytest.raises(DecodeError):
            decode_id(bad)


def test_tags_decode() -> None:
    assert decode_tags([{"tag": "a"}, {"tag": "b"}]) == Tags((Tag("a"), Tag("b")))
    with pytest.raises(DecodeError):
        decode_tags({"tag": "a"})


def test_naive_completion_date_is_taken_as_local_time() -> None:
    naive = datetime(2024, 1, 1, 10, 0)
    task = Task(ACTIVE, "a").complete(naive)
    assert task.state == Completed(naive.astimezone())
    assert decode_task(json.loads(json.dumps(encode_task(task)))) == task
