# src/taskbook/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import replace
from typing import cast

from ..core.state import AppState
from ..tasks.ids import Id
from ..tasks.task_models import ACTIVE, Completed, Tag, Task, Tasks

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- formatting ----

def format_task(task_id: Id, task: Task) -> str:
    if isinstance(task.state, Completed):
        mark = "x"
        done = f" (done {task.state.date.strftime('%Y-%m-%d %H:%M')})"
    else:
        mark = " "
        done = ""
    tags = f" [{', '.join(t.tag for t in task.tags)}]" if task.tags else ""
    line = f"{task_id.value:>4}. [{mark}] {task.description}{tags}{done}"
    if task.notes:
        line += f"\n        {task.notes}"
    return line


def format_tasks(tasks: Tasks, empty: str = "No tasks.") -> str:
    if not len(tasks):
        return empty
    return "\n".join(format_task(i, t) for i, t in tasks)


# ---- argument helpers ----

def _parse_id(raw: str) -> Id | None:
    try:
        return Id(int(raw))
    except ValueError:
        return None


def _split_description(args: list[str]) -> tuple[str, tuple[Tag, ...]]:
    """Words starting with '#' become tags, the rest is the description."""
    words: list[str] = []
    tags: list[Tag] = []
    for word in args:
        if word.startswith("#") and len(word) > 1:
            tags.append(Tag(word[1:]))
        else:
            words.append(word)
    return " ".join(words), tuple(tags)


def _not_found(task_id: Id) -> str:
    return f"No task with id {task_id}."


# ---- handlers ----

def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = state.model.tasks()
    done = sum(1 for _, t in tasks if t.is_completed)
    return (
        "Status:\n"
        f"  Backend: {state.backend}\n"
        f"  Tasks: {len(tasks)} ({done} done, {len(tasks) - done} active)\n"
        f"  Tags: {len(state.model.tags())}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list        -> all tasks
    /list <tag>  -> tasks carrying the tag
    """
    if not args:
        return format_tasks(state.model.tasks())
    tag = Tag(args[0].lstrip("#") or args[0])
    return format_tasks(state.model.tasks(tag), empty=f"No tasks tagged {tag}.")


def cmd_tags(state: AppState, args: list[str]) -> str:
    tags = state.model.tags()
    if not len(tags):
        return "No tags."
    return "Tags: " + ", ".join(t.tag for t in tags)


def cmd_add(state: AppState, args: list[str]) -> str:
    """/add <description> [#tag ...]"""
    description, tags = _split_description(args)
    if not description:
        return "Usage: /add <description> [#tag ...]"
    task_id = state.model.create(Task(ACTIVE, description, None, tags))
    return f"Created task {task_id}."


def cmd_show(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /show <id>"
    task = state.model.read(task_id)
    if task is None:
        return _not_found(task_id)
    return format_task(task_id, task)


def cmd_edit(state: AppState, args: list[str]) -> str:
    """/edit <id> <description> [#tag ...] -> replace description (and tags if given)"""
    task_id = _parse_id(args[0]) if args else None
    description, tags = _split_description(args[1:])
    if task_id is None or not description:
        return "Usage: /edit <id> <description> [#tag ...]"

    def transform(task: Task) -> Task:
        if tags:
            return replace(task, description=description, tags=tags)
        return replace(task, description=description)

    task = state.model.update(task_id, transform)
    if task is None:
        return _not_found(task_id)
    return format_task(task_id, task)


def cmd_note(state: AppState, args: list[str]) -> str:
    """/note <id> [text] -> set notes; without text, clear them"""
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /note <id> [text]"
    notes = " ".join(args[1:]) or None
    task = state.model.update(task_id, lambda t: replace(t, notes=notes))
    if task is None:
        return _not_found(task_id)
    return format_task(task_id, task)


def cmd_tag(state: AppState, args: list[str]) -> str:
    """/tag <id> <tag> [tag ...]"""
    task_id = _parse_id(args[0]) if args else None
    if task_id is None or len(args) < 2:
        return "Usage: /tag <id> <tag> [tag ...]"
    new_tags = tuple(Tag(a.lstrip("#") or a) for a in args[1:])
    task = state.model.update(task_id, lambda t: replace(t, tags=t.tags + new_tags))
    if task is None:
        return _not_found(task_id)
    return format_task(task_id, task)


def cmd_untag(state: AppState, args: list[str]) -> str:
    """/untag <id> <tag> -> drop every occurrence of the tag"""
    task_id = _parse_id(args[0]) if args else None
    if task_id is None or len(args) != 2:
        return "Usage: /untag <id> <tag>"
    tag = Tag(args[1].lstrip("#") or args[1])
    task = state.model.update(
        task_id, lambda t: replace(t, tags=tuple(x for x in t.tags if x != tag))
    )
    if task is None:
        return _not_found(task_id)
    return format_task(task_id, task)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /done <id>"
    task = state.model.complete(task_id)
    if task is None:
        return _not_found(task_id)
    return format_task(task_id, task)


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /rm <id>"
    if not state.model.delete(task_id):
        return _not_found(task_id)
    return f"Deleted task {task_id}."


def cmd_clear(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /clear       -> ask for confirmation
    /clear yes   -> delete every task and restart ids from 0
    """
    if not args or args[0].lower() not in ("yes", "y"):
        return "This deletes every task and restarts ids from 0. Confirm with /clear yes."

    if emit:
        emit("Clearing all tasks...")

    logger.debug("Clear requested backend=%s", state.backend)
    state.model.clear()
    return "All tasks deleted."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show backend and task counts.")
registry.register("list", cmd_list, help_text="List tasks: /list | /list <tag>.", aliases=["ls"])
registry.register("tags", cmd_tags, help_text="List distinct tags.")
registry.register("add", cmd_add, help_text="Create a task: /add <description> [#tag ...].")
registry.register("show", cmd_show, help_text="Show one task: /show <id>.")
registry.register("edit", cmd_edit, help_text="Change description: /edit <id> <description> [#tag ...].")
registry.register("note", cmd_note, help_text="Set or clear notes: /note <id> [text].")
registry.register("tag", cmd_tag, help_text="Add tags: /tag <id> <tag> [tag ...].")
registry.register("untag", cmd_untag, help_text="Remove a tag: /untag <id> <tag>.")
registry.register("done", cmd_done, help_text="Mark a task completed: /done <id>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["del"])
registry.register("clear", cmd_clear, help_text="Delete all tasks: /clear yes.")
