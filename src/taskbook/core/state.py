# src/taskbook/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskModel


@dataclass
class AppState:
    # Settings live on the state so command handlers can reach them.
    settings: object

    model: TaskModel
    backend: str
