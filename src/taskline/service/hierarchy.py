# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from taskline.model.layout import HierarchyRow
from taskline.model.task import Task, TaskId

logger = logging.getLogger(__name__)


def _find_parent_indices(tasks: list[Task]) -> list[Optional[int]]:
    """
    Resolve, by list position, the parent each task is displayed under.

    A parent reference that doesn't resolve to another task in the list, or
    that is part of a parent cycle, is dropped so the task becomes a root.
    When ids repeat, children attach to the first task carrying the id.
    """
    index_by_id: dict[TaskId, int] = {}
    for index, task in enumerate(tasks):
        index_by_id.setdefault(task["id"], index)

    parents: list[Optional[int]] = []
    for task in tasks:
        parent_id = task["parent_id"]
        if parent_id is None:
            parents.append(None)
        elif parent_id not in index_by_id:
            logger.warning(
                "Task '%s' references unknown parent '%s', showing it as a root",
                task["id"],
                parent_id,
            )
            parents.append(None)
        else:
            parents.append(index_by_id[parent_id])

    # Walk each ancestor chain once. A chain that runs back into itself
    # marks every task on the loop as a root.
    resolved: set[int] = set()
    for index in range(len(tasks)):
        chain: list[int] = []
        on_chain: set[int] = set()
        current: Optional[int] = index
        while current is not None and current not in resolved:
            if current in on_chain:
                cycle = chain[chain.index(current) :]
                logger.warning(
                    "Tasks %s form a parent cycle, showing them as roots",
                    ", ".join(f"'{tasks[i]['id']}'" for i in cycle),
                )
                for i in cycle:
                    parents[i] = None
                break
            chain.append(current)
            on_chain.add(current)
            current = parents[current]
        resolved.update(chain)

    return parents


def linearize_task_hierarchy(tasks: list[Task]) -> list[HierarchyRow]:
    """
    Order tasks depth first for indented display.

    Roots come in input order, each followed by its children (also in input
    order) at level + 1, recursively. Every task is emitted exactly once, even
    when parent references dangle or form a cycle.

    Args:
        tasks: Flat list of tasks, optionally carrying parent_id

    Returns:
        One HierarchyRow per input task
    """
    parents = _find_parent_indices(tasks)

    children: dict[int, list[int]] = {}
    roots: list[int] = []
    for index, parent in enumerate(parents):
        if parent is None:
            roots.append(index)
        else:
            children.setdefault(parent, []).append(index)

    rows: list[HierarchyRow] = []
    visited: set[int] = set()

    for root in roots:
        stack: list[tuple[int, int]] = [(root, 0)]
        while stack:
            index, level = stack.pop()
            if index in visited:
                continue
            visited.add(index)
            rows.append({"task": tasks[index], "level": level})
            for child in reversed(children.get(index, [])):
                stack.append((child, level + 1))

    return rows
