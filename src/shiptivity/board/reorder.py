"""
shiptivity.board.reorder

Pure reordering engine for the client board.

Responsibilities:
- Move a client within its lane or to another lane.
- Renumber every affected lane to a dense 1..n ordering.
- Provide lane helpers used by the service layer and tests.

Lane model:
- Each lane is an explicit ordered sequence (ascending priority, ties kept in
  input order), so "insert before position P, then renumber" is a list splice
  followed by a re-index pass.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import replace

from shiptivity.board.errors import InvalidStatus, UnknownClient
from shiptivity.board.models import Client, ClientStatus


def parse_status(value: ClientStatus | str) -> ClientStatus:
    if isinstance(value, ClientStatus):
        return value
    try:
        return ClientStatus(value)
    except ValueError as e:
        raise InvalidStatus(value) from e


def find_client(clients: Iterable[Client], client_id: int) -> Client:
    for client in clients:
        if client.id == client_id:
            return client
    raise UnknownClient(client_id)


def group_lanes(clients: Iterable[Client]) -> dict[ClientStatus, list[Client]]:
    """
    Partition clients into lanes, each ordered top to bottom.

    Every lane is present in the result, empty or not. `sorted` is stable, so members
    sharing a priority keep their relative input order.
    """

    lanes: dict[ClientStatus, list[Client]] = {status: [] for status in ClientStatus}
    for client in clients:
        lanes[client.status].append(client)
    return {status: sorted(members, key=lambda c: c.priority) for status, members in lanes.items()}


def _insert(lane: list[Client], client: Client, priority: int | None) -> list[Client]:
    # Lands before the member currently holding `priority`; no priority means last.
    if priority is None:
        index = len(lane)
    else:
        index = bisect_left([member.priority for member in lane], priority)
    return [*lane[:index], client, *lane[index:]]


def _renumber(lane: Sequence[Client]) -> list[Client]:
    return [
        client if client.priority == rank else replace(client, priority=rank)
        for rank, client in enumerate(lane, start=1)
    ]


def reorder(
    clients: Sequence[Client],
    target_id: int,
    status: ClientStatus | str | None = None,
    priority: int | None = None,
) -> list[Client]:
    """
    Move `target_id` to `status` and/or `priority` and return the corrected board.

    - Same lane: the target is placed immediately before the member that currently holds
      `priority` and the lane is renumbered 1..n.
    - Lane change: the old lane closes the gap (1..n-1, order kept); the target enters the
      new lane before the holder of `priority`, or last when no priority is given, and the
      new lane is renumbered 1..n.
    - Lanes not involved in the move are returned untouched.

    The result keeps the input's sequence order and length. `InvalidStatus` and
    `UnknownClient` are raised before anything is computed.
    """

    new_status = parse_status(status) if status is not None else None
    target = find_client(clients, target_id)
    if new_status is None:
        new_status = target.status

    if new_status == target.status and (priority is None or priority == target.priority):
        return list(clients)

    lanes = group_lanes(c for c in clients if c.id != target_id)
    lanes[new_status] = _insert(lanes[new_status], replace(target, status=new_status), priority)

    updated: dict[int, Client] = {}
    for lane_status in {target.status, new_status}:
        for client in _renumber(lanes[lane_status]):
            updated[client.id] = client

    return [updated.get(client.id, client) for client in clients]


def changed_clients(before: Iterable[Client], after: Iterable[Client]) -> list[Client]:
    """
    Clients in `after` whose lane or priority differs from `before`.

    This is the minimal batch a caller needs to persist after `reorder`.
    """

    previous = {client.id: client for client in before}
    changed: list[Client] = []
    for client in after:
        old = previous.get(client.id)
        if old is None or old.status != client.status or old.priority != client.priority:
            changed.append(client)
    return changed


def is_dense(clients: Iterable[Client]) -> bool:
    # Every lane's priorities are exactly 1..n.
    return all(
        [c.priority for c in lane] == list(range(1, len(lane) + 1))
        for lane in group_lanes(clients).values()
    )


# --- Module Notes -----------------------------------------------------------
# Insertion is computed on the lane's existing priorities, so a requested priority
# below 1 puts the client on top and one past the end of the lane appends it.
