"""In-memory stand-in for the slice of the Supabase client the services use."""

from __future__ import annotations

import copy
import itertools
from types import SimpleNamespace
from typing import Any

_ids = itertools.count(1)

USER_ID = "6f1c2d3e-0000-4000-8000-000000000001"
OTHER_USER_ID = "6f1c2d3e-0000-4000-8000-000000000002"


class FakeQuery:
    """Chainable PostgREST-style query over a list of dict rows."""

    def __init__(
        self,
        store: dict[str, list[dict[str, Any]]],
        table: str,
        clock: str,
        max_rows: int | None = None,
    ) -> None:
        self.store = store
        self.clock = clock
        self.max_rows = max_rows
        self.table = table
        self.action = "select"
        self.payload: Any = None
        self.columns = "*"
        self.count_mode: str | None = None
        self.head = False
        self.predicates: list = []
        self.ordering: list[tuple[str, bool]] = []
        self._limit: int | None = None
        self._offset = 0

    def select(self, columns: str = "*", count: str | None = None, head: bool = False):
        self.columns = columns
        self.count_mode = count
        self.head = head
        return self

    def insert(self, payload):
        self.action = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.action = "update"
        self.payload = payload
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, key, value):
        self.predicates.append(lambda row: row.get(key) == value)
        return self

    def gte(self, key, value):
        self.predicates.append(lambda row: row.get(key) is not None and str(row[key]) >= value)
        return self

    def lte(self, key, value):
        self.predicates.append(lambda row: row.get(key) is not None and str(row[key]) <= value)
        return self

    def in_(self, key, values):
        allowed = set(values)
        self.predicates.append(lambda row: row.get(key) in allowed)
        return self

    def order(self, key, desc=False):
        self.ordering.append((key, desc))
        return self

    def limit(self, value):
        self._limit = value
        return self

    def offset(self, value):
        self._offset = value
        return self

    def _matching(self) -> list[dict[str, Any]]:
        rows = self.store.setdefault(self.table, [])
        return [row for row in rows if all(check(row) for check in self.predicates)]

    def execute(self):
        rows = self.store.setdefault(self.table, [])

        if self.action == "insert":
            payloads = self.payload if isinstance(self.payload, list) else [self.payload]
            created = []
            for payload in payloads:
                row = {"id": f"{self.table}-{next(_ids)}", "created_at": self.clock}
                row.update(copy.deepcopy(payload))
                rows.append(row)
                created.append(copy.deepcopy(row))
            return SimpleNamespace(data=created, count=None)

        matched = self._matching()
        if self.action == "update":
            for row in matched:
                row.update(copy.deepcopy(self.payload))
            return SimpleNamespace(data=copy.deepcopy(matched), count=None)

        if self.action == "delete":
            self.store[self.table] = [row for row in rows if row not in matched]
            return SimpleNamespace(data=copy.deepcopy(matched), count=None)

        # Stable sorts applied last key first give multi-column ordering.
        for key, desc in reversed(self.ordering):
            matched.sort(key=lambda row, key=key: str(row.get(key)), reverse=desc)
        total = len(matched)
        matched = matched[self._offset:]
        limit = self._limit
        if self.max_rows is not None:
            limit = self.max_rows if limit is None else min(limit, self.max_rows)
        if limit is not None:
            matched = matched[:limit]
        if self.columns != "*":
            wanted = [name.strip() for name in self.columns.split(",")]
            matched = [{name: row.get(name) for name in wanted} for row in matched]
        data = None if self.head else copy.deepcopy(matched)
        return SimpleNamespace(data=data, count=total if self.count_mode else None)


class FakeAuth:
    """Resolves bearer tokens to users from a fixed mapping."""

    def __init__(self, users: dict[str, Any]) -> None:
        self.users = users

    def get_user(self, token: str):
        user = self.users.get(token)
        if user is None:
            raise RuntimeError("invalid JWT")
        return SimpleNamespace(user=user)


class FakeClient:
    """Supabase ``Client`` replacement backed by plain dicts."""

    def __init__(
        self,
        tables: dict[str, list[dict[str, Any]]] | None = None,
        users: dict[str, Any] | None = None,
    ) -> None:
        self.store: dict[str, list[dict[str, Any]]] = tables or {}
        self.auth = FakeAuth(users or {})
        # Timestamp stamped on inserted rows as `created_at`.
        self.clock = "2026-10-01T08:00:00+00:00"
        # Server-side cap on rows per response, like PostgREST `max-rows`.
        self.max_rows: int | None = None

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self.store, name, self.clock, self.max_rows)

    def rows(self, name: str) -> list[dict[str, Any]]:
        return self.store.setdefault(name, [])
