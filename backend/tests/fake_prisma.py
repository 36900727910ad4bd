"""
In-memory stand-in for the generated Prisma client.

Implements the subset of the Prisma delegate API the repositories use:
create / find_unique / find_first / find_many / update / delete, with
nested ``create`` / ``update`` / ``upsert`` writes, top-level ``include``
and the ``equals``/``contains``/``gte``/``lte``/``is`` filters.
Unique and foreign key constraints are enforced per delegate.
"""

import copy
import itertools
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Iterator, Optional


class FakeUniqueViolation(Exception):
    pass


class FakeStoreFailure(Exception):
    pass


class FakeForeignKeyViolation(Exception):
    pass


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _to_namespace(value: Any) -> Any:
    if isinstance(value, dict):
        return SimpleNamespace(**{key: _to_namespace(item) for key, item in value.items()})
    if isinstance(value, list):
        return [_to_namespace(item) for item in value]
    return value


def _build(data: dict[str, Any], ids: Iterator[int]) -> dict[str, Any]:
    """Turn a Prisma create input into a stored row, resolving nested creates."""
    row: dict[str, Any] = {"id": next(ids)}
    for key, value in data.items():
        if isinstance(value, dict) and "create" in value:
            nested = value["create"]
            row[key] = (
                [_build(item, ids) for item in nested]
                if isinstance(nested, list)
                else _build(nested, ids)
            )
        else:
            row[key] = value
    return row


def _apply_update(row: dict[str, Any], data: dict[str, Any], ids: Iterator[int]) -> None:
    for key, value in data.items():
        if isinstance(value, dict) and "update" in value:
            _apply_update(row[key], value["update"], ids)
        elif isinstance(value, dict) and "upsert" in value:
            if row.get(key):
                _apply_update(row[key], value["upsert"]["update"], ids)
            else:
                row[key] = _build(value["upsert"]["create"], ids)
        elif isinstance(value, dict) and "create" in value:
            row[key] = _build(value["create"], ids)
        else:
            row[key] = value


def _scalars(data: Any) -> Iterator[tuple[str, Any]]:
    """Yield every scalar field of a write input, nested writes included."""
    if isinstance(data, list):
        for item in data:
            yield from _scalars(item)
    elif isinstance(data, dict):
        for key, value in data.items():
            if isinstance(value, (dict, list)):
                yield from _scalars(value)
            else:
                yield key, value


def _matches(row: Optional[dict[str, Any]], where: dict[str, Any]) -> bool:
    if row is None:
        return False
    for key, condition in where.items():
        value = row.get(key)
        if isinstance(condition, dict):
            for op, operand in condition.items():
                if op == "is":
                    if not _matches(value, operand):
                        return False
                elif op == "equals" and value != operand:
                    return False
                elif op == "contains" and (value is None or operand not in value):
                    return False
                elif op == "in" and value not in operand:
                    return False
                elif op == "gte" and (value is None or value < operand):
                    return False
                elif op == "lte" and (value is None or value > operand):
                    return False
        elif value != condition:
            return False
    return True


class FakeDelegate:
    def __init__(
        self,
        defaults: Optional[dict[str, Any]] = None,
        relations: tuple[str, ...] = (),
        unique: tuple[str, ...] = (),
    ):
        self.rows: dict[int, dict[str, Any]] = {}
        self.defaults = defaults or {}
        self.relations = relations
        self.unique = unique
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.fail_on: set[str] = set()
        self.references: dict[str, FakeDelegate] = {}
        self._ids = itertools.count(1)

    def _check(self, action: str, **kwargs: Any) -> None:
        self.calls.append((action, kwargs))
        if action in self.fail_on:
            raise FakeStoreFailure(f"{action} failed")

    def _check_references(self, data: dict[str, Any]) -> None:
        for field, value in _scalars(data):
            target = self.references.get(field)
            if target is not None and value is not None and value not in target.rows:
                raise FakeForeignKeyViolation(f"Foreign key constraint failed on the field: `{field}`")

    def _record(self, row: dict[str, Any], include: Optional[dict[str, Any]]) -> SimpleNamespace:
        row = copy.deepcopy(row)
        for relation in self.relations:
            if not include or relation not in include:
                row[relation] = None
            elif relation not in row:
                row[relation] = [] if relation.endswith("s") else None
        return _to_namespace(row)

    def _find(self, where: dict[str, Any]) -> list[dict[str, Any]]:
        return [row for _, row in sorted(self.rows.items()) if _matches(row, where)]

    async def create(self, data: dict[str, Any], include: Optional[dict[str, Any]] = None):
        self._check("create", data=data)
        self._check_references(data)
        for field in self.unique:
            if field in data and self._find({field: data[field]}):
                raise FakeUniqueViolation(f"Unique constraint failed on the fields: ({field})")
        row = {**self.defaults, **_build(data, self._ids), "created_at": _now(), "updated_at": _now()}
        self.rows[row["id"]] = row
        return self._record(row, include)

    async def find_unique(self, where: dict[str, Any], include: Optional[dict[str, Any]] = None):
        self._check("find_unique", where=where, include=include)
        rows = self._find(where)
        return self._record(rows[0], include) if rows else None

    async def find_first(
        self, where: Optional[dict[str, Any]] = None, include: Optional[dict[str, Any]] = None
    ):
        self._check("find_first", where=where, include=include)
        rows = self._find(where or {})
        return self._record(rows[0], include) if rows else None

    async def find_many(
        self,
        where: Optional[dict[str, Any]] = None,
        include: Optional[dict[str, Any]] = None,
        order: Any = None,
    ):
        self._check("find_many", where=where, include=include, order=order)
        rows = self._find(where or {})
        if order:
            (field, direction), = order.items()
            rows.sort(key=lambda row: row[field], reverse=direction == "desc")
        return [self._record(row, include) for row in rows]

    async def update(
        self, data: dict[str, Any], where: dict[str, Any], include: Optional[dict[str, Any]] = None
    ):
        self._check("update", data=data, where=where)
        self._check_references(data)
        rows = self._find(where)
        if not rows:
            return None
        row = rows[0]
        _apply_update(row, data, self._ids)
        row["updated_at"] = _now()
        return self._record(row, include)

    async def delete(self, where: dict[str, Any], include: Optional[dict[str, Any]] = None):
        self._check("delete", where=where)
        rows = self._find(where)
        if not rows:
            return None
        return self._record(self.rows.pop(rows[0]["id"]), include)


class FakePrisma:
    def __init__(self):
        self.profile = FakeDelegate(defaults={"address": None}, unique=("name",))
        self.market = FakeDelegate(defaults={"is_default": False})
        self.proposal = FakeDelegate(
            defaults={
                "description": "",
                "time_start": None,
                "post_time": None,
                "expired_at": None,
            },
            relations=("options",),
            unique=("hash",),
        )
        self.listingitemtemplate = FakeDelegate(
            relations=("item_information", "payment_information"),
        )
        self.itemcategory = FakeDelegate(
            defaults={"key": None, "description": "", "parent_id": None},
            unique=("key",),
        )

        self.market.references = {"profile_id": self.profile}
        self.listingitemtemplate.references = {
            "profile_id": self.profile,
            "item_category_id": self.itemcategory,
        }
        self.itemcategory.references = {"parent_id": self.itemcategory}
