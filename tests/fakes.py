"""
In-memory stand-in for the Supabase client covering the slice of the
PostgREST query builder the service uses, plus sample course rows.
"""

import re
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError


class FakeResponse:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


def _split_top_level(expr: str) -> List[str]:
    """Split an or_() expression on commas that are not inside double quotes."""
    parts, buf, quoted, escaped = [], [], False, False
    for ch in expr:
        if escaped:
            buf.append(ch)
            escaped = False
        elif ch == "\\":
            buf.append(ch)
            escaped = True
        elif ch == '"':
            buf.append(ch)
            quoted = not quoted
        elif ch == "," and not quoted:
            parts.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
    parts.append("".join(buf))
    return parts


def _unquote(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return re.sub(r"\\(.)", r"\1", value[1:-1])
    return value


def _ilike(pattern: str, value: Optional[str]) -> bool:
    if value is None:
        return False
    regex = "".join(
        ".*" if ch == "%" else "." if ch == "_" else re.escape(ch) for ch in pattern
    )
    return re.fullmatch(regex, str(value), flags=re.IGNORECASE | re.DOTALL) is not None


class FakeQuery:
    def __init__(self, store: "FakeSupabase", table: str):
        self._store = store
        self._table = table
        self._columns: Optional[List[str]] = None
        self._count = None
        self._filters = []
        self._orders = []
        self._range = None
        self._limit = None
        self._negate = False
        self._insert = None
        self.calls: List[tuple] = []

    def _call(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))

    def select(self, *columns, count=None, head=None):
        self._call("select", *columns, count=count)
        cols = ",".join(columns)
        self._columns = None if cols.strip() == "*" else [c.strip() for c in cols.split(",")]
        self._count = count
        return self

    def eq(self, column, value):
        self._call("eq", column, value)
        self._filters.append(lambda r: r.get(column) == value)
        return self

    def or_(self, expr):
        self._call("or_", expr)
        clauses = []
        for part in _split_top_level(expr):
            column, op, value = part.split(".", 2)
            assert op == "ilike", op
            clauses.append((column, _unquote(value)))
        self._filters.append(lambda r: any(_ilike(p, r.get(c)) for c, p in clauses))
        return self

    @property
    def not_(self):
        self._negate = True
        return self

    def is_(self, column, value):
        assert value == "null"
        negate, self._negate = self._negate, False
        self._call("is_", column, value, negate=negate)
        if negate:
            self._filters.append(lambda r: r.get(column) is not None)
        else:
            self._filters.append(lambda r: r.get(column) is None)
        return self

    def order(self, column, desc=False):
        self._call("order", column, desc=desc)
        self._orders.append((column, desc))
        return self

    def range(self, start, end):
        self._call("range", start, end)
        self._range = (start, end)
        return self

    def limit(self, n):
        self._call("limit", n)
        self._limit = n
        return self

    def insert(self, row):
        self._call("insert", row)
        self._insert = row
        return self

    def execute(self):
        self._store.executed.append(self)
        if self._store.error is not None:
            raise APIError(self._store.error)

        rows = self._store.tables.setdefault(self._table, [])
        if self._insert is not None:
            rows.append(dict(self._insert))
            return FakeResponse([self._insert])

        matched = [r for r in rows if all(f(r) for f in self._filters)]
        for column, desc in reversed(self._orders):
            matched.sort(key=lambda r: (r.get(column) is None, r.get(column) or ""), reverse=desc)

        total = len(matched)
        if self._range is not None:
            start, end = self._range
            matched = matched[start : end + 1]
        if self._limit is not None:
            matched = matched[: self._limit]
        if self._store.max_rows is not None:
            matched = matched[: self._store.max_rows]

        if self._columns is not None:
            matched = [{c: r.get(c) for c in self._columns} for r in matched]
        else:
            matched = [dict(r) for r in matched]
        return FakeResponse(matched, total if self._count == "exact" else None)


class FakeSupabase:
    def __init__(self, courses=None, max_rows=None):
        self.tables: Dict[str, List[Dict[str, Any]]] = {"courses": list(courses or [])}
        self.executed: List[FakeQuery] = []
        self.error: Optional[Dict[str, str]] = None
        # Mirrors PostgREST's per-response row cap
        self.max_rows = max_rows

    def table(self, name):
        return FakeQuery(self, name)

    from_ = table

    def fail_with(self, message, code="PGRST000"):
        self.error = {"message": message, "code": code, "hint": None, "details": None}


# ---------------------------------------------------------------------------
# Sample rows
# ---------------------------------------------------------------------------

_next_id = [0]


def make_course(code="1001", grade="10", course_title="Sample Course", **overrides) -> Dict[str, Any]:
    _next_id[0] += 1
    row = {
        "id": _next_id[0],
        "code": code,
        "myedbc_code": None,
        "trax_code": None,
        "grade": grade,
        "course_title": course_title,
        "credit_value": "4",
        "category": "Ministry-Authorized",
        "language": "English",
        "developer": None,
        "authorizer": None,
        "open_date": "2018-07-01",
        "close_date": None,
        "completion_end_date": None,
        "grad_program": None,
        "grad_program_requirement": None,
        "hst_main_category": "Mathematics",
        "hst_sub_category": None,
        "ministry_subject_code": None,
    }
    row.update(overrides)
    return row


