import threading
import uuid
from datetime import datetime, timezone


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """The slice of the PostgREST query builder the repository relies on."""

    def __init__(self, store, table):
        self.store = store
        self.table = table
        self.filters = []
        self.ordering = None
        self.row_limit = None
        self.pending_insert = None

    def select(self, columns="*"):
        self.columns = columns
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def limit(self, size):
        self.row_limit = size
        return self

    def insert(self, payload):
        self.pending_insert = payload
        return self

    def execute(self):
        self.store.check()
        rows = self.store.tables.setdefault(self.table, [])
        if self.pending_insert is not None:
            row = {"id": str(uuid.uuid4()), "helpful": 0, **self.pending_insert}
            row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
            rows.append(row)
            return FakeResponse([dict(row)])

        result = [dict(r) for r in rows if all(r.get(c) == v for c, v in self.filters)]
        if self.ordering:
            column, desc = self.ordering
            result.sort(key=lambda r: r[column], reverse=desc)
        if self.row_limit is not None:
            result = result[: self.row_limit]
        return FakeResponse(result)


class FakeRpc:
    def __init__(self, store, name, params):
        self.store = store
        self.name = name
        self.params = params

    def execute(self):
        self.store.check()
        rows = self.store.tables.setdefault("reviews", [])
        if self.name == "increment_review_helpful":
            for row in rows:
                if row["id"] == self.params["target_id"]:
                    row["helpful"] += 1
                    return FakeResponse([dict(row)])
            return FakeResponse([])
        if self.name == "review_rating_counts":
            counts = {}
            for row in rows:
                counts[row["rating"]] = counts.get(row["rating"], 0) + 1
            return FakeResponse([{"rating": r, "count": c} for r, c in counts.items()])
        raise AssertionError(f"unexpected rpc {self.name}")


class FakeSupabase:
    """In-memory stand-in for ``supabase.Client``."""

    def __init__(self):
        self.tables = {}
        self.fail = False

    def check(self):
        if self.fail:
            raise RuntimeError("connection refused")

    def table(self, name):
        return FakeQuery(self, name)

    def rpc(self, name, params=None):
        return FakeRpc(self, name, params or {})

    def seed(self, **fields):
        row = {
            "id": str(uuid.uuid4()),
            "product_id": "prod-1",
            "customer_name": "Ada",
            "rating": 5,
            "comment": "Great",
            "helpful": 0,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        row.update(fields)
        self.tables.setdefault("reviews", []).append(row)
        return row


class FakeHttpResponse:
    def __init__(self, payload=None, status_code=200, error=None):
        self.payload = payload
        self.status_code = status_code
        self.error = error

    def raise_for_status(self):
        if self.error:
            raise self.error

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    """Records ``get`` calls and replays a scripted response."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeHttpResponse({"count": 0})
        self.exc = exc
        self.calls = []
        self.called = threading.Event()

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        self.called.set()
        if self.exc:
            raise self.exc
        return self.response

