"""Example: basic usage of kv-parser as a library."""

from kv_parser import KeyNotFoundError, RecordStore, format_record
from kv_parser.query import query

INPUT = """\
user=alice
role=admin
# comments and blank lines are skipped

id=42
path=/usr/bin=/usr/local/bin
role=owner
"""

store = RecordStore.from_lines(INPUT.splitlines())

# Full listing in first-seen order
for record in query(store, None):
    print(format_record(record))

# Single lookup; "role" keeps index 1 but takes the last value
print(format_record(query(store, "role")[0]))

try:
    query(store, "missing")
except KeyNotFoundError as exc:
    print(exc)
