# authkit

Building blocks for services that authenticate users and authorise their
requests:

- **Revoked-token stores**: `authkit.memory_store.MemoryStore` keeps tokens
  in process memory, optionally saved to a JSON file, with per-token expiry.
  `authkit.redis_store.RedisStore` keeps them as Redis keys
  (`RedisStore.from_config(RedisConfig(...))`). Both offer `set`, `check`,
  `delete` and `close`.
- **RBAC schemas**: data classes for accounts, roles, resources, apps,
  login payloads, pagination and ordering, in `authkit.schema`,
  `authkit.accounts`, `authkit.roles`, `authkit.resources`, `authkit.apps`
  and `authkit.login`.
- **Structured logging**: `authkit.logger` writes span-aware log entries
  carrying trace ids, account keys and a service version, as key=value text
  or JSON. `authkit.log_hook.Hook` hands entries to a writer on background
  worker threads, and `authkit.sqlite_hook.SqliteHook` is a writer that
  stores them in an SQLite table.
- **Identifiers**: trace ids, 12-byte object ids, snowflake ids and UUIDs,
  in `authkit.identifiers`.
- **Utilities**: hex digests (`authkit.hashing`), JSON/YAML helpers
  (`authkit.serialization`), strict string conversion (`authkit.strconv`)
  and copying same-named fields between dataclasses (`authkit.structmap`).
- **Response errors**: `authkit.responses.ResponseError` carries an error
  code and an HTTP status code.
- **Framing**: a length-prefixed binary frame format with a 16-byte header,
  plus a small TCP client and server that use it.

## Installation

```
pip install authkit
```

To run the test suite, install the test extra:

```
pip install "authkit[test]"
pytest
```

## Examples

### Hashing and string conversion

```python
from authkit.hashing import md5_hash_string
from authkit.strconv import StrValue

md5_hash_string("hello")             # '5d41402abc4b2a76b9719d911017c592'

StrValue("1010").to_int64()          # 1010
StrValue("10.1").default_int64(5)    # 5 (not an integer, so the default)
StrValue("true").to_bool()           # True
```

Every `to_*` conversion raises `ValueError` if the text cannot be
converted. Every `default_*` conversion returns the default you pass in
instead of raising.

### Revoked tokens

```python
from authkit.memory_store import MemoryStore

with MemoryStore() as store:
    store.set("token", 60)           # expires after 60 seconds; 0 never expires
    store.check("token")             # True
    store.delete("token")
    store.check("token")             # False
```

### Logging

```python
from authkit import logger

logger.set_formatter("json")
ctx = logger.new_trace_id_context(None, "trace-1")
logger.start_span(ctx, title="login").with_field("user", "alice").info("signed in")
```

### Response errors

```python
from authkit.responses import new_400_response, unwrap_response

err = new_400_response(1200, "account %s already exists", "alice")
unwrap_response(err).status_code     # 400
```

### Frames

```python
from authkit.framing import enpack, depack

frame = enpack(b'{"ID":"0"}')
depack(frame)                        # b'{"ID":"0"}'
```

A frame is made of these fields, all big-endian:

| Field            | Size    |
|------------------|---------|
| package length   | 4 bytes |
| header length    | 2 bytes |
| protocol version | 2 bytes |
| operation        | 4 bytes |
| sequence id      | 4 bytes |
| body             | as given by the package length |

### Levels

```python
from authkit.levels import get_level_info

get_level_info(2).name               # '白银'
```

`get_level_info` raises `LookupError` for a level it does not know.

## Command-line tools

The package installs two commands that exchange frames over TCP. Both take
`--host` and `--port` and default to `localhost:7373`.

```
authkit-server
```

Listens for clients and logs the body of each frame it decodes.

```
authkit-client
```

Connects to the server and sends ten JSON messages, each tagged with a
session built from the current Unix time.

## What it does not do

The package does not issue, sign or verify access tokens; its stores only
record tokens that have been revoked, and checking a token against a store
is left to the caller. It has no HTTP API, no login or account service and
no permission checking: the schema classes describe the data such a service
would use, but nothing here serves or persists it.