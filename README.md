# ipckit

Interprocess communication primitives for Python programs on Unix-like systems.

- **Local sockets** (`ipckit.listener`, `ipckit.stream`): a server and any
  number of clients. Each client has a private byte-stream connection to the
  server. A socket is named by a filesystem path or, on Linux, by a name in
  the abstract socket namespace.
- **FIFO files** (`ipckit.fifo`): one-way byte channels that live on the
  filesystem.
- **Raw descriptor helpers** (`ipckit.fdops`): an owned wrapper around a file
  descriptor.
- **Platform feature tables** (`ipckit.target`): the Unix domain socket
  features that a target platform has.

The package has no dependencies outside the standard library.

## Installation

```
pip install ipckit
```

## Naming local sockets

`ipckit.name.to_local_socket_name` turns a string, bytes or path-like value
into a `LocalSocketName`:

- A string or bytes value that starts with `@` gives a namespaced name. The
  `@` is removed from the name.
- Any other string or bytes value gives a filesystem path.
- A `pathlib.Path` or another path-like object always gives a filesystem path.
- A `LocalSocketName` is returned as it is.

`LocalSocketName` has these methods:

- `is_namespaced()` and `is_path()` report the kind of name.
- `is_supported()` checks the name kind against `NameTypeSupport.query()`.
- `is_always_supported()` checks it against `ipckit.name_type_support.ALWAYS_AVAILABLE`.
- `is_supported_in_nts_type(nts)` checks it against the `NameTypeSupport` value you pass.
- `to_address()` returns the socket address as bytes. Where the platform
  supports namespaced names, a namespaced name becomes an abstract address
  that starts with a NUL byte. One trailing NUL byte is dropped. Any other NUL
  byte raises `ValueError`.

`NameTypeSupport.query()` tells you which kinds of name the platform accepts:
`BOTH` on Linux and Android, and `ONLY_PATHS` on other systems.

```python
from ipckit.name_type_support import NameTypeSupport

nts = NameTypeSupport.query()
name = "@example.sock" if nts.namespace_supported() else "/tmp/example.sock"
```

## Server and client

`LocalSocketListener.bind(name)` creates a server. `accept()` waits for one
client. `incoming()` yields accepted connections without end, and any error
from accepting is raised from the iterator.

```python
from ipckit.listener import LocalSocketListener

with LocalSocketListener.bind(name) as listener:
    for conn in listener.incoming():
        with conn:
            data = conn.readline()
            conn.write(b"Hello from server!\n")
        if data == b"stop\n":
            break
```

`LocalSocketStream` is an unbuffered `io.RawIOBase`. You can read it with
`read`, `readinto` and `readline`, or wrap it in `io.BufferedReader`.
`write` returns the number of bytes it sent, which can be fewer than you gave
it.

```python
from ipckit.stream import LocalSocketStream

with LocalSocketStream.connect(name) as conn:
    conn.write(b"Hello from client!\n")
    print(conn.readline())
```

Errors:

- If no server is listening at the name, `connect` raises `FileNotFoundError`
  or `ConnectionRefusedError`.
- If the name is already in use, `bind` raises `OSError` with
  `errno.EADDRINUSE`.
- Closing a listener that is bound to a filesystem name leaves the socket file
  in place. You must remove it yourself.

Other operations:

- `set_nonblocking(True)` is available on both the listener and the stream.
  In nonblocking mode, `accept` raises `BlockingIOError` when no client is
  waiting. The stream's `readinto` and `write` return `None` when they cannot
  go ahead without waiting.
- `peer_pid()` returns the process id at the other end of a stream. It uses
  `SO_PEERCRED`. Where the platform has no `SO_PEERCRED`, it raises `OSError`.
- `fileno()`, `detach()` and `from_fd(fd)` expose the underlying descriptor,
  give it up, or take ownership of one.

The streams have no shutdown operation. The protocol you run over a
connection must mark the end of a message itself, for example with a newline.

## FIFO files

```python
from ipckit.fifo import create_fifo

create_fifo("/tmp/example.fifo", 0o777)
```

The mode is masked with the process umask.

- To use the FIFO, open it with `open()` for reading only or for writing only.
- To delete it, call `os.remove()`.

## Raw descriptors

`ipckit.fdops.FdOps(fd)` owns a file descriptor. It closes the descriptor in
these cases:

- on `close()`,
- at the end of a `with` block,
- when it is garbage-collected.

`FdOps` has these operations:

| Method | What it does |
| --- | --- |
| `read(size)` | Reads up to `size` bytes. |
| `read_vectored(buffers)` | Reads into several buffers. |
| `write(data)` | Writes `data`. |
| `write_vectored(buffers)` | Writes several buffers. |
| `flush()` | Calls `fsync` on the descriptor. |
| `fileno()` | Returns the descriptor and keeps ownership of it. |
| `detach()` | Gives up ownership and returns the descriptor. |

`close_fd(fd)` closes a descriptor. It retries when the call is interrupted and raises `OSError` on any other failure.

## Platform feature tables

`ipckit.target.collect_uds_features(TargetTriplet(arch, os, env))` returns
the Unix domain socket feature flags for a target, for example:

- `uds_peercred`
- `uds_scm_rights`
- `uds_sockaddr_un_len_104`
- `uds_supported`

`build_flags(environ)` reads the target from a mapping of build environment
variables and returns one configuration directive per flag. It returns
nothing if the mapping does not mark the target as Unix.
`TargetTriplet.from_environ(environ)` reads only the triplet.

## What is not included

ipckit has no `asyncio` version of local sockets. The listener and stream block, or can be put into nonblocking mode. If you need asynchronous access, register the descriptors from `fileno()` with an event loop yourself.

ipckit does not cover Windows named pipes, unnamed pipes or datagram sockets.

ipckit has no command-line tool.