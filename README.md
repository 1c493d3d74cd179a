# modinit

Start your application's modules in dependency order and shut them down
in reverse, from one place.

Each module registers a name, an optional init function, an optional close
function and the names of the modules it depends on. `init()` starts every
registered module once. It always starts a module's dependencies before the
module itself. `destroy()` closes every started module. Each module is
closed before the modules it depends on are closed. After `destroy()` the
registry is empty.

## Installation

```
pip install .
```

## Usage

```python
from modinit.registry import Registry, InitError

registry = Registry()

def start_database():
    print("database up")
    return 0          # a non-zero return value makes init fail

def stop_database():
    print("database down")

registry.register("database", start_database, stop_database, [])
registry.register("api", lambda: 0, lambda: print("api down"), ["database"])

try:
    registry.init()
except InitError as exc:
    print("start-up failed:", exc)
finally:
    registry.destroy()
```

Iterating over a `Registry` yields its `Registration` records in the order
they were registered. Each record has `name`, `init_func`, `close_func`,
`dependencies` and `initiated`. `len(registry)` is the number of
registrations.

A dependency name that no module registered is treated as a module with
nothing to do. It does not cause an error.

`modinit.registry` also provides a shared default registry through the
module-level functions `register`, `init`, `destroy` and `configure`.
Modules can use these to register themselves when they are imported.

### Logging

`configure(log_func)` installs a callback that is called with a `LogLevel`
and a message. During `destroy()`, each module gets two `LogLevel.DEBUG`
messages, `Closing <name>` and `Closed <name>`. A message of 1024
characters or more is replaced by `[log message truncated]`.

### Errors

All failures are raised as `InitError`. Its `code` attribute holds an
errno-style code or `None`, and its `message` attribute holds the text.

- **Invalid registration.** This covers a name that is not a string, or a
  dependency that is not a string. `register()` does not raise in this
  case. It keeps the error, and the next `init()` raises it. Any further
  registrations are ignored until that happens.
- **Init function returns a non-zero value.** `init()` raises, and the
  error's `code` is that value.
- **Init function raises an exception.** `init()` raises an `InitError`
  chained to the original exception. Its `code` is `None`.
- **Dependency cycle.** `init()` raises with code `errno.ELOOP`.

## Demo

```
modinit-demo [--error-file PATH]
```

The demo registers two modules, `module_a` and `module_b`, where
`module_b` depends on `module_a`. It starts both, prints
`App is working...`, closes them and exits with status 0.

If start-up fails, the demo prints the error and writes its code and
message to the error file (`error.txt` by default). It then closes any
modules that were started and exits with status 1.