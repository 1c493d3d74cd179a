"""Dependency-ordered initialisation and teardown of named modules."""

from __future__ import annotations

import errno
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

InitFunc = Callable[[], Optional[int]]
CloseFunc = Callable[[], object]

_LOG_BUFFER_SIZE = 1024
_TRUNCATED_MESSAGE = "[log message truncated]"


class LogLevel(IntEnum):
    """Logging verbosity levels."""

    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3


LogFunc = Callable[[LogLevel, str], object]


class InitError(Exception):
    """Raised when registering or initialising modules fails."""

    def __init__(self, code: int | None, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass
class Registration:
    """A named module with its lifecycle hooks and dependencies."""

    name: str
    init_func: InitFunc | None = None
    close_func: CloseFunc | None = None
    dependencies: tuple[str, ...] = ()
    initiated: bool = False


class Registry:
    """Holds registrations and runs them in dependency order."""

    def __init__(self) -> None:
        self._registrations: list[Registration] = []
        self._log_func: LogFunc | None = None
        self._error: InitError | None = None

    def configure(self, log_func: LogFunc | None) -> None:
        """Set the function that receives log messages."""
        self._log_func = log_func

    def register(
        self,
        name: str,
        init_func: InitFunc | None = None,
        close_func: CloseFunc | None = None,
        dependencies: Iterable[str] | None = (),
    ) -> None:
        """Record a module.

        Problems are not raised here; the first one is kept and raised by
        the next call to :meth:`init`, and later registrations are ignored
        until then.
        """
        if self._error is not None:
            return
        if not isinstance(name, str):
            self._error = InitError(errno.EINVAL, "`name` must be a string")
            return
        deps = tuple(dependencies or ())
        if not all(isinstance(dep, str) for dep in deps):
            self._error = InitError(
                errno.EINVAL, f"Dependencies of `{name}` must be strings"
            )
            return
        self._registrations.append(
            Registration(name, init_func, close_func, deps)
        )

    def init(self) -> None:
        """Initialise every module, each after the modules it depends on."""
        if self._error is not None:
            error, self._error = self._error, None
            raise error
        for registration in list(self._registrations):
            self._init_one(registration.name, set())

    def destroy(self) -> None:
        """Close every initialised module, dependents first, and forget them all."""
        for registration in list(self._registrations):
            self._destroy_one(registration.name)
        self._registrations.clear()

    def __iter__(self) -> Iterator[Registration]:
        return iter(list(self._registrations))

    def __len__(self) -> int:
        return len(self._registrations)

    def _find(self, name: str) -> Registration | None:
        return next((reg for reg in self._registrations if reg.name == name), None)

    def _init_one(self, name: str, pending: set[str]) -> None:
        registration = self._find(name)
        # An unknown name counts as a module with nothing to do.
        if registration is None or registration.initiated:
            return
        if name in pending:
            raise InitError(errno.ELOOP, f"Dependency cycle detected at `{name}`")
        pending.add(name)
        for dependency in registration.dependencies:
            self._init_one(dependency, pending)
        if registration.init_func is not None:
            try:
                result = registration.init_func()
            except Exception as exc:
                raise InitError(
                    None, f"Init func failed for `{name}`: {exc}"
                ) from exc
            if result:
                raise InitError(result, f"Init func failed for `{name}`")
        registration.initiated = True
        pending.discard(name)

    def _destroy_one(self, name: str) -> None:
        self._log(LogLevel.DEBUG, f"Closing {name}")
        for registration in list(self._registrations):
            if registration.initiated and name in registration.dependencies:
                self._destroy_one(registration.name)

        registration = self._find(name)
        if registration is not None and registration.initiated:
            if registration.close_func is not None:
                registration.close_func()
            registration.initiated = False
        self._log(LogLevel.DEBUG, f"Closed {name}")

    def _log(self, level: LogLevel, message: str) -> None:
        if self._log_func is None:
            return
        if len(message) >= _LOG_BUFFER_SIZE:
            message = _TRUNCATED_MESSAGE
        self._log_func(level, message)


_default_registry = Registry()


def configure(log_func: LogFunc | None) -> None:
    """Set the log function of the default registry."""
    _default_registry.configure(log_func)


def register(
    name: str,
    init_func: InitFunc | None = None,
    close_func: CloseFunc | None = None,
    dependencies: Iterable[str] | None = (),
) -> None:
    """Register a module with the default registry."""
    _default_registry.register(name, init_func, close_func, dependencies)


def init() -> None:
    """Initialise every module of the default registry."""
    _default_registry.init()


def destroy() -> None:
    """Close and forget every module of the default registry."""
    _default_registry.destroy()