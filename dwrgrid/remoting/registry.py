"""Remote interface registry.

Maps interface name → ``RemoteProxy`` instance and dispatches positional
argument lists to the proxy's remote methods.  Adding a new interface only
requires a ``RemoteProxy`` subclass and a ``register()`` call.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from pydantic import ValidationError as PydanticValidationError

from dwrgrid.middleware.error_handler import (
    ArgumentConversionError,
    RemoteMethodNotFoundError,
)
from dwrgrid.remoting.base import RemoteProxy

logger = logging.getLogger(__name__)


def _record_count(result: Any) -> int | None:
    """Number of records carried by an envelope, if it carries any."""
    for attr in ("objects_to_convert_to_records", "rows"):
        records = getattr(result, attr, None)
        if records is not None:
            return len(records)
    return None


class RemoteRegistry:
    """Registry of remotely callable interfaces."""

    def __init__(self) -> None:
        self._proxies: dict[str, RemoteProxy] = {}

    def register(self, proxy: RemoteProxy) -> None:
        """Register *proxy* under its interface ``name``.

        Raises
        ------
        ValueError
            If an interface with the same name is already registered.
        """
        if proxy.name in self._proxies:
            raise ValueError(f"Interface '{proxy.name}' is already registered")
        self._proxies[proxy.name] = proxy
        logger.info(
            "Registered interface '%s' with methods %s",
            proxy.name,
            sorted(proxy.remote_methods),
        )

    def get(self, interface: str, method: str) -> Callable[..., Any]:
        """Return the bound remote method ``interface.method``.

        Raises
        ------
        RemoteMethodNotFoundError
            If the interface or the method is unknown.
        """
        proxy = self._proxies.get(interface)
        if proxy is None:
            raise RemoteMethodNotFoundError(
                f"Interface '{interface}' not found", interface=interface
            )
        try:
            return proxy.bound(method)
        except KeyError:
            raise RemoteMethodNotFoundError(
                f"Method '{interface}.{method}' not found",
                interface=interface,
                method=method,
            ) from None

    def list_interfaces(self) -> dict[str, list[str]]:
        """Return ``{interface: [method, ...]}`` for every registered proxy."""
        return {
            name: sorted(proxy.remote_methods)
            for name, proxy in self._proxies.items()
        }

    def invoke(self, interface: str, method: str, args: list[Any]) -> Any:
        """Call ``interface.method`` with positional *args*.

        Raises
        ------
        RemoteMethodNotFoundError
            If the target does not exist.
        ArgumentConversionError
            If *args* cannot be converted to the method's parameters.
        """
        func = self.get(interface, method)
        start = time.monotonic()
        try:
            result = func(*args)
        except PydanticValidationError as exc:
            arg_errors = [
                {
                    "argument": " -> ".join(str(loc) for loc in err["loc"]),
                    "message": err["msg"],
                    "type": err["type"],
                }
                for err in exc.errors()
            ]
            logger.warning(
                "Argument conversion failed for %s.%s",
                interface,
                method,
                extra={"interface": interface, "method": method},
            )
            raise ArgumentConversionError(
                f"Invalid arguments for '{interface}.{method}'",
                arguments=arg_errors,
            ) from None

        logger.info(
            "Invoked %s.%s",
            interface,
            method,
            extra={
                "interface": interface,
                "method": method,
                "record_count": _record_count(result),
                "duration_ms": round((time.monotonic() - start) * 1000, 3),
            },
        )
        return result
