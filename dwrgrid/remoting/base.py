"""Base class and decorator for remotely callable handler objects.

A handler class subclasses ``RemoteProxy``, sets the client-visible interface
``name`` and marks callable methods with ``@remote_method``.  Marked methods
convert their positional JSON arguments to the annotated parameter types
with ``pydantic.validate_call``.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from pydantic import validate_call

F = TypeVar("F", bound=Callable[..., Any])

_REMOTE_NAME_ATTR = "__remote_name__"


def remote_method(name: str | None = None) -> Callable[[F], F]:
    """Expose the decorated method to remote callers.

    Parameters
    ----------
    name:
        Method name seen by the client.  Defaults to the Python name.
    """

    def decorator(func: F) -> F:
        setattr(func, _REMOTE_NAME_ATTR, name or func.__name__)
        # validate_call copies the marker through functools.wraps
        return validate_call(func)  # type: ignore[return-value]

    return decorator


class RemoteProxy:
    """Base for handler objects registered with ``RemoteRegistry``.

    Subclasses MUST set ``name``.  ``remote_methods`` maps the client method
    name to the Python attribute name and is collected automatically from
    ``@remote_method`` markers, including inherited ones.
    """

    name: str
    remote_methods: dict[str, str] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        methods: dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            for attr_name, attr in vars(klass).items():
                remote_name = getattr(attr, _REMOTE_NAME_ATTR, None)
                if remote_name is not None:
                    methods[remote_name] = attr_name
        cls.remote_methods = methods

    def bound(self, method: str) -> Callable[..., Any]:
        """Return the bound callable for client method name *method*.

        Raises
        ------
        KeyError
            If *method* is not a remote method of this proxy.
        """
        return getattr(self, self.remote_methods[method])
