"""DWR-style remoting - handler base class, decorator and registry."""

from dwrgrid.remoting.base import RemoteProxy, remote_method
from dwrgrid.remoting.registry import RemoteRegistry

__all__ = [
    "RemoteProxy",
    "RemoteRegistry",
    "remote_method",
]
