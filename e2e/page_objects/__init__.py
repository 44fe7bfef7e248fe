"""Page objects for the React app: how to find each piece of the UI."""

from .app import header, intro
from .index import load, root

__all__ = ["load", "root", "intro", "header"]
