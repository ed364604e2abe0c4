from iconocolor.engine.tree.base import FolderTree
from iconocolor.engine.tree.filesystem import FilesystemFolderTree
from iconocolor.engine.tree.memory import InMemoryFolderTree

__all__ = ["FolderTree", "FilesystemFolderTree", "InMemoryFolderTree"]
