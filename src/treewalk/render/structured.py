"""Shared machinery for renderers that emit one nested document (JSON, XML).

Structured formats need a directory's children before they can close it, so these
renderers collect the step stream into an anytree hierarchy and serialize it once
the walk has finished.
"""

from abc import abstractmethod
from typing import Any, Dict, Iterator, List, Optional

from anytree import NodeMixin

from treewalk.config import TreeConfig
from treewalk.render.base_renderer import TreeCounts, TreeRenderer
from treewalk.render.fields import format_date, format_human_size, format_protections, group_name, user_name
from treewalk.types import FileType
from treewalk.walker.entry import DirectoryEntry
from treewalk.walker.walker import WalkStep


class EntryNode(NodeMixin):  # type: ignore
    """Node in the collected hierarchy.

    Attributes:
        entry: The listed entry, or None for the root.
        label: Display name (base name, full path or the root as supplied).
        note: Why a directory was not descended, if it wasn't.
    """

    def __init__(
        self,
        label: str,
        entry: Optional[DirectoryEntry] = None,
        note: Optional[str] = None,
        parent: Optional["EntryNode"] = None,
    ) -> None:
        super().__init__()
        self.label = label
        self.entry = entry
        self.note = note
        self.parent = parent

    @property
    def kind(self) -> str:
        """Element type: "directory", "file", "link" or "other"."""
        if self.entry is None:
            return FileType.DIRECTORY.value
        return self.entry.file_type.value


class StructuredRenderer(TreeRenderer):
    """Base class for renderers that serialize the whole tree at the end.

    Subclasses implement ``serialize``.

    Attributes:
        root: Root of the collected hierarchy, set by ``begin``.
    """

    def __init__(self, config: TreeConfig) -> None:
        super().__init__(config)
        self.root: Optional[EntryNode] = None
        self._open_nodes: List[EntryNode] = []

    def begin(self, root_label: str) -> Iterator[str]:
        self.root = EntryNode(root_label)
        self._open_nodes = [self.root]
        return iter(())

    def render_step(self, step: WalkStep) -> Iterator[str]:
        # Steps arrive depth-first, so the parent is always the open node one level up.
        parent = self._open_nodes[step.depth - 1]
        label = step.entry.path if self.config.full_path else step.entry.name
        node = EntryNode(label, step.entry, step.note, parent=parent)
        del self._open_nodes[step.depth :]
        self._open_nodes.append(node)
        return iter(())

    def end(self, counts: TreeCounts) -> Iterator[str]:
        if self.root is None:
            return iter(())
        return self.serialize(self.root, counts)

    @abstractmethod
    def serialize(self, root: EntryNode, counts: TreeCounts) -> Iterator[str]:
        """Lines of the finished document."""
        pass

    def attributes(self, node: EntryNode) -> Dict[str, Any]:
        """Metadata of ``node`` enabled by the configuration, in display order."""
        entry = node.entry
        attributes: Dict[str, Any] = {}
        if entry is None:
            return attributes
        if entry.is_symlink and entry.link_target is not None:
            attributes["target"] = entry.link_target
        if self.config.inodes:
            attributes["inode"] = entry.inode
        if self.config.device:
            attributes["dev"] = entry.device
        if self.config.protections:
            attributes["prot"] = format_protections(entry)[1:]
        if self.config.user:
            attributes["user"] = user_name(entry.uid)
        if self.config.group:
            attributes["group"] = group_name(entry.gid)
        if self.config.show_size:
            if self.config.human_size or self.config.si:
                attributes["size"] = format_human_size(entry.size, si=self.config.si)
            else:
                attributes["size"] = entry.size
        if self.config.date:
            attributes["time"] = format_date(entry, self.config)
        return attributes

    @staticmethod
    def has_contents(node: EntryNode) -> bool:
        """Whether ``node`` is listed with a (possibly empty) contents section."""
        return node.entry is None or node.entry.is_dir
