"""JSON rendering of a tree listing."""

import json
from typing import Any, Dict, Iterator

from treewalk.render.base_renderer import TreeCounts
from treewalk.render.structured import EntryNode, StructuredRenderer


class JSONRenderer(StructuredRenderer):
    """Renderer that emits the listing as one JSON array.

    The array holds the root directory object followed by a report object::

        [
          {"type": "directory", "name": ".", "contents": [
            {"type": "file", "name": "a.txt"},
            {"type": "link", "name": "b", "target": "a.txt"}
          ]},
          {"type": "report", "directories": 0, "files": 2}
        ]

    Directories always carry a ``contents`` list, empty when the directory was not
    descended. Enabled metadata options add keys (``size``, ``prot``, ``user``...)
    and a directory that could not be opened gets an ``error`` key.
    """

    def serialize(self, root: EntryNode, counts: TreeCounts) -> Iterator[str]:
        report: Dict[str, Any] = {"type": "report", "directories": counts.directories}
        if not self.config.dirs_only:
            report["files"] = counts.files
        document = [self.node_to_dict(root), report]
        yield from json.dumps(document, indent=2, ensure_ascii=False).splitlines()

    def node_to_dict(self, node: EntryNode) -> Dict[str, Any]:
        """JSON object for ``node`` and, recursively, its children."""
        data: Dict[str, Any] = {"type": node.kind, "name": node.label}
        data.update(self.attributes(node))
        if node.note:
            data["error"] = node.note
        if self.has_contents(node):
            data["contents"] = [self.node_to_dict(child) for child in node.children]
        return data
