"""XML rendering of a tree listing."""

from typing import Iterator
from xml.sax.saxutils import escape as xml_escape
from xml.sax.saxutils import quoteattr

from treewalk.render.base_renderer import TreeCounts
from treewalk.render.structured import EntryNode, StructuredRenderer

INDENT = "  "


class XMLRenderer(StructuredRenderer):
    """Renderer that emits the listing as an XML document.

    Element names follow the entry type and attributes carry the name, link target
    and any enabled metadata::

        <?xml version="1.0" encoding="UTF-8"?>
        <tree>
          <directory name=".">
            <file name="a &amp; b.txt"></file>
            <link name="c" target="a &amp; b.txt"></link>
          </directory>
          <report>
            <directories>0</directories>
            <files>2</files>
          </report>
        </tree>

    Attribute values are escaped with xml.sax.saxutils.quoteattr, so quotes and
    ampersands in file names keep the document well-formed.
    """

    def serialize(self, root: EntryNode, counts: TreeCounts) -> Iterator[str]:
        yield '<?xml version="1.0" encoding="UTF-8"?>'
        yield "<tree>"
        yield from self.element_lines(root, 1)
        yield f"{INDENT}<report>"
        yield f"{INDENT * 2}<directories>{counts.directories}</directories>"
        if not self.config.dirs_only:
            yield f"{INDENT * 2}<files>{counts.files}</files>"
        yield f"{INDENT}</report>"
        yield "</tree>"

    def element_lines(self, node: EntryNode, level: int) -> Iterator[str]:
        """Lines for the element of ``node`` and, recursively, its children."""
        indent = INDENT * level
        tag = node.kind
        attributes = {"name": node.label}
        attributes.update(self.attributes(node))
        attribute_text = "".join(f" {key}={quoteattr(str(value))}" for key, value in attributes.items())

        if not node.children and not node.note:
            yield f"{indent}<{tag}{attribute_text}></{tag}>"
            return

        yield f"{indent}<{tag}{attribute_text}>"
        if node.note:
            yield f"{indent}{INDENT}<error>{xml_escape(node.note)}</error>"
        for child in node.children:
            yield from self.element_lines(child, level + 1)
        yield f"{indent}</{tag}>"
