"""Directory tree listing with streaming output.

This module composes the walker and a renderer into a single object that streams
the finished listing line by line.
"""

import os
from typing import Iterator, Optional, TextIO

from treewalk.config import TreeConfig
from treewalk.render import TreeCounts, TreeRenderer, create_renderer
from treewalk.walker.walker import TreeWalker


class TreeWalk:
    """One tree listing: walk the configured root and render every step.

    The root is validated on construction, so an invalid root fails before any
    output is produced. The listing itself can only be streamed once; counts are
    final once streaming is complete.

    Attributes:
        config (TreeConfig): The active configuration.
        renderer (TreeRenderer): Output format in use.
        streaming_complete (bool): Whether the listing has been fully streamed.

    Example:
        >>> listing = TreeWalk(TreeConfig(root="src", max_depth=1))  # doctest: +SKIP
        >>> for line in listing.stream_tree():  # doctest: +SKIP
        ...     print(line, end='')
        src
        └── treewalk
        <BLANKLINE>
        1 directory, 0 files

    Raises:
        FileNotFoundError: If the root or a file named in ``exclude_from`` doesn't exist.
        NotADirectoryError: If the root isn't a directory.
    """

    def __init__(
        self,
        config: TreeConfig,
        *,
        renderer: Optional[TreeRenderer] = None,
        colorize: Optional[bool] = None,
    ) -> None:
        """Validate the root and prepare the walker and renderer.

        Args:
            config: The configuration for this listing.
            renderer: Renderer to use. Defaults to the one selected by
                ``config.output_format``.
            colorize: Whether the default text renderer emits ANSI styles. None
                decides from ``config.color`` as for a non-terminal sink.
        """
        self.config = config
        self._walker = TreeWalker(config)
        self._walker.validate_root()
        self.renderer = renderer if renderer is not None else create_renderer(config, colorize=colorize)
        self.streaming_complete = False
        self._streamed = False

    @property
    def directory_count(self) -> int:
        """Number of directories listed so far (the root is not counted)."""
        return self._walker.directory_count

    @property
    def file_count(self) -> int:
        """Number of non-directory entries listed so far."""
        return self._walker.file_count

    def stream_tree(self) -> Iterator[str]:
        """Generate the listing one newline-terminated line at a time.

        Raises:
            RuntimeError: If the listing has already been streamed.
            PermissionError: If the root directory cannot be opened.
        """
        if self._streamed:
            raise RuntimeError("Tree has already been streamed")
        self._streamed = True

        renderer = self.renderer
        for line in renderer.begin(os.fspath(self.config.root)):
            yield line + "\n"
        for step in self._walker.walk():
            for line in renderer.render_step(step):
                yield line + "\n"
        counts = TreeCounts(self.directory_count, self.file_count)
        for line in renderer.end(counts):
            yield line + "\n"
        self.streaming_complete = True

    def get_tree_representation(self) -> str:
        """The complete listing as a single string."""
        return "".join(self.stream_tree())

    def write(self, stream: TextIO) -> None:
        """Write the complete listing to a text stream.

        Raises:
            OSError: If writing to the stream fails.
        """
        for line in self.stream_tree():
            stream.write(line)
