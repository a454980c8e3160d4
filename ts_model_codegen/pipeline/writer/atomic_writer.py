"""
Atomic file writer for generated model files.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from ..analyzer.ir_nodes import CompileOutput
from ..config import OutputConfig, OutputMode

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes.

    Uses a two-phase approach:
    1. Write to a temporary file in the same directory
    2. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, config: OutputConfig | None = None):
        """Initialize the atomic writer.

        Args:
            config: Output configuration (defaults if None)
        """
        self.config = config or OutputConfig()

    def write(self, path: Path, content: str) -> None:
        """Write content to file.

        Args:
            path: Target file path
            content: Content to write verbatim

        Raises:
            FileExistsError: If the file exists and the mode forbids overwriting
            OSError: If file operations fail
        """
        if self.config.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        if not self.config.atomic_write:
            path.write_text(content, encoding="utf-8", newline="")
            return

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)

            # On POSIX systems, rename() is atomic if source and dest are on same filesystem
            temp_path.replace(path)

        except Exception:
            # Clean up temp file on any error
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def write_output(self, output: CompileOutput, out_folder: Path) -> list[Path]:
        """Write every generated file under an output folder.

        Enum files are written first, then table files.

        Args:
            output: A successful compilation result
            out_folder: Folder the relative file names are resolved against

        Returns:
            The written paths, in write order
        """
        written = []
        for generated in output.all_files():
            path = out_folder / generated.filename
            self.write(path, generated.content)
            logger.debug(f"Wrote {path}")
            written.append(path)
        logger.info(f"Wrote {len(written)} files to {out_folder}")
        return written
