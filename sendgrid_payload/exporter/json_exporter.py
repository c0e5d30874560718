"""JSON exporter."""
import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class SerializationError(RuntimeError):
    """Raised when a payload graph cannot be rendered as JSON.

    Only a value that is not JSON-compatible (an arbitrary object, NaN, a
    circular structure) forwarded into a node can cause this. It indicates a
    defect in the graph, not something the caller can retry.
    """


class JsonExporter:
    """Export payload nodes to JSON."""

    def __init__(self, indent: Optional[int] = None):
        """Initialize exporter. indent=None produces compact output."""
        self.indent = indent

    def export(self, node: Any) -> str:
        """Render a node exposing to_dict() as JSON text."""
        separators = (",", ":") if self.indent is None else None
        try:
            text = json.dumps(
                node.to_dict(),
                indent=self.indent,
                separators=separators,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as e:
            logger.error(f"Could not serialize {type(node).__name__}: {e}")
            raise SerializationError(
                f"could not properly serialize {type(node).__name__} into JSON: {e}"
            ) from e

        logger.debug(f"Serialized {type(node).__name__} ({len(text)} chars)")
        return text

    def export_to_file(self, output_file: Path, node: Any) -> None:
        """Export to JSON file."""
        text = self.export(node)

        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(text)

        logger.info(f"Wrote payload to {output_file}")
