"""In-process document container for the document todo store."""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class DocumentContainer:
    """JSON documents keyed by id, kept in insertion order."""

    documents: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def reset(self) -> None:
        """Reset the container to an empty state."""
        self.documents.clear()
