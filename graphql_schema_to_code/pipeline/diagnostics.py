"""
Diagnostics collected during a generation run.

Unsupported but harmless constructs do not stop generation; they are recorded
here and handed back to the caller together with the generated code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class DiagnosticKind(str, Enum):
    """Category of a diagnostic."""

    UNSUPPORTED_CONSTRUCT = "unsupported_construct"


@dataclass(frozen=True)
class Diagnostic:
    """A single human-readable warning."""

    kind: DiagnosticKind
    message: str
    subject: str = ""  # Name of the definition the warning is about

    def __str__(self) -> str:
        if self.subject:
            return f"Warning: {self.subject}: {self.message}"
        return f"Warning: {self.message}"


@dataclass
class Diagnostics:
    """Collector passed explicitly through the translation pass."""

    items: list[Diagnostic] = field(default_factory=list)

    def unsupported(self, message: str, subject: str = "") -> None:
        """Record a construct that was skipped or only partially generated."""
        diagnostic = Diagnostic(DiagnosticKind.UNSUPPORTED_CONSTRUCT, message, subject)
        logger.warning(str(diagnostic))
        self.items.append(diagnostic)

    @property
    def messages(self) -> list[str]:
        return [str(d) for d in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
