"""Per-conversion collector for non-fatal conversion warnings."""

import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)


@dataclass
class Diagnostics:
    """Warnings raised while converting one selection.

    The same message is recorded once; order is first-seen order.
    """
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, message: str) -> None:
        if message in self.warnings:
            return
        logger.warning(message)
        self.warnings.append(message)

    def extend(self, other: 'Diagnostics') -> None:
        for message in other.warnings:
            self.add_warning(message)

    def __len__(self) -> int:
        return len(self.warnings)
