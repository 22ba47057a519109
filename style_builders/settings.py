"""
Conversion settings.

A single immutable StyleSettings value is passed to every builder entry
point, so one conversion pass always sees one Tailwind dialect.
"""

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Framework(str, Enum):
    """Output framework."""
    HTML = "html"
    TAILWIND = "tailwind"


class TailwindDialect(str, Enum):
    """Tailwind class-name grammar."""
    V3 = "v3"
    V4 = "v4"


_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


class StyleSettings(BaseModel):
    """Settings shared by one conversion pass."""
    model_config = ConfigDict(frozen=True)

    framework: Framework = Field(
        default=Framework.TAILWIND,
        description="Output framework: 'html' inline styles or 'tailwind' classes"
    )
    jsx: bool = Field(
        default=False,
        description="Emit React (JSX) style syntax for inline styles"
    )
    use_tailwind4: bool = Field(
        default=True,
        description="Use Tailwind v4 class syntax instead of v3"
    )
    round_tailwind_colors: bool = Field(
        default=False,
        description="Snap colors to the nearest Tailwind palette color"
    )

    @property
    def dialect(self) -> TailwindDialect:
        return TailwindDialect.V4 if self.use_tailwind4 else TailwindDialect.V3

    @classmethod
    def from_env(cls) -> 'StyleSettings':
        """Build default settings from FIGMA_STYLES_* environment variables."""
        framework = os.environ.get("FIGMA_STYLES_FRAMEWORK", Framework.TAILWIND.value)
        return cls(
            framework=Framework(framework.strip().lower()),
            jsx=_env_flag("FIGMA_STYLES_JSX", False),
            use_tailwind4=_env_flag("FIGMA_STYLES_TAILWIND4", True),
            round_tailwind_colors=_env_flag("FIGMA_STYLES_ROUND_COLORS", False),
        )

    def merged(
        self,
        framework: Optional[Framework] = None,
        jsx: Optional[bool] = None,
        use_tailwind4: Optional[bool] = None,
        round_tailwind_colors: Optional[bool] = None,
    ) -> 'StyleSettings':
        """Return a copy with every non-None override applied."""
        overrides = {
            'framework': framework,
            'jsx': jsx,
            'use_tailwind4': use_tailwind4,
            'round_tailwind_colors': round_tailwind_colors,
        }
        return self.model_copy(update={k: v for k, v in overrides.items() if v is not None})
