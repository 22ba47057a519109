#!/usr/bin/env python3
"""
Figma Styles MCP Server - Model Context Protocol server that turns Figma
paints and node attributes into CSS and Tailwind code.

This server provides tools for:
- Per-node inline styles or Tailwind classes for a whole node tree
- Tailwind color and gradient classes for a fills list (v3 and v4)
- CSS background values (colors and gradients) for a fills list
- Tailwind color tokens used by a node tree

Node JSON is passed in the request (Figma plugin API shape); the server
makes no network calls.
"""

import json
import logging
import os
import sys
from enum import Enum
from typing import Optional, List, Dict, Any

from pydantic import BaseModel, Field, ValidationError, field_validator, ConfigDict
from mcp.server.fastmcp import FastMCP

from style_builders.base import SolidPaint, parse_fills, parse_node
from style_builders.html_color import html_color_from_fills, html_gradient_from_fills
from style_builders.node_styles import walk_node_styles
from style_builders.settings import Framework, StyleSettings
from style_builders.tailwind_color import (
    tailwind_color, tailwind_color_from_fills, tailwind_gradient_from_fills,
)

logger = logging.getLogger("figma_styles_mcp")

# ============================================================================
# Initialize MCP Server
# ============================================================================

mcp = FastMCP("figma_styles_mcp")

# ============================================================================
# Enums and Types
# ============================================================================

class ResponseFormat(str, Enum):
    """Output format for tool responses."""
    MARKDOWN = "markdown"
    JSON = "json"


TOOL_ANNOTATIONS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": False
}

# ============================================================================
# Pydantic Input Models
# ============================================================================

class SettingsOverrides(BaseModel):
    """Per-call overrides of the server's FIGMA_STYLES_* defaults."""
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    use_tailwind4: Optional[bool] = Field(
        default=None,
        description="Use Tailwind v4 syntax (True) or v3 (False). Defaults to server setting."
    )
    round_tailwind_colors: Optional[bool] = Field(
        default=None,
        description="Snap colors to the nearest Tailwind palette color"
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' or 'json'"
    )

    def settings(self, **overrides: Any) -> StyleSettings:
        return StyleSettings.from_env().merged(
            use_tailwind4=self.use_tailwind4,
            round_tailwind_colors=self.round_tailwind_colors,
            **overrides,
        )


class NodeStylesInput(SettingsOverrides):
    """Input model for per-node style generation."""

    node: Dict[str, Any] = Field(
        ...,
        description="Figma node JSON (plugin API shape) including children"
    )
    framework: Optional[Framework] = Field(
        default=None,
        description="Output framework: 'html' (inline styles) or 'tailwind' (classes)"
    )
    jsx: Optional[bool] = Field(
        default=None,
        description="Emit React style objects instead of CSS declarations (html only)"
    )

    @field_validator('node')
    @classmethod
    def validate_node(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        if 'type' not in v:
            raise ValueError("Node JSON must contain a 'type' field")
        return v


class FillsInput(SettingsOverrides):
    """Input model for fills conversion."""

    fills: List[Dict[str, Any]] = Field(
        ...,
        description="Figma paints, bottom-to-top as Figma stores them",
        min_length=1
    )
    kind: str = Field(
        default="bg",
        description="Tailwind color utility prefix for solid colors (bg, text, border, ...)",
        pattern=r"^[a-z][a-z-]*$"
    )


class NodeColorsInput(SettingsOverrides):
    """Input model for Tailwind color listing."""

    node: Dict[str, Any] = Field(..., description="Figma node JSON including children")


# ============================================================================
# Helper Functions
# ============================================================================

def _handle_error(e: Exception) -> str:
    """Format conversion errors for user-friendly messages."""
    if isinstance(e, ValidationError):
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
            for err in e.errors()
        )
        return f"Error: Invalid input: {problems}"
    elif isinstance(e, ValueError):
        return f"Error: {str(e)}"
    return f"Error: {type(e).__name__}: {str(e)}"


def _dialect_label(settings: StyleSettings) -> str:
    return "Tailwind v4" if settings.use_tailwind4 else "Tailwind v3"


# ============================================================================
# Tool Definitions
# ============================================================================

@mcp.tool(
    name="figma_node_styles",
    annotations={"title": "Generate Styles for Figma Nodes", **TOOL_ANNOTATIONS}
)
async def figma_node_styles(params: NodeStylesInput) -> str:
    """
    Generate inline styles or Tailwind classes for a Figma node and its children.

    Covers fills (solid colors and linear, radial, angular and diamond
    gradients), opacity, blend mode, visibility and rotation.

    Args:
        params: NodeStylesInput containing:
            - node (dict): Figma node JSON
            - framework: 'html' or 'tailwind'
            - jsx (bool): React style syntax for html output
            - use_tailwind4 (bool): Tailwind v4 instead of v3
            - round_tailwind_colors (bool): Snap to palette colors
            - response_format: 'markdown' or 'json'

    Returns:
        str: Styles per node plus conversion warnings
    """
    try:
        settings = params.settings(framework=params.framework, jsx=params.jsx)
        root = parse_node(params.node)
        results, diagnostics = walk_node_styles(root, settings)

        if params.response_format == ResponseFormat.JSON:
            return json.dumps({
                'framework': settings.framework.value,
                'tailwindVersion': 4 if settings.use_tailwind4 else 3,
                'jsx': settings.jsx,
                'nodes': [
                    {'id': r.node_id, 'name': r.name, 'type': r.node_type, 'styles': r.styles}
                    for r in results
                ],
                'warnings': diagnostics.warnings
            }, indent=2)

        target = _dialect_label(settings) if settings.framework == Framework.TAILWIND else \
            "HTML (JSX)" if settings.jsx else "HTML"
        lines = [
            f"# Styles: {root.name or root.type}",
            f"**Target:** {target}",
            ""
        ]
        for r in results:
            styles = f"`{r.styles}`" if r.styles else "_no styles_"
            lines.append(f"- **{r.name or r.node_type}** `{r.node_id}`: {styles}")

        if diagnostics.warnings:
            lines.extend(["", "## Warnings", ""])
            lines.extend(f"- {w}" for w in diagnostics.warnings)

        return "\n".join(lines)

    except Exception as e:
        return _handle_error(e)


@mcp.tool(
    name="figma_fill_to_tailwind",
    annotations={"title": "Convert Figma Fills to Tailwind", **TOOL_ANNOTATIONS}
)
async def figma_fill_to_tailwind(params: FillsInput) -> str:
    """
    Convert a Figma fills list to Tailwind classes.

    Returns both the flat color class (gradients approximated by their
    first stop) and the gradient classes of the top visible fill.

    Args:
        params: FillsInput containing:
            - fills (list): Figma paints
            - kind (str): Color utility prefix, e.g. 'bg' or 'text'
            - use_tailwind4 (bool): Tailwind v4 instead of v3
            - round_tailwind_colors (bool): Snap to palette colors
            - response_format: 'markdown' or 'json'

    Returns:
        str: Color and gradient classes
    """
    try:
        settings = params.settings()
        fills = parse_fills(params.fills)
        color = tailwind_color_from_fills(fills, params.kind, settings)
        gradient = tailwind_gradient_from_fills(fills, settings)

        if params.response_format == ResponseFormat.JSON:
            return json.dumps({
                'tailwindVersion': 4 if settings.use_tailwind4 else 3,
                'color': color,
                'gradient': gradient
            }, indent=2)

        lines = [
            "# Tailwind Fill",
            f"**Target:** {_dialect_label(settings)}",
            "",
            f"**Color:** `{color}`" if color else "**Color:** _none_",
            f"**Gradient:** `{gradient}`" if gradient else "**Gradient:** _none_"
        ]
        return "\n".join(lines)

    except Exception as e:
        return _handle_error(e)


@mcp.tool(
    name="figma_fill_to_css",
    annotations={"title": "Convert Figma Fills to CSS", **TOOL_ANNOTATIONS}
)
async def figma_fill_to_css(params: FillsInput) -> str:
    """
    Convert a Figma fills list to a CSS background value.

    Args:
        params: FillsInput containing:
            - fills (list): Figma paints
            - response_format: 'markdown' or 'json'

    Returns:
        str: CSS color (hex or rgba) or gradient for the top visible fill
    """
    try:
        fills = parse_fills(params.fills)
        gradient = html_gradient_from_fills(fills)
        background = gradient or html_color_from_fills(fills)

        if params.response_format == ResponseFormat.JSON:
            return json.dumps({
                'background': background,
                'type': 'gradient' if gradient else 'color' if background else None
            }, indent=2)

        if not background:
            return "No visible color or gradient fill."
        return "\n".join([
            "# CSS Fill",
            "",
            "```css",
            f"background: {background};",
            "```"
        ])

    except Exception as e:
        return _handle_error(e)


@mcp.tool(
    name="figma_list_tailwind_colors",
    annotations={"title": "List Tailwind Colors in Figma Node", **TOOL_ANNOTATIONS}
)
async def figma_list_tailwind_colors(params: NodeColorsInput) -> str:
    """
    List the Tailwind color tokens used by solid fills in a node tree.

    Args:
        params: NodeColorsInput containing:
            - node (dict): Figma node JSON
            - use_tailwind4 (bool): Tailwind v4 instead of v3
            - round_tailwind_colors (bool): Snap to palette colors
            - response_format: 'markdown' or 'json'

    Returns:
        str: Unique colors with Tailwind class, token type and hex
    """
    try:
        settings = params.settings()
        root = parse_node(params.node)

        colors = []
        seen = set()
        for node in root.walk():
            for fill in node.fills:
                if not isinstance(fill, SolidPaint) or not fill.visible:
                    continue
                color = tailwind_color(fill, settings)
                if color.export_value in seen:
                    continue
                seen.add(color.export_value)
                colors.append({
                    'name': node.name,
                    'exportValue': color.export_value,
                    'colorName': color.color_name,
                    'colorType': color.color_type,
                    'hex': color.hex,
                    'meta': color.meta
                })

        if params.response_format == ResponseFormat.JSON:
            return json.dumps({'colors': colors}, indent=2)

        lines = [
            f"# Tailwind Colors: {root.name or root.type}",
            f"**Target:** {_dialect_label(settings)}",
            ""
        ]
        if not colors:
            lines.append("_No solid colors found._")
        for c in colors:
            meta = f" ({c['meta']})" if c['meta'] else ""
            lines.append(f"- `{c['exportValue']}` {c['hex']} [{c['colorType']}] from **{c['name']}**{meta}")
        return "\n".join(lines)

    except Exception as e:
        return _handle_error(e)


# ============================================================================
# Entry Point
# ============================================================================

def main() -> None:
    # stdout carries the MCP stdio transport
    logging.basicConfig(
        level=os.environ.get("FIGMA_STYLES_LOG_LEVEL", "WARNING").upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logger.info("Starting figma_styles_mcp with defaults %s", StyleSettings.from_env())
    mcp.run()


if __name__ == "__main__":
    main()
