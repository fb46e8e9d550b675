"""
Catalog tools - export the static chord and scale catalogs.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import yaml

from chuk_mcp_chords.constants import ErrorMessages
from chuk_mcp_chords.models import CatalogExport

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_catalog_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register catalog export tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chords_export_catalog(format: str = "yaml") -> str:
        """
        Export every chord kind and scale with its offsets.

        Args:
            format: 'yaml' (default) or 'json'

        Returns:
            JSON string with the catalog in the requested format

        Example:
            chords_export_catalog(format="yaml")
        """
        try:
            catalog = CatalogExport.build()

            if format == "yaml":
                content = yaml.safe_dump(
                    catalog.to_yaml_dict(), default_flow_style=None, sort_keys=False
                )
                return json.dumps({"status": "success", "format": format, "yaml": content})
            if format == "json":
                return json.dumps(
                    {"status": "success", "format": format, "catalog": catalog.model_dump()}
                )

            return json.dumps(
                {
                    "status": "error",
                    "message": ErrorMessages.UNKNOWN_EXPORT_FORMAT.format(format=format),
                }
            )
        except Exception as e:
            logger.exception("Failed to export catalog")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chords_export_catalog"] = chords_export_catalog

    return tools
