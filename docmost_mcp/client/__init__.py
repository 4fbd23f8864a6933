"""
Client Module - Docmost API Access
"""

from docmost_mcp.client.docmost_client import DocmostClient, DEFAULT_POSITION

__all__ = [
    "DocmostClient",
    "DEFAULT_POSITION",
]
