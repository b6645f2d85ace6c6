"""
Design tab module.

Public Interface:
- DesignService: Loads concept, performance and audience options and renders the tab
- encode_selection / decode_selection: Boundary encoding of grid cell values
"""

from .grid import GridSelection, decode_selection, encode_selection
from .service import DesignService

__all__ = ["DesignService", "GridSelection", "encode_selection", "decode_selection"]
