"""
Result rendering module.

Public Interface:
- ResultRenderer: Turns result sets into display-ready row blocks
- render_status / render_error: Status and inline error blocks for the results area
- render_outcome: Results-area markup for a query outcome
"""

from .results import ResultRenderer, RenderedResults, render_error, render_outcome, render_status

__all__ = ["ResultRenderer", "RenderedResults", "render_error", "render_outcome", "render_status"]
