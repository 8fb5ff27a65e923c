# lw_webdriver/decorators/__init__.py
#
# Re-exports decorators from their respective modules.

from .ensure import ensure_selected, ensure_tab_selected

__all__ = [
    "ensure_selected",
    "ensure_tab_selected",
]
