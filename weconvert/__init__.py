# weconvert/__init__.py
from weconvert.utils.conversions import convert, convert_by_name
from weconvert.services.selection import default_selection, recompute

__all__ = ["convert", "convert_by_name", "default_selection", "recompute"]
