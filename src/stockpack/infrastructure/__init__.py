"""Infrastructure layer - provisioning, formatters and diagram rendering."""

from .cut_diagram_renderer import CutDiagramRenderer
from .formatters import JsonExporter, PackingReportFormatter
from .provisioning import RowProvisioner

__all__ = [
    "CutDiagramRenderer",
    "JsonExporter",
    "PackingReportFormatter",
    "RowProvisioner",
]
