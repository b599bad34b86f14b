from .diagnostics import analyze_extraction, build_recommendations
from .doctor import run_doctor_checks
from .importer import WorkorderImportService, validate_workorder_url

__all__ = [
    "WorkorderImportService",
    "analyze_extraction",
    "build_recommendations",
    "run_doctor_checks",
    "validate_workorder_url",
]
