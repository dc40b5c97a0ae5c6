"""
Bird Conservatory — Reporting
Signs, map, index, and food listings, plus Word and Excel exports.
"""

from .signs import (
    describe_bird,
    assignment_message,
    lookup_message,
    enclosure_sign,
    sign_for,
    conservatory_map,
    bird_index,
    food_requirements,
)
from .documents import (
    export_docx,
    export_workbook,
    export_all,
)

__all__ = [
    # Text
    "describe_bird",
    "assignment_message",
    "lookup_message",
    "enclosure_sign",
    "sign_for",
    "conservatory_map",
    "bird_index",
    "food_requirements",

    # Documents
    "export_docx",
    "export_workbook",
    "export_all",
]
