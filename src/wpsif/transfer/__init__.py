"""Import/export boundary between file contents and the core codec."""

from __future__ import annotations

from wpsif.transfer.exports import export_employees_json, prepare_sif_export
from wpsif.transfer.imports import decode_upload, import_employees_json, import_sif

__all__ = [
    "decode_upload",
    "export_employees_json",
    "import_employees_json",
    "import_sif",
    "prepare_sif_export",
]
