"""SIF (Salary Information File) codec."""

from __future__ import annotations

from wpsif.sif.decoder import parse_sif
from wpsif.sif.encoder import generate_sif, sif_filename

__all__ = ["generate_sif", "parse_sif", "sif_filename"]
