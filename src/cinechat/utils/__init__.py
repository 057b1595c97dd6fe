"""Utility modules for CineChat."""

from .data_prep import export_to_json, prepare_export, load_records_from_json

__all__ = [
    "export_to_json",
    "prepare_export",
    "load_records_from_json",
]
