"""
Input/Output Manager
Writes exported reports to disk.
"""
import logging
import os

from extrusionviscosity.model.export import build_report
from extrusionviscosity.model.state import SessionState

# Get module logger
logger = logging.getLogger(__name__)


class IOManager:

    @staticmethod
    def export_report(text: str, filepath: str) -> None:
        """
        Writes report text to `filepath`.
        The UTF-8 BOM lets spreadsheet tools pick up the encoding of '°' and '·'.
        """
        logger.info(f"Exporting report to: {filepath}")
        parent = os.path.dirname(os.path.abspath(filepath))
        if not os.path.isdir(parent):
            raise FileNotFoundError(f"Target directory does not exist: {parent}")

        try:
            with open(filepath, "w", encoding="utf-8-sig", newline="") as f:
                f.write(text)
        except OSError as e:
            logger.exception(f"Failed to export report: {e}")
            raise

        logger.info(f"Report exported ({len(text)} characters).")

    @staticmethod
    def export_session(state: SessionState, filepath: str) -> str:
        """Formats the report for the session's current point and writes it."""
        text = build_report(state.point, state.config.model, state.config)
        IOManager.export_report(text, filepath)
        return text
