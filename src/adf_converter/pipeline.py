"""Pipeline orchestrator: parse → (optional IR save) → generate.

Coordinates the two-stage conversion process and provides
convenience methods for partial workflows (parse-only, generate-from-IR).
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from adf_converter.config import Config
from adf_converter.exceptions import GenerationError, ParseError
from adf_converter.generators.adf_generator import AdfGenerator
from adf_converter.ir.report import ConversionReport
from adf_converter.ir.schema import Document
from adf_converter.parsers.base import BaseTextParser
from adf_converter.parsers.factory import create_parser

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates markdown → IR → ADF conversion."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config.default()
        self.last_report: ConversionReport | None = None

    @property
    def parser(self) -> BaseTextParser:
        return create_parser(self.config)

    def convert(self, text: str) -> dict[str, Any]:
        """Convert markdown text straight to an ADF document dict."""
        return self.generate(self.parse(text))

    def convert_file(
        self,
        input_path: Path,
        output_path: Path,
        save_ir: bool = False,
        ir_path: Path | None = None,
        save_report: bool = False,
        report_path: Path | None = None,
    ) -> Path:
        """Full pipeline: markdown file → IR → ADF JSON file.

        Args:
            input_path: Input markdown/text file.
            output_path: Output ADF JSON file.
            save_ir: Whether to save the IR as a JSON checkpoint.
            ir_path: Custom path for IR JSON. Defaults to {output_stem}.ir.json.
            save_report: Whether to save a conversion report JSON.
            report_path: Custom path for report JSON. Defaults to {output_stem}.report.json.

        Returns:
            Path to the generated ADF JSON file.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        text = self.read_text(input_path)
        parser = self.parser

        # Stage 1: Parse
        t0 = time.monotonic()
        document = parser.parse(text)
        t1 = time.monotonic()

        # Optional: save IR checkpoint
        if save_ir:
            if ir_path is None:
                ir_path = output_path.with_suffix(".ir.json")
            self.save_ir(document, ir_path)

        # Stage 2: Generate
        t2 = time.monotonic()
        result = AdfGenerator(self.config).write(document, output_path)
        t3 = time.monotonic()

        report = ConversionReport.from_document(
            document, source_file=input_path.name, parser=parser.name
        )
        report.line_count = len(parser.split_lines(text))
        report.parse_time_seconds = t1 - t0
        report.generate_time_seconds = t3 - t2
        report.total_time_seconds = t3 - t0
        self.last_report = report

        # Optional: save report
        if save_report:
            if report_path is None:
                report_path = output_path.with_suffix(".report.json")
            self.save_report(report, report_path)

        return result

    def parse(self, text: str) -> Document:
        """Stage 1: Parse text to IR."""
        return self.parser.parse(text)

    def generate(self, document: Document) -> dict[str, Any]:
        """Stage 2: Render IR as an ADF document dict."""
        return AdfGenerator(self.config).generate(document)

    def inspect(self, text: str) -> str:
        """Parse text and return the IR as a formatted JSON string."""
        return self.parse(text).to_json()

    def from_ir(self, ir_path: Path, output_path: Path) -> Path:
        """Generate ADF JSON from a saved IR JSON file.

        Args:
            ir_path: Path to the IR JSON file.
            output_path: Output ADF JSON file path.

        Returns:
            Path to the generated file.
        """
        ir_path = Path(ir_path)
        output_path = Path(output_path)

        logger.info("Loading IR from %s", ir_path)
        try:
            json_str = ir_path.read_text(encoding="utf-8")
            document = Document.from_json(json_str)
        except FileNotFoundError:
            raise ParseError(f"IR file not found: {ir_path}")
        except (OSError, ValidationError) as exc:
            raise ParseError(f"Failed to load IR from {ir_path}: {exc}") from exc

        return AdfGenerator(self.config).write(document, output_path)

    @staticmethod
    def read_text(path: Path) -> str:
        """Read a UTF-8 input file, wrapping failures in ParseError."""
        path = Path(path)
        logger.info("Reading %s", path)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ParseError(f"Input file not found: {path}")
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseError(f"Failed to read {path}: {exc}") from exc

    @staticmethod
    def save_ir(document: Document, path: Path) -> Path:
        """Save IR to a JSON file.

        Args:
            document: The IR to save.
            path: Output JSON file path.

        Returns:
            The path written to.
        """
        path = Path(path)
        logger.info("Saving IR to %s", path)
        try:
            path.write_text(document.to_json(), encoding="utf-8")
        except OSError as exc:
            raise GenerationError(f"Failed to save IR to {path}: {exc}") from exc
        return path

    @staticmethod
    def save_report(report: ConversionReport, path: Path) -> Path:
        """Save a conversion report to a JSON file."""
        path = Path(path)
        try:
            path.write_text(report.to_json(), encoding="utf-8")
        except OSError as exc:
            raise GenerationError(f"Failed to save report to {path}: {exc}") from exc
        logger.info("Saved report to %s", path)
        return path
