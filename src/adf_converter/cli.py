"""Click CLI for the ADF converter.

Commands:
    convert        — Markdown file → ADF JSON
    inspect        — Parse markdown to IR JSON (for debugging)
    from-ir        — Generate ADF JSON from a saved IR JSON file
    issue-payload  — Build a Jira issue creation request body
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from adf_converter.config import Config
from adf_converter.exceptions import AdfConverterError
from adf_converter.pipeline import Pipeline
from adf_converter.tickets import append_metadata, build_issue_payload


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to a YAML configuration file.",
)
@click.option(
    "--engine",
    type=click.Choice(["markdown", "plain"]),
    default=None,
    help="Override the configured parser engine.",
)
@click.option(
    "--unescape",
    is_flag=True,
    help="Strip backslash escapes (\\*, \\`, \\# ...) before parsing.",
)
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    config_path: Path | None,
    engine: str | None,
    unescape: bool,
) -> None:
    """Convert assistant markdown into Atlassian Document Format."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = Config.load(config_path)
    except AdfConverterError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)

    if verbose:
        config.verbose = True
    if engine:
        config.parser.engine = engine
    if unescape:
        config.parser.unescape = True

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["pipeline"] = Pipeline(config)


@main.command()
@click.argument("input_md", type=click.Path(exists=True, path_type=Path))
@click.argument("output_json", type=click.Path(path_type=Path), required=False)
@click.option("--save-ir", is_flag=True, help="Save IR JSON checkpoint alongside output.")
@click.option(
    "--ir-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Custom path for the IR JSON file.",
)
@click.option("--report", is_flag=True, help="Save conversion report JSON alongside output.")
@click.option(
    "--report-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Custom path for the report JSON file.",
)
@click.pass_context
def convert(
    ctx: click.Context,
    input_md: Path,
    output_json: Path | None,
    save_ir: bool,
    ir_path: Path | None,
    report: bool,
    report_path: Path | None,
) -> None:
    """Convert a markdown file to ADF JSON.

    Without OUTPUT_JSON the document is printed to stdout.
    """
    pipeline: Pipeline = ctx.obj["pipeline"]

    if output_json is None and (save_ir or report or ir_path or report_path):
        raise click.UsageError(
            "--save-ir, --ir-path, --report and --report-path require OUTPUT_JSON."
        )

    try:
        if output_json is None:
            text = pipeline.read_text(input_md)
            adf = pipeline.convert(text)
            click.echo(json.dumps(adf, indent=pipeline.config.output.indent, ensure_ascii=False))
            return

        result = pipeline.convert_file(
            input_md,
            output_json,
            save_ir=save_ir,
            ir_path=ir_path,
            save_report=report,
            report_path=report_path,
        )
        click.echo(f"Generated: {result}")

        if report and pipeline.last_report:
            rpt = pipeline.last_report
            click.echo(
                f"Report: {rpt.block_count} blocks, "
                f"{rpt.heading_count} headings, "
                f"{rpt.code_block_count} code blocks, "
                f"{rpt.bullet_list_count + rpt.ordered_list_count} lists"
            )
    except AdfConverterError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("input_md", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def inspect(ctx: click.Context, input_md: Path) -> None:
    """Parse a markdown file and output its IR as JSON (for debugging)."""
    pipeline: Pipeline = ctx.obj["pipeline"]

    try:
        json_str = pipeline.inspect(pipeline.read_text(input_md))
        click.echo(json_str)
    except AdfConverterError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)


@main.command("from-ir")
@click.argument("ir_json", type=click.Path(exists=True, path_type=Path))
@click.argument("output_json", type=click.Path(path_type=Path))
@click.pass_context
def from_ir(ctx: click.Context, ir_json: Path, output_json: Path) -> None:
    """Generate ADF JSON from a saved IR JSON file."""
    pipeline: Pipeline = ctx.obj["pipeline"]

    try:
        result = pipeline.from_ir(ir_json, output_json)
        click.echo(f"Generated: {result}")
    except AdfConverterError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)


@main.command("issue-payload")
@click.argument("input_md", type=click.Path(exists=True, path_type=Path))
@click.option("--summary", required=True, help="Issue title.")
@click.option(
    "--with-metadata",
    is_flag=True,
    help="Append a source/timestamp metadata section to the description.",
)
@click.option("--source", default="Slack Bot", show_default=True, help="Source named in the metadata.")
@click.pass_context
def issue_payload(
    ctx: click.Context,
    input_md: Path,
    summary: str,
    with_metadata: bool,
    source: str,
) -> None:
    """Print a Jira issue creation request body for a markdown description."""
    pipeline: Pipeline = ctx.obj["pipeline"]

    try:
        description = pipeline.read_text(input_md)
        if with_metadata:
            description = append_metadata(description, source=source)
        payload = build_issue_payload(summary, description, pipeline.config, pipeline)
        click.echo(json.dumps(payload, indent=pipeline.config.output.indent, ensure_ascii=False))
    except AdfConverterError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)
