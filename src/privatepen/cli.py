from __future__ import annotations

import asyncio
import json
import logging
from contextlib import contextmanager
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import Any, Dict, Iterator

import typer
import yaml

from .config import PipelineConfig, load_config
from .errors import AnalysisFailure, EmptyInputError, StorageError
from .models import SimplificationResult
from .pipeline import AnalysisOutcome, Operation
from .session import AnalysisSession
from .simplify import describe_changes
from .storage import ExtensionSettings, RecordStore
from .style_profile import analyze_writing_style

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="PrivatePen writing assistant CLI.", no_args_is_help=True)
stats_app = typer.Typer(help="Inspect or reset usage statistics.", no_args_is_help=True)
snippets_app = typer.Typer(help="Manage saved text snippets.", no_args_is_help=True)
settings_app = typer.Typer(help="Inspect or change extension settings.", no_args_is_help=True)
app.add_typer(stats_app, name="stats")
app.add_typer(snippets_app, name="snippets")
app.add_typer(settings_app, name="settings")

INPUT_PATH_OPTION = typer.Option(
    None, "--input-path", "-i", exists=True, readable=True, dir_okay=False
)
TEXT_OPTION = typer.Option(None, "--text", "-t", help="Text to analyze inline.")
CONFIG_OPTION = typer.Option(None, "--config", "-c")
SURFACE_OPTION = typer.Option(
    None, "--surface", "-s", help="Surface preset: toolbar, popup or sidepanel."
)
STORE_OPTION = typer.Option(None, "--store", help="Path to the JSON record store.")
NO_STATS_OPTION = typer.Option(
    False, "--no-stats", help="Do not record this run in the usage statistics."
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Rule-based grammar, tone and rewriting helpers."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def grammar(
    input_path: Path | None = INPUT_PATH_OPTION,
    text: str | None = TEXT_OPTION,
    config: Path | None = CONFIG_OPTION,
    surface: str | None = SURFACE_OPTION,
    store: Path | None = STORE_OPTION,
    no_stats: bool = NO_STATS_OPTION,
) -> None:
    """Check text for spacing, punctuation, capitalization and style issues."""
    _run(Operation.GRAMMAR, input_path, text, config, surface, store, no_stats)


@app.command()
def tone(
    input_path: Path | None = INPUT_PATH_OPTION,
    text: str | None = TEXT_OPTION,
    config: Path | None = CONFIG_OPTION,
    surface: str | None = SURFACE_OPTION,
    store: Path | None = STORE_OPTION,
    no_stats: bool = NO_STATS_OPTION,
) -> None:
    """Classify tone and sentiment."""
    _run(Operation.TONE, input_path, text, config, surface, store, no_stats)


@app.command()
def summarize(
    input_path: Path | None = INPUT_PATH_OPTION,
    text: str | None = TEXT_OPTION,
    config: Path | None = CONFIG_OPTION,
    surface: str | None = SURFACE_OPTION,
    store: Path | None = STORE_OPTION,
    no_stats: bool = NO_STATS_OPTION,
) -> None:
    """Produce brief and detailed extractive summaries."""
    _run(Operation.SUMMARIZE, input_path, text, config, surface, store, no_stats)


@app.command()
def rephrase(
    input_path: Path | None = INPUT_PATH_OPTION,
    text: str | None = TEXT_OPTION,
    config: Path | None = CONFIG_OPTION,
    surface: str | None = SURFACE_OPTION,
    store: Path | None = STORE_OPTION,
    no_stats: bool = NO_STATS_OPTION,
) -> None:
    """Rewrite text as formal, simple and creative variants."""
    _run(Operation.REPHRASE, input_path, text, config, surface, store, no_stats)


@app.command()
def expand(
    input_path: Path | None = INPUT_PATH_OPTION,
    text: str | None = TEXT_OPTION,
    config: Path | None = CONFIG_OPTION,
    surface: str | None = SURFACE_OPTION,
    store: Path | None = STORE_OPTION,
    no_stats: bool = NO_STATS_OPTION,
) -> None:
    """Expand short text or condense long text."""
    _run(Operation.EXPAND, input_path, text, config, surface, store, no_stats)


@app.command()
def simplify(
    input_path: Path | None = INPUT_PATH_OPTION,
    text: str | None = TEXT_OPTION,
    config: Path | None = CONFIG_OPTION,
    surface: str | None = SURFACE_OPTION,
    store: Path | None = STORE_OPTION,
    no_stats: bool = NO_STATS_OPTION,
) -> None:
    """Replace complex vocabulary with plain words."""
    _run(Operation.SIMPLIFY, input_path, text, config, surface, store, no_stats)


@app.command()
def bullets(
    input_path: Path | None = INPUT_PATH_OPTION,
    text: str | None = TEXT_OPTION,
    config: Path | None = CONFIG_OPTION,
    surface: str | None = SURFACE_OPTION,
    store: Path | None = STORE_OPTION,
    no_stats: bool = NO_STATS_OPTION,
) -> None:
    """Format sentences as bullet, numbered, checkbox and arrow lists."""
    _run(Operation.BULLETS, input_path, text, config, surface, store, no_stats)


@app.command()
def translate(
    input_path: Path | None = INPUT_PATH_OPTION,
    text: str | None = TEXT_OPTION,
    config: Path | None = CONFIG_OPTION,
    surface: str | None = SURFACE_OPTION,
    store: Path | None = STORE_OPTION,
    no_stats: bool = NO_STATS_OPTION,
) -> None:
    """Show placeholder translations."""
    _run(Operation.TRANSLATE, input_path, text, config, surface, store, no_stats)


@app.command()
def profile(
    input_path: Path = typer.Option(
        ..., "--input-path", "-i", exists=True, readable=True, dir_okay=False
    ),
    store: Path | None = STORE_OPTION,
    config: Path | None = CONFIG_OPTION,
) -> None:
    """Build a writing-style profile from a sample file and save it."""
    cfg = _load_pipeline_config(config, None)
    sample = input_path.read_text(encoding="utf-8")
    style = analyze_writing_style(sample)
    with _store_errors():
        _store(store, cfg).save_style_profile(style)
    typer.echo(json.dumps(style.to_dict(), indent=2, ensure_ascii=False))


@app.command("print-config")
def print_config(surface: str | None = SURFACE_OPTION) -> None:
    """Print the configuration preset as YAML."""
    cfg = _load_pipeline_config(None, surface)
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


@stats_app.command("show")
def stats_show(store: Path | None = STORE_OPTION) -> None:
    """Print the accumulated usage statistics."""
    with _store_errors():
        stats = _store(store).read_stats()
    typer.echo(json.dumps(stats.to_dict(), indent=2))


@stats_app.command("reset")
def stats_reset(
    store: Path | None = STORE_OPTION,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Reset all usage statistics."""
    if not yes:
        typer.confirm("Are you sure you want to reset all statistics?", abort=True)
    with _store_errors():
        _store(store).reset_stats()
    typer.echo("Statistics reset")


@snippets_app.command("add")
def snippets_add(
    title: str = typer.Option(..., "--title"),
    content: str = typer.Option(..., "--content"),
    store: Path | None = STORE_OPTION,
) -> None:
    """Save a new snippet."""
    with _store_errors():
        try:
            _store(store).add_snippet(title, content)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
    typer.echo("Snippet saved!")


@snippets_app.command("list")
def snippets_list(store: Path | None = STORE_OPTION) -> None:
    """List saved snippets in insertion order."""
    with _store_errors():
        snippets = _store(store).list_snippets()
    typer.echo(
        json.dumps(
            [{"index": idx, **s.to_dict()} for idx, s in enumerate(snippets)],
            indent=2,
            ensure_ascii=False,
        )
    )


@snippets_app.command("delete")
def snippets_delete(
    index: int = typer.Argument(..., help="Position shown by 'snippets list'."),
    store: Path | None = STORE_OPTION,
) -> None:
    """Delete the snippet at the given position."""
    with _store_errors():
        try:
            removed = _store(store).delete_snippet(index)
        except IndexError as exc:
            raise typer.BadParameter(str(exc)) from exc
    typer.echo(f"Deleted snippet '{removed.title}'")


@settings_app.command("show")
def settings_show(store: Path | None = STORE_OPTION) -> None:
    """Print the current settings."""
    with _store_errors():
        settings = _store(store).read_settings()
    typer.echo(json.dumps(settings.to_dict(), indent=2))


@settings_app.command("set")
def settings_set(
    privacy_mode: bool | None = typer.Option(None, "--privacy-mode/--no-privacy-mode"),
    theme: str | None = typer.Option(None, "--theme", help="auto, light or dark."),
    whisper_mode: bool | None = typer.Option(None, "--whisper-mode/--no-whisper-mode"),
    auto_complete: bool | None = typer.Option(None, "--auto-complete/--no-auto-complete"),
    language: str | None = typer.Option(None, "--language"),
    store: Path | None = STORE_OPTION,
) -> None:
    """Change one or more settings."""
    record_store = _store(store)
    with _store_errors():
        current = record_store.read_settings()
    overrides: Dict[str, Any] = {}
    if privacy_mode is not None:
        overrides["privacy_mode"] = privacy_mode
    if theme is not None:
        overrides["theme"] = theme
    if whisper_mode is not None:
        overrides["whisper_mode"] = whisper_mode
    if auto_complete is not None:
        overrides["auto_complete"] = auto_complete
    if language is not None:
        overrides["language"] = language
    try:
        updated = dc_replace(current, **overrides)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    with _store_errors():
        record_store.save_settings(updated)
    typer.echo("Settings saved successfully!")


def main() -> None:
    app()


def _run(
    operation: Operation,
    input_path: Path | None,
    text: str | None,
    config: Path | None,
    surface: str | None,
    store: Path | None,
    no_stats: bool,
) -> None:
    """Submit one operation through a session, print the JSON outcome and record stats."""
    cfg = _load_pipeline_config(config, surface)
    source = _read_text(input_path, text)
    session = AnalysisSession(config=cfg)
    try:
        outcome = asyncio.run(session.submit(operation, source))
    except EmptyInputError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except AnalysisFailure as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(json.dumps(_outcome_payload(outcome), indent=2, ensure_ascii=False))

    if no_stats:
        return
    try:
        _store(store, cfg).update_stats(outcome.stats_delta())
    except StorageError as exc:
        # Stats are best effort; the analysis already succeeded.
        LOGGER.warning("Could not update writing stats: %s", exc)
        typer.echo(f"Warning: stats not updated ({exc})", err=True)


def _load_pipeline_config(config: Path | None, surface: str | None) -> PipelineConfig:
    try:
        return load_config(config, surface=surface)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _read_text(input_path: Path | None, text: str | None) -> str:
    """Resolve the text to analyze from exactly one of --input-path or --text."""
    if input_path is not None and text is not None:
        raise typer.BadParameter("Use either --input-path or --text, not both.")
    if input_path is not None:
        return input_path.read_text(encoding="utf-8")
    if text is not None:
        return text
    raise typer.BadParameter("Provide text with --input-path or --text.")


@contextmanager
def _store_errors() -> Iterator[None]:
    """Turn an unreadable or invalid record store into a CLI error."""
    try:
        yield
    except StorageError as exc:
        LOGGER.error("Record store error: %s", exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _store(path: Path | None, config: PipelineConfig | None = None) -> RecordStore:
    if path is not None:
        return RecordStore(path)
    if config is not None and config.store_path:
        return RecordStore(config.store_path)
    return RecordStore()


def _outcome_payload(outcome: AnalysisOutcome) -> dict[str, Any]:
    payload = outcome.to_dict()
    if isinstance(outcome.result, SimplificationResult):
        payload["message"] = describe_changes(outcome.result)
    return payload


if __name__ == "__main__":
    main()
