"""Typer CLI — ``sitegen generate``, ``serve``, ``poll``, ``templates`` and ``validate``."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from sitegen.config import load_config
from sitegen.schemas.config import GeneratorSettings
from sitegen.schemas.job import JobStatus

# Load .env file from project root (if it exists)
load_dotenv()

app = typer.Typer(
    name="sitegen",
    help="Website generator — turn a business's web presence into a ready-to-render site config.",
    no_args_is_help=True,
)
console = Console()

# How often the in-process run refreshes its progress bar
_REFRESH_SECONDS = 0.1


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _load_settings(config: Path | None) -> GeneratorSettings:
    try:
        return load_config(config)
    except Exception as exc:
        console.print(f"[red]Config validation failed:[/] {exc}")
        raise typer.Exit(code=1)


@app.command()
def validate(
    config: Path = typer.Option(..., "--config", "-c", help="Path to config.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Validate a configuration file without generating anything."""
    _setup_logging(verbose)
    cfg = _load_settings(config)

    console.print("[green]Config is valid![/]\n")
    console.print(f"  API base URL:   {cfg.api_base_url}")
    console.print(f"  Poll interval:  {cfg.poll_interval_seconds}s (gives up after {cfg.poll_max_failures} failures)")
    console.print(f"  Server:         {cfg.server.host}:{cfg.server.port}")
    console.print(f"  Signals file:   {cfg.signals_path or '(none)'}")
    console.print(f"  Validate URLs:  {cfg.assets.validate_urls}")
    console.print(f"  Unsplash:       {'configured' if cfg.assets.unsplash_access_key else '(not configured)'}")


@app.command()
def templates() -> None:
    """List the template catalog."""
    from sitegen.components.recommender.catalog import CATALOG

    table = Table(title="Templates")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Sections")
    table.add_column("Tones")
    table.add_column("Categories")
    for template in CATALOG:
        table.add_row(
            template.id,
            template.name,
            ", ".join(template.default_sections),
            ", ".join(sorted(t.value for t in template.tones)),
            ", ".join(sorted(template.categories)),
        )
    console.print(table)


@app.command()
def generate(
    business_id: str = typer.Option(..., "--business-id", "-b", help="Business identifier the job is keyed by."),
    url: str = typer.Option(..., "--url", "-u", help="The business's existing website."),
    text: str = typer.Option(None, "--text", "-t", help="Free-text description from the business owner."),
    signals: Path = typer.Option(None, "--signals", "-s", help="YAML/JSON file of pre-scraped signals keyed by URL."),
    output: Path = typer.Option(Path("output"), "--output", "-o", help="Directory for website-config.json and the summary."),
    config: Path = typer.Option(None, "--config", "-c", help="Path to config.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Run the whole generation pipeline in-process and write the results.

    Example:

        sitegen generate -b acme --url https://acme.example --signals signals.yml
    """
    _setup_logging(verbose)
    cfg = _load_settings(config)

    from sitegen.shared.errors import SourceValidationError

    try:
        ok = asyncio.run(_run_generation(cfg, business_id, url, text, signals, output))
    except SourceValidationError as exc:
        console.print(f"[red]{exc}[/]")
        raise typer.Exit(code=2)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Could not load signals:[/] {exc}")
        raise typer.Exit(code=1)
    if not ok:
        raise typer.Exit(code=1)


async def _run_generation(
    cfg: GeneratorSettings,
    business_id: str,
    url: str,
    text: str | None,
    signals: Path | None,
    out_dir: Path,
) -> bool:
    """Drive one job to completion, rendering progress from status reads."""
    from sitegen.components.orchestrator.orchestrator import GenerationOrchestrator
    from sitegen.components.recommender.recommender import recommend
    from sitegen.output.markdown import render_generation_summary
    from sitegen.shared.assets import StockAssetResolver
    from sitegen.shared.progress import GenerationProgress
    from sitegen.shared.scraper import StaticScraper

    signals_path = signals or (Path(cfg.signals_path) if cfg.signals_path else None)
    if signals_path is not None:
        scraper = StaticScraper.from_file(signals_path)
    else:
        console.print("[yellow]No signals file given — only URLs added at runtime can be scraped.[/]")
        scraper = StaticScraper()

    orchestrator = GenerationOrchestrator(scraper, StockAssetResolver(cfg.assets))

    with GenerationProgress(business_id) as progress:
        progress.print_phase(f"Generating website for {business_id}")
        snapshot = await orchestrator.start(business_id, url, conversational_text=text)
        progress.update(snapshot)
        while not snapshot.is_terminal:
            await asyncio.sleep(_REFRESH_SECONDS)
            snapshot = orchestrator.status(business_id)
            progress.update(snapshot)

    if snapshot.status is JobStatus.FAILED:
        console.print(f"\n[red]Website generation failed:[/] {snapshot.error}")
        return False

    job = orchestrator.store.get(business_id)
    recommendation = recommend(job.profile, orchestrator.catalog) if job and job.profile else None

    out_dir.mkdir(parents=True, exist_ok=True)
    config_path = out_dir / "website-config.json"
    config_path.write_text(snapshot.website_config.model_dump_json(by_alias=True, indent=2))
    console.print(f"\n[green]Website config written to:[/] {config_path}")

    md_path = out_dir / "generation-summary.md"
    md_path.write_text(
        render_generation_summary(
            snapshot,
            profile=job.profile if job else None,
            recommendation=recommendation,
        )
    )
    console.print(f"[green]Summary written to:[/] {md_path}")
    return True


@app.command()
def serve(
    config: Path = typer.Option(None, "--config", "-c", help="Path to config.yml"),
    signals: Path = typer.Option(None, "--signals", "-s", help="YAML/JSON file of pre-scraped signals keyed by URL."),
    host: str = typer.Option(None, "--host", help="Overrides server.host from the config."),
    port: int = typer.Option(None, "--port", help="Overrides server.port from the config."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Serve the start/status API with uvicorn."""
    import uvicorn

    from sitegen.api import create_app
    from sitegen.components.orchestrator.orchestrator import GenerationOrchestrator
    from sitegen.shared.assets import StockAssetResolver
    from sitegen.shared.scraper import StaticScraper

    _setup_logging(verbose)
    cfg = _load_settings(config)

    signals_path = signals or (Path(cfg.signals_path) if cfg.signals_path else None)
    try:
        scraper = StaticScraper.from_file(signals_path) if signals_path else StaticScraper()
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Could not load signals:[/] {exc}")
        raise typer.Exit(code=1)

    api = create_app(GenerationOrchestrator(scraper, StockAssetResolver(cfg.assets)))
    uvicorn.run(api, host=host or cfg.server.host, port=port or cfg.server.port)


@app.command()
def poll(
    business_id: str = typer.Option(..., "--business-id", "-b"),
    base_url: str = typer.Option(None, "--base-url", help="Overrides api_base_url from the config."),
    config: Path = typer.Option(None, "--config", "-c", help="Path to config.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Follow a job on a running server until it finishes."""
    _setup_logging(verbose)
    cfg = _load_settings(config)

    from sitegen.shared.errors import TransientIOError

    try:
        snapshot = asyncio.run(_run_poll(cfg, business_id, base_url or cfg.api_base_url))
    except TransientIOError as exc:
        console.print(f"[red]{exc}[/]")
        raise typer.Exit(code=1)

    if snapshot.status is JobStatus.FAILED:
        console.print(f"[red]Website generation failed:[/] {snapshot.error}")
        raise typer.Exit(code=1)
    console.print(f"[green]Website ready[/] (template: {snapshot.template_id})")


async def _run_poll(cfg: GeneratorSettings, business_id: str, base_url: str):
    from sitegen.shared.poller import StatusPoller
    from sitegen.shared.progress import GenerationProgress

    poller = StatusPoller(
        base_url,
        interval=cfg.poll_interval_seconds,
        max_failures=cfg.poll_max_failures,
    )
    with GenerationProgress(business_id) as progress:
        return await poller.poll(business_id, on_update=progress.update)
