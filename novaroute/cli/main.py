"""novaroute command-line interface.

Commands:
- novaroute classify <text>
- novaroute detect <text>
- novaroute rules
- novaroute config
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from novaroute import __logo__
from novaroute.config.loader import get_config_path, load_config
from novaroute.config.schema import Config
from novaroute.intent import (
    HEURISTIC_RULES,
    PATTERN_FAMILIES,
    PatternDetector,
    UserIntent,
    build_intent_classifier,
)
from novaroute.utils.logging import configure_logging

console = Console()

app = typer.Typer(
    name="novaroute",
    help=f"{__logo__} novaroute - route chat input to CHAT, METADATA or CONTENT",
    no_args_is_help=True,
)

INTENT_STYLES = {
    UserIntent.CHAT: "cyan",
    UserIntent.METADATA: "magenta",
    UserIntent.CONTENT: "green",
}


def _mask(secret: str) -> str:
    if not secret:
        return "[dim]not set[/dim]"
    return f"{secret[:4]}…" if len(secret) > 8 else "****"


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Path to config file (default: ~/.novaroute/config.json)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
):
    """Load configuration and set up logging for every command."""
    config = load_config(config_path)
    configure_logging(config.logging, verbose=verbose)
    ctx.obj = {"config": config, "config_path": config_path or get_config_path()}


@app.command()
def classify(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="The chat input to classify"),
    selection: bool = typer.Option(False, "--selection", help="Pretend the editor has a text selection"),
    offline: bool = typer.Option(False, "--offline", help="Skip the model, use heuristics only"),
):
    """Classify a line of chat input."""
    config: Config = ctx.obj["config"]
    if offline:
        config = config.model_copy(deep=True)
        config.classifier.ai_enabled = False

    classifier = build_intent_classifier(config)
    decision = asyncio.run(classifier.classify(text, has_selection=selection))

    style = INTENT_STYLES[decision.intent]
    console.print(f"[bold {style}]{decision.intent.value}[/bold {style}]")
    detail = f"layer: {decision.layer}"
    if decision.rule:
        detail += f", rule: {decision.rule}"
    console.print(f"[dim]{detail}[/dim]")


@app.command()
def detect(
    text: str = typer.Argument(..., help="Text to run through the pattern detector"),
):
    """Show the pattern detector verdict for a piece of text."""
    result = PatternDetector().classify(text)

    table = Table(title="Pattern Detector")
    table.add_column("Type", style="cyan")
    table.add_column("Confidence", justify="right")
    table.add_column("Matched patterns")
    table.add_row(
        result.type.value,
        f"{result.confidence:.2f}",
        ", ".join(result.matched_patterns) or "-",
    )
    console.print(table)


@app.command()
def rules():
    """List the heuristic cascade and the pattern families."""
    cascade = Table(title="Heuristic cascade (evaluation order)")
    cascade.add_column("#", justify="right", style="dim")
    cascade.add_column("Rule", style="cyan")
    for position, rule in enumerate(HEURISTIC_RULES, start=1):
        cascade.add_row(str(position), rule.name)
    console.print(cascade)

    families = Table(title="Pattern families")
    families.add_column("Family", style="cyan")
    families.add_column("Rules")
    for family, family_rules in PATTERN_FAMILIES.items():
        families.add_row(family.value, ", ".join(rule.name for rule in family_rules))
    console.print(families)


@app.command("config")
def show_config(ctx: typer.Context):
    """Show the effective configuration."""
    config: Config = ctx.obj["config"]

    console.print(f"\n[bold]Config file:[/bold] {ctx.obj['config_path']}\n")

    table = Table(show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("provider.apiKey", _mask(config.provider.api_key))
    table.add_row("provider.apiBase", config.provider.api_base or "[dim]default[/dim]")
    table.add_row("classifier.aiEnabled", str(config.classifier.ai_enabled))
    table.add_row("classifier.model", config.classifier.model)
    table.add_row("classifier.temperature", str(config.classifier.temperature))
    table.add_row("classifier.maxTokens", str(config.classifier.max_tokens))
    table.add_row("classifier.timeoutMs", str(config.classifier.timeout_ms or "[dim]provider default[/dim]"))
    table.add_row("logging.level", config.logging.level)
    table.add_row("logging.logFile", config.logging.log_file or "[dim]off[/dim]")
    console.print(table)

    if config.classifier.ai_enabled and not config.provider.is_configured:
        console.print("[yellow]No provider configured: classification uses heuristics only[/yellow]")


if __name__ == "__main__":
    app()
