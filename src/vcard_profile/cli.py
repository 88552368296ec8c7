from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .config import Settings, load_settings
from .errors import ConfigurationFileError, MalformedComplexAttributeError
from .io import dump_attribute_maps, read_attribute_maps, read_card_files, write_attribute_maps

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="vcard-profile: convert profile vCards to attribute maps (JSON) and back.",
)
console = Console(stderr=True)

_CONFIG_HELP = "TOML file with cardToAttributeMapping / complexAttributeGroups tables"


def _settings(config: Path | None) -> Settings:
    try:
        return load_settings(config)
    except ConfigurationFileError as exc:
        console.print(f"[bold red]Configuration error:[/bold red] {exc}")
        raise typer.Exit(code=2)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser decisions"),
) -> None:
    log = logging.getLogger("vcard_profile")
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=console, show_time=False, show_path=False))


# ── `decode` command ───────────────────────────────────────────────────────────

@app.command()
def decode(
    files: list[Path] = typer.Argument(..., exists=True, dir_okay=False, help="Card files to decode"),
    config: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    encode: bool = typer.Option(False, "--encode", help="Percent-encode decoded values"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write JSON here instead of stdout"),
) -> None:
    """Decode card file(s) into attribute maps printed as JSON."""
    parser = _settings(config).build_parser()

    pairs = read_card_files(files)
    if not pairs:
        console.print("[bold red]No cards found.[/bold red]")
        raise typer.Exit(code=2)

    maps = []
    skipped: list[str] = []
    for card_text, label in pairs:
        try:
            result = parser.decode_with_diagnostics(card_text, encode=encode)
        except MalformedComplexAttributeError as exc:
            console.print(f"[bold red]{label}:[/bold red] {exc}")
            raise typer.Exit(code=1)
        maps.append(result.attributes)
        skipped.extend(f"{label}: {d.raw}" for d in result.diagnostics)

    if skipped:
        console.print(Panel(
            "\n".join(skipped),
            title=f"Skipped {len(skipped)} malformed extension entr{'y' if len(skipped) == 1 else 'ies'}",
            border_style="yellow",
        ))

    if output is None:
        typer.echo(dump_attribute_maps(maps))
    else:
        count = write_attribute_maps(maps, output)
        console.print(f"[bold green]✓ Wrote {count} attribute map(s) → {output}[/bold green]")


# ── `encode` command ───────────────────────────────────────────────────────────

@app.command()
def encode(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON attribute map(s)"),
    config: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
    only: list[str] | None = typer.Option(None, "--only", help="Attribute names to include (repeatable)"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write card text here instead of stdout"),
) -> None:
    """Encode JSON attribute map(s) into card text."""
    settings = _settings(config)
    parser = settings.build_parser()

    try:
        maps = read_attribute_maps(file)
    except ValueError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=2)

    cards = [parser.to_vcard(m, only or None) for m in maps]
    text = settings.dialect.line_separator.join(cards)

    if output is None:
        typer.echo(text)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + settings.dialect.line_separator, encoding="utf-8")
        console.print(f"[bold green]✓ Wrote {len(cards)} card(s) → {output}[/bold green]")


# ── `mapping` command ──────────────────────────────────────────────────────────

@app.command()
def mapping(
    config: Path | None = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
) -> None:
    """Show the effective field mapping."""
    table_state = _settings(config).build_parser().mappings

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Card field")
    table.add_column("Attribute")
    table.add_column("Sub-fields")
    for card_key, target in table_state.to_attribute.items():
        if isinstance(target, str) and target:
            shadowed = table_state.to_card.get(target) != card_key
            attr = f"{target} [dim](decode only)[/dim]" if shadowed else target
            sub_fields = ", ".join(table_state.complex_groups.get(target, ()))
        else:
            attr, sub_fields = "[dim]ignored[/dim]", ""
        table.add_row(card_key, attr, sub_fields)
    Console().print(table)


if __name__ == "__main__":
    app()
