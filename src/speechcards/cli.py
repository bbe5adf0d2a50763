"""CLI entry point for speechcards."""

import click
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.markup import escape

from speechcards import __version__
from speechcards.cards.generator import generate_cards
from speechcards.cards.navigator import ChapterNavigator
from speechcards.config.loader import load_config
from speechcards.models.card import SpeechCard
from speechcards.models.config import Config
from speechcards.outline.document import Outline
from speechcards.outline.parser import extract_title, format_status
from speechcards.outline.node import count_leaves, count_nodes
from speechcards.outline.serializer import to_text
from speechcards.services.exceptions import OutlineFileError
from speechcards.services.persistence import open_outline
from speechcards.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)
console = Console()


def _load_config(config_path: Optional[Path]) -> Config:
    """
    Load configuration, turning failures into click errors.

    Raises:
        click.ClickException: If the config file is invalid
    """
    try:
        return load_config(config_path)
    except ValueError as e:
        raise click.ClickException(str(e))


def _open(path: Path) -> Outline:
    """
    Open an outline file for a command.

    Raises:
        click.ClickException: If the file cannot be read
    """
    try:
        return open_outline(path)
    except (OSError, OutlineFileError) as e:
        logger.error("outline_open_failed", path=str(path), error=str(e))
        raise click.ClickException(str(e))


def render_card(card: SpeechCard) -> None:
    """Print one card: position, breadcrumb, topic, bullets."""
    console.print(f"[dim]{card.ordinal}/{card.total}[/dim]")
    for depth, title in enumerate(card.breadcrumb):
        console.print(f"[dim]{'  ' * depth}{escape(title)}[/dim]")
    console.print(f"[bold]{escape(card.topic)}[/bold]")
    for bullet in card.bullets:
        console.print(f"{'  ' * bullet.indent_level}• {escape(bullet.text)}")
    console.print()


@click.group()
@click.version_option(version=__version__, prog_name="speechcards")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file (default: ~/.config/speechcards/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path]):
    """speechcards: Turn an outline into speech practice cards."""
    configure_logging()
    ctx.ensure_object(dict)
    ctx.obj["config"] = _load_config(config_path)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def parse(ctx: click.Context, file: Path):
    """
    Show how an outline file is understood.

    Prints the outline tree as indented text followed by a summary line.
    """
    config: Config = ctx.obj["config"]
    logger.info("parse_command_started", path=str(file))

    outline = _open(file)
    click.echo(to_text(outline.roots, config.outline.indent_width))
    click.echo(format_status(count_nodes(outline.roots), count_leaves(outline.roots)), err=True)


@cli.command(name="format")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def format_command(ctx: click.Context, file: Path):
    """Print the outline as normalized, indentation-only text."""
    config: Config = ctx.obj["config"]
    outline = _open(file)
    click.echo(to_text(outline.roots, config.outline.indent_width))


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def title(file: Path):
    """Print the document title taken from the first '# ' header."""
    try:
        text = file.read_text(encoding="utf-8")
    except OSError as e:
        raise click.ClickException(str(e))
    click.echo(extract_title(text))


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--chapters", is_flag=True, help="Group cards under their chapter headings")
@click.pass_context
def cards(ctx: click.Context, file: Path, chapters: bool):
    """
    Print the practice cards generated from an outline.

    Examples:
        speechcards cards talk.md
        speechcards cards --chapters talk.json
    """
    config: Config = ctx.obj["config"]
    logger.info("cards_command_started", path=str(file), chapters=chapters)

    outline = _open(file)
    card_list = generate_cards(outline.roots, config.cards.max_structural_depth)

    if not card_list:
        click.echo("No outline to practice: add some content first", err=True)
        return

    if chapters:
        navigator = ChapterNavigator(card_list)
        for key, indices in navigator.chapters():
            console.rule(escape(key))
            for index in indices:
                render_card(card_list[index])
    else:
        for card in card_list:
            render_card(card)

    logger.info("cards_command_completed", count=len(card_list))


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
