"""CLI entry point for filmdiary."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

import click

from filmdiary.config import Config
from filmdiary.errors import DiaryError


def _fail(err: DiaryError) -> None:
    click.echo(f"Error: {err}", err=True)
    sys.exit(1)


def _format_score(score: int | None) -> str:
    # Scores are half-stars out of 10.
    return "-" if score is None else f"{score / 2:g}★"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """filmdiary — Letterboxd diary extractor."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = Config.from_env()


@main.command()
@click.argument("user")
@click.option("--output", "-o", default=None, help="Write JSON to this file instead of stdout")
@click.option("--compact", is_flag=True, help="Emit JSON without indentation")
@click.pass_obj
def fetch(config: Config, user: str, output: str | None, compact: bool) -> None:
    """Fetch USER's diary (username or diary URL) as JSON."""
    from filmdiary.diary import diary_url, fetch_all_entries

    url = diary_url(user, origin=config.allowed_origin)
    try:
        result = asyncio.run(fetch_all_entries(url, config=config))
    except DiaryError as e:
        _fail(e)
        return

    text = json.dumps(
        result.to_json_dict(), ensure_ascii=False, indent=None if compact else 2
    )
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        click.echo(f"✓ {len(result.entries)} entries written to {output}")
    else:
        click.echo(text)


@main.command()
@click.argument("first")
@click.argument("second")
@click.pass_obj
def compare(config: Config, first: str, second: str) -> None:
    """Compare the diaries of FIRST and SECOND."""
    from filmdiary.compare import compare_diaries, fetch_pair

    try:
        a, b = asyncio.run(fetch_pair(first, second, config=config))
    except DiaryError as e:
        _fail(e)
        return

    name_a = a.identity.display_name or first
    name_b = b.identity.display_name or second
    result = compare_diaries(a, b)

    click.echo(f"{name_a} vs {name_b}\n")
    click.echo(f"Shared films ({len(result.shared)}):")
    for film in result.shared:
        hearts = ("♥" if film.first_favorited else " ") + ("♥" if film.second_favorited else " ")
        click.echo(
            f"  {film.title or film.media_id}  "
            f"{_format_score(film.first_score)} / {_format_score(film.second_score)} {hearts}".rstrip()
        )
    click.echo(f"\nOnly {name_a}: {len(result.only_first)}")
    click.echo(f"Only {name_b}: {len(result.only_second)}")


if __name__ == "__main__":
    main()
