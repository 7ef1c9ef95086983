import logging
import typer
import yaml
from pathlib import Path
from typing import Callable, Dict, Optional

from .config import DEFAULT_ENCODING, LOG_FORMAT, LOG_LEVEL
from .core.formatter import to_large_number, to_positional
from .core.parser import parse_kansuji
from .core.substitution import normalize, to_arabic, to_daiji, to_shoji
from .utils.tables import as_plain_dict

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)

MODES: Dict[str, Callable[[str], str]] = {
    "positional": to_positional,
    "large": to_large_number,
    "arabic": to_arabic,
    "daiji": to_daiji,
    "shoji": to_shoji,
    "normalize": normalize,
    "parse": lambda line: str(parse_kansuji(line)),
}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
):
    """
    Convert between daiji, kanji numerals, positional notation and Arabic digits.
    """
    level = logging.DEBUG if verbose else LOG_LEVEL
    logging.basicConfig(level=level, format=LOG_FORMAT)


@app.command()
def positional(text: str = typer.Argument(..., help="Text containing kanji numerals")):
    """
    一千九百五十七 → 一九五七
    """
    typer.echo(to_positional(text))


@app.command()
def large(text: str = typer.Argument(..., help="Text starting with positional kanji digits")):
    """
    一九五七 → 一千九百五十七 (leading digits only)
    """
    typer.echo(to_large_number(text))


@app.command()
def arabic(text: str = typer.Argument(..., help="Text containing kanji numerals or daiji")):
    """
    参年A → 3年A (character by character)
    """
    typer.echo(to_arabic(text))


@app.command()
def daiji(text: str = typer.Argument(..., help="Text containing kanji numerals")):
    """
    二十三 → 弐拾参
    """
    typer.echo(to_daiji(text))


@app.command()
def shoji(text: str = typer.Argument(..., help="Text containing daiji")):
    """
    弐拾参 → 二十三
    """
    typer.echo(to_shoji(text))


@app.command("normalize")
def normalize_command(text: str = typer.Argument(..., help="Text to normalize")):
    """
    Daiji to kanji numerals; numeral-only text goes to daiji instead.
    """
    typer.echo(normalize(text))


@app.command()
def parse(text: str = typer.Argument(..., help="Text containing a kanji numeral")):
    """
    Print the value of the last numeral run (令和三年五百 → 500).
    """
    typer.echo(parse_kansuji(text))


@app.command()
def convert_file(
    path: Path = typer.Option(..., help="Input text file"),
    mode: str = typer.Option("positional", help=f"One of: {', '.join(MODES)}"),
    output: Optional[Path] = typer.Option(None, help="Write result here instead of stdout"),
    progress: bool = typer.Option(True, help="Show a progress bar"),
):
    """
    Convert a text file line by line.
    """
    if mode not in MODES:
        raise typer.BadParameter(f"Invalid mode: {mode}. Must be one of {', '.join(MODES)}.")
    convert = MODES[mode]

    try:
        lines = path.read_text(encoding=DEFAULT_ENCODING).splitlines(keepends=True)
    except (IOError, OSError) as e:
        logger.error(f"Failed to read {path}: {e}")
        raise typer.Exit(code=1)

    from tqdm import tqdm
    converted = []
    for line in tqdm(lines, desc="Converting", disable=not progress):
        body = line.rstrip("\r\n")
        converted.append(convert(body) + line[len(body):])
    result = "".join(converted)

    if output is None:
        typer.echo(result, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding=DEFAULT_ENCODING)
    logger.info(f"Wrote {len(converted)} lines to {output}")


@app.command()
def tables():
    """
    Dump the lookup tables as YAML.
    """
    typer.echo(yaml.dump(
        as_plain_dict(),
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    ).rstrip())


if __name__ == "__main__":
    app()
