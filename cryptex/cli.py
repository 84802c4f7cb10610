"""
Cryptex CLI
============

Click-based command-line interface for the Cryptex classical cipher
library. Provides subcommands to list the ciphers, encrypt and decrypt
text, show a Playfair key square and profile letter frequencies.

Usage::

    python -m cryptex list --details
    python -m cryptex encrypt caesar "Hello, World!" --key 3
    python -m cryptex encrypt "Hello, World!" -k 3      # default_cipher
    python -m cryptex decrypt vigenere "Lxfopv ef rnhr" -k LEMON
    python -m cryptex matrix MONARCHY
    python -m cryptex analyze -i ciphertext.txt
    python -m cryptex -o json encrypt rail-fence "WE ARE DISCOVERED" -k 3

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, NoReturn, Optional

import click

from shared.config import AppConfig
from shared.console import CryptexConsole

from cryptex import __version__
from cryptex.algorithms.base import letters_only
from cryptex.core.engine import CryptexEngine
from cryptex.core.errors import CryptexError
from cryptex.core.models import CipherResult, FrequencyResult, Operation
from cryptex.output.console import CryptexConsoleOutput
from cryptex.output.report import CryptexReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a Cryptex configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default=None,
    help="Output format (defaults to the configured output_format).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """Cryptex -- Classical Cipher Toolkit.

    Caesar, ROT13, Atbash, Vigenère, Playfair and Rail Fence. These are
    historical ciphers for study and puzzles, not for protecting data.
    """
    ctx.ensure_object(dict)

    app_config = AppConfig.load(config) if config else AppConfig()
    output_format = output or app_config.cryptex.output_format
    ctx.obj["config"] = app_config
    ctx.obj["output_format"] = output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = CryptexConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = CryptexEngine(app_config)
    ctx.obj["display"] = CryptexConsoleOutput(console)
    ctx.obj["reporter"] = CryptexReportGenerator(version=__version__)

    # JSON on stdout must stay parseable.
    if not quiet and output_format == "console":
        console.banner(version=__version__)


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _read_text(text: Optional[str], input_file: Optional[str]) -> str:
    if input_file is not None:
        return Path(input_file).read_text(encoding="utf-8")
    if text is None:
        raise click.UsageError("Provide TEXT or --input-file.")
    return text


def _resolve_cipher(
    cipher_id: Optional[str],
    text: Optional[str],
    input_file: Optional[str],
    default: str,
) -> tuple[str, Optional[str]]:
    """Split the positionals of ``encrypt``/``decrypt`` into (cipher, text).

    A lone positional is the text unless ``--input-file`` supplies it, in
    which case it names the cipher. A missing cipher falls back to
    *default*.
    """
    if text is None and input_file is None and cipher_id is not None:
        return default, cipher_id
    return cipher_id or default, text


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


def _fail(ctx: click.Context, exc: CryptexError) -> NoReturn:
    """Report a cipher error in the selected format and exit with status 2."""
    if ctx.obj["output_format"] == "json":
        _echo_json(exc.to_dict())
    else:
        ctx.obj["display"].display_error(exc)
    ctx.exit(2)


def _handle_output(
    ctx: click.Context,
    result: CipherResult,
    profile: Optional[FrequencyResult],
) -> None:
    """Write a JSON or HTML report for *result*.

    Args:
        ctx: Click context containing configuration.
        result: CipherResult to output.
        profile: Optional frequency profile of the output text.
    """
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: CryptexReportGenerator = ctx.obj["reporter"]
    console: CryptexConsole = ctx.obj["console"]
    engine: CryptexEngine = ctx.obj["engine"]
    descriptor = engine.describe(result.cipher_id)

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, descriptor, Path(output_file), profile)
            console.success(f"JSON report saved to: {path}")
        else:
            _echo_json(reporter.build_report(result, descriptor, profile))
    elif output_format == "html":
        if output_file:
            path = Path(output_file)
        else:
            output_dir = Path(ctx.obj["config"].global_settings.output_dir)
            path = output_dir / f"cryptex_{result.cipher_id}_{result.operation.value}.html"
        path = reporter.generate_html(result, descriptor, path, profile)
        console.success(f"HTML report saved to: {path}")


def _transform(
    ctx: click.Context,
    operation: Operation,
    cipher_id: Optional[str],
    text: Optional[str],
    key: Optional[str],
    input_file: Optional[str],
    profile: bool,
) -> None:
    engine: CryptexEngine = ctx.obj["engine"]
    display: CryptexConsoleOutput = ctx.obj["display"]
    settings = ctx.obj["config"].cryptex

    cipher_id, text = _resolve_cipher(
        cipher_id, text, input_file, settings.default_cipher
    )
    source = _read_text(text, input_file)
    try:
        result = engine.run(cipher_id, operation, source, key)
    except CryptexError as exc:
        _fail(ctx, exc)

    freq = None
    if profile or settings.show_profile:
        freq = engine.analyze(result.output_text)

    if ctx.obj["output_format"] != "console":
        _handle_output(ctx, result, freq)
        return

    descriptor = engine.describe(cipher_id)
    display.display_result(result, descriptor)

    if cipher_id == "playfair" and settings.show_matrix:
        display.display_matrix(engine.playfair_matrix(key), highlight=key)
    elif cipher_id == "rail-fence" and operation is Operation.ENCRYPT:
        display.display_rail_fence(letters_only(source), int(str(key).strip()))

    if freq is not None:
        display.display_frequency(freq)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command("list")
@click.option(
    "--details", "-d",
    is_flag=True,
    default=False,
    help="Include the historical note for each cipher.",
)
@click.pass_context
def list_command(ctx: click.Context, details: bool) -> None:
    """List the available ciphers."""
    engine: CryptexEngine = ctx.obj["engine"]
    descriptors = engine.list_ciphers()

    if ctx.obj["output_format"] == "json":
        _echo_json([d.model_dump(mode="json") for d in descriptors])
    else:
        ctx.obj["display"].display_ciphers(descriptors, details=details)


def _transform_options(func):
    """Arguments and options shared by ``encrypt`` and ``decrypt``."""
    func = click.option(
        "--profile", "-p",
        is_flag=True,
        default=False,
        help="Add a letter frequency profile of the output.",
    )(func)
    func = click.option(
        "--input-file", "-i",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="Read the input text from a file instead of TEXT.",
    )(func)
    func = click.option(
        "--key", "-k",
        default=None,
        help="Cipher key (shift, rail count or keyword).",
    )(func)
    func = click.argument("text", required=False)(func)
    func = click.argument("cipher_id", metavar="[CIPHER]", required=False)(func)
    return func


@cli.command()
@_transform_options
@click.pass_context
def encrypt(
    ctx: click.Context,
    cipher_id: Optional[str],
    text: Optional[str],
    key: Optional[str],
    input_file: Optional[str],
    profile: bool,
) -> None:
    """Encrypt TEXT with CIPHER.

    CIPHER defaults to the configured default_cipher when omitted.
    """
    _transform(ctx, Operation.ENCRYPT, cipher_id, text, key, input_file, profile)


@cli.command()
@_transform_options
@click.pass_context
def decrypt(
    ctx: click.Context,
    cipher_id: Optional[str],
    text: Optional[str],
    key: Optional[str],
    input_file: Optional[str],
    profile: bool,
) -> None:
    """Decrypt TEXT with CIPHER.

    CIPHER defaults to the configured default_cipher when omitted.
    """
    _transform(ctx, Operation.DECRYPT, cipher_id, text, key, input_file, profile)


@cli.command()
@click.argument("key")
@click.pass_context
def matrix(ctx: click.Context, key: str) -> None:
    """Show the Playfair key square built from KEY."""
    engine: CryptexEngine = ctx.obj["engine"]
    try:
        square = engine.playfair_matrix(key)
    except CryptexError as exc:
        _fail(ctx, exc)

    if ctx.obj["output_format"] == "json":
        _echo_json({"key": key, "rows": square.rows})
    else:
        ctx.obj["display"].display_matrix(square, highlight=key)


@cli.command()
@click.argument("text", required=False)
@click.option(
    "--input-file", "-i",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read the text from a file instead of TEXT.",
)
@click.pass_context
def analyze(ctx: click.Context, text: Optional[str], input_file: Optional[str]) -> None:
    """Letter frequency profile of TEXT.

    Reports the Index of Coincidence, a chi-squared fit against English
    and a guess at the kind of cipher that produced the text.
    """
    engine: CryptexEngine = ctx.obj["engine"]
    try:
        result = engine.analyze(_read_text(text, input_file))
    except CryptexError as exc:
        _fail(ctx, exc)

    if ctx.obj["output_format"] == "json":
        _echo_json(result.model_dump(mode="json"))
    else:
        ctx.obj["display"].display_frequency(result)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Cryptex CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
