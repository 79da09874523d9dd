"""CLI entry point for fieldrs.

Commands:
    fieldrs demo TEXT      Encode text, corrupt it at random, decode it back
    fieldrs encode SYM...  Print the codeword for a message
    fieldrs decode SYM...  Correct a codeword and print the message
"""

from __future__ import annotations

import logging
import sys

import click
import numpy as np

from ..coding.reed_solomon import DecodeStatus, ReedSolomon
from .config import AppConfig, load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _make_codec(config: AppConfig, message_len: int) -> ReedSolomon:
    try:
        return config.to_codec(message_len)
    except ValueError as exc:
        raise click.UsageError(f"Invalid codec configuration: {exc}") from exc


def _format(symbols) -> str:
    return ", ".join(str(s) for s in symbols)


@click.group()
@click.option("--config", "-c", type=click.Path(), default=None,
              help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Enable verbose/debug logging")
@click.option("--ecc-len", "-e", type=int, default=None,
              help="Number of error-correction symbols (default: 16)")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool,
        ecc_len: int | None) -> None:
    """fieldrs: Reed-Solomon coding over prime and binary fields."""
    ctx.ensure_object(dict)
    app_config = load_config(config)
    if ecc_len is not None:
        app_config.code_ecc_len = ecc_len
    ctx.obj["config"] = app_config

    level = "DEBUG" if verbose else app_config.logging_level
    _setup_logging(level)


@cli.command()
@click.argument("text")
@click.option("--probability", "-p", type=float, default=None,
              help="Chance of corrupting each symbol (default: 0.3)")
@click.option("--seed", "-s", type=int, default=None,
              help="Seed for the corruption RNG")
@click.pass_context
def demo(ctx: click.Context, text: str, probability: float | None,
         seed: int | None) -> None:
    """Encode TEXT, corrupt up to ecc_len/2 symbols, and decode it again.

    Each character is mapped to its code point, so the field must be larger
    than every code point in TEXT.
    """
    config: AppConfig = ctx.obj["config"]
    logger = logging.getLogger("fieldrs.demo")
    if probability is None:
        probability = config.demo_probability
    if seed is None:
        seed = config.demo_seed
    if not text:
        raise click.BadParameter("text must not be empty", param_hint="TEXT")

    codec = _make_codec(config, len(text))
    field = codec.field
    message = [ord(ch) for ch in text]
    if max(message) >= field.size:
        raise click.BadParameter(
            f"character code {max(message)} does not fit in {field!r}",
            param_hint="TEXT")

    click.echo(f"Message: {text}")
    click.echo(f"Symbols: [{_format(message)}]")
    codeword = codec.encode(message)
    click.echo(f"Codeword: [{_format(codeword)}]")

    rng = np.random.RandomState(seed)
    max_errors = codec.ecc_len // 2
    perturbed = 0
    for i in range(len(codeword)):
        if perturbed >= max_errors:
            break
        if rng.random_sample() < probability:
            delta = int(rng.randint(1, field.size))
            codeword[i] = field.add(codeword[i], delta)
            perturbed += 1
    logger.info("Perturbed %d of %d symbols", perturbed, len(codeword))

    click.echo(f"Perturbed: {perturbed}")
    click.echo(f"Corrupted: [{_format(codeword)}]")

    try:
        result = codec.decode(codeword, config.code_errors_to_correct)
    except ValueError as exc:
        raise click.UsageError(f"Invalid codec configuration: {exc}") from exc
    if not result.ok:
        click.echo(f"Decoding failed: {result.status.value}")
        sys.exit(1)
    click.echo(f"Decoded: {''.join(chr(x) for x in result.message)}")


@cli.command()
@click.argument("symbols", nargs=-1, type=int, required=True)
@click.pass_context
def encode(ctx: click.Context, symbols: tuple[int, ...]) -> None:
    """Print the codeword for the message SYMBOLS (ECC symbols first)."""
    config: AppConfig = ctx.obj["config"]
    codec = _make_codec(config, len(symbols))
    try:
        codeword = codec.encode(list(symbols))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="SYMBOLS") from exc
    click.echo(_format(codeword))


@cli.command()
@click.argument("symbols", nargs=-1, type=int, required=True)
@click.option("--errors", "-n", type=int, default=None,
              help="Number of errors to correct (default: ecc_len/2)")
@click.pass_context
def decode(ctx: click.Context, symbols: tuple[int, ...],
           errors: int | None) -> None:
    """Correct the codeword SYMBOLS and print the message."""
    config: AppConfig = ctx.obj["config"]
    message_len = len(symbols) - config.code_ecc_len
    if message_len <= 0:
        raise click.BadParameter(
            f"need more than {config.code_ecc_len} symbols, got {len(symbols)}",
            param_hint="SYMBOLS")
    if errors is None:
        errors = config.code_errors_to_correct

    codec = _make_codec(config, message_len)
    try:
        result = codec.decode(list(symbols), errors)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    if result.status is DecodeStatus.OK:
        click.echo(_format(result.message))
        if result.error_locations:
            logging.getLogger("fieldrs.decode").info(
                "Corrected positions: %s", result.error_locations)
    else:
        click.echo(result.status.value)
        sys.exit(1)


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
