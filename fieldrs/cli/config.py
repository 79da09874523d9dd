"""Configuration management: load/save TOML config files."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

from ..algebra.binary import BinaryField
from ..algebra.prime import PrimeField
from ..coding.reed_solomon import ReedSolomon

DEFAULT_CONFIG_PATH = Path("~/.config/fieldrs/config.toml").expanduser()

FIELD_KINDS = ("prime", "binary")


@dataclass
class AppConfig:
    """Top-level application configuration."""

    # Field
    field_kind: str = "prime"
    field_modulus: int = 1231

    # Code
    code_generator: int = 3
    code_ecc_len: int = 16
    code_errors_to_correct: int | None = None

    # Demo corruption
    demo_probability: float = 0.3
    demo_seed: int | None = None

    # Logging
    logging_level: str = "INFO"

    def to_field(self) -> PrimeField | BinaryField:
        if self.field_kind == "prime":
            return PrimeField(self.field_modulus)
        if self.field_kind == "binary":
            return BinaryField(self.field_modulus)
        raise ValueError(
            f"Unknown field kind {self.field_kind!r}, expected one of {FIELD_KINDS}")

    def to_codec(self, message_len: int) -> ReedSolomon:
        return ReedSolomon(self.to_field(), self.code_generator,
                           message_len, self.code_ecc_len)


def load_config(path: Path | str | None = None) -> AppConfig:
    """Load configuration from a TOML file.

    Keys under the [field], [code], [demo] and [logging] tables map onto the
    AppConfig attribute of the same name prefixed by the table, so
    ``[code] ecc_len`` sets ``code_ecc_len``. Unknown keys are ignored and a
    missing file gives the defaults.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
    path = Path(path)

    config = AppConfig()

    if not path.exists():
        return config

    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    with open(path, "rb") as f:
        data = tomllib.load(f)

    # Flatten nested sections
    flat = _flatten_toml(data)

    for fld in fields(AppConfig):
        if fld.name in flat:
            setattr(config, fld.name, flat[fld.name])

    return config


def save_config(config: AppConfig, path: Path | str | None = None) -> None:
    """Save configuration to a TOML file."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    path = Path(path)

    path.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        "# fieldrs configuration",
        "",
        "[field]",
        f'kind = "{config.field_kind}"',
        f"modulus = {config.field_modulus}",
        "",
        "[code]",
        f"generator = {config.code_generator}",
        f"ecc_len = {config.code_ecc_len}",
    ]
    # TOML has no null; an absent key means "use the default"
    if config.code_errors_to_correct is not None:
        lines.append(f"errors_to_correct = {config.code_errors_to_correct}")
    lines += [
        "",
        "[demo]",
        f"probability = {config.demo_probability}",
    ]
    if config.demo_seed is not None:
        lines.append(f"seed = {config.demo_seed}")
    lines += [
        "",
        "[logging]",
        f'level = "{config.logging_level}"',
        "",
    ]

    with open(path, "w") as f:
        f.write("\n".join(lines))


def _flatten_toml(data: dict, prefix: str = "") -> dict:
    """Flatten nested TOML dict to a flat dict."""
    result = {}
    for key, value in data.items():
        if isinstance(value, dict):
            result.update(_flatten_toml(value, f"{prefix}{key}_"))
        else:
            result[f"{prefix}{key}"] = value
    return result
