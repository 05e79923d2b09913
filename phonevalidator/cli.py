"""
phonevalidator CLI.

Commands:
  - validate: send a phone number to the validation API and print the result
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click
import yaml

from phonevalidator import __version__
from phonevalidator.client import PhoneValidatorError
from phonevalidator.config import load_settings
from phonevalidator.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    if value is None:
        return ""
    return str(value)


def _human_text(result: Any) -> str:
    if not isinstance(result, dict):
        return _format_value(result) + "\n"

    lines = [f"{k}: {_format_value(v)}" for k, v in result.items()]
    return "\n".join(lines) + "\n"


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__)
def main() -> None:
    """Phone number validation via the GenderAPI.io API."""


@main.command("validate")
@click.argument("number", type=str)
@click.option(
    "--address",
    default="",
    help="Country code, country name or city used to interpret NUMBER.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the raw JSON response.")
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Write output to a file instead of stdout.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config path.",
)
@click.option("--base-url", default=None, help="Override the API base URL.")
@click.option(
    "--api-key",
    default=None,
    help="API key (default: GENDERAPI_API_KEY from the environment or .env).",
)
def validate_cmd(
    number: str,
    address: str,
    as_json: bool,
    output_path: Path | None,
    config_path: Path | None,
    base_url: str | None,
    api_key: str | None,
) -> None:
    """
    Validate and format a phone number.
    """

    overrides: dict[str, Any] = {}
    if api_key:
        overrides["api_key"] = api_key
    if base_url:
        overrides["base_url"] = base_url

    try:
        settings = load_settings(yaml_path=config_path)
        configure_logging(level=settings.log_level, json_logging=settings.json_logging)
        if overrides:
            settings = settings.model_copy(update=overrides)
        client = settings.build_client()
        result = client.validate(number, address=address)
    except (ValueError, yaml.YAMLError, PhoneValidatorError) as exc:
        logger.debug("validation failed", exc_info=True)
        raise click.ClickException(str(exc)) from exc

    if as_json:
        text = json.dumps(result, indent=2, ensure_ascii=False) + "\n"
    else:
        text = _human_text(result)

    if output_path is not None:
        output_path.write_text(text, encoding="utf-8")
        click.echo(str(output_path))
    else:
        click.echo(text, nl=False)
