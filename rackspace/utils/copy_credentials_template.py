"""
Utility script used for copying Rackspace credentials templates to a user-defined path
"""

import json
from pathlib import Path

import click
import toml

from rackspace.constants import AUTH_URL

default_path = Path.home() / ".rackspace/credentials.toml"

default_configuration = {
    "RACKSPACE_USER": "my-account",
    "RACKSPACE_KEY": "0123456789abcdef",
    "RACKSPACE_AUTH_URL": AUTH_URL,
}


def _already_exists(path: Path) -> bool:
    click.echo(f"Try to write credentials template to {path}")
    if path.exists():
        click.echo(f"{path} already exists")
        return True
    return False


def _written(path: Path) -> None:
    click.echo(f"Credentials file written to {path}")
    click.echo("Please edit it to insert your credentials")


def write_json(json_path: Path) -> None:
    """
    Write template JSON credentials file.

    Parameters
    ----------
    json_path : Path
        Path to output JSON file.
    """
    if _already_exists(json_path):
        return

    with json_path.open("w") as f:
        json.dump(default_configuration, f, indent=2)

    _written(json_path)


def write_toml(toml_path: Path) -> None:
    """
    Write template TOML credentials file, under a ``[default]`` profile.

    Parameters
    ----------
    toml_path : Path
        Path to output TOML file.
    """
    if _already_exists(toml_path):
        return

    with toml_path.open("w") as f:
        toml.dump({"default": default_configuration}, f)

    _written(toml_path)


def write_env(env_path: Path) -> None:
    """
    Write template .env credentials file.

    Parameters
    ----------
    env_path : Path
        Path to output .env file.
    """
    if _already_exists(env_path):
        return

    with env_path.open("w") as f:
        for key, value in default_configuration.items():
            f.write(f'{key}="{value}"\n')

    _written(env_path)


@click.command(help="Copy Rackspace credentials templates in all accepted formats")
@click.option(
    "--json",
    "json_path",
    type=click.Path(path_type=Path, exists=False),
    required=False,
    help="Path to the output JSON file containing the credentials keys (with placeholder values)",
)
@click.option(
    "--toml",
    "toml_path",
    type=click.Path(path_type=Path, exists=False),
    required=False,
    help="Path to the output TOML file containing the credentials keys (with placeholder values)",
)
@click.option(
    "--env",
    "env_path",
    type=click.Path(path_type=Path, exists=False),
    required=False,
    help="Path to the output .env file containing the credentials keys (with placeholder values)",
)
@click.option(
    "--default",
    "default",
    is_flag=True,
    show_default=True,
    default=False,
    help=f"Copy the TOML template to {default_path}",
)
def cli(json_path: Path, toml_path: Path, env_path: Path, default: bool) -> None:
    if json_path is not None:
        write_json(json_path=json_path)

    if toml_path is not None:
        write_toml(toml_path=toml_path)

    if env_path is not None:
        write_env(env_path=env_path)

    if default:
        default_path.parent.mkdir(exist_ok=True, parents=True)
        write_toml(toml_path=default_path)


if __name__ == "__main__":
    cli()
