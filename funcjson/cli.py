import os
from pathlib import Path

import requests
import typer
from rfc3986 import exceptions

from .avatars import AvatarClient, ClientError
from .deserialize import json_deserializer
from .models import User, decode_user

TIMEOUT_ENV_VAR = "FUNCJSON_HTTP_TIMEOUT"
BASE_URL_ENV_VAR = "FUNCJSON_AVATAR_BASE_URL"

app = typer.Typer()


def get_client(base_url: str | None = None) -> AvatarClient:
    return AvatarClient(
        timeout=float(os.environ.get(TIMEOUT_ENV_VAR, "30")),
        base_url=base_url,
    )


def read_input(path: str) -> bytes:
    if path == "-":
        return typer.get_binary_stream("stdin").read()

    return Path(path).read_bytes()


def load_user(path: str) -> User:
    user = decode_user()(json_deserializer()(read_input(path)))

    if user is None:
        typer.echo(f"Could not decode a user from {path}", err=True)
        raise typer.Exit(code=1)

    return user


@app.command("decode-user")
def decode_user_command(path: str = typer.Argument("-")) -> None:
    """Decode a user from a JSON file ('-' reads stdin)."""
    user = load_user(path)
    typer.echo(user.model_dump_json(by_alias=True, indent=4))


@app.command()
def fetch_avatar(
    path: str = typer.Argument("-"),
    output: Path = typer.Option(..., "--output", "-o"),
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        envvar=BASE_URL_ENV_VAR,
        help="Base URL for relative avatar references.",
    ),
) -> None:
    """Decode a user and download their avatar image."""
    user = load_user(path)

    try:
        image = get_client(base_url).fetch_avatar(user)
    except (
        ClientError,
        requests.RequestException,
        exceptions.ResolutionError,
    ) as error:
        typer.echo(f"Could not fetch avatar for {user.first_name}: {error}", err=True)
        raise typer.Exit(code=1) from error

    if image is None:
        typer.echo(f"{user.first_name} has no avatar URL", err=True)
        raise typer.Exit(code=1)

    output.write_bytes(image)
    typer.echo(f"Wrote {len(image)} bytes to {output}")


if __name__ == "__main__":
    app()
