"""CLI: wxmp sign, parse, decrypt, encrypt"""

from typing import Optional

import click
from rich.console import Console

from wxmp.crypto.msgcrypt import MsgCrypt
from wxmp.crypto.signature import get_signature
from wxmp.errors import WxmpError
from wxmp.transport.envelope import parse_message

console = Console()


def _get_config():
    from wxmp.cli.main import _get_config
    return _get_config()


def _get_crypt() -> MsgCrypt:
    try:
        return MsgCrypt.from_config(_get_config())
    except WxmpError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


@click.command("sign")
@click.argument("timestamp")
@click.argument("nonce")
@click.argument("encrypted", required=False)
@click.option("--token", default=None, help="Override the configured token")
def sign_cmd(timestamp: str, nonce: str, encrypted: Optional[str], token: Optional[str]):
    """Compute the signature for TIMESTAMP, NONCE and optional ciphertext."""
    if token is None:
        token = _get_config().token
    click.echo(get_signature(token, timestamp, nonce, encrypted))


@click.command("parse")
@click.argument("source", type=click.File("rb"), default="-")
def parse_cmd(source):
    """Decode a plaintext callback body and print it as JSON."""
    try:
        header, message = parse_message(source.read())
    except WxmpError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    console.print(f"[cyan]{type(message).__name__}[/cyan] msg_id={header.msg_id}")
    console.print_json(message.model_dump_json())


@click.command("decrypt")
@click.argument("source", type=click.File("rb"), default="-")
def decrypt_cmd(source):
    """Decrypt an encrypted callback body and print the plaintext XML."""
    crypt = _get_crypt()
    try:
        plaintext = crypt.decrypt(source.read())
    except WxmpError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    click.echo(plaintext.decode("utf-8", errors="replace"))


@click.command("encrypt")
@click.argument("source", type=click.File("rb"), default="-")
def encrypt_cmd(source):
    """Encrypt a plaintext reply body and print the outbound envelope."""
    crypt = _get_crypt()
    click.echo(crypt.encrypt(source.read()).decode("utf-8"))
