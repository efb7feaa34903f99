"""
wxmp CLI — `wxmp` command.

Commands:
  wxmp sign <timestamp> <nonce> [encrypt]   Compute a callback signature
  wxmp parse [file]                         Decode a plaintext callback body
  wxmp decrypt [file]                       Decrypt an encrypted callback body
  wxmp encrypt [file]                       Encrypt a reply body
  wxmp menu get|set|delete                  Custom menu
  wxmp config show                          Show the loaded configuration
"""

import asyncio
from typing import Optional

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install wxmp[cli]")

from wxmp.config import DEFAULT_CONFIG_FILE, Config
from wxmp.errors import WxmpError

console = Console()


def _load_config(path: Optional[str]) -> Config:
    if path:
        return Config.from_file(path)
    if DEFAULT_CONFIG_FILE.exists():
        return Config.from_file(DEFAULT_CONFIG_FILE)
    return Config.from_env()


def _get_config() -> Config:
    ctx = click.get_current_context()
    try:
        return _load_config(ctx.obj.get("config_path") if ctx.obj else None)
    except WxmpError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


def _run(coro):
    return asyncio.run(coro)


def _mask(value: Optional[str]) -> str:
    if not value:
        return ""
    return value[:4] + "*" * max(len(value) - 4, 0)


@click.group()
@click.version_option("0.1.0")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help=f"Config JSON file (default {DEFAULT_CONFIG_FILE}, else WXMP_* env vars)")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str]):
    """WeChat Official Account callback tools."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@main.group("config")
def config_group():
    """Configuration commands."""


@config_group.command("show")
def config_show():
    """Show the loaded configuration with secrets masked."""
    cfg = _get_config()
    console.print(f"app_id:           {cfg.app_id}")
    console.print(f"app_secret:       {_mask(cfg.app_secret)}")
    console.print(f"token:            {_mask(cfg.token)}")
    console.print(f"encoding_aes_key: {_mask(cfg.encoding_aes_key)}")
    console.print(f"api_base_url:     {cfg.api_base_url}")
    mode = "[green]encrypted[/green]" if cfg.encrypted else "[yellow]plaintext[/yellow]"
    console.print(f"mode:             {mode}")


# Register subcommands from separate modules
from wxmp.cli.codec import decrypt_cmd, encrypt_cmd, parse_cmd, sign_cmd
from wxmp.cli.menu import menu

main.add_command(sign_cmd)
main.add_command(parse_cmd)
main.add_command(decrypt_cmd)
main.add_command(encrypt_cmd)
main.add_command(menu)


if __name__ == "__main__":
    main()
