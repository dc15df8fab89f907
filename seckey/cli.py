"""
Command-line interface for EOSIO key encryption.
"""

from __future__ import annotations

import logging

import click

from seckey.common import Config, setup_logger
from seckey.common.exceptions import SecKeyError
from seckey.common.models import EncryptedKeyInfo
from seckey.encrypted_key import EncryptedPrivateKey, encrypt
from seckey.keys import PrivateKey
from seckey.security_level import SecurityLevel


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:  # noqa: FBT001
    """EOSIO private key encryption CLI"""
    level = logging.DEBUG if verbose else Config().LOG_LEVEL
    setup_logger(logging.getLogger("seckey"), level)


@cli.command("encrypt")
@click.argument("private_key")
@click.option(
    "--security-level",
    "-s",
    default=None,
    help="default, high, paranoid or a flags byte (default: from SECKEY_SECURITY_LEVEL env or default)",
)
@click.password_option(
    "--password", "-p", help="Password to encrypt with (prompted if omitted)"
)
def encrypt_command(
    private_key: str, security_level: str | None, password: str
) -> None:
    """Encrypt a private key with a password"""
    try:
        key = PrivateKey.from_string(private_key)
        level = SecurityLevel.parse(security_level) if security_level else None
        encrypted = encrypt(key, password, level)
    except (SecKeyError, ValueError) as err:
        raise click.ClickException(str(err)) from err
    click.echo(encrypted.to_string())


@cli.command("decrypt")
@click.argument("encrypted_key")
@click.option(
    "--password",
    "-p",
    prompt=True,
    hide_input=True,
    help="Password to decrypt with (prompted if omitted)",
)
@click.option("--legacy", is_flag=True, help="Print the key in WIF format")
def decrypt_command(encrypted_key: str, password: str, legacy: bool) -> None:  # noqa: FBT001
    """Decrypt an encrypted private key"""
    try:
        key = EncryptedPrivateKey.from_string(encrypted_key).decrypt(password)
    except SecKeyError as err:
        raise click.ClickException(str(err)) from err
    click.echo(key.to_wif() if legacy else key.to_string())


@cli.command()
@click.argument("encrypted_key")
def inspect(encrypted_key: str) -> None:
    """Show the parameters of an encrypted private key"""
    try:
        key = EncryptedPrivateKey.from_string(encrypted_key)
    except SecKeyError as err:
        raise click.ClickException(str(err)) from err
    click.echo(EncryptedKeyInfo.from_key(key).model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
