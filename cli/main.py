"""CLI for syncing ssh keys with a secret store."""

from pathlib import Path

import click
from dotenv import load_dotenv

from core.bundle.exceptions import BundleError, FileSystemError
from core.bundle.scanner import display_path
from core.config.exceptions import ConfigError
from core.secrets.exceptions import StoreError

load_dotenv(Path.cwd() / ".env")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


def _build_sync(config: dict):
    """Create the store and KeySync described by config."""
    from core.config.loader import backend_config
    from core.secrets import create_backend
    from core.sync import ConfirmationGate, Console, KeySync

    secret_id = config["secret"]["id"]
    try:
        store = create_backend(config["secret"]["backend"], **backend_config(config))
    except StoreError as e:
        _fail(str(e))

    gate = ConfirmationGate(Console(), secret_id=secret_id)
    return KeySync(store, gate, secret_id=secret_id)


@click.group()
@click.version_option(version="0.1.0", prog_name="ssh-keys")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="SSH_KEYS_CONFIG",
    help="YAML config file (default: ~/.config/ssh-keys/config.yaml)",
)
@click.option(
    "--aws-profile",
    envvar="SSH_KEYS_AWS_PROFILE",
    help="Name of AWS profile (defined in ~/.aws/config) to use for credentials",
)
@click.option("--region", envvar="SSH_KEYS_AWS_REGION", help="AWS region of the secret")
@click.option(
    "--secret-id",
    envvar="SSH_KEYS_SECRET_ID",
    help="ID of the secret where ssh keys are stored (default: ssh-keys)",
)
@click.option(
    "--backend",
    type=click.Choice(["aws", "file"]),
    envvar="SSH_KEYS_BACKEND",
    help="Secret store backend (default: aws)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar="SSH_KEYS_LOG_LEVEL",
    help="Log level for messages on stderr",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    envvar="SSH_KEYS_LOG_FILE",
    help="Also append log messages to this file",
)
@click.pass_context
def cli(ctx, config_path, aws_profile, region, secret_id, backend, log_level, log_file):
    """Back up and restore a directory of ssh keys as one secret."""
    from core.config.loader import ConfigLoader
    from core.utils.logging import setup_logging

    overrides = {
        "secret": {"id": secret_id, "backend": backend},
        "aws": {"profile": aws_profile, "region": region},
        "logging": {"level": log_level, "file": log_file},
    }
    try:
        config = ConfigLoader(config_path).load(overrides)
    except ConfigError as e:
        _fail(str(e))

    try:
        setup_logging(
            level=config["logging"]["level"],
            format_style=config["logging"]["format"],
            log_file=config["logging"]["file"],
        )
    except OSError as e:
        _fail(f"Cannot open log file {config['logging']['file']}: {e.strerror}")
    ctx.obj = config


@cli.command()
@click.argument("outdir", type=click.Path(path_type=Path))
@click.pass_obj
def get(config: dict, outdir: Path):
    """Write the stored keys into OUTDIR, which must be empty or missing."""
    sync = _build_sync(config)

    try:
        created = sync.get(outdir)
    except FileSystemError as e:
        if e.written:
            _fail(
                f"{e}. {len(e.written)} files already written to "
                f"{display_path(outdir)} were left in place"
            )
        _fail(str(e))
    except (BundleError, StoreError) as e:
        _fail(str(e))

    for path in created:
        click.echo(f"Wrote {display_path(path)}")


@cli.command()
@click.argument("indir", type=click.Path(path_type=Path))
@click.pass_obj
def put(config: dict, indir: Path):
    """Replace the stored keys with the files in INDIR."""
    from core.sync import UserDecline

    sync = _build_sync(config)

    try:
        version = sync.put(indir)
    except UserDecline:
        click.echo("Cancelling and exiting.")
        return
    except (BundleError, StoreError) as e:
        _fail(str(e))

    if version:
        click.echo(f"Secret version: {version}")


@cli.command()
@click.pass_obj
def check(config: dict):
    """Check that the secret store is reachable."""
    sync = _build_sync(config)
    backend = config["secret"]["backend"]

    if not sync.store.health_check():
        _fail(f"Secret store '{backend}' is not reachable")

    click.echo(f"✓ Secret store '{backend}' is reachable")


if __name__ == "__main__":
    cli()
