"""CLI entrypoint for the TSB oracle."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer

from .errors import OracleError
from .logger import setup_logging
from .messages import InstantiateMsg, UpdatePrices
from .settings import OracleSettings
from .state import AppState, build_state

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    add_help_option=True,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
    rich_markup_mode="rich",
    help="Token-state queries, aggregated views and the admin price table.",
)


def _build_logger() -> logging.Logger:
    """Build a logger instance."""
    return logging.getLogger("tsb_oracle")


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))


def _fail(exc: OracleError) -> NoReturn:
    typer.echo(f"Error: {exc.message}", err=True)
    raise typer.Exit(code=1)


def _state(ctx: typer.Context) -> AppState:
    return ctx.obj


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a TOML config file (can include [tsb_oracle] table).",
        ),
    ] = None,
    source_url: Annotated[
        str | None,
        typer.Option("--source-url", help="Base URL of the token-state data source."),
    ] = None,
    state_path: Annotated[
        Path | None,
        typer.Option("--state-path", help="JSON file holding admin and prices."),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Override logging verbosity (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
    ] = None,
):
    """Load configuration, set up logging and wire the application state."""
    if config_path:
        os.environ["TSB_ORACLE_CONFIG"] = str(config_path)

    init_kwargs: dict[str, Any] = {}
    if source_url is not None:
        init_kwargs["source_url"] = source_url
    if state_path is not None:
        init_kwargs["state_path"] = state_path
    if log_level is not None:
        init_kwargs["log_level"] = log_level.upper()

    settings = OracleSettings(**init_kwargs)

    setup_logging(settings.log_level)
    ctx.obj = build_state(settings, _build_logger())


@app.command("show-config")
def show_config(ctx: typer.Context):
    """Print effective config (with secrets redacted)."""
    _echo_json(_state(ctx).settings.as_safe_dict())


@app.command("init")
def init(
    ctx: typer.Context,
    admin: Annotated[str, typer.Argument(help="Address allowed to update prices.")],
):
    """Initialize persisted state with an admin and zero prices."""
    state = _state(ctx)
    try:
        response = state.router().instantiate(InstantiateMsg(admin=admin))
    except OracleError as exc:
        _fail(exc)
    _echo_json(response.model_dump(mode="json"))


@app.command("query")
def query(
    ctx: typer.Context,
    payload: Annotated[
        str,
        typer.Argument(help='JSON request, e.g. \'{"get_token": {"token_id": "t1"}}\'.'),
    ],
):
    """Run one query and print the JSON response."""
    state = _state(ctx)
    try:
        decoded = json.loads(payload)
    except json.JSONDecodeError:
        # Bare tags such as get_prices are accepted unquoted
        decoded = payload
    try:
        result = state.router().query_json(decoded)
    except OracleError as exc:
        _fail(exc)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _echo_json(result)


@app.command("update-prices")
def update_prices(
    ctx: typer.Context,
    sender: Annotated[
        str, typer.Option("--sender", help="Identity submitting the update.")
    ],
    btc: Annotated[str, typer.Option("--btc")],
    eth: Annotated[str, typer.Option("--eth")],
    usdc: Annotated[str, typer.Option("--usdc")],
    usdt: Annotated[str, typer.Option("--usdt")],
    dai: Annotated[str, typer.Option("--dai")],
):
    """Replace the price record (admin only) and print the emitted event."""
    state = _state(ctx)
    try:
        msg = UpdatePrices(btc=btc, eth=eth, usdc=usdc, usdt=usdt, dai=dai)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    try:
        response = state.router().execute(sender, msg)
    except OracleError as exc:
        _fail(exc)
    _echo_json(response.model_dump(mode="json"))


def run() -> None:
    """Entrypoint used by the console script."""
    app()


if __name__ == "__main__":
    run()
