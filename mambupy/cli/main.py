"""Mambu CLI - Main commands."""
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..client import MambuClient
from ..core.api import APIConfig, ApiFailure, HttpMethod, ParamsMap
from ..core.exceptions import ConfigError
from ..core.logging import get_logger

app = typer.Typer(
    name="mambu",
    help="Mambu REST API CLI",
    add_completion=False
)
console = Console()
logger = get_logger('mambupy.cli')


def parse_params(values: Optional[List[str]]) -> ParamsMap:
    """Parse repeated ``key=value`` options, keeping their order."""
    params = ParamsMap()
    for value in values or []:
        name, sep, param_value = value.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"expected key=value, got {value!r}", param_hint="--param")
        params.add_param(name, param_value)
    return params


def print_body(body: str, pretty: bool) -> None:
    if pretty and body:
        try:
            console.print_json(body)
            return
        except ValueError:
            logger.debug("Body is not JSON, printing raw")
    console.print(body, markup=False, highlight=False, soft_wrap=True)


def run(ctx: typer.Context, path: str, params: Optional[List[str]], method: HttpMethod, pretty: bool):
    """Execute one call and print its outcome."""
    config: APIConfig = ctx.obj
    try:
        client = MambuClient(config)
        result = client.execute(path, parse_params(params), method)
    except ConfigError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if isinstance(result, ApiFailure):
        if result.is_transport_error:
            console.print(f"[red]Request failed: {escape(str(result.error.cause))}[/red]")
        else:
            console.print(f"[red]Error status={result.status_code}[/red]")
            print_body(result.body, pretty)
        raise typer.Exit(1)

    print_body(result.body, pretty)


@app.callback()
def main_options(
    ctx: typer.Context,
    domain: str = typer.Option(None, "--domain", "-d", envvar="MAMBU_DOMAIN", help="Tenant domain, e.g. demo.mambu.com"),
    username: str = typer.Option(None, "--username", "-u", envvar="MAMBU_USERNAME", help="API user"),
    password: str = typer.Option(None, "--password", envvar="MAMBU_PASSWORD", help="API password"),
    app_key: str = typer.Option(None, "--app-key", envvar="MAMBU_APP_KEY", help="Application key"),
    timeout: float = typer.Option(None, "--timeout", envvar="MAMBU_TIMEOUT", help="Deadline in seconds"),
    http: bool = typer.Option(False, "--http", help="Use plain http instead of https"),
):
    """Connection settings shared by all commands."""
    try:
        ctx.obj = APIConfig(
            domain=domain,
            username=username,
            password=password,
            application_key=app_key,
            timeout=timeout,
            protocol="http" if http else "https",
        )
    except ConfigError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def get(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Resource path, e.g. clients/123"),
    param: Optional[List[str]] = typer.Option(None, "--param", "-p", help="Query parameter key=value"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty print JSON bodies"),
):
    """GET a resource."""
    run(ctx, path, param, HttpMethod.GET, pretty)


@app.command()
def post(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Resource path, e.g. loans"),
    param: Optional[List[str]] = typer.Option(None, "--param", "-p", help="Form parameter key=value"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty print JSON bodies"),
):
    """POST a form to a resource."""
    run(ctx, path, param, HttpMethod.POST, pretty)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
