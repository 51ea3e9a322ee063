"""Main CLI application using Typer."""
import asyncio

import typer
from rich.console import Console
from rich.markup import escape

from ..session import ChatSession
from .providers import console_debug_callback, get_client, get_config

# Create Typer app
app = typer.Typer(
    name="gqlchat",
    help="Chat with an assistant behind a GraphQL endpoint",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

EXIT_WORDS = ("exit", "quit", "q")


def _print_reply(session: ChatSession) -> None:
    reply = session.messages[-1]
    if session.last_error is not None:
        console.print(f"[bold red]Error:[/bold red] {escape(reply.content)}")
    else:
        console.print(f"[bold green]Assistant:[/bold green] {escape(reply.content)}")


@app.command(name="tui")
def tui_command(
    endpoint: str | None = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="GraphQL endpoint URL (overrides GQLCHAT_GRAPHQL_ENDPOINT)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch interactive TUI chat interface."""
    async def _tui():
        from ..ui import run_textual_tui

        config = get_config(endpoint, log_level)
        client = get_client(config)
        try:
            await run_textual_tui(client=client, config=config)
        finally:
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def chat(
    endpoint: str | None = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="GraphQL endpoint URL (overrides GQLCHAT_GRAPHQL_ENDPOINT)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print request tracing"
    ),
):
    """Line-oriented chat on the console."""
    async def _chat():
        config = get_config(endpoint)
        client = get_client(config)
        session = ChatSession(client, welcome_message=config.welcome_message)
        if verbose:
            session.set_debug_callback(console_debug_callback(console))

        try:
            console.print("[bold cyan]GraphQL Chat[/bold cyan]")
            console.print(f"[dim]Endpoint: {escape(config.endpoint_label)}[/dim]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")
            console.print(f"[bold green]Assistant:[/bold green] {escape(session.messages[0].content)}\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if not user_input.strip():
                    continue

                if user_input.strip().lower() in EXIT_WORDS:
                    console.print("[dim]Goodbye![/dim]")
                    break

                with console.status("[cyan]Fetching reply over GraphQL...[/cyan]"):
                    await session.submit(user_input)
                _print_reply(session)
                console.print()
        finally:
            await client.close()

    asyncio.run(_chat())


@app.command()
def send(
    message: str = typer.Argument(
        ...,
        help="Message to send to the assistant"
    ),
    endpoint: str | None = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="GraphQL endpoint URL (overrides GQLCHAT_GRAPHQL_ENDPOINT)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print request tracing"
    ),
):
    """Send one message and print the reply."""
    async def _send():
        config = get_config(endpoint)
        client = get_client(config)
        session = ChatSession(client, welcome_message=config.welcome_message)
        if verbose:
            session.set_debug_callback(console_debug_callback(console))

        try:
            reply = await session.submit(message)
        finally:
            await client.close()

        if reply is None:
            console.print("[red]Error: message is empty[/red]")
            raise typer.Exit(code=1)

        _print_reply(session)
        if session.last_error is not None:
            raise typer.Exit(code=1)

    asyncio.run(_send())


@app.command()
def endpoint(
    endpoint: str | None = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="GraphQL endpoint URL (overrides GQLCHAT_GRAPHQL_ENDPOINT)"
    ),
):
    """Show the resolved GraphQL endpoint."""
    config = get_config(endpoint)
    console.print(config.endpoint, markup=False, highlight=False)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
