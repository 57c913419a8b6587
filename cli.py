# cli.py
"""Terminal front-end: chat against a running relay, or start the relay server."""
import typer

from controller import ChatController, ChatView
from relay_client import RelayClient
from settings import get_settings

app = typer.Typer(
    name="chat-relay",
    help="Gemini chat relay and terminal client",
    no_args_is_help=True,
)

WELCOME = "Halo! Tulis pertanyaanmu. Aku akan menjawab dalam Bahasa Indonesia."


class TerminalView(ChatView):
    def show_typing(self) -> None:
        typer.secho("AI is typing...", dim=True)

    def show_reply(self, raw: str, html: str) -> None:
        typer.secho("AI:", fg=typer.colors.CYAN, bold=True)
        typer.echo(raw)

    def show_notice(self, text: str) -> None:
        typer.secho(text, fg=typer.colors.RED)


@app.command()
def chat(
    url: str = typer.Option(None, "--url", "-u", help="Relay base URL (defaults to RELAY_URL)"),
    timeout: float = typer.Option(None, "--timeout", "-t", help="Seconds to wait for a reply"),
):
    """Start an interactive chat session. Empty line or Ctrl-D quits."""
    settings = get_settings()
    with RelayClient(url or settings.RELAY_URL, timeout=timeout or settings.RELAY_TIMEOUT) as client:
        controller = ChatController(client, TerminalView())
        typer.secho(WELCOME, fg=typer.colors.CYAN)
        while True:
            try:
                text = typer.prompt("You", default="", show_default=False)
            except (EOFError, typer.Abort):
                break
            if not text.strip():
                break
            controller.submit(text)
    typer.echo(f"Bye. {len(controller.transcript)} turns exchanged.")


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (defaults to HOST)"),
    port: int = typer.Option(None, "--port", "-p", help="Listen port (defaults to PORT)"),
):
    """Run the relay server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=host or settings.HOST, port=port or settings.PORT)


if __name__ == "__main__":
    app()
