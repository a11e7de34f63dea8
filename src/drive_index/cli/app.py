import typer

from drive_index.cli.search import search
from drive_index.cli.serve import serve_app
from drive_index.cli.tokens import tokens_app

app = typer.Typer(
    name="drive-index",
    help="Drive Index CLI — search a drive index and manage protected-route tokens.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("search")(search)
app.add_typer(tokens_app, name="tokens")
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
