"""
Point d'entrée CLI du client TVDB.

Configure le logging et monte les commandes de consultation et de compte.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    actors,
    episode,
    favorites,
    languages,
    rate,
    ratings,
    remote,
    search,
    series,
    user_language,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="tvdb",
    help="Client en ligne de commande pour l'API XML de TheTVDB",
    no_args_is_help=True,
)
container = Container()

# Niveau console selon -v/-q ; le fichier de log capture toujours DEBUG
_LOG_LEVELS = {0: None, 1: "INFO", 2: "DEBUG"}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """TVDB - series, episodes et comptes utilisateurs TheTVDB."""
    settings = get_config()
    if quiet:
        log_level = "ERROR"
    else:
        log_level = _LOG_LEVELS.get(min(verbose, 2)) or settings.log_level
    configure_logging(
        log_level=log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(search)
app.command()(series)
app.command()(episode)
app.command()(actors)
app.command()(remote)
app.command()(languages)
app.command()(favorites)
app.command()(ratings)
app.command()(rate)
app.command(name="user-language")(user_language)


def get_config() -> Settings:
    """Récupère les paramètres depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration TVDB")
    typer.echo(f"URL de base : {config.base_url}")
    typer.echo(f"Langue : {config.language}")
    typer.echo(f"Clé API : {'configurée' if config.api_enabled else 'absente'}")
    typer.echo(f"Compte : {config.account_id or '-'}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
