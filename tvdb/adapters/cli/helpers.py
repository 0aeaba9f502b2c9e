"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console : instance Rich Console partagee
- open_client : context manager fournissant un TVDBClient configure
- resolve_account : choix du compte utilisateur (option ou configuration)
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import httpx
import typer
from rich.console import Console

from tvdb.adapters.api.errors import TVDBError
from tvdb.adapters.api.tvdb_client import TVDBClient
from tvdb.container import Container

console = Console()


@contextmanager
def open_client() -> Iterator[TVDBClient]:
    """
    Fournit un client TVDB construit depuis la configuration.

    Les erreurs TVDB et HTTP sont affichees en rouge et terminent la
    commande avec le code 1.

    Usage:
        with open_client() as client:
            series = client.series_by_id(71663)
    """
    container = Container()
    config = container.config()
    if not config.api_enabled:
        console.print("[red]Erreur: cle API manquante (variable TVDB_API_KEY)[/red]")
        raise typer.Exit(1)

    client = container.tvdb_client()
    try:
        yield client
    except (TVDBError, httpx.HTTPError) as e:
        console.print(f"[red]Erreur: {e}[/red]")
        raise typer.Exit(1)
    finally:
        client.close()


def resolve_account(account_id: Optional[str]) -> str:
    """
    Retourne le compte a utiliser : l'option, sinon TVDB_ACCOUNT_ID.

    Termine la commande si aucun compte n'est disponible.
    """
    if account_id:
        return account_id
    configured = Container().config().account_id
    if not configured:
        console.print(
            "[red]Erreur: compte manquant (--account ou variable TVDB_ACCOUNT_ID)[/red]"
        )
        raise typer.Exit(1)
    return configured
