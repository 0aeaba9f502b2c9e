"""
Container d'injection de dependances via dependency-injector.

Fournit la configuration et le client TVDB a la ligne de commande.
"""

from dependency_injector import containers, providers

from .adapters.api.tvdb_client import TVDBClient
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI du client.

    Utilisation :
        container = Container()
        with container.tvdb_client() as client:
            client.search_series("The Simpsons")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client TVDB - nouvelle instance (et nouvelle connexion) a chaque appel
    tvdb_client = providers.Factory(
        TVDBClient,
        api_key=config.provided.api_key,
        base_url=config.provided.base_url,
        language=config.provided.language,
    )
