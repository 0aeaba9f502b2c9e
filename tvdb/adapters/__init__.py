"""
Couche adaptateurs (infrastructure).

Sous-packages :
- api/ : Client HTTP/XML de TVDB
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
