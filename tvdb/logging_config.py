"""
Configuration du logging via loguru.

Le package coupe ses propres logs à l'import (logger.disable("tvdb")).
configure_logging() les rétablit et branche deux sorties :
- stderr, colorée, au niveau demandé
- un fichier JSON tournant qui garde tout à partir de DEBUG (URLs appelées)
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# En DEBUG on veut savoir quel module a émis la ligne
CONSOLE_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"
CONSOLE_DEBUG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _add_console_handler(log_level: str) -> None:
    debug = log_level.upper() in ("TRACE", "DEBUG")
    logger.add(
        sys.stderr,
        level=log_level,
        format=CONSOLE_DEBUG_FORMAT if debug else CONSOLE_FORMAT,
        colorize=True,
    )


def _add_file_handler(log_file: Path, rotation_size: str, retention_count: int) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/tvdb.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Installe les sorties de log du client et active le logger "tvdb".

    Args :
        log_level : Niveau minimum sur stderr (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON tournant ; None pour s'en passer
        rotation_size : Taille déclenchant la rotation (ex: "10 MB")
        retention_count : Nombre d'archives conservées
    """
    logger.remove()
    logger.enable("tvdb")

    _add_console_handler(log_level)
    if log_file is not None:
        _add_file_handler(log_file, rotation_size, retention_count)
        logger.debug(f"Logs écrits dans {log_file} (rotation {rotation_size})")
