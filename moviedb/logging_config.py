"""
Logging de MovieDB via loguru.

Deux sorties :
- stderr : une ligne coloree par evenement, au niveau choisi dans Settings
- fichier : un objet JSON par ligne (niveau DEBUG), avec rotation et retention

Les champs structures passes en kwargs (movie_id, actor_id, ...) se retrouvent
dans record.extra du fichier JSON.
"""

import sys

from loguru import logger

from .config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def configure_logging(settings: Settings) -> None:
    """Remplace les handlers loguru par ceux decrits dans la configuration.

    Args :
        settings : configuration chargee (log_level, log_file, log_rotation_size,
            log_retention_count)
    """
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=CONSOLE_FORMAT, colorize=True)

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        # Les recherches de suggestions loguent depuis un thread de travail
        enqueue=True,
    )

    logger.debug(
        "Logging configure",
        log_file=str(settings.log_file),
        database_url=settings.database_url,
    )
