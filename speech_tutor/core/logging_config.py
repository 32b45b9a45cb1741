"""Configuración de logging de la aplicación (consola, un solo formato)."""
import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configura el logger raíz una sola vez.
    Si uvicorn u otro proceso ya instaló handlers, solo se ajusta el nivel.
    """
    root = logging.getLogger()
    log_level = getattr(logging, level.upper(), logging.INFO)
    if root.handlers:
        root.setLevel(log_level)
        return
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
