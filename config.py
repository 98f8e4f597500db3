import logging
import os

from dotenv import load_dotenv

load_dotenv()

# Año de la tabla de parámetros que usa la calculadora por defecto
ANIO_FISCAL_DEFECTO = int(os.getenv("NOMINA_ANIO_FISCAL", "2026"))

LOCALE_MONEDA = os.getenv("NOMINA_LOCALE", "es-CO")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def configurar_logging(nivel: str = LOG_LEVEL) -> None:
    """Solo la llama el punto de entrada; importar el motor no configura logging."""
    logging.basicConfig(
        level=getattr(logging, nivel.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
