# -*- coding: utf-8 -*-
"""
Formato de moneda para los colaboradores de presentación (UI, PDF, Excel).
Sin estado: el locale y la moneda siempre llegan como parámetro.
No hace ningún cálculo de nómina.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatoMoneda:
    simbolo: str
    separador_miles: str
    espacio: bool = True


FORMATOS: Dict[str, FormatoMoneda] = {
    'es-CO': FormatoMoneda(simbolo='$', separador_miles='.'),
    'es-MX': FormatoMoneda(simbolo='$', separador_miles=',', espacio=False),
    'es-CL': FormatoMoneda(simbolo='$', separador_miles='.'),
    'en-US': FormatoMoneda(simbolo='$', separador_miles=',', espacio=False),
}

LOCALE_DEFECTO = 'es-CO'


def formatear_moneda(valor: float, locale: str = LOCALE_DEFECTO, simbolo: Optional[str] = None) -> str:
    """
    Valor sin decimales, redondeado al entero más cercano, con agrupación de
    miles del locale. Ej. es-CO: 1750905 -> '$ 1.750.905'.
    """
    formato = FORMATOS.get(locale)
    if formato is None:
        logger.warning("Locale %r sin formato, se usa %s", locale, LOCALE_DEFECTO)
        formato = FORMATOS[LOCALE_DEFECTO]

    entero = int(math.floor(abs(valor) + 0.5))
    cifras = f"{entero:,}".replace(',', formato.separador_miles)
    signo = '-' if valor < 0 and entero != 0 else ''
    separador = ' ' if formato.espacio else ''
    return f"{signo}{simbolo or formato.simbolo}{separador}{cifras}"


def formatear_porcentaje(tasa: float, decimales: int = 2) -> str:
    """0.00522 -> '0.52%'"""
    return f"{tasa:.{decimales}%}"
