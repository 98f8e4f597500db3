# -*- coding: utf-8 -*-
"""
==============================================================================
=== PARÁMETROS FISCALES (TABLAS VERSIONADAS POR AÑO) ===
==============================================================================

Cada cálculo recibe un 'ParametrosFiscales' explícito. No hay constantes
anuales globales dentro del motor.

Los tramos legales (Fondo de Solidaridad, Art. 383 E.T.) se guardan como
tablas ordenadas y se evalúan con una única rutina genérica 'buscar_tramo'.
"""

# --- 0. IMPORTACIONES NECESARIAS ---
from __future__ import annotations
import dataclasses
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from errores import AnioFiscalNoSoportadoError, ParametrosInvalidosError
from modelos import ClaseRiesgo

logger = logging.getLogger(__name__)


# ==============================================================================
# --- 1. TRAMOS Y BÚSQUEDA GENÉRICA ---
# ==============================================================================

@dataclass(frozen=True)
class Tramo:
    """Un tramo de una tabla progresiva o escalonada."""
    limite_inferior: float
    tasa: float
    impuesto_base: float = 0.0


def validar_tabla(nombre: str, tabla: Sequence[Tramo]) -> None:
    """
    Verifica que la tabla cubra [0, inf): no vacía, primer límite en 0,
    límites estrictamente crecientes y tasas no negativas.
    """
    if not tabla:
        raise ParametrosInvalidosError(f"La tabla '{nombre}' está vacía.")
    if tabla[0].limite_inferior != 0:
        raise ParametrosInvalidosError(f"La tabla '{nombre}' debe iniciar en 0.")
    anterior = None
    for tramo in tabla:
        if tramo.tasa < 0 or tramo.impuesto_base < 0:
            raise ParametrosInvalidosError(f"La tabla '{nombre}' tiene valores negativos.")
        if anterior is not None and tramo.limite_inferior <= anterior.limite_inferior:
            raise ParametrosInvalidosError(
                f"La tabla '{nombre}' no es estrictamente creciente en {tramo.limite_inferior}."
            )
        anterior = tramo


def buscar_tramo(
    tabla: Sequence[Tramo],
    valor: float,
    escala: float = 1.0,
    incluye_limite_inferior: bool = True
) -> Tramo:
    """
    Devuelve el tramo que contiene 'valor'.

    Los límites de la tabla se multiplican por 'escala' antes de comparar
    (p. ej. límites en SMMLV comparados contra un IBC en pesos).

    - incluye_limite_inferior=True  -> intervalos [inferior, superior)
    - incluye_limite_inferior=False -> intervalos (inferior, superior]

    El primer tramo actúa como piso: un valor que no supera ningún límite cae
    en él.
    """
    elegido = tabla[0]
    for tramo in tabla[1:]:
        limite = tramo.limite_inferior * escala
        supera = valor >= limite if incluye_limite_inferior else valor > limite
        if not supera:
            break
        elegido = tramo
    return elegido


# ==============================================================================
# --- 2. TASAS Y TOPES ---
# ==============================================================================

@dataclass(frozen=True)
class TasasAportes:
    """Porcentajes de aportes, parafiscales y provisiones."""
    # Ley 100 de 1993
    salud_empleado: float = 0.04
    pension_empleado: float = 0.04
    salud_empleador: float = 0.085
    pension_empleador: float = 0.12
    # Parafiscales (Ley 21 de 1982, Ley 89 de 1988)
    sena: float = 0.02
    icbf: float = 0.03
    caja_compensacion: float = 0.04
    # Art. 114-1 E.T.: exoneración para salarios menores a 10 SMMLV
    tope_exoneracion_smmlv: float = 10.0
    # Art. 30, Ley 1393 de 2010
    limite_no_salarial: float = 0.40
    # Topes del IBC (Art. 5, Ley 797 de 2003)
    ibc_minimo_smmlv: float = 1.0
    ibc_maximo_smmlv: float = 25.0
    # Provisiones mensuales (aproximación de causación)
    cesantias: float = 0.0833
    intereses_cesantias: float = 0.12
    prima: float = 0.0833
    vacaciones: float = 0.0417


@dataclass(frozen=True)
class TopesUVT:
    """Topes de depuración de retención en la fuente, en UVT."""
    intereses_vivienda: float = 100      # mensual, Art. 119 E.T.
    medicina_prepagada: float = 16       # mensual, Art. 387 E.T.
    dependientes: float = 32             # mensual, Art. 387 E.T.
    ahorro_voluntario_exento: float = 316
    renta_exenta_25_anual: float = 790   # Art. 206 num. 10 E.T.
    beneficios_totales_anual: float = 1340
    porcentaje_dependientes: float = 0.10
    porcentaje_renta_exenta: float = 0.25
    porcentaje_limite_beneficios: float = 0.40


# Art. 383 E.T. (rangos en UVT). Límite inferior exclusivo.
TABLA_RETENCION_383: Tuple[Tramo, ...] = (
    Tramo(0, 0.0, 0),
    Tramo(95, 0.19, 0),
    Tramo(150, 0.28, 10),
    Tramo(360, 0.33, 69),
    Tramo(640, 0.35, 162),
    Tramo(945, 0.37, 268),
    Tramo(2300, 0.39, 770),
)

# Art. 27, Ley 100 de 1993 (rangos en múltiplos de SMMLV). Límite inferior inclusivo.
TABLA_SOLIDARIDAD: Tuple[Tramo, ...] = (
    Tramo(0, 0.0),
    Tramo(4, 0.01),
    Tramo(16, 0.012),
    Tramo(17, 0.014),
    Tramo(18, 0.016),
    Tramo(19, 0.018),
    Tramo(20, 0.02),
)

# Decreto 1772 de 1994
TASAS_RIESGO_ARL: Mapping[ClaseRiesgo, float] = MappingProxyType({
    ClaseRiesgo.I: 0.00522,
    ClaseRiesgo.II: 0.01044,
    ClaseRiesgo.III: 0.02436,
    ClaseRiesgo.IV: 0.04350,
    ClaseRiesgo.V: 0.06960,
})


# ==============================================================================
# --- 3. PARÁMETROS FISCALES ---
# ==============================================================================

@dataclass(frozen=True)
class ParametrosFiscales:
    """Valores oficiales de un año fiscal. Inmutable."""
    anio: int
    smmlv: float
    auxilio_transporte: float
    uvt: float
    tasas_riesgo: Mapping[ClaseRiesgo, float] = field(default_factory=lambda: TASAS_RIESGO_ARL)
    tabla_retencion: Tuple[Tramo, ...] = TABLA_RETENCION_383
    tabla_solidaridad: Tuple[Tramo, ...] = TABLA_SOLIDARIDAD
    tasas: TasasAportes = field(default_factory=TasasAportes)
    topes_uvt: TopesUVT = field(default_factory=TopesUVT)

    def __post_init__(self):
        for nombre in ('smmlv', 'auxilio_transporte', 'uvt'):
            if getattr(self, nombre) < 0:
                raise ParametrosInvalidosError(f"'{nombre}' no puede ser negativo.")
        if self.smmlv == 0 or self.uvt == 0:
            raise ParametrosInvalidosError("SMMLV y UVT deben ser mayores que cero.")
        validar_tabla('retencion', self.tabla_retencion)
        validar_tabla('solidaridad', self.tabla_solidaridad)
        if ClaseRiesgo.I not in self.tasas_riesgo:
            raise ParametrosInvalidosError("La tabla de riesgos debe incluir la clase I.")
        if any(tasa < 0 for tasa in self.tasas_riesgo.values()):
            raise ParametrosInvalidosError("La tabla de riesgos tiene tasas negativas.")
        for grupo in (self.tasas, self.topes_uvt):
            for campo in dataclasses.fields(grupo):
                if getattr(grupo, campo.name) < 0:
                    raise ParametrosInvalidosError(f"'{campo.name}' no puede ser negativo.")
        # Congelar colecciones que llegan como list/dict
        object.__setattr__(self, 'tabla_retencion', tuple(self.tabla_retencion))
        object.__setattr__(self, 'tabla_solidaridad', tuple(self.tabla_solidaridad))
        object.__setattr__(self, 'tasas_riesgo', MappingProxyType(dict(self.tasas_riesgo)))


# Decretos de salario mínimo y resoluciones DIAN de UVT
PARAMETROS_2024 = ParametrosFiscales(anio=2024, smmlv=1300000, auxilio_transporte=162000, uvt=47065)
PARAMETROS_2025 = ParametrosFiscales(anio=2025, smmlv=1423500, auxilio_transporte=200000, uvt=49799)
# UVT: Resolución DIAN 000227 del 23 SEP 2025
PARAMETROS_2026 = ParametrosFiscales(anio=2026, smmlv=1750905, auxilio_transporte=249095, uvt=49799)

PARAMETROS_POR_ANIO: Mapping[int, ParametrosFiscales] = MappingProxyType({
    p.anio: p for p in (PARAMETROS_2024, PARAMETROS_2025, PARAMETROS_2026)
})


def obtener_parametros(
    anio: int,
    smmlv: Optional[float] = None,
    auxilio_transporte: Optional[float] = None
) -> ParametrosFiscales:
    """
    Devuelve la tabla del año pedido.

    Los overrides de SMMLV y auxilio de transporte permiten liquidar con
    valores de un año anterior sin construir la tabla a mano.
    """
    try:
        base = PARAMETROS_POR_ANIO[anio]
    except KeyError:
        raise AnioFiscalNoSoportadoError(anio, sorted(PARAMETROS_POR_ANIO)) from None

    cambios = {}
    if smmlv is not None:
        cambios['smmlv'] = smmlv
    if auxilio_transporte is not None:
        cambios['auxilio_transporte'] = auxilio_transporte
    if not cambios:
        return base

    logger.debug("Parámetros %s con overrides %s", anio, cambios)
    return dataclasses.replace(base, **cambios)
