# -*- coding: utf-8 -*-
"""
==============================================================================
=== LIQUIDACIÓN DEFINITIVA DE CONTRATO (CON ANTICIPOS) ===
==============================================================================

Parte de las prestaciones por días reales del motor (vista de liquidación)
y descuenta lo que el empleador ya pagó por anticipado: prima por semestre
o por monto, vacaciones disfrutadas/pagadas, retiros parciales de cesantías
e intereses ya consignados. Ninguna prestación neta queda negativa.
"""

# --- 0. IMPORTACIONES NECESARIAS ---
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from errores import DeduccionesPersonalizadasError
from modelos import EntradasContrato, MotivoTerminacion, a_monto, normalizar_contrato
from motor import calcular_liquidacion
from parametros import ParametrosFiscales

logger = logging.getLogger(__name__)

MAXIMO_DEDUCCIONES_PERSONALIZADAS = 5
SEMESTRES_POR_ANIO = 2


# ==============================================================================
# --- 1. CLASES DE DATOS (DATACLASSES) ---
# ==============================================================================

class TipoPrimaAnticipada(str, Enum):
    SEMESTRE = 'SEMESTRE'
    MONTO = 'MONTO'


@dataclass(frozen=True)
class PrimaAnticipada:
    """Prima ya pagada: por semestres completos o por un monto directo."""
    tipo: TipoPrimaAnticipada = TipoPrimaAnticipada.MONTO
    semestre_junio_pagado: bool = False
    semestre_diciembre_pagado: bool = False
    monto_pagado: float = 0.0


@dataclass(frozen=True)
class AnticiposPrestaciones:
    prima: PrimaAnticipada = field(default_factory=PrimaAnticipada)
    vacaciones_pagadas: float = 0.0
    cesantias_parciales: float = 0.0
    intereses_cesantias_pagados: float = 0.0


@dataclass(frozen=True)
class DeduccionPersonalizada:
    id: str
    nombre: str
    valor: float


@dataclass(frozen=True)
class DeduccionesLiquidacion:
    prestamos: float
    retencion_fuente: float
    aportes_voluntarios: float
    otras: float
    anticipo_prima: float
    anticipo_vacaciones: float
    anticipo_cesantias: float
    anticipo_intereses_cesantias: float
    deducciones_personalizadas: Tuple[DeduccionPersonalizada, ...]
    total: float


@dataclass(frozen=True)
class LiquidacionDetallada:
    dias_laborados: int
    base_liquidacion: float
    motivo: Optional[MotivoTerminacion]

    cesantias: float
    cesantias_anticipadas: float
    cesantias_netas: float

    intereses_cesantias: float
    intereses_cesantias_anticipados: float
    intereses_cesantias_netos: float

    prima: float
    prima_anticipada: float
    prima_neta: float

    vacaciones: float
    vacaciones_anticipadas: float
    vacaciones_netas: float

    total_prestaciones_brutas: float
    total_anticipos: float
    total_prestaciones: float

    deducciones: DeduccionesLiquidacion
    neto_a_pagar: float


# ==============================================================================
# --- 2. FUNCIONES DE LIQUIDACIÓN ---
# ==============================================================================

def calcular_prima_anticipada(prima: PrimaAnticipada, base_liquidacion: float) -> float:
    """
    Por semestre: cada semestre pagado vale media base mensual
    (base x 180 / 360). Por monto: el valor pagado.
    """
    if prima.tipo == TipoPrimaAnticipada.SEMESTRE:
        semestres = int(prima.semestre_junio_pagado) + int(prima.semestre_diciembre_pagado)
        return (base_liquidacion / SEMESTRES_POR_ANIO) * semestres
    return a_monto(prima.monto_pagado)


def _validar_deducciones(deducciones: Sequence[DeduccionPersonalizada]) -> Tuple[DeduccionPersonalizada, ...]:
    if len(deducciones) > MAXIMO_DEDUCCIONES_PERSONALIZADAS:
        raise DeduccionesPersonalizadasError(
            f"Máximo {MAXIMO_DEDUCCIONES_PERSONALIZADAS} deducciones personalizadas, llegaron {len(deducciones)}."
        )
    return tuple(
        DeduccionPersonalizada(id=d.id, nombre=d.nombre, valor=a_monto(d.valor))
        for d in deducciones
    )


def liquidar_contrato(
    contrato: EntradasContrato,
    parametros: ParametrosFiscales,
    anticipos: Optional[AnticiposPrestaciones] = None,
    deducciones_personalizadas: Sequence[DeduccionPersonalizada] = (),
    motivo: Optional[MotivoTerminacion] = None
) -> LiquidacionDetallada:
    """
    Liquidación definitiva: prestaciones brutas por días reales, menos
    anticipos (cada neta con piso en 0), menos descuentos del trabajador.
    """
    personalizadas = _validar_deducciones(deducciones_personalizadas)
    anticipos = anticipos or AnticiposPrestaciones()

    resumen = calcular_liquidacion(contrato, parametros)
    normalizado = normalizar_contrato(contrato, parametros)
    datos = resumen.datos_salariales
    costos = resumen.costos_empleador

    # Salario + auxilio de transporte, sin pagos no salariales
    base_liquidacion = datos.total_devengado - datos.no_salarial

    anticipo_prima = calcular_prima_anticipada(anticipos.prima, base_liquidacion)
    anticipo_vacaciones = a_monto(anticipos.vacaciones_pagadas)
    anticipo_cesantias = a_monto(anticipos.cesantias_parciales)
    anticipo_intereses = a_monto(anticipos.intereses_cesantias_pagados)

    cesantias_netas = max(0.0, costos.cesantias - anticipo_cesantias)
    intereses_netos = max(0.0, costos.intereses_cesantias - anticipo_intereses)
    prima_neta = max(0.0, costos.prima - anticipo_prima)
    vacaciones_netas = max(0.0, costos.vacaciones - anticipo_vacaciones)

    total_brutas = costos.cesantias + costos.intereses_cesantias + costos.prima + costos.vacaciones
    total_anticipos = anticipo_cesantias + anticipo_intereses + anticipo_prima + anticipo_vacaciones
    total_prestaciones = cesantias_netas + intereses_netos + prima_neta + vacaciones_netas

    # Los anticipos ya se restaron de cada prestación; no entran al total de descuentos
    ded_empleado = resumen.deducciones_empleado
    total_descuentos = (
        normalizado.prestamos
        + ded_empleado.retencion_fuente
        + ded_empleado.deducciones_voluntarias
        + normalizado.otras_deducciones
        + sum(d.valor for d in personalizadas)
    )
    deducciones = DeduccionesLiquidacion(
        prestamos=normalizado.prestamos,
        retencion_fuente=ded_empleado.retencion_fuente,
        aportes_voluntarios=ded_empleado.deducciones_voluntarias,
        otras=normalizado.otras_deducciones,
        anticipo_prima=anticipo_prima,
        anticipo_vacaciones=anticipo_vacaciones,
        anticipo_cesantias=anticipo_cesantias,
        anticipo_intereses_cesantias=anticipo_intereses,
        deducciones_personalizadas=personalizadas,
        total=total_descuentos,
    )

    logger.debug(
        "Liquidación: dias=%s brutas=%.2f anticipos=%.2f descuentos=%.2f",
        datos.dias_laborados, total_brutas, total_anticipos, total_descuentos
    )

    return LiquidacionDetallada(
        dias_laborados=datos.dias_laborados,
        base_liquidacion=base_liquidacion,
        motivo=motivo,
        cesantias=costos.cesantias,
        cesantias_anticipadas=anticipo_cesantias,
        cesantias_netas=cesantias_netas,
        intereses_cesantias=costos.intereses_cesantias,
        intereses_cesantias_anticipados=anticipo_intereses,
        intereses_cesantias_netos=intereses_netos,
        prima=costos.prima,
        prima_anticipada=anticipo_prima,
        prima_neta=prima_neta,
        vacaciones=costos.vacaciones,
        vacaciones_anticipadas=anticipo_vacaciones,
        vacaciones_netas=vacaciones_netas,
        total_prestaciones_brutas=total_brutas,
        total_anticipos=total_anticipos,
        total_prestaciones=total_prestaciones,
        deducciones=deducciones,
        neto_a_pagar=total_prestaciones - total_descuentos,
    )
