# -*- coding: utf-8 -*-
"""
==============================================================================
=== RETENCIÓN EN LA FUENTE POR INGRESOS LABORALES (PROCEDIMIENTO 1) ===
==============================================================================

Depuración mensual de la base gravable y aplicación de la tabla del
Art. 383 E.T. Todos los topes anuales en UVT se llevan a su equivalente
mensual (tope / 12), salvo el de ahorro voluntario exento, que se aplica
como tope plano.
"""

# --- 0. IMPORTACIONES NECESARIAS ---
from __future__ import annotations
import logging
import math

from modelos import DepuracionRetencion, ParametrosDeduccion
from parametros import ParametrosFiscales, buscar_tramo

logger = logging.getLogger(__name__)


def redondear_pesos(valor: float) -> int:
    """Redondeo al peso más cercano, mitades hacia arriba."""
    return int(math.floor(valor + 0.5))


def calcular_impuesto_uvt(base_gravable_uvt: float, parametros: ParametrosFiscales) -> float:
    """
    Aplica la tabla progresiva del Art. 383 E.T.
    Cada tramo es (base - límite inferior) * tasa marginal + impuesto base.
    El límite inferior es exclusivo: una base de exactamente 95 UVT no paga.
    """
    tramo = buscar_tramo(parametros.tabla_retencion, base_gravable_uvt, incluye_limite_inferior=False)
    return (base_gravable_uvt - tramo.limite_inferior) * tramo.tasa + tramo.impuesto_base


def calcular_retencion_fuente(
    ingreso_bruto: float,
    aportes_obligatorios: float,
    deduccion: ParametrosDeduccion,
    parametros: ParametrosFiscales
) -> DepuracionRetencion:
    """
    Depura el ingreso laboral del mes y calcula la retención.

    1. Ingresos no constitutivos (INCR): aportes obligatorios + pensión voluntaria.
    2. Ingreso neto = bruto - INCR.
    3. Deducciones: intereses de vivienda, medicina prepagada y dependientes
       (10% del ingreso laboral neto de aportes).
    4. Rentas exentas por ahorro voluntario (pensión voluntaria exenta + AFC).
    5. Renta exenta del 25% (Art. 206 num. 10 E.T.).
    6. Limitación al menor entre el 40% del ingreso neto y 1.340 UVT anuales.
    7. Base gravable en UVT y tabla del Art. 383.
    """
    uvt = parametros.uvt
    topes = parametros.topes_uvt

    # 1. INCR
    incr = aportes_obligatorios + deduccion.pension_voluntaria

    # 2. Ingreso neto
    base_laboral_neta = max(0.0, ingreso_bruto - aportes_obligatorios)
    ingreso_neto = max(0.0, ingreso_bruto - incr)

    # 3. Deducciones
    ded_vivienda = min(deduccion.intereses_vivienda, topes.intereses_vivienda * uvt)
    ded_medicina = min(deduccion.medicina_prepagada, topes.medicina_prepagada * uvt)
    ded_dependientes = 0.0
    if deduccion.tiene_dependientes:
        ded_dependientes = min(base_laboral_neta * topes.porcentaje_dependientes, topes.dependientes * uvt)
    total_deducciones = ded_vivienda + ded_medicina + ded_dependientes

    # 4. Rentas exentas por ahorro voluntario
    exentas_voluntarias = min(
        deduccion.pension_voluntaria_exenta + deduccion.afc,
        topes.ahorro_voluntario_exento * uvt
    )

    # 5. Renta exenta del 25%
    base_25 = max(0.0, ingreso_neto - total_deducciones - exentas_voluntarias)
    exenta_25 = min(base_25 * topes.porcentaje_renta_exenta, (topes.renta_exenta_25_anual * uvt) / 12)

    # 6. Limitación del 40% / 1.340 UVT
    total_beneficios = total_deducciones + exentas_voluntarias + exenta_25
    limite_porcentual = ingreso_neto * topes.porcentaje_limite_beneficios
    limite_uvt_mensual = (topes.beneficios_totales_anual * uvt) / 12
    beneficios_aplicados = min(total_beneficios, limite_porcentual, limite_uvt_mensual)

    # 7. Base gravable y tabla
    base_gravable = max(0.0, ingreso_neto - beneficios_aplicados)
    base_gravable_uvt = base_gravable / uvt
    retencion_uvt = calcular_impuesto_uvt(base_gravable_uvt, parametros)
    retencion = redondear_pesos(retencion_uvt * uvt)

    logger.debug(
        "Depuración: neto=%.2f beneficios=%.2f base_uvt=%.4f retencion=%s",
        ingreso_neto, beneficios_aplicados, base_gravable_uvt, retencion
    )

    return DepuracionRetencion(
        ingreso_bruto=ingreso_bruto,
        aportes_obligatorios=aportes_obligatorios,
        ingresos_no_constitutivos=incr,
        ingreso_neto=ingreso_neto,
        deduccion_vivienda=ded_vivienda,
        deduccion_medicina=ded_medicina,
        deduccion_dependientes=ded_dependientes,
        total_deducciones=total_deducciones,
        rentas_exentas_voluntarias=exentas_voluntarias,
        renta_exenta_25=exenta_25,
        total_beneficios=total_beneficios,
        beneficios_aplicados=beneficios_aplicados,
        base_gravable=base_gravable,
        base_gravable_uvt=base_gravable_uvt,
        retencion_uvt=retencion_uvt,
        retencion=float(retencion),
    )
