# -*- coding: utf-8 -*-
"""
==============================================================================
=== MOTOR DE CÁLCULO DE NÓMINA Y LIQUIDACIÓN (COLOMBIA) ===
==============================================================================

Este archivo contiene toda la lógica pura de Python.
No debe contener NINGUNA importación o código de Streamlit (st.).

- Cada función recibe sus datos y un 'ParametrosFiscales' explícito.
- El contrato se normaliza una sola vez ('normalizar_contrato'); las
  fórmulas de abajo nunca preguntan por valores faltantes.
- Nada lanza excepciones por datos de negocio: fechas ilegibles, riesgos
  desconocidos o IBC fuera de rango se absorben con reglas de respaldo.
"""

# --- 0. IMPORTACIONES NECESARIAS ---
from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Tuple

from dateutil import parser as date_parser

from modelos import (
    ClaseRiesgo, Compensacion, ContratoNormalizado, CostosEmpleador, DatosSalariales,
    DeduccionesEmpleado, DepuracionRetencion, EntradasContrato, NetoLiquidacion,
    ResultadoNomina, ResumenFinanciero, normalizar_contrato
)
from parametros import ParametrosFiscales, buscar_tramo
from retencion import calcular_retencion_fuente

logger = logging.getLogger(__name__)

# --- 1. CONSTANTES DE LEY (no cambian por año) ---

# Jornada de 240 horas mensuales (Art. 161 C.S.T.)
HORAS_MES = 240

# Art. 168 - 179 C.S.T. (multiplicador sobre el valor hora)
TASA_HED = 1.25     # Hora extra diurna
TASA_HEN = 1.75     # Hora extra nocturna
TASA_RN = 0.35      # Recargo nocturno
TASA_DOM_FEST = 1.80
TASA_HEDDF = 2.00   # Extra diurna dominical/festiva
TASA_HENDF = 2.50   # Extra nocturna dominical/festiva

DIAS_MES = 30
DIAS_ANIO_COMERCIAL = 360
DIAS_RESPALDO = 30


# ==============================================================================
# --- 2. DÍAS LABORADOS (AÑO COMERCIAL DE 360 DÍAS) ---
# ==============================================================================

def _parsear_fecha(valor: Any) -> Optional[date]:
    """ISO 'AAAA-MM-DD' o date/datetime. Cualquier otra cosa -> None."""
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    if not isinstance(valor, str) or not valor.strip():
        return None
    try:
        return date_parser.isoparse(valor.strip()).date()
    except (ValueError, TypeError, OverflowError):
        return None


def calcular_dias_360(fecha_inicio: Any = None, fecha_fin: Any = None) -> int:
    """
    Días laborados con la convención 30/360 de la legislación laboral.
    El día 31 cuenta como 30 en ambos extremos y el conteo es inclusivo (+1).
    Fechas faltantes o ilegibles -> 30 días.
    """
    inicio = _parsear_fecha(fecha_inicio)
    fin = _parsear_fecha(fecha_fin)
    if inicio is None or fin is None:
        if fecha_inicio is not None or fecha_fin is not None:
            logger.warning(
                "Fechas %r / %r no válidas, se usan %s días", fecha_inicio, fecha_fin, DIAS_RESPALDO
            )
        return DIAS_RESPALDO

    dia_inicio = min(inicio.day, 30)
    dia_fin = min(fin.day, 30)

    dias = (
        (fin.year - inicio.year) * DIAS_ANIO_COMERCIAL
        + (fin.month - inicio.month) * DIAS_MES
        + (dia_fin - dia_inicio)
        + 1
    )
    return max(0, dias)


# ==============================================================================
# --- 3. FUNCIONES DE CÁLCULO DE INGRESOS ---
# ==============================================================================

def calcular_valor_hora(salario_base: float) -> float:
    """
    Valor de una hora ordinaria.
    Base Legal: jornada de 240 horas al mes (Art. 161 C.S.T.).
    """
    if salario_base <= 0:
        return 0.0
    return salario_base / HORAS_MES


def calcular_compensacion(contrato: ContratoNormalizado, parametros: ParametrosFiscales) -> Compensacion:
    """Suma salario, horas extras/recargos y variables del periodo."""
    valor_hora = calcular_valor_hora(contrato.salario_base)

    valor_hed = valor_hora * TASA_HED * contrato.horas_hed
    valor_hen = valor_hora * TASA_HEN * contrato.horas_hen
    valor_rn = valor_hora * TASA_RN * contrato.horas_rn
    valor_dom_fest = valor_hora * TASA_DOM_FEST * contrato.horas_dom_fest
    valor_heddf = valor_hora * TASA_HEDDF * contrato.horas_heddf
    valor_hendf = valor_hora * TASA_HENDF * contrato.horas_hendf
    horas_extras = valor_hed + valor_hen + valor_rn + valor_dom_fest + valor_heddf + valor_hendf

    # Constitutivos de salario (Art. 127 C.S.T.) vs. no constitutivos (Art. 128)
    variables = contrato.comisiones + contrato.bonos_salariales
    no_salarial = contrato.bonos_no_salariales

    auxilio = parametros.auxilio_transporte if contrato.incluir_auxilio_transporte else 0.0
    subtotal_salarial = contrato.salario_base + horas_extras + variables

    return Compensacion(
        valor_hora=valor_hora,
        valor_hed=valor_hed,
        valor_hen=valor_hen,
        valor_rn=valor_rn,
        valor_dom_fest=valor_dom_fest,
        valor_heddf=valor_heddf,
        valor_hendf=valor_hendf,
        horas_extras=horas_extras,
        variables=variables,
        no_salarial=no_salarial,
        subtotal_salarial=subtotal_salarial,
        auxilio_transporte=auxilio,
        total_devengado=subtotal_salarial + auxilio + no_salarial,
    )


# ==============================================================================
# --- 4. IBC Y FONDO DE SOLIDARIDAD ---
# ==============================================================================

def calcular_ibc(subtotal_salarial: float, no_salarial: float, parametros: ParametrosFiscales) -> float:
    """
    Ingreso Base de Cotización.
    Base Legal: Art. 30, Ley 1393 de 2010. Los pagos no salariales solo se
    excluyen hasta el 40% de la remuneración total; el exceso vuelve al IBC.
    Luego se ajusta al piso de 1 SMMLV y al techo de 25 SMMLV.
    """
    tasas = parametros.tasas
    remuneracion_total = subtotal_salarial + no_salarial
    limite_40 = remuneracion_total * tasas.limite_no_salarial
    exceso_no_salarial = max(0.0, no_salarial - limite_40)
    ibc_bruto = subtotal_salarial + exceso_no_salarial

    piso = parametros.smmlv * tasas.ibc_minimo_smmlv
    techo = parametros.smmlv * tasas.ibc_maximo_smmlv
    ibc = min(max(ibc_bruto, piso), techo)
    if ibc != ibc_bruto:
        logger.debug("IBC %.2f ajustado a %.2f", ibc_bruto, ibc)
    return ibc


def calcular_tasa_solidaridad(ibc: float, parametros: ParametrosFiscales) -> float:
    """
    Tasa del Fondo de Solidaridad Pensional según el IBC en múltiplos de SMMLV.
    Base Legal: Art. 27, Ley 100 de 1993. Intervalos [inferior, superior).
    """
    tramo = buscar_tramo(parametros.tabla_solidaridad, ibc, escala=parametros.smmlv)
    return tramo.tasa


# ==============================================================================
# --- 5. FUNCIONES DE CÁLCULO DE DESCUENTOS ---
# ==============================================================================

def calcular_deducciones_empleado(
    contrato: ContratoNormalizado,
    compensacion: Compensacion,
    ibc: float,
    tasa_solidaridad: float,
    parametros: ParametrosFiscales
) -> Tuple[DeduccionesEmpleado, Optional[DepuracionRetencion]]:
    """Aportes del trabajador, retención (si está habilitada) y otros descuentos."""
    tasas = parametros.tasas
    salud = ibc * tasas.salud_empleado
    pension = ibc * tasas.pension_empleado
    fondo_solidaridad = ibc * tasa_solidaridad

    depuracion = None
    retencion = 0.0
    if contrato.habilitar_retencion:
        depuracion = calcular_retencion_fuente(
            ingreso_bruto=compensacion.subtotal_salarial,
            aportes_obligatorios=salud + pension + fondo_solidaridad,
            deduccion=contrato.deduccion,
            parametros=parametros
        )
        retencion = depuracion.retencion

    ded = contrato.deduccion
    deducciones_voluntarias = ded.pension_voluntaria + ded.pension_voluntaria_exenta + ded.afc
    otras_deducciones = contrato.prestamos + contrato.otras_deducciones

    total = salud + pension + fondo_solidaridad + retencion + deducciones_voluntarias + otras_deducciones

    deducciones = DeduccionesEmpleado(
        salud=salud,
        pension=pension,
        fondo_solidaridad=fondo_solidaridad,
        retencion_fuente=retencion,
        deducciones_voluntarias=deducciones_voluntarias,
        otras_deducciones=otras_deducciones,
        total=total,
    )
    return deducciones, depuracion


# ==============================================================================
# --- 6. FUNCIONES DE COSTO LABORAL (EMPLEADOR) ---
# ==============================================================================

@dataclass(frozen=True)
class Provisiones:
    """Prestaciones sociales de una vista (mensual o liquidación)."""
    cesantias: float
    intereses_cesantias: float
    prima: float
    vacaciones: float

    @property
    def total(self) -> float:
        return self.cesantias + self.intereses_cesantias + self.prima + self.vacaciones


def aplica_exoneracion(contrato: ContratoNormalizado, subtotal_salarial: float, parametros: ParametrosFiscales) -> bool:
    """
    Exoneración de salud, SENA e ICBF del empleador.
    Base Legal: Art. 114-1 E.T. Solo para trabajadores que devenguen menos
    de 10 SMMLV; la marca se ignora por encima de ese tope.
    """
    if not contrato.exonerado_parafiscales:
        return False
    tope = parametros.smmlv * parametros.tasas.tope_exoneracion_smmlv
    if subtotal_salarial < tope:
        return True
    logger.warning("Exoneración ignorada: subtotal salarial %.2f >= %.2f", subtotal_salarial, tope)
    return False


def obtener_tasa_arl(clase_riesgo: ClaseRiesgo, parametros: ParametrosFiscales) -> float:
    """Tasa ARL de la clase. Si la tabla no la trae, se usa la clase I."""
    tasa = parametros.tasas_riesgo.get(clase_riesgo)
    if tasa is None:
        logger.warning("Clase de riesgo %s sin tasa, se usa la clase I", clase_riesgo)
        tasa = parametros.tasas_riesgo[ClaseRiesgo.I]
    return tasa


def calcular_provisiones_mensuales(compensacion: Compensacion, parametros: ParametrosFiscales) -> Provisiones:
    """
    Provisiones de un mes con la aproximación fija de causación (1/12).
    El auxilio de transporte entra en cesantías y prima, NO en vacaciones.
    """
    tasas = parametros.tasas
    base_prestaciones = compensacion.subtotal_salarial + compensacion.auxilio_transporte
    cesantias = base_prestaciones * tasas.cesantias
    return Provisiones(
        cesantias=cesantias,
        intereses_cesantias=cesantias * tasas.intereses_cesantias,
        prima=base_prestaciones * tasas.prima,
        vacaciones=compensacion.subtotal_salarial * tasas.vacaciones,
    )


def calcular_prestaciones_liquidacion(
    compensacion: Compensacion,
    dias: int,
    parametros: ParametrosFiscales
) -> Provisiones:
    """
    Prestaciones por días reales laborados (no es una fracción de la vista
    mensual).
    Base Legal: Art. 249 (cesantías), Ley 52 de 1975 (intereses),
    Art. 306 (prima) y Art. 186 C.S.T. (vacaciones: 15 días por año).
    """
    base_prestaciones = compensacion.subtotal_salarial + compensacion.auxilio_transporte
    cesantias = (base_prestaciones * dias) / DIAS_ANIO_COMERCIAL
    intereses = (cesantias * dias * parametros.tasas.intereses_cesantias) / DIAS_ANIO_COMERCIAL
    prima = (base_prestaciones * dias) / DIAS_ANIO_COMERCIAL
    vacaciones = (compensacion.subtotal_salarial * dias) / (DIAS_ANIO_COMERCIAL * 2)
    return Provisiones(
        cesantias=cesantias,
        intereses_cesantias=intereses,
        prima=prima,
        vacaciones=vacaciones,
    )


def calcular_costos_empleador(
    contrato: ContratoNormalizado,
    compensacion: Compensacion,
    ibc: float,
    provisiones: Provisiones,
    parametros: ParametrosFiscales
) -> CostosEmpleador:
    """
    Aportes del empleador, parafiscales y provisiones.
    Pensión, ARL y caja de compensación nunca se exoneran.
    """
    tasas = parametros.tasas
    exonerado = aplica_exoneracion(contrato, compensacion.subtotal_salarial, parametros)

    salud = 0.0 if exonerado else ibc * tasas.salud_empleador
    pension = ibc * tasas.pension_empleador
    arl = ibc * obtener_tasa_arl(contrato.clase_riesgo, parametros)

    base_parafiscales = compensacion.subtotal_salarial + compensacion.no_salarial
    sena = 0.0 if exonerado else base_parafiscales * tasas.sena
    icbf = 0.0 if exonerado else base_parafiscales * tasas.icbf
    caja = base_parafiscales * tasas.caja_compensacion

    total = (
        compensacion.total_devengado
        + salud + pension + arl
        + sena + icbf + caja
        + provisiones.total
    )

    return CostosEmpleador(
        salud=salud,
        pension=pension,
        arl=arl,
        sena=sena,
        icbf=icbf,
        caja_compensacion=caja,
        cesantias=provisiones.cesantias,
        intereses_cesantias=provisiones.intereses_cesantias,
        prima=provisiones.prima,
        vacaciones=provisiones.vacaciones,
        total=total,
    )


# ==============================================================================
# --- 7. FUNCIONES PRINCIPALES Y DE ORQUESTACIÓN ---
# ==============================================================================

def _ensamblar_resumen(
    contrato: ContratoNormalizado,
    compensacion: Compensacion,
    dias: int,
    ibc: float,
    tasa_solidaridad: float,
    deducciones: DeduccionesEmpleado,
    depuracion: Optional[DepuracionRetencion],
    provisiones: Provisiones,
    parametros: ParametrosFiscales,
    liquidacion: Optional[NetoLiquidacion] = None
) -> ResumenFinanciero:
    costos = calcular_costos_empleador(contrato, compensacion, ibc, provisiones, parametros)
    datos = DatosSalariales(
        salario_base=contrato.salario_base,
        auxilio_transporte=compensacion.auxilio_transporte,
        total_devengado=compensacion.total_devengado,
        dias_laborados=dias,
        horas_extras=compensacion.horas_extras,
        variables=compensacion.variables,
        no_salarial=compensacion.no_salarial,
    )
    return ResumenFinanciero(
        datos_salariales=datos,
        deducciones_empleado=deducciones,
        neto_a_pagar=compensacion.total_devengado - deducciones.total,
        costos_empleador=costos,
        costo_total=costos.total,
        ibc=ibc,
        tasa_solidaridad=tasa_solidaridad,
        depuracion=depuracion,
        liquidacion=liquidacion,
    )


def calcular_nomina(contrato: EntradasContrato, parametros: ParametrosFiscales) -> ResultadoNomina:
    """
    Calcula la vista mensual y la vista de liquidación de un contrato.

    Flujo: días -> devengos -> IBC -> {solidaridad, retención} ->
    descuentos -> costos del empleador -> prestaciones -> ensamblaje.
    """
    normalizado = normalizar_contrato(contrato, parametros)

    dias_liquidacion = calcular_dias_360(normalizado.fecha_inicio, normalizado.fecha_fin)
    compensacion = calcular_compensacion(normalizado, parametros)
    ibc = calcular_ibc(compensacion.subtotal_salarial, compensacion.no_salarial, parametros)
    tasa_solidaridad = calcular_tasa_solidaridad(ibc, parametros)
    deducciones, depuracion = calcular_deducciones_empleado(
        normalizado, compensacion, ibc, tasa_solidaridad, parametros
    )

    logger.debug(
        "Nómina %s: subtotal=%.2f ibc=%.2f fsp=%.3f dias=%s",
        parametros.anio, compensacion.subtotal_salarial, ibc, tasa_solidaridad, dias_liquidacion
    )

    mensual = _ensamblar_resumen(
        normalizado, compensacion, DIAS_MES, ibc, tasa_solidaridad,
        deducciones, depuracion,
        calcular_provisiones_mensuales(compensacion, parametros),
        parametros
    )

    prestaciones = calcular_prestaciones_liquidacion(compensacion, dias_liquidacion, parametros)
    descuentos_liquidacion = (
        normalizado.prestamos
        + deducciones.retencion_fuente
        + deducciones.deducciones_voluntarias
        + normalizado.otras_deducciones
    )
    neto_liquidacion = NetoLiquidacion(
        total_prestaciones=prestaciones.total,
        descuentos=descuentos_liquidacion,
        neto=prestaciones.total - descuentos_liquidacion,
    )
    liquidacion = _ensamblar_resumen(
        normalizado, compensacion, dias_liquidacion, ibc, tasa_solidaridad,
        deducciones, depuracion, prestaciones, parametros,
        liquidacion=neto_liquidacion
    )

    return ResultadoNomina(mensual=mensual, liquidacion=liquidacion)


def calcular_nomina_mensual(contrato: EntradasContrato, parametros: ParametrosFiscales) -> ResumenFinanciero:
    """Vista mensual (30 días, provisiones con aproximación 1/12)."""
    return calcular_nomina(contrato, parametros).mensual


def calcular_liquidacion(contrato: EntradasContrato, parametros: ParametrosFiscales) -> ResumenFinanciero:
    """Vista de liquidación (prestaciones por días reales 30/360)."""
    return calcular_nomina(contrato, parametros).liquidacion
