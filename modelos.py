# -*- coding: utf-8 -*-
"""
==============================================================================
=== MODELOS DE ENTRADA Y SALIDA DEL MOTOR DE NÓMINA ===
==============================================================================

- Enums del dominio (tipo de contrato, clase de riesgo, motivo de retiro).
- 'EntradasContrato': lo que llega del formulario, con campos opcionales.
- 'ContratoNormalizado': el mismo contrato con TODOS los valores resueltos.
  Se construye una sola vez en la frontera ('normalizar_contrato'); las
  fórmulas del motor nunca preguntan por valores faltantes.
- 'ResumenFinanciero': forma de salida compartida por la vista mensual y la
  vista de liquidación.
"""

# --- 0. IMPORTACIONES NECESARIAS ---
from __future__ import annotations
import logging
import math
import uuid
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from parametros import ParametrosFiscales

logger = logging.getLogger(__name__)

Fecha = Union[str, date, None]


# ==============================================================================
# --- 1. ENUMS DEL DOMINIO ---
# ==============================================================================

class TipoContrato(str, Enum):
    INDEFINIDO = 'INDEFINIDO'
    FIJO = 'FIJO'
    OBRA_LABOR = 'OBRA_LABOR'
    APRENDIZAJE = 'APRENDIZAJE'


class ClaseRiesgo(str, Enum):
    """Clases de riesgo ARL (Decreto 1772 de 1994)."""
    I = 'I'
    II = 'II'
    III = 'III'
    IV = 'IV'
    V = 'V'


ETIQUETAS_RIESGO = {
    ClaseRiesgo.I: "Riesgo I (Oficina, Administrativo) - 0.522%",
    ClaseRiesgo.II: "Riesgo II (Manufactura ligera, Ventas) - 1.044%",
    ClaseRiesgo.III: "Riesgo III (Procesos industriales) - 2.436%",
    ClaseRiesgo.IV: "Riesgo IV (Transporte, Construcción) - 4.350%",
    ClaseRiesgo.V: "Riesgo V (Bomberos, Alto riesgo) - 6.960%",
}


class MotivoTerminacion(str, Enum):
    RENUNCIA = 'RENUNCIA'
    DESPIDO_JUSTA_CAUSA = 'DESPIDO_JUSTA_CAUSA'
    DESPIDO_SIN_JUSTA_CAUSA = 'DESPIDO_SIN_JUSTA_CAUSA'
    MUTUO_ACUERDO = 'MUTUO_ACUERDO'
    FIN_CONTRATO = 'FIN_CONTRATO'


ETIQUETAS_MOTIVO = {
    MotivoTerminacion.RENUNCIA: 'Renuncia voluntaria',
    MotivoTerminacion.DESPIDO_JUSTA_CAUSA: 'Despido con justa causa',
    MotivoTerminacion.DESPIDO_SIN_JUSTA_CAUSA: 'Despido sin justa causa',
    MotivoTerminacion.MUTUO_ACUERDO: 'Terminación de mutuo acuerdo',
    MotivoTerminacion.FIN_CONTRATO: 'Terminación de contrato a término fijo',
}


# ==============================================================================
# --- 2. CLASES DE DATOS DE ENTRADA ---
# ==============================================================================

@dataclass(frozen=True)
class ParametrosDeduccion:
    """Datos para la depuración de retención en la fuente (valores mensuales)."""
    intereses_vivienda: Optional[float] = None
    medicina_prepagada: Optional[float] = None
    pension_voluntaria: Optional[float] = None
    pension_voluntaria_exenta: Optional[float] = None
    afc: Optional[float] = None
    tiene_dependientes: bool = False


@dataclass(frozen=True)
class EntradasContrato:
    """Contrato tal como llega del formulario. Casi todo es opcional."""
    # Identificación (opaca, no se valida aquí)
    id: str = ''
    tipo_empleador: str = 'JURIDICA'
    nombre_empresa: str = ''
    nit_empresa: str = ''
    nombre: str = ''
    documento: str = ''
    cargo: str = ''
    tipo_contrato: TipoContrato = TipoContrato.INDEFINIDO
    # Salario y condiciones
    salario_base: Optional[float] = None
    clase_riesgo: Any = None
    exonerado_parafiscales: bool = False
    incluir_auxilio_transporte: bool = False
    habilitar_retencion: bool = False
    fecha_inicio: Fecha = None
    fecha_fin: Fecha = None
    # Horas extras y recargos (Art. 168 - 179 C.S.T.)
    horas_hed: Optional[float] = None
    horas_hen: Optional[float] = None
    horas_rn: Optional[float] = None
    horas_dom_fest: Optional[float] = None
    horas_heddf: Optional[float] = None
    horas_hendf: Optional[float] = None
    # Variables
    comisiones: Optional[float] = None
    bonos_salariales: Optional[float] = None
    bonos_no_salariales: Optional[float] = None
    # Descuentos
    prestamos: Optional[float] = None
    otras_deducciones: Optional[float] = None
    parametros_deduccion: Optional[ParametrosDeduccion] = None


@dataclass(frozen=True)
class ContratoNormalizado:
    """Contrato con todos los valores resueltos. Lo único que ve el motor."""
    salario_base: float
    clase_riesgo: ClaseRiesgo
    tipo_contrato: TipoContrato
    exonerado_parafiscales: bool
    incluir_auxilio_transporte: bool
    habilitar_retencion: bool
    fecha_inicio: Fecha
    fecha_fin: Fecha
    horas_hed: float
    horas_hen: float
    horas_rn: float
    horas_dom_fest: float
    horas_heddf: float
    horas_hendf: float
    comisiones: float
    bonos_salariales: float
    bonos_no_salariales: float
    prestamos: float
    otras_deducciones: float
    deduccion: ParametrosDeduccion


# ==============================================================================
# --- 3. NORMALIZACIÓN (FRONTERA) ---
# ==============================================================================

def a_monto(valor: Any) -> float:
    """Convierte a float no negativo. Faltante o ilegible -> 0."""
    if valor is None:
        return 0.0
    try:
        numero = float(valor)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(numero) or numero < 0:
        return 0.0
    return numero


def resolver_clase_riesgo(valor: Any) -> ClaseRiesgo:
    """Acepta el enum o su texto ('iii', 'III'). Desconocido -> clase I."""
    if isinstance(valor, ClaseRiesgo):
        return valor
    try:
        return ClaseRiesgo(str(valor).strip().upper())
    except ValueError:
        if valor is not None:
            logger.warning("Clase de riesgo desconocida %r, se usa la clase I", valor)
        return ClaseRiesgo.I


def _resolver_tipo_contrato(valor: Any) -> TipoContrato:
    """Acepta el enum o su texto ('fijo', 'FIJO'). Desconocido -> INDEFINIDO."""
    if isinstance(valor, TipoContrato):
        return valor
    try:
        return TipoContrato(str(valor).strip().upper())
    except ValueError:
        return TipoContrato.INDEFINIDO


def normalizar_contrato(contrato: EntradasContrato, parametros: ParametrosFiscales) -> ContratoNormalizado:
    """
    Resuelve todos los valores por defecto de una vez:
    - Horas, bonos y descuentos faltantes -> 0.
    - Salario base faltante, cero o ilegible -> SMMLV del año.
    - Clase de riesgo desconocida -> clase I.
    """
    salario_base = a_monto(contrato.salario_base)
    if salario_base <= 0:
        salario_base = float(parametros.smmlv)

    entrada = contrato.parametros_deduccion or ParametrosDeduccion()
    deduccion = ParametrosDeduccion(
        intereses_vivienda=a_monto(entrada.intereses_vivienda),
        medicina_prepagada=a_monto(entrada.medicina_prepagada),
        pension_voluntaria=a_monto(entrada.pension_voluntaria),
        pension_voluntaria_exenta=a_monto(entrada.pension_voluntaria_exenta),
        afc=a_monto(entrada.afc),
        tiene_dependientes=bool(entrada.tiene_dependientes),
    )

    return ContratoNormalizado(
        salario_base=salario_base,
        clase_riesgo=resolver_clase_riesgo(contrato.clase_riesgo),
        tipo_contrato=_resolver_tipo_contrato(contrato.tipo_contrato),
        exonerado_parafiscales=bool(contrato.exonerado_parafiscales),
        incluir_auxilio_transporte=bool(contrato.incluir_auxilio_transporte),
        habilitar_retencion=bool(contrato.habilitar_retencion),
        fecha_inicio=contrato.fecha_inicio,
        fecha_fin=contrato.fecha_fin,
        horas_hed=a_monto(contrato.horas_hed),
        horas_hen=a_monto(contrato.horas_hen),
        horas_rn=a_monto(contrato.horas_rn),
        horas_dom_fest=a_monto(contrato.horas_dom_fest),
        horas_heddf=a_monto(contrato.horas_heddf),
        horas_hendf=a_monto(contrato.horas_hendf),
        comisiones=a_monto(contrato.comisiones),
        bonos_salariales=a_monto(contrato.bonos_salariales),
        bonos_no_salariales=a_monto(contrato.bonos_no_salariales),
        prestamos=a_monto(contrato.prestamos),
        otras_deducciones=a_monto(contrato.otras_deducciones),
        deduccion=deduccion,
    )


def crear_contrato_por_defecto(parametros: ParametrosFiscales, indice: int = 1) -> EntradasContrato:
    """Empleado nuevo con salario mínimo, auxilio de transporte y riesgo I."""
    return EntradasContrato(
        id=str(uuid.uuid4()),
        nombre=f"Empleado {indice}",
        salario_base=parametros.smmlv,
        clase_riesgo=ClaseRiesgo.I,
        exonerado_parafiscales=True,
        incluir_auxilio_transporte=True,
        fecha_inicio=f"{parametros.anio}-01-01",
        fecha_fin=f"{parametros.anio}-01-30",
        parametros_deduccion=ParametrosDeduccion(),
    )


# ==============================================================================
# --- 4. CLASES DE DATOS DE SALIDA ---
# ==============================================================================

@dataclass(frozen=True)
class Compensacion:
    """Devengos del periodo, desglosados por concepto."""
    valor_hora: float
    valor_hed: float
    valor_hen: float
    valor_rn: float
    valor_dom_fest: float
    valor_heddf: float
    valor_hendf: float
    horas_extras: float
    variables: float
    no_salarial: float
    subtotal_salarial: float
    auxilio_transporte: float
    total_devengado: float


@dataclass(frozen=True)
class DepuracionRetencion:
    """Paso a paso de la depuración (Art. 387 - 388 E.T.), para auditoría."""
    ingreso_bruto: float
    aportes_obligatorios: float
    ingresos_no_constitutivos: float
    ingreso_neto: float
    deduccion_vivienda: float
    deduccion_medicina: float
    deduccion_dependientes: float
    total_deducciones: float
    rentas_exentas_voluntarias: float
    renta_exenta_25: float
    total_beneficios: float
    beneficios_aplicados: float
    base_gravable: float
    base_gravable_uvt: float
    retencion_uvt: float
    retencion: float


@dataclass(frozen=True)
class DatosSalariales:
    salario_base: float
    auxilio_transporte: float
    total_devengado: float
    dias_laborados: int
    horas_extras: float
    variables: float
    no_salarial: float


@dataclass(frozen=True)
class DeduccionesEmpleado:
    salud: float
    pension: float
    fondo_solidaridad: float
    retencion_fuente: float
    deducciones_voluntarias: float
    otras_deducciones: float
    total: float
    cuenta_subsistencia: float = 0.0


@dataclass(frozen=True)
class CostosEmpleador:
    salud: float
    pension: float
    arl: float
    sena: float
    icbf: float
    caja_compensacion: float
    cesantias: float
    intereses_cesantias: float
    prima: float
    vacaciones: float
    total: float


@dataclass(frozen=True)
class NetoLiquidacion:
    """Total a pagar en una liquidación por días reales."""
    total_prestaciones: float
    descuentos: float
    neto: float


@dataclass(frozen=True)
class ResumenFinanciero:
    """Forma compartida por la vista mensual y la de liquidación."""
    datos_salariales: DatosSalariales
    deducciones_empleado: DeduccionesEmpleado
    neto_a_pagar: float
    costos_empleador: CostosEmpleador
    costo_total: float
    ibc: float
    tasa_solidaridad: float
    depuracion: Optional[DepuracionRetencion] = None
    liquidacion: Optional[NetoLiquidacion] = None


@dataclass(frozen=True)
class ResultadoNomina:
    mensual: ResumenFinanciero
    liquidacion: ResumenFinanciero
    numero_empleados: int = 1
