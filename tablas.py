# -*- coding: utf-8 -*-
"""
Vistas tabulares (pandas) de los resultados del motor, para la UI de
Streamlit y para exportar a hoja de cálculo. Solo reorganizan datos.
"""

from __future__ import annotations
from typing import List, Optional, Tuple

import pandas as pd

from formato import formatear_moneda
from liquidacion import LiquidacionDetallada
from modelos import ResultadoNomina, ResumenFinanciero

COLUMNAS_RESUMEN = ['Sección', 'Concepto', 'Valor']


def _filas_resumen(resumen: ResumenFinanciero) -> List[Tuple[str, str, float]]:
    datos = resumen.datos_salariales
    ded = resumen.deducciones_empleado
    costos = resumen.costos_empleador
    return [
        ('Devengos', 'Salario base', datos.salario_base),
        ('Devengos', 'Horas extras y recargos', datos.horas_extras),
        ('Devengos', 'Variables salariales', datos.variables),
        ('Devengos', 'Pagos no salariales', datos.no_salarial),
        ('Devengos', 'Auxilio de transporte', datos.auxilio_transporte),
        ('Devengos', 'Total devengado', datos.total_devengado),
        ('Deducciones', 'Salud (4%)', ded.salud),
        ('Deducciones', 'Pensión (4%)', ded.pension),
        ('Deducciones', 'Fondo de solidaridad', ded.fondo_solidaridad),
        ('Deducciones', 'Retención en la fuente', ded.retencion_fuente),
        ('Deducciones', 'Aportes voluntarios', ded.deducciones_voluntarias),
        ('Deducciones', 'Préstamos y otros', ded.otras_deducciones),
        ('Deducciones', 'Total deducciones', ded.total),
        ('Neto', 'Neto a pagar', resumen.neto_a_pagar),
        ('Empleador', 'Salud (8.5%)', costos.salud),
        ('Empleador', 'Pensión (12%)', costos.pension),
        ('Empleador', 'ARL', costos.arl),
        ('Empleador', 'SENA', costos.sena),
        ('Empleador', 'ICBF', costos.icbf),
        ('Empleador', 'Caja de compensación', costos.caja_compensacion),
        ('Prestaciones', 'Cesantías', costos.cesantias),
        ('Prestaciones', 'Intereses de cesantías', costos.intereses_cesantias),
        ('Prestaciones', 'Prima de servicios', costos.prima),
        ('Prestaciones', 'Vacaciones', costos.vacaciones),
        ('Total', 'Costo total empleador', costos.total),
    ]


def tabla_resumen(resumen: ResumenFinanciero, locale: Optional[str] = None) -> pd.DataFrame:
    """Una fila por concepto. Con 'locale' agrega la columna 'Valor (texto)'."""
    df = pd.DataFrame(_filas_resumen(resumen), columns=COLUMNAS_RESUMEN)
    if locale:
        df['Valor (texto)'] = df['Valor'].map(lambda v: formatear_moneda(v, locale))
    return df


def tabla_comparativa(resultado: ResultadoNomina) -> pd.DataFrame:
    """Vista mensual y de liquidación lado a lado, con la diferencia."""
    mensual = tabla_resumen(resultado.mensual).set_index(['Sección', 'Concepto'])['Valor']
    liquidacion = tabla_resumen(resultado.liquidacion).set_index(['Sección', 'Concepto'])['Valor']
    df = pd.DataFrame({'Mensual': mensual, 'Liquidación': liquidacion})
    df['Diferencia'] = df['Liquidación'] - df['Mensual']
    return df


def tabla_prestaciones(liquidacion: LiquidacionDetallada) -> pd.DataFrame:
    """Bruto / anticipo / neto de cada prestación, con fila de totales."""
    df = pd.DataFrame(
        {
            'Bruto': [liquidacion.cesantias, liquidacion.intereses_cesantias,
                      liquidacion.prima, liquidacion.vacaciones],
            'Anticipo': [liquidacion.cesantias_anticipadas, liquidacion.intereses_cesantias_anticipados,
                         liquidacion.prima_anticipada, liquidacion.vacaciones_anticipadas],
            'Neto': [liquidacion.cesantias_netas, liquidacion.intereses_cesantias_netos,
                     liquidacion.prima_neta, liquidacion.vacaciones_netas],
        },
        index=['Cesantías', 'Intereses de cesantías', 'Prima de servicios', 'Vacaciones'],
    )
    df.loc['Total'] = [
        liquidacion.total_prestaciones_brutas,
        liquidacion.total_anticipos,
        liquidacion.total_prestaciones,
    ]
    return df
