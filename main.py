# -*- coding: utf-8 -*-
"""
Calculadora de Nómina y Liquidación Colombia (App Streamlit)

Solo interfaz: recoge datos, llama al motor (motor.py / liquidacion.py)
y muestra los resultados. Ningún cálculo vive aquí.
"""

# --- 0. IMPORTACIONES NECESARIAS ---
import streamlit as st
from datetime import date
from typing import List

import config
from formato import formatear_moneda, formatear_porcentaje
from liquidacion import (
    AnticiposPrestaciones, DeduccionPersonalizada, MAXIMO_DEDUCCIONES_PERSONALIZADAS,
    PrimaAnticipada, TipoPrimaAnticipada, liquidar_contrato
)
from modelos import (
    ETIQUETAS_MOTIVO, ETIQUETAS_RIESGO, ClaseRiesgo, EntradasContrato, MotivoTerminacion,
    ParametrosDeduccion, ResumenFinanciero, TipoContrato
)
from motor import calcular_nomina
from parametros import PARAMETROS_POR_ANIO, obtener_parametros
from tablas import tabla_comparativa, tabla_prestaciones, tabla_resumen

config.configurar_logging()
LOCALE = config.LOCALE_MONEDA


def _moneda(valor: float) -> str:
    return formatear_moneda(valor, LOCALE)


# ==============================================================================
# --- SECCIÓN DE HELPERS DE UI (FUNCIONES 'MOSTRAR_...') ---
# ==============================================================================

def _renderizar_parametros_deduccion(key_prefix: str) -> ParametrosDeduccion:
    """Expander con los datos de depuración de retención en la fuente."""
    with st.expander("Depuración Retención en la Fuente (Art. 387 - 388 E.T.)"):
        st.caption("Valores mensuales. El sistema aplica los topes en UVT.")
        col1, col2, col3 = st.columns(3)
        with col1:
            vivienda = st.number_input("Intereses de vivienda", min_value=0.0, value=0.0, step=10000.0, key=f"{key_prefix}_viv")
            medicina = st.number_input("Medicina prepagada", min_value=0.0, value=0.0, step=10000.0, key=f"{key_prefix}_med")
        with col2:
            voluntaria = st.number_input("Pensión voluntaria (INCR)", min_value=0.0, value=0.0, step=10000.0, key=f"{key_prefix}_pv")
            voluntaria_exenta = st.number_input("Pensión voluntaria (exenta)", min_value=0.0, value=0.0, step=10000.0, key=f"{key_prefix}_pve")
        with col3:
            afc = st.number_input("Ahorro AFC", min_value=0.0, value=0.0, step=10000.0, key=f"{key_prefix}_afc")
            dependientes = st.checkbox("Tiene dependientes", key=f"{key_prefix}_dep")
        return ParametrosDeduccion(
            intereses_vivienda=vivienda,
            medicina_prepagada=medicina,
            pension_voluntaria=voluntaria,
            pension_voluntaria_exenta=voluntaria_exenta,
            afc=afc,
            tiene_dependientes=dependientes,
        )


def _renderizar_contrato(key_prefix: str, anio: int, smmlv: float) -> EntradasContrato:
    """Formulario del contrato. Devuelve las entradas sin normalizar."""
    col1, col2, col3 = st.columns(3)
    with col1:
        nombre = st.text_input("Nombre del empleado", value="Empleado 1", key=f"{key_prefix}_nombre")
        tipo = st.selectbox("Tipo de contrato", [t.value for t in TipoContrato], key=f"{key_prefix}_tipo")
        salario = st.number_input("Salario base", min_value=0.0, value=float(smmlv), step=50000.0, key=f"{key_prefix}_sal")
    with col2:
        riesgo = st.selectbox(
            "Clase de riesgo ARL", list(ClaseRiesgo),
            format_func=lambda c: ETIQUETAS_RIESGO[c], key=f"{key_prefix}_arl"
        )
        fecha_inicio = st.date_input("Fecha de inicio", value=date(anio, 1, 1), key=f"{key_prefix}_ini")
        fecha_fin = st.date_input("Fecha de fin", value=date(anio, 1, 30), key=f"{key_prefix}_fin")
    with col3:
        auxilio = st.checkbox("Incluir auxilio de transporte", value=True, key=f"{key_prefix}_aux")
        exonerado = st.checkbox("Exonerado de parafiscales (Art. 114-1 E.T.)", value=True, key=f"{key_prefix}_exo")
        retencion = st.checkbox("Calcular retención en la fuente", key=f"{key_prefix}_ret")

    with st.expander("Horas Extras y Recargos"):
        c1, c2, c3 = st.columns(3)
        hed = c1.number_input("HED (x1.25)", min_value=0.0, step=1.0, key=f"{key_prefix}_hed")
        hen = c1.number_input("HEN (x1.75)", min_value=0.0, step=1.0, key=f"{key_prefix}_hen")
        rn = c2.number_input("Recargo nocturno (x0.35)", min_value=0.0, step=1.0, key=f"{key_prefix}_rn")
        dom = c2.number_input("Dominical/Festivo (x1.80)", min_value=0.0, step=1.0, key=f"{key_prefix}_dom")
        heddf = c3.number_input("HEDDF (x2.00)", min_value=0.0, step=1.0, key=f"{key_prefix}_heddf")
        hendf = c3.number_input("HENDF (x2.50)", min_value=0.0, step=1.0, key=f"{key_prefix}_hendf")

    with st.expander("Variables y Descuentos"):
        c1, c2 = st.columns(2)
        comisiones = c1.number_input("Comisiones", min_value=0.0, step=10000.0, key=f"{key_prefix}_com")
        bonos_sal = c1.number_input("Bonos salariales", min_value=0.0, step=10000.0, key=f"{key_prefix}_bs")
        bonos_no_sal = c1.number_input("Bonos no salariales", min_value=0.0, step=10000.0, key=f"{key_prefix}_bns")
        prestamos = c2.number_input("Préstamos", min_value=0.0, step=10000.0, key=f"{key_prefix}_pre")
        otras = c2.number_input("Otras deducciones", min_value=0.0, step=10000.0, key=f"{key_prefix}_otr")

    deduccion = _renderizar_parametros_deduccion(key_prefix)

    return EntradasContrato(
        nombre=nombre,
        tipo_contrato=TipoContrato(tipo),
        salario_base=salario,
        clase_riesgo=riesgo,
        exonerado_parafiscales=exonerado,
        incluir_auxilio_transporte=auxilio,
        habilitar_retencion=retencion,
        fecha_inicio=fecha_inicio,
        fecha_fin=fecha_fin,
        horas_hed=hed, horas_hen=hen, horas_rn=rn,
        horas_dom_fest=dom, horas_heddf=heddf, horas_hendf=hendf,
        comisiones=comisiones,
        bonos_salariales=bonos_sal,
        bonos_no_salariales=bonos_no_sal,
        prestamos=prestamos,
        otras_deducciones=otras,
        parametros_deduccion=deduccion,
    )


def mostrar_resumen_streamlit(resumen: ResumenFinanciero, titulo: str):
    """Métricas principales y tabla de conceptos."""
    st.header(titulo)
    col1, col2, col3 = st.columns(3)
    col1.metric("Neto a Pagar", _moneda(resumen.neto_a_pagar))
    col2.metric("Total Devengado", _moneda(resumen.datos_salariales.total_devengado))
    col3.metric("Costo Total Empleador", _moneda(resumen.costo_total))

    st.caption(
        f"IBC: {_moneda(resumen.ibc)} | Fondo de solidaridad: {formatear_porcentaje(resumen.tasa_solidaridad, 1)}"
        f" | Días: {resumen.datos_salariales.dias_laborados}"
    )
    st.dataframe(tabla_resumen(resumen, LOCALE), hide_index=True, use_container_width=True)

    if resumen.depuracion is not None:
        with st.expander("Ver Depuración de Retención"):
            dep = resumen.depuracion
            st.markdown(f"**Ingreso neto:** `{_moneda(dep.ingreso_neto)}`")
            st.markdown(f"**Beneficios aplicados:** `{_moneda(dep.beneficios_aplicados)}` de `{_moneda(dep.total_beneficios)}`")
            st.markdown(f"**Base gravable:** `{_moneda(dep.base_gravable)}` ({dep.base_gravable_uvt:,.2f} UVT)")
            st.markdown(f"**Retención:** `{_moneda(dep.retencion)}`")


# ==============================================================================
# === INICIO DE LA APLICACIÓN STREAMLIT ===
# ==============================================================================

st.set_page_config(layout="wide", page_title="Calculadora de Nómina Colombia", page_icon="🇨🇴")

st.title("Calculadora de Nómina y Liquidación Colombia")
st.info("Herramienta de cálculo referencial basada en la legislación laboral y tributaria colombiana.")

anios = sorted(PARAMETROS_POR_ANIO)
anio = st.sidebar.selectbox(
    "Año fiscal", anios,
    index=anios.index(config.ANIO_FISCAL_DEFECTO) if config.ANIO_FISCAL_DEFECTO in anios else len(anios) - 1
)
parametros = obtener_parametros(anio)
st.sidebar.markdown(f"**SMMLV:** `{_moneda(parametros.smmlv)}`")
st.sidebar.markdown(f"**Auxilio de transporte:** `{_moneda(parametros.auxilio_transporte)}`")
st.sidebar.markdown(f"**UVT:** `{_moneda(parametros.uvt)}`")

tab_nomina, tab_liquidacion = st.tabs(["Nómina Mensual", "Liquidación de Contrato"])


# --- PESTAÑA 1: NÓMINA MENSUAL ---
with tab_nomina:
    with st.form("nomina_form"):
        contrato = _renderizar_contrato("nom", anio, parametros.smmlv)
        enviado = st.form_submit_button("Calcular Nómina")

    if enviado:
        resultado = calcular_nomina(contrato, parametros)
        mostrar_resumen_streamlit(resultado.mensual, "Resultados de la Nómina Mensual")
        with st.expander("Comparar con la vista de liquidación (días reales)"):
            st.dataframe(tabla_comparativa(resultado), use_container_width=True)


# --- PESTAÑA 2: LIQUIDACIÓN ---
with tab_liquidacion:
    with st.form("liquidacion_form"):
        contrato_liq = _renderizar_contrato("liq", anio, parametros.smmlv)
        motivo = st.selectbox("Motivo de terminación", list(MotivoTerminacion), format_func=lambda m: ETIQUETAS_MOTIVO[m])

        with st.expander("Anticipos de Prestaciones"):
            c1, c2 = st.columns(2)
            tipo_prima = c1.radio("Prima anticipada", [t.value for t in TipoPrimaAnticipada], horizontal=True)
            junio = c1.checkbox("Semestre junio pagado")
            diciembre = c1.checkbox("Semestre diciembre pagado")
            monto_prima = c1.number_input("Monto prima pagada", min_value=0.0, step=10000.0)
            vacaciones_pagadas = c2.number_input("Vacaciones pagadas", min_value=0.0, step=10000.0)
            cesantias_parciales = c2.number_input("Cesantías parciales", min_value=0.0, step=10000.0)
            intereses_pagados = c2.number_input("Intereses de cesantías pagados", min_value=0.0, step=10000.0)

        with st.expander(f"Deducciones Personalizadas (máx. {MAXIMO_DEDUCCIONES_PERSONALIZADAS})"):
            personalizadas: List[DeduccionPersonalizada] = []
            for i in range(MAXIMO_DEDUCCIONES_PERSONALIZADAS):
                c1, c2 = st.columns([2, 1])
                nombre_ded = c1.text_input(f"Concepto {i + 1}", key=f"ded_nombre_{i}")
                valor_ded = c2.number_input(f"Valor {i + 1}", min_value=0.0, step=10000.0, key=f"ded_valor_{i}")
                if nombre_ded and valor_ded > 0:
                    personalizadas.append(DeduccionPersonalizada(id=str(i + 1), nombre=nombre_ded, valor=valor_ded))

        enviado_liq = st.form_submit_button("Calcular Liquidación")

    if enviado_liq:
        anticipos = AnticiposPrestaciones(
            prima=PrimaAnticipada(
                tipo=TipoPrimaAnticipada(tipo_prima),
                semestre_junio_pagado=junio,
                semestre_diciembre_pagado=diciembre,
                monto_pagado=monto_prima,
            ),
            vacaciones_pagadas=vacaciones_pagadas,
            cesantias_parciales=cesantias_parciales,
            intereses_cesantias_pagados=intereses_pagados,
        )
        lqd = liquidar_contrato(contrato_liq, parametros, anticipos, personalizadas, motivo)

        st.header("Resultados de la Liquidación")
        st.metric("Neto a Pagar", _moneda(lqd.neto_a_pagar))
        st.info(f"**Motivo:** {ETIQUETAS_MOTIVO[motivo]} | **Días (30/360):** {lqd.dias_laborados} | **Base:** {_moneda(lqd.base_liquidacion)}")
        st.dataframe(tabla_prestaciones(lqd), use_container_width=True)

        with st.expander("Ver Desglose de Descuentos"):
            ded = lqd.deducciones
            st.markdown(f"**Préstamos:** `{_moneda(ded.prestamos)}`")
            st.markdown(f"**Retención en la fuente:** `{_moneda(ded.retencion_fuente)}`")
            st.markdown(f"**Aportes voluntarios:** `{_moneda(ded.aportes_voluntarios)}`")
            st.markdown(f"**Otras deducciones:** `{_moneda(ded.otras)}`")
            for d in ded.deducciones_personalizadas:
                st.markdown(f"**{d.nombre}:** `{_moneda(d.valor)}`")
            st.subheader(f"Total descuentos: {_moneda(ded.total)}")
