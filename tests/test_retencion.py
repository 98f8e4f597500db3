# -*- coding: utf-8 -*-
"""Retención en la fuente (procedimiento 1, Art. 383 E.T.)."""

import dataclasses

import pytest

from modelos import EntradasContrato, ParametrosDeduccion
from motor import calcular_nomina_mensual
from retencion import calcular_impuesto_uvt, calcular_retencion_fuente, redondear_pesos

UVT_2026 = 49799


def _deduccion(**kwargs):
    base = dict(
        intereses_vivienda=0.0, medicina_prepagada=0.0, pension_voluntaria=0.0,
        pension_voluntaria_exenta=0.0, afc=0.0, tiene_dependientes=False,
    )
    base.update(kwargs)
    return ParametrosDeduccion(**base)


class TestRedondeo:

    def test_mitad_hacia_arriba(self):
        assert redondear_pesos(10.5) == 11
        assert redondear_pesos(10.49) == 10
        assert redondear_pesos(0) == 0


class TestTablaArt383:

    def test_hasta_95_uvt_no_paga(self, parametros):
        assert calcular_impuesto_uvt(0, parametros) == 0
        assert calcular_impuesto_uvt(95, parametros) == 0

    def test_tramo_19(self, parametros):
        assert calcular_impuesto_uvt(100, parametros) == pytest.approx(0.95)

    def test_tramo_28(self, parametros):
        assert calcular_impuesto_uvt(200, parametros) == pytest.approx(50 * 0.28 + 10)

    def test_ultimo_tramo(self, parametros):
        assert calcular_impuesto_uvt(3000, parametros) == pytest.approx(700 * 0.39 + 770)


class TestDepuracion:

    def test_salario_minimo_no_retiene(self, parametros):
        dep = calcular_retencion_fuente(1750905, 140072.4, _deduccion(), parametros)
        assert dep.retencion == 0
        assert dep.base_gravable_uvt < 95

    def test_salario_15_millones(self, parametros):
        # Aportes: 4% salud + 4% pensión + 1% solidaridad
        dep = calcular_retencion_fuente(15000000, 1350000, _deduccion(), parametros)
        assert dep.ingreso_neto == 13650000
        # 25% topado a 790 UVT / 12
        assert dep.renta_exenta_25 == pytest.approx(790 * UVT_2026 / 12)
        assert dep.beneficios_aplicados == pytest.approx(dep.renta_exenta_25)
        assert 150 < dep.base_gravable_uvt < 360
        assert dep.retencion == pytest.approx(1310470, abs=1)

    def test_tope_dependientes(self, parametros):
        dep = calcular_retencion_fuente(30000000, 2820000, _deduccion(tiene_dependientes=True), parametros)
        assert dep.deduccion_dependientes == 32 * UVT_2026

    def test_dependientes_10_por_ciento(self, parametros):
        dep = calcular_retencion_fuente(15000000, 1350000, _deduccion(tiene_dependientes=True), parametros)
        assert dep.deduccion_dependientes == pytest.approx(1365000)

    def test_topes_vivienda_y_medicina(self, parametros):
        dep = calcular_retencion_fuente(
            20000000, 1800000,
            _deduccion(intereses_vivienda=10000000, medicina_prepagada=10000000),
            parametros
        )
        assert dep.deduccion_vivienda == 100 * UVT_2026
        assert dep.deduccion_medicina == 16 * UVT_2026

    def test_pension_voluntaria_es_incr(self, parametros):
        dep = calcular_retencion_fuente(15000000, 1350000, _deduccion(pension_voluntaria=500000), parametros)
        assert dep.ingresos_no_constitutivos == 1850000
        assert dep.ingreso_neto == 13150000

    def test_limite_40_por_ciento(self, parametros):
        dep = calcular_retencion_fuente(
            10000000, 900000,
            _deduccion(intereses_vivienda=3000000, medicina_prepagada=700000,
                       pension_voluntaria_exenta=3000000, tiene_dependientes=True),
            parametros
        )
        assert dep.total_beneficios > dep.beneficios_aplicados
        assert dep.beneficios_aplicados == pytest.approx(min(dep.ingreso_neto * 0.40, 1340 * UVT_2026 / 12))

    def test_ahorro_voluntario_tope_plano(self, parametros):
        dep = calcular_retencion_fuente(
            40000000, 3600000, _deduccion(pension_voluntaria_exenta=20000000, afc=5000000), parametros
        )
        assert dep.rentas_exentas_voluntarias == 316 * UVT_2026


class TestRetencionEnNomina:

    def test_desactivada(self, parametros):
        r = calcular_nomina_mensual(EntradasContrato(salario_base=15000000), parametros)
        assert r.deducciones_empleado.retencion_fuente == 0
        assert r.depuracion is None

    def test_activada(self, parametros):
        contrato = EntradasContrato(salario_base=15000000, habilitar_retencion=True)
        r = calcular_nomina_mensual(contrato, parametros)
        assert r.depuracion is not None
        assert r.deducciones_empleado.retencion_fuente == r.depuracion.retencion
        assert r.deducciones_empleado.retencion_fuente == pytest.approx(1310470, abs=1)

    def test_deducciones_bajan_la_retencion(self, parametros):
        contrato = EntradasContrato(salario_base=15000000, habilitar_retencion=True)
        con_dependientes = dataclasses.replace(
            contrato, parametros_deduccion=ParametrosDeduccion(tiene_dependientes=True)
        )
        sin = calcular_nomina_mensual(contrato, parametros).deducciones_empleado.retencion_fuente
        con = calcular_nomina_mensual(con_dependientes, parametros).deducciones_empleado.retencion_fuente
        assert con < sin
