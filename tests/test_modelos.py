# -*- coding: utf-8 -*-
"""Normalización de entradas y valores por defecto."""

import math

import pytest

from modelos import (
    ClaseRiesgo, EntradasContrato, TipoContrato, a_monto, crear_contrato_por_defecto,
    normalizar_contrato, resolver_clase_riesgo
)


class TestAMonto:

    @pytest.mark.parametrize("valor, esperado", [
        (None, 0.0),
        ("abc", 0.0),
        (-100, 0.0),
        (math.nan, 0.0),
        (math.inf, 0.0),
        ("2500.5", 2500.5),
        (10, 10.0),
        (10 ** 400, 0.0),
    ])
    def test_conversion(self, valor, esperado):
        assert a_monto(valor) == esperado


class TestResolverClaseRiesgo:

    def test_enum(self):
        assert resolver_clase_riesgo(ClaseRiesgo.IV) is ClaseRiesgo.IV

    def test_texto(self):
        assert resolver_clase_riesgo(' iii ') is ClaseRiesgo.III

    def test_faltante(self):
        assert resolver_clase_riesgo(None) is ClaseRiesgo.I

    def test_desconocido(self, caplog):
        assert resolver_clase_riesgo('X') is ClaseRiesgo.I
        assert "desconocida" in caplog.text


class TestNormalizarContrato:

    def test_valores_por_defecto(self, parametros):
        n = normalizar_contrato(EntradasContrato(), parametros)
        assert n.salario_base == parametros.smmlv
        assert n.clase_riesgo is ClaseRiesgo.I
        assert n.tipo_contrato is TipoContrato.INDEFINIDO
        assert n.horas_hed == 0.0
        assert n.prestamos == 0.0
        assert n.deduccion.afc == 0.0
        assert n.deduccion.tiene_dependientes is False

    def test_negativos_a_cero(self, parametros):
        n = normalizar_contrato(EntradasContrato(salario_base=-5, comisiones=-1, horas_hen=-3), parametros)
        assert n.salario_base == parametros.smmlv
        assert n.comisiones == 0.0
        assert n.horas_hen == 0.0

    def test_tipo_contrato_desconocido(self, parametros):
        n = normalizar_contrato(EntradasContrato(tipo_contrato='PRESTACION'), parametros)
        assert n.tipo_contrato is TipoContrato.INDEFINIDO

    def test_tipo_contrato_en_minusculas(self, parametros):
        n = normalizar_contrato(EntradasContrato(tipo_contrato=' fijo '), parametros)
        assert n.tipo_contrato is TipoContrato.FIJO

    def test_salario_enorme_no_lanza(self, parametros):
        n = normalizar_contrato(EntradasContrato(salario_base=10 ** 400), parametros)
        assert n.salario_base == parametros.smmlv


def test_crear_contrato_por_defecto(parametros):
    contrato = crear_contrato_por_defecto(parametros, indice=3)
    assert contrato.nombre == "Empleado 3"
    assert contrato.salario_base == parametros.smmlv
    assert contrato.incluir_auxilio_transporte
    assert contrato.exonerado_parafiscales
    assert contrato.fecha_inicio == "2026-01-01"
    assert contrato.fecha_fin == "2026-01-30"
    assert contrato.id != crear_contrato_por_defecto(parametros).id
