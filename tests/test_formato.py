# -*- coding: utf-8 -*-
import pytest

from formato import formatear_moneda, formatear_porcentaje


class TestFormatearMoneda:

    @pytest.mark.parametrize("valor, esperado", [
        (1750905, '$ 1.750.905'),
        (0, '$ 0'),
        (100000000, '$ 100.000.000'),
        (999.5, '$ 1.000'),
        (70036.2, '$ 70.036'),
    ])
    def test_es_co(self, valor, esperado):
        assert formatear_moneda(valor) == esperado

    def test_negativo(self):
        assert formatear_moneda(-1500) == '-$ 1.500'

    def test_en_us(self):
        assert formatear_moneda(1234567.5, 'en-US') == '$1,234,568'

    def test_simbolo(self):
        assert formatear_moneda(1000, simbolo='COP') == 'COP 1.000'

    def test_locale_desconocido(self, caplog):
        assert formatear_moneda(1000, 'xx-XX') == '$ 1.000'
        assert "xx-XX" in caplog.text


def test_formatear_porcentaje():
    assert formatear_porcentaje(0.00522) == '0.52%'
    assert formatear_porcentaje(0.01, 1) == '1.0%'
