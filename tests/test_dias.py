# -*- coding: utf-8 -*-
"""Conteo de días 30/360."""

from datetime import date, datetime

from motor import calcular_dias_360


class TestCalcularDias360:

    def test_mes_completo(self):
        assert calcular_dias_360("2025-01-01", "2025-01-30") == 30

    def test_dia_31_cuenta_como_30(self):
        assert calcular_dias_360("2025-01-01", "2025-01-31") == 30

    def test_inicio_31_hasta_febrero(self):
        assert calcular_dias_360("2025-01-31", "2025-02-28") == 29

    def test_febrero(self):
        assert calcular_dias_360("2025-02-01", "2025-02-28") == 28

    def test_anio_completo(self):
        assert calcular_dias_360("2025-01-01", "2025-12-31") == 360

    def test_semestre(self):
        assert calcular_dias_360("2026-01-01", "2026-06-30") == 180

    def test_cruce_de_anio(self):
        assert calcular_dias_360("2024-12-15", "2025-01-14") == 30

    def test_mismo_dia_es_un_dia(self):
        assert calcular_dias_360("2025-03-10", "2025-03-10") == 1

    def test_fin_antes_de_inicio_no_es_negativo(self):
        assert calcular_dias_360("2025-02-01", "2025-01-01") == 0


class TestCalcularDias360Respaldo:

    def test_sin_fechas(self):
        assert calcular_dias_360() == 30

    def test_falta_una_fecha(self):
        assert calcular_dias_360("2025-01-01", None) == 30

    def test_fecha_ilegible(self):
        assert calcular_dias_360("no-es-fecha", "2025-01-30") == 30

    def test_mes_invalido(self):
        assert calcular_dias_360("2025-13-01", "2025-12-30") == 30

    def test_cadena_vacia(self):
        assert calcular_dias_360("", "  ") == 30

    def test_fecha_invalida_registra_advertencia(self, caplog):
        calcular_dias_360("xx", "2025-01-30")
        assert "no válidas" in caplog.text


class TestCalcularDias360Tipos:

    def test_acepta_date(self):
        assert calcular_dias_360(date(2025, 3, 1), date(2025, 3, 31)) == 30

    def test_acepta_datetime(self):
        assert calcular_dias_360(datetime(2025, 1, 1, 8, 0), datetime(2025, 6, 30, 17, 0)) == 180

    def test_mezcla_texto_y_date(self):
        assert calcular_dias_360("2025-01-01", date(2025, 1, 15)) == 15
