# -*- coding: utf-8 -*-
"""Liquidación definitiva con anticipos y deducciones personalizadas."""

import dataclasses

import pytest

from errores import DeduccionesPersonalizadasError
from liquidacion import (
    AnticiposPrestaciones, DeduccionPersonalizada, PrimaAnticipada, TipoPrimaAnticipada,
    calcular_prima_anticipada, liquidar_contrato
)
from modelos import MotivoTerminacion


class TestPrimaAnticipada:

    def test_por_semestre(self):
        prima = PrimaAnticipada(tipo=TipoPrimaAnticipada.SEMESTRE, semestre_junio_pagado=True)
        assert calcular_prima_anticipada(prima, 2000000) == 1000000

    def test_dos_semestres(self):
        prima = PrimaAnticipada(
            tipo=TipoPrimaAnticipada.SEMESTRE, semestre_junio_pagado=True, semestre_diciembre_pagado=True
        )
        assert calcular_prima_anticipada(prima, 2000000) == 2000000

    def test_por_monto(self):
        assert calcular_prima_anticipada(PrimaAnticipada(monto_pagado=350000), 2000000) == 350000

    def test_monto_negativo(self):
        assert calcular_prima_anticipada(PrimaAnticipada(monto_pagado=-10), 2000000) == 0


class TestLiquidarContrato:

    def test_sin_anticipos(self, parametros, contrato_semestre):
        lqd = liquidar_contrato(contrato_semestre, parametros)
        assert lqd.dias_laborados == 180
        assert lqd.base_liquidacion == 2000000
        assert lqd.total_anticipos == 0
        assert lqd.total_prestaciones == pytest.approx(2497726.25)
        assert lqd.neto_a_pagar == pytest.approx(2497726.25)
        assert lqd.motivo is None

    def test_anticipos_y_descuentos(self, parametros, contrato_semestre):
        contrato = dataclasses.replace(contrato_semestre, prestamos=100000)
        anticipos = AnticiposPrestaciones(
            prima=PrimaAnticipada(tipo=TipoPrimaAnticipada.SEMESTRE, semestre_junio_pagado=True),
            vacaciones_pagadas=1000000,
            cesantias_parciales=400000,
        )
        personalizadas = [
            DeduccionPersonalizada(id='1', nombre='Libranza', valor=50000),
            DeduccionPersonalizada(id='2', nombre='Fondo de empleados', valor=30000),
        ]
        lqd = liquidar_contrato(
            contrato, parametros, anticipos, personalizadas, MotivoTerminacion.RENUNCIA
        )

        assert lqd.prima_anticipada == 1000000
        assert lqd.prima_neta == pytest.approx(0)
        assert lqd.cesantias_netas == pytest.approx(600000)
        assert lqd.intereses_cesantias_netos == pytest.approx(60000)
        # el anticipo de vacaciones supera lo causado: piso en 0
        assert lqd.vacaciones_netas == 0
        assert lqd.total_prestaciones == pytest.approx(660000)

        assert lqd.deducciones.total == pytest.approx(180000)
        assert lqd.deducciones.anticipo_cesantias == 400000
        assert lqd.neto_a_pagar == pytest.approx(480000)
        assert lqd.motivo == MotivoTerminacion.RENUNCIA

    def test_deducciones_negativas_se_ignoran(self, parametros, contrato_semestre):
        lqd = liquidar_contrato(
            contrato_semestre, parametros,
            deducciones_personalizadas=[DeduccionPersonalizada(id='1', nombre='Error', valor=-5000)]
        )
        assert lqd.deducciones.deducciones_personalizadas[0].valor == 0
        assert lqd.deducciones.total == 0

    def test_maximo_cinco_deducciones(self, parametros, contrato_semestre):
        seis = [DeduccionPersonalizada(id=str(i), nombre=f"D{i}", valor=1000) for i in range(6)]
        with pytest.raises(DeduccionesPersonalizadasError, match="Máximo 5"):
            liquidar_contrato(contrato_semestre, parametros, deducciones_personalizadas=seis)

    def test_cinco_deducciones_se_aceptan(self, parametros, contrato_semestre):
        cinco = [DeduccionPersonalizada(id=str(i), nombre=f"D{i}", valor=1000) for i in range(5)]
        lqd = liquidar_contrato(contrato_semestre, parametros, deducciones_personalizadas=cinco)
        assert lqd.deducciones.total == 5000

    def test_no_salariales_fuera_de_la_base(self, parametros, contrato_semestre):
        contrato = dataclasses.replace(contrato_semestre, bonos_no_salariales=300000)
        lqd = liquidar_contrato(contrato, parametros)
        assert lqd.base_liquidacion == 2000000
        assert lqd.cesantias == pytest.approx(1000000)
