# -*- coding: utf-8 -*-
import dataclasses

import pytest

from modelos import ClaseRiesgo, EntradasContrato, ParametrosDeduccion
from parametros import PARAMETROS_2026


@pytest.fixture
def parametros():
    return PARAMETROS_2026


@pytest.fixture
def contrato_minimo():
    """Salario mínimo 2026, con auxilio, exonerado, riesgo I, 30 días."""
    return EntradasContrato(
        nombre="Empleado 1",
        salario_base=1750905,
        clase_riesgo=ClaseRiesgo.I,
        exonerado_parafiscales=True,
        incluir_auxilio_transporte=True,
        fecha_inicio="2026-01-01",
        fecha_fin="2026-01-30",
        parametros_deduccion=ParametrosDeduccion(),
    )


@pytest.fixture
def contrato_semestre(contrato_minimo):
    """El mismo contrato, liquidado a los 180 días."""
    return dataclasses.replace(contrato_minimo, fecha_fin="2026-06-30")
