# -*- coding: utf-8 -*-
"""
Errores del motor de nómina.

Solo se usan para violaciones de contrato del programador (tablas fiscales
mal construidas, año fiscal no registrado, demasiadas deducciones
personalizadas). Los datos de negocio irregulares NUNCA lanzan excepción:
se absorben con las reglas de respaldo documentadas en motor.py.
"""


class ErrorNomina(Exception):
    """Base para todos los errores del motor."""


class ParametrosInvalidosError(ErrorNomina):
    """La tabla de parámetros fiscales viola sus invariantes."""


class AnioFiscalNoSoportadoError(ErrorNomina):
    """Se pidió un año fiscal que no está en el registro."""

    def __init__(self, anio: int, disponibles):
        self.anio = anio
        self.disponibles = tuple(disponibles)
        super().__init__(
            f"Año fiscal {anio} no soportado. Disponibles: {', '.join(map(str, self.disponibles))}"
        )


class DeduccionesPersonalizadasError(ErrorNomina):
    """Más deducciones personalizadas de las permitidas en una liquidación."""
