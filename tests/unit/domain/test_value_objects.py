"""Tests unitarios para los value objects del dominio."""

from decimal import Decimal

import pytest

from sellercenter.domain.value_objects import Money, ParameterSet


class TestParameterSet:
    """Tests para ParameterSet."""

    def test_merge_returns_new_instance(self):
        """Debe devolver un conjunto nuevo sin tocar el original."""
        base = ParameterSet({"Limit": 10})

        derived = base.merge({"Offset": 0})

        assert derived is not base
        assert dict(base) == {"Limit": 10}
        assert dict(derived) == {"Limit": 10, "Offset": 0}

    def test_merge_last_write_wins_and_keeps_position(self):
        """Una clave repetida debe reemplazar el valor sin moverse."""
        merged = ParameterSet({"Limit": 10, "Offset": 0}).merge({"Limit": 20})

        assert list(merged.items()) == [("Limit", 20), ("Offset", 0)]

    def test_is_immutable(self):
        """No debe permitir asignaciones."""
        parameters = ParameterSet({"Limit": 10})

        with pytest.raises(TypeError):
            parameters["Limit"] = 20
        with pytest.raises(AttributeError):
            parameters._values = {}

    def test_to_dict_is_a_copy(self):
        """to_dict debe devolver una copia independiente."""
        parameters = ParameterSet({"Limit": 10})

        copy = parameters.to_dict()
        copy["Limit"] = 99

        assert parameters["Limit"] == 10

    def test_compares_as_mapping(self):
        """Debe compararse por contenido."""
        assert ParameterSet({"a": 1}) == {"a": 1}
        assert ParameterSet() == ParameterSet({})
        assert len(ParameterSet({"a": 1, "b": 2})) == 2


class TestMoney:
    """Tests para Money."""

    def test_amount_is_rounded_to_cents(self):
        """Debe redondear a dos decimales."""
        assert Money(Decimal("10.005"), "MXN").amount == Decimal("10.01")

    def test_from_string(self):
        """Debe crearse desde el texto de la API."""
        money = Money.from_string(" 99.9 ", "MXN")

        assert money.amount == Decimal("99.90")
        assert str(money) == "MXN 99.90"

    def test_without_currency(self):
        """Sin moneda debe quedar None y no una cadena vacía."""
        money = Money.from_string("5")

        assert money.currency is None
        assert str(money) == "5.00"

    def test_invalid_amount(self):
        """Debe rechazar montos no numéricos."""
        with pytest.raises(ValueError):
            Money.from_string("abc", "MXN")

    def test_invalid_currency(self):
        """Debe rechazar códigos de moneda que no tengan tres letras."""
        with pytest.raises(ValueError):
            Money(Decimal("1"), "PESOS")
