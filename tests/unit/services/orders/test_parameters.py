"""Tests unitarios para los constructores de parámetros de órdenes."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from sellercenter.domain.contracts import OrderSortDirection, OrderSortFilter
from sellercenter.domain.value_objects import ParameterSet
from sellercenter.services.orders import parameters as params
from sellercenter.utils.error_handler import EmptyArgumentException, InvalidDomainException


class TestWithPagination:
    """Tests para Limit y Offset."""

    @pytest.mark.parametrize("limit", [0, -1, -500])
    def test_invalid_limit_falls_back_to_default(self, limit):
        """Debe usar el límite por defecto cuando es menor que 1."""
        result = params.with_pagination(ParameterSet(), limit, 0)
        assert result["Limit"] == 1000

    @pytest.mark.parametrize("limit", [1, 50, 5000])
    def test_valid_limit_is_kept(self, limit):
        """Debe conservar cualquier límite mayor o igual a 1."""
        result = params.with_pagination(ParameterSet(), limit, 0)
        assert result["Limit"] == limit

    def test_negative_offset_falls_back_to_zero(self):
        """Debe usar offset 0 cuando es negativo."""
        result = params.with_pagination(ParameterSet(), 10, -3)
        assert result["Offset"] == 0

    def test_positive_offset_is_kept(self):
        """Debe conservar un offset positivo."""
        result = params.with_pagination(ParameterSet(), 10, 200)
        assert result["Offset"] == 200

    def test_does_not_modify_input(self):
        """Debe devolver un conjunto nuevo sin tocar el original."""
        base = ParameterSet({"UserID": "seller"})

        result = params.with_pagination(base, 10, 5)

        assert dict(base) == {"UserID": "seller"}
        assert dict(result) == {"UserID": "seller", "Limit": 10, "Offset": 5}


class TestWithSort:
    """Tests para SortBy y SortDirection."""

    def test_valid_values_are_kept(self):
        """Debe conservar valores válidos."""
        result = params.with_sort(ParameterSet(), "updated_at", "DESC")
        assert result["SortBy"] == "updated_at"
        assert result["SortDirection"] == "DESC"

    def test_enum_members_are_serialized_by_value(self):
        """Debe aceptar miembros del enum y enviar su valor."""
        result = params.with_sort(ParameterSet(), OrderSortFilter.UPDATED_AT, OrderSortDirection.DESC)
        assert result["SortBy"] == "updated_at"
        assert result["SortDirection"] == "DESC"

    @pytest.mark.parametrize(
        "sort_by,sort_direction",
        [("price", "ASC"), ("created_at", "sideways"), ("", ""), ("CREATED_AT", "desc")],
    )
    def test_invalid_values_fall_back_to_defaults(self, sort_by, sort_direction):
        """Debe reemplazar valores fuera del dominio sin lanzar excepción."""
        result = params.with_sort(ParameterSet(), sort_by, sort_direction)

        if sort_by != "created_at":
            assert result["SortBy"] == "created_at"
        if sort_direction != "ASC":
            assert result["SortDirection"] == "ASC"


class TestWithDateRange:
    """Tests para los filtros de fecha."""

    def test_only_given_bounds_are_added(self):
        """Debe agregar solo los límites provistos."""
        result = params.with_date_range(ParameterSet(), params.CREATED, after=datetime(2024, 1, 15, 10, 30))

        assert dict(result) == {"CreatedAfter": "2024-01-15T10:30:00"}

    def test_both_bounds_with_updated_prefix(self):
        """Debe usar el prefijo Updated en ambas claves."""
        result = params.with_date_range(
            ParameterSet(),
            params.UPDATED,
            after=datetime(2024, 1, 1),
            before=datetime(2024, 1, 31, 23, 59, 59),
        )

        assert result["UpdatedAfter"] == "2024-01-01T00:00:00"
        assert result["UpdatedBefore"] == "2024-01-31T23:59:59"

    def test_no_bounds_returns_equal_set(self):
        """Sin límites no debe agregar claves."""
        base = ParameterSet({"Limit": 10})
        assert params.with_date_range(base, params.CREATED) == base

    def test_unknown_prefix_raises(self):
        """Debe rechazar prefijos distintos de Created/Updated."""
        with pytest.raises(ValueError):
            params.with_date_range(ParameterSet(), "Deleted", after=datetime(2024, 1, 1))


class TestFormatDatetime:
    """Tests para el formato de fechas de la API."""

    def test_drops_microseconds(self):
        """Debe omitir fracciones de segundo."""
        assert params.format_datetime(datetime(2024, 1, 15, 10, 30, 5, 123456)) == "2024-01-15T10:30:05"

    def test_aware_datetime_keeps_its_own_clock(self):
        """Debe escribir la hora en su propia zona y sin offset."""
        value = datetime(2024, 1, 15, 10, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert params.format_datetime(value) == "2024-01-15T10:30:00"

    def test_parse_format_round_trip(self):
        """El valor formateado debe poder reinterpretarse con el mismo formato."""
        text = "2024-02-29T23:59:59"
        assert params.format_datetime(datetime.strptime(text, params.DATETIME_FORMAT)) == text


class TestStatusFilters:
    """Tests para el filtro estricto y el permisivo de estado."""

    def test_strict_status_is_applied(self):
        """Debe agregar un estado válido."""
        result = params.with_status(ParameterSet(), "pending")
        assert result["Status"] == "pending"

    def test_strict_status_rejects_unknown_value(self):
        """Debe lanzar InvalidDomainException con un estado desconocido."""
        with pytest.raises(InvalidDomainException) as exc_info:
            params.with_status(ParameterSet(), "lost")

        assert exc_info.value.argument == "Status"
        assert exc_info.value.message == "The parameter Status is invalid."

    def test_optional_status_drops_unknown_value(self):
        """El filtro permisivo debe omitir un estado desconocido."""
        result = params.with_optional_status(ParameterSet(), "lost")
        assert "Status" not in result

    def test_optional_status_drops_none(self):
        """El filtro permisivo debe omitir None."""
        assert "Status" not in params.with_optional_status(ParameterSet(), None)

    def test_optional_status_applies_valid_value(self):
        """El filtro permisivo debe agregar un estado válido."""
        assert params.with_optional_status(ParameterSet(), "shipped")["Status"] == "shipped"


class TestWithItemIdList:
    """Tests para listas de identificadores."""

    def test_serializes_compact_json_array(self):
        """Debe serializar un arreglo JSON sin espacios."""
        result = params.with_item_id_list(ParameterSet(), "OrderIdList", [3001, 3002, 3003])

        assert result["OrderIdList"] == "[3001,3002,3003]"
        assert json.loads(result["OrderIdList"]) == [3001, 3002, 3003]

    def test_accepts_any_iterable(self):
        """Debe aceptar generadores y tuplas."""
        result = params.with_item_id_list(ParameterSet(), "OrderItemIds", (i for i in (1, 2)))
        assert result["OrderItemIds"] == "[1,2]"

    def test_empty_list_raises(self):
        """Debe lanzar EmptyArgumentException con una lista vacía."""
        with pytest.raises(EmptyArgumentException) as exc_info:
            params.with_item_id_list(ParameterSet(), "OrderItemIds", [])

        assert exc_info.value.message == "The parameter OrderItemIds should not be empty."


class TestBuilderComposition:
    """Tests de composición de constructores."""

    def test_created_between_defaults(self):
        """Debe producir exactamente las claves de una búsqueda por fecha de creación."""
        parameters = params.with_pagination(ParameterSet(), params.DEFAULT_LIMIT, params.DEFAULT_OFFSET)
        parameters = params.with_sort(parameters, params.DEFAULT_SORT_BY, params.DEFAULT_SORT_DIRECTION)
        parameters = params.with_date_range(
            parameters,
            params.CREATED,
            after=datetime(2024, 1, 1),
            before=datetime(2024, 1, 31),
        )

        assert dict(parameters) == {
            "Limit": 1000,
            "Offset": 0,
            "SortBy": "created_at",
            "SortDirection": "ASC",
            "CreatedAfter": "2024-01-01T00:00:00",
            "CreatedBefore": "2024-01-31T00:00:00",
        }
