"""Unit tests for raw value conversion."""

from datetime import date, datetime, timedelta, timezone

import pytest

from domain.base.attributes import Attribute
from domain.base.exceptions import ModelDefinitionError, ValueConversionError
from domain.base.model import Model
from domain.base.types import (
    BOOLEAN,
    DATE,
    DATE_TIME,
    FLOAT,
    INTEGER,
    OBJECT,
    STRING,
    ArrayOf,
    MapOf,
    ModelOf,
    TypeSpec,
)
from domain.hydration.type_converter import TypeConverter


class Endpoint(Model):
    kubernetes = Attribute("kubernetes", STRING)
    port = Attribute("port", INTEGER)


@pytest.mark.unit
class TestPrimitiveConversion:
    """Test cases for primitive type conversion."""

    def setup_method(self):
        self.converter = TypeConverter()

    def test_none_stays_none(self):
        assert self.converter.convert(INTEGER, None) is None
        assert self.converter.convert(ModelOf(Endpoint), None) is None

    def test_string(self):
        assert self.converter.convert(STRING, "abc") == "abc"
        assert self.converter.convert(STRING, 42) == "42"

    @pytest.mark.parametrize("value", [True, "true", "TRUE", "t", "yes", "y", "1", 1, 2.5])
    def test_boolean_true(self, value):
        assert self.converter.convert(BOOLEAN, value) is True

    @pytest.mark.parametrize("value", [False, "false", "no", "0", "", "nope", 0])
    def test_boolean_false(self, value):
        assert self.converter.convert(BOOLEAN, value) is False

    def test_boolean_rejects_containers(self):
        with pytest.raises(ValueConversionError):
            self.converter.convert(BOOLEAN, ["true"])

    def test_integer(self):
        assert self.converter.convert(INTEGER, "12") == 12
        assert self.converter.convert(INTEGER, 12.9) == 12

    def test_float(self):
        assert self.converter.convert(FLOAT, "1.5") == 1.5
        assert self.converter.convert(FLOAT, 2) == 2.0

    @pytest.mark.parametrize("spec", [INTEGER, FLOAT])
    def test_numbers_reject_booleans(self, spec):
        with pytest.raises(ValueConversionError):
            self.converter.convert(spec, True)

    def test_integer_rejects_garbage(self):
        with pytest.raises(ValueConversionError) as exc_info:
            self.converter.convert(INTEGER, "twelve")

        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.type_name == "Integer"

    def test_date_time(self):
        assert self.converter.convert(DATE_TIME, "2016-08-25T21:10:29.600Z") == datetime(
            2016, 8, 25, 21, 10, 29, 600000, tzinfo=timezone.utc
        )

    def test_date_time_with_offset(self):
        result = self.converter.convert(DATE_TIME, "2016-08-25T21:10:29+02:00")
        assert result.utcoffset() == timedelta(hours=2)

    def test_date_time_rejects_garbage(self):
        with pytest.raises(ValueConversionError):
            self.converter.convert(DATE_TIME, "yesterday")

        with pytest.raises(ValueConversionError):
            self.converter.convert(DATE_TIME, 1700000000)

    def test_date(self):
        assert self.converter.convert(DATE, "2016-08-25") == date(2016, 8, 25)
        assert self.converter.convert(DATE, datetime(2016, 8, 25, 10, 0)) == date(2016, 8, 25)

    def test_object_passes_through(self):
        value = {"nested": [1, 2]}
        assert self.converter.convert(OBJECT, value) is value


@pytest.mark.unit
class TestCompositeConversion:
    """Test cases for nested models, arrays and maps."""

    def setup_method(self):
        self.converter = TypeConverter()

    def test_model_from_mapping(self):
        result = self.converter.convert(ModelOf(Endpoint), {"kubernetes": "10.0.0.1", "port": "6443"})

        assert isinstance(result, Endpoint)
        assert result.port == 6443

    def test_model_instance_passes_through(self):
        endpoint = Endpoint(kubernetes="10.0.0.1")
        assert self.converter.convert(ModelOf(Endpoint), endpoint) is endpoint

    def test_model_rejects_non_mapping(self):
        with pytest.raises(ValueConversionError):
            self.converter.convert(ModelOf(Endpoint), "10.0.0.1")

    def test_array(self):
        assert self.converter.convert(ArrayOf(INTEGER), ["1", 2]) == [1, 2]
        assert self.converter.convert(ArrayOf(STRING), []) == []

    def test_array_of_models(self):
        result = self.converter.convert(ArrayOf(ModelOf(Endpoint)), [{"port": 1}, {"port": 2}])
        assert [endpoint.port for endpoint in result] == [1, 2]

    def test_array_rejects_non_list(self):
        with pytest.raises(ValueConversionError):
            self.converter.convert(ArrayOf(STRING), "abc")

    def test_map_preserves_keys(self):
        result = self.converter.convert(MapOf(STRING), {"CamelKey": 1, "snake_key": "x"})
        assert result == {"CamelKey": "1", "snake_key": "x"}

    def test_nested_map(self):
        value = {"Operations": {"CostCenter": "42", "Flags": [1]}}
        assert self.converter.convert(MapOf(MapOf(OBJECT)), value) == value

    def test_map_rejects_non_mapping(self):
        with pytest.raises(ValueConversionError):
            self.converter.convert(MapOf(STRING), ["a"])

    def test_unsupported_spec(self):
        with pytest.raises(ModelDefinitionError):
            self.converter.convert(TypeSpec(), "x")
