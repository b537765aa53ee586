"""Unit tests for wire/local key mapping."""

import pytest

from domain.base.attributes import Attribute
from domain.base.exceptions import DuplicateAttributeError, UnknownAttributeError
from domain.base.model import Model
from domain.base.types import STRING
from domain.hydration.field_mapper import ModelFieldMapper


class Subnet(Model):
    id = Attribute("id", STRING)
    cidr_block = Attribute("cidrBlock", STRING)
    vcn_id = Attribute("vcnId", STRING)


@pytest.mark.unit
class TestModelFieldMapper:
    """Test cases for ModelFieldMapper."""

    def setup_method(self):
        self.mapper = ModelFieldMapper(Subnet)

    def test_field_mappings(self):
        assert dict(self.mapper.field_mappings) == {
            "id": "id",
            "cidrBlock": "cidr_block",
            "vcnId": "vcn_id",
        }

    def test_map_input_fields_mixed_keys(self):
        result = self.mapper.map_input_fields({"cidrBlock": "10.0.0.0/24", "vcn_id": "v1"})
        assert result == {"cidr_block": "10.0.0.0/24", "vcn_id": "v1"}

    def test_same_wire_and_local_name_is_not_a_duplicate(self):
        assert self.mapper.map_input_fields({"id": "s1"}) == {"id": "s1"}

    def test_duplicate_keys_raise(self):
        with pytest.raises(DuplicateAttributeError) as exc_info:
            self.mapper.map_input_fields({"vcnId": "v1", "vcn_id": "v2"})

        assert exc_info.value.wire_name == "vcnId"
        assert exc_info.value.local_name == "vcn_id"

    def test_unknown_keys_dropped(self):
        assert self.mapper.map_input_fields({"extra": 1}) == {}

    def test_unknown_keys_rejected_when_strict(self):
        with pytest.raises(UnknownAttributeError):
            self.mapper.map_input_fields({"extra": 1}, strict=True)

    def test_map_output_fields(self):
        result = self.mapper.map_output_fields({"cidr_block": "10.0.0.0/24", "other": 1})
        assert result == {"cidrBlock": "10.0.0.0/24"}
