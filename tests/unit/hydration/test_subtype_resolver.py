"""Unit tests for discriminator-based subtype resolution."""

from unittest.mock import Mock

import pytest

from config.schemas.hydration_schema import HydrationConfig
from domain.base.attributes import Attribute, EnumAttribute
from domain.base.enum_model import BaseEnumModel
from domain.base.exceptions import ModelDefinitionError
from domain.base.model import Model
from domain.base.ports.logging_port import LoggingPort
from domain.base.types import STRING, ArrayOf, ModelOf
from domain.hydration.subtype_resolver import SubtypeResolver


class NodeType(BaseEnumModel):
    VISIBLE = "VISIBLE"
    ACCESS_DENIED = "ACCESS_DENIED"
    UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"


class Node(Model):
    __discriminator__ = "type"

    type = EnumAttribute("type", NodeType)
    label = Attribute("label", STRING)


class VisibleNode(Node, discriminator_value="VISIBLE"):
    entity_id = Attribute("entityId", STRING)


class DeniedNode(Node, discriminator_value="ACCESS_DENIED"):
    pass


class Path(Model):
    nodes = Attribute("nodes", ArrayOf(ModelOf(Node)))


class Action(Model):
    __discriminator__ = "kind"

    kind = Attribute("kind", STRING)


@pytest.mark.unit
class TestSubtypeResolver:
    """Test cases for SubtypeResolver."""

    def setup_method(self):
        self.logger = Mock(spec=LoggingPort)
        self.resolver = SubtypeResolver(logger=self.logger, config=HydrationConfig())

    def test_resolves_registered_subtype(self):
        assert self.resolver.resolve(Node, {"type": "VISIBLE"}) is VisibleNode
        assert self.resolver.resolve(Node, {"type": "ACCESS_DENIED"}) is DeniedNode

    def test_accepts_enum_member_value(self):
        assert self.resolver.resolve(Node, {"type": NodeType.VISIBLE}) is VisibleNode

    def test_unknown_value_falls_back_to_base_and_warns(self):
        assert self.resolver.resolve(Node, {"type": "FUTURE_KIND"}) is Node

        self.logger.warning.assert_called_once_with(
            "subtype_not_found", model="Node", discriminator="type", value="'FUTURE_KIND'"
        )

    def test_missing_discriminator_falls_back_to_base(self):
        assert self.resolver.resolve(Node, {"label": "x"}) is Node
        assert self.logger.warning.called

    def test_log_level_follows_configuration(self):
        resolver = SubtypeResolver(
            logger=self.logger, config=HydrationConfig(unknown_subtype_log_level="debug")
        )
        resolver.resolve(Node, {"type": "FUTURE_KIND"})

        assert self.logger.debug.called
        assert not self.logger.warning.called

    def test_non_polymorphic_model_resolves_to_itself(self):
        assert self.resolver.resolve(Path, {"type": "VISIBLE"}) is Path
        assert not self.logger.warning.called

    def test_subtype_outside_requested_branch_is_rejected(self):
        assert self.resolver.resolve(DeniedNode, {"type": "VISIBLE"}) is DeniedNode

    def test_non_mapping_payload(self):
        assert self.resolver.resolve(Node, "VISIBLE") is Node


@pytest.mark.unit
class TestPolymorphicHydration:
    """Test cases for subtype dispatch through Model.from_dict."""

    def test_from_dict_returns_subtype(self):
        node = Node.from_dict({"type": "VISIBLE", "entityId": "ocid1.instance.oc1..x"})

        assert type(node) is VisibleNode
        assert node.entity_id == "ocid1.instance.oc1..x"
        assert node.type is NodeType.VISIBLE

    def test_from_dict_unknown_subtype_keeps_base_fields(self):
        logger = Mock(spec=LoggingPort)
        node = Node.from_dict({"type": "FUTURE_KIND", "label": "x", "entityId": "e"}, logger=logger)

        assert type(node) is Node
        assert node.label == "x"
        assert node.type is NodeType.UNKNOWN_ENUM_VALUE
        assert "entity_id" not in node.to_dict()

    def test_get_subtype(self):
        assert Node.get_subtype({"type": "ACCESS_DENIED"}) is DeniedNode

    def test_nested_arrays_dispatch_per_element(self):
        path = Path.from_dict(
            {"nodes": [{"type": "VISIBLE", "entityId": "e1"}, {"type": "ACCESS_DENIED"}]}
        )

        assert [type(node) for node in path.nodes] == [VisibleNode, DeniedNode]

    def test_subtype_constructor_forces_discriminator(self):
        assert VisibleNode().type is NodeType.VISIBLE
        assert VisibleNode(type="ACCESS_DENIED").type is NodeType.VISIBLE

    def test_registry(self):
        assert dict(Node.subtypes()) == {"VISIBLE": VisibleNode, "ACCESS_DENIED": DeniedNode}
        assert VisibleNode.subtypes() == Node.subtypes()
        assert VisibleNode.discriminator_value() == "VISIBLE"
        assert Node.discriminator_value() is None
        assert Path.subtypes() == {}

    def test_discriminator_attribute_on_subtype(self):
        assert VisibleNode.discriminator_attribute() is Node.type

    def test_plain_string_discriminator(self):
        class Forward(Action, discriminator_value="forward"):
            target = Attribute("target", STRING)

        action = Action.from_dict({"kind": "forward", "target": "t"})

        assert isinstance(action, Forward)
        assert action.kind == "forward"


@pytest.mark.unit
class TestSubtypeRegistration:
    """Test cases for subtype declaration errors."""

    def test_duplicate_discriminator_value(self):
        with pytest.raises(ModelDefinitionError):

            class AnotherVisibleNode(Node, discriminator_value="VISIBLE"):
                pass

        assert Node.subtypes()["VISIBLE"] is VisibleNode

    def test_discriminator_value_without_family(self):
        with pytest.raises(ModelDefinitionError):

            class Orphan(Path, discriminator_value="orphan"):
                pass

    def test_discriminator_must_be_declared(self):
        with pytest.raises(ModelDefinitionError):

            class Broken(Model):
                __discriminator__ = "kind"

                name = Attribute("name", STRING)
