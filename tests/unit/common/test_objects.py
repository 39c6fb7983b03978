"""Unit tests for dotted-path object helpers."""

from core.objects import expand_object, get_property, has_property, set_property


class TestObjectPaths:
    def test_get_property(self):
        obj = {"system": {"type": {"value": "party"}}}

        assert get_property(obj, "system.type.value") == "party"
        assert get_property(obj, "system.missing") is None
        assert get_property(obj, "system.type.value.deeper", "x") == "x"

    def test_has_property_with_none_value(self):
        obj = {"system": {"type": {"value": None}}}

        assert has_property(obj, "system.type.value")
        assert not has_property(obj, "system.members")

    def test_set_property_creates_parents(self):
        obj: dict = {"system": "legacy"}

        set_property(obj, "system.type.value", "crew")

        assert obj == {"system": {"type": {"value": "crew"}}}

    def test_expand_object(self):
        expanded = expand_object({"name": "Crew", "system.type.value": "crew", "system.members": []})

        assert expanded == {
            "name": "Crew",
            "system": {"type": {"value": "crew"}, "members": []},
        }
