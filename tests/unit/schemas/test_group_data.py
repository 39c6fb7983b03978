"""Unit tests for the group data schema and its migration."""

import pytest
from pydantic import ValidationError

from domain.schemas.group import GroupData, MemberData, migrate_data


class TestMigrateData:
    def test_wraps_bare_ids(self):
        source = {"members": ["a", "b"]}

        result = migrate_data(source)

        assert result["members"] == [{"actor": "a"}, {"actor": "b"}]

    def test_structured_members_unchanged(self):
        members = [{"actor": "a", "quantity": 3}, {"actor": "b"}]
        source = {"members": list(members)}

        migrate_data(source)

        assert source["members"] == members

    def test_mixed_members(self):
        source = {"members": ["a", {"actor": "b", "quantity": 2}]}

        migrate_data(source)

        assert source["members"] == [{"actor": "a"}, {"actor": "b", "quantity": 2}]

    def test_missing_members_untouched(self):
        source = {"type": {"value": "party"}}

        migrate_data(source)

        assert source == {"type": {"value": "party"}}

    def test_validation_does_not_mutate_source(self):
        source = {"members": ["a"]}

        data = GroupData.model_validate(source)

        assert source == {"members": ["a"]}
        assert data.members == [MemberData(actor="a", quantity=1)]


class TestGroupData:
    def test_defaults(self):
        data = GroupData()

        assert data.type.value == ""
        assert data.description.full == ""
        assert data.description.summary == ""
        assert data.members == []
        assert data.attributes.movement.land == 0
        assert data.attributes.movement.water == 0
        assert data.attributes.movement.air == 0
        assert data.currency.gp == 0

    def test_movement_snaps_to_step(self):
        data = GroupData.model_validate(
            {"attributes": {"movement": {"land": 30.04, "water": 12.36, "air": 5}}}
        )

        assert data.attributes.movement.land == 30.0
        assert data.attributes.movement.water == 12.4
        assert data.attributes.movement.air == 5.0

    def test_negative_movement_rejected(self):
        with pytest.raises(ValidationError):
            GroupData.model_validate({"attributes": {"movement": {"land": -5}}})

    def test_very_large_movement_kept(self):
        data = GroupData.model_validate({"attributes": {"movement": {"land": 1e308}}})

        assert data.attributes.movement.land == 1e308

    @pytest.mark.parametrize("speed", [float("inf"), float("nan")])
    def test_non_finite_movement_rejected(self, speed: float):
        with pytest.raises(ValidationError):
            GroupData.model_validate({"attributes": {"movement": {"water": speed}}})

    def test_null_movement_rejected(self):
        with pytest.raises(ValidationError):
            GroupData.model_validate({"attributes": {"movement": {"air": None}}})

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            GroupData.model_validate({"members": [{"actor": "a", "quantity": -1}]})

    def test_fractional_quantity_rejected(self):
        with pytest.raises(ValidationError):
            GroupData.model_validate({"members": [{"actor": "a", "quantity": 1.5}]})

    def test_negative_currency_rejected(self):
        with pytest.raises(ValidationError):
            GroupData.model_validate({"currency": {"gp": -10}})

    def test_null_text_becomes_empty(self):
        data = GroupData.model_validate({"description": {"full": None}})

        assert data.description.full == ""

    def test_unknown_keys_dropped(self):
        data = GroupData.model_validate({"legacy": True, "members": [{"actor": "a", "x": 1}]})

        dumped = data.model_dump()
        assert "legacy" not in dumped
        assert dumped["members"] == [{"actor": "a", "quantity": 1}]
