"""
Tests for the `modis/models/dirty.py` module.
"""

import pytest

from modis.exceptions import UnknownAttributeError
from tests.fixtures.models import Outer, PersistenceSpec


class TestDirtyTracking:
    """Tests for the dirty tracking API."""

    def test_new_record_with_defaults_is_clean(self, mock_model: PersistenceSpec.MockModel):
        """
        Test that defaults don't count as changes.

        Args:
            mock_model: A fresh, unsaved `MockModel`.
        """
        assert not mock_model.is_changed()
        assert mock_model.changed == []
        assert mock_model.changes == {}

    def test_constructor_values_are_changes(self):
        """Test that values passed to the constructor that differ from the defaults are changes."""
        record = PersistenceSpec.MockModel(name="Kyle")

        assert record.changes == {"name": ("Ian", "Kyle")}

    def test_constructor_value_equal_to_default(self):
        """Test that passing the default value explicitly isn't a change."""
        record = PersistenceSpec.MockModel(name="Ian")

        assert not record.attribute_changed("name")

    def test_attribute_was(self, mock_model: PersistenceSpec.MockModel):
        """
        Test reading the value an attribute had at the last snapshot.

        Args:
            mock_model: A fresh, unsaved `MockModel`.
        """
        mock_model.name = "Kyle"

        assert mock_model.attribute_was("name") == "Ian"
        assert mock_model.name == "Kyle"

    def test_changing_back_is_clean(self, mock_model: PersistenceSpec.MockModel):
        """
        Test that restoring the original value clears the change.

        Args:
            mock_model: A fresh, unsaved `MockModel`.
        """
        mock_model.name = "Kyle"
        mock_model.name = "Ian"

        assert not mock_model.is_changed()

    def test_in_place_mutation_is_tracked(self):
        """Test that mutating an array or hash in place counts as a change."""
        record = Outer.InnerModel()

        record.tags.append("new")
        record.meta["key"] = "value"

        assert record.changed == ["tags", "meta"]
        assert record.changes["tags"] == ([], ["new"])

    def test_changed_in_declaration_order(self):
        """Test that `changed` follows declaration order, not assignment order."""
        record = Outer.InnerModel()

        record.active = True
        record.title = "first"

        assert record.changed == ["title", "active"]

    def test_reset_changes(self, mock_model: PersistenceSpec.MockModel):
        """
        Test that resetting moves the changes into `previous_changes`.

        Args:
            mock_model: A fresh, unsaved `MockModel`.
        """
        mock_model.name = "Kyle"
        mock_model.reset_changes()

        assert mock_model.changed == []
        assert mock_model.previous_changes == {"name": ("Ian", "Kyle")}
        assert mock_model.attribute_was("name") == "Kyle"

    def test_unknown_attribute(self, mock_model: PersistenceSpec.MockModel):
        """
        Test that asking about an undeclared attribute raises.

        Args:
            mock_model: A fresh, unsaved `MockModel`.
        """
        with pytest.raises(UnknownAttributeError):
            mock_model.attribute_changed("age")
