"""Tests for domotive/labels/manager.py

Labels carry colour/emoji metadata and usage counts.
Key functionality:
- Seed built-in labels once
- Create, update and delete custom labels
- Track usage from comma-separated label strings
"""

from datetime import timedelta
from unittest.mock import patch

import pytest

from domotive.exceptions import LabelValidationError, ProtectedLabelError, StorageError
from domotive.labels import BUILT_IN_LABELS, LABEL_COLORS
from domotive.labels.manager import LabelManager, labels_to_string, parse_label_string


@pytest.fixture
def labels(store, clock):
    manager = LabelManager(store, clock=clock)
    manager.seed_built_ins()
    return manager


# ─────────────────────────────────────────────────────────────────────────────
# Label Strings
# ─────────────────────────────────────────────────────────────────────────────


class TestLabelStrings:
    """Tests for comma-separated label strings."""

    def test_parse(self):
        assert parse_label_string("Home,  Quick , ,") == ["Home", "Quick"]
        assert parse_label_string("") == []
        assert parse_label_string(None) == []

    def test_labels_from_string_skips_unknown(self, labels):
        found = labels.labels_from_string("Quick, Home, Nonsense")
        assert sorted(label.name for label in found) == ["Home", "Quick"]

    def test_labels_to_string(self, labels):
        found = labels.labels_from_string("Quick, Home")
        assert labels_to_string(found) == "Home, Quick"


# ─────────────────────────────────────────────────────────────────────────────
# Seeding and CRUD
# ─────────────────────────────────────────────────────────────────────────────


class TestSeedAndCrud:
    """Tests for label lifecycle."""

    def test_seeds_once(self, labels):
        assert len(labels.all()) == len(BUILT_IN_LABELS)
        assert labels.seed_built_ins() == 0

    def test_categories(self, labels):
        assert labels.categories() == ["Category", "Duration", "Energy", "Location", "Type"]

    def test_create_with_random_colour(self, labels):
        label = labels.create_label("  Garden  ", "Location")

        assert label.name == "Garden"
        assert label.color_hex in LABEL_COLORS
        assert label.is_built_in is False
        assert [lb.name for lb in labels.by_category("Location")].count("Garden") == 1

    @pytest.mark.parametrize("name,color", [("", "#FFFFFF"), ("Garden", "green"), ("Garden", "#12")])
    def test_create_validates(self, labels, name, color):
        with pytest.raises(LabelValidationError):
            labels.create_label(name, "Location", color_hex=color)

    def test_update(self, labels):
        label = labels.create_label("Garden", "Location", color_hex="#00FF00")

        updated = labels.update_label(label.id, name="Allotment", emoji="🌱")

        assert updated.name == "Allotment"
        assert labels.search("allot")[0].emoji == "🌱"

    def test_update_unknown(self, labels):
        with pytest.raises(LabelValidationError):
            labels.update_label("missing", name="x")

    def test_delete_custom(self, labels):
        label = labels.create_label("Garden", "Location")
        assert labels.delete_label(label.id) is True
        assert labels.delete_label(label.id) is False

    def test_built_in_cannot_be_deleted(self, labels):
        home = labels.labels_from_string("Home")[0]
        with pytest.raises(ProtectedLabelError):
            labels.delete_label(home.id)

    def test_built_in_stays_editable(self, labels):
        home = labels.labels_from_string("Home")[0]

        updated = labels.update_label(home.id, emoji="🏡")

        assert updated.is_built_in is True
        assert labels.labels_from_string("Home")[0].emoji == "🏡"


# ─────────────────────────────────────────────────────────────────────────────
# Usage Tracking
# ─────────────────────────────────────────────────────────────────────────────


class TestUsage:
    """Tests for usage counting."""

    def test_record_usage(self, labels, clock):
        assert labels.record_usage("Quick, Home") == 2
        clock.now = clock.now + timedelta(hours=1)
        labels.record_usage("Home")

        top = labels.most_used(limit=2)
        assert [(lb.name, lb.usage_count) for lb in top] == [("Home", 2), ("Quick", 1)]
        assert top[0].last_used_at == clock.now

    def test_search_empty_returns_all(self, labels):
        assert len(labels.search("")) == len(BUILT_IN_LABELS)

    def test_search_is_case_insensitive(self, labels):
        names = [lb.name for lb in labels.search("energy")]
        assert sorted(names) == ["High Energy", "Low Energy", "Medium Energy"]

    def test_usage_failure_is_not_raised(self, labels, store):
        with patch.object(store, "update_label", side_effect=StorageError("update label", "locked")):
            assert labels.record_usage("Home") == 1

        assert labels.labels_from_string("Home")[0].usage_count == 0
