import pytest

from xwdata.errors import MissingMetadataError
from xwdata.metadata_index import MetadataCategory, MetadataIndex


class TestMetadataIndex:
    """Test suite for MetadataIndex lookups."""

    def test_get_by_category_and_id(self, metadata: MetadataIndex):
        assert metadata.get(MetadataCategory.UPGRADE_TYPES, 10)["name"] == "Torpedo"
        assert metadata.get(MetadataCategory.FACTIONS, 3)["name"] == "Scum and Villainy"

    def test_typed_accessors(self, metadata: MetadataIndex):
        assert metadata.card_stat(1)["groups"] == ["attack"]
        assert metadata.ship_type(2)["name"] == "Scavenged YT-1300 Light Freighter"
        assert metadata.ship_size(2)["name"] == "Large"
        assert metadata.force_affiliation(2)["name"] == "Dark"
        assert metadata.card_action_type(3)["name"] == "Barrel Roll"

    def test_string_ids_resolve(self, metadata: MetadataIndex):
        assert metadata.upgrade_type("10")["name"] == "Torpedo"

    @pytest.mark.parametrize("item_id", [10.9, True, False, "10.5", "Torpedo"])
    def test_non_integral_ids_raise(self, metadata: MetadataIndex, item_id):
        with pytest.raises(MissingMetadataError) as error:
            metadata.upgrade_type(item_id)

        assert error.value.item_id == item_id

    def test_whole_float_id_resolves(self, metadata: MetadataIndex):
        assert metadata.upgrade_type(10.0)["name"] == "Torpedo"

    @pytest.mark.parametrize(
        "category,item_id",
        [
            (MetadataCategory.UPGRADE_TYPES, 999),
            (MetadataCategory.CARD_STATS, 404),
            (MetadataCategory.FORCE_AFFILIATION, None),
        ],
    )
    def test_missing_id_raises(self, metadata: MetadataIndex, category, item_id):
        with pytest.raises(MissingMetadataError) as error:
            metadata.get(category, item_id)

        assert error.value.category is category
        assert error.value.item_id == item_id
        assert isinstance(error.value, LookupError)

    def test_missing_category_is_empty(self):
        metadata = MetadataIndex({"factions": [{"id": 1, "name": "Rebel Alliance"}]})

        assert metadata.faction(1)["name"] == "Rebel Alliance"
        with pytest.raises(MissingMetadataError):
            metadata.ship_type(1)

    def test_tables_are_read_only(self, metadata: MetadataIndex):
        with pytest.raises(TypeError):
            metadata._tables[MetadataCategory.FACTIONS][99] = {"id": 99, "name": "X"}

    def test_length_counts_every_record(self, metadata: MetadataIndex):
        assert len(metadata) == 4 + 2 + 8 + 4 + 3 + 2 + 3
