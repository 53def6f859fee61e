"""Tests for SettingsRecord persistence via pickle."""
import os
import pickle

import pytest

from sticker_app import SettingsRecord, SettingsStore, StickerSpec, DEFAULT_VINYL_COST


class TestSettingsRecord:

    def test_documented_defaults(self):
        s = SettingsRecord()
        assert s.vinyl_cost == DEFAULT_VINYL_COST
        assert s.include_vat is False
        assert s.material == "unspecified"
        assert s.rounded_corners is False
        assert s.stickers == ()

    def test_is_immutable(self):
        s = SettingsRecord()
        with pytest.raises(AttributeError):
            s.vat_rate = 20

    def test_backward_compat_missing_field(self):
        """Old pickled records without newer fields fall back to defaults."""
        s = SettingsRecord(vinyl_cost=0.2)
        loaded = pickle.loads(pickle.dumps(s))
        del loaded.__dict__['dark_mode']
        assert loaded.dark_mode is False
        assert loaded.vinyl_cost == 0.2

    def test_unknown_attribute_still_raises(self):
        with pytest.raises(AttributeError):
            SettingsRecord().no_such_field


class TestSettingsStore:

    def test_absent_file_loads_none(self, settings_path):
        assert SettingsStore(settings_path).load() is None

    def test_round_trip(self, settings_path):
        record = SettingsRecord(
            vinyl_cost=0.07, vat_rate=20, include_vat=True, material="Matte Vinyl",
            rounded_corners=True, dark_mode=True,
            stickers=(StickerSpec("100", "50", "10"), StickerSpec("", "abc", "3")),
        )
        store = SettingsStore(settings_path)
        store.save(record)
        assert os.path.getsize(settings_path) > 0
        assert store.load() == record

    def test_save_replaces_wholesale(self, settings_path):
        store = SettingsStore(settings_path)
        store.save(SettingsRecord(material="Clear Vinyl"))
        store.save(SettingsRecord(vat_rate=0))
        loaded = store.load()
        assert loaded.material == "unspecified"
        assert loaded.vat_rate == 0

    def test_creates_parent_directory(self, tmp_path):
        path = str(tmp_path / "nested" / "dir" / "settings.pickle")
        SettingsStore(path).save(SettingsRecord())
        assert os.path.exists(path)

    def test_corrupt_file_loads_none(self, settings_path):
        with open(settings_path, "wb") as f:
            f.write(b"not a pickle")
        assert SettingsStore(settings_path).load() is None

    def test_wrong_type_loads_none(self, settings_path):
        with open(settings_path, "wb") as f:
            pickle.dump({"vinyl_cost": 1}, f)
        assert SettingsStore(settings_path).load() is None

    def test_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        store = SettingsStore(str(blocker / "settings.pickle"))
        with pytest.raises(OSError):
            store.save(SettingsRecord())
