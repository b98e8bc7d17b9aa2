"""
Tests for Property Store
========================
"""

import numpy as np
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tensors.rank2 import Rank2Tensor
from tensors.rank4 import Rank4Tensor
from matesystem.properties import PropertyStore
from matesystem.exceptions import MissingPropertyError


class TestPropertyStore:
    """Tests for PropertyStore."""

    def test_scalar_roundtrip(self):
        store = PropertyStore()
        store.set_scalar("H", 1.5)
        assert store.scalar("H") == 1.5

    def test_write_overwrites(self):
        store = PropertyStore()
        store.set_scalar("H", 1.0)
        store.set_scalar("H", 2.0)
        assert store.scalar("H") == 2.0
        assert store.count("scalar") == 1

    def test_all_kinds(self):
        store = PropertyStore()
        store.set_scalar("a", 1.0)
        store.set_vector("v", [1.0, 2.0, 3.0])
        store.set_rank2("s", Rank2Tensor.identity(2))
        store.set_rank4("C", Rank4Tensor.identity_symmetric())
        store.set_boolean("flag", True)

        assert np.allclose(store.vector("v"), [1, 2, 3])
        assert np.allclose(store.rank2("s").components, np.eye(3))
        assert np.allclose(store.rank4("C").components,
                           Rank4Tensor.identity_symmetric().components)
        assert store.boolean("flag") is True
        for kind in ("scalar", "vector", "rank2", "rank4", "boolean"):
            assert store.count(kind) == 1

    def test_missing_property_raises(self):
        """Reading a name that was never written fails loudly."""
        store = PropertyStore()
        for reader in (store.scalar, store.vector, store.rank2, store.rank4, store.boolean):
            with pytest.raises(MissingPropertyError):
                reader("nothing")

    def test_missing_property_is_key_error(self):
        store = PropertyStore()
        with pytest.raises(KeyError):
            store.scalar("H")

    def test_kinds_are_separate(self):
        """Names are unique per kind, not across kinds."""
        store = PropertyStore()
        store.set_scalar("stress", 1.0)
        assert store.has("scalar", "stress")
        assert not store.has("rank2", "stress")
        with pytest.raises(MissingPropertyError):
            store.rank2("stress")

    def test_unknown_kind(self):
        store = PropertyStore()
        with pytest.raises(ValueError):
            store.count("rank3")

    def test_written_values_are_copied(self):
        """Mutating the caller's tensor after writing does not change the store."""
        store = PropertyStore()
        T = Rank2Tensor.identity(3)
        store.set_rank2("s", T)
        T.components[0, 0] = 100.0
        assert store.rank2("s")[0, 0] == 1.0

        v = np.array([1.0, 2.0])
        store.set_vector("v", v)
        v[0] = 100.0
        assert store.vector("v")[0] == 1.0

    def test_read_values_are_copies(self):
        store = PropertyStore()
        store.set_rank2("s", Rank2Tensor.identity(3))
        T = store.rank2("s")
        T.components[0, 0] = 100.0
        assert store.rank2("s")[0, 0] == 1.0

    def test_copy_has_no_aliasing(self):
        """The old store of the next step is independent of the new store."""
        new = PropertyStore()
        new.set_scalar("H", 1.0)
        new.set_rank2("stress", Rank2Tensor.identity(2))

        old = new.copy()
        new.set_scalar("H", 5.0)
        new.set_rank2("stress", Rank2Tensor.zeros(2))
        new.set_scalar("extra", 1.0)

        assert old.scalar("H") == 1.0
        assert np.allclose(old.rank2("stress").components, np.eye(3))
        assert not old.has("scalar", "extra")

    def test_names_preserve_order(self):
        store = PropertyStore()
        for name in ("c", "a", "b"):
            store.set_scalar(name, 0.0)
        assert store.names("scalar") == ["c", "a", "b"]

    def test_as_dict(self):
        store = PropertyStore()
        store.set_scalar("H", 2.0)
        store.set_rank2("strain", Rank2Tensor([[0.1, 0.0], [0.0, 0.2]], dim=2))
        data = store.as_dict()
        assert data["scalar"]["H"] == 2.0
        assert data["rank2"]["strain"].shape == (2, 2)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
