"""
Tests for parameter storage and kind-level parameter handling.
"""

import pytest
import numpy as np

from masa.precision import Precision
from masa.solutions.base import ParameterStore
from masa.solutions.catalog import KIND_TABLE, build_catalog
from masa.solutions.diagnostic import TestFunction as QuadraticSolution, Uninitialized
from masa.utils.errors import UnsetParameterError


class TestParameterStore:

    def test_get_unset(self):
        store = ParameterStore(("a", "b"), owner="demo")

        with pytest.raises(UnsetParameterError) as info:
            store.get("a")
        assert "demo" in str(info.value)

    def test_set_is_upsert(self):
        store = ParameterStore(("a",))
        store.set("a", 1.0)
        store.set("a", 2.0)
        store.set("extra", 3.0)

        assert store.get("a") == 2.0
        assert store.get("extra") == 3.0
        assert len(store) == 2

    def test_values_cast_to_dtype(self):
        store = ParameterStore(("a",), dtype=np.longdouble)
        store.set("a", 1)

        assert isinstance(store.get("a"), np.longdouble)

    def test_enumerate_includes_unset(self):
        store = ParameterStore(("b", "a"))
        store.set("b", 5.0)

        assert store.enumerate() == [("a", None), ("b", 5.0)]
        assert store.unset() == ["a"]

    def test_purge_all(self):
        store = ParameterStore(("a",))
        store.init_defaults({"a": 1.0})
        store.purge_all()

        assert "a" not in store
        assert store.unset() == ["a"]

    def test_display(self, log_messages):
        store = ParameterStore(("a", "b"), owner="demo")
        store.set("a", 0.5)
        store.display()

        assert any("demo" in message for message in log_messages)
        assert any("<unset>" in message for message in log_messages)


class TestKindParameters:

    def test_round_trip(self):
        solution = QuadraticSolution()
        solution.set_var("demo_var_2", 7.5)

        assert solution.get_var("demo_var_2") == 7.5

    @pytest.mark.parametrize("kind", [k for k in KIND_TABLE if k.name != "masa_uninit"],
                             ids=lambda k: k.name)
    def test_defaults_complete(self, kind):
        """Every declared parameter has a documented default."""
        solution = kind()
        solution.init_var()

        assert solution.store.unset() == []
        assert solution.sanity_check() is True

    def test_uninit_fails_sanity(self, log_messages):
        solution = Uninitialized()
        solution.init_var()

        assert solution.sanity_check() is False
        assert any("dummy" in message for message in log_messages)

    def test_uninit_poly_test_false(self):
        """An insane kind reports failure instead of raising."""
        assert Uninitialized().poly_test() is False

    def test_declared_names_unique(self):
        for solution in build_catalog():
            assert len(set(solution.parameters)) == len(solution.parameters), solution.name

    def test_long_double_defaults(self):
        solution = QuadraticSolution(Precision.LONG_DOUBLE)
        solution.init_var()

        assert all(isinstance(v, np.longdouble) for _, v in solution.list_var())
