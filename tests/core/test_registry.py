"""
Tests for the per-precision solution registry.

Covers initialization, selection, listing and the fatal error paths.
"""

import pytest
import numpy as np

from masa.core import Registry
from masa.precision import Precision
from masa.solutions.base import ManufacturedSolution
from masa.solutions.catalog import KIND_TABLE
from masa.solutions.heat import HEAT_KINDS
from masa.utils.errors import (
    CatalogIntegrityError,
    NoActiveSolutionError,
    UnknownInstanceError,
    UnknownKindError,
)


class TestInitialize:
    """initialize() stores, activates and replaces instances."""

    def test_initialize_lists_instance(self, registry):
        """A fresh instance is listed under its user name and kind."""
        registry.initialize("run-a", "heat_1d_steady_const")

        assert registry.list() == [("run-a", "heat_1d_steady_const")]
        assert registry.count() == 1

    def test_initialize_activates(self, registry):
        registry.initialize("a", "euler_1d")
        registry.initialize("b", "euler_2d")

        assert registry.active_name == "b"
        assert registry.active_instance().name == "euler_2d"

    def test_alias_resolves_to_canonical(self, registry):
        """Legacy heat names map onto canonical kinds."""
        registry.initialize("legacy", "heateq_2d_unsteady_var")

        assert registry.list() == [("legacy", "heat_2d_unsteady_var")]

    def test_reinitialize_replaces_instance(self, registry):
        """Re-using a user name replaces the old instance."""
        first = registry.initialize("run", "euler_1d")
        first.init_var()
        second = registry.initialize("run", "euler_3d")

        assert second is not first
        assert registry.count() == 1
        assert registry.list() == [("run", "euler_3d")]
        assert registry.active_instance() is second

    def test_same_kind_independent_parameters(self, registry):
        """Two instances of one kind do not share parameters."""
        a = registry.initialize("a", "euler_1d")
        b = registry.initialize("b", "euler_1d")
        a.init_var()
        b.init_var()
        a.set_var("u_0", 1.5)

        assert b.get_var("u_0") == b.defaults["u_0"]
        assert a.get_var("u_0") == 1.5

    def test_unknown_kind_leaves_registry_unchanged(self, registry):
        """An unknown kind fails and does not touch the mapping."""
        with pytest.raises(UnknownKindError) as info:
            registry.initialize("run-a", "no_such_kind")

        assert info.value.code == 2
        assert registry.list() == []
        assert registry.active_name is None

    def test_unknown_kind_keeps_active(self, registry):
        registry.initialize("keep", "euler_1d")
        with pytest.raises(UnknownKindError):
            registry.initialize("other", "not_a_kind")

        assert registry.active_name == "keep"
        assert registry.list() == [("keep", "euler_1d")]

    def test_only_matching_kind_instantiated(self):
        """The scan does not construct non-matching kinds."""
        created = []

        class Probe(ManufacturedSolution):
            name = "probe"

            def __init__(self, precision=Precision.DOUBLE):
                created.append(self.name)
                super().__init__(precision)

        class Target(Probe):
            name = "target"

        registry = Registry(catalog=(Probe, Target))
        registry.initialize("t", "target")

        assert created == ["target"]

    def test_empty_catalog_name_is_fatal(self):
        class Nameless(ManufacturedSolution):
            name = ""

        registry = Registry(catalog=(Nameless,) + tuple(KIND_TABLE))
        with pytest.raises(CatalogIntegrityError) as info:
            registry.initialize("x", "euler_1d")

        assert info.value.position == 0
        assert registry.count() == 0

    def test_extra_aliases(self):
        registry = Registry(aliases={"conduction": "heat_3d_steady_var"})
        registry.initialize("c", "Conduction")

        assert registry.list() == [("c", "heat_3d_steady_var")]


class TestSelect:
    """select() switches the single active instance."""

    def test_select_switches_active(self, registry):
        registry.initialize("a", "euler_1d")
        registry.initialize("b", "heat_1d_steady_const")
        registry.select("a")

        assert registry.active_name == "a"
        assert registry.active_instance().name == "euler_1d"

    def test_select_unknown_lists_names(self, registry, log_messages):
        """Unknown names fail and report the initialized names."""
        registry.initialize("run-a", "heat_1d_steady_const")

        with pytest.raises(UnknownInstanceError) as info:
            registry.select("missing")

        assert "run-a" in str(info.value)
        assert any("run-a" in message for message in log_messages)
        assert registry.active_name == "run-a"

    def test_select_on_empty_registry(self, registry):
        with pytest.raises(UnknownInstanceError):
            registry.select("anything")

    def test_no_active_instance(self, registry):
        with pytest.raises(NoActiveSolutionError) as info:
            registry.active_instance()

        assert info.value.code == 4


class TestListing:
    """list(), count() and print_list() never fail."""

    def test_list_sorted_by_user_name(self, registry):
        registry.initialize("zeta", "euler_1d")
        registry.initialize("alpha", "rans_sa")
        registry.initialize("mid", "masa_test_function")

        assert [name for name, _ in registry.list()] == ["alpha", "mid", "zeta"]

    def test_print_list_marks_active(self, registry, log_messages):
        registry.initialize("one", "euler_1d")
        registry.initialize("two", "euler_2d")
        registry.print_list()

        assert any("* two : euler_2d" in message for message in log_messages)
        assert any("one : euler_1d" in message for message in log_messages)

    def test_print_empty_list(self, registry, log_messages):
        registry.print_list()

        assert any("0 initialized" in message for message in log_messages)

    def test_clear_releases_everything(self, registry):
        registry.initialize("a", "euler_1d")
        registry.clear()

        assert registry.count() == 0
        with pytest.raises(NoActiveSolutionError):
            registry.active_instance()


class TestPrecisionDomains:
    """Instances take the scalar type of their registry."""

    def test_long_double_parameters(self, long_registry):
        solution = long_registry.initialize("ld", "euler_1d")
        solution.init_var()

        assert isinstance(solution.get_var("u_0"), np.longdouble)

    def test_registries_are_independent(self, registry, long_registry):
        registry.initialize("shared", "euler_1d")

        assert long_registry.count() == 0
        assert "shared" not in long_registry

    @pytest.mark.parametrize("kind", [k.name for k in HEAT_KINDS])
    def test_every_heat_kind_initializes(self, registry, kind):
        registry.initialize(kind, kind)

        assert registry.active_instance().name == kind
