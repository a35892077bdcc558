"""
Tests for kind name aliasing.
"""

import pytest

from masa.solutions.aliases import ALIAS_TABLE, ALIAS_TABLE_VERSION, map_alias, normalize
from masa.solutions.catalog import available_kinds


class TestMapAlias:

    @pytest.mark.parametrize("alias,canonical", [
        ("heateq_1d_steady_const", "heat_1d_steady_const"),
        ("HeatEq-3D-Unsteady-Var", "heat_3d_unsteady_var"),
        ("  sa ", "rans_sa"),
        ("ns 2d", "navierstokes_2d_compressible"),
        ("test", "masa_test_function"),
    ])
    def test_known_aliases(self, alias, canonical):
        assert map_alias(alias) == canonical

    def test_unknown_unchanged(self):
        """Names without an alias come back exactly as given."""
        assert map_alias("Euler_1D") == "Euler_1D"
        assert map_alias("euler_1d") == "euler_1d"

    def test_extra_aliases_take_precedence(self):
        extra = {"SA": "masa_test_function"}
        assert map_alias("sa", extra) == "masa_test_function"

    def test_pure(self):
        before = dict(ALIAS_TABLE)
        map_alias("heateq_2d_steady_var", {"x": "y"})
        assert ALIAS_TABLE == before


class TestAliasTable:

    def test_targets_are_catalog_kinds(self):
        kinds = set(available_kinds())
        for alias, target in ALIAS_TABLE.items():
            assert target in kinds, f"{alias} -> {target}"

    def test_keys_normalized(self):
        assert all(normalize(key) == key for key in ALIAS_TABLE)

    def test_version(self):
        assert isinstance(ALIAS_TABLE_VERSION, str) and ALIAS_TABLE_VERSION
