"""
Tests for the YAML session configuration.
"""

import argparse

import pytest
import yaml

from masa.config import (
    MasaConfig, SolutionSpec, apply_cli_overrides, from_dict, load_yaml, save_yaml,
)


def _cli(**overrides):
    defaults = dict(log_level=None, error_mode=None, n_points=None, rtol=None, seed=None,
                    kind=None, name=None, precision=None, param=None)
    defaults.update(overrides)
    return argparse.Namespace(**defaults)


class TestFromDict:

    def test_empty_gives_defaults(self):
        config = from_dict({})

        assert config.logging.level == "INFO"
        assert config.errors.mode == "raise"
        assert config.verification.n_points == 4
        assert config.solutions == []

    def test_string_numbers_coerced(self):
        config = from_dict({"verification": {"rtol": "1e-7", "n_points": "8"}})

        assert config.verification.rtol == 1e-7
        assert config.verification.n_points == 8

    def test_bool_coerced(self):
        config = from_dict({"logging": {"show_time": "no"}})

        assert config.logging.show_time is False

    def test_unknown_keys_ignored(self):
        config = from_dict({"logging": {"level": "DEBUG", "colour": "always"}})

        assert config.logging.level == "DEBUG"

    def test_solutions(self):
        config = from_dict({"solutions": [
            {"name": "flow", "kind": "euler_2d", "params": {"u_0": "2.5"}},
            {"name": "heat", "kind": "heat_1d_steady_const", "precision": "longdouble"},
        ]})

        flow, heat = config.solutions
        assert isinstance(flow, SolutionSpec)
        assert flow.params == {"u_0": 2.5}
        assert flow.precision == "double"
        assert heat.precision == "long_double"
        assert heat.init_defaults is True

    def test_aliases(self):
        config = from_dict({"aliases": {"channel": "rans_sa"}})

        assert config.aliases == {"channel": "rans_sa"}

    @pytest.mark.parametrize("data", [
        {"errors": {"mode": "abort"}},
        {"solutions": [{"name": "a", "kind": "euler_1d", "precision": "half"}]},
    ])
    def test_invalid_values_rejected(self, data):
        with pytest.raises(ValueError):
            from_dict(data)


class TestPresets:

    def test_strict(self):
        config = from_dict({"preset": "strict"})

        assert config.verification.n_points == 16
        assert config.verification.rtol == 1e-11

    def test_explicit_values_override_preset(self):
        config = from_dict({"preset": "quick", "verification": {"seed": 5}})

        assert config.verification.n_points == 2
        assert config.verification.seed == 5

    def test_unknown_preset_ignored(self):
        assert from_dict({"preset": "bogus"}).verification.n_points == 4


class TestYaml:

    def test_round_trip(self, tmp_path):
        config = from_dict({
            "logging": {"level": "WARNING"},
            "verification": {"n_points": 3},
            "solutions": [{"name": "flow", "kind": "euler_1d", "params": {"L": 2.0}}],
        })
        path = tmp_path / "nested" / "session.yaml"

        save_yaml(config, path)
        loaded = load_yaml(path)

        assert loaded.to_dict() == config.to_dict()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert isinstance(load_yaml(path), MasaConfig)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml(tmp_path / "absent.yaml")

    def test_saved_file_is_plain_yaml(self, tmp_path):
        path = tmp_path / "session.yaml"
        save_yaml(MasaConfig(), path)

        with open(path) as f:
            data = yaml.safe_load(f)
        assert data["errors"] == {"mode": "raise"}


class TestCliOverrides:

    def test_only_given_values_applied(self):
        base = from_dict({"verification": {"n_points": 6, "rtol": 1e-10}})
        config = apply_cli_overrides(base, _cli(rtol=1e-8, log_level="DEBUG"))

        assert config.verification.rtol == 1e-8
        assert config.verification.n_points == 6
        assert config.logging.level == "DEBUG"

    def test_kind_adds_solution(self):
        config = apply_cli_overrides(MasaConfig(), _cli(kind="sa", param=[("nu", 2e-3)]))

        spec, = config.solutions
        assert spec.name == "sa"
        assert spec.kind == "sa"
        assert spec.precision == "double"
        assert spec.params == {"nu": 2e-3}

    def test_error_mode_validated(self):
        with pytest.raises(ValueError):
            apply_cli_overrides(MasaConfig(), _cli(error_mode="ignore"))
