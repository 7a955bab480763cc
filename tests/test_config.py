"""Unit tests for Config (module_maker.config).

Tests cover:
- Defaults and derived paths
- Relative vs absolute directories
- stub_extension normalisation and validation
- save/load round trip
- from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from module_maker.config import Config

pytestmark = pytest.mark.unit


class TestDefaults:
    def test_default_values(self):
        config = Config()
        assert config.project_root == Path(".")
        assert config.user_template_dir == Path("stubs/module-maker")
        assert config.blueprint_file == Path("module-blueprint.yml")
        assert config.namespace_separator == "\\"
        assert config.stub_extension == ".stub"

    def test_bundled_templates_exist(self):
        config = Config()
        assert config.core_template_path.is_dir()
        assert (config.core_template_path / "crud").is_dir()
        assert (config.core_template_path / "model").is_dir()


class TestDerivedPaths:
    def test_relative_paths_resolve_against_project_root(self, tmp_path: Path):
        config = Config(project_root=tmp_path)
        assert config.user_template_path == tmp_path / "stubs" / "module-maker"
        assert config.blueprint_path == tmp_path / "module-blueprint.yml"

    def test_absolute_paths_are_kept(self, tmp_path: Path):
        stubs = tmp_path / "elsewhere"
        config = Config(project_root=tmp_path / "app", user_template_dir=stubs)
        assert config.user_template_path == stubs


class TestValidation:
    def test_stub_extension_gains_leading_dot(self):
        assert Config(stub_extension="tpl").stub_extension == ".tpl"

    def test_empty_namespace_separator_rejected(self):
        with pytest.raises(ValidationError):
            Config(namespace_separator="")


class TestSerialisation:
    def test_save_and_load(self, tmp_path: Path):
        config = Config(project_root=tmp_path, namespace_separator=".")
        path = config.save()
        assert path == tmp_path / "module-maker.json"

        loaded = Config.load(path)
        assert loaded == config

    def test_save_custom_path(self, tmp_path: Path):
        target = tmp_path / "nested" / "config.json"
        assert Config().save(target) == target
        assert target.exists()


class TestFromEnv:
    def test_defaults_without_env(self):
        with patch.dict(os.environ, {}, clear=True):
            assert Config.from_env() == Config()

    def test_reads_variables(self, tmp_path: Path):
        env = {
            "MODULE_MAKER_PROJECT_ROOT": str(tmp_path),
            "MODULE_MAKER_STUB_DIR": "templates",
            "MODULE_MAKER_BLUEPRINT": "blueprints/modules.yml",
            "MODULE_MAKER_NAMESPACE_SEPARATOR": ".",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.project_root == tmp_path
        assert config.user_template_path == tmp_path / "templates"
        assert config.blueprint_path == tmp_path / "blueprints" / "modules.yml"
        assert config.namespace_separator == "."
