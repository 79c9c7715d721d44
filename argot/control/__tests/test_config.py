#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import argot.errors as AErr
from argot.constants import LOGGER_ROOT
from argot.parsers import ArgBinder
from argot.control.config import (default_config, find_config, load_config,
                                  setup_logging)

# ##-- end 1st party imports

logging = logmod.root

class TestLoadConfig:

    def test_defaults(self):
        config = load_config()
        assert(isinstance(config, TomlGuard))
        assert(config.settings.flag_prefix == "--")
        assert(config.settings.tokenizer == "whitespace")
        assert(config.settings.int_bits == 64)

    def test_default_config(self):
        assert(default_config().logging.level == "WARNING")

    def test_merge(self, tmp_path):
        target = tmp_path / "argot.toml"
        target.write_text('[settings]\ntokenizer = "quoted"\n')
        config = load_config(target)
        assert(config.settings.tokenizer == "quoted")
        assert(config.logging.level == "WARNING")

    def test_merge_keeps_setting_defaults(self, tmp_path):
        target = tmp_path / "argot.toml"
        target.write_text('[settings]\ntokenizer = "quoted"\n')
        binder = ArgBinder(load_config(target))
        assert(binder.flag_prefix == "--")
        assert(binder.allow_assign is True)

    def test_merge_order(self, tmp_path):
        first  = tmp_path / "first.toml"
        second = tmp_path / "second.toml"
        first.write_text('[settings]\nint_bits = 32\n')
        second.write_text('[settings]\nint_bits = 16\n')
        assert(load_config(first, second).settings.int_bits == 16)

    def test_pyproject(self, tmp_path):
        target = tmp_path / "pyproject.toml"
        target.write_text('[project]\nname = "blah"\n\n[tool.argot.settings]\nallow_assign = false\n')
        config = load_config(target)
        assert(config.settings.allow_assign is False)
        assert("project" not in config)

    def test_pyproject_without_table(self, tmp_path):
        target = tmp_path / "pyproject.toml"
        target.write_text('[project]\nname = "blah"\n')
        with pytest.raises(AErr.MissingConfigError):
            load_config(target)

    def test_missing(self, tmp_path):
        with pytest.raises(AErr.MissingConfigError):
            load_config(tmp_path / "blah.toml")

    def test_invalid(self, tmp_path):
        target = tmp_path / "argot.toml"
        target.write_text("[settings\n")
        with pytest.raises(AErr.InvalidConfigError):
            load_config(target)

class TestFindConfig:

    def test_none_found(self, tmp_path):
        assert(find_config(tmp_path).settings.tokenizer == "whitespace")

    def test_argot_toml(self, tmp_path):
        (tmp_path / "argot.toml").write_text('[settings]\ntokenizer = "quoted"\n')
        assert(find_config(tmp_path).settings.tokenizer == "quoted")

    def test_pyproject_without_table(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "blah"\n')
        assert(find_config(tmp_path).settings.tokenizer == "whitespace")

class TestSetupLogging:

    @pytest.fixture(scope="function")
    def restore(self):
        logger    = logmod.getLogger(LOGGER_ROOT)
        level     = logger.level
        propagate = logger.propagate
        handlers  = logger.handlers[:]
        yield logger
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        for handler in handlers:
            logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = propagate

    def test_defaults(self, restore):
        logger = setup_logging(load_config())
        assert(logger is restore)
        assert(logger.level == logmod.WARNING)
        assert(not logger.propagate)

    def test_configured(self, restore, tmp_path):
        target = tmp_path / "argot.toml"
        target.write_text('[logging]\nlevel = "DEBUG"\ntarget = "pass"\n')
        logger = setup_logging(load_config(target))
        assert(logger.level == logmod.DEBUG)
        assert(isinstance(logger.handlers[0], logmod.NullHandler))

    def test_no_logging_table(self, restore):
        logger = setup_logging(TomlGuard({}))
        assert(logger.level == logmod.WARNING)
