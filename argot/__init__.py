#!/usr/bin/env python3
"""
Argot : Declarative, typed, command line argument parsing.

Describe commands as schemas, register them, and parse lines into typed results.
"""
# ruff: noqa: F401
# Imports:
from __future__ import annotations

from ._interface import __version__
from .control.config import load_config, setup_logging
from .control.main import CommandLine, Invocation
from .control.registry import SchemaRegistry
