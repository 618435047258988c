# tests/test_cli.py
"""Tests for the smartinit CLI."""

import json
import os
import textwrap

import pytest
import yaml
from typer.testing import CliRunner

from smartinit.cli.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_CONTRACT_VIOLATION,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
)
from smartinit.cli.loader import TargetError, load_class, parse_assignments
from smartinit.cli.main import app
from smartinit.version import VERSION

runner = CliRunner()

SERVICES = textwrap.dedent(
    """
    from smartinit import initialize_with, is_callable


    @is_callable
    @initialize_with("first", last="Lovelace")
    class FullName:
        def call(self):
            return {"full": f"{self.first} {self.last}"}


    @is_callable
    @initialize_with("n")
    class Fails:
        def call(self):
            raise RuntimeError("boom")


    @initialize_with("x")
    class Plain:
        pass


    class Undeclared:
        pass


    NOT_A_CLASS = 1
    """
)


@pytest.fixture
def services_module(tmp_path, monkeypatch, request):
    """Write an importable module of sample classes and return its name."""
    name = f"cli_services_{request.node.name}".replace("[", "_").replace("]", "_")
    (tmp_path / f"{name}.py").write_text(SERVICES)
    monkeypatch.chdir(tmp_path)
    monkeypatch.syspath_prepend(str(tmp_path))
    return name


class TestLoader:
    def test_load_class(self, services_module):
        cls = load_class(f"{services_module}:FullName")
        assert cls.__name__ == "FullName"

    @pytest.mark.parametrize("target", ["no_colon", ":Cls", "mod:"])
    def test_bad_format(self, target):
        with pytest.raises(TargetError, match="module:Class"):
            load_class(target)

    def test_missing_module(self):
        with pytest.raises(TargetError, match="Could not import"):
            load_class("surely_not_a_module_xyz:Cls")

    def test_missing_attribute(self, services_module):
        with pytest.raises(TargetError, match="not found"):
            load_class(f"{services_module}:Nope")

    def test_not_a_class(self, services_module):
        with pytest.raises(TargetError, match="not a class"):
            load_class(f"{services_module}:NOT_A_CLASS")

    def test_parse_assignments(self):
        assert parse_assignments(["a=1", "b=x=y", "c="]) == {"a": "1", "b": "x=y", "c": ""}

    def test_parse_assignments_errors(self):
        with pytest.raises(TargetError):
            parse_assignments(["novalue"])
        with pytest.raises(TargetError, match="more than once"):
            parse_assignments(["a=1", "a=2"])


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == EXIT_SUCCESS
        assert VERSION in result.output


class TestDescribe:
    def test_text(self, services_module):
        result = runner.invoke(app, ["describe", f"{services_module}:FullName"])
        assert result.exit_code == EXIT_SUCCESS
        assert "first  (required)" in result.output
        assert "last  = 'Lovelace'" in result.output
        assert "call -> call()" in result.output

    def test_json(self, services_module):
        result = runner.invoke(app, ["describe", f"{services_module}:Plain", "-o", "json"])
        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(result.output)
        assert data["class"] == f"{services_module}.Plain"
        assert data["callable"] is False
        assert data["attributes"] == [{"name": "x", "required": True}]

    def test_yaml(self, services_module):
        result = runner.invoke(app, ["describe", f"{services_module}:FullName", "-o", "yaml"])
        assert result.exit_code == EXIT_SUCCESS
        data = yaml.safe_load(result.output)
        assert data["primary_operation"] == "call"

    def test_undeclared(self, services_module):
        result = runner.invoke(app, ["describe", f"{services_module}:Undeclared"])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "no declared attributes" in result.output

    def test_bad_target(self):
        result = runner.invoke(app, ["describe", "nocolon"])
        assert result.exit_code == EXIT_CONFIG_ERROR


class TestCall:
    def test_call_json(self, services_module):
        result = runner.invoke(
            app, ["call", f"{services_module}:FullName", "-a", "first=Ada", "-o", "json"]
        )
        assert result.exit_code == EXIT_SUCCESS
        assert json.loads(result.output) == {"full": "Ada Lovelace"}

    def test_call_text(self, services_module):
        result = runner.invoke(
            app,
            ["call", f"{services_module}:FullName", "-a", "first=Grace", "-a", "last=Hopper"],
        )
        assert result.exit_code == EXIT_SUCCESS
        assert "Grace Hopper" in result.output

    def test_missing_attribute(self, services_module):
        result = runner.invoke(app, ["call", f"{services_module}:FullName"])
        assert result.exit_code == EXIT_CONTRACT_VIOLATION
        assert "missing required attribute 'first'" in result.output

    def test_unknown_attribute(self, services_module):
        result = runner.invoke(
            app, ["call", f"{services_module}:FullName", "-a", "first=A", "-a", "middle=B"]
        )
        assert result.exit_code == EXIT_CONTRACT_VIOLATION
        assert "unknown attribute 'middle'" in result.output

    def test_not_callable(self, services_module):
        result = runner.invoke(app, ["call", f"{services_module}:Plain", "-a", "x=1"])
        assert result.exit_code == EXIT_CONTRACT_VIOLATION

    def test_operation_raises(self, services_module):
        result = runner.invoke(app, ["call", f"{services_module}:Fails", "-a", "n=1"])
        assert result.exit_code == EXIT_RUNTIME_ERROR
        assert "RuntimeError: boom" in result.output

    def test_verbose_leaves_environment_alone(self, services_module):
        result = runner.invoke(
            app, ["call", f"{services_module}:FullName", "-a", "first=Ada", "-v"]
        )
        assert result.exit_code == EXIT_SUCCESS
        assert "SMARTINIT_VERBOSE" not in os.environ

    def test_verbose_failure_leaves_environment_alone(self, services_module):
        result = runner.invoke(app, ["call", f"{services_module}:Fails", "-a", "n=1", "-v"])
        assert result.exit_code == EXIT_RUNTIME_ERROR
        assert "SMARTINIT_VERBOSE" not in os.environ

    def test_call_yaml(self, services_module):
        result = runner.invoke(
            app, ["call", f"{services_module}:FullName", "-a", "first=Ada", "-o", "yaml"]
        )
        assert result.exit_code == EXIT_SUCCESS
        assert yaml.safe_load(result.output) == {"full": "Ada Lovelace"}

    def test_bad_assignment(self, services_module):
        result = runner.invoke(app, ["call", f"{services_module}:FullName", "-a", "first"])
        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_bad_config_file(self, services_module, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("log_level: [x]\n")
        result = runner.invoke(
            app,
            ["call", f"{services_module}:FullName", "-a", "first=A", "--config", str(path)],
        )
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Config error" in result.output

    def test_missing_config_file(self, services_module):
        result = runner.invoke(
            app,
            ["call", f"{services_module}:FullName", "-a", "first=A", "--config", "nope.yml"],
        )
        assert result.exit_code == EXIT_CONFIG_ERROR
