"""Tests for tool argument translation into devspace command lines."""

import pytest

from devspace_mcp.registry.operations import build_registry


@pytest.fixture(scope="module")
def registry():
    return build_registry()


def translate(registry, name, arguments=None):
    """Validate arguments and return the full devspace argv after the program."""
    operation = registry.get(name)
    validated = registry.validate_input(name, arguments)
    return [operation.subcommand, *operation.build_args(validated)]


@pytest.mark.parametrize("name, arguments, expected", [
    # Project operations
    ("devspace_dev", {}, ["dev"]),
    ("devspace_dev",
     {"profile": "staging", "namespace": "team-a", "terminal": True, "sync": False, "portforwarding": True},
     ["dev", "--profile", "staging", "--namespace", "team-a", "--terminal",
      "--sync=false", "--portforwarding"]),
    ("devspace_deploy", {"forceBuild": True, "forceDeploy": True},
     ["deploy", "--force-build", "--force-deploy"]),
    ("devspace_deploy", {"profile": "prod"}, ["deploy", "--profile", "prod"]),
    ("devspace_build", {"images": ["web"], "forceBuild": True},
     ["build", "--image", "web", "--force-build"]),
    ("devspace_build", {"images": ["web", "worker"], "skipPush": True},
     ["build", "--image", "web", "worker", "--skip-push"]),
    ("devspace_build", {"images": []}, ["build"]),
    ("devspace_logs", {"container": "api", "follow": True, "lines": 100},
     ["logs", "--container", "api", "--follow", "--lines", "100"]),
    ("devspace_logs", {"lines": 0}, ["logs", "--lines", "0"]),
    ("devspace_cleanup", {}, ["cleanup"]),
    ("devspace_purge", {}, ["purge"]),
    ("devspace_list", {"resource": "deployments"}, ["list", "deployments"]),
    ("devspace_enter", {"container": "api"}, ["enter", "--container", "api"]),
    ("devspace_enter", {}, ["enter"]),
    ("devspace_sync", {}, ["sync"]),
    ("devspace_open", {}, ["open"]),
    ("devspace_print", {"profile": "dev"}, ["print", "--profile", "dev"]),
    ("devspace_run", {"command": "deploy-db"}, ["run", "deploy-db"]),
    ("devspace_run", {"command": "deploy-db", "args": ["a"]}, ["run", "deploy-db", "--", "a"]),
    ("devspace_run", {"command": "migrate", "args": ["--dry-run", "up"]},
     ["run", "migrate", "--", "--dry-run", "up"]),
    # Global operations
    ("devspace_init", {}, ["init"]),
    ("devspace_init", {"projectName": "shop", "dockerfile": "./Dockerfile"},
     ["init", "--name", "shop", "--dockerfile", "./Dockerfile"]),
    ("devspace_version", {}, ["version"]),
    ("devspace_use", {"type": "namespace", "name": "team-a"}, ["use", "namespace", "team-a"]),
    ("devspace_use", {"type": "context"}, ["use", "context"]),
    ("devspace_reset", {"type": "pods"}, ["reset", "pods"]),
    ("devspace_set", {"type": "var", "key": "FOO", "value": "bar"}, ["set", "var", "FOO=bar"]),
    ("devspace_analyze", {}, ["analyze"]),
    ("devspace_ui", {"port": 8090}, ["ui", "--port", "8090"]),
    ("devspace_ui", {}, ["ui"]),
    ("devspace_add", {"type": "plugin", "source": "https://github.com/loft-sh/devspace-plugin"},
     ["add", "plugin", "https://github.com/loft-sh/devspace-plugin"]),
    ("devspace_remove", {"type": "context", "name": "old"}, ["remove", "context", "old"]),
])
def test_translation(registry, name, arguments, expected):
    assert translate(registry, name, arguments) == expected


def test_working_directory_never_becomes_an_argument(registry):
    assert translate(registry, "devspace_version", {"workingDirectory": "/srv/app"}) == ["version"]


def test_flags_default_off(registry):
    args = translate(registry, "devspace_build", {"images": ["web"]})

    assert "--force-build" not in args
    assert "--skip-push" not in args


def test_explicit_false_flag_omitted(registry):
    assert translate(registry, "devspace_logs", {"follow": False}) == ["logs"]


def test_shell_metacharacters_pass_through(registry):
    args = translate(registry, "devspace_set", {"type": "var", "key": "CMD", "value": "$(whoami); ls"})

    assert args == ["set", "var", "CMD=$(whoami); ls"]


def test_translation_is_deterministic(registry):
    arguments = {"profile": "p", "namespace": "n", "sync": True, "portforwarding": False}

    first = translate(registry, "devspace_dev", arguments)
    second = translate(registry, "devspace_dev", arguments)

    assert first == second


def test_value_with_equals_sign(registry):
    args = translate(registry, "devspace_set", {"type": "var", "key": "URL", "value": "a=b"})

    assert args[-1] == "URL=a=b"
