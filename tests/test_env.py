import argparse

import pytest

from kudoctl.env import Settings, add_flags, default_kudo_home, load_settings

HOME = "/home/someone"


@pytest.mark.parametrize(
    "args, envars, home, kconfig",
    [
        ([], {}, None, HOME + "/.kube/config"),
        (["--home", "/foo", "--kubeconfig", "/bar"], {}, "/foo", "/bar"),
        ([], {"KUDO_HOME": "/bar", "KUBECONFIG": "/foo"}, "/bar", "/foo"),
        (
            ["--home", "/foo", "--kubeconfig", "/bar"],
            {"KUDO_HOME": "/bar", "KUBECONFIG": "/foo"},
            "/foo",
            "/bar",
        ),
    ],
    ids=["defaults", "with flags set", "with ENV set", "with flags and ENV set"],
)
def test_env_settings(args, envars, home, kconfig):
    environ = {"HOME": HOME, **envars}
    settings = load_settings(args, environ)
    expected_home = default_kudo_home() if home is None else home
    assert settings.home == expected_home
    assert settings.kube_config == kconfig


def test_default_namespace():
    assert load_settings([], {}).namespace == "default"


def test_namespace_short_flag():
    assert load_settings(["-n", "services"], {}).namespace == "services"


def test_default_kudo_home_ends_with_dot_kudo():
    assert default_kudo_home().endswith(".kudo")


def test_empty_env_value_still_used():
    settings = load_settings([], {"KUDO_HOME": ""})
    assert settings.home == ""


def test_add_flags_leaves_unset_flags_as_none():
    parser = add_flags(argparse.ArgumentParser())
    parsed = parser.parse_args([])
    assert parsed.home is None
    assert parsed.kubeconfig is None
    assert parsed.namespace == "default"


def test_settings_defaults():
    assert Settings() == Settings(kube_config="", home="", namespace="default")