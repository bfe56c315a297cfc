"""Tests for module identifier conversions."""

from pathlib import PurePosixPath

import pytest

from deps_analyzer.naming import (
    dot_to_module,
    module_to_dot,
    module_to_path,
    normalize_module,
    to_kebab_case,
)


def test_kebab_case():
    assert to_kebab_case("accountDomain") == "account-domain"
    assert to_kebab_case("core") == "core"
    assert to_kebab_case("AccountDomain") == "account-domain"
    assert to_kebab_case("httpAPIClient") == "http-a-p-i-client"


def test_kebab_case_ignores_non_ascii_capitals():
    assert to_kebab_case("caféÉclair") == "cafééclair"


def test_module_to_path():
    assert module_to_path(":account:accountDomain") == PurePosixPath("account/account-domain")
    assert module_to_path(":app") == PurePosixPath("app")
    assert module_to_path("core:coreModel") == PurePosixPath("core/core-model")


def test_dot_to_module():
    assert dot_to_module("projects.account.accountDomain") == ":account:account-domain"
    assert dot_to_module("projects.app") == ":app"


@pytest.mark.parametrize("module", [
    ":app",
    ":account:account-domain",
    ":core:core-model:model-api",
])
def test_round_trip(module):
    token = module_to_dot(module)
    assert token.startswith("projects.")
    result = dot_to_module(token)
    assert result.startswith(":")
    assert result == module


def test_module_to_dot():
    assert module_to_dot(":account:account-domain") == "projects.account.accountDomain"


def test_normalize_module():
    assert normalize_module("app") == ":app"
    assert normalize_module(" :account:account-domain ") == ":account:account-domain"
    with pytest.raises(ValueError):
        normalize_module("")
    with pytest.raises(ValueError):
        normalize_module(":")
