"""Tests for policy configuration loading and the policy registry."""

from pathlib import Path

import pytest

from shufflepolicy.core.config import LogConfig, PolicyConfig
from shufflepolicy.core.errors import (
    NOOP_POLICY,
    POLICIES,
    FetchPolicy,
    PushPolicy,
    get_policy,
    policies_from_config,
)
from shufflepolicy.core.exceptions import (
    PolicyConfigError,
    ShufflePolicyError,
    UnknownPolicyError,
)


class TestPolicyConfig:
    def test_defaults(self) -> None:
        config = PolicyConfig()
        assert config.push == "push"
        assert config.fetch == "fetch"
        assert config.logging.level == "INFO"
        assert config.logging.format == "console"

    def test_from_yaml_string(self) -> None:
        config = PolicyConfig.from_yaml_string(
            "push: noop\nfetch: fetch\nlogging:\n  level: DEBUG\n  format: json\n"
        )
        assert config.push == "noop"
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"

    def test_empty_document_uses_defaults(self) -> None:
        assert PolicyConfig.from_yaml_string("") == PolicyConfig()

    def test_from_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "policy.yaml"
        path.write_text("fetch: noop\n")
        assert PolicyConfig.from_yaml(path).fetch == "noop"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(PolicyConfigError, match="Cannot read config"):
            PolicyConfig.from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(PolicyConfigError, match="Invalid YAML"):
            PolicyConfig.from_yaml_string("push: [unclosed\n")

    def test_non_mapping(self) -> None:
        with pytest.raises(PolicyConfigError, match="mapping"):
            PolicyConfig.from_yaml_string("- push\n- fetch\n")

    def test_wrong_policy_for_direction(self) -> None:
        with pytest.raises(PolicyConfigError):
            PolicyConfig.from_yaml_string("push: fetch\n")

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PolicyConfigError):
            PolicyConfig.from_yaml_string("retry_forever: true\n")

    def test_errors_share_base_class(self) -> None:
        assert issubclass(PolicyConfigError, ShufflePolicyError)
        assert issubclass(UnknownPolicyError, PolicyConfigError)


class TestLogConfig:
    def test_both_requires_file_path(self) -> None:
        with pytest.raises(ValueError, match="file_path is required"):
            LogConfig(format="both")

    def test_both_with_file_path(self, tmp_path: Path) -> None:
        config = LogConfig(format="both", file_path=tmp_path / "policy.log")
        assert config.file_path == tmp_path / "policy.log"

    def test_rotation_bounds(self) -> None:
        with pytest.raises(ValueError):
            LogConfig(max_file_size_mb=0)


class TestRegistry:
    def test_registered_names(self) -> None:
        assert set(POLICIES) == {"noop", "push", "fetch"}

    def test_get_policy_returns_shared_instances(self) -> None:
        assert get_policy("noop") is NOOP_POLICY
        assert isinstance(get_policy("push"), PushPolicy)
        assert get_policy("push") is get_policy("push")
        assert isinstance(get_policy("fetch"), FetchPolicy)

    def test_unknown_policy(self) -> None:
        with pytest.raises(UnknownPolicyError) as exc_info:
            get_policy("aggressive")
        assert exc_info.value.name == "aggressive"
        assert "push" in str(exc_info.value)

    def test_policies_from_config(self) -> None:
        policies = policies_from_config(PolicyConfig.from_yaml_string("push: noop\n"))
        assert policies.push is NOOP_POLICY
        assert isinstance(policies.fetch, FetchPolicy)
