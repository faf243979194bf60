"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import pytest

from physical.config import (
    ConfigError,
    EnvSettingsLoader,
    HealthCheckSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from physical.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    SerializationError,
)


class TestBaseError:
    def test_defaults(self) -> None:
        err = BaseError("boom")
        assert err.message == "boom"
        assert err.code == "error"
        assert err.detail == {}
        assert err.cause is None
        assert err.to_dict() == {"code": "error", "message": "boom"}

    def test_detail_included_when_present(self) -> None:
        err = BaseError("boom", code="custom", detail={"k": 1})
        assert err.to_dict() == {"code": "custom", "message": "boom", "detail": {"k": 1}}

    def test_detail_is_copied(self) -> None:
        context = {"k": 1}
        err = BaseError("boom", detail=context)
        context["k"] = 2
        assert err.detail == {"k": 1}

    def test_cause_chained(self) -> None:
        cause = TypeError("not serialisable")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "TypeError: not serialisable"


class TestSerializationError:
    def test_hierarchy(self) -> None:
        err = SerializationError("bad payload", payload_type="dict")
        assert isinstance(err, InfrastructureError)
        assert isinstance(err, BaseError)
        assert err.code == "serialization_error"
        assert err.payload_type == "dict"

    def test_payload_type_in_detail(self) -> None:
        err = SerializationError("bad payload", payload_type="CollectedResponse", detail={"path": "/hc"})
        assert err.to_dict()["detail"] == {"path": "/hc", "payload_type": "CollectedResponse"}


class TestConfigErrors:
    def test_config_errors_are_application_errors(self) -> None:
        err = MissingRequiredSettingError("HEALTHCHECK_PATH")
        assert isinstance(err, ConfigError)
        assert isinstance(err, ApplicationError)
        assert err.code == "missing_required_setting"
        assert "HEALTHCHECK_PATH" in err.message
        assert err.detail == {"setting": "HEALTHCHECK_PATH"}

    def test_invalid_health_setting_carries_env_key_and_class(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            HealthCheckSettings(path="healthcheck")
        payload = info.value.to_dict()
        assert payload["code"] == "invalid_setting_value"
        assert payload["detail"] == {
            "setting": "HEALTHCHECK_PATH",
            "settings_class": "HealthCheckSettings",
            "value": "'healthcheck'",
            "reason": "must start with '/'",
        }

    def test_loader_errors_name_settings_class(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader({"HEALTHCHECK_LOG_LEVEL": "chatty"}).load(HealthCheckSettings)
        detail = info.value.detail
        assert detail["setting"] == "HEALTHCHECK_LOG_LEVEL"
        assert detail["settings_class"] == "HealthCheckSettings"
