import importlib.util
import logging
from pathlib import Path

SRC = Path(__file__).resolve().parents[2] / "src" / "groomer"


def _load_module_from_path(module_name: str, path: Path):
    """Load a module from a file path under a custom name so env overrides apply."""

    spec = importlib.util.spec_from_file_location(module_name, str(path))
    assert spec and spec.loader
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)  # type: ignore[attr-defined]
    return mod


def test_config_env_overrides_are_applied(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "debug")
    monkeypatch.setenv("LLM_API_KEY", "")
    monkeypatch.setenv("MISTRAL_API_KEY", "9GF-from-env")
    monkeypatch.setenv("LLM_TIMEOUT_S", "0")
    monkeypatch.setenv("ANALYSIS_REPAIR_ENABLED", "0")

    cfg = _load_module_from_path("groomer_real_config", SRC / "config.py")

    assert cfg.LOGGING_LEVEL == "DEBUG"
    assert cfg.DEFAULT_LLM_API_KEY == "9GF-from-env"
    assert cfg.PROVIDER_API_KEYS["mistral"] == "9GF-from-env"
    assert cfg.LLM_TIMEOUT_S is None
    assert cfg.ANALYSIS_REPAIR_ENABLED is False
    assert cfg.LLM_TEMPERATURE == 0.0


def test_config_timeout_default(monkeypatch):
    monkeypatch.delenv("LLM_TIMEOUT_S", raising=False)
    cfg = _load_module_from_path("groomer_real_config_timeout", SRC / "config.py")
    assert cfg.LLM_TIMEOUT_S == 60.0


def test_logger_helpers():
    from groomer import logger as logger_mod

    assert logger_mod.get_logger() is logger_mod.logger
    logger_mod.set_logging_level("warning")
    assert logger_mod.logger.level == logging.WARNING
    logger_mod.set_logging_level("loud")
    assert logger_mod.logger.level == logging.WARNING
    logger_mod.set_logging_level("info")


def test_mask_credential():
    from groomer.logger import mask_credential

    assert mask_credential(None) == "<unset>"
    assert mask_credential("short") == "****"
    assert mask_credential("sk-abcdefghijkl1234") == "sk-a…1234"
