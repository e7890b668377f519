import pytest
from pydantic import ValidationError
from openforecast.core.domain.settings import SystemSettings
from openforecast.adapters.config.settings_loader import load_settings

def test_system_settings_defaults():
    settings = SystemSettings()
    assert settings.default_alpha == 0.05
    assert settings.default_steps == 12
    assert settings.plot_output_dir == "plots"
    assert settings.log_level == "INFO"

def test_system_settings_rejects_bad_alpha():
    with pytest.raises(ValidationError):
        SystemSettings(default_alpha=1.0)
    with pytest.raises(ValidationError):
        SystemSettings(default_steps=0)

def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("OF_DEFAULT_ALPHA", "0.1")
    monkeypatch.setenv("OF_LOG_LEVEL", "DEBUG")
    
    settings = load_settings(path="non_existent.yaml")
    
    assert settings.default_alpha == 0.1
    assert settings.log_level == "DEBUG"

def test_load_settings_from_file(tmp_path):
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text("""
default_steps: 24
plot_output_dir: "out/charts"
    """)
    
    settings = load_settings(path=str(config_file))
    
    assert settings.default_steps == 24
    assert settings.plot_output_dir == "out/charts"
    # Defaults preserved
    assert settings.default_alpha == 0.05

def test_load_settings_env_overrides_file(tmp_path, monkeypatch):
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text("default_steps: 24")
    
    monkeypatch.setenv("OF_DEFAULT_STEPS", "6")
    
    settings = load_settings(path=str(config_file))
    
    # Env var should hold precedence
    assert settings.default_steps == 6

def test_load_settings_uses_config_file_env(tmp_path, monkeypatch):
    config_file = tmp_path / "other.yaml"
    config_file.write_text("default_alpha: 0.2")
    monkeypatch.setenv("OF_CONFIG_FILE", str(config_file))
    
    assert load_settings().default_alpha == 0.2

def test_load_settings_corrupt_file(tmp_path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("default_steps: [unclosed")
    
    with pytest.raises(RuntimeError, match="Failed to load configuration"):
        load_settings(path=str(config_file))
