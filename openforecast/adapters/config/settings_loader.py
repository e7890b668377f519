import os
import yaml
from openforecast.core.domain.settings import SystemSettings

# Environment variable -> settings field
ENV_OVERRIDES = {
    "OF_DEFAULT_ALPHA": "default_alpha",
    "OF_DEFAULT_STEPS": "default_steps",
    "OF_PLOT_OUTPUT_DIR": "plot_output_dir",
    "OF_LOG_LEVEL": "log_level",
}

def load_settings(path: str | None = None) -> SystemSettings:
    """
    Load system settings from a YAML file.
    Environment variables take precedence over the file, which takes precedence over defaults.
    
    Args:
        path: Path to config.yaml. Defaults to OF_CONFIG_FILE env var or "config.yaml".
    """
    if path is None:
        path = os.getenv("OF_CONFIG_FILE", "config.yaml")

    config_data = {}
    
    if os.path.exists(path):
        try:
            with open(path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise RuntimeError(f"Failed to load configuration from {path}: {e}") from e
        if not isinstance(config_data, dict):
            raise RuntimeError(f"Configuration in {path} must be a mapping")

    for env_name, field_name in ENV_OVERRIDES.items():
        if os.getenv(env_name):
            config_data[field_name] = os.getenv(env_name)

    return SystemSettings(**config_data)
