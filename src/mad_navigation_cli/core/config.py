import logging
from pathlib import Path

from pydantic import ValidationError

from mad_navigation_cli.exceptions import ConfigError
from mad_navigation_cli.models import AddRouteConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "mad_navigation.json"


def parse_config(raw: str | bytes, source: str = "<config>") -> AddRouteConfig:
    try:
        return AddRouteConfig.model_validate_json(raw)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'config'}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigError(f"Invalid config {source}: {problems}") from exc


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> AddRouteConfig:
    """Read and validate the JSON config at ``path`` (relative to the working directory)."""
    config_path = Path(path)
    try:
        raw = config_path.read_bytes()
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}") from None
    except OSError as exc:
        raise ConfigError(f"Can't read config file {config_path}: {exc}") from exc

    config = parse_config(raw, str(config_path))
    logger.debug("Loaded config from %s", config_path)
    return config
