"""Configuration management"""
import os
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import load_dotenv

from bddgen.generator.script_generator import DEFAULT_TARGET, get_target
from bddgen.utils.errors import ConfigurationError
from bddgen.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULTS: Dict[str, Any] = {
    'paths': {
        'base_dir': None,
        'features': 'features',
        'output': 'tests',
    },
    'generator': {
        'target': DEFAULT_TARGET,
        'feature_extension': '.feature',
    },
    'logging': {
        'level': 'INFO',
    },
}


@dataclass(frozen=True)
class GeneratorConfig:
    """Resolved settings handed to the generation executor"""
    base_dir: Path
    features_dir: Path
    output_dir: Path
    feature_extension: str = '.feature'
    target: str = DEFAULT_TARGET
    log_level: str = 'INFO'

    @classmethod
    def from_base_dir(cls, base_dir, **kwargs) -> 'GeneratorConfig':
        """Default layout: features/ and tests/ under base_dir"""
        base = Path(base_dir)
        return cls(base_dir=base, features_dir=base / 'features', output_dir=base / 'tests', **kwargs)


class ConfigManager:
    """Manages configuration loading and merging"""

    def __init__(self, config_path: str, environment: str):
        self.config_path = Path(config_path)
        self.environment = environment
        self.config = {}

    def load_config(self) -> Dict[str, Any]:
        """Load and merge configuration files"""
        load_dotenv()

        self.config = self._merge_configs(DEFAULTS, {})

        # Load main config
        if self.config_path.exists():
            self.config = self._merge_configs(self.config, self._read_yaml(self.config_path))
        else:
            logger.debug(f"Config file not found, using defaults: {self.config_path}")

        # Load environment specific config
        env_config_path = self.config_path.parent / 'environments' / f'{self.environment}.yaml'
        if env_config_path.exists():
            env_config = self._read_yaml(env_config_path)

            # Handle overrides section specially
            if 'overrides' in env_config:
                overrides = env_config.pop('overrides')
                self._apply_overrides(self.config, overrides)

            self.config = self._merge_configs(self.config, env_config)
        else:
            logger.warning(f"Environment config not found: {env_config_path}")

        # Process environment variables
        self.config = self._process_env_vars(self.config)

        logger.debug(f"Configuration loaded for environment: {self.environment}")
        return self.config

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a mapping at the top of {path}")
        return data

    def _merge_configs(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dictionaries"""
        result = {k: (self._merge_configs(v, {}) if isinstance(v, dict) else v) for k, v in base.items()}

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_overrides(self, base: Dict, overrides: Dict) -> None:
        """Apply overrides from environment config to base config"""
        for section, values in overrides.items():
            if section in base and isinstance(base[section], dict) and isinstance(values, dict):
                base[section].update(values)
            else:
                base[section] = values

    def _process_env_vars(self, config: Any) -> Any:
        """Replace ${VAR} with environment variables"""
        if isinstance(config, dict):
            return {k: self._process_env_vars(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._process_env_vars(item) for item in config]
        elif isinstance(config, str) and config.startswith('${') and config.endswith('}'):
            var_name = config[2:-1]
            return os.environ.get(var_name, config)
        else:
            return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation)"""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def to_generator_config(self, base_dir, target: Optional[str] = None) -> GeneratorConfig:
        """Resolve the loaded settings against base_dir"""
        configured_base = self.get('paths.base_dir')
        base = Path(configured_base) if configured_base else Path(base_dir)

        target_name = target or self.get('generator.target', DEFAULT_TARGET)
        get_target(target_name)

        extension = self.get('generator.feature_extension', '.feature')
        if not isinstance(extension, str) or not extension:
            raise ConfigurationError("generator.feature_extension must be a non-empty string")

        return GeneratorConfig(
            base_dir=base,
            features_dir=base / self.get('paths.features', 'features'),
            output_dir=base / self.get('paths.output', 'tests'),
            feature_extension=extension,
            target=target_name,
            log_level=str(self.get('logging.level', 'INFO')),
        )
