"""
ConfigLoader module for loading and validating client configuration files
"""

import os
import tomllib
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Any

import yaml


class ConfigurationError(Exception):
    """Raised when configuration is invalid or incomplete"""
    pass


class EnvironmentError(Exception):
    """Raised when required environment variables are missing"""
    pass


ENVIRONMENT_URLS = {
    'sandbox': 'https://sandbox.api.starkbank.com/v2/',
    'production': 'https://api.starkbank.com/v2/',
}


@dataclass
class ClientConfig:
    """Configuration data class for the API client"""
    environment: str
    authentication: Dict[str, Any]
    base_url: str = ''
    retries: Dict[str, Any] = field(default_factory=dict)
    rate_limits: Dict[str, Any] = field(default_factory=dict)
    http: Dict[str, Any] = field(default_factory=dict)
    logging: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.base_url:
            self.base_url = ENVIRONMENT_URLS.get(self.environment, '')


class ConfigLoader:
    """Loads and validates TOML or YAML configuration files"""

    # Required configuration sections and their mandatory keys
    REQUIRED_SECTIONS = {
        'api': ['environment'],
        'authentication': ['type'],
    }

    # Optional sections that can have default empty values
    OPTIONAL_SECTIONS = [
        'retries',
        'rate_limits',
        'http',
        'logging'
    ]

    @staticmethod
    def load_config(config_path: Path) -> ClientConfig:
        """
        Load client configuration from a TOML or YAML file, chosen by suffix

        Args:
            config_path: Path to the configuration file

        Returns:
            ClientConfig object with all configuration data

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If required configuration is missing or the file cannot be parsed
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        if config_path.suffix.lower() == '.toml':
            config_data = ConfigLoader._read_toml(config_path)
        else:
            config_data = ConfigLoader._read_yaml(config_path)

        return ConfigLoader.parse_config(config_data)

    @staticmethod
    def parse_config(config_data: Dict[str, Any]) -> ClientConfig:
        """
        Validate parsed configuration data and build a ClientConfig

        Raises:
            ConfigurationError: If required configuration is missing or invalid
        """
        ConfigLoader._validate_required_sections(config_data)

        environment = config_data['api']['environment']
        base_url = config_data['api'].get('base_url', '')
        if environment not in ENVIRONMENT_URLS and not base_url:
            raise ConfigurationError(
                f"Unknown environment '{environment}' and no base_url given. "
                f"Expected one of: {', '.join(ENVIRONMENT_URLS)}"
            )

        return ClientConfig(
            environment=environment,
            base_url=base_url,
            authentication=config_data['authentication'],
            retries=config_data.get('retries', {}),
            rate_limits=config_data.get('rate_limits', {}),
            http=config_data.get('http', {}),
            logging=config_data.get('logging', {})
        )

    @staticmethod
    def _read_toml(config_path: Path) -> Dict[str, Any]:
        try:
            with open(config_path, 'rb') as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML syntax in {config_path}: {e}")

    @staticmethod
    def _read_yaml(config_path: Path) -> Dict[str, Any]:
        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}")
        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Configuration root must be a mapping: {config_path}")
        return config_data

    @staticmethod
    def _validate_required_sections(config_data: Dict[str, Any]) -> None:
        """
        Validate that all required configuration sections and keys are present

        Args:
            config_data: Parsed configuration data

        Raises:
            ConfigurationError: If any required section or key is missing
        """
        missing_items = []

        for section_name, required_keys in ConfigLoader.REQUIRED_SECTIONS.items():
            if section_name not in config_data:
                missing_items.append(f"Section [{section_name}]")
            else:
                section_data = config_data[section_name]
                for key in required_keys:
                    if key not in section_data:
                        missing_items.append(f"Key '{key}' in section [{section_name}]")

        if missing_items:
            raise ConfigurationError(
                f"Missing required configuration items: {', '.join(missing_items)}"
            )

    @staticmethod
    def validate_environment_variables(config: ClientConfig) -> bool:
        """
        Validate that all environment variables referenced by the authentication section are set

        Raises:
            EnvironmentError: If any required environment variables are missing
        """
        missing_vars = []

        for key, value in config.authentication.items():
            if key.endswith('_env') and isinstance(value, str):
                if not os.getenv(value):
                    missing_vars.append(value)

        if missing_vars:
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )

        return True

    @staticmethod
    def resolve_credentials(config: ClientConfig) -> Dict[str, Any]:
        """
        Replace '<name>_env' references in the authentication section with their values

        Returns:
            Credentials dictionary, e.g. {'type': 'access_token', 'token': '...'}

        Raises:
            EnvironmentError: If a referenced environment variable is not set
        """
        credentials = {}
        for key, value in config.authentication.items():
            if key.endswith('_env') and isinstance(value, str):
                credentials[key[:-len('_env')]] = ConfigLoader.get_environment_value(value)
            else:
                credentials[key] = value
        return credentials

    @staticmethod
    def get_environment_value(env_var_name: str) -> str:
        """
        Get environment variable value with proper error handling

        Raises:
            EnvironmentError: If environment variable is not set
        """
        value = os.getenv(env_var_name)
        if value is None:
            raise EnvironmentError(f"Environment variable '{env_var_name}' is not set")
        return value
