"""Configuration management using pydantic-settings"""

import logging
from pathlib import Path

import toml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_ROOT = Path(__file__).parent


class Settings(BaseSettings):
    """Generator settings loaded from environment and config.toml

    Only the generator imports this module; the lookup API never reads it.
    """

    model_config = SettingsConfigDict(
        env_prefix='CURRENCY_FLAGS_',
        case_sensitive=False,
        extra='ignore',
    )

    # Logging settings
    log_prefix: str = Field(default='currency_flags', description='Log prefix for logger names')
    log_level: int = Field(default=logging.INFO, description='Logging level')

    # Generator sources
    countries_url: str = Field(
        default='https://raw.githubusercontent.com/mledoze/countries/master/countries.json',
        description='Countries dataset with cca2 codes and their currencies',
    )
    currencies_url: str = Field(
        default='https://openexchangerates.org/api/currencies.json',
        description='Currency code to English name mapping',
    )
    flag_source_url: str = Field(
        default='https://flagcdn.com/{code}.svg',
        description='Flag SVG URL template, {code} is the lower-case country code',
    )
    timeout: int = Field(default=30, description='Request timeout in seconds')
    max_concurrency: int = Field(default=8, description='Parallel flag downloads')

    # Generator outputs
    output_path: Path = Field(default=PACKAGE_ROOT / 'data' / 'currencies.json', description='Generated dataset file')
    flags_output_dir: Path = Field(default=PACKAGE_ROOT / 'flags', description='Directory receiving flag SVG files')

    @field_validator('output_path', 'flags_output_dir', mode='before')
    @classmethod
    def resolve_package_path(cls, v: str | Path) -> Path:
        """Resolve output paths relative to the package directory"""
        path = Path(v)
        if not path.is_absolute():
            path = PACKAGE_ROOT / path
        return path

    @field_validator('log_level', mode='before')
    @classmethod
    def parse_log_level(cls, v: str | int) -> int:
        """Parse log level from string or int"""
        if isinstance(v, str):
            return getattr(logging, v.upper(), logging.INFO)
        return v

    @classmethod
    def from_toml(cls, config_path: str | Path = 'config.toml') -> 'Settings':
        """Load settings from TOML file"""
        config_path = Path(config_path)
        if config_path.exists():
            config_data = toml.load(config_path)
            return cls(**config_data)
        # If no config file, try to load from environment
        return cls()


# Global settings instance
settings = Settings.from_toml()
