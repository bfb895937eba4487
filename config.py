"""Configuration management for Spendlog.

Reads configuration from ~/.config/spendlog.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w

# Accepted values for the [dashboard] comparison settings
_WINDOW_MODES = ("calendar", "fixed")


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    storage_key: str = "spendlog_expenses"
    enable_reset: bool = False
    top_categories: int = 5
    recent_limit: int = 10
    previous_period: str = "calendar"  # 'calendar' or 'fixed' (7/30/365 days)
    daily_average: str = "calendar"  # 'calendar' or 'fixed' (7/30/365 days)

    @property
    def db_path(self) -> Path:
        """Get the full database path (data_dir/filename)."""
        return self.db_data_dir / self.db_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "spendlog"
        return cls(
            base_dir=base_dir,
            db_data_dir=base_dir / "db",
            db_filename="spendlog.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "spendlog.toml"


def get_migrations_dir() -> Path:
    """Get the path to the migrations directory.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "migrations"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.

    Raises:
        ValueError: If a dashboard mode setting has an unsupported value.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return parse_config(data)


def parse_config(data: dict) -> Config:
    """Build a Config from parsed TOML data, filling in defaults.

    Args:
        data: Dictionary as returned by tomllib.

    Returns:
        Config object.

    Raises:
        ValueError: If a dashboard mode setting has an unsupported value.
    """
    defaults = Config.default()

    base_dir = Path(data.get("base_dir", defaults.base_dir))
    enable_reset = data.get("enable_reset", defaults.enable_reset)

    db_config = data.get("database", {})
    db_data_dir = Path(db_config.get("data_dir", base_dir / "db"))
    db_filename = db_config.get("filename", defaults.db_filename)

    log_config = data.get("logging", {})
    log_level = log_config.get("level", defaults.log_level)
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    storage_config = data.get("storage", {})
    storage_key = storage_config.get("key", defaults.storage_key)

    dashboard_config = data.get("dashboard", {})
    top_categories = int(
        dashboard_config.get("top_categories", defaults.top_categories)
    )
    recent_limit = int(dashboard_config.get("recent_limit", defaults.recent_limit))
    previous_period = dashboard_config.get("previous_period", defaults.previous_period)
    daily_average = dashboard_config.get("daily_average", defaults.daily_average)

    for name, value in (
        ("previous_period", previous_period),
        ("daily_average", daily_average),
    ):
        if value not in _WINDOW_MODES:
            raise ValueError(
                f"Invalid dashboard.{name} '{value}', expected one of {_WINDOW_MODES}"
            )

    return Config(
        base_dir=base_dir,
        db_data_dir=db_data_dir,
        db_filename=db_filename,
        log_level=log_level,
        log_dir=log_dir,
        storage_key=storage_key,
        enable_reset=enable_reset,
        top_categories=top_categories,
        recent_limit=recent_limit,
        previous_period=previous_period,
        daily_average=daily_average,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()

    # Ensure config directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "enable_reset": config.enable_reset,
        "database": {
            "data_dir": str(config.db_data_dir),
            "filename": config.db_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "storage": {
            "key": config.storage_key,
        },
        "dashboard": {
            "top_categories": config.top_categories,
            "recent_limit": config.recent_limit,
            "previous_period": config.previous_period,
            "daily_average": config.daily_average,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
