"""Configuration commands for the campaign scenes CLI."""

from cyclopts import App

from campaign_scenes.config import DEFAULTS, get_config

config_app = App(
    name="config",
    help="Manage configuration. Keys: backend (storage backend, 'yaml'), campaign.path (campaign YAML file)",
)


def _scope(global_: bool) -> str:
    return "global" if global_ else "local"


@config_app.command
def set(key: str, value: str, global_: bool = False) -> None:
    """Set a configuration setting.

    Args:
        key: Configuration key: backend or campaign.path
        value: Configuration value
        global_: Write to the global config instead of the local one.
    """
    get_config(use_global=global_).set(key, value)
    print(f"Set {key} = {value} ({_scope(global_)})")
    if key not in DEFAULTS:
        print(f"Note: {key} is not read by campaign-scenes (known keys: {', '.join(DEFAULTS)})")


@config_app.command
def unset(key: str, global_: bool = False) -> None:
    """Unset a configuration setting."""
    get_config(use_global=global_).unset(key)
    print(f"Unset {key} ({_scope(global_)})")


@config_app.command
def get(key: str, global_: bool = False) -> None:
    """Get the effective value of a configuration setting."""
    value = get_config(use_global=global_).get(key)
    if value is None:
        print(f"{key} is not set")
    else:
        print(f"{key} = {value}")


@config_app.command(name="list")
def list_config(global_: bool = False) -> None:
    """List configuration settings that have been set explicitly."""
    settings = get_config(use_global=global_).list()

    if not settings:
        print(f"No {_scope(global_)} configuration settings")
        return

    print(f"{_scope(global_).title()} settings:\n")
    for key, value in settings.items():
        print(f"{key} = {value}")
