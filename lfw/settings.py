"""Settings resolution: environment over TOML profile over built-in defaults."""

import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

import tomlkit
import typer
from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_PATH = Path.home() / ".config" / "lfw" / "config.toml"


class LfwSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LFW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # GitHub — CI exports the workflow token as plain GITHUB_TOKEN
    github_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("LFW_GITHUB_TOKEN", "GITHUB_TOKEN"),
    )
    github_owner: str = "stdlib-js"
    github_repo: str = "stdlib"
    graphql_url: str = "https://api.github.com/graphql"
    http_timeout: float = 30

    # EditorConfig checker
    node_bin: str = "node"  # "" runs the checker executable directly
    editorconfig_checker: str = "node_modules/.bin/editorconfig-checker"
    editorconfig_config: str = "etc/editorconfig-checker/.editorconfig_checker.json"
    editorconfig_markdown_config: str = "etc/editorconfig-checker/.editorconfig_checker.markdown.json"
    editorconfig_flags: list[str] = ["--ignore-defaults"]
    packages_root: Path = Path("lib/node_modules")
    build_dir: Path = Path("build")


@lru_cache(maxsize=1)
def _load_toml() -> tomlkit.TOMLDocument:
    """Load ~/.config/lfw/config.toml, returning empty document if missing."""
    if not CONFIG_PATH.exists():
        return tomlkit.document()
    with CONFIG_PATH.open() as fh:
        return tomlkit.load(fh)


def _list_profiles(config: Mapping) -> list[str]:
    # tomlkit Table implements MutableMapping but not dict, so check Mapping
    return [k for k, v in config.items() if isinstance(v, Mapping)]


def _scalar_defaults(config: Mapping) -> dict:
    return {k: v for k, v in config.items() if not isinstance(v, Mapping) and k != "default_profile"}


def get_settings(profile: str | None = None) -> LfwSettings:
    """Resolve the active profile and return a fully populated LfwSettings.

    Profile precedence (highest to lowest):
    1. profile argument (--profile CLI flag)
    2. LFW_PROFILE env var
    3. default_profile key in ~/.config/lfw/config.toml

    Values: environment (and .env) > profile table > top-level file keys > defaults.
    The credential is not required here; commands that talk to GitHub check it.
    """
    toml_config = _load_toml()

    active = profile or os.environ.get("LFW_PROFILE") or toml_config.get("default_profile")

    file_defaults = _scalar_defaults(toml_config)
    if active:
        if active not in toml_config or not isinstance(toml_config[active], Mapping):
            profiles = _list_profiles(toml_config)
            typer.echo(f"Profile '{active}' not found in {CONFIG_PATH}. Available: {profiles or '(none)'}", err=True)
            raise typer.Exit(1)
        file_defaults.update(dict(toml_config[active]))

    # init kwargs outrank env in pydantic-settings, so re-apply whatever env supplied
    from_env = LfwSettings()
    overrides = {name: getattr(from_env, name) for name in from_env.model_fields_set}
    return LfwSettings(**{**file_defaults, **overrides})
