"""Pydantic configuration models for floe-assets.

This module provides:
- AssetOptions: Per-call options for AssetFactory.create_asset
- ResolvedAssetOptions: Options with every factory default applied
- resolve_options: Layer per-call options over factory defaults
- AssetFactorySettings: Factory configuration loaded from FLOE_ASSETS_* env vars
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self

from floe_assets.naming import generate_asset_name
from floe_assets.paths import GLOB_MARKER, normalize_root

DEFAULT_OUTPUT = "assetic/*"


def require_wildcard(value: str) -> str:
    if GLOB_MARKER not in value:
        msg = f"Output template must contain the '{GLOB_MARKER}' wildcard, got: {value}"
        raise ValueError(msg)
    return value


class AssetOptions(BaseModel):
    """Per-call options for asset creation.

    Every field is optional; missing fields fall back to the factory
    configuration.

    Attributes:
        output: Output path template; ``*`` is replaced with the asset name.
        name: Asset name for interpolation. Generated from inputs and filters
            when absent.
        debug: Forces debug mode on or off for this asset.
        root: Candidate root directories owning absolute input paths.

    Example:
        >>> options = AssetOptions(output="css/*.css", debug=False)
        >>> options.name is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    output: str | None = Field(default=None, description="Output path template")
    name: str | None = Field(default=None, min_length=1, description="Asset name")
    debug: bool | None = Field(default=None, description="Debug mode override")
    root: str | list[str] | None = Field(
        default=None,
        description="Candidate roots for absolute input paths",
    )


class ResolvedAssetOptions(BaseModel):
    """Asset options with every default applied."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    output: str
    name: str
    debug: bool
    roots: tuple[str, ...] = ()

    @property
    def target_path(self) -> str:
        """Output template with every wildcard replaced by the asset name."""
        return self.output.replace(GLOB_MARKER, self.name)


def resolve_options(
    options: AssetOptions | dict[str, Any] | None,
    *,
    default_output: str,
    default_debug: bool,
    default_roots: Sequence[str],
    inputs: Sequence[str],
    filters: Sequence[str],
) -> ResolvedAssetOptions:
    """Layer per-call options over factory defaults.

    Args:
        options: Per-call options, as a model or a plain dict.
        default_output: Factory default output template.
        default_debug: Factory debug flag.
        default_roots: Roots used when the call names none.
        inputs: Normalized inputs, used to generate a missing name.
        filters: Normalized filter names, used to generate a missing name.

    Returns:
        ResolvedAssetOptions with no unset field.

    Raises:
        pydantic.ValidationError: If a dict contains unknown or invalid keys.
    """
    if options is None:
        opts = AssetOptions()
    elif isinstance(options, AssetOptions):
        opts = options
    else:
        opts = AssetOptions.model_validate(options)

    if opts.root is None:
        roots = tuple(default_roots)
    elif isinstance(opts.root, str):
        roots = (opts.root,)
    else:
        roots = tuple(opts.root)

    return ResolvedAssetOptions(
        output=opts.output if opts.output is not None else default_output,
        name=opts.name if opts.name is not None else generate_asset_name(inputs, filters),
        debug=opts.debug if opts.debug is not None else default_debug,
        roots=roots,
    )


class AssetFactorySettings(BaseSettings):
    """Configuration for AssetFactory.

    Can be loaded from environment variables with the FLOE_ASSETS_ prefix.

    Example:
        >>> # From environment (FLOE_ASSETS_ROOT=/srv/site, FLOE_ASSETS_DEBUG=true)
        >>> settings = AssetFactorySettings()
        >>>
        >>> # Explicit
        >>> settings = AssetFactorySettings(root="/srv/site/", default_output="cache/*")
        >>> settings.root
        '/srv/site'
    """

    model_config = SettingsConfigDict(
        env_prefix="FLOE_ASSETS_",
        env_file=".env",
        extra="ignore",
    )

    root: str = Field(..., min_length=1, description="Root directory for relative inputs")
    debug: bool = Field(
        default=False,
        description="Omit '?'-prefixed filters",
    )
    default_output: str = Field(
        default=DEFAULT_OUTPUT,
        description="Output template used when create_asset gets none",
    )
    auto_write: bool = Field(
        default=False,
        description="Write every created asset to write_dir",
    )
    write_dir: str | None = Field(
        default=None,
        description="Directory created assets are written below when auto_write is on",
    )

    @field_validator("root")
    @classmethod
    def strip_root(cls, v: str) -> str:
        """Strip trailing separators from the root directory."""
        return normalize_root(v)

    @field_validator("default_output")
    @classmethod
    def validate_default_output(cls, v: str) -> str:
        """Validate that the default output carries the wildcard."""
        return require_wildcard(v)

    @model_validator(mode="after")
    def validate_write_dir(self) -> Self:
        """Validate that auto_write has somewhere to write."""
        if self.auto_write and not self.write_dir:
            msg = "write_dir is required when auto_write is enabled"
            raise ValueError(msg)
        return self
