"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "mold.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for mold.
# Every key is optional; command line flags take precedence over these values.

# Keep nested objects inline and type every string as a plain string.
flat: false

# Indentation unit: a number of spaces or a literal string such as "\\t".
indent: 2

typescript:
  # Prefix every interface with `export`.
  export_interfaces: false
  # Mark every interface field as `readonly`.
  readonly_fields: false

zod:
  # Call `.strict()` on every object schema.
  strict_objects: false

prisma:
  # Render nested objects as related models instead of Json columns.
  generate_relations: true
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
