#!/usr/bin/env python3
"""Chain preset validation tool - checks every preset file in a directory."""

import argparse
import sys
import xml.etree.ElementTree as ET
from pathlib import Path

from fxchain.config import PRESET_FILE_ENCODING, PRESET_FILE_EXTENSION
from fxchain.presets import EffectChainPreset
from fxchain.presets.xml_utils import parse_xml_string
from fxchain.presets.validation import validate_chain_element
from fxchain.utils.app_paths import get_chain_presets_dir
from fxchain.utils.logger import LogLevel, logger, set_log_level


def validate_file(path: Path) -> tuple[list[str], list[str]]:
    """Validate one preset file. Returns (errors, warnings)."""
    try:
        root = parse_xml_string(path.read_text(encoding=PRESET_FILE_ENCODING))
    except (OSError, UnicodeDecodeError) as e:
        return [f"Unreadable: {e}"], []
    except ET.ParseError as e:
        return [f"Invalid XML: {e}"], []

    is_valid, messages = validate_chain_element(root)
    if not is_valid:
        return messages, []

    # Same path the app takes; with --verbose the fallbacks it picks are logged
    preset = EffectChainPreset.from_xml(root)
    logger.debug(f"{path.name}: {len(preset.effect_presets)} effect slot(s)", component="XML")
    return [], messages


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate chain preset files")
    parser.add_argument("presets_dir", nargs="?", type=Path,
                        help="Directory to check (default: the app presets dir)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Print debug logging, including parser fallbacks")
    parser.add_argument("--log", type=Path, help="Also write the full log to this file")
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(LogLevel.DEBUG)
    if args.log:
        logger.enable_file_logging(str(args.log))

    presets_dir = args.presets_dir or get_chain_presets_dir()
    files = sorted(presets_dir.glob(f"*{PRESET_FILE_EXTENSION}"))
    print(f"Validating {len(files)} chain preset(s) in {presets_dir}")

    total_errors = 0
    try:
        for path in files:
            errors, warnings = validate_file(path)
            if errors:
                print(f"  ❌ {path.name}")
                for error in errors:
                    print(f"      {error}")
                    logger.error(error, component="XML", details=path.name)
                total_errors += len(errors)
            else:
                print(f"  ✅ {path.name}")
            for warning in warnings:
                print(f"      ⚠ {warning}")
    finally:
        logger.disable_file_logging()

    if total_errors:
        print(f"\nTotal errors: {total_errors}")
        sys.exit(1)
    else:
        print("\nAll chain presets valid!")
        sys.exit(0)


if __name__ == "__main__":
    main()
