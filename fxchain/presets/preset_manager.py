"""
Chain preset manager - handles save/load/import/export of preset files.

Each file is a UTF-8 XML document whose root is a <Chain> element.
"""

import os
import shutil
import tempfile
import xml.etree.ElementTree as ET
from datetime import datetime
from pathlib import Path
from typing import Optional

from fxchain.config import PRESET_FILE_EXTENSION, PRESET_FILE_ENCODING, PRESET_INDENT
from fxchain.utils.app_paths import get_chain_presets_dir
from fxchain.utils.logger import logger
from .chain_preset import EffectChainPreset
from .xml_utils import parse_xml_string, to_pretty_string


class PresetError(Exception):
    """Raised when preset file operations fail."""
    pass


def to_xml_string(preset: EffectChainPreset) -> str:
    """Serialize a preset as a complete document."""
    return to_pretty_string(preset.to_xml(), indent=PRESET_INDENT)


def from_xml_string(text: str) -> EffectChainPreset:
    """
    Parse a complete document.

    Raises:
        PresetError: If the text is not well-formed XML. Well-formed
            documents never fail; missing fields take their defaults.
    """
    try:
        root = parse_xml_string(text)
    except ET.ParseError as e:
        raise PresetError(f"Invalid XML in chain preset: {e}")
    return EffectChainPreset.from_xml(root)


class ChainPresetManager:
    """
    Manages chain preset files in one directory.

    Usage:
        manager = ChainPresetManager()

        # Save current chain
        preset = EffectChainPreset.from_chain_slot(chain_slot)
        filepath = manager.save(preset)

        # Load everything; corrupt files are logged and skipped
        for preset in manager.load_all():
            ...
    """

    def __init__(self, presets_dir: Optional[Path] = None):
        self.presets_dir = Path(presets_dir) if presets_dir else get_chain_presets_dir()
        self.presets_dir.mkdir(parents=True, exist_ok=True)

    def write_preset_file(
        self,
        dest_path: Path,
        preset: EffectChainPreset,
        *,
        allow_overwrite: bool = True
    ) -> None:
        """
        Write preset to file atomically.

        The document goes to a temp file in the destination directory and
        is committed with os.replace.

        Raises:
            PresetError: If write fails or file exists when allow_overwrite=False
        """
        dest_path = Path(dest_path)

        if not allow_overwrite and dest_path.exists():
            raise PresetError(f"File already exists: {dest_path}")

        dest_path.parent.mkdir(parents=True, exist_ok=True)

        text = to_xml_string(preset)

        try:
            fd, temp_path = tempfile.mkstemp(
                suffix='.tmp',
                prefix='.chain_',
                dir=dest_path.parent
            )
            try:
                with os.fdopen(fd, 'w', encoding=PRESET_FILE_ENCODING) as f:
                    f.write(text)
                os.replace(temp_path, dest_path)
            except Exception:
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass
                raise
        except OSError as e:
            raise PresetError(f"Failed to write chain preset: {e}")

    def save(self, preset: EffectChainPreset, name: Optional[str] = None,
             overwrite: bool = False) -> Path:
        """
        Save preset into the presets directory.

        Args:
            preset: Preset to save
            name: Optional filename (without extension). Defaults to the
                preset name, or a timestamped name if that is empty too.
            overwrite: If True, replace an existing file. If False, add a
                numeric suffix.

        Returns:
            Path to saved file
        """
        stem = self._sanitize_filename(name or preset.name)
        if not stem:
            stem = f"chain_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

        filepath = self.presets_dir / f"{stem}{PRESET_FILE_EXTENSION}"

        if filepath.exists() and not overwrite:
            counter = 1
            while filepath.exists():
                filepath = self.presets_dir / f"{stem}_{counter}{PRESET_FILE_EXTENSION}"
                counter += 1

        self.write_preset_file(filepath, preset, allow_overwrite=overwrite)
        logger.info(f"Chain preset saved: {filepath}", component="PRESET")
        return filepath

    def load(self, filepath: Path) -> EffectChainPreset:
        """
        Load a preset file.

        Raises:
            PresetError: If the file doesn't exist, can't be read, or isn't
                well-formed XML
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise PresetError(f"Chain preset file not found: {filepath}")

        try:
            text = filepath.read_text(encoding=PRESET_FILE_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise PresetError(f"Failed to read chain preset file: {e}")

        return from_xml_string(text)

    def load_all(self) -> list:
        """
        Load every preset in the directory, newest first.

        A file that fails to load is logged and skipped; it never aborts
        the rest of the batch.
        """
        presets = []
        for filepath in self.list_presets():
            try:
                presets.append(self.load(filepath))
            except PresetError as e:
                logger.warning(f"Skipping chain preset {filepath.name}",
                               component="PRESET", details=str(e))
        return presets

    def list_presets(self) -> list[Path]:
        """
        List all preset files in the presets directory.

        Returns:
            List of preset file paths, sorted by modification time (newest first)
        """
        presets = list(self.presets_dir.glob(f"*{PRESET_FILE_EXTENSION}"))
        presets.sort(key=lambda p: p.stat().st_mtime, reverse=True)
        return presets

    def delete(self, filepath: Path) -> bool:
        """
        Delete a preset file.

        Returns:
            True if deleted, False if file didn't exist
        """
        filepath = Path(filepath)
        if filepath.exists():
            filepath.unlink()
            logger.info(f"Chain preset deleted: {filepath}", component="PRESET")
            return True
        return False

    def export_preset(self, preset: EffectChainPreset, dest_path: Path) -> Path:
        """Write a preset to an arbitrary location, e.g. for sharing."""
        dest_path = Path(dest_path)
        if dest_path.suffix != PRESET_FILE_EXTENSION:
            dest_path = dest_path.with_suffix(PRESET_FILE_EXTENSION)
        self.write_preset_file(dest_path, preset)
        logger.info(f"Chain preset exported: {dest_path}", component="PRESET")
        return dest_path

    def import_preset(self, src_path: Path) -> Path:
        """
        Copy a foreign preset file into the presets directory.

        The file is loaded first, so unreadable documents are rejected
        before anything is copied.

        Returns:
            Path of the imported copy

        Raises:
            PresetError: If the source can't be loaded or copied
        """
        src_path = Path(src_path)
        preset = self.load(src_path)

        stem = (self._sanitize_filename(src_path.stem)
                or self._sanitize_filename(preset.name)
                or "imported_chain")
        dest_path = self.presets_dir / f"{stem}{PRESET_FILE_EXTENSION}"
        counter = 1
        while dest_path.exists():
            dest_path = self.presets_dir / f"{stem}_{counter}{PRESET_FILE_EXTENSION}"
            counter += 1

        try:
            shutil.copyfile(src_path, dest_path)
        except OSError as e:
            raise PresetError(f"Failed to import chain preset: {e}")

        logger.info(f"Chain preset imported: {dest_path}", component="PRESET")
        return dest_path

    def _sanitize_filename(self, name: str) -> str:
        """Remove invalid filename characters."""
        invalid = '<>:"/\\|?*'
        result = name
        for char in invalid:
            result = result.replace(char, "_")
        result = "".join("_" if ord(char) < 0x20 else char for char in result)
        return result.strip()
