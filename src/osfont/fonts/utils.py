"""
Font Utilities
==============

Utility functions for reading font family names from font files.
"""

import logging
import os
import re

from fontTools.ttLib import TTCollection, TTFont

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = {".ttf", ".otf", ".ttc", ".otc", ".dfont"}
COLLECTION_EXTENSIONS = {".ttc", ".otc"}

# name table IDs: 1 = family, 16 = typographic family
FAMILY_NAME_IDS = (1, 16)


def get_font_families(font_path: str) -> set[str]:
    """
    Extract the family names declared by a font file.

    Args:
        font_path: Path to a font or font collection file

    Returns:
        Set of family names; derived from the file name if the file cannot be parsed
    """
    try:
        return _get_font_families_fonttools(font_path) or _get_font_families_fallback(font_path)
    except Exception as e:
        logger.debug(f"fonttools failed for {font_path}: {e}")
        return _get_font_families_fallback(font_path)


def _get_font_families_fonttools(font_path: str) -> set[str]:
    """Get family names using fonttools."""
    extension = os.path.splitext(font_path)[1].lower()
    if extension in COLLECTION_EXTENSIONS:
        collection = TTCollection(font_path, lazy=True)
        try:
            fonts = list(collection.fonts)
            return set().union(*(_families_from_font(font) for font in fonts))
        finally:
            collection.close()

    font = TTFont(font_path, lazy=True)
    try:
        return _families_from_font(font)
    finally:
        font.close()


def _families_from_font(font: TTFont) -> set[str]:
    if "name" not in font:
        return set()
    name_table = font["name"]
    families = set()
    for name_id in FAMILY_NAME_IDS:
        name = _get_font_name(name_table, name_id)
        if name:
            families.add(name)
    return families


def _get_font_name(name_table, name_id: int) -> str | None:
    """Extract font name from name table."""
    # Prefer English (language ID 1033 for US English)
    for record in name_table.names:
        if record.nameID == name_id and record.langID in (0, 1033):
            return record.toUnicode().strip()

    # Fallback to any available name
    for record in name_table.names:
        if record.nameID == name_id:
            return record.toUnicode().strip()

    return None


def _get_font_families_fallback(font_path: str) -> set[str]:
    """Fallback family name from filename, e.g. ``Cantarell-Regular.otf``."""
    name_without_ext = os.path.splitext(os.path.basename(font_path))[0]
    family = re.split(r"[-_]+", name_without_ext)[0].strip()
    return {family} if family else set()


def is_font_file(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in FONT_EXTENSIONS
