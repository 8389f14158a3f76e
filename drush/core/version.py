"""
Version metadata for Drush
Reads the drush.info file and normalises the release string against a git checkout
"""
import configparser
import subprocess
from pathlib import Path
from typing import Dict, Optional, Union

from .errors import VersionMetadataError

# parse_ini-style files may start without a section header; one is injected before parsing
_SECTION = "info"


def read_info_file(path: Union[str, Path]) -> Dict[str, str]:
    """
    Parse a flat ``key = value`` metadata file

    Args:
        path: Location of the info file

    Returns:
        Mapping of keys to unquoted string values

    Raises:
        VersionMetadataError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise VersionMetadataError(f"Cannot read version metadata file {path}: {exc}") from exc

    # Last duplicate wins and key case is kept, as with PHP ini files
    parser = configparser.ConfigParser(interpolation=None, strict=False, comment_prefixes=(";", "#"))
    parser.optionxform = str
    try:
        parser.read_string(f"[{_SECTION}]\n{text}", source=str(path))
    except configparser.Error as exc:
        raise VersionMetadataError(f"Cannot parse version metadata file {path}: {exc}") from exc

    # Sections are flattened; a key in a later section overrides an earlier one
    info: Dict[str, str] = {}
    for section in parser.sections():
        for key, value in parser.items(section, raw=True):
            info[key] = _unquote(value)
    return info


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def git_describe(path: Union[str, Path]) -> Optional[str]:
    """Return `git describe --tags` for a checkout, or None when unavailable"""
    path = Path(path)
    if not (path / ".git").is_dir():
        return None
    try:
        result = subprocess.run(
            ["git", "describe", "--tags"],
            cwd=str(path),
            capture_output=True,
            text=True,
            timeout=10,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def normalize_version(release: str, base_path: Union[str, Path]) -> str:
    """
    Turn a release string into the version reported to users

    A full ``major.minor.patch`` release is kept as is, anything shorter is a
    development line and gets ``-dev`` appended. Inside a git checkout the
    tag description wins for full releases, and shorter releases get the
    commit suffix of the description instead of ``-dev``.
    """
    release = release.strip()
    is_full_release = len(release.split(".")) == 3
    version = release if is_full_release else f"{release}-dev"

    described = git_describe(base_path)
    if described:
        if is_full_release:
            version = described
        else:
            version = f"{release}-{described.split('-')[-1]}"
    return version
