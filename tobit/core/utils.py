"""
Core Utilities Module.

Thin transport helpers: resolve a manuscript source against a base location
and read it as text from disk or over HTTP.
"""

from pathlib import Path
from typing import Union
from urllib.parse import urljoin

import requests

from tobit.core.constants import DEFAULT_ENCODING, DEFAULT_TIMEOUT
from tobit.core.errors import SourceFetchError


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def resolve_source(source: str, base: str = "") -> str:
    """
    Resolve a source name against a base directory or URL.

    Args:
        source: File name, path, or URL of the source
        base: Directory or URL prefix the source is relative to

    Returns:
        str: Absolute URL or filesystem path
    """
    if is_url(source) or not base:
        return source
    if is_url(base):
        return urljoin(base if base.endswith("/") else base + "/", source)
    return str(Path(base) / source)


def get_file_contents(file_path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read the contents of a local file.

    Raises:
        SourceFetchError: If the file cannot be read or decoded
    """
    try:
        with open(file_path, "r", encoding=encoding) as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceFetchError(str(file_path), str(e)) from e


def fetch_url(url: str, timeout: int = DEFAULT_TIMEOUT, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Download a text resource.

    Raises:
        SourceFetchError: On connection errors, a non-2xx response, or bytes
            that do not decode
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceFetchError(url, str(e)) from e
    # Servers often omit the charset for XML/CSV, so decode explicitly
    try:
        return response.content.decode(encoding)
    except UnicodeDecodeError as e:
        raise SourceFetchError(url, str(e)) from e


def read_source(source: str, base: str = "") -> str:
    """Read a manuscript source, local or remote, as text."""
    location = resolve_source(source, base)
    if is_url(location):
        return fetch_url(location)
    return get_file_contents(location)
