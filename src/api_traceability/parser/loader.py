"""Load OpenAPI documents from mappings, text, files or URLs."""

import copy
import json
import logging
from pathlib import Path

import requests
import yaml

from api_traceability.errors import MalformedSpecError, SpecFetchError
from api_traceability.parser.base import SpecDocument

logger = logging.getLogger(__name__)


def load_spec(source: dict | str | bytes) -> SpecDocument:
    """Normalize a document given as a mapping or as JSON/YAML text.

    Mappings are deep-copied so later stages never touch the caller's
    object. Text is tried as strict JSON first, then as YAML.
    """
    if isinstance(source, dict):
        return copy.deepcopy(source)

    if isinstance(source, bytes):
        try:
            source = source.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise MalformedSpecError(f"Specification is not UTF-8 text: {e}") from e

    if not isinstance(source, str):
        raise MalformedSpecError(f"Unsupported specification input: {type(source).__name__}")

    try:
        doc = json.loads(source)
    except ValueError:
        try:
            doc = yaml.safe_load(source)
        except yaml.YAMLError as e:
            raise MalformedSpecError(f"Specification is neither valid JSON nor YAML: {e}") from e
        logger.debug("Parsed specification as YAML")

    if not isinstance(doc, dict):
        raise MalformedSpecError("Specification must be a JSON or YAML object")
    return doc


def load_spec_file(file_path: Path) -> SpecDocument:
    """Read and normalize a JSON or YAML document from disk."""
    return load_spec(Path(file_path).read_bytes())


def fetch_spec(url: str, timeout: float = 10.0) -> SpecDocument:
    """Download a document with a single GET and normalize it."""
    logger.info("Fetching specification from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SpecFetchError(f"Could not fetch {url}: {e}") from e
    # Decode as UTF-8 whatever charset the response declares
    return load_spec(response.content)


def load_spec_source(source: str, timeout: float = 10.0) -> SpecDocument:
    """Load from an http(s) URL or a local file path."""
    if source.startswith(("http://", "https://")):
        return fetch_spec(source, timeout=timeout)
    return load_spec_file(Path(source))
