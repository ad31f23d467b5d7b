"""Build output: the page manifest and the bundler config, written atomically."""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path

from .orchestrator import BuildResult

logger = logging.getLogger(__name__)

PAGES_MANIFEST = "pages.json"
WEBPACK_CONFIG = "webpack.config.json"


def write_json_atomic(path: Path, payload: object) -> None:
    """
    Write ``payload`` as JSON via a temporary file in the same directory.

    Raises:
        OSError: If the file cannot be written
    """
    content = json.dumps(payload, indent=2, ensure_ascii=False)
    temp_file = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            _ = temp_file.write(content)
            temp_file.flush()
            temp_path = Path(temp_file.name)

        _ = temp_path.replace(path)

    except Exception as e:
        if temp_file and Path(temp_file.name).exists():
            Path(temp_file.name).unlink(missing_ok=True)
        raise OSError(f"Failed to write {path}: {e}") from e


def write_build_output(result: BuildResult, output_dir: Path) -> Path:
    """Write the page manifest and bundler config; returns the manifest path."""
    output_dir.mkdir(parents=True, exist_ok=True)

    manifest_path = output_dir / PAGES_MANIFEST
    write_json_atomic(manifest_path, [page.to_dict() for page in result.pages])
    write_json_atomic(output_dir / WEBPACK_CONFIG, result.webpack_config)

    logger.info(f"Wrote {len(result.pages)} page(s) to {manifest_path}")
    return manifest_path
