"""Convert a downloaded document to markdown with the docling CLI."""

import subprocess
import tempfile
from pathlib import Path


def _convert_with_docling(data: bytes, suffix: str, timeout_secs: float) -> str:
    """Run docling on ``data`` and return the markdown it produces.

    Args:
        data: Raw document bytes (HTML, PDF, DOCX, ...)
        suffix: Input file suffix; docling picks its input format from it
        timeout_secs: Timeout for the docling process

    Raises:
        RuntimeError: If docling fails, times out, or writes no output
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_root = Path(temp_dir)
        input_path = temp_root / f"page{suffix}"
        input_path.write_bytes(data)
        output_dir = temp_root / "out"
        output_dir.mkdir()

        cmd = [
            "docling",
            str(input_path),
            "--to",
            "md",
            "--output",
            str(output_dir),
            "--no-ocr",
            "--image-export-mode",
            "placeholder",
        ]

        try:
            process = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout_secs, check=False)
        except subprocess.TimeoutExpired as exc:
            raise RuntimeError(f"Docling timed out after {timeout_secs}s") from exc
        except OSError as exc:
            raise RuntimeError(f"Docling error: {exc}") from exc

        if process.returncode != 0:
            detail = (process.stderr or process.stdout or "").strip().splitlines()
            tail = detail[-1] if detail else ""
            raise RuntimeError(f"Docling failed with exit code {process.returncode}: {tail}")

        # Docling writes <input_stem>.md to the output directory
        expected_output = output_dir / f"{input_path.stem}.md"
        if not expected_output.exists():
            raise RuntimeError(f"Docling did not create expected output: {expected_output}")

        return expected_output.read_text(encoding="utf-8")
