"""Resume file to plain text: pymupdf for PDFs, direct read for text files."""

from pathlib import Path

_TEXT_SUFFIXES = {".txt", ".md", ".text"}


def extract_text(path: str | Path) -> str:
    """Return the plain text of a resume file.

    Args:
        path: Path to a PDF or plain-text resume.

    Returns:
        The file's text; PDF pages are joined with newlines.

    Raises:
        FileNotFoundError: If the file does not exist.
        ImportError: If a PDF is given and pymupdf is not installed.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Resume file not found: {path}"
        raise FileNotFoundError(msg)

    if path.suffix.lower() in _TEXT_SUFFIXES:
        return path.read_text(encoding="utf-8", errors="replace")

    return extract_text_from_pdf(path)


def extract_text_from_pdf(path: Path) -> str:
    try:
        import pymupdf
    except ImportError:
        msg = (
            "pymupdf is required for PDF resumes. "
            "Install with: pip install 'jobpilot[profile]'"
        )
        raise ImportError(msg) from None

    doc = pymupdf.open(str(path))
    try:
        pages = [page.get_text() for page in doc]
    finally:
        doc.close()

    return "\n".join(pages)
