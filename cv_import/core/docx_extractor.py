from io import BytesIO
from typing import Iterator, List

from docx import Document
from docx.document import Document as DocumentObject
from docx.table import Table
from docx.text.paragraph import Paragraph


def _iter_block_paragraphs(doc: DocumentObject) -> Iterator[Paragraph]:
    """Yield body paragraphs and table cell paragraphs in document order."""
    for block in doc.iter_inner_content():
        if isinstance(block, Paragraph):
            yield block
        elif isinstance(block, Table):
            for row in block.rows:
                seen = set()
                for cell in row.cells:
                    # Merged cells repeat the same underlying <w:tc>
                    if id(cell._tc) in seen:
                        continue
                    seen.add(id(cell._tc))
                    yield from cell.paragraphs


def extract_docx_text(docx_bytes: bytes) -> str:
    """
    Raw text of a DOCX, one paragraph per line.
    Empty paragraphs are kept as blank lines; the parser ignores them.
    """
    doc = Document(BytesIO(docx_bytes))
    out: List[str] = [(p.text or "").strip() for p in _iter_block_paragraphs(doc)]
    return "\n".join(out)
