from pathlib import Path

from pypdf import PdfReader

from opsmind.core.models.document import SourceText


class PDFLoader:

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".pdf"

    def load(self, file_path: Path) -> SourceText:
        reader = PdfReader(file_path)
        pages = tuple((page.extract_text() or "").strip() for page in reader.pages)
        return SourceText(text="\n\n".join(p for p in pages if p), pages=pages)
