import io
from datetime import datetime, timezone

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from smartdocs.documents.models import DocumentRecord


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Invoice #102 due 2024-05-01")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def twelve_page_pdf_bytes() -> bytes:
    """Generate a PDF whose pages read "Page marker 1" .. "Page marker 12"."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for number in range(1, 13):
        c.drawString(72, 720, f"Page marker {number}")
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def blank_png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (32, 32), "white").save(buf, format="PNG")
    return buf.getvalue()


def _make_document(
    doc_id: str,
    title: str = "Untitled",
    category: str = "Other",
    summary: str = "",
    tags: tuple[str, ...] = (),
    ocr_text: str | None = None,
    important_date: str | None = None,
    date_label: str | None = None,
) -> DocumentRecord:
    return DocumentRecord(
        id=doc_id,
        title=title,
        category=category,
        summary=summary,
        tags=tags,
        created_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
        important_date=important_date,
        date_label=date_label,
        ocr_text=ocr_text,
    )


@pytest.fixture()
def sample_library() -> list[DocumentRecord]:
    """Five documents; only the phone bill mentions account 0958."""
    return [
        _make_document(
            "passport",
            title="Republic Passport",
            category="Identity",
            summary="Passport of Jane Doe",
            tags=("identity", "id"),
            ocr_text="PASSPORT Surname DOE Given names JANE Date of expiry 2030-02-01",
            important_date="2030-02-01",
            date_label="Expiry Date",
        ),
        _make_document(
            "phone-bill",
            title="Mobile Phone Bill",
            category="Receipt",
            summary="Monthly phone bill",
            tags=("receipt", "finance"),
            ocr_text="Account number 5550958 amount due 45.20",
        ),
        _make_document(
            "prescription",
            title="Clinic Prescription",
            category="Medical",
            summary="Prescription from the clinic",
            tags=("medical", "health"),
            ocr_text="Patient Jane Doe take one tablet daily",
        ),
        _make_document(
            "diploma",
            title="University Diploma",
            category="Education",
            summary="Bachelor degree diploma",
            tags=("education", "certificate"),
            ocr_text="This certifies that Jane Doe has been awarded",
        ),
        _make_document(
            "memo",
            title="Shopping Memo",
            category="Notes",
            summary="Weekly list",
            tags=("notes",),
            ocr_text="milk eggs bread",
        ),
    ]
