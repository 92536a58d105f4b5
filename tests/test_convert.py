"""End-to-end conversions over PDFs generated with PyMuPDF."""

import io

import openpyxl
import pytest
from docx import Document

from spearmint.cli import main
from spearmint.convert import convert, convert_to_excel, convert_to_word, output_name
from spearmint.errors import RenderFailure
from spearmint.extraction.fragments import extract_fragments
from spearmint.extraction.renderer import PdfRenderer


def test_renderer_reports_top_origin_positions(make_pdf):
    data = make_pdf([[("Hello World", 72, 100)]])
    with PdfRenderer(data) as renderer:
        assert renderer.page_count == 1
        frags = extract_fragments(renderer.get_page(0))

    assert [f.text for f in frags] == ["Hello World"]
    assert frags[0].x == 72
    assert frags[0].y == 100


def test_blank_page_yields_no_fragments(make_pdf):
    with PdfRenderer(make_pdf([[]])) as renderer:
        assert extract_fragments(renderer.get_page(0)) == []


def test_word_conversion(make_pdf):
    data = make_pdf([
        [("Quarterly summary", 72, 80), ("Revenue grew in every region this quarter.", 72, 120)],
        [],
        [("Appendix", 72, 80)],
    ])
    result = convert_to_word(data, "summary.pdf")

    assert result.file_name == "summary.docx"
    assert result.page_count == 3
    doc = Document(io.BytesIO(result.data))
    texts = [p.text for p in doc.paragraphs]
    assert texts[0] == "summary"
    assert [p.text for p in doc.paragraphs if p.style.name == "Heading 2"] == \
        ["Page 1", "Page 2", "Page 3"]
    assert "Quarterly summary" in texts
    assert "Revenue grew in every region this quarter." in texts
    assert texts.index("Page 2") + 2 == texts.index("Page 3")


def test_excel_conversion_skips_blank_pages(make_pdf):
    data = make_pdf([
        [("Name", 72, 80), ("Age", 300, 80), ("Alice", 72, 100), ("30", 300, 100)],
        [],
        [("Total", 72, 80)],
    ])
    result = convert_to_excel(data, "people.pdf")

    assert result.file_name == "people-tables.xlsx"
    wb = openpyxl.load_workbook(io.BytesIO(result.data))
    assert wb.sheetnames == ["Page 1", "Page 3"]
    rows = list(wb["Page 1"].iter_rows(values_only=True))
    assert len(rows) == 2
    assert "Name" in " ".join(c for c in rows[0] if c)
    assert "Alice" in " ".join(c for c in rows[1] if c)


def test_single_page_excel_uses_default_sheet(make_pdf):
    result = convert(make_pdf([[("Only", 72, 80)]]), "one.pdf", mode="excel")
    wb = openpyxl.load_workbook(io.BytesIO(result.data))
    assert wb.sheetnames == ["Sheet1"]


def test_progress_reported_per_page(make_pdf):
    calls = []
    convert(make_pdf([[("a", 72, 80)], [("b", 72, 80)]]), "x.pdf",
            progress=lambda done, total: calls.append((done, total)))
    assert calls == [(1, 2), (2, 2)]


def test_cancel_from_progress_abandons_conversion(make_pdf):
    class Cancelled(Exception):
        pass

    def cancel(done, total):
        raise Cancelled()

    with pytest.raises(Cancelled):
        convert(make_pdf([[("a", 72, 80)], [("b", 72, 80)]]), "x.pdf", mode="excel",
                progress=cancel)


def test_garbage_input_is_render_failure():
    with pytest.raises(RenderFailure):
        convert(b"definitely not a pdf", "broken.pdf")


def test_output_names():
    assert output_name("Report.PDF", "word") == "Report.docx"
    assert output_name("Report.pdf", "excel") == "Report-tables.xlsx"
    with pytest.raises(ValueError):
        output_name("Report.pdf", "pptx")


def test_cli_writes_next_to_input(make_pdf, tmp_path, capsys):
    pdf = tmp_path / "invoice.pdf"
    pdf.write_bytes(make_pdf([[("Invoice", 72, 80)]]))

    main(["excel", str(pdf)])

    out = tmp_path / "invoice-tables.xlsx"
    assert out.exists()
    assert "Wrote" in capsys.readouterr().out


def test_cli_reports_failure(tmp_path):
    pdf = tmp_path / "broken.pdf"
    pdf.write_bytes(b"%PDF-garbage")
    with pytest.raises(SystemExit) as err:
        main(["word", str(pdf)])
    assert "Conversion failed" in str(err.value.code)


def test_separate_runs_stay_separate_fragments(make_pdf):
    data = make_pdf([[("a", 72, 120), ("b", 80, 120), ("c", 88, 120), ("d", 96, 120)]])
    with PdfRenderer(data) as renderer:
        frags = extract_fragments(renderer.get_page(0))
    assert [(f.text, f.x, f.y) for f in frags] == \
        [("a", 72, 120), ("b", 80, 120), ("c", 88, 120), ("d", 96, 120)]

    doc = Document(io.BytesIO(convert_to_word(data, "runs.pdf").data))
    line = next(p for p in doc.paragraphs if p.text == "a b c d")
    assert not line.runs[0].bold


def test_formula_like_pdf_text_is_written_as_text(make_pdf):
    result = convert_to_excel(make_pdf([[("=1+1", 72, 80)]]), "calc.pdf")
    cell = openpyxl.load_workbook(io.BytesIO(result.data))["Sheet1"]["A1"]
    assert (cell.value, cell.data_type) == ("=1+1", "s")


def test_cli_reports_unreadable_input(tmp_path):
    with pytest.raises(SystemExit) as err:
        main(["word", str(tmp_path / "missing.pdf")])
    assert "missing.pdf: cannot read: " in str(err.value.code)
