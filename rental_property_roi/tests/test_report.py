from rental_property_roi.core.model import InputSet, compute
from rental_property_roi.core.projections import schedule_frame
from rental_property_roi.core.report import build_pdf


def test_build_pdf_returns_pdf_bytes():
    inputs = InputSet()
    res = compute(inputs)
    pdf = build_pdf(inputs, res, schedule_frame(res.cash_flow_schedule, years=10))
    assert pdf.startswith(b"%PDF")


def test_build_pdf_without_projection():
    inputs = InputSet()
    res = compute(inputs)
    assert build_pdf(inputs, res, schedule_frame(())).startswith(b"%PDF")
