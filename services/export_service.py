import io
import re

import pandas as pd
from flask import send_file
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from services.timestamps import local_date_string

CSV_COLUMNS = ['Name', 'Email', 'Contact', 'Course', 'Date of Birth', 'Submitted At']


def applications_to_csv(applications):
    rows = [{
        'Name': a.get('name', ''),
        'Email': a.get('email', ''),
        'Contact': a.get('contactNumber', ''),
        'Course': a.get('selectedCourse', ''),
        'Date of Birth': a.get('dateOfBirth', ''),
        'Submitted At': local_date_string(a.get('submittedAt', '')),
    } for a in applications]
    df = pd.DataFrame(rows, columns=CSV_COLUMNS, dtype=str)
    csv_io = io.StringIO()
    df.to_csv(csv_io, index=False, lineterminator='\n')
    return csv_io.getvalue()


def export_applications_csv(applications, filename):
    csv_text = applications_to_csv(applications)
    return send_file(io.BytesIO(csv_text.encode()), mimetype='text/csv', as_attachment=True, download_name=filename)


def receipt_filename(name):
    slug = re.sub(r'\s+', '-', name)
    return f"admission-form-{slug}.pdf"


RECEIPT_LEFT = 60
RECEIPT_INDENT = 75
RECEIPT_TOP = 790
RECEIPT_BOTTOM = 60
LINE_HEIGHT = 16


def wrap_text(text, font, size, width):
    """Split ``text`` into lines no wider than ``width`` points.

    Words are split at spaces first; a single word that is still too wide
    (a long e-mail address or filename) is broken between characters.
    """
    lines = []
    for line in simpleSplit(text, font, size, width) or ['']:
        while stringWidth(line, font, size) > width and len(line) > 1:
            cut = len(line) - 1
            while cut > 1 and stringWidth(line[:cut], font, size) > width:
                cut -= 1
            lines.append(line[:cut])
            line = line[cut:]
        lines.append(line)
    return lines


def _draw_wrapped(c, y, x, text, font, size, width):
    """Draw ``text`` wrapped to ``width``; starts a new page at the bottom margin."""
    c.setFont(font, size)
    for line in wrap_text(text, font, size, width):
        if y < RECEIPT_BOTTOM:
            c.showPage()
            c.setFont(font, size)
            y = RECEIPT_TOP
        c.drawString(x, y, line)
        y -= max(LINE_HEIGHT, size + 4)
    return y


def render_receipt_pdf(record, institution_name):
    pdf_io = io.BytesIO()
    c = canvas.Canvas(pdf_io, pagesize=A4)
    c.setTitle(f"Admission Application - {record['name']}")
    page_width = A4[0]
    width = page_width - RECEIPT_LEFT * 2
    indented = page_width - RECEIPT_INDENT - RECEIPT_LEFT

    y = _draw_wrapped(c, RECEIPT_TOP, RECEIPT_LEFT, institution_name, 'Helvetica-Bold', 20, width)
    y = _draw_wrapped(c, y, RECEIPT_LEFT, 'Admission Application Form', 'Helvetica', 16, width)
    y -= 10
    y = _draw_wrapped(c, y, RECEIPT_LEFT, f"Application ID: APP{record['id']}", 'Helvetica', 12, width)
    y = _draw_wrapped(c, y, RECEIPT_LEFT, f"Submitted on: {local_date_string(record['submittedAt'])}", 'Helvetica', 12, width)
    y -= 14
    y = _draw_wrapped(c, y, RECEIPT_LEFT, 'Student Information:', 'Helvetica-Bold', 14, width)

    lines = [
        f"Name: {record['name']}",
        f"Date of Birth: {record['dateOfBirth']}",
        f"Email: {record['email']}",
        f"Contact Number: {record['contactNumber']}",
        f"Selected Course: {record['selectedCourse']}",
    ]
    if record.get('photo'):
        lines.append(f"Photo: {record['photo']}")
    if record.get('documents'):
        lines.append(f"Documents: {record['documents']}")
    for line in lines:
        y = _draw_wrapped(c, y, RECEIPT_INDENT, line, 'Helvetica', 12, indented)

    y -= 30
    y = _draw_wrapped(c, y, RECEIPT_LEFT, 'Thank you for your application!', 'Helvetica', 12, width)
    _draw_wrapped(c, y, RECEIPT_LEFT, 'We will contact you soon with further details.', 'Helvetica', 12, width)
    c.save()
    return pdf_io.getvalue()


def send_receipt(pdf_bytes, filename):
    return send_file(io.BytesIO(pdf_bytes), mimetype='application/pdf', as_attachment=True, download_name=filename)
