from __future__ import annotations

from models import ApplicationDocument
from seeds.helpers import replace_rows, stamped


MODEL = ApplicationDocument

DOCUMENTS = [
    (1, "cv", "cv_ahmad_fauzi.pdf"),
    (1, "portfolio", "portfolio_ahmad_fauzi.pdf"),
    (2, "cv", "cv_riri_aprilia.pdf"),
    (3, "cv", "cv_ahmad_fauzi_2.pdf"),
    (4, "cv", "cv_chandra_putra.pdf"),
    (4, "portfolio", "portfolio_chandra_putra.pdf"),
    (5, "cv", "cv_diana_sari.pdf"),
    (6, "cv", "cv_farhan_malik.pdf"),
    (7, "cv", "cv_indah_permatasari.pdf"),
    (8, "cv", "cv_grace_natalia.pdf"),
    (9, "cv", "cv_hadi_pranata.pdf"),
    (10, "cv", "cv_riri_aprilia_2.pdf"),
]


def seed(db) -> int:
    rows = [
        {
            "application_id": application_id,
            "document_type": document_type,
            "url": f"https://path/to/{filename}",
            "filename": filename,
        }
        for application_id, document_type, filename in DOCUMENTS
    ]
    return replace_rows(db, ApplicationDocument, stamped(rows))
