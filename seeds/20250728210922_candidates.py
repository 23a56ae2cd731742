from __future__ import annotations

from models import Candidate
from seeds.helpers import replace_rows, stamped
from utils import generate_uuids


MODEL = Candidate

# (full_name, domicile, university, major, semester)
CANDIDATES = [
    ("Ahmad Fauzi", "Jakarta", "Universitas Indonesia", "Computer Science", "8"),
    ("Riri Aprilia", "Bandung", "Institut Teknologi Bandung", "Informatics", "7"),
    ("Chandra Putra", "Surabaya", "Institut Teknologi Sepuluh Nopember", "Visual Communication Design", "Graduated"),
    ("Diana Sari", "Yogyakarta", "Universitas Gadjah Mada", "Management", "5"),
    ("Farhan Malik", "Tangerang", "Binus University", "Marketing Communication", "8"),
    ("Grace Natalia", "Jakarta", "Universitas Indonesia", "Accounting", "Graduated"),
    ("Hadi Pranata", "Bekasi", "Universitas Gunadarma", "Information Systems", "Graduated"),
    ("Indah Permatasari", "Depok", "Universitas Padjadjaran", "Psychology", "Graduated"),
    ("Jaya Kusuma", "Bogor", "IPB University", "Agribusiness", "4"),
    ("Kartika Dewi", "Tangerang Selatan", "Universitas Terbuka", "Communication", "6"),
]


def _email(full_name: str) -> str:
    return ".".join(full_name.lower().split()) + "@email.com"


def seed(db) -> int:
    uuids = generate_uuids(len(CANDIDATES))
    rows = []
    for idx, (full_name, domicile, university, major, semester) in enumerate(CANDIDATES):
        rows.append(
            {
                "id": idx + 1,
                "uuid": uuids[idx],
                "email": _email(full_name),
                "full_name": full_name,
                "domicile": domicile,
                "university": university,
                "major": major,
                "semester": semester,
                "whatsapp_number": f"628123456789{idx}",
            }
        )
    return replace_rows(db, Candidate, stamped(rows))
