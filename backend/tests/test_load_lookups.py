import importlib.util
from pathlib import Path

from app.models.lookup import Brand, Category

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "load_lookups.py"


def load_script():
    spec = importlib.util.spec_from_file_location("load_lookups", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_upsert_lookups_inserts_and_renames(db):
    script = load_script()

    counts = script.upsert_lookups(db, {
        "brands": [{"id": 5, "name": "Acme"}, {"id": "9", "name": "Globex"}],
        "categories": [{"id": 100, "name": "Shoes"}],
    })
    assert counts == (2, 1)

    script.upsert_lookups(db, {"brands": [{"id": 5, "name": "Acme Corp"}]})

    assert db.get(Brand, 5).brand_name == "Acme Corp"
    assert db.get(Brand, 9).brand_name == "Globex"
    assert db.get(Category, 100).category_name == "Shoes"
