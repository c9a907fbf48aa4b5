from __future__ import annotations

import json

from adapters.json_exporter import export_roll_report_json
from core.domain.models import RollReport


def test_export_creates_parents_and_writes_stable_json(tmp_path):
    report = RollReport(sides=6, rolls=[2, 5, 1], seed=3)
    out = tmp_path / "nested" / "session.json"

    written = export_roll_report_json(report=report, output_path=out)

    assert written == out
    text = out.read_text(encoding="utf-8")
    assert text.endswith("\n")
    payload = json.loads(text)
    assert payload["sides"] == 6
    assert payload["rolls"] == [2, 5, 1]
    assert payload["seed"] == 3
    assert "generated_at" in payload
