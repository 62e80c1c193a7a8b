"""Export search summaries to CSV and raw payloads to JSON."""

from __future__ import annotations

import csv
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .models import RentalSummary

CSV_FIELDS = [
    "rank",
    "id",
    "kind",
    "address",
    "area_name",
    "price",
    "bedrooms",
    "full_bathrooms",
    "half_bathrooms",
    "no_fee",
    "amenities_match",
    "sponsored_label",
    "url",
]


def export_csv(summaries: list[RentalSummary], path: Path | str) -> None:
    """Write one row per search result, in result order."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for i, s in enumerate(summaries, 1):
            writer.writerow({
                "rank": i,
                "id": s.id,
                "kind": s.kind.value,
                "address": s.address,
                "area_name": s.area_name,
                "price": s.price,
                "bedrooms": s.bedrooms,
                "full_bathrooms": s.full_bathrooms,
                "half_bathrooms": s.half_bathrooms,
                "no_fee": s.no_fee,
                "amenities_match": "" if s.amenities_match is None else s.amenities_match,
                "sponsored_label": s.sponsored_label or "",
                "url": s.url,
            })


def export_json(payload: Any, path: Path | str) -> None:
    """Write a decoded API payload as-is, stamped with the fetch time."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "fetched_at": datetime.now(timezone.utc).isoformat(),
        "data": payload,
    }

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, default=str)
