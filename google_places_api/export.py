"""
Result Export

Writes places to JSON or CSV files.
"""

import csv
import json
import os
from typing import Dict, Iterable, List

from .config import CSV_COLUMNS
from .models.place import Place


def place_to_row(place: Place) -> Dict:
    """Flatten a place into the CSV column layout."""
    row = place.model_dump(include=set(CSV_COLUMNS))
    row["latitude"] = place.latitude
    row["longitude"] = place.longitude
    return row


def _ensure_parent(path: str):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def write_json(path: str, places: Iterable[Place], metadata: Dict = None) -> int:
    """
    Write places to a JSON file.

    Args:
        path: Output file path (parent directories are created)
        places: Places to write
        metadata: Optional extra data stored next to the places

    Returns:
        Number of places written
    """
    data: List[Dict] = [p.model_dump(mode="json", exclude_none=True) for p in places]
    _ensure_parent(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump({"metadata": metadata or {}, "places": data}, f, indent=2, ensure_ascii=False)
    return len(data)


def write_csv(path: str, places: Iterable[Place]) -> int:
    """
    Write places to a CSV file with the config.CSV_COLUMNS header.

    List values are stored as JSON strings; missing values as empty cells.

    Returns:
        Number of places written
    """
    _ensure_parent(path)
    count = 0
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)
        for place in places:
            row = place_to_row(place)
            values = []
            for col in CSV_COLUMNS:
                value = row.get(col)
                if isinstance(value, (dict, list)):
                    value = json.dumps(value, ensure_ascii=False)
                elif value is None:
                    value = ''
                values.append(value)
            writer.writerow(values)
            count += 1
    return count
