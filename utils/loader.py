import re
import pandas as pd
from pathlib import Path
from typing import IO, Dict, List, Optional, Union
from pydantic import ValidationError
from exceptions.custom_errors import FileContentError, FileReadingError
from schemas.schedule.records import Crew, Equipment, Stage

TableSource = Union[str, Path, bytes, IO]


def read_table(path_or_buffer: TableSource, label: str) -> pd.DataFrame:
    """
    Read a CSV or Excel table into a DataFrame with blanks turned into None.

    Paths ending in .xlsx/.xls are read as Excel; everything else (including
    file-like objects) is read as CSV.
    """
    is_excel = isinstance(path_or_buffer, (str, Path)) and str(
        path_or_buffer
    ).lower().endswith((".xlsx", ".xls"))
    try:
        df = pd.read_excel(path_or_buffer) if is_excel else pd.read_csv(path_or_buffer)
    except Exception as e:
        raise FileReadingError(f"Error loading {label}: {e}")

    if df.empty:
        raise FileContentError(f"No rows found in {label}.")

    df = df.astype(object)
    return df.where(pd.notna(df), None)


def find_column(
    df: pd.DataFrame, *candidates: str, required: bool = True
) -> Optional[str]:
    """Find a column by exact (case-insensitive) name first, then by substring, in candidate order."""
    col_map = {str(col).lower().strip(): col for col in df.columns}
    for c in candidates:
        if c in col_map:
            return col_map[c]
    for c in candidates:
        for lower, original in col_map.items():
            if c in lower:
                return original
    if required:
        raise FileContentError(f"No column found matching {candidates}")
    return None


def split_ids(value) -> List[str]:
    """Split an 'eq-1; eq-4' style cell into ids."""
    if value is None:
        return []
    return [part.strip() for part in re.split(r"[;,]", str(value)) if part.strip()]


def _build_records(df: pd.DataFrame, columns: Dict[str, Optional[str]], model, label):
    records = []
    for i, row in enumerate(df.to_dict(orient="records"), start=1):
        data = {
            field: row[col]
            for field, col in columns.items()
            if col is not None and row[col] is not None
        }
        try:
            records.append(model(**data))
        except ValidationError as e:
            raise FileContentError(f"Invalid {label} row {i}: {e}")
    return records


def load_stages(path_or_buffer: TableSource) -> List[Stage]:
    """
    Load stage records from a schedule table.

    Expected columns (matched by keyword): stage id, well, stage number,
    status, scheduled start/end, crew and equipment. Actual times and
    telemetry (pump rate, pressure, proppant) are optional. Equipment ids may
    be separated by ';' or ','.
    """
    df = read_table(path_or_buffer, "stages")

    try:
        columns = {
            "id": find_column(df, "stage id", "stageid", "id"),
            "wellId": find_column(df, "well id", "wellid", "well"),
            "stageNumber": find_column(df, "stage number", "stagenumber", "number"),
            "status": find_column(df, "status"),
            "scheduledStart": find_column(df, "scheduled start", "scheduledstart", "start"),
            "scheduledEnd": find_column(df, "scheduled end", "scheduledend", "end"),
            "actualStart": find_column(df, "actual start", "actualstart", required=False),
            "actualEnd": find_column(df, "actual end", "actualend", required=False),
            "crewId": find_column(df, "crew id", "crewid", "crew"),
            "equipmentIds": find_column(df, "equipment ids", "equipmentids", "equipment", required=False),
            "pumpRate": find_column(df, "pump rate", "pumprate", required=False),
            "pressure": find_column(df, "pressure", required=False),
            "proppant": find_column(df, "proppant", required=False),
        }
    except FileContentError as e:
        raise FileContentError(f"Missing expected column in stages: {e}")

    if columns["equipmentIds"] is not None:
        df[columns["equipmentIds"]] = df[columns["equipmentIds"]].map(split_ids)
    for col in (columns["id"], columns["wellId"], columns["crewId"]):
        df[col] = df[col].map(lambda v: None if v is None else str(v).strip())

    return _build_records(df, columns, Stage, "stage")


def load_crews(path_or_buffer: TableSource) -> List[Crew]:
    """Load the crew catalog (id, name, status, shifts remaining; lead and members optional)."""
    df = read_table(path_or_buffer, "crews")

    try:
        columns = {
            "id": find_column(df, "crew id", "crewid", "id"),
            "name": find_column(df, "name"),
            "status": find_column(df, "status"),
            "shiftsRemaining": find_column(df, "shifts remaining", "shiftsremaining", "shifts"),
            "lead": find_column(df, "lead", required=False),
            "members": find_column(df, "members", required=False),
            "currentWellId": find_column(df, "current well", "currentwellid", required=False),
        }
    except FileContentError as e:
        raise FileContentError(f"Missing expected column in crews: {e}")

    if df[columns["id"]].duplicated().any():
        raise FileContentError("Duplicate crew ids found.")
    return _build_records(df, columns, Crew, "crew")


def load_equipment(path_or_buffer: TableSource) -> List[Equipment]:
    """Load the equipment catalog (id, name, next maintenance; type, status, last maintenance optional)."""
    df = read_table(path_or_buffer, "equipment")

    try:
        columns = {
            "id": find_column(df, "equipment id", "equipmentid", "id"),
            "name": find_column(df, "name"),
            "nextMaintenance": find_column(df, "next maintenance", "nextmaintenance"),
            "type": find_column(df, "type", required=False),
            "status": find_column(df, "status", required=False),
            "lastMaintenance": find_column(df, "last maintenance", "lastmaintenance", required=False),
            "utilization": find_column(df, "utilization", required=False),
        }
    except FileContentError as e:
        raise FileContentError(f"Missing expected column in equipment: {e}")

    if df[columns["id"]].duplicated().any():
        raise FileContentError("Duplicate equipment ids found.")
    return _build_records(df, columns, Equipment, "equipment")
