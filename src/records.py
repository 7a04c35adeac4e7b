"""
Pokemon records and CSV ingestion.

Rows follow the column order
id,name,type1,type2,total,hp,attack,defense,sp_atk,sp_def,speed,generation,legendary
Records order and compare by name, which is the key the trees index on.
"""

import csv
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

logger = logging.getLogger(__name__)

RECORD_FIELDS = (
    "id", "name", "type1", "type2", "total", "hp", "attack", "defense",
    "special_attack", "special_defense", "speed", "generation", "is_legendary",
)


class RecordError(ValueError):
    pass


class Pokemon:
    def __init__(self, id: int, name: str, type1: str, type2: str, total: int,
                 hp: int, attack: int, defense: int, special_attack: int,
                 special_defense: int, speed: int, generation: int,
                 is_legendary: bool) -> None:
        self.id = id
        self.name = name
        self.type1 = type1
        self.type2 = type2
        self.total = total
        self.hp = hp
        self.attack = attack
        self.defense = defense
        self.special_attack = special_attack
        self.special_defense = special_defense
        self.speed = speed
        self.generation = generation
        self.is_legendary = is_legendary

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pokemon):
            return NotImplemented
        return self.name < other.name

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Pokemon):
            return NotImplemented
        return self.name > other.name

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Pokemon):
            return NotImplemented
        return self.name <= other.name

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Pokemon):
            return NotImplemented
        return self.name >= other.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pokemon):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Pokemon(id={self.id}, name={self.name!r})"


def _to_int(raw: str, field: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise RecordError(f"field {field!r} is not an integer: {raw!r}") from None


def parse_record(row: Sequence[str]) -> Pokemon:
    if len(row) < len(RECORD_FIELDS):
        raise RecordError(f"expected {len(RECORD_FIELDS)} fields, got {len(row)}")

    type2 = row[3].strip()
    return Pokemon(
        id=_to_int(row[0], "id"),
        name=row[1].strip(),
        type1=row[2].strip(),
        type2="" if type2 == "None" else type2,
        total=_to_int(row[4], "total"),
        hp=_to_int(row[5], "hp"),
        attack=_to_int(row[6], "attack"),
        defense=_to_int(row[7], "defense"),
        special_attack=_to_int(row[8], "special_attack"),
        special_defense=_to_int(row[9], "special_defense"),
        speed=_to_int(row[10], "speed"),
        generation=_to_int(row[11], "generation"),
        is_legendary=row[12].strip().lower() == "true",
    )


def load_records(path: Union[str, Path], limit: Optional[int] = None,
                 skip_header: bool = True) -> List[Pokemon]:
    """Read up to ``limit`` records from a CSV file.

    Blank lines and rows with too few columns are skipped. Rows with enough
    columns but malformed numbers raise RecordError.
    """
    records: List[Pokemon] = []
    with open(path, newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        if skip_header:
            next(reader, None)
        for line_no, row in enumerate(reader, start=2 if skip_header else 1):
            if limit is not None and len(records) >= limit:
                break
            if not row or all(not cell.strip() for cell in row):
                continue
            if len(row) < len(RECORD_FIELDS):
                logger.debug("skipping short row %d in %s", line_no, path)
                continue
            records.append(parse_record(row))

    logger.debug("loaded %d records from %s", len(records), path)
    return records


def find_by_name(records: Sequence[Pokemon], name: str) -> Optional[Pokemon]:
    target = name.lower()
    for record in records:
        if record.name.lower() == target:
            return record
    return None
