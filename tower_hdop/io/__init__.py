from .towers_file import (
    TowerDocument, TowerFileError,
    parse_tower_document, loads_towers, load_towers, dump_towers, save_towers,
)

__all__ = [
    "TowerDocument", "TowerFileError",
    "parse_tower_document", "loads_towers", "load_towers", "dump_towers", "save_towers",
]
