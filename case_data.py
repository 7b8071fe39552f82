"""
case_data.py
============
All static world data for the mansion case.

Centralising the layout and the clue tables here means the mansion can be
redrawn (rooms, clues, suspects) without touching the tree, the clue set,
the suspect index or the CLI.

To change the case:
    1. Edit MANSION_LAYOUT; every room name must be unique.
    2. Keep ROOM_CLUES keyed by names that exist in the layout.
    3. Make sure every clue a room can yield has an entry in CLUE_SUSPECTS,
       otherwise it is reported as "no suspect linked".
"""

from __future__ import annotations

from typing import Dict, List


# ---------------------------------------------------------------------------
# Room layout
# ---------------------------------------------------------------------------

MANSION_LAYOUT: Dict = {
    "name": "Hall de Entrada",
    "left": {
        "name": "Sala de Estar",
        "left": {
            "name": "Biblioteca",
            "left": {"name": "Sótão"},
        },
        "right": {"name": "Jardim de Inverno"},
    },
    "right": {
        "name": "Cozinha",
        "left":  {"name": "Despensa"},
        "right": {"name": "Porão"},
    },
}
"""
Nested description of the mansion's binary tree, parsed into a RoomSpec.

Going left is "e" (esquerda) and going right is "d" (direita). Eight rooms;
the Sótão above the Biblioteca is the only fourth-level room.
"""


# ---------------------------------------------------------------------------
# Room -> clue association
# ---------------------------------------------------------------------------

ROOM_CLUES: Dict[str, str] = {
    "Hall de Entrada":   "pegada molhada",
    "Sala de Estar":     "fio de cabelo",
    "Biblioteca":        "bilhete rasgado",
    "Sótão":             "diário escondido",
    "Jardim de Inverno": "luva esquecida",
    "Cozinha":           "cheiro de queimado",
    "Despensa":          "frasco de veneno",
}
"""
Clue found in each room. Rooms missing from this table (the Porão) hold
no clue.
"""


# ---------------------------------------------------------------------------
# Clue -> suspect association
# ---------------------------------------------------------------------------

CLUE_SUSPECTS: Dict[str, str] = {
    "pegada molhada":     "Sr. Avelar",
    "luva esquecida":     "Sr. Avelar",
    "fio de cabelo":      "Sra. Beatriz",
    "diário escondido":   "Sra. Beatriz",
    "lenço bordado":      "Sra. Beatriz",
    "bilhete rasgado":    "Srta. Clara",
    "frasco de veneno":   "Srta. Clara",
    "cheiro de queimado": "Sr. Dourado",
    "relógio parado":     "Sr. Dourado",
}
"""
Suspect each clue points to; loaded into the SuspectIndex once at startup.

"lenço bordado" and "relógio parado" belong to the case file but are not
hidden in any room, so they can never be collected in this layout.
"""

SUSPECTS: List[str] = ["Sr. Avelar", "Sra. Beatriz", "Srta. Clara", "Sr. Dourado"]
"""Suspects in the order they are introduced on the accusation screen."""
