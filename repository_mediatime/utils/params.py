"""
Conversion des parametres recus de l'hote.

La plateforme hote convertit les valeurs de formulaire et les references de
fichiers par un cast entier permissif : les prefixes numeriques sont conserves
("12abc" -> 12), toute valeur non numerique vaut 0 et le resultat sature aux
bornes d'un entier signe 64 bits.
"""

import re
from typing import Any

_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")

# Bornes d'un entier signe 64 bits (PHP_INT_MIN / PHP_INT_MAX, INTEGER SQLite)
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def _saturate(value: int) -> int:
    return max(INT_MIN, min(INT_MAX, value))


def clean_int(value: Any) -> int:
    """
    Convertit une valeur quelconque en entier, sans jamais lever d'erreur.

    Args :
        value : Valeur brute (str, int, float, bool, None...)

    Retourne :
        L'entier correspondant borne a [INT_MIN, INT_MAX], 0 si la valeur
        n'est pas numerique
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return _saturate(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return _saturate(int(value))
    match = _NUMERIC_PREFIX.match(str(value))
    if not match:
        return 0
    # Entier pur : conversion exacte, sans passer par un flottant
    if match.group(2) is None and match.group(3) is None and not match.group(1).startswith("."):
        return _saturate(int(match.group(0)))
    try:
        return _saturate(int(float(match.group(0))))
    except (OverflowError, ValueError):
        return 0
